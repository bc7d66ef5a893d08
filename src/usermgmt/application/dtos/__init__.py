from usermgmt.application.dtos.user_dtos import (
    AddUpdateUserDTO,
    UpdateActionDTO,
    UpdateRolesDTO,
    UpdateStatusDTO,
    UserDTO,
    UserSummaryDTO,
)

__all__ = [
    "AddUpdateUserDTO",
    "UpdateActionDTO",
    "UpdateRolesDTO",
    "UpdateStatusDTO",
    "UserDTO",
    "UserSummaryDTO",
]
