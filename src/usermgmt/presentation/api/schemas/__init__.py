from usermgmt.presentation.api.schemas.users import (
    CreateUserRequest,
    UpdateActionRequest,
    UpdateRolesRequest,
    UpdateStatusRequest,
    UpdateUserRequest,
    UserResponse,
    UserSummaryResponse,
)

__all__ = [
    "CreateUserRequest",
    "UpdateActionRequest",
    "UpdateRolesRequest",
    "UpdateStatusRequest",
    "UpdateUserRequest",
    "UserResponse",
    "UserSummaryResponse",
]
