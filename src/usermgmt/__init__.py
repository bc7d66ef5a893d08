"""User Management - administration of user records.

Users carry a combinable set of roles (stored as a bit-mask), a single
lifecycle status and a single pending administrative action.

Layers:
- domain: User aggregate, value objects, repository interface, exceptions
- application: UserService and its transfer shapes
- infrastructure: in-memory and SQLAlchemy repositories
- presentation: FastAPI application
"""

from usermgmt.application.dtos import (
    AddUpdateUserDTO,
    UpdateActionDTO,
    UpdateRolesDTO,
    UpdateStatusDTO,
    UserDTO,
    UserSummaryDTO,
)
from usermgmt.application.services import UserService
from usermgmt.domain.user import (
    Action,
    InvalidArgumentError,
    Role,
    RoleSet,
    Status,
    User,
    UserNotFoundError,
    UserOperationFailedError,
    UserRepository,
    UserValidationError,
    combine_roles,
    decompose_roles,
)

__all__ = [
    # Domain
    "Action",
    "Role",
    "RoleSet",
    "Status",
    "User",
    "UserRepository",
    "combine_roles",
    "decompose_roles",
    # Errors
    "InvalidArgumentError",
    "UserNotFoundError",
    "UserOperationFailedError",
    "UserValidationError",
    # Application
    "AddUpdateUserDTO",
    "UpdateActionDTO",
    "UpdateRolesDTO",
    "UpdateStatusDTO",
    "UserDTO",
    "UserService",
    "UserSummaryDTO",
]
