"""User domain.

This domain handles:
- User aggregate (id, name, email, roles, status, pending action)
- Role bit-mask codec and the single-valued status/action enumerations
- Repository interface, implemented in infrastructure

Design notes:
- User ID is an integer assigned by the store on insert
- Roles are a combinable set stored as one bit-mask
- Status and action are plain enumerations, one value at a time
"""

from usermgmt.domain.user.aggregates import User
from usermgmt.domain.user.exceptions import (
    InvalidActionError,
    InvalidArgumentError,
    InvalidEmailError,
    InvalidRoleError,
    InvalidStatusError,
    InvalidUserNameError,
    UserNotFoundError,
    UserOperationFailedError,
    UserPersistenceError,
    UserValidationError,
)
from usermgmt.domain.user.repositories import UserRepository
from usermgmt.domain.user.value_objects import (
    ALL_ROLES_MASK,
    MAX_EMAIL_LENGTH,
    MAX_NAME_LENGTH,
    ROLE_ORDER,
    Action,
    Email,
    Role,
    RoleSet,
    Status,
    UserName,
    combine_roles,
    decompose_roles,
)

__all__ = [
    "ALL_ROLES_MASK",
    "MAX_EMAIL_LENGTH",
    "MAX_NAME_LENGTH",
    "ROLE_ORDER",
    "Action",
    "Email",
    "InvalidActionError",
    "InvalidArgumentError",
    "InvalidEmailError",
    "InvalidRoleError",
    "InvalidStatusError",
    "InvalidUserNameError",
    "Role",
    "RoleSet",
    "Status",
    "User",
    "UserName",
    "UserNotFoundError",
    "UserOperationFailedError",
    "UserPersistenceError",
    "UserRepository",
    "UserValidationError",
    "combine_roles",
    "decompose_roles",
]
