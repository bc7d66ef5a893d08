"""Value objects for the user domain."""

from usermgmt.domain.user.value_objects.action import Action
from usermgmt.domain.user.value_objects.email import MAX_EMAIL_LENGTH, Email
from usermgmt.domain.user.value_objects.role import (
    ALL_ROLES_MASK,
    ROLE_ORDER,
    Role,
    RoleSet,
    combine_roles,
    decompose_roles,
)
from usermgmt.domain.user.value_objects.status import Status
from usermgmt.domain.user.value_objects.user_name import MAX_NAME_LENGTH, UserName

__all__ = [
    "ALL_ROLES_MASK",
    "MAX_EMAIL_LENGTH",
    "MAX_NAME_LENGTH",
    "ROLE_ORDER",
    "Action",
    "Email",
    "Role",
    "RoleSet",
    "Status",
    "UserName",
    "combine_roles",
    "decompose_roles",
]
