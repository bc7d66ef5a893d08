"""Transfer shapes exchanged with the user service."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from usermgmt.domain.user import Action, Role, Status, User


@dataclass
class AddUpdateUserDTO:
    """Input for creating or updating a user.

    ``roles`` holds individual role values before combination. On create the
    store-assigned id is written back into ``id``.
    """

    name: str
    email: str
    roles: Optional[list[Any]] = field(default_factory=list)
    id: int = 0


@dataclass(frozen=True)
class UserDTO:
    """Read shape of a user with its role set decomposed."""

    id: int
    name: str
    email: str
    roles: list[Role]
    created_at: datetime
    status: Status = Status.NONE
    action: Action = Action.NONE

    @classmethod
    def from_user(cls, user: User) -> "UserDTO":
        return cls(
            id=user.id or 0,
            name=user.name,
            email=user.email,
            roles=user.roles.to_list(),
            created_at=user.created_at,
            status=user.status,
            action=user.action,
        )


@dataclass(frozen=True)
class UpdateRolesDTO:
    id: int
    roles: Optional[list[Any]]


@dataclass(frozen=True)
class UpdateStatusDTO:
    id: int
    status: Any


@dataclass(frozen=True)
class UpdateActionDTO:
    id: int
    action: Any


@dataclass(frozen=True)
class UserSummaryDTO:
    """Aggregate counts over the user population.

    Buckets are independent; one user can count towards several.
    """

    clinician_count: int = 0
    staff_count: int = 0
    deactivated_clinician_count: int = 0
