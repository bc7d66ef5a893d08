"""User aggregate."""

from datetime import datetime
from typing import Union

from usermgmt.domain.shared.time import ensure_tz_aware, utc_now
from usermgmt.domain.user.value_objects import (
    Action,
    Email,
    RoleSet,
    Status,
    UserName,
)


class User:
    """
    User aggregate root.

    The integer id is assigned by the store on insert and never changes
    afterwards. ``created_at`` is stamped once at creation.
    """

    def __init__(
        self,
        name: Union[str, UserName],
        email: Union[str, Email],
        roles: RoleSet | None = None,
        status: Status = Status.NONE,
        action: Action = Action.NONE,
        id: int | None = None,
        created_at: datetime | None = None,
    ):
        self._id = id
        self._name = name if isinstance(name, UserName) else UserName(name)
        self._email = email if isinstance(email, Email) else Email(email)
        self._roles = roles if roles is not None else RoleSet.empty()
        self._status = Status.parse(status)
        self._action = Action.parse(action)
        self._created_at = ensure_tz_aware(created_at) if created_at else utc_now()

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def name(self) -> str:
        return self._name.value

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def roles(self) -> RoleSet:
        return self._roles

    @property
    def status(self) -> Status:
        return self._status

    @property
    def action(self) -> Action:
        return self._action

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def is_persisted(self) -> bool:
        return self._id is not None and self._id > 0

    def assign_id(self, user_id: int) -> None:
        """Record the identity chosen by the store. Only valid once."""
        if self._id is not None:
            msg = f"User already has id {self._id}"
            raise ValueError(msg)
        self._id = user_id

    def update_profile(
        self,
        name: Union[str, UserName],
        email: Union[str, Email],
        roles: RoleSet,
    ) -> None:
        self._name = name if isinstance(name, UserName) else UserName(name)
        self._email = email if isinstance(email, Email) else Email(email)
        self._roles = roles

    def assign_roles(self, roles: RoleSet) -> None:
        self._roles = roles

    def change_status(self, status: Status) -> None:
        self._status = Status.parse(status)

    def request_action(self, action: Action) -> None:
        self._action = Action.parse(action)

    @classmethod
    def create(
        cls,
        name: Union[str, UserName],
        email: Union[str, Email],
        roles: RoleSet | None = None,
    ) -> "User":
        return cls(name=name, email=email, roles=roles)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: int,
        name: str,
        email: str,
        roles: int,
        status: Union[int, Status],
        action: Union[int, Action],
        created_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            email=email,
            roles=RoleSet(roles),
            status=Status.parse(status),
            action=Action.parse(action),
            created_at=created_at,
        )

    def copy(self) -> "User":
        return User(
            id=self._id,
            name=self._name,
            email=self._email,
            roles=self._roles,
            status=self._status,
            action=self._action,
            created_at=self._created_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
