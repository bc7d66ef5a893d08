"""User name value object."""

from dataclasses import dataclass

from usermgmt.domain.user.exceptions import InvalidUserNameError

MAX_NAME_LENGTH = 100


@dataclass(frozen=True)
class UserName:
    """Display name of a user, trimmed and bounded in length."""

    value: str

    def __post_init__(self) -> None:
        trimmed = (self.value or "").strip()

        if not trimmed:
            msg = "Name cannot be empty"
            raise InvalidUserNameError(msg)

        if len(trimmed) > MAX_NAME_LENGTH:
            msg = f"Name cannot exceed {MAX_NAME_LENGTH} characters"
            raise InvalidUserNameError(msg)

        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value
