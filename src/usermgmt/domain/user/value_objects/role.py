"""Role value objects and the role bit-mask codec.

A user holds zero or more roles at once. The set is stored as a single
integer where each role owns a distinct power-of-two bit. ``combine_roles``
and ``decompose_roles`` convert between the two representations explicitly
rather than relying on ``enum.Flag`` arithmetic.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from usermgmt.domain.user.exceptions import InvalidRoleError
from usermgmt.domain.user.value_objects.labelled_enum import LabelledIntEnum


class Role(LabelledIntEnum):
    """Permission categories a user can hold."""

    NONE = 0
    ADMINISTRATION = 1
    CLINICIAN = 2
    STAFF = 4
    PATIENT = 8

    @classmethod
    def _invalid(cls, value: Any) -> Exception:
        return InvalidRoleError(value)


# Canonical iteration order for decomposed role sets
ROLE_ORDER: tuple[Role, ...] = (
    Role.ADMINISTRATION,
    Role.CLINICIAN,
    Role.STAFF,
    Role.PATIENT,
)

ALL_ROLES_MASK = sum(role.value for role in ROLE_ORDER)


def combine_roles(roles: Iterable[Any] | None) -> int:
    """Fold roles into a bit-mask with bitwise OR.

    ``None`` or an empty iterable yields ``Role.NONE``; the service layer
    decides whether an empty set is acceptable.
    """
    mask = Role.NONE.value
    for role in roles or ():
        mask |= Role.parse(role).value
    return mask


def decompose_roles(mask: int) -> list[Role]:
    """Expand a bit-mask into its roles in canonical order."""
    _check_mask(mask)
    return [role for role in ROLE_ORDER if mask & role.value]


def _check_mask(mask: Any) -> None:
    if isinstance(mask, bool) or not isinstance(mask, int):
        raise InvalidRoleError(mask)
    if mask < 0 or mask & ~ALL_ROLES_MASK:
        raise InvalidRoleError(mask)


@dataclass(frozen=True)
class RoleSet:
    """Validated set of roles backed by a bit-mask."""

    mask: int = Role.NONE.value

    def __post_init__(self) -> None:
        _check_mask(self.mask)
        # Normalise IntEnum members to a plain int
        object.__setattr__(self, "mask", int(self.mask))

    @classmethod
    def empty(cls) -> "RoleSet":
        return cls(Role.NONE.value)

    @classmethod
    def from_roles(cls, roles: Iterable[Any] | None) -> "RoleSet":
        return cls(combine_roles(roles))

    def contains(self, role: Role) -> bool:
        role = Role.parse(role)
        if role is Role.NONE:
            return False
        return bool(self.mask & role.value)

    def __contains__(self, role: object) -> bool:
        try:
            return self.contains(role)  # type: ignore[arg-type]
        except InvalidRoleError:
            return False

    def __iter__(self) -> Iterator[Role]:
        return iter(decompose_roles(self.mask))

    def __len__(self) -> int:
        return len(decompose_roles(self.mask))

    def to_list(self) -> list[Role]:
        return decompose_roles(self.mask)

    @property
    def is_empty(self) -> bool:
        return self.mask == Role.NONE.value

    @property
    def is_administration(self) -> bool:
        return self.contains(Role.ADMINISTRATION)

    @property
    def is_clinician(self) -> bool:
        return self.contains(Role.CLINICIAN)

    @property
    def is_staff(self) -> bool:
        return self.contains(Role.STAFF)

    @property
    def is_patient(self) -> bool:
        return self.contains(Role.PATIENT)

    def __repr__(self) -> str:
        labels = ", ".join(role.label for role in self)
        return f"RoleSet({labels})"
