from typing import Any

from usermgmt.domain.user.exceptions import InvalidStatusError
from usermgmt.domain.user.value_objects.labelled_enum import LabelledIntEnum


class Status(LabelledIntEnum):
    """Lifecycle state of a user account. Exactly one applies at a time."""

    NONE = 0
    ACTIVE = 1
    DEACTIVE = 2
    INVITED = 3

    @classmethod
    def _invalid(cls, value: Any) -> Exception:
        return InvalidStatusError(value)
