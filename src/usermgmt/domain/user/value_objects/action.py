from typing import Any

from usermgmt.domain.user.exceptions import InvalidActionError
from usermgmt.domain.user.value_objects.labelled_enum import LabelledIntEnum


class Action(LabelledIntEnum):
    """Pending administrative intent attached to a user."""

    NONE = 0
    REACTIVATE = 1
    DEACTIVATE = 2
    RESEND_INVITE = 3

    @classmethod
    def _invalid(cls, value: Any) -> Exception:
        return InvalidActionError(value)
