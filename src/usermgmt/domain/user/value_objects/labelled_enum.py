"""Integer enumerations with stable wire labels."""

from enum import IntEnum
from typing import Any


class LabelledIntEnum(IntEnum):
    """IntEnum whose members travel over the wire as PascalCase labels.

    ``RESEND_INVITE`` is labelled ``"ResendInvite"``. ``parse`` accepts a
    member, its integer value, its label or its name.
    """

    @property
    def label(self) -> str:
        return "".join(part.capitalize() for part in self.name.split("_"))

    @classmethod
    def parse(cls, value: Any):
        if isinstance(value, cls):
            return value
        # bool is an int subclass; True must not silently become value 1
        if isinstance(value, bool):
            raise cls._invalid(value)
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise cls._invalid(value) from None
        if isinstance(value, str):
            if value.strip().isdecimal():
                return cls.parse(int(value))
            key = value.strip().replace("_", "").lower()
            for member in cls:
                if member.name.replace("_", "").lower() == key:
                    return member
        raise cls._invalid(value)

    @classmethod
    def _invalid(cls, value: Any) -> Exception:
        return ValueError(f"{value!r} is not a valid {cls.__name__}")
