from datetime import datetime
from typing import Union

from pydantic import BaseModel, Field, StrictInt

from usermgmt.application.dtos import UserDTO, UserSummaryDTO

# Enumerations travel as labels ("Clinician"); integer values are accepted too
EnumInput = Union[StrictInt, str]


class CreateUserRequest(BaseModel):
    """Request schema for creating a user.

    Name and email are validated by the service so that every violation is
    reported together.
    """

    name: str = ""
    email: str = ""
    roles: list[EnumInput] = Field(default_factory=list)


class UpdateUserRequest(CreateUserRequest):
    """Request schema for replacing a user's name, email and roles."""


class UpdateRolesRequest(BaseModel):
    roles: list[EnumInput] = Field(default_factory=list)


class UpdateStatusRequest(BaseModel):
    status: EnumInput


class UpdateActionRequest(BaseModel):
    action: EnumInput


class UserResponse(BaseModel):
    """Response schema for a single user."""

    id: int
    name: str
    email: str
    roles: list[str]
    status: str
    action: str
    created_at: datetime

    @classmethod
    def from_dto(cls, dto: UserDTO) -> "UserResponse":
        return cls(
            id=dto.id,
            name=dto.name,
            email=dto.email,
            roles=[role.label for role in dto.roles],
            status=dto.status.label,
            action=dto.action.label,
            created_at=dto.created_at,
        )


class UserSummaryResponse(BaseModel):
    """Aggregate counts over all users."""

    clinician_count: int
    staff_count: int
    deactivated_clinician_count: int

    @classmethod
    def from_dto(cls, dto: UserSummaryDTO) -> "UserSummaryResponse":
        return cls(
            clinician_count=dto.clinician_count,
            staff_count=dto.staff_count,
            deactivated_clinician_count=dto.deactivated_clinician_count,
        )
