"""SQLAlchemy model for User aggregate."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from usermgmt.domain.shared.time import utc_now
from usermgmt.domain.user import MAX_NAME_LENGTH
from usermgmt.infrastructure.persistence.sqlalchemy.base import Base


class UserModel(Base):
    """SQLAlchemy model for persisting User aggregates.

    Roles are stored as a single integer bit-mask; status and action as
    their integer enumeration values.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    roles: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    status: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    action: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email}, roles={self.roles})>"
