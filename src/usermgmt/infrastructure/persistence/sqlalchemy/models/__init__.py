"""SQLAlchemy models for user management."""

from usermgmt.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = ["UserModel"]
