"""SQLAlchemy implementation for user persistence.

Provides:
- Base: Declarative base for models
- UserModel: SQLAlchemy model for users
- UserRepositorySQLAlchemy: Repository implementation for users
"""

from usermgmt.infrastructure.persistence.sqlalchemy.base import Base
from usermgmt.infrastructure.persistence.sqlalchemy.models import UserModel
from usermgmt.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
