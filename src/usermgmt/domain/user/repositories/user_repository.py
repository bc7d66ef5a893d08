"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from usermgmt.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates.

    ``add`` either assigns a positive id that is visible to later lookups or
    raises; no partial insert is ever observable.
    """

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def list_all(self) -> list[User]:
        """List all users."""

    @abstractmethod
    async def add(self, user: User) -> None:
        """Insert a new user and assign its id."""

    @abstractmethod
    async def update(self, user: User) -> None:
        """Persist the full state of an existing user."""

    @abstractmethod
    async def delete(self, user_id: int) -> None:
        """Delete a user by ID."""
