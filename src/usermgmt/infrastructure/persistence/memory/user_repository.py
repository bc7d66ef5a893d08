"""In-memory implementation of UserRepository.

Reference store used by tests and local experiments. Stores copies of the
aggregates so callers never share state with the stored records.
"""

import itertools
import logging

from usermgmt.domain.user import User, UserNotFoundError, UserRepository

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """Dictionary-backed user store with sequential integer ids."""

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._ids = itertools.count(1)

    async def find_by_id(self, user_id: int) -> User | None:
        user = self._users.get(user_id)
        return user.copy() if user is not None else None

    async def list_all(self) -> list[User]:
        return [user.copy() for user in self._users.values()]

    async def add(self, user: User) -> None:
        user_id = next(self._ids)
        user.assign_id(user_id)
        self._users[user_id] = user.copy()
        logger.debug("Added user %s to memory store", user_id)

    async def update(self, user: User) -> None:
        if user.id not in self._users:
            raise UserNotFoundError(user.id)  # type: ignore[arg-type]
        self._users[user.id] = user.copy()

    async def delete(self, user_id: int) -> None:
        self._users.pop(user_id, None)
