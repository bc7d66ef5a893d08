"""SQLAlchemy implementation of UserRepository."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from usermgmt.domain.user import (
    User,
    UserNotFoundError,
    UserPersistenceError,
    UserRepository,
)
from usermgmt.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Writes are flushed but not committed; the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: int) -> User | None:
        try:
            model = await self._find_model_by_id(user_id)
        except SQLAlchemyError as e:
            raise self._persistence_error("load", user_id, e) from e

        if model is None:
            return None

        return self._map_to_domain(model)

    async def list_all(self) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.id)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise self._persistence_error("list", None, e) from e
        models = result.scalars().all()
        logger.debug("Retrieved %d users from database", len(models))
        return [self._map_to_domain(model) for model in models]

    async def add(self, user: User) -> None:
        model = self._map_to_model(user)
        try:
            self._session.add(model)
            await self._session.flush()
        except SQLAlchemyError as e:
            raise self._persistence_error("add", user.id, e) from e

        user.assign_id(model.id)
        logger.info("Created user: %s (email: %s)", model.id, user.email)

    async def update(self, user: User) -> None:
        try:
            model = await self._find_model_by_id(user.id)  # type: ignore[arg-type]
            if model is None:
                raise UserNotFoundError(user.id)  # type: ignore[arg-type]

            self._update_model(model, user)
            await self._session.flush()
        except SQLAlchemyError as e:
            raise self._persistence_error("update", user.id, e) from e

        logger.debug("Updated user: %s", user.id)

    async def delete(self, user_id: int) -> None:
        try:
            model = await self._find_model_by_id(user_id)
            if model is None:
                return
            await self._session.delete(model)
            await self._session.flush()
        except SQLAlchemyError as e:
            raise self._persistence_error("delete", user_id, e) from e

        logger.info("Deleted user: %s", user_id)

    async def _find_model_by_id(self, user_id: int) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _persistence_error(
        self,
        operation: str,
        user_id: int | None,
        error: SQLAlchemyError,
    ) -> UserPersistenceError:
        logger.error("Failed to %s user %s: %s", operation, user_id, error)
        return UserPersistenceError(
            f"Failed to {operation} user",
            details={"user_id": user_id, "operation": operation},
        )

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            roles=model.roles,
            status=model.status,
            action=model.action,
            created_at=model.created_at,
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            name=user.name,
            email=user.email,
            roles=user.roles.mask,
            status=user.status.value,
            action=user.action.value,
            created_at=user.created_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        # created_at is write-once
        model.name = user.name
        model.email = user.email
        model.roles = user.roles.mask
        model.status = user.status.value
        model.action = user.action.value
