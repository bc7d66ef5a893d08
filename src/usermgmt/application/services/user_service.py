"""User administration service.

Validates input, loads and saves users through the repository, applies the
role bit-mask codec and computes summary counts. The service holds no user
data between calls. Concurrent updates to the same user are last-writer-wins.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from usermgmt.application.dtos import (
    AddUpdateUserDTO,
    UpdateActionDTO,
    UpdateRolesDTO,
    UpdateStatusDTO,
    UserDTO,
    UserSummaryDTO,
)
from usermgmt.domain.user import (
    Action,
    Email,
    InvalidArgumentError,
    InvalidEmailError,
    InvalidUserNameError,
    RoleSet,
    Status,
    User,
    UserName,
    UserNotFoundError,
    UserOperationFailedError,
    UserValidationError,
)

if TYPE_CHECKING:
    from usermgmt.domain.user import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """
    Application service for user administration.

    Operations:
    - Create, read, update and delete users
    - Replace a user's role set, status or pending action
    - Summarise clinician and staff counts
    """

    def __init__(self, user_repository: UserRepository):
        if user_repository is None:
            msg = "UserService requires a user repository"
            raise TypeError(msg)
        self._user_repo = user_repository

    async def add_user(self, dto: AddUpdateUserDTO | None) -> UserDTO:
        if dto is None:
            logger.error("Attempted to create user with null data")
            msg = "User data cannot be null"
            raise InvalidArgumentError(msg)

        name, email = self._validate_profile(dto)
        roles = RoleSet.from_roles(dto.roles)
        user = User.create(name, email, roles=roles)

        try:
            await self._user_repo.add(user)
        except Exception:
            logger.exception("Error occurred while creating user with email %s", email)
            raise

        if user.id is None or user.id <= 0:
            logger.error("Failed to create user with email %s", email)
            msg = "Failed to create user"
            raise UserOperationFailedError(msg, details={"email": email.value})

        dto.id = user.id
        logger.info("Successfully created user with ID %s", user.id)
        return UserDTO.from_user(user)

    async def get_all_users(self) -> list[UserDTO]:
        users = await self._user_repo.list_all()
        return [UserDTO.from_user(user) for user in users]

    async def get_user_by_id(self, user_id: int) -> UserDTO | None:
        self._require_valid_id(user_id)
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            return None
        return UserDTO.from_user(user)

    async def update_user(self, dto: AddUpdateUserDTO | None) -> UserDTO:
        if dto is None:
            logger.error("Attempted to update user with null data")
            msg = "User data cannot be null"
            raise InvalidArgumentError(msg)
        self._require_valid_id(dto.id)

        name, email = self._validate_profile(dto)
        roles = RoleSet.from_roles(dto.roles)

        return await self._mutate(
            dto.id,
            lambda user: user.update_profile(name, email, roles),
            "profile",
        )

    async def delete_user(self, user_id: int) -> None:
        self._require_valid_id(user_id)
        await self._get_existing_user(user_id)

        try:
            await self._user_repo.delete(user_id)
        except Exception:
            logger.exception("Error occurred while deleting user with ID %s", user_id)
            raise

        logger.info("Successfully deleted user with ID %s", user_id)

    async def update_user_role(self, dto: UpdateRolesDTO | None) -> UserDTO:
        if dto is None:
            msg = "Role update cannot be null"
            raise InvalidArgumentError(msg)
        self._require_valid_id(dto.id)
        if not dto.roles:
            msg = "At least one role is required"
            raise InvalidArgumentError(msg)

        roles = RoleSet.from_roles(dto.roles)
        if roles.is_empty:
            msg = "At least one role is required"
            raise InvalidArgumentError(msg)

        return await self._mutate(
            dto.id,
            lambda user: user.assign_roles(roles),
            "role",
        )

    async def update_user_status(self, dto: UpdateStatusDTO | None) -> UserDTO:
        if dto is None:
            msg = "Status update cannot be null"
            raise InvalidArgumentError(msg)
        self._require_valid_id(dto.id)
        status = Status.parse(dto.status)

        return await self._mutate(
            dto.id,
            lambda user: user.change_status(status),
            "status",
        )

    async def update_user_action(self, dto: UpdateActionDTO | None) -> UserDTO:
        if dto is None:
            msg = "Action update cannot be null"
            raise InvalidArgumentError(msg)
        self._require_valid_id(dto.id)
        action = Action.parse(dto.action)

        return await self._mutate(
            dto.id,
            lambda user: user.request_action(action),
            "action",
        )

    async def get_summary(self) -> UserSummaryDTO:
        users = await self._user_repo.list_all()
        if not users:
            return UserSummaryDTO()

        summary = UserSummaryDTO(
            clinician_count=sum(1 for u in users if u.roles.is_clinician),
            staff_count=sum(1 for u in users if u.roles.is_staff),
            deactivated_clinician_count=sum(
                1
                for u in users
                if u.roles.is_clinician and u.status == Status.DEACTIVE
            ),
        )
        logger.info("Successfully generated user summary")
        return summary

    async def _get_existing_user(self, user_id: int) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            logger.warning("User with ID %s not found", user_id)
            raise UserNotFoundError(user_id)
        return user

    async def _mutate(
        self,
        user_id: int,
        mutation: Callable[[User], None],
        field_name: str,
    ) -> UserDTO:
        user = await self._get_existing_user(user_id)
        mutation(user)

        try:
            await self._user_repo.update(user)
        except Exception:
            logger.exception("Error updating %s for user ID %s", field_name, user_id)
            raise

        logger.info("Updated %s for user ID %s", field_name, user_id)
        return UserDTO.from_user(user)

    @staticmethod
    def _require_valid_id(user_id: Any) -> None:
        if isinstance(user_id, bool) or not isinstance(user_id, int) or user_id <= 0:
            logger.warning("Rejected invalid user ID %r", user_id)
            msg = "Invalid user ID"
            raise InvalidArgumentError(msg, details={"user_id": repr(user_id)})

    @staticmethod
    def _validate_profile(dto: AddUpdateUserDTO) -> tuple[UserName, Email]:
        errors: list[str] = []
        name: UserName | None = None
        email: Email | None = None

        try:
            name = UserName(dto.name)
        except InvalidUserNameError as e:
            errors.append(str(e))

        try:
            email = Email(dto.email)
        except InvalidEmailError as e:
            errors.append(str(e))

        if errors:
            logger.warning("User validation failed: %s", "; ".join(errors))
            raise UserValidationError(errors)

        return name, email  # type: ignore[return-value]
