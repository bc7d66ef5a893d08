"""User administration endpoints."""

import logging

from fastapi import APIRouter, Request, Response, status

from usermgmt.application.dtos import (
    AddUpdateUserDTO,
    UpdateActionDTO,
    UpdateRolesDTO,
    UpdateStatusDTO,
)
from usermgmt.domain.user import UserNotFoundError
from usermgmt.presentation.api.dependencies import DBSession, UserServiceDep
from usermgmt.presentation.api.schemas.users import (
    CreateUserRequest,
    UpdateActionRequest,
    UpdateRolesRequest,
    UpdateStatusRequest,
    UpdateUserRequest,
    UserResponse,
    UserSummaryResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    summary="List all users",
    responses={200: {"description": "List of all users (may be empty)"}},
)
async def list_users(service: UserServiceDep) -> list[UserResponse]:
    """List all users."""
    users = await service.get_all_users()
    return [UserResponse.from_dto(u) for u in users]


@router.get(
    "/summary",
    summary="User population summary",
    responses={200: {"description": "Clinician and staff counts"}},
)
async def get_summary(service: UserServiceDep) -> UserSummaryResponse:
    """Count clinicians, staff and deactivated clinicians."""
    summary = await service.get_summary()
    return UserSummaryResponse.from_dto(summary)


@router.get(
    "/{user_id}",
    summary="Get a user",
    responses={
        200: {"description": "The user"},
        400: {"description": "Invalid user ID"},
        404: {"description": "User not found"},
    },
)
async def get_user(user_id: int, service: UserServiceDep) -> UserResponse:
    """Get a user by ID."""
    user = await service.get_user_by_id(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return UserResponse.from_dto(user)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
    responses={
        201: {"description": "User created successfully"},
        400: {"description": "Invalid user data"},
    },
)
async def create_user(
    request: CreateUserRequest,
    service: UserServiceDep,
    session: DBSession,
    http_request: Request,
    response: Response,
) -> UserResponse:
    """Create a new user."""
    dto = AddUpdateUserDTO(name=request.name, email=request.email, roles=request.roles)
    user = await service.add_user(dto)
    await session.commit()

    location = http_request.url_for("get_user", user_id=dto.id)
    response.headers["Location"] = str(location)
    return UserResponse.from_dto(user)


@router.put(
    "/{user_id}",
    summary="Update a user",
    responses={
        200: {"description": "User updated"},
        400: {"description": "Invalid user data"},
        404: {"description": "User not found"},
    },
)
async def update_user(
    user_id: int,
    request: UpdateUserRequest,
    service: UserServiceDep,
    session: DBSession,
) -> UserResponse:
    """Replace a user's name, email and roles."""
    dto = AddUpdateUserDTO(
        id=user_id,
        name=request.name,
        email=request.email,
        roles=request.roles,
    )
    user = await service.update_user(dto)
    await session.commit()
    return UserResponse.from_dto(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
    responses={
        204: {"description": "User deleted successfully"},
        400: {"description": "Invalid user ID"},
        404: {"description": "User not found"},
    },
)
async def delete_user(
    user_id: int,
    service: UserServiceDep,
    session: DBSession,
) -> None:
    """Delete a user."""
    await service.delete_user(user_id)
    await session.commit()
    logger.info("Deleted user %s", user_id)


@router.patch(
    "/{user_id}/roles",
    summary="Replace a user's roles",
    responses={
        200: {"description": "Roles updated"},
        400: {"description": "Missing or invalid roles"},
        404: {"description": "User not found"},
    },
)
async def update_roles(
    user_id: int,
    request: UpdateRolesRequest,
    service: UserServiceDep,
    session: DBSession,
) -> UserResponse:
    """Replace the role set of a user."""
    user = await service.update_user_role(
        UpdateRolesDTO(id=user_id, roles=request.roles),
    )
    await session.commit()
    return UserResponse.from_dto(user)


@router.patch(
    "/{user_id}/status",
    summary="Change a user's status",
    responses={
        200: {"description": "Status updated"},
        400: {"description": "Invalid status"},
        404: {"description": "User not found"},
    },
)
async def update_status(
    user_id: int,
    request: UpdateStatusRequest,
    service: UserServiceDep,
    session: DBSession,
) -> UserResponse:
    """Set the lifecycle status of a user."""
    user = await service.update_user_status(
        UpdateStatusDTO(id=user_id, status=request.status),
    )
    await session.commit()
    return UserResponse.from_dto(user)


@router.patch(
    "/{user_id}/action",
    summary="Set a user's pending action",
    responses={
        200: {"description": "Action updated"},
        400: {"description": "Invalid action"},
        404: {"description": "User not found"},
    },
)
async def update_action(
    user_id: int,
    request: UpdateActionRequest,
    service: UserServiceDep,
    session: DBSession,
) -> UserResponse:
    """Set the pending administrative action of a user."""
    user = await service.update_user_action(
        UpdateActionDTO(id=user_id, action=request.action),
    )
    await session.commit()
    return UserResponse.from_dto(user)
