"""Read-only user directory routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from api.v1.dependencies import get_user_directory
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.profile import (
    UserProfileDetailResponse,
    UserProfileListResponse,
    UserProfileResponse,
)
from core.exceptions import NoCurrentUserError, UserNotFoundError
from core.rate_limit import limiter
from domain.repositories.user_directory import IUserDirectory

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "",
    response_model=UserProfileListResponse,
    summary="List all users",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def list_users(
    request: Request,
    directory: IUserDirectory = Depends(get_user_directory),
) -> UserProfileListResponse:
    """Get every registered profile in the order they were added."""
    users = await directory.list_users()
    return UserProfileListResponse(
        data=[UserProfileResponse.from_entity(user) for user in users]
    )


@router.get(
    "/current",
    response_model=UserProfileDetailResponse,
    summary="Get the current user",
    responses={404: {"model": ErrorResponse, "description": "No current user has been set"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_current_user(
    request: Request,
    directory: IUserDirectory = Depends(get_user_directory),
) -> UserProfileDetailResponse:
    user = await directory.current_user()
    if user is None:
        raise NoCurrentUserError()
    return UserProfileDetailResponse(data=UserProfileResponse.from_entity(user))


@router.get(
    "/{user_id}",
    response_model=UserProfileDetailResponse,
    summary="Get a user",
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_user(
    request: Request,
    user_id: UUID,
    directory: IUserDirectory = Depends(get_user_directory),
) -> UserProfileDetailResponse:
    user = await directory.get(user_id)
    if user is None:
        raise UserNotFoundError(str(user_id))
    return UserProfileDetailResponse(data=UserProfileResponse.from_entity(user))
