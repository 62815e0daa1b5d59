"""Profile creation API routes for the onboarding and setup screens."""

from fastapi import APIRouter, Depends, Request, status

from api.v1.dependencies import get_onboarding_flow, get_profile_setup_flow
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.profile import (
    ColorOption,
    OnboardingCreate,
    ProfileOptions,
    ProfileOptionsResponse,
    ProfileSetupCreate,
    UserProfileDetailResponse,
    UserProfileResponse,
)
from core.rate_limit import limiter
from domain.entities.profile import (
    AVATAR_OPTIONS,
    COLOR_OPTIONS,
    FALLBACK_COLOR,
    PLACEHOLDER_AVATAR,
)
from domain.flows.onboarding import OnboardingFlow
from domain.flows.profile_setup import ProfileSetupFlow

router = APIRouter(tags=["profiles"])


@router.get(
    "/profiles/options",
    response_model=ProfileOptionsResponse,
    summary="List avatar and color choices",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_profile_options(request: Request) -> ProfileOptionsResponse:
    """Avatars and colors offered by the setup screen, plus skip defaults."""
    return ProfileOptionsResponse(
        data=ProfileOptions(
            avatars=list(AVATAR_OPTIONS),
            colors=[ColorOption(name=name, hex=hex) for name, hex in COLOR_OPTIONS.items()],
            placeholder_avatar=PLACEHOLDER_AVATAR,
            fallback_color=FALLBACK_COLOR,
        )
    )


@router.post(
    "/onboarding",
    response_model=UserProfileDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Complete quick onboarding",
    responses={
        201: {"description": "Profile created and set as current user"},
        400: {"model": ErrorResponse, "description": "Name is empty"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def complete_onboarding(
    request: Request,
    body: OnboardingCreate,
    flow: OnboardingFlow = Depends(get_onboarding_flow),
) -> UserProfileDetailResponse:
    """Create the first profile from just a name and make it current."""
    flow.set_name(body.name)
    profile = await flow.submit()
    return UserProfileDetailResponse(data=UserProfileResponse.from_entity(profile))


@router.post(
    "/profiles/setup",
    response_model=UserProfileDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Complete detailed profile setup",
    responses={
        201: {"description": "Profile created and set as current user"},
        400: {
            "model": ErrorResponse,
            "description": "Name is empty, or avatar/color is not offered",
        },
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def complete_profile_setup(
    request: Request,
    body: ProfileSetupCreate,
    flow: ProfileSetupFlow = Depends(get_profile_setup_flow),
) -> UserProfileDetailResponse:
    """Create a profile with a chosen avatar and color and make it current.

    Skipped choices fall back to the placeholder avatar and the default color.
    """
    flow.set_name(body.name)
    if body.avatar_emoji is not None:
        flow.select_avatar(body.avatar_emoji)
    if body.color is not None:
        flow.select_color(body.color)
    profile = await flow.submit()
    return UserProfileDetailResponse(data=UserProfileResponse.from_entity(profile))
