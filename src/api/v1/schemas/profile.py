"""Pydantic schemas for profile and user API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from domain.entities.profile import UserProfile


class OnboardingCreate(BaseModel):
    """Schema for the quick onboarding form."""

    name: str = Field(..., description="Display name; surrounding whitespace is trimmed")


class ProfileSetupCreate(BaseModel):
    """Schema for the detailed profile setup form."""

    name: str = Field(..., description="Display name; surrounding whitespace is trimmed")
    avatar_emoji: str | None = Field(None, description="One of the offered avatars")
    color: str | None = Field(
        None, description="One of the offered colors, as #RRGGBB or by name"
    )


class UserProfileResponse(BaseModel):
    """Schema for UserProfile response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "456e4567-e89b-12d3-a456-426614174000",
                "name": "Alice",
                "avatar_emoji": "👧",
                "color": "#FF3B30",
                "is_current_user": True,
                "alert_threshold_minutes": 15,
                "audio_alerts_enabled": True,
                "created_at": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    name: str
    avatar_emoji: str
    color: str
    is_current_user: bool
    alert_threshold_minutes: int
    audio_alerts_enabled: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, profile: UserProfile) -> "UserProfileResponse":
        return cls.model_validate(profile)


class UserProfileDetailResponse(BaseModel):
    """Schema for single UserProfile."""

    data: UserProfileResponse


class UserProfileListResponse(BaseModel):
    """Schema for list of UserProfiles."""

    data: list[UserProfileResponse]


class ColorOption(BaseModel):
    """A named accent color."""

    name: str
    hex: str


class ProfileOptions(BaseModel):
    """Choices offered by the setup screen and the values used when skipped."""

    avatars: list[str]
    colors: list[ColorOption]
    placeholder_avatar: str
    fallback_color: str


class ProfileOptionsResponse(BaseModel):
    """Schema for profile options."""

    data: ProfileOptions
