"""Profile creation service layer with business logic."""

from typing import Optional

import structlog

from core.exceptions import ValidationError
from domain.entities.profile import (
    FALLBACK_COLOR,
    PLACEHOLDER_AVATAR,
    UserProfile,
    normalize_color,
)

logger = structlog.get_logger()


class ProfileCreationService:
    """Turns raw profile selections into a valid UserProfile.

    Holds no state: every call reads only its arguments, and ids come from
    ``uuid4`` so concurrent callers never need to coordinate.
    """

    def create_profile(
        self,
        raw_name: str,
        avatar_choice: Optional[str] = None,
        color_choice: Optional[str] = None,
        mark_as_current: bool = False,
    ) -> UserProfile:
        """Validate the input, apply defaults and build a new profile.

        Raises ValidationError when the name is empty after trimming.
        Persisting or registering the profile is up to the caller.
        """
        name = (raw_name or "").strip()
        if not name:
            raise ValidationError("name required")

        avatar = (avatar_choice or "").strip() or PLACEHOLDER_AVATAR

        color = FALLBACK_COLOR
        if color_choice is not None:
            normalized = normalize_color(color_choice)
            if normalized is None:
                logger.warning(
                    "profile_color_unparseable",
                    color_choice=color_choice,
                    fallback=FALLBACK_COLOR,
                )
            else:
                color = normalized

        profile = UserProfile(
            name=name,
            avatar_emoji=avatar,
            color=color,
            is_current_user=mark_as_current,
        )
        logger.info(
            "profile_created",
            profile_id=str(profile.id),
            is_current_user=profile.is_current_user,
        )
        return profile
