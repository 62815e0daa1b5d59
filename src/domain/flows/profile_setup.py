"""Detailed profile setup flow: name, avatar and accent color."""

from core.exceptions import ValidationError
from domain.entities.profile import (
    AVATAR_OPTIONS,
    COLOR_OPTIONS,
    FALLBACK_COLOR,
    UserProfile,
    normalize_color,
)
from domain.flows.base import ProfileDraft, ProfileFlow


class ProfileSetupFlow(ProfileFlow):
    """Setup screen with avatar and color grids. Always marks the user current."""

    flow_name = "profile_setup"

    def _new_draft(self) -> ProfileDraft:
        # The color grid starts with blue pre-selected, the avatar grid empty
        return ProfileDraft(color=FALLBACK_COLOR)

    def select_avatar(self, avatar: str) -> None:
        """Select one of the offered avatars."""
        self._require_editing()
        if avatar not in AVATAR_OPTIONS:
            raise ValidationError(f"avatar not offered: {avatar}", field="avatar_emoji")
        self.draft.avatar = avatar

    def select_color(self, color: str) -> None:
        """Select one of the offered colors, by hex value or by name."""
        self._require_editing()
        resolved = COLOR_OPTIONS.get(color.strip().lower()) or normalize_color(color)
        if resolved not in COLOR_OPTIONS.values():
            raise ValidationError(f"color not offered: {color}", field="color")
        self.draft.color = resolved

    def _build_profile(self) -> UserProfile:
        return self._service.create_profile(
            self.draft.name,
            avatar_choice=self.draft.avatar,
            color_choice=self.draft.color,
            mark_as_current=True,
        )
