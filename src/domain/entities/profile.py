"""User profile domain entity and the choices offered when creating one."""

import re
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

# Avatar grid offered on the profile setup screen
AVATAR_OPTIONS: tuple[str, ...] = (
    "👨‍💼",
    "👩‍💼",
    "👨‍🎓",
    "👩‍🎓",
    "👦",
    "👧",
    "👶",
    "👴",
    "👵",
    "🧑‍🦱",
    "👱‍♀️",
    "🧔",
)

# Accent colors offered on the profile setup screen, by name
COLOR_OPTIONS: dict[str, str] = {
    "blue": "#007AFF",
    "purple": "#AF52DE",
    "pink": "#FF2D55",
    "red": "#FF3B30",
    "orange": "#FF9500",
    "yellow": "#FFCC00",
    "green": "#34C759",
    "teal": "#30B0C7",
}

PLACEHOLDER_AVATAR = "👤"
FALLBACK_COLOR = "#007AFF"  # Default blue

# Quick onboarding never asks for a color and supplies this one
ONBOARDING_COLOR = "#00BCD4"

_HEX_COLOR = re.compile(r"^[0-9A-F]{6}$")
_SHORT_HEX_COLOR = re.compile(r"^[0-9A-F]{3}$")


def normalize_color(value: str | None) -> str | None:
    """Return ``value`` as ``#RRGGBB`` upper-case, or None if it is not a hex color.

    Accepts an optional leading ``#`` and the 3-digit shorthand (``#0af``).
    """
    if value is None:
        return None
    digits = value.strip().upper().removeprefix("#")
    if _SHORT_HEX_COLOR.match(digits):
        digits = "".join(ch * 2 for ch in digits)
    if not _HEX_COLOR.match(digits):
        return None
    return f"#{digits}"


@dataclass(frozen=True, slots=True)
class UserProfile:
    """Read-only value record identifying a family member."""

    name: str
    id: UUID = field(default_factory=uuid4)
    avatar_emoji: str = PLACEHOLDER_AVATAR
    color: str = FALLBACK_COLOR
    is_current_user: bool = False
    alert_threshold_minutes: int = 15
    audio_alerts_enabled: bool = True
    created_at: datetime = field(default_factory=datetime.utcnow)
