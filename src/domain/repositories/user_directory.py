"""User directory protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import UserProfile


class IUserDirectory(Protocol):
    """Collaborator that owns the list of profiles and the active-user pointer."""

    async def add_user(self, profile: UserProfile) -> None:
        """Register a new profile."""
        ...

    async def set_current_user(self, profile: UserProfile) -> None:
        """Mark a profile as the active session identity."""
        ...

    async def get(self, id: UUID) -> UserProfile | None:
        """Get a profile by ID."""
        ...

    async def list_users(self) -> list[UserProfile]:
        """Get all registered profiles in insertion order."""
        ...

    async def current_user(self) -> UserProfile | None:
        """Get the active profile, if one has been set."""
        ...
