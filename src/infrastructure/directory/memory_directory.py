"""Process-local implementation of the user directory."""

from dataclasses import replace
from uuid import UUID

import structlog

from domain.entities.profile import UserProfile

logger = structlog.get_logger()


class InMemoryUserDirectory:
    """Keeps profiles in insertion order for the lifetime of the process."""

    def __init__(self) -> None:
        self._users: dict[UUID, UserProfile] = {}
        self._current: UserProfile | None = None

    async def add_user(self, profile: UserProfile) -> None:
        if profile.id in self._users:
            return
        self._users[profile.id] = profile
        logger.info("user_added", user_id=str(profile.id), total_users=len(self._users))

    async def set_current_user(self, profile: UserProfile) -> None:
        """Flag ``profile`` as current and clear the flag on every other user.

        The flag is cleared even when ``profile`` was never added, so at most
        one stored user is ever flagged current.
        """
        for user_id, user in self._users.items():
            if user.is_current_user and user_id != profile.id:
                self._users[user_id] = replace(user, is_current_user=False)

        current = replace(profile, is_current_user=True)
        if profile.id in self._users:
            self._users[profile.id] = current
        self._current = current
        logger.info("current_user_set", user_id=str(profile.id))

    async def get(self, id: UUID) -> UserProfile | None:
        return self._users.get(id)

    async def list_users(self) -> list[UserProfile]:
        return list(self._users.values())

    async def current_user(self) -> UserProfile | None:
        if self._current is None:
            return None
        return self._users.get(self._current.id, self._current)
