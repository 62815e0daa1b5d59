"""Shared fixtures for unit tests."""

from uuid import UUID

import pytest

from domain.entities.profile import UserProfile
from domain.services.profile_service import ProfileCreationService


class FakeUserDirectory:
    """Fake user directory that records every hand-off in call order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, UserProfile]] = []

    async def add_user(self, profile: UserProfile) -> None:
        self.calls.append(("add_user", profile))

    async def set_current_user(self, profile: UserProfile) -> None:
        self.calls.append(("set_current_user", profile))

    async def get(self, id: UUID) -> UserProfile | None:
        return next((p for name, p in self.calls if p.id == id), None)

    async def list_users(self) -> list[UserProfile]:
        return [p for name, p in self.calls if name == "add_user"]

    async def current_user(self) -> UserProfile | None:
        current = [p for name, p in self.calls if name == "set_current_user"]
        return current[-1] if current else None

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]


@pytest.fixture
def fake_directory() -> FakeUserDirectory:
    """Create a fresh FakeUserDirectory."""
    return FakeUserDirectory()


@pytest.fixture
def profile_service() -> ProfileCreationService:
    return ProfileCreationService()
