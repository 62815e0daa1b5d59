"""Hand-off rules shared by every profile flow."""

import pytest

from domain.entities.profile import UserProfile
from domain.flows.base import DraftState, ProfileFlow
from domain.flows.onboarding import OnboardingFlow
from infrastructure.directory.memory_directory import InMemoryUserDirectory
from tests.unit.conftest import FakeUserDirectory


class NotCurrentFlow(ProfileFlow):
    """Flow that registers a profile without making it the active user."""

    flow_name = "not_current"

    def _build_profile(self) -> UserProfile:
        return self._service.create_profile(self.draft.name, mark_as_current=False)


class FlakyCurrentUserDirectory(InMemoryUserDirectory):
    """Directory whose first set_current_user call fails."""

    def __init__(self) -> None:
        super().__init__()
        self.failures_left = 1

    async def set_current_user(self, profile: UserProfile) -> None:
        if self.failures_left:
            self.failures_left -= 1
            raise ConnectionError("directory unavailable")
        await super().set_current_user(profile)


class TestHandoff:
    @pytest.mark.asyncio
    async def test_not_current_skips_set_current_user(self, fake_directory: FakeUserDirectory):
        flow = NotCurrentFlow(fake_directory)
        flow.set_name("Grandpa")

        profile = await flow.submit()

        assert profile.is_current_user is False
        assert fake_directory.call_names() == ["add_user"]

    def test_base_flow_cannot_be_instantiated(self, fake_directory: FakeUserDirectory):
        with pytest.raises(TypeError):
            ProfileFlow(fake_directory)  # type: ignore[abstract]


class TestRetryAfterPartialHandoff:
    @pytest.mark.asyncio
    async def test_retry_registers_a_single_current_user(self):
        directory = FlakyCurrentUserDirectory()
        flow = OnboardingFlow(directory)
        flow.set_name("Alice")

        with pytest.raises(ConnectionError):
            await flow.submit()
        assert flow.draft.state is DraftState.EDITING

        profile = await flow.submit()

        users = await directory.list_users()
        assert len(users) == 1
        assert users[0].id == profile.id
        assert users[0].is_current_user is True
        current = await directory.current_user()
        assert current is not None
        assert current.id == profile.id
        assert flow.is_submitted

    @pytest.mark.asyncio
    async def test_retry_hands_off_the_same_profile(self, fake_directory: FakeUserDirectory):
        calls = 0

        async def fail_first(profile: UserProfile) -> None:
            nonlocal calls
            calls += 1
            if calls == 1:
                raise ConnectionError("directory unavailable")
            fake_directory.calls.append(("set_current_user", profile))

        fake_directory.set_current_user = fail_first  # type: ignore[method-assign]
        flow = OnboardingFlow(fake_directory)
        flow.set_name("Alice")

        with pytest.raises(ConnectionError):
            await flow.submit()
        await flow.submit()

        assert fake_directory.call_names() == ["add_user", "add_user", "set_current_user"]
        assert len({p.id for _, p in fake_directory.calls}) == 1
