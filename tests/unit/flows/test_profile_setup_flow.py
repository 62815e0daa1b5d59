"""Unit tests for ProfileSetupFlow."""

import pytest

from core.exceptions import ValidationError
from domain.entities.profile import COLOR_OPTIONS, FALLBACK_COLOR, PLACEHOLDER_AVATAR
from domain.flows.profile_setup import ProfileSetupFlow
from tests.unit.conftest import FakeUserDirectory


@pytest.fixture
def flow(fake_directory: FakeUserDirectory) -> ProfileSetupFlow:
    return ProfileSetupFlow(fake_directory)


class TestSelections:
    def test_blue_preselected_and_no_avatar(self, flow: ProfileSetupFlow):
        assert flow.draft.color == FALLBACK_COLOR
        assert flow.draft.avatar is None

    def test_select_offered_avatar(self, flow: ProfileSetupFlow):
        flow.select_avatar("👧")
        assert flow.draft.avatar == "👧"

    def test_rejects_avatar_not_offered(self, flow: ProfileSetupFlow):
        with pytest.raises(ValidationError) as exc_info:
            flow.select_avatar("🐙")

        assert exc_info.value.details == {"field": "avatar_emoji"}
        assert flow.draft.avatar is None

    @pytest.mark.parametrize("color", ["purple", "Purple", "#af52de", "AF52DE"])
    def test_select_color_by_name_or_hex(self, flow: ProfileSetupFlow, color: str):
        flow.select_color(color)
        assert flow.draft.color == COLOR_OPTIONS["purple"]

    @pytest.mark.parametrize("color", ["#123456", "magenta", ""])
    def test_rejects_color_not_offered(self, flow: ProfileSetupFlow, color: str):
        with pytest.raises(ValidationError):
            flow.select_color(color)

        assert flow.draft.color == FALLBACK_COLOR


class TestSubmit:
    @pytest.mark.asyncio
    async def test_uses_selections(
        self, flow: ProfileSetupFlow, fake_directory: FakeUserDirectory
    ):
        flow.set_name("  Alice  ")
        flow.select_avatar("👧")
        flow.select_color("red")

        profile = await flow.submit()

        assert profile.name == "Alice"
        assert profile.avatar_emoji == "👧"
        assert profile.color == COLOR_OPTIONS["red"]
        assert profile.is_current_user is True
        assert fake_directory.call_names() == ["add_user", "set_current_user"]

    @pytest.mark.asyncio
    async def test_skipped_choices_use_defaults(self, flow: ProfileSetupFlow):
        flow.set_name("Bob")

        profile = await flow.submit()

        assert profile.avatar_emoji == PLACEHOLDER_AVATAR
        assert profile.color == FALLBACK_COLOR

    @pytest.mark.asyncio
    async def test_blank_name_never_reaches_directory(
        self, flow: ProfileSetupFlow, fake_directory: FakeUserDirectory
    ):
        flow.set_name("   ")
        flow.select_avatar("👦")
        flow.select_color("green")

        with pytest.raises(ValidationError):
            await flow.submit()

        assert fake_directory.calls == []
        assert flow.draft.avatar == "👦"
