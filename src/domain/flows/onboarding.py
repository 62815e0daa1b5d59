"""First-run onboarding flow: only asks for a name."""

from domain.entities.profile import ONBOARDING_COLOR, UserProfile
from domain.flows.base import ProfileFlow


class OnboardingFlow(ProfileFlow):
    """Quick start: name only, placeholder avatar, onboarding color."""

    flow_name = "onboarding"

    def _build_profile(self) -> UserProfile:
        return self._service.create_profile(
            self.draft.name,
            avatar_choice=None,
            color_choice=ONBOARDING_COLOR,
            mark_as_current=True,
        )
