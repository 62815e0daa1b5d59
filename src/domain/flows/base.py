"""Shared state handling for the profile creation flows."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum
from typing import Optional

import structlog

from core.exceptions import FlowCompletedError, ValidationError
from domain.entities.profile import UserProfile
from domain.repositories.user_directory import IUserDirectory
from domain.services.profile_service import ProfileCreationService

logger = structlog.get_logger()


class DraftState(StrEnum):
    """Lifecycle of a profile draft."""

    EDITING = "editing"
    SUBMITTED = "submitted"


@dataclass
class ProfileDraft:
    """Selection state a screen holds while the user fills in the form."""

    name: str = ""
    avatar: Optional[str] = None
    color: Optional[str] = None
    state: DraftState = DraftState.EDITING


class ProfileFlow(ABC):
    """Base for a screen that collects a draft and hands the profile off.

    Subclasses decide which selections are collected and which values are
    supplied for the ones the user skips.
    """

    flow_name = "profile"

    def __init__(
        self,
        directory: IUserDirectory,
        service: ProfileCreationService | None = None,
    ) -> None:
        self._directory = directory
        self._service = service or ProfileCreationService()
        self.draft = self._new_draft()
        # Built but not yet fully handed off; reused when submit is retried
        self._pending: UserProfile | None = None

    def _new_draft(self) -> ProfileDraft:
        return ProfileDraft()

    @property
    def is_submitted(self) -> bool:
        return self.draft.state is DraftState.SUBMITTED

    @property
    def can_submit(self) -> bool:
        """Whether the submit control should be enabled."""
        return not self.is_submitted and bool(self.draft.name.strip())

    def set_name(self, name: str) -> None:
        self._require_editing()
        self.draft.name = name

    def _require_editing(self) -> None:
        if self.is_submitted:
            raise FlowCompletedError(self.flow_name)

    @abstractmethod
    def _build_profile(self) -> UserProfile:
        """Create the profile from the draft with this screen's defaults."""

    async def submit(self) -> UserProfile:
        """Create the profile and hand it to the user directory.

        Validation runs again even when ``can_submit`` was checked; a
        ValidationError leaves the draft editable so the user can retry.
        If the directory fails partway, a retry hands off the same profile
        instead of building a second one.
        """
        self._require_editing()
        if self._pending is None:
            try:
                self._pending = self._build_profile()
            except ValidationError:
                logger.info("profile_flow_rejected", flow=self.flow_name)
                raise
        profile = self._pending

        await self._directory.add_user(profile)
        if profile.is_current_user:
            await self._directory.set_current_user(profile)

        # Local selections are discarded once the hand-off succeeded
        self.draft = ProfileDraft(state=DraftState.SUBMITTED)
        self._pending = None
        logger.info(
            "profile_flow_submitted",
            flow=self.flow_name,
            profile_id=str(profile.id),
        )
        return profile
