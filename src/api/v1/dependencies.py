"""Dependency injection factories for API v1."""

from functools import lru_cache

from fastapi import Depends

from domain.flows.onboarding import OnboardingFlow
from domain.flows.profile_setup import ProfileSetupFlow
from domain.repositories.user_directory import IUserDirectory
from domain.services.profile_service import ProfileCreationService
from infrastructure.directory.memory_directory import InMemoryUserDirectory


@lru_cache
def get_user_directory() -> IUserDirectory:
    """Get the process-wide user directory."""
    return InMemoryUserDirectory()


@lru_cache
def get_profile_service() -> ProfileCreationService:
    """Get ProfileCreation service instance."""
    return ProfileCreationService()


def get_onboarding_flow(
    directory: IUserDirectory = Depends(get_user_directory),
    service: ProfileCreationService = Depends(get_profile_service),
) -> OnboardingFlow:
    """Start a fresh onboarding flow for one request."""
    return OnboardingFlow(directory, service)


def get_profile_setup_flow(
    directory: IUserDirectory = Depends(get_user_directory),
    service: ProfileCreationService = Depends(get_profile_service),
) -> ProfileSetupFlow:
    """Start a fresh profile setup flow for one request."""
    return ProfileSetupFlow(directory, service)
