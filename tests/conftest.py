"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from pathlib import Path

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infrastructure.directory.memory_directory import InMemoryUserDirectory


@pytest.fixture
def directory() -> InMemoryUserDirectory:
    """A fresh, empty user directory."""
    return InMemoryUserDirectory()


@pytest.fixture
async def client(directory: InMemoryUserDirectory) -> AsyncGenerator[AsyncClient, None]:
    """
    Create async test client backed by an isolated user directory.

    The app-wide directory is cached for the process, so every test gets its
    own instance through a dependency override.
    """
    from api.v1.dependencies import get_user_directory
    from main import create_app

    app = create_app()
    app.dependency_overrides[get_user_directory] = lambda: directory

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
