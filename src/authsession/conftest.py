"""Pytest configuration and shared fixtures."""

from unittest.mock import Mock, patch

import pytest
import pytest_asyncio

from src.authsession.auth import InitializationGate, InMemoryAuthProvider, SessionCoordinator


@pytest.fixture(autouse=True)
def mock_posthog():
    """Auto-mock PostHogService in the coordinator for all tests."""
    with patch("src.authsession.auth.coordinator.PostHogService") as mock:
        mock_instance = Mock()
        mock.return_value = mock_instance
        yield mock_instance


@pytest.fixture
def provider() -> InMemoryAuthProvider:
    """Provide a fresh in-memory auth provider."""
    return InMemoryAuthProvider()


@pytest_asyncio.fixture
async def coordinator(provider: InMemoryAuthProvider):
    """
    Provide an initialized session coordinator.

    Example:
        >>> async def test_sign_in(coordinator):
        >>>     result = await coordinator.sign_in_anonymously()
        >>>     assert result.success
    """
    gate = InitializationGate(provider)
    gate.begin()
    session = SessionCoordinator(provider, gate)
    await session.wait_for_ready()
    yield session
    await session.close()
