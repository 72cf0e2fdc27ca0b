"""Tests for the application session lifecycle."""

import asyncio

import pytest

from src.authsession.auth import (
    DependencyStatus,
    GateState,
    InitializationError,
    InMemoryAuthProvider,
    get_session_coordinator,
)
from src.authsession.config import settings
from src.authsession.main import lifespan


@pytest.mark.asyncio
class TestLifespan:
    """Tests for lifespan context manager."""

    async def test_registers_ready_coordinator(self):
        """Test that startup registers a ready coordinator and shutdown clears it."""
        provider = InMemoryAuthProvider()

        async with lifespan(provider) as coordinator:
            assert get_session_coordinator() is coordinator
            assert coordinator.is_ready is True
            result = await coordinator.sign_in_anonymously()
            assert result.success is True

        with pytest.raises(RuntimeError):
            get_session_coordinator()
        assert provider.subscriber_count == 0

    async def test_failed_provider_yields_unusable_coordinator(self):
        """Test that a failed dependency check still yields a NOT_READY coordinator."""
        provider = InMemoryAuthProvider(dependency_status=DependencyStatus.UNAVAILABLE_OTHER)

        async with lifespan(provider) as coordinator:
            assert coordinator.is_ready is False
            result = await coordinator.sign_in_anonymously()
            assert result.error.category.value == "not_ready"

    async def test_require_ready_raises_on_failure(self):
        """Test that require_ready surfaces the raw diagnostic."""
        provider = InMemoryAuthProvider()
        provider.fail_next("google play services out of date")

        with pytest.raises(InitializationError, match="google play services out of date"):
            async with lifespan(provider, require_ready=True):
                pass

    async def test_ready_timeout(self, monkeypatch):
        """Test that a hanging dependency check times out and is cancelled on shutdown."""
        monkeypatch.setattr(settings, "ready_timeout_seconds", 0.05)
        provider = InMemoryAuthProvider()
        release = asyncio.Event()

        async def hanging_check():
            await release.wait()
            return DependencyStatus.AVAILABLE

        provider.check_and_fix_dependencies = hanging_check

        async with lifespan(provider) as coordinator:
            assert coordinator.is_ready is False
            gate = coordinator.gate
            assert gate.state == GateState.INITIALIZING

        assert gate.state == GateState.FAILED
        assert gate.diagnostic == "Initialization cancelled"
        assert not release.is_set()
