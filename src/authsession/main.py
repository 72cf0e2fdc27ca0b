"""Application session lifecycle."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from src.authsession.auth import (
    BaseAuthProvider,
    InitializationError,
    InitializationGate,
    SessionCoordinator,
    set_session_coordinator,
)
from src.authsession.config import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(
    provider: BaseAuthProvider,
    require_ready: bool = False,
) -> AsyncIterator[SessionCoordinator]:
    """
    Manage the session coordinator lifecycle (startup and shutdown).

    Starts provider initialization, waits for it (bounded by
    settings.ready_timeout_seconds when set), and registers the coordinator
    as the process-wide instance for the duration of the context.

    Args:
        provider: Auth provider client
        require_ready: Raise instead of yielding an unusable coordinator

    Yields:
        The registered SessionCoordinator

    Raises:
        InitializationError: If require_ready and the provider is not ready

    Example:
        >>> async with lifespan(InMemoryAuthProvider()) as coordinator:
        ...     await coordinator.sign_in_anonymously()
    """
    # Startup
    gate = InitializationGate(provider)
    gate.begin()
    coordinator = SessionCoordinator(provider, gate)

    try:
        ready = await asyncio.wait_for(
            coordinator.wait_for_ready(), timeout=settings.ready_timeout_seconds
        )
    except TimeoutError:
        logger.error(
            f"Provider initialization timed out after {settings.ready_timeout_seconds}s",
            extra={"error_type": "provider_init_timeout"},
        )
        ready = False

    if not ready and require_ready:
        await gate.close()
        raise InitializationError(gate.diagnostic or "Provider initialization did not complete")

    set_session_coordinator(coordinator)
    logger.info("Session coordinator registered", extra={"ready": ready})

    try:
        yield coordinator
    finally:
        # Shutdown
        set_session_coordinator(None)
        await coordinator.close()
        await gate.close()
