"""Provider initialization gate."""

import asyncio
import logging
from enum import Enum

from src.authsession.auth.provider import BaseAuthProvider, DependencyStatus

logger = logging.getLogger(__name__)


class GateState(str, Enum):
    """Lifecycle of the provider dependency check."""

    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"
    FAILED = "failed"


class InitializationGate:
    """
    Tracks whether the provider dependency stack is ready.

    begin() launches the dependency check once; later calls are no-ops.
    FAILED is terminal: there is no retry, so a caller that wants one must
    build a new gate.

    wait_until_ready() never returns while the gate is FAILED. Callers that
    cannot wait forever should wrap it in asyncio.wait_for() or use
    wait_until_settled().

    Example:
        >>> gate = InitializationGate(provider)
        >>> gate.begin()
        >>> await asyncio.wait_for(gate.wait_until_ready(), timeout=10)
    """

    def __init__(self, provider: BaseAuthProvider):
        self.provider = provider
        self._state = GateState.UNINITIALIZED
        self._diagnostic: str | None = None
        self._ready = asyncio.Event()
        self._settled = asyncio.Event()
        self._task: asyncio.Task | None = None

    @property
    def state(self) -> GateState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is GateState.READY

    @property
    def diagnostic(self) -> str | None:
        """Raw failure text from the dependency check, if it failed."""
        return self._diagnostic

    def begin(self) -> None:
        """
        Start the dependency check without blocking.

        Must be called from a running event loop.
        """
        if self._state is not GateState.UNINITIALIZED:
            return

        self._state = GateState.INITIALIZING
        self._task = asyncio.create_task(self._initialize())

    async def close(self) -> None:
        """
        Cancel a dependency check that is still running.

        Should be called during application shutdown. A cancelled check
        leaves the gate FAILED.
        """
        task = self._task
        if task is None or task.done():
            return

        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

        if self._state is GateState.INITIALIZING:
            self._fail("Initialization cancelled")

    async def wait_until_ready(self) -> None:
        """Suspend until the gate is READY."""
        await self._ready.wait()

    async def wait_until_settled(self) -> bool:
        """
        Suspend until the gate is READY or FAILED.

        Returns:
            True if the provider is ready
        """
        await self._settled.wait()
        return self.is_ready

    async def _initialize(self) -> None:
        logger.info("Provider initialization started")

        try:
            status = await self.provider.check_and_fix_dependencies()
        except Exception as e:
            self._fail(str(e))
            return

        if status is DependencyStatus.AVAILABLE:
            self._state = GateState.READY
            self._ready.set()
            self._settled.set()
            logger.info("Provider initialization succeeded")
        else:
            self._fail(f"Dependency check returned {status.value}")

    def _fail(self, diagnostic: str) -> None:
        self._state = GateState.FAILED
        self._diagnostic = diagnostic
        self._settled.set()
        logger.error(
            f"Provider initialization failed: {diagnostic}",
            extra={"error_type": "provider_init_failed", "diagnostic": diagnostic},
        )
