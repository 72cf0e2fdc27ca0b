"""Session state coordinator for provider-backed authentication."""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from src.authsession.auth.error_translator import describe, message_for
from src.authsession.auth.initialization import InitializationGate
from src.authsession.auth.models import (
    AuthError,
    AuthOperationResult,
    ErrorCategory,
    UserIdentity,
)
from src.authsession.auth.provider import BaseAuthProvider, Unsubscribe
from src.authsession.services import PostHogService

logger = logging.getLogger(__name__)


class SessionCoordinator:
    """
    Owns the current-user slot and mediates every auth operation.

    Local operations (sign-in, registration, sign-out) are serialized by a
    single lock. Provider push notifications are queued and applied by a
    dedicated reconciliation task, which treats the provider as the source
    of truth. Both paths write the slot through _replace_current_user(),
    which never awaits, so the last write to arrive on the loop wins.

    Callers never see a raw provider exception: every sign-in style call
    returns an AuthOperationResult, and sign_out() absorbs failures.

    Attributes:
        provider: Auth provider client
        gate: Initialization gate guarding the provider

    Example:
        >>> coordinator = SessionCoordinator(provider, gate)
        >>> await coordinator.wait_for_ready()
        >>> result = await coordinator.sign_in_anonymously()
        >>> coordinator.current_user_id
        '3f2c...'
    """

    def __init__(self, provider: BaseAuthProvider, gate: InitializationGate):
        self.provider = provider
        self.gate = gate
        self._current_user: UserIdentity | None = None
        self._initialized = False
        self._operation_lock = asyncio.Lock()
        self._events: asyncio.Queue[None] = asyncio.Queue()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._reconcile_task: asyncio.Task | None = None
        self._unsubscribe: Unsubscribe | None = None

    @property
    def current_user(self) -> UserIdentity | None:
        return self._current_user

    @property
    def current_user_id(self) -> str:
        """Current UID, or an empty string when logged out."""
        if self._current_user is None:
            return ""
        return self._current_user.user_id

    @property
    def is_logged_in(self) -> bool:
        return self._current_user is not None

    @property
    def is_ready(self) -> bool:
        return self._initialized

    async def wait_for_ready(self) -> bool:
        """
        Wait for the provider and start tracking its session.

        Starts the gate if nobody has yet (begin() is a no-op otherwise).
        On success, subscribes to provider state changes and adopts any
        session the provider restored. If the gate failed, the coordinator
        stays uninitialized and every operation returns NOT_READY.

        Returns:
            True if the coordinator is ready for use
        """
        if self._initialized:
            return True

        self.gate.begin()
        if not await self.gate.wait_until_settled():
            logger.error(
                f"Provider not available, authentication disabled: {self.gate.diagnostic}",
                extra={"error_type": "coordinator_not_ready"},
            )
            return False

        if self._initialized:
            return True

        self._loop = asyncio.get_running_loop()
        self._unsubscribe = self.provider.on_state_changed(self._on_provider_state_changed)
        self._reconcile_task = asyncio.create_task(self._reconcile_loop())

        restored = self.provider.current_user()
        if restored is not None:
            logger.info(f"Restored cached session: {restored.user_id}")
        self._replace_current_user(restored, source="restore")
        self._initialized = True

        logger.info("Session coordinator initialized")
        return True

    async def sign_in_anonymously(self) -> AuthOperationResult:
        """Start an anonymous session."""
        return await self._run_auth_operation(
            "sign_in_anonymously", self.provider.sign_in_anonymously
        )

    async def create_user(self, email: str, password: str) -> AuthOperationResult:
        """
        Register an email/password account and sign it in.

        Input is passed through unvalidated; provider-side rejections
        (WEAK_PASSWORD, EMAIL_EXISTS, ...) come back as translated errors.
        """
        return await self._run_auth_operation(
            "create_user",
            lambda: self.provider.create_user_with_email_password(email, password),
        )

    async def sign_in(self, email: str, password: str) -> AuthOperationResult:
        """Sign in with email and password."""
        return await self._run_auth_operation(
            "sign_in",
            lambda: self.provider.sign_in_with_email_password(email, password),
        )

    async def sign_out(self) -> None:
        """
        Sign out the current user.

        Best-effort: provider failures are logged and the local session is
        cleared regardless. No-op when nobody is signed in.
        """
        if not self._initialized or self._current_user is None:
            return

        async with self._operation_lock:
            user = self._current_user
            if user is None:
                return

            logger.info(f"Signing out: {user.user_id}")
            try:
                await self.provider.sign_out()
            except Exception as e:
                logger.warning(
                    f"Provider sign-out failed, clearing local session anyway: {e}",
                    extra={"error_type": "sign_out_failed", "user_id": user.user_id},
                )

            self._replace_current_user(None, source="sign_out")

    async def wait_for_reconciliation(self) -> None:
        """Wait until every queued provider notification has been applied."""
        # Let notifications scheduled from other threads reach the queue.
        await asyncio.sleep(0)
        await self._events.join()

    async def close(self) -> None:
        """
        Stop tracking the provider session.

        Notifications already queued are applied before the local session is
        cleared, so pending waiters on wait_for_reconciliation() are released.
        Should be called during application shutdown.
        """
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

        if self._reconcile_task is not None:
            self._reconcile_task.cancel()
            try:
                await self._reconcile_task
            except asyncio.CancelledError:
                pass
            self._reconcile_task = None

        self._drain_events()
        self._replace_current_user(None, source="close")
        self._initialized = False
        logger.info("Session coordinator closed")

    async def _run_auth_operation(
        self,
        operation: str,
        call: Callable[[], Awaitable[UserIdentity]],
    ) -> AuthOperationResult:
        if not self._initialized:
            logger.warning(f"{operation} rejected: coordinator not initialized")
            return AuthOperationResult.failed(
                AuthError(
                    category=ErrorCategory.NOT_READY,
                    message=message_for(ErrorCategory.NOT_READY),
                )
            )

        async with self._operation_lock:
            logger.info(f"{operation} started")
            try:
                identity = await call()
            except Exception as e:
                error = describe(str(e))
                logger.error(
                    f"{operation} failed: {error.message}",
                    extra={
                        "error_type": "auth_operation_failed",
                        "operation": operation,
                        "category": error.category.value,
                        "raw_error": str(e),
                    },
                )
                PostHogService().capture(
                    distinct_id=self.current_user_id or "anonymous",
                    event="auth_failed",
                    properties={"operation": operation, "error_category": error.category.value},
                )
                return AuthOperationResult.failed(error)

            self._replace_current_user(identity, source=operation)

        logger.info(f"{operation} succeeded: {identity.user_id}")
        PostHogService().capture(
            distinct_id=identity.user_id,
            event="auth_succeeded",
            properties={"operation": operation, "is_anonymous": identity.is_anonymous},
        )
        return AuthOperationResult.ok()

    def _on_provider_state_changed(self) -> None:
        """Provider callback; may fire on any thread."""
        loop = self._loop
        if loop is None or loop.is_closed():
            return

        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None

        if running is loop:
            self._enqueue_event()
        else:
            loop.call_soon_threadsafe(self._enqueue_event)

    def _enqueue_event(self) -> None:
        # Callbacks scheduled from other threads can land after close().
        if self._reconcile_task is None:
            return
        self._events.put_nowait(None)

    async def _reconcile_loop(self) -> None:
        while True:
            await self._events.get()
            self._apply_event()

    def _drain_events(self) -> None:
        drained = 0
        while not self._events.empty():
            self._events.get_nowait()
            self._apply_event()
            drained += 1
        if drained:
            logger.debug(f"Applied {drained} pending notification(s) on close")

    def _apply_event(self) -> None:
        try:
            self.reconcile()
        except Exception as e:
            logger.error(f"Session reconciliation failed: {e}", exc_info=True)
        finally:
            self._events.task_done()

    def reconcile(self) -> None:
        """
        Bring the local session in line with the provider's.

        The provider is authoritative: a missing provider user clears the
        local session (external sign-out), and a different provider user
        replaces it.
        """
        provider_user = self.provider.current_user()
        local_user = self._current_user

        if _same_user(provider_user, local_user):
            return

        if provider_user is None:
            logger.info(
                f"Session ended by provider: {local_user.user_id}",
                extra={"user_id": local_user.user_id},
            )
            PostHogService().capture(
                distinct_id=local_user.user_id,
                event="session_revoked",
            )
        else:
            logger.info(f"Provider reports signed-in user: {provider_user.user_id}")

        self._replace_current_user(provider_user, source="provider")

    def _replace_current_user(self, user: UserIdentity | None, source: str) -> None:
        # Must not await: every write to the slot goes through here.
        previous = self._current_user
        self._current_user = user
        if not _same_user(previous, user):
            logger.debug(
                "Current user replaced",
                extra={
                    "source": source,
                    "previous_user_id": previous.user_id if previous else None,
                    "user_id": user.user_id if user else None,
                },
            )


def _same_user(a: UserIdentity | None, b: UserIdentity | None) -> bool:
    if a is None or b is None:
        return a is b
    return a.user_id == b.user_id
