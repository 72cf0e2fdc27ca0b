"""In-memory auth provider for local development and tests."""

import logging
from dataclasses import dataclass
from uuid import uuid4

from src.authsession.auth.exceptions import ProviderError
from src.authsession.auth.models import UserIdentity
from src.authsession.auth.provider import (
    BaseAuthProvider,
    DependencyStatus,
    StateChangedHandler,
    Unsubscribe,
)

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


@dataclass
class _Account:
    """Registered email/password account."""

    user_id: str
    email: str
    password: str
    disabled: bool = False


class InMemoryAuthProvider(BaseAuthProvider):
    """
    Auth provider backed by process memory.

    Mirrors the remote provider's error codes so callers exercise the same
    translation paths. Test hooks (fail_next, revoke_session, restore_session)
    simulate remote behaviour that cannot be triggered locally.
    """

    def __init__(self, dependency_status: DependencyStatus = DependencyStatus.AVAILABLE):
        self.dependency_status = dependency_status
        self._accounts: dict[str, _Account] = {}
        self._current: UserIdentity | None = None
        self._handlers: list[StateChangedHandler] = []
        self._pending_failures: list[str] = []

    async def check_and_fix_dependencies(self) -> DependencyStatus:
        self._raise_pending_failure()
        return self.dependency_status

    async def sign_in_anonymously(self) -> UserIdentity:
        self._raise_pending_failure()
        identity = UserIdentity(user_id=uuid4().hex, is_anonymous=True)
        self._set_current(identity)
        return identity

    async def create_user_with_email_password(self, email: str, password: str) -> UserIdentity:
        self._raise_pending_failure()
        if "@" not in email:
            raise ProviderError("The email address is badly formatted (INVALID_EMAIL)")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ProviderError(
                f"WEAK_PASSWORD : Password should be at least {MIN_PASSWORD_LENGTH} characters"
            )
        if email in self._accounts:
            raise ProviderError("The email address is already in use (EMAIL_EXISTS)")

        account = _Account(user_id=uuid4().hex, email=email, password=password)
        self._accounts[email] = account
        logger.debug(f"Registered account {account.user_id}", extra={"user_id": account.user_id})

        identity = UserIdentity(user_id=account.user_id, email=email)
        self._set_current(identity)
        return identity

    async def sign_in_with_email_password(self, email: str, password: str) -> UserIdentity:
        self._raise_pending_failure()
        account = self._accounts.get(email)
        if account is None:
            raise ProviderError("There is no user record (EMAIL_NOT_FOUND)")
        if account.password != password:
            raise ProviderError("The password is invalid (INVALID_PASSWORD)")
        if account.disabled:
            raise ProviderError("The user account has been disabled (USER_DISABLED)")

        identity = UserIdentity(user_id=account.user_id, email=email)
        self._set_current(identity)
        return identity

    async def sign_out(self) -> None:
        self._raise_pending_failure()
        self._set_current(None)

    def current_user(self) -> UserIdentity | None:
        return self._current

    def on_state_changed(self, handler: StateChangedHandler) -> Unsubscribe:
        self._handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe

    # Test hooks

    def fail_next(self, message: str) -> None:
        """Make the next provider call raise ProviderError(message)."""
        self._pending_failures.append(message)

    def disable_account(self, email: str) -> None:
        self._accounts[email].disabled = True

    def revoke_session(self) -> None:
        """Simulate a server-side sign-out (token revocation, expiry)."""
        self._set_current(None)

    def restore_session(self, identity: UserIdentity) -> None:
        """Simulate the SDK restoring a cached session."""
        self._set_current(identity)

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)

    def _raise_pending_failure(self) -> None:
        if self._pending_failures:
            raise ProviderError(self._pending_failures.pop(0))

    def _set_current(self, identity: UserIdentity | None) -> None:
        self._current = identity
        for handler in list(self._handlers):
            handler()
