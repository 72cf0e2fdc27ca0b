"""Abstract base class for auth providers."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum

from src.authsession.auth.models import UserIdentity

StateChangedHandler = Callable[[], None]
Unsubscribe = Callable[[], None]


class DependencyStatus(str, Enum):
    """Result of the provider SDK's dependency check."""

    AVAILABLE = "available"
    UNAVAILABLE_DISABLED = "unavailable_disabled"
    UNAVAILABLE_INVALID = "unavailable_invalid"
    UNAVAILABLE_MISSING = "unavailable_missing"
    UNAVAILABLE_PERMISSION = "unavailable_permission"
    UNAVAILABLE_UPDATE_REQUIRED = "unavailable_update_required"
    UNAVAILABLE_UPDATING = "unavailable_updating"
    UNAVAILABLE_OTHER = "unavailable_other"


class BaseAuthProvider(ABC):
    """
    Abstract base for remote identity providers.

    Wraps an opaque client library (e.g. the Firebase Auth SDK). Failed remote
    calls raise ProviderError carrying the provider's raw error text.
    """

    @abstractmethod
    async def check_and_fix_dependencies(self) -> DependencyStatus:
        """
        Verify (and repair where possible) the provider's runtime dependencies.

        Returns:
            DependencyStatus.AVAILABLE when the provider can be used
        """
        pass

    @abstractmethod
    async def sign_in_anonymously(self) -> UserIdentity:
        """
        Start an anonymous session.

        Raises:
            ProviderError: If the provider rejects the request
        """
        pass

    @abstractmethod
    async def create_user_with_email_password(self, email: str, password: str) -> UserIdentity:
        """
        Register a new account and sign it in.

        Raises:
            ProviderError: e.g. EMAIL_EXISTS, WEAK_PASSWORD, INVALID_EMAIL
        """
        pass

    @abstractmethod
    async def sign_in_with_email_password(self, email: str, password: str) -> UserIdentity:
        """
        Sign in an existing account.

        Raises:
            ProviderError: e.g. EMAIL_NOT_FOUND, INVALID_PASSWORD, USER_DISABLED
        """
        pass

    @abstractmethod
    async def sign_out(self) -> None:
        """End the provider's current session."""
        pass

    @abstractmethod
    def current_user(self) -> UserIdentity | None:
        """Provider's view of the signed-in user."""
        pass

    @abstractmethod
    def on_state_changed(self, handler: StateChangedHandler) -> Unsubscribe:
        """
        Register a callback fired whenever the provider's session changes.

        The handler may be invoked from any thread and receives no arguments;
        read current_user() for the new state.

        Returns:
            Callable that removes the handler
        """
        pass
