"""Custom exceptions for the authentication session layer."""


class AuthSessionError(Exception):
    """Base exception for all session-related errors."""

    pass


class ProviderError(AuthSessionError):
    """
    Raised by an auth provider when a remote call fails.

    The string form is the provider's raw diagnostic text, e.g.
    ``"There is no user record (EMAIL_NOT_FOUND)"``.
    """

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class InitializationError(AuthSessionError):
    """Raised when the provider dependency check did not reach a ready state."""

    pass
