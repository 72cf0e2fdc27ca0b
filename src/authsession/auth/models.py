"""Data models for authentication sessions."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ErrorCategory(str, Enum):
    """Closed set of caller-facing error categories."""

    NOT_READY = "not_ready"
    EMAIL_NOT_FOUND = "email_not_found"
    INVALID_PASSWORD = "invalid_password"
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    WEAK_PASSWORD = "weak_password"
    INVALID_EMAIL_FORMAT = "invalid_email_format"
    USER_DISABLED = "user_disabled"
    RATE_LIMITED = "rate_limited"
    NETWORK_UNAVAILABLE = "network_unavailable"
    UNKNOWN_EMPTY = "unknown_empty"
    UNKNOWN = "unknown"


class UserIdentity(BaseModel):
    """
    Identity handle returned by the auth provider.

    Attributes:
        user_id: Stable provider UID, never empty
        is_anonymous: True when the session came from anonymous sign-in
        email: Email address for email/password accounts
    """

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(min_length=1)
    is_anonymous: bool = False
    email: str | None = None


class AuthError(BaseModel):
    """Translated error with its display message."""

    category: ErrorCategory
    message: str


class AuthOperationResult(BaseModel):
    """
    Outcome of a sign-in or registration call.

    Example:
        >>> result = await coordinator.sign_in("user@example.com", "secret1")
        >>> if not result.success:
        ...     print(result.error.message)
    """

    success: bool
    error: AuthError | None = None

    @classmethod
    def ok(cls) -> "AuthOperationResult":
        return cls(success=True)

    @classmethod
    def failed(cls, error: AuthError) -> "AuthOperationResult":
        return cls(success=False, error=error)
