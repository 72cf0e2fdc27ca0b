"""Translation of raw provider error text into error categories."""

from src.authsession.auth.models import AuthError, ErrorCategory

# Ordered: the first token found in the raw message wins.
ERROR_TOKENS: list[tuple[str, ErrorCategory]] = [
    ("EMAIL_NOT_FOUND", ErrorCategory.EMAIL_NOT_FOUND),
    ("INVALID_PASSWORD", ErrorCategory.INVALID_PASSWORD),
    ("EMAIL_EXISTS", ErrorCategory.EMAIL_ALREADY_EXISTS),
    ("WEAK_PASSWORD", ErrorCategory.WEAK_PASSWORD),
    ("INVALID_EMAIL", ErrorCategory.INVALID_EMAIL_FORMAT),
    ("USER_DISABLED", ErrorCategory.USER_DISABLED),
    ("TOO_MANY_REQUESTS", ErrorCategory.RATE_LIMITED),
    ("NETWORK_ERROR", ErrorCategory.NETWORK_UNAVAILABLE),
]

ERROR_MESSAGES: dict[ErrorCategory, str] = {
    ErrorCategory.NOT_READY: "Authentication service is not initialized",
    ErrorCategory.EMAIL_NOT_FOUND: "Email address not found",
    ErrorCategory.INVALID_PASSWORD: "Incorrect password",
    ErrorCategory.EMAIL_ALREADY_EXISTS: "This email is already registered",
    ErrorCategory.WEAK_PASSWORD: "Password is too weak (at least 6 characters)",
    ErrorCategory.INVALID_EMAIL_FORMAT: "Invalid email format",
    ErrorCategory.USER_DISABLED: "This account has been disabled",
    ErrorCategory.RATE_LIMITED: "Too many attempts. Please try again later",
    ErrorCategory.NETWORK_UNAVAILABLE: "Check your network connection",
    ErrorCategory.UNKNOWN_EMPTY: "Unknown error",
}


def translate(raw: str | None) -> ErrorCategory:
    """
    Map raw provider error text to an error category.

    Matching is a case-sensitive substring search over ERROR_TOKENS.

    Args:
        raw: Error text reported by the provider (may be empty or None)

    Returns:
        The first matching category, UNKNOWN_EMPTY for empty input,
        or UNKNOWN when no token matches

    Example:
        >>> translate("foo INVALID_PASSWORD bar")
        <ErrorCategory.INVALID_PASSWORD: 'invalid_password'>
    """
    if not raw:
        return ErrorCategory.UNKNOWN_EMPTY

    for token, category in ERROR_TOKENS:
        if token in raw:
            return category

    return ErrorCategory.UNKNOWN


def message_for(category: ErrorCategory) -> str:
    """Fixed display message for a category (empty for UNKNOWN)."""
    return ERROR_MESSAGES.get(category, "")


def describe(raw: str | None) -> AuthError:
    """
    Translate raw provider text into an AuthError with a display message.

    Unmapped errors keep the raw text verbatim so unseen provider codes
    stay diagnosable.
    """
    category = translate(raw)
    if category is ErrorCategory.UNKNOWN:
        return AuthError(category=category, message=raw or "")
    return AuthError(category=category, message=message_for(category))
