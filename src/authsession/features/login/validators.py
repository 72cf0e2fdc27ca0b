"""Credential validators for the login form."""

from pydantic import BaseModel

from src.authsession.config import settings

MISSING_CREDENTIALS_MESSAGE = "Please enter your email and password."


class CredentialCheck(BaseModel):
    """Outcome of validating login form input."""

    valid: bool
    email: str  # Trimmed
    message: str | None = None


def validate_credentials(email: str, password: str, *, registering: bool = False) -> CredentialCheck:
    """
    Validate email/password input before it reaches the coordinator.

    Args:
        email: Raw email field text (surrounding whitespace is trimmed)
        password: Raw password field text (not trimmed)
        registering: Apply the minimum password length rule

    Returns:
        CredentialCheck with the trimmed email and an error message if invalid
    """
    email = (email or "").strip()
    password = password or ""

    if not email or not password:
        return CredentialCheck(valid=False, email=email, message=MISSING_CREDENTIALS_MESSAGE)

    if registering and len(password) < settings.min_password_length:
        return CredentialCheck(
            valid=False,
            email=email,
            message=f"Password must be at least {settings.min_password_length} characters.",
        )

    return CredentialCheck(valid=True, email=email)
