"""Authentication session management backed by a remote identity provider."""

from src.authsession.auth.coordinator import SessionCoordinator
from src.authsession.auth.dependencies import get_session_coordinator, set_session_coordinator
from src.authsession.auth.error_translator import describe, translate
from src.authsession.auth.exceptions import AuthSessionError, InitializationError, ProviderError
from src.authsession.auth.in_memory_provider import InMemoryAuthProvider
from src.authsession.auth.initialization import GateState, InitializationGate
from src.authsession.auth.models import (
    AuthError,
    AuthOperationResult,
    ErrorCategory,
    UserIdentity,
)
from src.authsession.auth.provider import BaseAuthProvider, DependencyStatus

__all__ = [
    "SessionCoordinator",
    "get_session_coordinator",
    "set_session_coordinator",
    "describe",
    "translate",
    "AuthSessionError",
    "InitializationError",
    "ProviderError",
    "InMemoryAuthProvider",
    "GateState",
    "InitializationGate",
    "AuthError",
    "AuthOperationResult",
    "ErrorCategory",
    "UserIdentity",
    "BaseAuthProvider",
    "DependencyStatus",
]
