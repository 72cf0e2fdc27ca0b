"""Process-wide access to the session coordinator."""

from src.authsession.auth.coordinator import SessionCoordinator

# Global coordinator instance (registered by main.lifespan)
_session_coordinator: SessionCoordinator | None = None


def set_session_coordinator(coordinator: SessionCoordinator | None) -> None:
    """
    Register the process-wide session coordinator.

    Called during application startup; pass None on shutdown.

    Args:
        coordinator: SessionCoordinator instance, or None to clear
    """
    global _session_coordinator
    _session_coordinator = coordinator


def get_session_coordinator() -> SessionCoordinator:
    """
    Get the process-wide session coordinator.

    Returns:
        SessionCoordinator instance

    Raises:
        RuntimeError: If no coordinator has been registered
    """
    if _session_coordinator is None:
        raise RuntimeError(
            "Session coordinator not initialized. "
            "Ensure application startup calls set_session_coordinator()."
        )
    return _session_coordinator
