"""PostHog analytics service for auth event tracking."""

import posthog

from src.authsession.config import settings


class PostHogService:
    """Service for tracking analytics events via PostHog."""

    def __init__(self) -> None:
        """Initialize PostHog service."""
        if settings.posthog_api_key:
            posthog.api_key = settings.posthog_api_key
            posthog.host = settings.posthog_host

    def capture(self, distinct_id: str, event: str, properties: dict | None = None) -> None:
        """
        Track an event.

        Args:
            distinct_id: Provider user ID, or "anonymous" before sign-in
            event: Event name (e.g., "auth_succeeded", "session_revoked")
            properties: Optional event properties

        Example:
            >>> service = PostHogService()
            >>> service.capture(
            ...     "3f2c9a",
            ...     "auth_failed",
            ...     {"operation": "create_user", "error_category": "weak_password"}
            ... )
        """
        if not settings.posthog_api_key:
            return

        posthog.capture(distinct_id=distinct_id, event=event, properties=properties or {})
