"""Shared services module for external integrations."""

from src.authsession.services.analytics.posthog import PostHogService

__all__ = [
    "PostHogService",
]
