"""Login form handlers driving the session coordinator."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Protocol

from src.authsession.auth.coordinator import SessionCoordinator
from src.authsession.auth.models import AuthOperationResult
from src.authsession.config import settings
from src.authsession.features.login.validators import validate_credentials

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "Sign up with email and password, or continue anonymously."


class LoginView(Protocol):
    """Rendering surface the handler drives (implemented by the UI layer)."""

    def show_message(self, text: str, is_error: bool) -> None: ...

    def set_buttons_enabled(self, enabled: bool) -> None: ...

    def show_profile(self, text: str) -> None: ...

    def set_login_visible(self, visible: bool) -> None: ...


class LoginHandler:
    """
    Caller-layer controller for the login form.

    Validates input, keeps a single operation in flight at a time, and turns
    AuthOperationResult values into user-facing messages.
    """

    def __init__(self, coordinator: SessionCoordinator, view: LoginView):
        self.coordinator = coordinator
        self.view = view
        self.is_processing = False

    def start(self) -> None:
        """Show the default prompt, or skip the form if already signed in."""
        self.view.show_message(DEFAULT_PROMPT, False)
        if self.coordinator.is_logged_in:
            self._on_login_success()

    async def login(self, email: str, password: str) -> None:
        check = validate_credentials(email, password)
        if not check.valid:
            self._show_error(check.message)
            return

        await self._handle_auth_operation(
            "Login",
            lambda: self.coordinator.sign_in(check.email, password),
            processing_message="Signing in...",
            success_message="Signed in!",
        )

    async def register(self, email: str, password: str) -> None:
        check = validate_credentials(email, password, registering=True)
        if not check.valid:
            self._show_error(check.message)
            return

        await self._handle_auth_operation(
            "Sign up",
            lambda: self.coordinator.create_user(check.email, password),
            processing_message="Creating account...",
            success_message="Account created!",
        )

    async def login_anonymously(self) -> None:
        await self._handle_auth_operation(
            "Anonymous login",
            self.coordinator.sign_in_anonymously,
            processing_message="Signing in anonymously...",
            success_message="Signed in anonymously!",
        )

    async def logout(self) -> None:
        await self.coordinator.sign_out()
        self.view.set_login_visible(True)
        self.view.show_message(DEFAULT_PROMPT, False)
        self.view.show_profile("")

    def refresh(self) -> None:
        """Re-render from the coordinator's reconciled state."""
        if not self.coordinator.is_ready:
            return

        logged_in = self.coordinator.is_logged_in
        self.view.set_login_visible(not logged_in)
        self.view.show_profile(self.coordinator.current_user_id if logged_in else "")

    async def _handle_auth_operation(
        self,
        operation_name: str,
        operation: Callable[[], Awaitable[AuthOperationResult]],
        processing_message: str,
        success_message: str,
    ) -> None:
        if self.is_processing:
            logger.debug(f"{operation_name} ignored: another operation is in progress")
            return

        self.is_processing = True
        self.view.set_buttons_enabled(False)
        self.view.show_message(processing_message, False)

        try:
            result = await operation()
        finally:
            self.view.set_buttons_enabled(True)
            self.is_processing = False

        if result.success:
            self.view.show_message(success_message, False)
            await asyncio.sleep(settings.login_success_delay_seconds)
            self._on_login_success()
        else:
            self._show_error(f"{operation_name} failed: {result.error.message}")

    def _on_login_success(self) -> None:
        logger.info("Login successful")
        if self.coordinator.is_logged_in:
            self.view.show_profile(f"UID: {self.coordinator.current_user_id}")
        self.view.set_login_visible(False)

    def _show_error(self, message: str) -> None:
        self.view.show_message(message, True)
        logger.warning(message)
