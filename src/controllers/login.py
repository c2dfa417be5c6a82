from __future__ import annotations

import logging
from typing import Literal

from src.config import settings
from src.controllers.base import FormError
from src.db import Backend, BackendError

logger = logging.getLogger(__name__)

Mode = Literal["login", "register"]

HOME_PATH = "/"
REGISTERED = "Account created! Check your email to confirm, or sign in now."


class LoginController:
    """Sign-in / register form state."""

    def __init__(self, backend: Backend) -> None:
        self.backend = backend
        self.mode: Mode = "login"
        self.loading = False
        self.error: str | None = None
        self.success: str | None = None
        self.redirect_to: str | None = None

    def check_session(self) -> bool:
        """Send an already signed-in visitor back home."""
        if self.backend.get_current_user() is not None:
            self.redirect_to = HOME_PATH
            return True
        return False

    def set_mode(self, mode: Mode) -> None:
        self.mode = mode
        self.error = None
        self.success = None

    def switch_mode(self) -> None:
        self.set_mode("register" if self.mode == "login" else "login")

    def validate(self, email: str, password: str, confirm_password: str = "") -> None:
        if not email or not password:
            raise FormError("Email and password are required.")
        if self.mode == "register" and password != confirm_password:
            raise FormError("Passwords do not match.")
        if len(password) < settings.MIN_PASSWORD_LENGTH:
            raise FormError(f"Password must be at least {settings.MIN_PASSWORD_LENGTH} characters.")

    def submit(self, email: str, password: str, confirm_password: str = "") -> bool:
        """Sign in or register. Returns True on success; failures land in ``error``."""
        self.error = None
        self.success = None
        try:
            self.validate(email, password, confirm_password)
        except FormError as e:
            self.error = e.message
            return False

        self.loading = True
        try:
            if self.mode == "login":
                self.backend.sign_in_with_password(email, password)
                logger.info("Signed in %s", email)
                self.redirect_to = HOME_PATH
            else:
                self.backend.sign_up(email, password)
                logger.info("Registered %s", email)
                self.success = REGISTERED
                self.mode = "login"
        except BackendError as e:
            self.error = e.message
            return False
        finally:
            self.loading = False
        return True
