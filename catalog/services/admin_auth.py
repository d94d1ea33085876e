# catalog/services/admin_auth.py

"""Shared-secret gate in front of the admin screens."""

import hmac
import logging

from catalog.config.settings import Settings

logger = logging.getLogger("catalog.auth")


class AdminGate:
    """Grant admin access to whoever knows the shared password."""

    def __init__(self, password: str | None = None) -> None:
        self._password = (
            password if password is not None else Settings.ADMIN_PASSWORD
        )
        self.authorized = False

    def login(self, attempt: str) -> bool:
        """Compare *attempt* to the shared secret and record the result."""
        self.authorized = hmac.compare_digest(
            attempt.encode("utf-8"), self._password.encode("utf-8"),
        )
        if self.authorized:
            logger.info("Admin login accepted")
        else:
            logger.warning("Admin login rejected")
        return self.authorized

    def logout(self) -> None:
        """Drop the authorized capability."""
        self.authorized = False
