# tests/test_admin_auth.py

"""Tests for the shared-secret admin gate."""

import unittest

from catalog.config.settings import Settings
from catalog.services.admin_auth import AdminGate


class TestAdminGate(unittest.TestCase):
    """AdminGate behaviour."""

    def test_starts_unauthorized(self) -> None:
        self.assertFalse(AdminGate("secret").authorized)

    def test_correct_password(self) -> None:
        gate = AdminGate("secret")
        self.assertTrue(gate.login("secret"))
        self.assertTrue(gate.authorized)

    def test_wrong_password(self) -> None:
        gate = AdminGate("secret")
        self.assertFalse(gate.login("Secret"))
        self.assertFalse(gate.authorized)

    def test_failed_attempt_revokes_access(self) -> None:
        """A later wrong attempt drops an earlier grant."""
        gate = AdminGate("secret")
        gate.login("secret")
        gate.login("wrong")
        self.assertFalse(gate.authorized)

    def test_logout(self) -> None:
        gate = AdminGate("secret")
        gate.login("secret")
        gate.logout()
        self.assertFalse(gate.authorized)

    def test_defaults_to_settings_password(self) -> None:
        gate = AdminGate()
        self.assertTrue(gate.login(Settings.ADMIN_PASSWORD))

    def test_non_ascii_password(self) -> None:
        gate = AdminGate("senha-ção")
        self.assertTrue(gate.login("senha-ção"))
        self.assertFalse(gate.login("senha-cao"))


if __name__ == "__main__":
    unittest.main()
