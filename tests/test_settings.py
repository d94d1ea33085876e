# tests/test_settings.py

"""Tests for the Settings configuration class."""

import unittest
from pathlib import Path

from catalog.config.settings import Settings


class TestSettings(unittest.TestCase):
    """Verify Settings constants."""

    def test_all_categories_token(self) -> None:
        """The filter sentinel is the literal 'all'."""
        self.assertEqual(Settings.ALL_CATEGORIES, "all")

    def test_store_name_is_non_empty(self) -> None:
        """STORE_NAME must be a usable table name."""
        self.assertTrue(Settings.STORE_NAME.isidentifier())

    def test_form_minimums(self) -> None:
        """Title and description minimum lengths."""
        self.assertEqual(Settings.TITLE_MIN_LENGTH, 3)
        self.assertEqual(Settings.DESCRIPTION_MIN_LENGTH, 10)

    def test_url_schemes(self) -> None:
        """Only web URLs are accepted."""
        self.assertIn("https", Settings.URL_SCHEMES)
        self.assertIn("http", Settings.URL_SCHEMES)

    def test_admin_password_is_string(self) -> None:
        """ADMIN_PASSWORD must be a non-empty string."""
        self.assertIsInstance(Settings.ADMIN_PASSWORD, str)
        self.assertTrue(Settings.ADMIN_PASSWORD)

    def test_path_constants_are_paths(self) -> None:
        """Path-typed settings are Path instances."""
        self.assertIsInstance(Settings.BASE_DIR, Path)
        self.assertIsInstance(Settings.DATA_DIR, Path)
        self.assertIsInstance(Settings.LOGS_DIR, Path)
        self.assertIsInstance(Settings.DB_PATH, Path)


if __name__ == "__main__":
    unittest.main()
