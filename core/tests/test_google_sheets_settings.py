"""
core/tests/test_google_sheets_settings.py
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from core.settings.logic.google_sheets_settings import load_google_sheets_config, save_google_sheets_config
from core.settings.logic.settings_store import SettingsStore


class TestGoogleSheetsSettings(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "config.json"
        self.store = SettingsStore(self.path)
        self.store.initialize()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_unconfigured_by_default(self) -> None:
        cfg = load_google_sheets_config(self.store)
        self.assertEqual(cfg.sheet_url, "")
        self.assertFalse(cfg.is_configured)

    def test_save_persists_values(self) -> None:
        self.assertTrue(save_google_sheets_config(
            self.store, " https://docs.google.com/sheet ", "sa@project.iam.gserviceaccount.com"))
        reloaded = SettingsStore(self.path)
        reloaded.initialize()
        cfg = load_google_sheets_config(reloaded)
        self.assertEqual(cfg.sheet_url, "https://docs.google.com/sheet")
        self.assertTrue(cfg.is_configured)

    def test_blank_input_keeps_stored_value(self) -> None:
        save_google_sheets_config(self.store, "https://a", "a@b")
        save_google_sheets_config(self.store, "", "   ")
        cfg = load_google_sheets_config(self.store)
        self.assertEqual((cfg.sheet_url, cfg.service_account_email), ("https://a", "a@b"))


if __name__ == "__main__":
    unittest.main()
