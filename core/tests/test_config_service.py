"""
core/tests/test_config_service.py

Layer precedence of the application configuration.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from core.config.config_service import DEFAULTS_INI, ConfigService


class TestConfigService(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)
        self.user_ini = self.dir / "app.ini"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _service(self, environ=None) -> ConfigService:
        base = {"LINGUAOPS_PATHS__SETTINGS_DIR": str(self.dir)}
        base.update(environ or {})
        return ConfigService(defaults_ini=DEFAULTS_INI, user_ini=self.user_ini, environ=base)

    def test_defaults(self) -> None:
        cfg = self._service()
        self.assertEqual(cfg.ui.fade_out_ms, 150)
        self.assertEqual(cfg.ui.fade_in_ms, 300)
        self.assertEqual(cfg.history.max_events, 500)
        self.assertEqual(cfg.meta_source("Ui", "fade_out_ms")["layer"], "defaults.ini")

    def test_relative_paths_resolve_below_settings_dir(self) -> None:
        cfg = self._service()
        self.assertEqual(cfg.paths.settings_path, self.dir / "config.json")
        self.assertEqual(cfg.paths.history_db_path, self.dir / "history.db")
        absolute = (self.dir / "elsewhere" / "docs").resolve()
        cfg = self._service({"LINGUAOPS_PATHS__DOCUMENTS_DIR": str(absolute)})
        self.assertEqual(cfg.paths.documents_dir_path, absolute)

    def test_environment_overrides_defaults(self) -> None:
        cfg = self._service({"LINGUAOPS_UI__FADE_OUT_MS": "0", "UNRELATED": "x"})
        self.assertEqual(cfg.ui.fade_out_ms, 0)
        self.assertEqual(cfg.meta_source("Ui", "fade_out_ms")["layer"], "env")

    def test_user_ini_wins(self) -> None:
        self.user_ini.write_text("[Ui]\nfade_out_ms = 5\n[Logging]\nlevel = DEBUG\n", encoding="utf-8")
        cfg = self._service({"LINGUAOPS_UI__FADE_OUT_MS": "0"})
        self.assertEqual(cfg.ui.fade_out_ms, 5)
        self.assertEqual(cfg.logging.level, "DEBUG")
        self.assertEqual(cfg.meta_source("Ui", "fade_out_ms")["layer"], "user")

    def test_generic_get(self) -> None:
        cfg = self._service()
        self.assertEqual(cfg.get("History", "max_events", cast=int), 500)
        self.assertIsNone(cfg.get("Nope", "nothing"))


if __name__ == "__main__":
    unittest.main()
