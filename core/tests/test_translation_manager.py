"""
core/tests/test_translation_manager.py

Unit tests for text lookup (TSV bundle + built-in table).
"""

from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path

from core.i18n.language import Language
from core.i18n.translation_manager import LABELS_TSV, TranslationManager


class TestTranslationManager(unittest.TestCase):
    def setUp(self) -> None:
        self.tm = TranslationManager()
        self.tm.load_files([LABELS_TSV])

    def test_language_switch(self) -> None:
        self.tm.set_language("en")
        self.assertEqual(self.tm.t("home"), "Home")
        self.tm.set_language(Language.DE)
        self.assertEqual(self.tm.t("home"), "Start")

    def test_missing_key_returns_fallback_or_key(self) -> None:
        self.assertEqual(self.tm.t("doesNotExist", "X"), "X")
        self.assertEqual(self.tm.t("doesNotExist"), "doesNotExist")

    def test_builtin_table_without_bundle(self) -> None:
        tm = TranslationManager("en")
        self.assertEqual(tm.t("back"), "Back")
        self.assertEqual(tm.t("telcArea"), "Telc Area")
        tm.set_language("de")
        self.assertEqual(tm.t("exams"), "Prüfungen")

    def test_empty_bundle_entry_falls_back_to_builtin(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            tsv = Path(tmp) / "labels.tsv"
            tsv.write_text("label\tde\ten\nhome\t\t\ncustom\tEigen\tOwn\n", encoding="utf-8")
            tm = TranslationManager("de")
            tm.load_files([tsv])
        self.assertEqual(tm.t("home"), "Start")
        self.assertEqual(tm.t("custom"), "Eigen")
        self.assertEqual(tm.coverage["de"], 0.5)

    def test_explicit_language_argument(self) -> None:
        self.assertEqual(self.tm.t("settings", lang="en"), "Settings")
        self.assertEqual(self.tm.current_language, Language.DE)

    def test_invalid_language_rejected(self) -> None:
        with self.assertRaises(ValueError):
            self.tm.set_language("fr")
        self.assertEqual(self.tm.current_language, Language.DE)

    def test_missing_key_logged_once(self) -> None:
        with self.assertLogs("core.i18n.translation_manager", level=logging.DEBUG) as cm:
            self.tm.t("neverThere")
            self.tm.t("neverThere")
        self.assertEqual(len([r for r in cm.records if "neverThere" in r.getMessage()]), 1)

    def test_unreadable_file_is_skipped(self) -> None:
        tm = TranslationManager()
        tm.load_files([Path("/nonexistent/labels.tsv"), LABELS_TSV])
        self.assertEqual(tm.t("history"), "Verlauf")

    def test_every_label_has_both_languages(self) -> None:
        for lang in ("de", "en"):
            missing = [k for k, v in self.tm.translations[lang].items() if not v]
            self.assertEqual(missing, [], lang)


if __name__ == "__main__":
    unittest.main()
