"""
core/i18n/translation_manager.py
================================

Text lookup for the UI.

Resolution order for ``t(key)``:
    1. language bundle loaded from ``labels.tsv`` files
       (header ``label<TAB>de<TAB>en``)
    2. built-in table keyed ``<key>_<lang>``
    3. caller fallback, else the bare key

Fehlende Einträge werden pro (key, language) genau einmal geloggt.
"""
from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional

from core.i18n.language import Language

logger = logging.getLogger(__name__)

LABELS_TSV = Path(__file__).resolve().parent / "labels.tsv"

BUILTIN_TEXTS: Dict[str, str] = {
    "home_de": "Start",
    "home_en": "Home",
    "history_de": "Verlauf",
    "history_en": "History",
    "settings_de": "Einstellungen",
    "settings_en": "Settings",
    "orders_de": "Bestellungen",
    "orders_en": "Orders",
    "telcArea_de": "telc Bereich",
    "telcArea_en": "Telc Area",
    "manageParticipants_de": "Teilnehmer verwalten",
    "manageParticipants_en": "Manage Participants",
    "exams_de": "Prüfungen",
    "exams_en": "Exams",
    "needsAttention_de": "Braucht Aufmerksamkeit",
    "needsAttention_en": "Needs Attention",
    "newOrders_de": "Neue Bestellungen",
    "newOrders_en": "New Orders",
    "searchOrders_de": "Bestellungen suchen",
    "searchOrders_en": "Search Orders",
    "export_de": "Exportieren",
    "export_en": "Export",
    "openWebsite_de": "Website öffnen",
    "openWebsite_en": "Open Website",
    "back_de": "Zurück",
    "back_en": "Back",
    "notifications_de": "Mitteilungen",
    "notifications_en": "Notifications",
    "light_de": "Hell",
    "light_en": "Light",
    "dark_de": "Dunkel",
    "dark_en": "Dark",
    "addPerson_de": "Person hinzufügen",
    "addPerson_en": "Add Person",
    "orderNumber_de": "Bestellnummer",
    "orderNumber_en": "Order Number",
    "lastName_de": "Nachname",
    "lastName_en": "Last name",
    "firstName_de": "Vorname",
    "firstName_en": "First name",
    "email_de": "Email",
    "email_en": "Email",
    "phone_de": "Tel.Nr.",
    "phone_en": "Phone",
    "save_de": "Speichern",
    "save_en": "Save",
    "cancel_de": "Abbrechen",
    "cancel_en": "Cancel",
    "loading_de": "Laden...",
    "loading_en": "Loading...",
    "error_de": "Fehler",
    "error_en": "Error",
    "success_de": "Erfolgreich",
    "success_en": "Success",
}


class TranslationManager:
    """
    Verwaltet Übersetzungen aus labels.tsv Dateien plus eingebauter Tabelle.
    Never raises on lookup.
    """

    def __init__(self, language: Language | str = Language.DE,
                 builtin: Optional[Dict[str, str]] = None) -> None:
        self.translations: Dict[str, Dict[str, str]] = {}  # {lang: {label: text}}
        self.coverage: Dict[str, float] = {}
        self.builtin = dict(BUILTIN_TEXTS if builtin is None else builtin)
        self._language = Language.parse(language)
        self._missing_keys_logged: set[tuple[str, str]] = set()

    # ------------------------------------------------------------------ #
    #  Loading                                                           #
    # ------------------------------------------------------------------ #
    def load_files(self, file_paths: Iterable[Path]) -> None:
        """Lädt mehrere TSV-Dateien; spätere Dateien überschreiben frühere."""
        self.translations = {}
        self.coverage = {}
        all_labels: set[str] = set()

        for file_path in file_paths:
            try:
                with open(file_path, encoding="utf-8", newline="") as f:
                    reader = csv.reader(f, delimiter="\t")
                    header = next(reader, None)
                    if not header:
                        continue
                    langs = [h.strip() for h in header[1:]]
                    for lang in langs:
                        self.translations.setdefault(lang, {})
                    for row in reader:
                        if not row or not row[0].strip():
                            continue
                        label = row[0].strip()
                        all_labels.add(label)
                        for i, lang in enumerate(langs):
                            text = row[i + 1] if i + 1 < len(row) else ""
                            if text or label not in self.translations[lang]:
                                self.translations[lang][label] = text
            except OSError as exc:
                logger.warning("Translation file %s not readable: %s", file_path, exc)

        row_count = len(all_labels)
        for lang, texts in self.translations.items():
            translated = sum(bool(v) for v in texts.values())
            self.coverage[lang] = translated / row_count if row_count else 1.0
        logger.debug("Loaded %d labels for %s", row_count, sorted(self.translations))

    # ------------------------------------------------------------------ #
    #  Language                                                          #
    # ------------------------------------------------------------------ #
    @property
    def current_language(self) -> Language:
        return self._language

    def set_language(self, language: Language | str) -> Language:
        self._language = Language.parse(language)
        return self._language

    # ------------------------------------------------------------------ #
    #  Lookup                                                            #
    # ------------------------------------------------------------------ #
    def t(self, key: str, fallback: Optional[str] = None, lang: Language | str | None = None) -> str:
        code = Language.from_string(lang).value if lang is not None else self._language.value

        value = self.translations.get(code, {}).get(key)
        if value:
            return value

        value = self.builtin.get(f"{key}_{code}")
        if value:
            return value

        if (key, code) not in self._missing_keys_logged:
            self._missing_keys_logged.add((key, code))
            logger.debug("Missing translation key '%s' (lang=%s)", key, code)

        return fallback if fallback is not None else key

    __call__ = t
