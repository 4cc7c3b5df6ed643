"""
core/settings/logic/google_sheets_settings.py
=============================================

Google Sheets connection values for the telc area.

Only the sheet URL and the service-account e-mail are persisted; the
private key entered in the settings page is discarded.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from core.settings.logic.settings_store import KEY_TELC_SA_EMAIL, KEY_TELC_SHEET_URL, SettingsStore

logger = logging.getLogger(__name__)


@dataclass
class GoogleSheetsConfig:
    sheet_url: str = ""
    service_account_email: str = ""

    @property
    def is_configured(self) -> bool:
        return bool(self.sheet_url and self.service_account_email)


def load_google_sheets_config(store: SettingsStore) -> GoogleSheetsConfig:
    return GoogleSheetsConfig(
        sheet_url=store.get_str(KEY_TELC_SHEET_URL, ""),
        service_account_email=store.get_str(KEY_TELC_SA_EMAIL, ""),
    )


def save_google_sheets_config(store: SettingsStore, sheet_url: str, service_account_email: str) -> bool:
    """
    Blank inputs keep the stored value. Returns the result of ``store.save()``.
    """
    sheet_url = (sheet_url or "").strip()
    service_account_email = (service_account_email or "").strip()
    if sheet_url:
        store.set_str(KEY_TELC_SHEET_URL, sheet_url)
    if service_account_email:
        store.set_str(KEY_TELC_SA_EMAIL, service_account_email)
    saved = store.save()
    logger.info("Google Sheets configuration saved (persisted=%s)", saved)
    return saved
