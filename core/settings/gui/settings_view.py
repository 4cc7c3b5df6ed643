"""
core/settings/gui/settings_view.py
==================================

Einstellungen: Abschnittsliste links, Seitenpanel rechts.

• Sprache      → NavigationController.set_language
• Google Sheets → telcSheetUrl / telcSaEmail (private key is never stored)
• Bestellungen  → orders website URL, display user name
• Prüfungsverwaltung, Emails, Hintergrundfoto → placeholder
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, Optional

from core.i18n.language import Language
from core.settings.logic.google_sheets_settings import load_google_sheets_config, save_google_sheets_config
from core.theme.gui.theme_applier import (
    CARD_FRAME,
    LANG_BUTTON_ACTIVE,
    MUTED_LABEL,
    SIDEBAR_BUTTON,
    SIDEBAR_BUTTON_ACTIVE,
    TITLE_LABEL,
)
from framework.gui.page_base import BasePage

SECTIONS: Dict[str, str] = {
    "language": "language",
    "googleSheets": "googleSheets",
    "orders": "orders",
    "exams": "examsManagement",
    "emails": "emails",
    "background": "backgroundPhoto",
}

EVENT_SETTINGS_SAVED = "settings_saved"


class SettingsView(BasePage):
    def _build_ui(self) -> None:
        self.current_section: Optional[str] = None

        self.title_label = ttk.Label(self, style=TITLE_LABEL)
        self.title_label.pack(anchor="w", padx=24, pady=(24, 12))

        body = ttk.Frame(self)
        body.pack(fill="both", expand=True, padx=24, pady=(0, 24))

        menu = ttk.Frame(body)
        menu.pack(side="left", fill="y")
        self.section_buttons: Dict[str, ttk.Button] = {}
        for key in SECTIONS:
            btn = ttk.Button(menu, style=SIDEBAR_BUTTON, width=26,
                             command=lambda k=key: self.open_section(k))
            btn.pack(fill="x", pady=3)
            self.section_buttons[key] = btn

        # ---------- Seitenpanel ----------------------------------------
        self.panel = ttk.Frame(body, style=CARD_FRAME, padding=16)
        head = ttk.Frame(self.panel, style=CARD_FRAME)
        head.pack(fill="x")
        self.panel_title = ttk.Label(head, style=TITLE_LABEL)
        self.panel_title.pack(side="left")
        self.close_button = ttk.Button(head, text="✕", width=3, command=self.close_panel)
        self.close_button.pack(side="right")

        self.contents: Dict[str, ttk.Frame] = {}
        self._placeholders: list[ttk.Label] = []
        builders: Dict[str, Callable[[ttk.Frame], None]] = {
            "language": self._build_language,
            "googleSheets": self._build_google_sheets,
            "orders": self._build_orders,
        }
        for key in SECTIONS:
            frame = ttk.Frame(self.panel, style=CARD_FRAME)
            builders.get(key, self._build_placeholder)(frame)
            self.contents[key] = frame

    # ---------------- Abschnitte ------------------------------------------ #
    def _build_language(self, frame: ttk.Frame) -> None:
        self.lang_buttons: Dict[Language, ttk.Button] = {}
        row = ttk.Frame(frame, style=CARD_FRAME)
        row.pack(anchor="w", pady=12)
        for lang in Language:
            btn = ttk.Button(row, command=lambda l=lang: self._set_language(l))
            btn.pack(side="left", padx=(0, 8))
            self.lang_buttons[lang] = btn

    def _build_google_sheets(self, frame: ttk.Frame) -> None:
        self.sheet_url_var = tk.StringVar()
        self.sa_email_var = tk.StringVar()
        self.sheet_url_label = ttk.Label(frame)
        self.sheet_url_label.pack(anchor="w", pady=(12, 2))
        ttk.Entry(frame, textvariable=self.sheet_url_var, width=60).pack(anchor="w", fill="x")
        self.sa_email_label = ttk.Label(frame)
        self.sa_email_label.pack(anchor="w", pady=(8, 2))
        ttk.Entry(frame, textvariable=self.sa_email_var, width=60).pack(anchor="w", fill="x")
        self.private_key_label = ttk.Label(frame)
        self.private_key_label.pack(anchor="w", pady=(8, 2))
        self.private_key_text = tk.Text(frame, height=5, width=60)
        self.private_key_text.pack(anchor="w", fill="x")
        self.sheets_save_button = ttk.Button(frame, command=self._save_google_sheets)
        self.sheets_save_button.pack(anchor="e", pady=(12, 0))

    def _build_orders(self, frame: ttk.Frame) -> None:
        self.website_var = tk.StringVar()
        self.user_name_var = tk.StringVar()
        self.website_label = ttk.Label(frame)
        self.website_label.pack(anchor="w", pady=(12, 2))
        ttk.Entry(frame, textvariable=self.website_var, width=60).pack(anchor="w", fill="x")
        self.user_name_label = ttk.Label(frame)
        self.user_name_label.pack(anchor="w", pady=(8, 2))
        ttk.Entry(frame, textvariable=self.user_name_var, width=30).pack(anchor="w")
        self.orders_save_button = ttk.Button(frame, command=self._save_orders)
        self.orders_save_button.pack(anchor="e", pady=(12, 0))

    def _build_placeholder(self, frame: ttk.Frame) -> None:
        label = ttk.Label(frame, style=MUTED_LABEL)
        label.pack(anchor="w", pady=12)
        self._placeholders.append(label)

    # ---------------- Texte ----------------------------------------------- #
    def update_texts(self) -> None:
        self.title_label.configure(text=self.T("settings"))
        for key, btn in self.section_buttons.items():
            btn.configure(text=self.T(SECTIONS[key]))
        if self.current_section is not None:
            self.panel_title.configure(text=self.T(SECTIONS[self.current_section]))

        self.lang_buttons[Language.DE].configure(text=self.T("german"))
        self.lang_buttons[Language.EN].configure(text=self.T("english"))
        self._mark_language()

        self.sheet_url_label.configure(text=self.T("sheetUrl"))
        self.sa_email_label.configure(text=self.T("serviceAccountEmail"))
        self.private_key_label.configure(text=self.T("privateKey"))
        self.sheets_save_button.configure(text=self.T("save"))

        self.website_label.configure(text=self.T("ordersWebsiteUrl"))
        self.user_name_label.configure(text=self.T("userName"))
        self.orders_save_button.configure(text=self.T("save"))

        for label in self._placeholders:
            label.configure(text=self.T("comingSoon"))

    def _mark_language(self) -> None:
        current = self.ctx.i18n.current_language
        for lang, btn in self.lang_buttons.items():
            btn.configure(style=LANG_BUTTON_ACTIVE if lang is current else "TButton")

    # ---------------- Panel ----------------------------------------------- #
    def open_section(self, key: str) -> None:
        self.current_section = key
        for k, btn in self.section_buttons.items():
            btn.configure(style=SIDEBAR_BUTTON_ACTIVE if k == key else SIDEBAR_BUTTON)
        for k, frame in self.contents.items():
            if k == key:
                frame.pack(fill="both", expand=True)
            else:
                frame.pack_forget()
        if key == "googleSheets":
            self._load_google_sheets()
        elif key == "orders":
            self.website_var.set(self.ctx.settings.get_orders_website_url())
            self.user_name_var.set(self.ctx.settings.get_current_user_name())
        self.panel.pack(side="left", fill="both", expand=True, padx=(16, 0))
        self.update_texts()

    def close_panel(self) -> None:
        self.current_section = None
        for btn in self.section_buttons.values():
            btn.configure(style=SIDEBAR_BUTTON)
        self.panel.pack_forget()

    # ---------------- Aktionen -------------------------------------------- #
    def _set_language(self, lang: Language) -> None:
        if self.navigator is not None:
            self.navigator.set_language(lang)
        else:
            self.ctx.i18n.set_language(lang)
            self.update_texts()

    def _load_google_sheets(self) -> None:
        cfg = load_google_sheets_config(self.ctx.settings)
        self.sheet_url_var.set(cfg.sheet_url)
        self.sa_email_var.set(cfg.service_account_email)
        self.private_key_text.delete("1.0", "end")

    def _save_google_sheets(self) -> None:
        try:
            saved = save_google_sheets_config(self.ctx.settings, self.sheet_url_var.get(), self.sa_email_var.get())
        except Exception as exc:  # noqa: BLE001 - UI boundary
            self.show_error(str(exc))
            return
        finally:
            self.private_key_text.delete("1.0", "end")
        self.ctx.history.log_activity(EVENT_SETTINGS_SAVED, "Google Sheets configuration saved")
        if saved:
            self.show_info(self.T("googleSheetsSaved"), title_key="success")
        else:
            self.show_warning(self.T("settingsNotPersisted"))
        self.close_panel()

    def _save_orders(self) -> None:
        settings = self.ctx.settings
        settings.set_orders_website_url(self.website_var.get().strip())
        name = self.user_name_var.get().strip()
        if name:
            settings.set_current_user_name(name)
        saved = settings.save()
        self.ctx.history.log_activity(EVENT_SETTINGS_SAVED, "Orders settings saved")
        if saved:
            self.show_info(self.T("settingsSaved"), title_key="success")
        else:
            self.show_warning(self.T("settingsNotPersisted"))
