"""Inert placeholder shown when a page cannot be loaded."""
from __future__ import annotations

from tkinter import ttk

from core.theme.gui.theme_applier import ERROR_LABEL, MUTED_LABEL
from framework.gui.page_base import BasePage


class ErrorView(BasePage):
    def __init__(self, parent, *, context, page: str, detail: str | None = None) -> None:
        self.page = page
        self.detail = detail
        super().__init__(parent, context=context)

    def _build_ui(self) -> None:
        self._label = ttk.Label(self, style=ERROR_LABEL)
        self._label.pack(expand=True, pady=(40, 4))
        self._detail = ttk.Label(self, style=MUTED_LABEL, text=self.detail or "", wraplength=600)
        self._detail.pack(pady=(0, 40))

    def update_texts(self) -> None:
        self._label.configure(text=self.T("pageNotFound", "Page not found: {page}").format(page=self.page))
