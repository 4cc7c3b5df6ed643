"""telc area (placeholder until the sheet integration exists)."""
from __future__ import annotations

from tkinter import ttk

from core.theme.gui.theme_applier import MUTED_LABEL, TITLE_LABEL
from framework.gui.page_base import BasePage


class TelcView(BasePage):
    def _build_ui(self) -> None:
        self.title_label = ttk.Label(self, style=TITLE_LABEL)
        self.title_label.pack(anchor="w", padx=24, pady=(24, 8))
        self.placeholder = ttk.Label(self, style=MUTED_LABEL)
        self.placeholder.pack(anchor="w", padx=24)

    def update_texts(self) -> None:
        self.title_label.configure(text=self.T("telcArea"))
        self.placeholder.configure(text=self.T("telcPlaceholder", "Telc area functionality coming soon."))
