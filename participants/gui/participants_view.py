"""
participants/gui/participants_view.py

Manage participants: paste order numbers, generate confirmations or the
address post list.
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Dict, List, Optional

from core.common.errors import DocumentGenerationError
from core.theme.gui.theme_applier import CARD_FRAME, MUTED_LABEL, SIDEBAR_BUTTON, SIDEBAR_BUTTON_ACTIVE, TITLE_LABEL
from framework.gui.page_base import BasePage
from participants.logic.order_numbers import parse_order_numbers
from participants.logic.participant_documents import ParticipantDocumentService
from participants.logic.sections import Section, toggle_section


class ParticipantsView(BasePage):
    def _build_ui(self) -> None:
        self.service: ParticipantDocumentService = self.ctx.service("participant_documents")
        self.open_section: Optional[Section] = None
        self._order_numbers: List[str] = []

        self.title_label = ttk.Label(self, style=TITLE_LABEL)
        self.title_label.pack(anchor="w", padx=24, pady=(24, 12))

        body = ttk.Frame(self)
        body.pack(fill="both", expand=True, padx=24, pady=(0, 24))

        menu = ttk.Frame(body)
        menu.pack(side="left", fill="y")
        self.section_buttons: Dict[Section, ttk.Button] = {}
        for section in Section:
            btn = ttk.Button(menu, style=SIDEBAR_BUTTON, width=28,
                             command=lambda s=section: self._on_toggle(s))
            btn.pack(fill="x", pady=3)
            self.section_buttons[section] = btn

        self.panel = ttk.Frame(body, style=CARD_FRAME, padding=16)
        self.panel_title = ttk.Label(self.panel, style=TITLE_LABEL)
        self.panel_title.pack(anchor="w")
        self.input_label = ttk.Label(self.panel)
        self.input_label.pack(anchor="w", pady=(12, 4))
        self.order_input = tk.Text(self.panel, height=8, width=60, wrap="word")
        self.order_input.pack(fill="both", expand=True)
        self.order_input.bind("<<Modified>>", self._on_input_modified)
        self.parsed_label = ttk.Label(self.panel, style=MUTED_LABEL)
        self.parsed_label.pack(anchor="w", pady=(4, 8))
        self.action_button = ttk.Button(self.panel, command=self._on_generate)
        self.action_button.pack(anchor="e")

    def update_texts(self) -> None:
        self.title_label.configure(text=self.T("manageParticipants"))
        for section, btn in self.section_buttons.items():
            btn.configure(text=self.T(section.title_key))
        self.input_label.configure(text=self.T("pasteOrderNumbers"))
        self.parsed_label.configure(text=self.T("parsedCount").format(count=len(self._order_numbers)))
        if self.open_section is not None:
            self.panel_title.configure(text=self.T(self.open_section.title_key))
            self.action_button.configure(text=self.T(self.open_section.action_key))

    # ------------------------------------------------------------------ #
    def _on_toggle(self, section: Section) -> None:
        self.open_section = toggle_section(self.open_section, section)
        for s, btn in self.section_buttons.items():
            btn.configure(style=SIDEBAR_BUTTON_ACTIVE if s is self.open_section else SIDEBAR_BUTTON)
        if self.open_section is None:
            self.panel.pack_forget()
        else:
            self.panel.pack(side="left", fill="both", expand=True, padx=(16, 0))
            self.update_texts()

    def _on_input_modified(self, _event=None) -> None:
        self.order_input.edit_modified(False)
        self._order_numbers = parse_order_numbers(self.order_input.get("1.0", "end"))
        self.parsed_label.configure(text=self.T("parsedCount").format(count=len(self._order_numbers)))
        self.action_button.state(["!disabled"] if self._order_numbers else ["disabled"])

    def _on_generate(self) -> None:
        if self.open_section is None:
            return
        if not self._order_numbers:
            self.show_warning(self.T("noOrderNumbers"))
            return
        try:
            result = self.service.generate(self.open_section.document_kind, self._order_numbers)
        except DocumentGenerationError as exc:
            self.show_error(self.T("documentFailed").format(error=exc))
            return
        self.set_status(self.T("documentCreated").format(path=result.path))
        self.show_info(self.T("documentCreated").format(path=result.path), title_key="success")
