"""
home/gui/home_view.py

Start page: sidebar with the work areas and the hero text.
"""
from __future__ import annotations

from tkinter import ttk
from typing import Dict

from core.theme.gui.theme_applier import CARD_FRAME, HERO_LABEL, MUTED_LABEL, SIDEBAR_BUTTON, SIDEBAR_BUTTON_ACTIVE
from framework.gui.page_base import BasePage
from home.logic.sidebar import SidebarSelection


class HomeView(BasePage):
    def _build_ui(self) -> None:
        self.selection = SidebarSelection()

        sidebar = ttk.Frame(self, style=CARD_FRAME, padding=(8, 12))
        sidebar.pack(side="left", fill="y")
        self.sidebar_buttons: Dict[str, ttk.Button] = {}
        for item in self.selection.items:
            btn = ttk.Button(sidebar, style=SIDEBAR_BUTTON, width=26,
                             command=lambda k=item.key: self._on_sidebar(k))
            btn.pack(fill="x", pady=3)
            self.sidebar_buttons[item.key] = btn

        hero = ttk.Frame(self, padding=40)
        hero.pack(side="left", fill="both", expand=True)
        self.hero_title = ttk.Label(hero, style=HERO_LABEL)
        self.hero_title.pack(anchor="sw", expand=True)
        self.hero_slogan = ttk.Label(hero, style=MUTED_LABEL, font=("Segoe UI", 14, "italic"))
        self.hero_slogan.pack(anchor="nw", expand=True)

    def update_texts(self) -> None:
        for item in self.selection.items:
            self.sidebar_buttons[item.key].configure(text=self.T(item.label_key))
        self.hero_title.configure(text=self.T("heroTitle", "inlingua®"))
        self.hero_slogan.configure(text=self.T("heroSlogan"))

    def _on_sidebar(self, key: str) -> None:
        item = self.selection.select(key)
        for k, btn in self.sidebar_buttons.items():
            btn.configure(style=SIDEBAR_BUTTON_ACTIVE if self.selection.is_active(k) else SIDEBAR_BUTTON)
        if item.target is None:
            self.show_info(self.T("comingSoon"), title_key=item.label_key)
        elif self.navigator is not None:
            self.navigator.navigate_to(item.target)
