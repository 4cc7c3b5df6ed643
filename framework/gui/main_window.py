"""
framework/gui/main_window.py
============================

Root-Window: Header (Navigation, Sprache, Theme, Mitteilungen),
Inhaltsbereich und Statusleiste.

The window is the IViewHost of the NavigationController: the controller
decides *what* is shown, the window does the widget work (fade, swap,
styles, header markers).
"""

from __future__ import annotations

import logging
import tkinter as tk
from tkinter import X, LEFT, RIGHT, messagebox, ttk
from typing import Dict, Optional

from core.common.app_context import AppContext
from core.common.errors import PageLoadError
from core.common.ui_dispatcher import CancellationToken
from core.contracts.ui import IPageView, ITextRefreshable, IViewHost
from core.i18n.language import Language
from core.theme.gui.theme_applier import (
    DOT_LABEL,
    HEADER_FRAME,
    HEADER_LABEL,
    LANG_BUTTON_ACTIVE,
    NAV_BUTTON,
    NAV_BUTTON_ACTIVE,
    STATUS_LABEL,
    apply_palette,
)
from core.theme.theme_service import Theme, ThemePalette
from framework.gui import transitions
from framework.gui.error_view import ErrorView
from framework.navigation.navigation_controller import NavigationController, NavigationState
from framework.navigation.page_registry import PageDescriptor, PageId, header_pages

logger = logging.getLogger(__name__)

DOT = "●"


class _HeaderTexts(ITextRefreshable):
    """Window chrome registered as text target with the navigator."""

    def __init__(self, window: "MainWindow") -> None:
        self.window = window

    def update_texts(self) -> None:
        self.window.update_chrome_texts()


# --------------------------------------------------------------------------- #
#  MainWindow                                                                 #
# --------------------------------------------------------------------------- #
class MainWindow(tk.Tk, IViewHost):
    """Hauptfenster der Anwendung."""

    # ------------------------------------------------------------------ #
    # Konstruktor                                                        #
    # ------------------------------------------------------------------ #
    def __init__(self, context: AppContext) -> None:
        super().__init__()
        self.ctx = context
        ui = context.config.ui

        # Fenster-Eigenschaften
        width, height = context.settings.get_window_size()
        self.minsize(ui.min_width, ui.min_height)
        self.geometry(f"{max(width, ui.min_width)}x{max(height, ui.min_height)}")
        self.protocol("WM_DELETE_WINDOW", self.on_close)

        # State
        self._pending_view: Optional[tk.Widget] = None
        self._fading = False
        self._closing = False

        # ---------- Frames ---------------------------------------------
        self.header = ttk.Frame(self, style=HEADER_FRAME, padding=(8, 6))
        self.header.pack(side="top", fill=X)

        self.content = ttk.Frame(self)
        self.content.pack(fill="both", expand=True)

        self.status_bar = ttk.Label(self, text="", anchor="w", style=STATUS_LABEL, padding=(8, 2))
        self.status_bar.pack(side="bottom", fill=X)

        # ---------- Navigation -----------------------------------------
        self.navigator = NavigationController(context, self, self._create_view)
        self._build_header()
        self.navigator.register_text_target(_HeaderTexts(self))

        apply_palette(self, context.theme.palette)
        self.update_chrome_texts()
        context.dispatcher.attach(self, ui.dispatcher_poll_ms)
        if not context.settings.is_persistent:
            self.navigator.show_notification_dot()

        self.navigator.navigate_to(PageId.HOME, animate=False)

    # ------------------------------------------------------------------ #
    # Header                                                             #
    # ------------------------------------------------------------------ #
    def _build_header(self) -> None:
        self.back_button = ttk.Button(self.header, style=NAV_BUTTON, command=self._go_back)
        self.title_label = ttk.Label(self.header, style=HEADER_LABEL)
        self.title_label.pack(side=LEFT, padx=(4, 16))

        self.nav_frame = ttk.Frame(self.header, style=HEADER_FRAME)
        self.nav_frame.pack(side=LEFT)
        self.nav_buttons: Dict[str, ttk.Button] = {}
        self.dots: Dict[str, ttk.Label] = {}
        for desc in header_pages(self.navigator.registry):
            btn = ttk.Button(self.nav_frame, style=NAV_BUTTON,
                             command=lambda p=desc.id: self.navigator.navigate_to(p))
            btn.pack(side=LEFT, padx=2)
            self.nav_buttons[desc.id.value] = btn
            if desc.id is PageId.HISTORY:
                self.dots["history"] = ttk.Label(self.nav_frame, text=DOT, style=DOT_LABEL)

        right = ttk.Frame(self.header, style=HEADER_FRAME)
        right.pack(side=RIGHT)

        self.notifications_button = ttk.Button(right, style=NAV_BUTTON, command=self._show_notifications)
        self.notifications_button.pack(side=RIGHT, padx=2)
        self.dots["notifications"] = ttk.Label(right, text=DOT, style=DOT_LABEL)

        self.lang_frame = ttk.Frame(right, style=HEADER_FRAME)
        self.lang_frame.pack(side=RIGHT, padx=8)
        self.lang_buttons: Dict[Language, ttk.Button] = {}
        for lang in Language:
            btn = ttk.Button(self.lang_frame, text=lang.value.upper(), width=4, style=NAV_BUTTON,
                             command=lambda l=lang: self.navigator.set_language(l))
            btn.pack(side=LEFT, padx=1)
            self.lang_buttons[lang] = btn

        self.theme_frame = ttk.Frame(right, style=HEADER_FRAME)
        self.theme_buttons: Dict[Theme, ttk.Button] = {}
        for theme in Theme:
            btn = ttk.Button(self.theme_frame, style=NAV_BUTTON,
                             command=lambda t=theme: self.navigator.set_theme(t))
            btn.pack(side=LEFT, padx=1)
            self.theme_buttons[theme] = btn

    def update_chrome_texts(self) -> None:
        T = self.ctx.T
        self.title(T("appTitle"))
        self.title_label.configure(text=T("appTitle"))
        self.back_button.configure(text=f"← {T('back')}")
        for page_id, btn in self.nav_buttons.items():
            btn.configure(text=self.navigator.page_title(page_id))
        self.notifications_button.configure(text=T("notifications"))
        for theme, btn in self.theme_buttons.items():
            btn.configure(text=T(theme.value))

    # ------------------------------------------------------------------ #
    # IViewHost                                                          #
    # ------------------------------------------------------------------ #
    def show_view(self, view: IPageView, *, animate: bool = True) -> None:
        self._pending_view = view  # type: ignore[assignment]
        fade_out = self.ctx.config.ui.fade_out_ms
        if not animate or fade_out <= 0:
            self._swap()
            return
        if self._fading:
            return  # running fade picks up the newest pending view
        self._fading = True
        transitions.fade(self, 1.0, 0.0, fade_out, on_done=self._after_fade_out)

    def _after_fade_out(self) -> None:
        self._swap()
        transitions.fade(self, 0.0, 1.0, self.ctx.config.ui.fade_in_ms, on_done=self._fade_done)

    def _fade_done(self) -> None:
        self._fading = False

    def _swap(self) -> None:
        view = self._pending_view
        for child in self.content.winfo_children():
            if child is not view:
                child.destroy()
        if view is not None:
            view.pack(fill="both", expand=True)

    def create_error_view(self, page: str) -> IPageView:
        desc = self.navigator.registry.get(page)
        detail = desc.last_import_error if desc else None
        return ErrorView(self.content, context=self.ctx, page=page, detail=detail)

    def apply_theme(self, palette: ThemePalette) -> None:
        apply_palette(self, palette)

    def on_navigation_changed(self, state: NavigationState) -> None:
        for page_id, btn in self.nav_buttons.items():
            btn.configure(style=NAV_BUTTON_ACTIVE if state.is_active(page_id) else NAV_BUTTON)

        if state.back_visible:
            if not self.back_button.winfo_manager():
                self.back_button.pack(side=LEFT, before=self.title_label, padx=(0, 8))
        else:
            self.back_button.pack_forget()

        if state.theme_controls_visible:
            if not self.theme_frame.winfo_manager():
                self.theme_frame.pack(side=RIGHT, padx=8)
        else:
            self.theme_frame.pack_forget()

        self._toggle_dot("history", state.history_dot_visible, after=self.nav_buttons.get("history"))
        self._toggle_dot("notifications", state.notification_dot_visible, after=self.notifications_button)

        for lang, btn in self.lang_buttons.items():
            btn.configure(style=LANG_BUTTON_ACTIVE if lang is state.language else NAV_BUTTON)
        for theme, btn in self.theme_buttons.items():
            btn.configure(style=LANG_BUTTON_ACTIVE if theme is state.theme else NAV_BUTTON)

    def _toggle_dot(self, name: str, visible: bool, after: Optional[tk.Widget]) -> None:
        dot = self.dots.get(name)
        if dot is None:
            return
        if visible and after is not None:
            dot.pack(side=LEFT if name == "history" else RIGHT, after=after)
        else:
            dot.pack_forget()

    def set_status(self, message: str) -> None:
        self.status_bar.configure(text=message)

    # ------------------------------------------------------------------ #
    # View-Fabrik                                                        #
    # ------------------------------------------------------------------ #
    def _create_view(self, desc: PageDescriptor, token: CancellationToken) -> IPageView:
        view_cls = desc.safe_load_class()
        if view_cls is None:
            raise PageLoadError(desc.id.value, ImportError(desc.last_import_error))
        return view_cls(self.content, context=self.ctx, navigator=self.navigator, token=token)

    # ------------------------------------------------------------------ #
    # Aktionen                                                           #
    # ------------------------------------------------------------------ #
    def _go_back(self) -> None:
        self.navigator.go_back()

    def _show_notifications(self) -> None:
        self.navigator.clear_notifications()
        message = (self.ctx.T("settingsNotPersisted") if not self.ctx.settings.is_persistent
                   else self.ctx.T("noNotifications"))
        messagebox.showinfo(self.ctx.T("notifications"), message, parent=self)

    def on_close(self) -> None:
        if self._closing:
            return
        self._closing = True
        try:
            if self.winfo_width() > 1 and self.winfo_height() > 1:
                self.ctx.settings.set_window_size(self.winfo_width(), self.winfo_height())
            self.navigator.dispose()
            self.ctx.dispatcher.stop()
            if not self.ctx.settings.save():
                logger.warning("Settings could not be saved on shutdown")
            self.ctx.history.repository.close()
        finally:
            self.destroy()
