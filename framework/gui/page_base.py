"""
framework/gui/page_base.py
==========================

Common base for all page views.

Pages receive the AppContext, the NavigationController and the page's
CancellationToken; they only implement ``update_texts`` and build their
widgets in ``_build_ui``.
"""
from __future__ import annotations

import logging
import tkinter as tk
from tkinter import messagebox, ttk
from typing import TYPE_CHECKING, Optional

from core.common.app_context import AppContext
from core.common.ui_dispatcher import CancellationToken
from core.contracts.ui import IPageView

if TYPE_CHECKING:  # pragma: no cover
    from framework.navigation.navigation_controller import NavigationController

logger = logging.getLogger(__name__)


class BasePage(ttk.Frame, IPageView):
    def __init__(self, parent: tk.Misc, *, context: AppContext,
                 navigator: Optional["NavigationController"] = None,
                 token: Optional[CancellationToken] = None) -> None:
        super().__init__(parent)
        self.ctx = context
        self.navigator = navigator
        self.token = token or CancellationToken()
        self._disposed = False
        self._build_ui()

    # ------------------------------------------------------------------ #
    def _build_ui(self) -> None:
        """Create widgets; texts are filled by ``update_texts``."""

    def T(self, key: str, fallback: Optional[str] = None) -> str:
        return self.ctx.T(key, fallback)

    # ------------------------------------------------------------------ #
    #  IPageView                                                         #
    # ------------------------------------------------------------------ #
    def on_show(self) -> None:
        logger.debug("%s shown", type(self).__name__)

    def on_hide(self) -> None:
        logger.debug("%s hidden", type(self).__name__)

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        self.token.cancel()

    # ------------------------------------------------------------------ #
    #  Helpers                                                           #
    # ------------------------------------------------------------------ #
    def show_error(self, message: str) -> None:
        messagebox.showerror(self.T("error"), message, parent=self)

    def show_info(self, message: str, title_key: str = "info") -> None:
        messagebox.showinfo(self.T(title_key), message, parent=self)

    def show_warning(self, message: str) -> None:
        messagebox.showwarning(self.T("warning"), message, parent=self)

    def set_status(self, message: str) -> None:
        if self.navigator is not None:
            self.navigator.set_status(message)
