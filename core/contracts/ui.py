"""core/contracts/ui.py
====================

UI-facing contracts between the navigation layer and the page views.

The navigation controller only talks to these interfaces, so it can be
driven by Tk widgets at runtime and by plain fakes in tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from core.theme.theme_service import ThemePalette
    from framework.navigation.navigation_controller import NavigationState


class ITextRefreshable(ABC):
    """Anything showing translated text."""

    @abstractmethod
    def update_texts(self) -> None:
        """Re-read every label from the translation facility. Must be idempotent."""


class IPageView(ITextRefreshable):
    """A page mounted in the main content area."""

    @abstractmethod
    def on_show(self) -> None:
        """Called when the view becomes the visible page."""

    @abstractmethod
    def on_hide(self) -> None:
        """Called right before the view is removed."""

    @abstractmethod
    def dispose(self) -> None:
        """Release resources (timers, pending tasks). Must be idempotent."""


class IViewHost(ABC):
    """The window that owns the content area (MainWindow at runtime)."""

    @abstractmethod
    def show_view(self, view: IPageView, *, animate: bool = True) -> None:
        """Swap *view* into the content area."""

    @abstractmethod
    def create_error_view(self, page: str) -> IPageView:
        """Build the inert placeholder shown when a page fails to load."""

    @abstractmethod
    def apply_theme(self, palette: "ThemePalette") -> None:
        """Repaint the widget tree."""

    @abstractmethod
    def on_navigation_changed(self, state: "NavigationState") -> None:
        """Update header markers, back button and dots."""

    def set_status(self, message: str) -> None:
        """Optional status line; default is a no-op."""
