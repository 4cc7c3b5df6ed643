"""
framework/navigation/navigation_controller.py
=============================================

Owns the navigation state (current page, language, theme selection) and
drives the view host.

• navigate_to(): build the page view, hand it to the host, refresh texts
• set_language()/set_theme(): validate, apply, persist, re-broadcast
• header dots: history dot (new history event while elsewhere) and
  notification dot

Runs on the Tk main thread only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from core.common.app_context import AppContext
from core.common.errors import PageLoadError
from core.common.ui_dispatcher import CancellationToken
from core.contracts.ui import IPageView, ITextRefreshable, IViewHost
from core.i18n.language import Language
from core.theme.theme_service import Theme
from framework.navigation.page_registry import DEFAULT_PAGES, PageDescriptor, PageId, build_registry
from history.models.history_event import HistoryEvent

logger = logging.getLogger(__name__)

ViewFactory = Callable[[PageDescriptor, CancellationToken], IPageView]

EVENT_LANGUAGE = "settings_language"
EVENT_THEME = "settings_theme"


@dataclass(frozen=True)
class NavigationState:
    current_page: str
    back_visible: bool
    theme_controls_visible: bool
    history_dot_visible: bool
    notification_dot_visible: bool
    language: Language
    theme: Theme
    error: Optional[PageLoadError] = None

    @property
    def active_marker(self) -> str:
        return self.current_page

    def is_active(self, page: PageId | str) -> bool:
        value = page.value if isinstance(page, PageId) else str(page)
        return value == self.current_page


class NavigationController:
    def __init__(
        self,
        context: AppContext,
        host: IViewHost,
        view_factory: ViewFactory,
        pages: Iterable[PageDescriptor] = DEFAULT_PAGES,
    ) -> None:
        self.ctx = context
        self.host = host
        self.view_factory = view_factory
        self.registry: Dict[str, PageDescriptor] = build_registry(pages)

        self._current: str = PageId.HOME.value
        self._view: Optional[IPageView] = None
        self._token: Optional[CancellationToken] = None
        self._last_error: Optional[PageLoadError] = None
        self._text_targets: List[ITextRefreshable] = []
        self._history_dot = False
        self._notification_dot = False

        self.ctx.history.subscribe(self._on_history_event)

    # ------------------------------------------------------------------ #
    #  Properties                                                        #
    # ------------------------------------------------------------------ #
    @property
    def current_page(self) -> str:
        return self._current

    @property
    def current_view(self) -> Optional[IPageView]:
        return self._view

    @property
    def page_token(self) -> Optional[CancellationToken]:
        """Token of the visible page; cancelled on navigation."""
        return self._token

    @property
    def last_error(self) -> Optional[PageLoadError]:
        return self._last_error

    @property
    def state(self) -> NavigationState:
        return NavigationState(
            current_page=self._current,
            back_visible=self._current != PageId.HOME.value,
            theme_controls_visible=self._current == PageId.HOME.value,
            history_dot_visible=self._history_dot,
            notification_dot_visible=self._notification_dot,
            language=self.ctx.i18n.current_language,
            theme=self.ctx.theme.current,
            error=self._last_error,
        )

    # ------------------------------------------------------------------ #
    #  Navigation                                                        #
    # ------------------------------------------------------------------ #
    def navigate_to(self, page: PageId | str, *, animate: bool = True) -> IPageView:
        target = page.value if isinstance(page, PageId) else str(page).strip().lower()
        previous = self._view

        if self._token is not None:
            self._token.cancel()
        token = CancellationToken()

        error: Optional[PageLoadError] = None
        try:
            view = self._build_view(target, token)
        except Exception as exc:  # noqa: BLE001 - UI boundary, page stays reachable
            error = self._page_error(target, exc)
            view = self.host.create_error_view(target)

        if previous is not None:
            self._discard(previous)

        self._current = target
        self._view = view
        self._token = token
        if target == PageId.HISTORY.value:
            self._history_dot = False

        self.host.show_view(view, animate=animate and previous is not None)
        if error is None:
            try:
                view.update_texts()
                view.on_show()
            except Exception as exc:  # noqa: BLE001 - a failing page is replaced by the placeholder
                error = self._page_error(target, exc)
                self._discard(view)
                view = self.host.create_error_view(target)
                self._view = view
                self.host.show_view(view, animate=False)
                view.update_texts()
                view.on_show()
        else:
            view.update_texts()
            view.on_show()
        self._last_error = error
        self._publish()
        self.host.set_status(self.ctx.T("pageNotFound").format(page=target) if error
                             else self.page_title(target))
        logger.debug("Navigated to %s", target)
        return view

    def go_back(self) -> IPageView:
        return self.navigate_to(PageId.HOME)

    def page_title(self, page: PageId | str) -> str:
        value = page.value if isinstance(page, PageId) else str(page)
        desc = self.registry.get(value)
        return self.ctx.T(desc.label_key) if desc else value

    def _build_view(self, target: str, token: CancellationToken) -> IPageView:
        desc = self.registry.get(target)
        if desc is None:
            raise PageLoadError(target, KeyError(target))
        view = self.view_factory(desc, token)
        if not isinstance(view, IPageView):
            raise PageLoadError(target, TypeError(f"{type(view).__name__} is not an IPageView"))
        return view

    @staticmethod
    def _page_error(target: str, exc: Exception) -> PageLoadError:
        error = exc if isinstance(exc, PageLoadError) else PageLoadError(target, exc)
        logger.error("Navigation to %s failed: %s", target, error)
        return error

    @staticmethod
    def _discard(view: IPageView) -> None:
        try:
            view.on_hide()
            view.dispose()
        except Exception:  # noqa: BLE001 - a broken page must not block navigation
            logger.exception("Disposing %s failed", type(view).__name__)

    # ------------------------------------------------------------------ #
    #  Language / Theme                                                  #
    # ------------------------------------------------------------------ #
    def set_language(self, language: Language | str) -> Language:
        lang = Language.parse(language)
        changed = lang is not self.ctx.i18n.current_language
        self.ctx.i18n.set_language(lang)
        self.ctx.settings.set_language(lang.value)
        if not self.ctx.settings.save():
            self.show_notification_dot()
        self.refresh_texts()
        if changed:
            self.ctx.history.log_activity(EVENT_LANGUAGE, f"Language changed to {lang.value}",
                                          {"language": lang.value})
        logger.info("Language set to %s", lang.value)
        return lang

    def set_theme(self, theme: Theme | str) -> Theme:
        value = Theme.parse(theme)
        changed = value is not self.ctx.theme.current
        self.ctx.theme.set_theme(value)
        self.ctx.settings.set_theme(value.value)
        if not self.ctx.settings.save():
            self.show_notification_dot()
        self.host.apply_theme(self.ctx.theme.palette)
        self._publish()
        if changed:
            self.ctx.history.log_activity(EVENT_THEME, f"Theme changed to {value.value}",
                                          {"theme": value.value})
        logger.info("Theme set to %s", value.value)
        return value

    # ------------------------------------------------------------------ #
    #  Text refresh                                                      #
    # ------------------------------------------------------------------ #
    def register_text_target(self, target: ITextRefreshable) -> None:
        if not isinstance(target, ITextRefreshable):
            raise TypeError(f"{type(target).__name__} does not implement ITextRefreshable")
        if target not in self._text_targets:
            self._text_targets.append(target)

    def unregister_text_target(self, target: ITextRefreshable) -> None:
        if target in self._text_targets:
            self._text_targets.remove(target)

    def refresh_texts(self) -> None:
        for target in list(self._text_targets):
            target.update_texts()
        if self._view is not None:
            self._view.update_texts()
        self._publish()

    # ------------------------------------------------------------------ #
    #  Header dots                                                       #
    # ------------------------------------------------------------------ #
    def show_notification_dot(self) -> None:
        self._notification_dot = True
        self._publish()

    def clear_notifications(self) -> None:
        self._notification_dot = False
        self._publish()

    def _on_history_event(self, _event: HistoryEvent) -> None:
        if self._current != PageId.HISTORY.value and not self._history_dot:
            self._history_dot = True
            self._publish()

    # ------------------------------------------------------------------ #
    def set_status(self, message: str) -> None:
        self.host.set_status(message)

    def dispose(self) -> None:
        self.ctx.history.unsubscribe(self._on_history_event)
        if self._token is not None:
            self._token.cancel()
        if self._view is not None:
            self._discard(self._view)
        self._view = None

    def _publish(self) -> None:
        self.host.on_navigation_changed(self.state)
