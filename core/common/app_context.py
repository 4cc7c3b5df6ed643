# core/common/app_context.py
"""
Runtime context & service registry for LinguaOps.

One instance is built by :func:`core.common.bootstrap.build_context` and
handed to the main window, the navigation controller and every page
view. There is no module-level singleton.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from core.common.ui_dispatcher import UiDispatcher
from core.config.config_service import ConfigService
from core.i18n.translation_manager import TranslationManager
from core.settings.logic.settings_store import SettingsStore
from core.theme.theme_service import ThemeService
from history.logic.history_service import HistoryService


@dataclass
class AppContext:
    """Central runtime context (no GUI state)."""

    config: ConfigService
    settings: SettingsStore
    i18n: TranslationManager
    theme: ThemeService
    history: HistoryService
    dispatcher: UiDispatcher = field(default_factory=UiDispatcher)

    # ---------- Service registry for feature services -----------------
    services: Dict[str, Any] = field(default_factory=dict)

    def register_service(self, name: str, instance: Any) -> None:
        self.services[name] = instance

    def service(self, name: str) -> Any:
        """KeyError if *name* was never registered."""
        return self.services[name]

    # ---------- Translation shortcut ----------------------------------
    def T(self, key: str, fallback: Optional[str] = None) -> str:
        return self.i18n.t(key, fallback)
