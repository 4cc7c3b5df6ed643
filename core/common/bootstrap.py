"""
core/common/bootstrap.py
========================

Builds the :class:`AppContext` in dependency order:

config → logging → settings → i18n → theme → history → feature services
"""
from __future__ import annotations

import logging
import sqlite3
from typing import Optional

from core.common.app_context import AppContext
from core.common.ui_dispatcher import UiDispatcher
from core.config.config_service import ConfigService
from core.i18n.language import Language
from core.i18n.translation_manager import LABELS_TSV, TranslationManager
from core.logging.logic.log_setup import configure_logging
from core.settings.logic.settings_store import SettingsStore
from core.theme.theme_service import Theme, ThemeService
from history.logic.history_repository import HistoryRepository
from history.logic.history_service import HistoryService
from orders.logic.orders_service import OrdersService
from participants.logic.participant_documents import ParticipantDocumentService

logger = logging.getLogger(__name__)


def _open_history_repository(config: ConfigService) -> HistoryRepository:
    try:
        return HistoryRepository(config.paths.history_db_path)
    except (OSError, sqlite3.Error) as exc:
        logger.error("History database %s unavailable, keeping history in memory: %s",
                     config.paths.history_db_path, exc)
        return HistoryRepository(":memory:")


def build_context(config: Optional[ConfigService] = None, *, setup_logging: bool = True) -> AppContext:
    config = config or ConfigService()
    if setup_logging:
        log_file = configure_logging(config)
        logger.info("Logging to %s", log_file or "console only")

    settings = SettingsStore(config.paths.settings_path)
    settings.initialize()

    language = Language.from_string(settings.get_language())
    if language.value != settings.get_language():
        logger.warning("Invalid persisted language %r, using %s", settings.get_language(), language.value)
    i18n = TranslationManager(language)
    i18n.load_files([LABELS_TSV])

    theme_value = Theme.from_string(settings.get_theme())
    if theme_value.value != settings.get_theme():
        logger.warning("Invalid persisted theme %r, using %s", settings.get_theme(), theme_value.value)
    theme = ThemeService(theme_value)

    history = HistoryService(
        _open_history_repository(config),
        settings,
        max_events=config.history.max_events,
    )

    ctx = AppContext(
        config=config,
        settings=settings,
        i18n=i18n,
        theme=theme,
        history=history,
        dispatcher=UiDispatcher(),
    )
    ctx.register_service("orders", OrdersService(
        settings, history, search_delay_s=config.ui.search_delay_ms / 1000.0,
    ))
    ctx.register_service("participant_documents", ParticipantDocumentService(
        config.paths.documents_dir_path, history,
    ))
    logger.info("Context ready (language=%s, theme=%s, persistent=%s)",
                language.value, theme_value.value, settings.is_persistent)
    return ctx
