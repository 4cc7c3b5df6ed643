"""
history/logic/history_service.py
================================

Activity log for user-visible actions (orders, settings, documents).

Subscribers are called synchronously after each ``log_activity``; the
navigation controller uses this to show the header's history dot.
"""
from __future__ import annotations

import logging
import sqlite3
from datetime import date
from typing import Any, Callable, Dict, List, Optional

from core.helpers import date_time_helper as dt
from core.settings.logic.settings_store import SettingsStore
from history.logic.history_repository import HistoryRepository
from history.models.history_event import HistoryEvent

logger = logging.getLogger(__name__)

HistoryListener = Callable[[HistoryEvent], None]


class HistoryService:
    def __init__(self, repository: HistoryRepository, settings: Optional[SettingsStore] = None,
                 max_events: int = 500) -> None:
        self.repository = repository
        self.settings = settings
        self.max_events = max_events
        self._listeners: List[HistoryListener] = []

    # ------------------------------------------------------------------ #
    def log_activity(self, event_type: str, message: str, meta: Optional[Dict[str, Any]] = None,
                     user: Optional[str] = None) -> HistoryEvent:
        """A storage failure is logged; the event is still returned (id None) and broadcast."""
        if user is None:
            user = self.settings.get_current_user_name() if self.settings else "User"
        event = HistoryEvent(id=None, type=event_type, message=message, at=dt.utc_now(),
                             user=user, meta=dict(meta or {}))
        try:
            self.repository.insert(event)
            self.repository.trim(self.max_events)
        except sqlite3.Error as exc:
            logger.error("History entry %s not stored: %s", event_type, exc)
        else:
            logger.info("History: %s - %s", event_type, message)

        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:  # noqa: BLE001 - one listener must not block others
                logger.exception("History listener failed")
        return event

    def get_history(self, *, event_type: Optional[str] = None, start_day: Optional[date] = None,
                    end_day: Optional[date] = None, limit: Optional[int] = None) -> List[HistoryEvent]:
        """Filter by local calendar days (inclusive)."""
        start, end = dt.local_date_to_utc_range(start_day, end_day)
        return self.repository.query(event_type=event_type or None, start=start, end=end,
                                     limit=limit)

    def event_types(self) -> List[str]:
        return self.repository.distinct_types()

    def clear(self) -> None:
        self.repository.clear()
        logger.info("History cleared")

    # ------------------------------------------------------------------ #
    def subscribe(self, listener: HistoryListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: HistoryListener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass
