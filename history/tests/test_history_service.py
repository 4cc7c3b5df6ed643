"""
history/tests/test_history_service.py
"""

from __future__ import annotations

import tempfile
import unittest
from datetime import date, datetime, timezone
from pathlib import Path

from history.logic.history_repository import HistoryRepository
from history.logic.history_service import HistoryService
from history.models.history_event import HistoryEvent
from core.settings.logic.settings_store import SettingsStore


class TestHistoryService(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)
        self.settings = SettingsStore(self.dir / "config.json")
        self.settings.initialize()
        self.repo = HistoryRepository(self.dir / "db" / "history.db")
        self.service = HistoryService(self.repo, self.settings, max_events=5)

    def tearDown(self) -> None:
        self.repo.close()
        self._tmp.cleanup()

    def _insert_at(self, event_type: str, at: datetime) -> None:
        self.repo.insert(HistoryEvent(id=None, type=event_type, message=event_type, at=at, user="t"))

    def test_log_activity_uses_current_user(self) -> None:
        self.settings.set_current_user_name("Maria")
        event = self.service.log_activity("orders_open", "Opened New Orders", {"n": 1})
        self.assertIsNotNone(event.id)
        stored = self.service.get_history()[0]
        self.assertEqual(stored.user, "Maria")
        self.assertEqual(stored.meta, {"n": 1})
        self.assertEqual(stored.at.tzinfo, timezone.utc)

    def test_explicit_user_wins(self) -> None:
        self.service.log_activity("x", "y", user="admin")
        self.assertEqual(self.service.get_history()[0].user, "admin")

    def test_newest_first_and_type_filter(self) -> None:
        self.service.log_activity("orders_open", "first")
        self.service.log_activity("orders_search", "second")
        self.service.log_activity("orders_open", "third")
        messages = [e.message for e in self.service.get_history()]
        self.assertEqual(messages, ["third", "second", "first"])
        self.assertEqual([e.message for e in self.service.get_history(event_type="orders_open")],
                         ["third", "first"])
        self.assertEqual(self.service.event_types(), ["orders_open", "orders_search"])
        self.assertEqual(len(self.service.get_history(limit=1)), 1)

    def test_date_filter_is_inclusive_local_days(self) -> None:
        self._insert_at("old", datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc))
        self._insert_at("in", datetime(2024, 1, 15, 22, 30, tzinfo=timezone.utc))  # 23:30 Berlin
        self._insert_at("late", datetime(2024, 1, 15, 23, 30, tzinfo=timezone.utc))  # 16.01. Berlin
        events = self.service.get_history(start_day=date(2024, 1, 15), end_day=date(2024, 1, 15))
        self.assertEqual([e.type for e in events], ["in"])
        events = self.service.get_history(start_day=date(2024, 1, 11))
        self.assertEqual([e.type for e in events], ["late", "in"])

    def test_trim_keeps_newest(self) -> None:
        for i in range(8):
            self.service.log_activity("t", f"m{i}")
        self.assertEqual(self.repo.count(), 5)
        self.assertEqual(self.service.get_history()[-1].message, "m3")

    def test_listeners(self) -> None:
        seen = []

        def broken(_event):
            raise RuntimeError("listener bug")

        self.service.subscribe(broken)
        self.service.subscribe(seen.append)
        with self.assertLogs("history.logic.history_service", level="ERROR"):
            self.service.log_activity("a", "b")
        self.assertEqual([e.type for e in seen], ["a"])

        self.service.unsubscribe(seen.append)
        self.service.unsubscribe(seen.append)
        self.service.log_activity("c", "d")
        self.assertEqual(len(seen), 1)

    def test_storage_failure_is_logged_not_raised(self) -> None:
        seen = []
        self.service.subscribe(seen.append)
        self.repo.close()
        self.repo.db_path = self.dir  # a directory cannot be opened as a database

        with self.assertLogs("history.logic.history_service", level="ERROR"):
            event = self.service.log_activity("orders_export", "Exported orders CSV")
        self.assertIsNone(event.id)
        self.assertEqual([e.type for e in seen], ["orders_export"])

    def test_clear(self) -> None:
        self.service.log_activity("a", "b")
        self.service.clear()
        self.assertEqual(self.service.get_history(), [])
        self.assertEqual(self.service.event_types(), [])

    def test_persists_across_connections(self) -> None:
        self.service.log_activity("a", "b")
        self.repo.close()
        reopened = HistoryRepository(self.dir / "db" / "history.db")
        try:
            self.assertEqual(reopened.count(), 1)
        finally:
            reopened.close()

    def test_as_dict_has_local_time(self) -> None:
        event = HistoryEvent(id=1, type="t", message="m",
                             at=datetime(2024, 1, 15, 11, 0, tzinfo=timezone.utc), user="u")
        self.assertEqual(event.as_dict()["at"], "15.01.2024 12:00:00")


if __name__ == "__main__":
    unittest.main()
