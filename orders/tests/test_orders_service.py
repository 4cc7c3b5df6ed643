"""
orders/tests/test_orders_service.py
"""

from __future__ import annotations

import tempfile
import unittest
from datetime import date
from pathlib import Path

from core.settings.logic.settings_store import SettingsStore
from history.logic.history_repository import HistoryRepository
from history.logic.history_service import HistoryService
from orders.logic.orders_service import (
    EVENT_EXPORT,
    EVENT_OPEN,
    EVENT_OPEN_WEBSITE,
    EVENT_SEARCH,
    OrdersService,
    normalize_url,
    suggested_export_name,
)


class TestOrdersService(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)
        self.settings = SettingsStore(self.dir / "config.json")
        self.settings.initialize()
        self.repo = HistoryRepository(":memory:")
        self.history = HistoryService(self.repo, self.settings)
        self.sleeps = []
        self.opened = []
        self.opener_result = True
        self.service = OrdersService(self.settings, self.history, search_delay_s=2.0,
                                     sleep=self.sleeps.append, opener=self._open)

    def tearDown(self) -> None:
        self.repo.close()
        self._tmp.cleanup()

    def _open(self, url):
        self.opened.append(url)
        return self.opener_result

    def _types(self):
        return [e.type for e in self.history.get_history()]

    def test_open_new_orders_logged(self) -> None:
        self.service.open_new_orders()
        self.assertEqual(self._types(), [EVENT_OPEN])

    def test_search_returns_sample_results(self) -> None:
        results = self.service.search(" 1001 ")
        self.assertEqual(results, ["Order 1001 - Customer 1", "Order 1002 - Customer 2",
                                   "Order 1003 - Customer 3"])
        self.assertEqual(self.sleeps, [2.0])
        self.assertEqual(self._types(), [])

        self.service.record_search("1001")
        event = self.history.get_history()[0]
        self.assertEqual((event.type, event.meta), (EVENT_SEARCH, {"term": "1001"}))

    def test_blank_search_rejected(self) -> None:
        with self.assertRaises(ValueError):
            self.service.search("   ")
        self.assertEqual(self.sleeps, [])

    def test_export_csv(self) -> None:
        self.assertTrue(self.service.has_export_data())
        target = self.service.export_csv(self.dir / suggested_export_name(date(2024, 1, 15)))
        self.assertEqual(target.name, "orders-2024-01-15.csv")
        self.assertEqual(
            target.read_text(encoding="utf-8"),
            "date,orderId,status,customer\n"
            "2024-01-15,1001,completed,Customer 1\n"
            "2024-01-16,1002,pending,Customer 2\n"
            "2024-01-17,1003,completed,Customer 3\n",
        )
        self.assertEqual(self._types(), [EVENT_EXPORT])

    def test_export_survives_history_storage_failure(self) -> None:
        broken = HistoryRepository(self.dir / "history.db")
        broken.close()
        broken.db_path = self.dir
        service = OrdersService(self.settings, HistoryService(broken, self.settings),
                                sleep=self.sleeps.append, opener=self._open)
        with self.assertLogs("history.logic.history_service", level="ERROR"):
            target = service.export_csv(self.dir / "orders.csv")
        self.assertTrue(target.exists())

    def test_export_to_missing_directory_raises(self) -> None:
        with self.assertRaises(OSError):
            self.service.export_csv(self.dir / "missing" / "orders.csv")
        self.assertEqual(self._types(), [])

    def test_normalize_url(self) -> None:
        self.assertEqual(normalize_url(" shop.example.com "), "https://shop.example.com")
        self.assertEqual(normalize_url("http://x.org"), "http://x.org")
        self.assertEqual(normalize_url(""), "")

    def test_store_and_open_website(self) -> None:
        self.assertEqual(self.service.store_website_url("shop.example.com"), "https://shop.example.com")
        reloaded = SettingsStore(self.dir / "config.json")
        reloaded.initialize()
        self.assertEqual(reloaded.get_orders_website_url(), "https://shop.example.com")

        self.assertTrue(self.service.open_website())
        self.assertEqual(self.opened, ["https://shop.example.com"])
        self.assertEqual(self._types(), [EVENT_OPEN_WEBSITE])

    def test_store_empty_url_rejected(self) -> None:
        with self.assertRaises(ValueError):
            self.service.store_website_url("  ")

    def test_open_without_url_rejected(self) -> None:
        with self.assertRaises(ValueError):
            self.service.open_website()

    def test_open_failure_not_logged(self) -> None:
        self.opener_result = False
        self.assertFalse(self.service.open_website("x.org"))

        def raising(_url):
            raise RuntimeError("no browser")

        self.service._opener = raising
        self.assertFalse(self.service.open_website("x.org"))
        self.assertEqual(self._types(), [])


if __name__ == "__main__":
    unittest.main()
