"""
orders/logic/orders_service.py
==============================

Order actions behind the orders page.

There is no order backend yet: search and export work on fixed sample
data. Every action is recorded in the history.
"""
from __future__ import annotations

import csv
import logging
import time
import webbrowser
from datetime import date
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from core.helpers.date_time_helper import date_stamp
from core.settings.logic.settings_store import SettingsStore
from history.logic.history_service import HistoryService

logger = logging.getLogger(__name__)

CSV_HEADER: Sequence[str] = ("date", "orderId", "status", "customer")
SAMPLE_ORDERS: Sequence[Sequence[str]] = (
    ("2024-01-15", "1001", "completed", "Customer 1"),
    ("2024-01-16", "1002", "pending", "Customer 2"),
    ("2024-01-17", "1003", "completed", "Customer 3"),
)

EVENT_OPEN = "orders_open"
EVENT_SEARCH = "orders_search"
EVENT_EXPORT = "orders_export"
EVENT_OPEN_WEBSITE = "orders_open_website"


def suggested_export_name(day: Optional[date] = None) -> str:
    return f"orders-{date_stamp(day)}.csv"


def normalize_url(url: str) -> str:
    """Trim and add ``https://`` when no scheme was typed."""
    url = (url or "").strip()
    if url and "://" not in url:
        url = "https://" + url
    return url


class OrdersService:
    def __init__(
        self,
        settings: SettingsStore,
        history: HistoryService,
        *,
        search_delay_s: float = 2.0,
        sleep: Callable[[float], None] = time.sleep,
        opener: Callable[[str], bool] = webbrowser.open,
    ) -> None:
        self.settings = settings
        self.history = history
        self.search_delay_s = search_delay_s
        self._sleep = sleep
        self._opener = opener

    # ------------------------------------------------------------------ #
    #  New orders                                                        #
    # ------------------------------------------------------------------ #
    def open_new_orders(self) -> None:
        self.history.log_activity(EVENT_OPEN, "Opened New Orders")

    # ------------------------------------------------------------------ #
    #  Search (runs on a worker thread)                                  #
    # ------------------------------------------------------------------ #
    def search(self, term: str) -> List[str]:
        """Blocking mock search; returns display strings."""
        term = term.strip()
        if not term:
            raise ValueError("Search term must not be empty")
        logger.debug("Searching orders for %r", term)
        self._sleep(self.search_delay_s)
        return [f"Order {row[1]} - {row[3]}" for row in SAMPLE_ORDERS]

    def record_search(self, term: str) -> None:
        self.history.log_activity(EVENT_SEARCH, f"Searched orders: {term}", {"term": term})

    # ------------------------------------------------------------------ #
    #  Export                                                            #
    # ------------------------------------------------------------------ #
    def has_export_data(self) -> bool:
        return bool(SAMPLE_ORDERS)

    def export_csv(self, path: Path | str) -> Path:
        """Write the order sample as CSV; OSError propagates to the caller."""
        path = Path(path)
        with path.open("w", encoding="utf-8", newline="") as fh:
            writer = csv.writer(fh, lineterminator="\n")
            writer.writerow(CSV_HEADER)
            writer.writerows(SAMPLE_ORDERS)
        logger.info("Orders exported to %s", path)
        self.history.log_activity(EVENT_EXPORT, "Exported orders CSV", {"path": str(path)})
        return path

    # ------------------------------------------------------------------ #
    #  Website                                                           #
    # ------------------------------------------------------------------ #
    def website_url(self) -> str:
        return self.settings.get_orders_website_url().strip()

    def store_website_url(self, url: str) -> str:
        url = normalize_url(url)
        if not url:
            raise ValueError("Website URL must not be empty")
        self.settings.set_orders_website_url(url)
        self.settings.save()
        return url

    def open_website(self, url: Optional[str] = None) -> bool:
        """Open *url* (default: configured URL); False if no browser took it."""
        url = normalize_url(url if url is not None else self.website_url())
        if not url:
            raise ValueError("No orders website configured")
        try:
            opened = bool(self._opener(url))
        except Exception as exc:  # noqa: BLE001 - webbrowser backends raise anything
            logger.error("Failed to open website %s: %s", url, exc)
            return False
        if opened:
            self.history.log_activity(EVENT_OPEN_WEBSITE, f"Opened website: {url}", {"url": url})
        else:
            logger.warning("No browser accepted %s", url)
        return opened
