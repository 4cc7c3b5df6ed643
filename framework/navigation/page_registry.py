"""
framework/navigation/page_registry.py
=====================================

Static page table: id, label key and the view class to import.

• safe_load_class(): imports the view class; None on failure, the
  reason is kept in ``last_import_error``
• DEFAULT_PAGES: every page of the application, in header order
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Optional

logger = logging.getLogger(__name__)


class PageId(str, Enum):
    HOME = "home"
    HISTORY = "history"
    SETTINGS = "settings"
    ORDERS = "orders"
    TELC = "telc"
    PARTICIPANTS = "participants"
    EXAMS = "exams"


@dataclass
class PageDescriptor:
    id: PageId
    label_key: str
    module_path: str
    class_name: str
    in_header: bool = False
    sort_order: int = 999
    last_import_error: Optional[str] = field(default=None, compare=False)

    @property
    def main_class_fq(self) -> str:
        return f"{self.module_path}.{self.class_name}"

    # ---------------- Loader --------------------- #
    def safe_load_class(self):
        """Importiert die View-Klasse; gibt Klasse oder None zurück."""
        try:
            mod = importlib.import_module(self.module_path)
        except Exception as exc:  # noqa: BLE001 - any import failure makes the page unavailable
            self.last_import_error = f"{type(exc).__name__}: {exc}"
            logger.error("Import of %s failed: %s", self.module_path, exc)
            return None
        cls = getattr(mod, self.class_name, None)
        if cls is None:
            self.last_import_error = f"{self.module_path} has no attribute {self.class_name!r}"
            logger.error(self.last_import_error)
            return None
        self.last_import_error = None
        return cls


DEFAULT_PAGES: tuple[PageDescriptor, ...] = (
    PageDescriptor(PageId.HOME, "home", "home.gui.home_view", "HomeView", in_header=True, sort_order=0),
    PageDescriptor(PageId.HISTORY, "history", "history.gui.history_view", "HistoryView",
                   in_header=True, sort_order=1),
    PageDescriptor(PageId.SETTINGS, "settings", "core.settings.gui.settings_view", "SettingsView",
                   in_header=True, sort_order=2),
    PageDescriptor(PageId.ORDERS, "orders", "orders.gui.orders_view", "OrdersView", sort_order=10),
    PageDescriptor(PageId.TELC, "telcArea", "telc.gui.telc_view", "TelcView", sort_order=11),
    PageDescriptor(PageId.PARTICIPANTS, "manageParticipants", "participants.gui.participants_view",
                   "ParticipantsView", sort_order=12),
    PageDescriptor(PageId.EXAMS, "exams", "exams.gui.exams_view", "ExamsView", sort_order=13),
)


def build_registry(pages: Iterable[PageDescriptor] = DEFAULT_PAGES) -> Dict[str, PageDescriptor]:
    """Keyed by page id value, sorted by sort_order."""
    return {p.id.value: p for p in sorted(pages, key=lambda p: p.sort_order)}


def header_pages(registry: Dict[str, PageDescriptor]) -> list[PageDescriptor]:
    return [p for p in registry.values() if p.in_header]
