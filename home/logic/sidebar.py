"""Home sidebar entries and the single active marker."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from framework.navigation.page_registry import PageId


@dataclass(frozen=True)
class SidebarItem:
    key: str
    label_key: str
    target: Optional[PageId]     # None: no page yet, shows a notice


SIDEBAR_ITEMS: Sequence[SidebarItem] = (
    SidebarItem("telc", "telcArea", PageId.TELC),
    SidebarItem("orders", "orders", PageId.ORDERS),
    SidebarItem("participants", "manageParticipants", PageId.PARTICIPANTS),
    SidebarItem("exams", "exams", PageId.EXAMS),
    SidebarItem("needsAttention", "needsAttention", None),
)


class SidebarSelection:
    def __init__(self, items: Sequence[SidebarItem] = SIDEBAR_ITEMS) -> None:
        self.items = tuple(items)
        self._active: Optional[str] = None

    @property
    def active(self) -> Optional[str]:
        return self._active

    def select(self, key: str) -> SidebarItem:
        for item in self.items:
            if item.key == key:
                self._active = key
                return item
        raise KeyError(key)

    def is_active(self, key: str) -> bool:
        return self._active == key
