"""
home/tests/test_sidebar.py
"""

from __future__ import annotations

import unittest

from framework.navigation.page_registry import PageId
from home.logic.sidebar import SIDEBAR_ITEMS, SidebarSelection


class TestSidebarSelection(unittest.TestCase):
    def test_single_active_item(self) -> None:
        sel = SidebarSelection()
        self.assertIsNone(sel.active)
        sel.select("orders")
        sel.select("telc")
        self.assertEqual([i.key for i in SIDEBAR_ITEMS if sel.is_active(i.key)], ["telc"])

    def test_targets(self) -> None:
        sel = SidebarSelection()
        self.assertIs(sel.select("participants").target, PageId.PARTICIPANTS)
        self.assertIsNone(sel.select("needsAttention").target)

    def test_unknown_key(self) -> None:
        sel = SidebarSelection()
        sel.select("exams")
        with self.assertRaises(KeyError):
            sel.select("payroll")
        self.assertEqual(sel.active, "exams")


if __name__ == "__main__":
    unittest.main()
