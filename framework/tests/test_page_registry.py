"""
framework/tests/test_page_registry.py
"""

from __future__ import annotations

import unittest

from framework.navigation.page_registry import (
    DEFAULT_PAGES,
    PageDescriptor,
    PageId,
    build_registry,
    header_pages,
)


class TestPageRegistry(unittest.TestCase):
    def test_every_page_registered_once(self) -> None:
        registry = build_registry()
        self.assertEqual(set(registry), {p.value for p in PageId})
        self.assertEqual(len(DEFAULT_PAGES), len(PageId))

    def test_header_pages_in_order(self) -> None:
        ids = [p.id for p in header_pages(build_registry())]
        self.assertEqual(ids, [PageId.HOME, PageId.HISTORY, PageId.SETTINGS])

    def test_safe_load_class(self) -> None:
        desc = PageDescriptor(PageId.HOME, "home", "home.logic.sidebar", "SidebarSelection")
        cls = desc.safe_load_class()
        self.assertEqual(cls.__name__, "SidebarSelection")
        self.assertIsNone(desc.last_import_error)
        self.assertEqual(desc.main_class_fq, "home.logic.sidebar.SidebarSelection")

    def test_safe_load_class_missing_module(self) -> None:
        desc = PageDescriptor(PageId.EXAMS, "exams", "does.not.exist", "View")
        self.assertIsNone(desc.safe_load_class())
        self.assertIn("ModuleNotFoundError", desc.last_import_error)

    def test_safe_load_class_missing_attribute(self) -> None:
        desc = PageDescriptor(PageId.EXAMS, "exams", "home.logic.sidebar", "NoSuchView")
        self.assertIsNone(desc.safe_load_class())
        self.assertIn("NoSuchView", desc.last_import_error)


if __name__ == "__main__":
    unittest.main()
