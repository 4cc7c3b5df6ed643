"""
core/tests/test_theme_service.py
"""

from __future__ import annotations

import tkinter as tk
import unittest

from core.theme.gui.theme_applier import classic_widget_options, recolor_classic_widgets
from core.theme.theme_service import PALETTES, Theme, ThemeService


class TestTheme(unittest.TestCase):
    def test_from_string_defaults_to_dark(self) -> None:
        self.assertIs(Theme.from_string("light"), Theme.LIGHT)
        self.assertIs(Theme.from_string("neon"), Theme.DARK)
        self.assertIs(Theme.from_string(None), Theme.DARK)

    def test_parse_is_strict(self) -> None:
        self.assertIs(Theme.parse(" Light "), Theme.LIGHT)
        with self.assertRaises(ValueError):
            Theme.parse("neon")


class TestThemeService(unittest.TestCase):
    def test_default_and_set_theme(self) -> None:
        service = ThemeService()
        self.assertIs(service.current, Theme.DARK)
        self.assertIs(service.palette, PALETTES[Theme.DARK])
        self.assertIs(service.set_theme("light"), Theme.LIGHT)
        self.assertIs(service.palette, PALETTES[Theme.LIGHT])

    def test_set_theme_rejects_unknown(self) -> None:
        service = ThemeService("light")
        with self.assertRaises(ValueError):
            service.set_theme("sepia")
        self.assertIs(service.current, Theme.LIGHT)

    def test_palettes_cover_all_themes(self) -> None:
        self.assertEqual(set(PALETTES), set(Theme))
        self.assertNotEqual(PALETTES[Theme.DARK].background, PALETTES[Theme.LIGHT].background)



class _FakeWidget:
    def __init__(self, widget_class, children=(), fail=False):
        self._class = widget_class
        self._children = list(children)
        self._fail = fail
        self.options = {}

    def winfo_class(self):
        return self._class

    def winfo_children(self):
        return self._children

    def configure(self, **options):
        if self._fail:
            raise tk.TclError("widget destroyed")
        self.options.update(options)


class TestClassicWidgetColours(unittest.TestCase):
    def test_text_gets_insert_cursor_colour(self) -> None:
        palette = PALETTES[Theme.DARK]
        text = classic_widget_options("Text", palette)
        self.assertEqual(text["background"], palette.surface)
        self.assertEqual(text["insertBackground"], palette.foreground)
        self.assertNotIn("insertBackground", classic_widget_options("Listbox", palette))

    def test_recolor_walks_widget_tree(self) -> None:
        palette = PALETTES[Theme.LIGHT]
        text = _FakeWidget("Text")
        listbox = _FakeWidget("Listbox")
        gone = _FakeWidget("Listbox", fail=True)
        frame = _FakeWidget("TFrame", [listbox, gone])
        root = _FakeWidget("Tk", [frame, text])

        self.assertEqual(recolor_classic_widgets(root, palette), 2)
        self.assertEqual(text.options["background"], palette.surface)
        self.assertEqual(text.options["foreground"], palette.foreground)
        self.assertEqual(text.options["insertbackground"], palette.foreground)
        self.assertEqual(listbox.options["selectbackground"], palette.accent)
        self.assertNotIn("insertbackground", listbox.options)
        self.assertEqual(frame.options, {})
        self.assertEqual(root.options, {})


if __name__ == "__main__":
    unittest.main()
