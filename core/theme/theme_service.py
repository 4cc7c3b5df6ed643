"""
core/theme/theme_service.py
===========================

Light/dark theme state and colour palettes.

The service only holds the selection; persisting it is the caller's job
(see NavigationController.set_theme) and painting widgets is done by
:mod:`core.theme.gui.theme_applier`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict

logger = logging.getLogger(__name__)


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def parse(cls, value: "Theme | str") -> "Theme":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unsupported theme: {value!r}") from None

    @classmethod
    def from_string(cls, value: str | None) -> "Theme":
        """Unknown or empty values map to DARK."""
        try:
            return cls.parse(value or "")
        except ValueError:
            return cls.DARK


@dataclass(frozen=True)
class ThemePalette:
    name: str
    background: str
    surface: str
    header: str
    foreground: str
    muted: str
    accent: str
    accent_foreground: str
    border: str
    error: str
    dot: str


PALETTES: Dict[Theme, ThemePalette] = {
    Theme.DARK: ThemePalette(
        name="dark",
        background="#000000",
        surface="#1a1a1a",
        header="#111111",
        foreground="#ffffff",
        muted="#9a9a9a",
        accent="#2f6fde",
        accent_foreground="#ffffff",
        border="#2a2a2a",
        error="#ff6b6b",
        dot="#e5484d",
    ),
    Theme.LIGHT: ThemePalette(
        name="light",
        background="#ffffff",
        surface="#f0f0f0",
        header="#e6e6e6",
        foreground="#000000",
        muted="#5f5f5f",
        accent="#1d4ed8",
        accent_foreground="#ffffff",
        border="#d0d0d0",
        error="#c62828",
        dot="#d32f2f",
    ),
}


class ThemeService:
    def __init__(self, theme: Theme | str = Theme.DARK) -> None:
        self._current = Theme.parse(theme)

    @property
    def current(self) -> Theme:
        return self._current

    @property
    def palette(self) -> ThemePalette:
        return PALETTES[self._current]

    def set_theme(self, theme: Theme | str) -> Theme:
        self._current = Theme.parse(theme)
        logger.debug("Theme changed to %s", self._current.value)
        return self._current
