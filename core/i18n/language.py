"""Supported UI languages."""
from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    DE = "de"
    EN = "en"

    @classmethod
    def parse(cls, value: str) -> "Language":
        """Strict parse; raises ValueError for anything but 'de'/'en'."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unsupported language: {value!r}") from None

    @classmethod
    def from_string(cls, value: str | None) -> "Language":
        """Lenient parse for persisted values; unknown → DE."""
        try:
            return cls.parse(value or "")
        except ValueError:
            return cls.DE
