"""
core/common/errors.py
=====================

Exception hierarchy shared by services and views.

Services raise, GUI callbacks catch and show a dialog.
"""
from __future__ import annotations


class LinguaOpsError(Exception):
    """Base class for all application errors."""


class PageLoadError(LinguaOpsError):
    """A page view could not be imported or constructed."""

    def __init__(self, page: str, cause: BaseException | None = None) -> None:
        self.page = page
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Page '{page}' could not be loaded{detail}")


class DocumentGenerationError(LinguaOpsError):
    """Writing a participant document failed."""
