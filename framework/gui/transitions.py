"""
framework/gui/transitions.py

Window alpha fades driven by ``after`` callbacks (fire-and-forget).
Platforms without ``-alpha`` support skip straight to the callback.
"""
from __future__ import annotations

import logging
import tkinter as tk
from typing import Callable, Optional

logger = logging.getLogger(__name__)

FRAME_MS = 15


def fade(window: tk.Wm, start: float, end: float, duration_ms: int,
         on_done: Optional[Callable[[], None]] = None) -> None:
    def _finish() -> None:
        if on_done is not None:
            on_done()

    if duration_ms <= 0:
        _set_alpha(window, end)
        _finish()
        return
    if not _set_alpha(window, start):
        _finish()
        return

    steps = max(1, duration_ms // FRAME_MS)

    def _step(i: int) -> None:
        alpha = start + (end - start) * (i / steps)
        if not _set_alpha(window, alpha):
            _finish()
            return
        if i >= steps:
            _finish()
        else:
            window.after(FRAME_MS, _step, i + 1)

    window.after(FRAME_MS, _step, 1)


def _set_alpha(window: tk.Wm, alpha: float) -> bool:
    try:
        window.attributes("-alpha", max(0.0, min(1.0, alpha)))
        return True
    except tk.TclError as exc:
        logger.debug("Alpha fade unavailable: %s", exc)
        return False
