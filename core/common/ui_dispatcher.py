"""
core/common/ui_dispatcher.py
============================

Hand-off of background results to the Tk main thread.

• Worker threads never touch widgets; they ``post()`` callables.
• The main thread drains the queue from an ``after`` loop (``attach``)
  or explicitly via ``drain()`` (tests).
• Every task carries a :class:`CancellationToken`; results of cancelled
  tasks are dropped on the UI thread.
"""
from __future__ import annotations

import logging
import threading
from queue import Empty, Queue
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class CancellationToken:
    """Thread-safe one-way cancel flag."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


class UiDispatcher:
    def __init__(self) -> None:
        self._queue: "Queue[Callable[[], Any]]" = Queue()
        self._widget: Any = None
        self._poll_ms = 50
        self._after_id: Optional[str] = None

    # ------------------------------------------------------------------ #
    #  Producer side (any thread)                                        #
    # ------------------------------------------------------------------ #
    def post(self, callback: Callable[[], Any]) -> None:
        self._queue.put(callback)

    # ------------------------------------------------------------------ #
    #  Consumer side (UI thread)                                         #
    # ------------------------------------------------------------------ #
    def drain(self) -> int:
        """Run every queued callback; returns how many ran."""
        count = 0
        while True:
            try:
                callback = self._queue.get_nowait()
            except Empty:
                return count
            count += 1
            try:
                callback()
            except Exception:  # noqa: BLE001 - UI boundary
                logger.exception("UI callback failed")

    def attach(self, widget: Any, poll_ms: int = 50) -> None:
        """Start draining on *widget*'s event loop every *poll_ms*."""
        self._widget = widget
        self._poll_ms = max(1, int(poll_ms))
        self._schedule()

    def stop(self) -> None:
        if self._widget is not None and self._after_id is not None:
            try:
                self._widget.after_cancel(self._after_id)
            except Exception as exc:  # noqa: BLE001 - widget may be destroyed
                logger.debug("after_cancel failed: %s", exc)
        self._after_id = None
        self._widget = None

    def _schedule(self) -> None:
        if self._widget is not None:
            self._after_id = self._widget.after(self._poll_ms, self._poll)

    def _poll(self) -> None:
        self.drain()
        self._schedule()

    # ------------------------------------------------------------------ #
    #  Background helper                                                 #
    # ------------------------------------------------------------------ #
    def run_in_background(
        self,
        work: Callable[[], Any],
        *,
        on_success: Callable[[Any], Any],
        on_error: Callable[[BaseException], Any],
        token: Optional[CancellationToken] = None,
        name: str = "ui-worker",
    ) -> threading.Thread:
        """
        Run *work* on a daemon thread; deliver its result (or exception)
        through the queue unless *token* was cancelled in the meantime.
        """
        token = token or CancellationToken()

        def _deliver(callback: Callable[[Any], Any], payload: Any) -> None:
            if token.cancelled:
                logger.debug("Dropping stale result of %s", name)
                return
            callback(payload)

        def _run() -> None:
            try:
                result = work()
            except Exception as exc:  # noqa: BLE001 - handed to on_error
                logger.warning("Background task %s failed: %s", name, exc)
                self.post(lambda err=exc: _deliver(on_error, err))
                return
            self.post(lambda: _deliver(on_success, result))

        thread = threading.Thread(target=_run, name=name, daemon=True)
        thread.start()
        return thread
