"""
core/tests/test_ui_dispatcher.py
"""

from __future__ import annotations

import threading
import unittest

from core.common.ui_dispatcher import CancellationToken, UiDispatcher


class _FakeWidget:
    """Records ``after`` calls instead of running an event loop."""

    def __init__(self) -> None:
        self.scheduled = []
        self.cancelled = []

    def after(self, ms, callback):
        self.scheduled.append((ms, callback))
        return f"after#{len(self.scheduled)}"

    def after_cancel(self, after_id):
        self.cancelled.append(after_id)


class TestUiDispatcher(unittest.TestCase):
    def setUp(self) -> None:
        self.dispatcher = UiDispatcher()

    def test_drain_runs_in_order(self) -> None:
        seen = []
        self.dispatcher.post(lambda: seen.append(1))
        self.dispatcher.post(lambda: seen.append(2))
        self.assertEqual(self.dispatcher.drain(), 2)
        self.assertEqual(seen, [1, 2])
        self.assertEqual(self.dispatcher.drain(), 0)

    def test_failing_callback_does_not_stop_queue(self) -> None:
        seen = []

        def boom():
            raise RuntimeError("boom")

        self.dispatcher.post(boom)
        self.dispatcher.post(lambda: seen.append("after"))
        with self.assertLogs("core.common.ui_dispatcher", level="ERROR"):
            self.dispatcher.drain()
        self.assertEqual(seen, ["after"])

    def test_background_result_delivered_on_drain(self) -> None:
        results = []
        thread = self.dispatcher.run_in_background(
            lambda: 21 * 2, on_success=results.append, on_error=self.fail)
        thread.join(timeout=5)
        self.assertEqual(results, [])
        self.dispatcher.drain()
        self.assertEqual(results, [42])

    def test_background_error_delivered(self) -> None:
        errors = []
        raised = ValueError("bad input")

        def work():
            raise raised

        thread = self.dispatcher.run_in_background(
            work, on_success=self.fail, on_error=errors.append)
        thread.join(timeout=5)
        self.dispatcher.drain()
        self.assertEqual(len(errors), 1)
        self.assertIs(errors[0], raised)
        self.assertEqual(str(errors[0]), "bad input")

    def test_cancelled_token_drops_result(self) -> None:
        token = CancellationToken()
        release = threading.Event()
        results = []

        def work():
            release.wait(5)
            return "stale"

        thread = self.dispatcher.run_in_background(
            work, on_success=results.append, on_error=self.fail, token=token)
        token.cancel()
        release.set()
        thread.join(timeout=5)
        self.dispatcher.drain()
        self.assertEqual(results, [])
        self.assertTrue(token.cancelled)

    def test_attach_polls_and_stop_cancels(self) -> None:
        widget = _FakeWidget()
        seen = []
        self.dispatcher.attach(widget, poll_ms=20)
        self.assertEqual(widget.scheduled[0][0], 20)

        self.dispatcher.post(lambda: seen.append("x"))
        widget.scheduled[0][1]()
        self.assertEqual(seen, ["x"])
        self.assertEqual(len(widget.scheduled), 2)

        self.dispatcher.stop()
        self.assertEqual(widget.cancelled, ["after#2"])


if __name__ == "__main__":
    unittest.main()
