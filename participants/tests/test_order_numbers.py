"""
participants/tests/test_order_numbers.py
"""

from __future__ import annotations

import unittest

from participants.logic.order_numbers import parse_order_numbers


class TestParseOrderNumbers(unittest.TestCase):
    def test_mixed_separators_and_duplicates(self) -> None:
        text = "1001, 1002\n1001;Bestellung 77 und x5"
        self.assertEqual(parse_order_numbers(text), ["1001", "1002", "77"])

    def test_single_digits_ignored(self) -> None:
        self.assertEqual(parse_order_numbers("1 2 3"), [])

    def test_empty_input(self) -> None:
        self.assertEqual(parse_order_numbers(""), [])
        self.assertEqual(parse_order_numbers(None), [])


if __name__ == "__main__":
    unittest.main()
