# -*- coding: utf-8 -*-
"""Tests for money normalisation, parsing and formatting."""

import unittest
from decimal import Decimal
from unittest import mock

from bankmenu.errors import InvalidAmount, InvalidNumericInput
from bankmenu.money import as_money, fmt_money, parse_amount, require_positive


class TestAsMoney(unittest.TestCase):
    def test_quantizes_to_two_places_with_bankers_rounding(self):
        self.assertEqual(as_money("10"), Decimal("10.00"))
        self.assertEqual(as_money("0.125"), Decimal("0.12"))
        self.assertEqual(as_money("0.135"), Decimal("0.14"))

    def test_float_goes_through_str(self):
        self.assertEqual(as_money(0.1 + 0.2), Decimal("0.30"))


class TestParseAmount(unittest.TestCase):
    def test_accepts_plain_and_decimal_numbers(self):
        self.assertEqual(parse_amount("500"), Decimal("500.00"))
        self.assertEqual(parse_amount("  12.5 "), Decimal("12.50"))
        self.assertEqual(parse_amount("1e3"), Decimal("1000.00"))

    def test_zero_is_a_valid_amount(self):
        self.assertEqual(parse_amount("0"), Decimal("0.00"))

    def test_non_numeric_text_is_rejected(self):
        for text in ("", "abc", "12abc", "1,000", "nan", "inf", "-Infinity"):
            with self.subTest(text=text):
                with self.assertRaises(InvalidNumericInput):
                    parse_amount(text)

    def test_negative_amount_is_rejected(self):
        with self.assertRaises(InvalidAmount):
            parse_amount("-5")

    def test_amount_too_large_for_context_is_rejected(self):
        with self.assertRaises(InvalidNumericInput):
            parse_amount("1e40")

    def test_more_than_two_decimal_places_is_rejected(self):
        for text in ("1000.005", "0.004", "1e-3"):
            with self.subTest(text=text):
                with self.assertRaises(InvalidNumericInput):
                    parse_amount(text)

    def test_trailing_zeros_beyond_two_places_are_fine(self):
        self.assertEqual(parse_amount("1.500"), Decimal("1.50"))


class TestRequirePositive(unittest.TestCase):
    def test_positive_amount_passes(self):
        self.assertEqual(require_positive(Decimal("0.01")), Decimal("0.01"))

    def test_zero_negative_and_sub_penny_fail(self):
        for amount in (0, "-5", Decimal("0.004"), Decimal("1000.005")):
            with self.subTest(amount=amount):
                with self.assertRaises(InvalidAmount):
                    require_positive(amount)

    def test_unusable_values_raise_invalid_amount(self):
        for amount in (float("nan"), float("inf"), Decimal("-Infinity"), "abc", None, "1e40"):
            with self.subTest(amount=amount):
                with self.assertRaises(InvalidAmount):
                    require_positive(amount)


class TestFmtMoney(unittest.TestCase):
    def test_uses_configured_currency_symbol(self):
        self.assertEqual(fmt_money(Decimal("2500")), "£2,500.00")

    def test_unknown_currency_falls_back_to_dollar(self):
        with mock.patch("bankmenu.config.CURRENCY", "XYZ"):
            self.assertEqual(fmt_money("1"), "$1.00")

    def test_currency_can_be_switched(self):
        with mock.patch("bankmenu.config.CURRENCY", "EUR"):
            self.assertEqual(fmt_money("1234.5"), "€1,234.50")


if __name__ == '__main__':
    unittest.main(verbosity=2)
