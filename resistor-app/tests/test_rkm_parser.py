"""
Tests for rkm_parser.parse_resistance.
"""

import unittest
from decimal import Decimal

from errors import InvalidFormat, OutOfRange, ParseError, TooManySignificantDigits
from models import Resistance
from rkm_parser import parse_resistance


class TestRkmNotation(unittest.TestCase):

    def test_4k7(self):
        r = parse_resistance("4k7")
        self.assertEqual(r.digits, (4, 7))
        self.assertEqual(r.exponent, 2)
        self.assertEqual(r.value, Decimal(4700))

    def test_330R_equals_330(self):
        self.assertEqual(parse_resistance("330R"), parse_resistance("330"))
        self.assertEqual(parse_resistance("330").value, Decimal(330))

    def test_2M2(self):
        self.assertEqual(parse_resistance("2M2").value, Decimal(2_200_000))

    def test_milliohm(self):
        r = parse_resistance("0m5")
        self.assertEqual(r.digits, (5,))
        self.assertEqual(r.value, Decimal("0.0005"))

    def test_letter_first(self):
        self.assertEqual(parse_resistance("R47").value, Decimal("0.47"))
        self.assertEqual(parse_resistance("k1").value, Decimal(100))

    def test_letter_last(self):
        self.assertEqual(parse_resistance("10k").value, Decimal(10_000))
        self.assertEqual(parse_resistance("1G").value, Decimal(10) ** 9)

    def test_upper_and_lower_k(self):
        self.assertEqual(parse_resistance("4K7"), parse_resistance("4k7"))

    def test_m_and_M_differ(self):
        self.assertEqual(parse_resistance("1m").value, Decimal("0.001"))
        self.assertEqual(parse_resistance("1M").value, Decimal(1_000_000))


class TestDecimalNotation(unittest.TestCase):

    def test_plain_decimal(self):
        self.assertEqual(parse_resistance("0.47"), parse_resistance("R47"))

    def test_decimal_with_letter(self):
        self.assertEqual(parse_resistance("4.7k"), parse_resistance("4k7"))
        self.assertEqual(parse_resistance("1.5M").value, Decimal(1_500_000))

    def test_unit_suffixes(self):
        for text in ("4k7Ω", "4k7 Ω", "4.7kohm", "4.7k ohms", "  4k7  "):
            with self.subTest(text=text):
                self.assertEqual(parse_resistance(text).value, Decimal(4700))


class TestNormalisation(unittest.TestCase):

    def test_leading_and_trailing_zeros_stripped(self):
        r = parse_resistance("004700")
        self.assertEqual(r.digits, (4, 7))
        self.assertEqual(r.exponent, 2)

    def test_trailing_fraction_zeros(self):
        self.assertEqual(parse_resistance("4.700k"), parse_resistance("4k7"))

    def test_zero(self):
        for text in ("0", "0R", "000", "0k0"):
            with self.subTest(text=text):
                r = parse_resistance(text)
                self.assertEqual(r.digits, (0,))
                self.assertEqual(r.exponent, 0)

    def test_parsing_is_repeatable(self):
        self.assertEqual(parse_resistance("2M2"), parse_resistance("2M2"))


class TestErrors(unittest.TestCase):

    def test_invalid_formats(self):
        for text in ("", "   ", "k", ".", "R", "4k7k", "4.7k2", "abc",
                     "-4k7", "4 7", "1e3", "4k7x", "4..7"):
            with self.subTest(text=text):
                with self.assertRaises(InvalidFormat):
                    parse_resistance(text)

    def test_two_letters_is_invalid_format(self):
        with self.assertRaises(InvalidFormat):
            parse_resistance("1k2M")

    def test_non_string(self):
        with self.assertRaises(InvalidFormat):
            parse_resistance(4700)

    def test_too_many_significant_digits(self):
        for text in ("4701", "1k234", "0.01003"):
            with self.subTest(text=text):
                with self.assertRaises(TooManySignificantDigits):
                    parse_resistance(text)

    def test_absurd_magnitudes_out_of_range(self):
        for text in ("1000G", "0m0001"):
            with self.subTest(text=text):
                with self.assertRaises(OutOfRange):
                    parse_resistance(text)

    def test_errors_share_a_base(self):
        with self.assertRaises(ParseError):
            parse_resistance("nope")
        with self.assertRaises(ValueError):
            parse_resistance("nope")


if __name__ == "__main__":
    unittest.main()
