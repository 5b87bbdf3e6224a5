"""
Tests for band_decoder.decode.
"""

import unittest
from decimal import Decimal
from unittest.mock import patch

from band_decoder import decode
from color_table import Color as C
from errors import (
    BandLengthError,
    DecodeError,
    InvalidDigitColor,
    InvalidMultiplierColor,
    InvalidTcrColor,
    InvalidToleranceColor,
)
from models import Resistance


class TestDecode(unittest.TestCase):

    def test_yellow_violet_red_gold(self):
        spec = decode((C.YELLOW, C.VIOLET, C.RED, C.GOLD), 4)
        self.assertEqual(spec.resistance.value, Decimal(4700))
        self.assertEqual(spec.tolerance, Decimal(5))
        self.assertIsNone(spec.tcr)
        self.assertEqual(spec.band_count, 4)

    def test_3_band_has_unspecified_tolerance_by_default(self):
        spec = decode((C.RED, C.BLACK, C.PINK), 3)
        self.assertEqual(spec.resistance.value, Decimal("0.02"))
        self.assertIsNone(spec.tolerance)

    def test_3_band_tolerance_policy(self):
        spec = decode((C.RED, C.BLACK, C.PINK), 3, three_band_tolerance=Decimal(20))
        self.assertEqual(spec.tolerance, Decimal(20))
        self.assertEqual(spec.bounds(), (Decimal("0.016"), Decimal("0.024")))

    def test_3_band_with_trailing_tolerance_band(self):
        spec = decode((C.RED, C.RED, C.ORANGE, C.GOLD), 3)
        self.assertEqual(spec.resistance.value, Decimal(22000))
        self.assertEqual(spec.tolerance, Decimal(5))
        self.assertEqual(spec.band_count, 4)

    def test_3_band_trailing_band_is_revalidated(self):
        with self.assertRaises(InvalidToleranceColor):
            decode((C.RED, C.RED, C.ORANGE, C.BLACK), 3)

    def test_5_band(self):
        spec = decode((C.GREEN, C.BLUE, C.BLACK, C.BLACK, C.BROWN), 5)
        self.assertEqual(spec.resistance, Resistance((5, 6), 1))
        self.assertEqual(spec.tolerance, Decimal(1))

    def test_6_band(self):
        spec = decode((C.GREEN, C.BLUE, C.BLACK, C.BLACK, C.BROWN, C.GREY), 6)
        self.assertEqual(spec.resistance.value, Decimal(560))
        self.assertEqual(spec.tcr, 1)
        self.assertEqual(spec.bounds(), (Decimal("554.4"), Decimal("565.6")))

    def test_4_band_low_tolerance(self):
        spec = decode((C.BLUE, C.GREY, C.BLACK, C.ORANGE), 4)
        self.assertEqual(spec.resistance.value, Decimal(68))
        self.assertEqual(spec.tolerance, Decimal("0.05"))

    def test_zero_ohm(self):
        spec = decode((C.BLACK, C.BLACK, C.BLACK, C.GOLD), 4)
        self.assertTrue(spec.resistance.is_zero)

    def test_gold_or_silver_in_any_digit_position(self):
        for n, width in ((3, 2), (4, 2), (5, 3), (6, 3)):
            good = list(decode_sample(n))
            for pos in range(width):
                for bad in (C.GOLD, C.SILVER):
                    bands = list(good)
                    bands[pos] = bad
                    with self.subTest(n=n, pos=pos, color=bad):
                        with self.assertRaises(InvalidDigitColor) as cm:
                            decode(bands, n)
                        self.assertEqual(cm.exception.position, pos)

    def test_leading_black(self):
        with self.assertRaises(InvalidDigitColor):
            decode((C.BLACK, C.BROWN, C.RED, C.GOLD), 4)

    def test_pink_in_digit_position(self):
        with self.assertRaises(InvalidDigitColor) as cm:
            decode((C.BROWN, C.PINK, C.RED, C.GOLD), 4)
        self.assertEqual(cm.exception.position, 1)

    def test_invalid_tolerance(self):
        for bad in (C.BLACK, C.WHITE, C.PINK):
            with self.subTest(color=bad):
                with self.assertRaises(InvalidToleranceColor):
                    decode((C.BROWN, C.BLACK, C.RED, bad), 4)

    def test_invalid_tcr(self):
        for bad in (C.WHITE, C.GOLD, C.SILVER, C.PINK):
            with self.subTest(color=bad):
                with self.assertRaises(InvalidTcrColor) as cm:
                    decode((C.BROWN, C.BLACK, C.BLACK, C.RED, C.GOLD, bad), 6)
                self.assertEqual(cm.exception.position, 5)

    def test_wrong_length(self):
        with self.assertRaises(BandLengthError):
            decode((C.BROWN, C.BLACK, C.RED), 4)
        with self.assertRaises(BandLengthError):
            decode((C.BROWN, C.BLACK, C.RED, C.GOLD, C.RED), 3)

    def test_errors_are_decode_errors(self):
        with self.assertRaises(DecodeError):
            decode((C.GOLD, C.BLACK, C.RED, C.GOLD), 4)


def decode_sample(band_count):
    return {
        3: (C.BROWN, C.BLACK, C.RED),
        4: (C.BROWN, C.BLACK, C.RED, C.GOLD),
        5: (C.BROWN, C.BLACK, C.BLACK, C.BROWN, C.BROWN),
        6: (C.BROWN, C.BLACK, C.BLACK, C.BROWN, C.BROWN, C.RED),
    }[band_count]


class TestMultiplierBand(unittest.TestCase):

    def test_fractional_multipliers(self):
        cases = [
            (C.GOLD, Decimal(1)),
            (C.SILVER, Decimal("0.1")),
            (C.PINK, Decimal("0.01")),
        ]
        for multiplier, expected in cases:
            with self.subTest(multiplier=multiplier):
                spec = decode((C.BROWN, C.BLACK, multiplier, C.GOLD), 4)
                self.assertEqual(spec.resistance.value, expected)

    def test_white_is_giga(self):
        spec = decode((C.BROWN, C.BLACK, C.WHITE, C.GOLD), 4)
        self.assertEqual(spec.resistance.value, Decimal(10) ** 10)

    def test_non_multiplier_color(self):
        with patch("band_decoder.multiplier_of", return_value=None):
            with self.assertRaises(InvalidMultiplierColor) as cm:
                decode((C.BROWN, C.BLACK, C.RED, C.GOLD), 4)
        self.assertEqual(cm.exception.position, 2)


if __name__ == "__main__":
    unittest.main()
