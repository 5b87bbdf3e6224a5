"""
Tests for band_encoder.encode.
"""

import unittest
from decimal import Decimal

from band_encoder import encode, significant_digits_for
from color_table import Color as C
from errors import (
    PrecisionLoss,
    UnrepresentableMultiplier,
    UnsupportedTcr,
    UnsupportedTolerance,
)
from models import Resistance, ResistorSpec


def _spec(value, tolerance=None, tcr=None, band_count=4):
    tol = None if tolerance is None else Decimal(str(tolerance))
    return ResistorSpec(Resistance.from_value(value), tol, tcr, band_count)


class TestSignificantDigits(unittest.TestCase):

    def test_pads_to_width(self):
        self.assertEqual(significant_digits_for(Resistance((4, 7), 2), 3), ((4, 7, 0), 1))
        self.assertEqual(significant_digits_for(Resistance((1,), 4), 2), ((1, 0), 3))

    def test_zero(self):
        self.assertEqual(significant_digits_for(Resistance((0,), 0), 2), ((0, 0), 0))

    def test_too_many_digits(self):
        with self.assertRaises(PrecisionLoss):
            significant_digits_for(Resistance((1, 2, 3), 0), 2)


class TestEncode(unittest.TestCase):

    def test_4700_ohm_4_band(self):
        self.assertEqual(encode(_spec(4700, 5)), (C.YELLOW, C.VIOLET, C.RED, C.GOLD))

    def test_3_band(self):
        self.assertEqual(encode(_spec(200, band_count=3)), (C.RED, C.BLACK, C.BROWN))
        self.assertEqual(encode(_spec(11, band_count=3)), (C.BROWN, C.BROWN, C.BLACK))
        self.assertEqual(encode(_spec(1, band_count=3)), (C.BROWN, C.BLACK, C.GOLD))
        self.assertEqual(encode(_spec("0.8", band_count=3)), (C.GREY, C.BLACK, C.SILVER))
        self.assertEqual(encode(_spec("0.047", band_count=3)), (C.YELLOW, C.VIOLET, C.PINK))

    def test_5_band(self):
        self.assertEqual(
            encode(_spec("0.123", "0.5", band_count=5)),
            (C.BROWN, C.RED, C.ORANGE, C.PINK, C.GREEN),
        )
        self.assertEqual(
            encode(_spec(560, 1, band_count=5)),
            (C.GREEN, C.BLUE, C.BLACK, C.BLACK, C.BROWN),
        )

    def test_6_band(self):
        self.assertEqual(
            encode(_spec(54, 10, 5, band_count=6)),
            (C.GREEN, C.YELLOW, C.BLACK, C.GOLD, C.SILVER, C.VIOLET),
        )
        self.assertEqual(
            encode(_spec("0.123", "0.5", 50, band_count=6)),
            (C.BROWN, C.RED, C.ORANGE, C.PINK, C.GREEN, C.RED),
        )

    def test_zero_ohm(self):
        self.assertEqual(encode(_spec(0, 5)), (C.BLACK, C.BLACK, C.BLACK, C.GOLD))

    def test_encoding_is_deterministic(self):
        spec = _spec(4700, 5)
        self.assertEqual(encode(spec), encode(spec))

    def test_precision_loss(self):
        with self.assertRaises(PrecisionLoss):
            encode(_spec(4710, band_count=3))
        with self.assertRaises(PrecisionLoss):
            encode(_spec(123, 5, band_count=4))

    def test_four_significant_digits_on_3_bands(self):
        spec = ResistorSpec(Resistance((4, 7, 0, 1)), band_count=3)
        with self.assertRaises(PrecisionLoss):
            encode(spec)

    def test_unrepresentable_multiplier(self):
        # 0.5 mΩ needs ×10^-4 on 3 bands
        with self.assertRaises(UnrepresentableMultiplier):
            encode(_spec("0.0005", band_count=3))
        # 100 GΩ needs ×10^10 on 4 bands
        with self.assertRaises(UnrepresentableMultiplier):
            encode(_spec(10 ** 11, 5))

    def test_extra_digit_band_reaches_lower_values(self):
        # 10 mΩ: ×10^-3 on 3 bands, ×10^-4 (impossible) on 5
        self.assertEqual(encode(_spec("0.01", band_count=3)), (C.BROWN, C.BLACK, C.PINK))
        with self.assertRaises(UnrepresentableMultiplier):
            encode(_spec("0.01", 1, band_count=5))

    def test_missing_tolerance(self):
        for n in (4, 5):
            with self.assertRaises(UnsupportedTolerance):
                encode(_spec(4700, band_count=n))

    def test_unsupported_tolerance(self):
        with self.assertRaises(UnsupportedTolerance):
            encode(_spec(4700, 3))

    def test_3_band_tolerance_policy(self):
        spec = _spec(4700, 20, band_count=3)
        with self.assertRaises(UnsupportedTolerance):
            encode(spec, three_band_tolerance=None)
        self.assertEqual(encode(spec, three_band_tolerance=Decimal(20)),
                         (C.YELLOW, C.VIOLET, C.RED))

    def test_missing_or_bad_tcr_on_6_band(self):
        with self.assertRaises(UnsupportedTcr):
            encode(_spec(4700, 5, band_count=6))
        with self.assertRaises(UnsupportedTcr):
            encode(_spec(4700, 5, 42, band_count=6))

    def test_tcr_on_fewer_than_6_bands(self):
        with self.assertRaises(UnsupportedTcr):
            encode(_spec(4700, 5, 50, band_count=5))

    def test_bad_band_count(self):
        with self.assertRaises(ValueError):
            encode(_spec(4700, 5, band_count=7))


if __name__ == "__main__":
    unittest.main()
