"""
Resistor Codec - Band Encoder

ResistorSpec → tuple of band colors, laid out per ``color_table.BAND_LAYOUTS``:

    3 bands   D D M          (tolerance implied by config.THREE_BAND_TOLERANCE)
    4 bands   D D M T
    5 bands   D D D M T
    6 bands   D D D M T C

The encoder never rounds: a value with more significant digits than the
resistor has digit bands is rejected, never approximated.
"""

from __future__ import annotations

import logging
from decimal import Decimal

import config
from color_table import (
    Color,
    color_for_digit,
    color_for_multiplier,
    color_for_tcr,
    color_for_tolerance,
    digit_band_count,
)
from errors import (
    PrecisionLoss,
    UnrepresentableMultiplier,
    UnsupportedTcr,
    UnsupportedTolerance,
)
from models import Resistance, ResistorSpec

log = logging.getLogger(__name__)


def significant_digits_for(resistance: Resistance, width: int) -> tuple[tuple[int, ...], int]:
    """Pad *resistance* out to exactly *width* digits.

    Returns ``(digits, multiplier_exponent)`` with
    int(digits) × 10^multiplier_exponent == resistance.value.

    Raises:
        PrecisionLoss: if the value has more than *width* significant digits.
    """
    if resistance.is_zero:
        return (0,) * width, 0

    digits = resistance.digits
    if len(digits) > width:
        raise PrecisionLoss(
            f"{resistance} needs {len(digits)} significant digits; "
            f"only {width} digit bands available"
        )
    padding = width - len(digits)
    return digits + (0,) * padding, resistance.exponent - padding


def _tolerance_band(spec: ResistorSpec) -> Color:
    if spec.tolerance is None:
        raise UnsupportedTolerance(
            f"a {spec.band_count}-band resistor needs a tolerance"
        )
    color = color_for_tolerance(spec.tolerance)
    if color is None:
        raise UnsupportedTolerance(f"no tolerance band for ±{spec.tolerance}%")
    return color


def _tcr_band(spec: ResistorSpec) -> Color:
    if spec.tcr is None:
        raise UnsupportedTcr("a 6-band resistor needs a TCR")
    color = color_for_tcr(spec.tcr)
    if color is None:
        raise UnsupportedTcr(f"no TCR band for {spec.tcr} ppm/K")
    return color


def encode(
    spec: ResistorSpec,
    three_band_tolerance: Decimal | None = config.THREE_BAND_TOLERANCE,
) -> tuple[Color, ...]:
    """Return the band colors for *spec*, left to right.

    Args:
        spec:                 What to encode; ``spec.band_count`` picks the layout.
        three_band_tolerance: Tolerance a 3-band resistor implies.  A 3-band
                              spec may carry this tolerance (or none) but no
                              other, since there is no band to show it.

    Raises:
        ValueError:                unsupported band count.
        PrecisionLoss:             too many significant digits.
        UnrepresentableMultiplier: no multiplier band for the exponent.
        UnsupportedTolerance:      tolerance missing or not a standard value.
        UnsupportedTcr:            TCR missing on 6 bands, present on fewer,
                                   or not a standard value.
    """
    width = digit_band_count(spec.band_count)

    digits, exponent = significant_digits_for(spec.resistance, width)

    multiplier = color_for_multiplier(exponent)
    if multiplier is None:
        raise UnrepresentableMultiplier(
            f"{spec.resistance} on {spec.band_count} bands needs a ×10^{exponent} "
            f"multiplier band, which does not exist"
        )

    bands = [color_for_digit(d) for d in digits]
    bands.append(multiplier)

    if spec.band_count >= 4:
        bands.append(_tolerance_band(spec))
    elif spec.tolerance is not None and spec.tolerance != three_band_tolerance:
        raise UnsupportedTolerance(
            f"a 3-band resistor cannot show ±{spec.tolerance}%"
        )

    if spec.band_count == 6:
        bands.append(_tcr_band(spec))
    elif spec.tcr is not None:
        raise UnsupportedTcr(f"a {spec.band_count}-band resistor has no TCR band")

    log.debug("encoded %s -> %s", spec, "-".join(c.label for c in bands))
    return tuple(bands)
