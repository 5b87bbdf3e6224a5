"""
Resistor Codec - Band Decoder

Tuple of band colors → ResistorSpec.  Each band is checked against the role
its position has in ``color_table.BAND_LAYOUTS``; the first band whose color
means nothing in that role is reported with its 0-based position.
"""

from __future__ import annotations

import logging
from decimal import Decimal

import config
from color_table import (
    BandRole,
    Color,
    band_layout,
    digit_of,
    is_valid_in_role,
    multiplier_of,
    tcr_of,
    tolerance_of,
)
from errors import (
    BandLengthError,
    InvalidDigitColor,
    InvalidMultiplierColor,
    InvalidTcrColor,
    InvalidToleranceColor,
)
from models import Resistance, ResistorSpec

log = logging.getLogger(__name__)

_DIGIT_ROLES = (BandRole.FIRST_DIGIT, BandRole.DIGIT)


def _digits(bands: tuple[Color, ...]) -> tuple[int, ...]:
    digits = []
    for i, color in enumerate(bands):
        digit = digit_of(color)
        if digit is None:
            raise InvalidDigitColor(
                f"{color.label} is not a digit color (band {i + 1})", position=i
            )
        digits.append(digit)

    # All-black digit bands are a zero-ohm part; otherwise no leading zero.
    if any(digits) and not is_valid_in_role(bands[0], BandRole.FIRST_DIGIT):
        raise InvalidDigitColor(
            f"{bands[0].label} cannot be the first digit band", position=0
        )
    return tuple(digits)


def decode(
    bands,
    band_count: int,
    three_band_tolerance: Decimal | None = config.THREE_BAND_TOLERANCE,
) -> ResistorSpec:
    """Decode *bands* (left to right) as a *band_count*-band resistor.

    A 3-band request that arrives with a fourth band is read as a 4-band
    resistor whose last band is an explicit tolerance.  Without that band a
    3-band resistor's tolerance is *three_band_tolerance* (None means
    "unspecified", never zero).

    Raises:
        ValueError:             unsupported band count.
        BandLengthError:        wrong number of bands for *band_count*.
        InvalidDigitColor:      e.g. Gold or Silver in a digit position.
        InvalidMultiplierColor: color has no multiplier meaning.
        InvalidToleranceColor:  color has no tolerance meaning.
        InvalidTcrColor:        color has no TCR meaning.
    """
    bands = tuple(bands)
    layout = band_layout(band_count)

    if band_count == 3 and len(bands) == 4:
        log.debug("3-band request with a trailing band; reading it as tolerance")
        band_count = 4
        layout = band_layout(4)

    if len(bands) != len(layout):
        raise BandLengthError(
            f"a {band_count}-band resistor has {len(layout)} bands, got {len(bands)}"
        )

    width = sum(1 for role in layout if role in _DIGIT_ROLES)
    digits = _digits(bands[:width])

    multiplier = multiplier_of(bands[width])
    if multiplier is None:
        raise InvalidMultiplierColor(
            f"{bands[width].label} is not a multiplier color (band {width + 1})",
            position=width,
        )

    tolerance = three_band_tolerance
    tcr = None
    for i in range(width + 1, len(bands)):
        color, role = bands[i], layout[i]
        if role is BandRole.TOLERANCE:
            tolerance = tolerance_of(color)
            if tolerance is None:
                raise InvalidToleranceColor(
                    f"{color.label} is not a tolerance color (band {i + 1})",
                    position=i,
                )
        elif role is BandRole.TCR:
            tcr = tcr_of(color)
            if tcr is None:
                raise InvalidTcrColor(
                    f"{color.label} is not a TCR color (band {i + 1})",
                    position=i,
                )

    spec = ResistorSpec(
        resistance=Resistance(digits, multiplier),
        tolerance=tolerance,
        tcr=tcr,
        band_count=band_count,
    )
    log.debug("decoded %s -> %s", "-".join(c.label for c in bands), spec)
    return spec
