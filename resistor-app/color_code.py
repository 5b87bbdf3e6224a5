from __future__ import annotations

"""
Resistor Codec - Conversion Facade

The two directions of the resistor color code, plus a few helpers the
calculator screen uses for labelling.  Everything here is a pure function;
failures raise :class:`errors.ConversionError` (or a subclass) with the
parse / encode / decode error that caused them on ``.cause``.

Exports:
    specs_to_colors     – '4k7', ±5 %, 4 bands → (Yellow, Violet, Red, Gold)
    colors_to_specs     – (Yellow, Violet, Red, Gold), 4 → ResistorSpec
    minimal_band_count  – fewest bands that show a value exactly
    describe_bands      – bands → 'Yellow-Violet-Red-Gold (4.7kΩ ±5%)'
    band_labels         – band count → ['Digit 1', 'Digit 2', 'Multiplier', …]
    band_value_label    – (Red, MULTIPLIER) → '×10^2'
"""

import logging
from decimal import Decimal, InvalidOperation

import config
from band_decoder import decode
from band_encoder import encode
from color_table import (
    BAND_COUNTS,
    BandRole,
    Color,
    band_layout,
    color_from_name,
    digit_of,
    multiplier_of,
    tcr_of,
    tolerance_of,
)
from errors import (
    BandCountMismatch,
    ConversionError,
    DecodeError,
    EncodeError,
    InvalidBandCount,
    ParseError,
    UnknownColor,
    UnsupportedTcr,
    UnsupportedTolerance,
)
from models import Resistance, ResistorSpec, format_percent
from rkm_parser import parse_resistance

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Module-level constants
# ---------------------------------------------------------------------------

_ROLE_LABELS: dict[BandRole, str] = {
    BandRole.MULTIPLIER: "Multiplier",
    BandRole.TOLERANCE:  "Tolerance",
    BandRole.TCR:        "TCR",
}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _check_band_count(band_count: int) -> None:
    if band_count not in BAND_COUNTS:
        raise InvalidBandCount(
            f"band count must be one of {', '.join(map(str, BAND_COUNTS))}, "
            f"got {band_count!r}"
        )


def _wrap(exc: ParseError | EncodeError | DecodeError) -> ConversionError:
    return ConversionError(str(exc), cause=exc)


def _as_tolerance(tolerance) -> Decimal | None:
    if tolerance is None:
        return None
    try:
        if isinstance(tolerance, Decimal):
            value = tolerance
        else:
            value = Decimal(str(tolerance).strip().rstrip("%").lstrip("±"))
    except InvalidOperation:
        value = None
    if value is None or not value.is_finite():
        raise _wrap(UnsupportedTolerance(f"not a tolerance: {tolerance!r}"))
    return value


def _as_tcr(tcr) -> int | None:
    if tcr is None or isinstance(tcr, int):
        return tcr
    try:
        value = Decimal(str(tcr).strip())
    except InvalidOperation:
        value = None
    # 50, "50" and 50.0 are all 50 ppm/K; 50.5 is not a TCR.
    if value is None or not value.is_finite() or value != value.to_integral_value():
        raise _wrap(UnsupportedTcr(f"not a TCR: {tcr!r}"))
    return int(value)


def _as_color(band, position: int) -> Color:
    if isinstance(band, Color):
        return band
    color = color_from_name(band) if isinstance(band, str) else None
    if color is None:
        raise _wrap(UnknownColor(f"unknown band color: {band!r}", position=position))
    return color


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def specs_to_colors(
    resistance: str | Resistance,
    tolerance=None,
    tcr=None,
    band_count: int = config.DEFAULT_BAND_COUNT,
) -> tuple[Color, ...]:
    """Return the bands for *resistance* with optional *tolerance* / *tcr*.

    Args:
        resistance: RKM or decimal string ('4k7', '330R', '4.7k') or a
                    :class:`models.Resistance`.
        tolerance:  Percent, e.g. ``5``, ``"0.25"``, ``Decimal("1")``.  Defaults
                    to ``config.DEFAULT_TOLERANCE`` on 4/5/6 bands and to
                    ``config.THREE_BAND_TOLERANCE`` on 3 bands, where no other
                    value is allowed.
        tcr:        ppm/K.  Only allowed on 6 bands.
        band_count: 3, 4, 5 or 6.

    Raises:
        InvalidBandCount:  *band_count* not in 3–6.
        BandCountMismatch: 3-band tolerance other than the configured one, or
                           TCR on fewer than 6 bands.
        ConversionError:   parse or encode failure (see ``.cause``).
    """
    _check_band_count(band_count)
    if tcr is not None and band_count < 6:
        raise BandCountMismatch(f"a {band_count}-band resistor has no TCR band")

    tolerance = _as_tolerance(tolerance)
    tcr = _as_tcr(tcr)
    if band_count == 3:
        implied = config.THREE_BAND_TOLERANCE
        if tolerance is not None and tolerance != implied:
            raise BandCountMismatch("a 3-band resistor has no tolerance band")
        tolerance = implied
    elif tolerance is None:
        tolerance = config.DEFAULT_TOLERANCE

    try:
        if not isinstance(resistance, Resistance):
            resistance = parse_resistance(resistance)
        spec = ResistorSpec(resistance, tolerance, tcr, band_count)
        return encode(spec, three_band_tolerance=config.THREE_BAND_TOLERANCE)
    except (ParseError, EncodeError) as exc:
        log.debug("specs_to_colors(%r, %s bands) failed: %s", resistance, band_count, exc)
        raise _wrap(exc) from exc


def colors_to_specs(bands, band_count: int) -> ResistorSpec:
    """Decode *bands* (Colors or color names, left to right).

    Raises:
        InvalidBandCount:  *band_count* not in 3–6.
        BandCountMismatch: ``len(bands) != band_count``.
        ConversionError:   unknown color name or decode failure (see ``.cause``).
    """
    _check_band_count(band_count)
    colors = tuple(_as_color(b, i) for i, b in enumerate(bands))
    if len(colors) != band_count:
        raise BandCountMismatch(
            f"expected {band_count} bands, got {len(colors)}"
        )

    try:
        return decode(colors, band_count,
                      three_band_tolerance=config.THREE_BAND_TOLERANCE)
    except DecodeError as exc:
        log.debug("colors_to_specs(%s) failed: %s",
                  "-".join(c.label for c in colors), exc)
        raise _wrap(exc) from exc


def minimal_band_count(resistance: str | Resistance, tolerance=None, tcr=None) -> int:
    """Return the fewest bands that show the inputs exactly.

    A TCR forces 6 bands.  A tolerance rules out 3 bands unless it is the one
    ``config.THREE_BAND_TOLERANCE`` implies.

    Raises:
        ConversionError: no band count can show the inputs (the error from the
                         widest candidate is raised).
    """
    candidates = [n for n in BAND_COUNTS if tcr is None or n == 6]
    last_error = None
    for n in candidates:
        try:
            specs_to_colors(resistance, tolerance, tcr, n)
        except ConversionError as exc:
            last_error = exc
            continue
        return n
    raise last_error


def describe_bands(bands) -> str:
    """Return e.g. 'Yellow-Violet-Red-Gold (4.7kΩ ±5%)' for a band tuple."""
    bands = tuple(bands)
    spec = colors_to_specs(bands, len(bands))
    names = "-".join(_as_color(b, i).label for i, b in enumerate(bands))
    return f"{names} ({spec})"


def band_labels(band_count: int) -> list[str]:
    """Role label for each band position: 'Digit 1', …, 'Multiplier', 'Tolerance', 'TCR'."""
    _check_band_count(band_count)
    labels = []
    for i, role in enumerate(band_layout(band_count)):
        labels.append(_ROLE_LABELS.get(role, f"Digit {i + 1}"))
    return labels


def band_value_label(color: Color, role: BandRole) -> str:
    """What *color* means in *role*, or '' if it means nothing there."""
    if role in (BandRole.FIRST_DIGIT, BandRole.DIGIT):
        digit = digit_of(color)
        if digit is None or (role is BandRole.FIRST_DIGIT and digit == 0):
            return ""
        return str(digit)
    if role is BandRole.MULTIPLIER:
        exponent = multiplier_of(color)
        return "" if exponent is None else f"×10^{exponent}"
    if role is BandRole.TOLERANCE:
        tolerance = tolerance_of(color)
        return "" if tolerance is None else format_percent(tolerance)
    tcr = tcr_of(color)
    return "" if tcr is None else f"{tcr} ppm/K"


# ---------------------------------------------------------------------------
# Self-test (run with: python color_code.py)
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    cases = [
        (("4k7", 5, None, 4),   "Yellow-Violet-Red-Gold"),
        (("330R", 5, None, 4),  "Orange-Orange-Brown-Gold"),
        (("10k", None, None, 3), "Brown-Black-Orange"),
        (("0R47", 1, None, 5),  "Yellow-Violet-Black-Pink-Brown"),
        (("54", 10, 5, 6),      "Green-Yellow-Black-Gold-Silver-Violet"),
    ]

    all_pass = True
    for args, expected_bands in cases:
        bands = specs_to_colors(*args)
        band_names = "-".join(c.label for c in bands)
        status = "PASS" if band_names == expected_bands else "FAIL"
        if status == "FAIL":
            all_pass = False
        print(f"{status}  {args[0]:>6}  got={band_names!r:<44}  expected={expected_bands!r}")
        print(f"        description: {describe_bands(bands)}")

    print()
    print("All tests passed." if all_pass else "SOME TESTS FAILED.")
