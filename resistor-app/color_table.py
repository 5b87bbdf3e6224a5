"""
Resistor Codec - Color Table

Static lookup of every band color and what it means in each band role:
significant digit, multiplier (power of ten), tolerance (percent) and
temperature coefficient (ppm/K).  Built once at import time and never mutated.

Exports:
    Color, BandRole, ColorFacets
    digit_of / multiplier_of / tolerance_of / tcr_of        – forward lookups
    color_for_digit / color_for_multiplier /
    color_for_tolerance / color_for_tcr                     – reverse lookups
    valid_colors / is_valid_in_role                         – band-role validity
    band_layout / digit_band_count                          – band-role layout
    color_from_name                                         – "gray" → Color.GREY
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from types import MappingProxyType


class Color(Enum):
    BLACK = "black"
    BROWN = "brown"
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    VIOLET = "violet"
    GREY = "grey"
    WHITE = "white"
    GOLD = "gold"
    SILVER = "silver"
    PINK = "pink"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class BandRole(Enum):
    FIRST_DIGIT = "first_digit"
    DIGIT = "digit"
    MULTIPLIER = "multiplier"
    TOLERANCE = "tolerance"
    TCR = "tcr"


@dataclass(frozen=True)
class ColorFacets:
    """Everything one color can encode.  ``None`` means "not valid in that role"."""

    digit: int | None
    multiplier: int | None
    tolerance: Decimal | None
    tcr: int | None
    rgb: tuple[int, int, int]


# ---------------------------------------------------------------------------
# Module-level constants
# ---------------------------------------------------------------------------

def _pct(text: str) -> Decimal:
    return Decimal(text)


# color -> (digit, multiplier exponent, tolerance %, TCR ppm/K, RGB)
COLOR_TABLE: MappingProxyType[Color, ColorFacets] = MappingProxyType({
    Color.BLACK:  ColorFacets(0,    0,  None,          250,  (0,   0,   0  )),
    Color.BROWN:  ColorFacets(1,    1,  _pct("1"),     100,  (139, 69,  19 )),
    Color.RED:    ColorFacets(2,    2,  _pct("2"),     50,   (220, 20,  20 )),
    Color.ORANGE: ColorFacets(3,    3,  _pct("0.05"),  15,   (255, 140, 0  )),
    Color.YELLOW: ColorFacets(4,    4,  _pct("0.02"),  25,   (255, 220, 0  )),
    Color.GREEN:  ColorFacets(5,    5,  _pct("0.5"),   20,   (0,   160, 0  )),
    Color.BLUE:   ColorFacets(6,    6,  _pct("0.25"),  10,   (0,   80,  200)),
    Color.VIOLET: ColorFacets(7,    7,  _pct("0.1"),   5,    (148, 0,   211)),
    Color.GREY:   ColorFacets(8,    8,  _pct("0.01"),  1,    (160, 160, 160)),
    Color.WHITE:  ColorFacets(9,    9,  None,          None, (255, 255, 255)),
    Color.GOLD:   ColorFacets(None, -1, _pct("5"),     None, (212, 175, 55 )),
    Color.SILVER: ColorFacets(None, -2, _pct("10"),    None, (192, 192, 192)),
    Color.PINK:   ColorFacets(None, -3, None,          None, (255, 105, 180)),
})

MIN_MULTIPLIER: int = min(f.multiplier for f in COLOR_TABLE.values() if f.multiplier is not None)
MAX_MULTIPLIER: int = max(f.multiplier for f in COLOR_TABLE.values() if f.multiplier is not None)

# Reverse lookups, derived from COLOR_TABLE so the table stays the single source.
_BY_DIGIT = MappingProxyType(
    {f.digit: c for c, f in COLOR_TABLE.items() if f.digit is not None}
)
_BY_MULTIPLIER = MappingProxyType(
    {f.multiplier: c for c, f in COLOR_TABLE.items() if f.multiplier is not None}
)
_BY_TOLERANCE = MappingProxyType(
    {f.tolerance: c for c, f in COLOR_TABLE.items() if f.tolerance is not None}
)
_BY_TCR = MappingProxyType(
    {f.tcr: c for c, f in COLOR_TABLE.items() if f.tcr is not None}
)

TOLERANCES: frozenset[Decimal] = frozenset(_BY_TOLERANCE)
TCRS: frozenset[int] = frozenset(_BY_TCR)

_ROLE_COLORS: MappingProxyType[BandRole, frozenset[Color]] = MappingProxyType({
    # A leading black band would be a leading zero digit.
    BandRole.FIRST_DIGIT: frozenset(c for c in _BY_DIGIT.values() if c is not Color.BLACK),
    BandRole.DIGIT:       frozenset(_BY_DIGIT.values()),
    BandRole.MULTIPLIER:  frozenset(_BY_MULTIPLIER.values()),
    BandRole.TOLERANCE:   frozenset(_BY_TOLERANCE.values()),
    BandRole.TCR:         frozenset(_BY_TCR.values()),
})

_D1, _D, _M, _T, _C = (
    BandRole.FIRST_DIGIT, BandRole.DIGIT, BandRole.MULTIPLIER,
    BandRole.TOLERANCE, BandRole.TCR,
)

# band count -> role of each band, left to right
BAND_LAYOUTS: MappingProxyType[int, tuple[BandRole, ...]] = MappingProxyType({
    3: (_D1, _D, _M),
    4: (_D1, _D, _M, _T),
    5: (_D1, _D, _D, _M, _T),
    6: (_D1, _D, _D, _M, _T, _C),
})

BAND_COUNTS: tuple[int, ...] = tuple(sorted(BAND_LAYOUTS))

_NAME_ALIASES = {"gray": Color.GREY, "purple": Color.VIOLET}


# ---------------------------------------------------------------------------
# Forward lookups
# ---------------------------------------------------------------------------

def digit_of(color: Color) -> int | None:
    return COLOR_TABLE[color].digit


def multiplier_of(color: Color) -> int | None:
    return COLOR_TABLE[color].multiplier


def tolerance_of(color: Color) -> Decimal | None:
    return COLOR_TABLE[color].tolerance


def tcr_of(color: Color) -> int | None:
    return COLOR_TABLE[color].tcr


def rgb_of(color: Color) -> tuple[int, int, int]:
    return COLOR_TABLE[color].rgb


# ---------------------------------------------------------------------------
# Reverse lookups
# ---------------------------------------------------------------------------

def color_for_digit(digit: int) -> Color:
    """Return the color for a significant digit 0–9.

    Raises:
        ValueError: if *digit* is outside 0–9.
    """
    try:
        return _BY_DIGIT[digit]
    except KeyError:
        raise ValueError(f"not a decimal digit: {digit!r}") from None


def color_for_multiplier(exponent: int) -> Color | None:
    """Return the color for ×10^*exponent*, or None outside MIN..MAX_MULTIPLIER."""
    return _BY_MULTIPLIER.get(exponent)


def color_for_tolerance(percent) -> Color | None:
    """Return the color for ±*percent* %, compared exactly (``Decimal``).

    Accepts anything ``Decimal(str(x))`` understands, so ``5``, ``"0.5"`` and
    ``Decimal("0.25")`` all work.  Returns None for values not in the set.
    """
    try:
        key = Decimal(str(percent))
    except (InvalidOperation, ValueError):
        return None
    if not key.is_finite():
        return None
    return _BY_TOLERANCE.get(key)


def color_for_tcr(ppm: int) -> Color | None:
    return _BY_TCR.get(ppm)


# ---------------------------------------------------------------------------
# Band roles and layouts
# ---------------------------------------------------------------------------

def valid_colors(role: BandRole) -> frozenset[Color]:
    return _ROLE_COLORS[role]


def is_valid_in_role(color: Color, role: BandRole) -> bool:
    return color in _ROLE_COLORS[role]


def band_layout(band_count: int) -> tuple[BandRole, ...]:
    """Return the role of each band for a *band_count*-band resistor.

    Raises:
        ValueError: if *band_count* is not 3, 4, 5 or 6.
    """
    try:
        return BAND_LAYOUTS[band_count]
    except KeyError:
        raise ValueError(f"unsupported band count: {band_count!r}") from None


def digit_band_count(band_count: int) -> int:
    """2 digit bands for 3/4-band resistors, 3 for 5/6-band."""
    return sum(1 for role in band_layout(band_count) if role in (_D1, _D))


def color_from_name(name: str) -> Color | None:
    """Case-insensitive name lookup (accepts 'gray' and 'purple').  None if unknown."""
    key = name.strip().lower()
    if key in _NAME_ALIASES:
        return _NAME_ALIASES[key]
    try:
        return Color(key)
    except ValueError:
        return None
