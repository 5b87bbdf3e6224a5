"""
Resistor Codec - Value Objects

Resistance values are kept exact: a tuple of significant digits plus a
decimal exponent, value = int(digits) × 10^exponent Ω.  No floats anywhere,
so 4k7 is exactly 4700 and 0R1 is exactly 0.1.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

# SI prefix thresholds, largest first: (exponent, RKM letter, display prefix)
_PREFIXES: list[tuple[int, str, str]] = [
    (9,  "G", "G"),
    (6,  "M", "M"),
    (3,  "k", "k"),
    (0,  "R", ""),
]


def _plain(d: Decimal) -> str:
    """Decimal → shortest plain string: 4.70 → '4.7', 1E+1 → '10'."""
    return format(d.normalize(), "f")


def _scale(value: Decimal) -> tuple[Decimal, str, str]:
    """Pick the SI prefix for *value*; return (scaled value, RKM letter, prefix)."""
    if value == 0:
        return Decimal(0), "R", ""
    for exp, letter, prefix in _PREFIXES:
        if value >= Decimal(1).scaleb(exp):
            return value.scaleb(-exp), letter, prefix
    return value, "R", ""


def format_resistance(value: Decimal) -> str:
    """Format *value* ohms with an SI prefix, e.g. '4.7kΩ', '330Ω', '0.47Ω'."""
    scaled, _, prefix = _scale(value)
    return f"{_plain(scaled)}{prefix}Ω"


def format_percent(percent: Decimal) -> str:
    return f"±{_plain(percent)}%"


@dataclass(frozen=True)
class Resistance:
    """Exact resistance in ohms.

    Normalised on construction: leading and trailing zero digits are removed
    (trailing ones move into the exponent) and zero is always ``(0,)`` × 10^0,
    so two equal values always compare equal.
    """

    digits: tuple[int, ...]
    exponent: int = 0

    def __post_init__(self) -> None:
        digits = tuple(self.digits)
        if not digits:
            raise ValueError("a resistance needs at least one digit")
        for d in digits:
            if not isinstance(d, int) or not 0 <= d <= 9:
                raise ValueError(f"not a decimal digit: {d!r}")

        exponent = self.exponent
        # Leading zeros carry no information.
        start = 0
        while start < len(digits) and digits[start] == 0:
            start += 1
        digits = digits[start:]
        if not digits:
            digits, exponent = (0,), 0
        else:
            while len(digits) > 1 and digits[-1] == 0:
                digits = digits[:-1]
                exponent += 1

        object.__setattr__(self, "digits", digits)
        object.__setattr__(self, "exponent", exponent)

    @classmethod
    def from_value(cls, value) -> "Resistance":
        """Build from an int, str or Decimal (floats go through ``str``)."""
        dec = Decimal(str(value))
        if not dec.is_finite():
            raise ValueError(f"resistance must be finite: {value!r}")
        sign, digits, exponent = dec.as_tuple()
        if sign and any(digits):
            raise ValueError(f"resistance cannot be negative: {value!r}")
        return cls(tuple(digits), exponent)

    @property
    def is_zero(self) -> bool:
        return self.digits == (0,)

    @property
    def value(self) -> Decimal:
        """Exact value in ohms."""
        mantissa = int("".join(str(d) for d in self.digits))
        return Decimal(mantissa).scaleb(self.exponent)

    def to_rkm(self) -> str:
        """Return RKM notation, e.g. '4k7', '330R', '2M2', '0R47'."""
        scaled, letter, _ = _scale(self.value)
        text = _plain(scaled)
        if "." in text:
            return text.replace(".", letter)
        return text + letter

    def __str__(self) -> str:
        return format_resistance(self.value)


@dataclass(frozen=True)
class ResistorSpec:
    """Resistance + optional tolerance (%) + optional TCR (ppm/K) + band count."""

    resistance: Resistance
    tolerance: Decimal | None = None
    tcr: int | None = None
    band_count: int = 4

    def bounds(self) -> tuple[Decimal, Decimal]:
        """Return (min, max) ohms implied by the tolerance.

        With no tolerance the bounds collapse onto the nominal value.
        """
        nominal = self.resistance.value
        if self.tolerance is None:
            return nominal, nominal
        delta = nominal * self.tolerance / 100
        return nominal - delta, nominal + delta

    def __str__(self) -> str:
        parts = [str(self.resistance)]
        if self.tolerance is not None:
            parts.append(format_percent(self.tolerance))
        if self.tcr is not None:
            parts.append(f"{self.tcr}ppm/K")
        return " ".join(parts)
