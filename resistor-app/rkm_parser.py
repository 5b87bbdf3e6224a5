"""
Resistor Codec - RKM Parser

Turns a resistance string into an exact :class:`models.Resistance`.

Accepted forms (an optional trailing 'Ω' / 'ohm' / 'ohms' is ignored):

    RKM      4k7  2M2  330R  R47  0m5  1G    – the letter is the decimal point
    decimal  4700  4.7k  0.47  1.5M          – letter, if any, comes last

Multiplier letters: m = 10^-3, R = 10^0, k/K = 10^3, M = 10^6, G = 10^9.
"""

from __future__ import annotations

import logging
import re

from color_table import BAND_COUNTS, digit_band_count
from errors import InvalidFormat, OutOfRange, TooManySignificantDigits
from models import Resistance

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Module-level constants
# ---------------------------------------------------------------------------

MULTIPLIER_LETTERS: dict[str, int] = {
    "m": -3,
    "R": 0,
    "k": 3,
    "K": 3,
    "M": 6,
    "G": 9,
}

# The most significant digits any supported band count can carry.
MAX_SIGNIFICANT_DIGITS: int = max(digit_band_count(n) for n in BAND_COUNTS)

# Lowest digit position / highest digit position a parsed value may have:
# three digits after 'm' down to three digits before 'G'.
MIN_EXPONENT: int = min(MULTIPLIER_LETTERS.values()) - MAX_SIGNIFICANT_DIGITS
MAX_EXPONENT: int = max(MULTIPLIER_LETTERS.values()) + MAX_SIGNIFICANT_DIGITS - 1

_UNIT_SUFFIX = re.compile(r"\s*(?:Ω|ohms?)$", re.IGNORECASE)

_RKM = re.compile(r"(?P<head>[0-9]*)(?P<letter>[mRkKMG])(?P<tail>[0-9]*)")
_DECIMAL = re.compile(r"(?P<head>[0-9]*)(?:\.(?P<tail>[0-9]*))?(?P<letter>[mRkKMG])?")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _split(body: str) -> tuple[str, str, str | None]:
    """Return (digits before, digits after, letter) or raise InvalidFormat."""
    letters = [ch for ch in body if ch in MULTIPLIER_LETTERS]
    if len(letters) > 1:
        raise InvalidFormat(f"more than one multiplier letter in {body!r}")

    match = _RKM.fullmatch(body) or _DECIMAL.fullmatch(body)
    if match is None:
        raise InvalidFormat(f"not a resistance value: {body!r}")

    head = match.group("head") or ""
    tail = match.group("tail") or ""
    if not head and not tail:
        raise InvalidFormat(f"no digits in {body!r}")
    return head, tail, match.group("letter")


def _check_range(resistance: Resistance) -> None:
    """Reject magnitudes no RKM string of at most MAX_SIGNIFICANT_DIGITS can name.

    Whether the value fits a particular band count is the encoder's call.
    """
    if resistance.is_zero:
        return
    top = resistance.exponent + len(resistance.digits) - 1
    if resistance.exponent < MIN_EXPONENT or top > MAX_EXPONENT:
        raise OutOfRange(
            f"{resistance.value} Ω is outside the range "
            f"10^{MIN_EXPONENT} … 10^{MAX_EXPONENT + 1} Ω"
        )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_resistance(text: str) -> Resistance:
    """Parse *text* (RKM or decimal notation) into an exact Resistance.

    Examples:
        '4k7'  → digits (4, 7), exponent 2   (4700 Ω)
        '330R' → digits (3, 3), exponent 1   (330 Ω, same as '330')
        '0m5'  → digits (5,),   exponent -4  (0.5 mΩ)

    Raises:
        InvalidFormat:            empty input, no digits, stray characters or
                                  more than one multiplier letter.
        TooManySignificantDigits: more significant digits than any band count
                                  has digit bands for.
        OutOfRange:               magnitude below 10^-6 or at or above 10^12 Ω.
    """
    if not isinstance(text, str):
        raise InvalidFormat(f"expected a string, got {type(text).__name__}")

    body = _UNIT_SUFFIX.sub("", text.strip()).rstrip()
    if not body:
        raise InvalidFormat(f"empty resistance: {text!r}")

    head, tail, letter = _split(body)
    exponent = MULTIPLIER_LETTERS[letter] if letter else 0

    resistance = Resistance(
        tuple(int(ch) for ch in head + tail),
        exponent - len(tail),
    )

    if len(resistance.digits) > MAX_SIGNIFICANT_DIGITS:
        raise TooManySignificantDigits(
            f"{text!r} has {len(resistance.digits)} significant digits; "
            f"at most {MAX_SIGNIFICANT_DIGITS} fit on a resistor"
        )
    _check_range(resistance)

    log.debug("parsed %r -> %s × 10^%d", text, resistance.digits, resistance.exponent)
    return resistance
