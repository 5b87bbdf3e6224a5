"""
Resistor Codec - Error Taxonomy

Every failure in the codec is a deterministic validation or lookup failure,
so each one is a ``ValueError`` subclass.  Callers that only care whether a
conversion worked can catch :class:`ResistorCodeError`; the facade in
``color_code`` re-raises stage errors as :class:`ConversionError` with the
stage error kept on ``.cause``.

    ResistorCodeError
    ├── ParseError        InvalidFormat, OutOfRange, TooManySignificantDigits
    ├── EncodeError       PrecisionLoss, UnrepresentableMultiplier,
    │                     UnsupportedTolerance, UnsupportedTcr
    ├── DecodeError       InvalidDigitColor, InvalidMultiplierColor,
    │                     InvalidToleranceColor, InvalidTcrColor,
    │                     UnknownColor, BandLengthError
    └── ConversionError   BandCountMismatch, InvalidBandCount
"""

from __future__ import annotations


class ResistorCodeError(ValueError):
    """Base class for all codec errors."""


# ---------------------------------------------------------------------------
# RKM parsing
# ---------------------------------------------------------------------------

class ParseError(ResistorCodeError):
    pass


class InvalidFormat(ParseError):
    pass


class OutOfRange(ParseError):
    pass


class TooManySignificantDigits(ParseError):
    pass


# ---------------------------------------------------------------------------
# Encoding (spec -> colors)
# ---------------------------------------------------------------------------

class EncodeError(ResistorCodeError):
    pass


class PrecisionLoss(EncodeError):
    pass


class UnrepresentableMultiplier(EncodeError):
    pass


class UnsupportedTolerance(EncodeError):
    pass


class UnsupportedTcr(EncodeError):
    pass


# ---------------------------------------------------------------------------
# Decoding (colors -> spec)
# ---------------------------------------------------------------------------

class DecodeError(ResistorCodeError):
    """A band color has no meaning in the position it occupies."""

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class InvalidDigitColor(DecodeError):
    pass


class InvalidMultiplierColor(DecodeError):
    pass


class InvalidToleranceColor(DecodeError):
    pass


class InvalidTcrColor(DecodeError):
    pass


class UnknownColor(DecodeError):
    pass


class BandLengthError(DecodeError):
    pass


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------

class ConversionError(ResistorCodeError):
    """Raised by the conversion facade.

    Attributes:
        cause: The parse / encode / decode error that caused this failure, or
               None when the facade rejected the request itself.
    """

    def __init__(self, message: str, cause: ResistorCodeError | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class BandCountMismatch(ConversionError):
    pass


class InvalidBandCount(ConversionError):
    pass
