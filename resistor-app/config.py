"""
Resistor Codec - Configuration
"""

from __future__ import annotations

from decimal import Decimal

# Tolerance implied by a 3-band resistor, which has no tolerance band.
# None reports it as unspecified; Decimal("20") follows the ±20 % convention.
THREE_BAND_TOLERANCE: Decimal | None = None

# Tolerance used when a 4/5/6-band conversion is requested without one.
# None makes the tolerance mandatory for those band counts.
DEFAULT_TOLERANCE: Decimal | None = None

# Band count the calculator screen starts on
DEFAULT_BAND_COUNT = 4

# Touchscreen display
SCREEN_W = 480
SCREEN_H = 320
FPS = 30
