"""
Resistor Codec - Specs → Colors Screen

Type a resistance (RKM or decimal), optionally a tolerance and a TCR, pick a
band count, and see the color bands.

Layout (480 × 320, content area 480 × 272 above the nav bar):

  TOP     three input fields: Resistance / Tolerance % / TCR ppm/K
  MIDDLE  band-count selector [3] [4] [5] [6]
  BOTTOM  resistor illustration, band names, result or error line

Keys:
  Tab          next input field
  Left/Right   fewer / more bands
  Backspace    delete last character
  Enter        convert
"""

from __future__ import annotations

import logging

import pygame

import config
import ui_manager as ui
from color_table import BAND_COUNTS, rgb_of

# Imported at module level so tests can patch
# patch("screen_calculator.specs_to_colors").
from color_code import describe_bands, specs_to_colors
from errors import ConversionError

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Layout constants
# ---------------------------------------------------------------------------

_FIELD_Y     = 24
_FIELD_H     = 40
_FIELD_GAP   = 8
_FIELD_XS    = [10, 200, 340]
_FIELD_WS    = [180, 130, 130]

_COUNT_Y     = 84
_COUNT_BTN_W = 52
_COUNT_BTN_H = 36
_COUNT_X     = 10

_RES_RECT    = (40, 140, 400, 44)
_BAND_NAME_Y = 190
_RESULT_Y    = 222

_MAX_LEN = 10

# ---------------------------------------------------------------------------
# Input fields
# ---------------------------------------------------------------------------

RESISTANCE, TOLERANCE, TCR = range(3)

_FIELD_LABELS = ["Resistance", "Tolerance %", "TCR ppm/K"]

# Characters each field accepts
_FIELD_CHARS = [
    set("0123456789.RkKMGm"),
    set("0123456789."),
    set("0123456789"),
]

_FONT_CACHE: dict[str, pygame.font.Font] | None = None


def _fonts() -> dict[str, pygame.font.Font]:
    """Return cached font dict, initialising on first call."""
    global _FONT_CACHE
    if _FONT_CACHE is None:
        pygame.font.init()
        _FONT_CACHE = {
            "heading": ui.load_font("dejavusans", 22, bold=True),
            "body":    ui.load_font("dejavusans", 16),
            "small":   ui.load_font("dejavusans", 13),
            "band":    ui.load_font("dejavusans", 12),
        }
    return _FONT_CACHE


# ---------------------------------------------------------------------------
# ScreenCalculator
# ---------------------------------------------------------------------------

class ScreenCalculator:
    """Resistor spec → color band screen.

    Args:
        surface: pygame.Surface to render onto (480×320), OR a UIManager
                 instance (detected via ``hasattr(surface, '_surface')``).
    """

    def __init__(self, surface, band_count: int = config.DEFAULT_BAND_COUNT) -> None:
        if hasattr(surface, "_surface"):
            self._ui      = surface
            self._surface = surface._surface
        else:
            self._ui      = None
            self._surface = surface

        self.fields: list[str] = ["", "", ""]
        self.focus: int = RESISTANCE
        self.band_count: int = band_count

        self.result_bands: tuple = ()
        self.result_text: str = ""
        self.error_message: str = ""

        # Hit-rects rebuilt on every draw
        self._field_rects: list[pygame.Rect] = []
        self._count_rects: list[tuple[int, pygame.Rect]] = []

        if not pygame.font.get_init():
            pygame.font.init()

    # ------------------------------------------------------------------
    # Convenience accessors
    # ------------------------------------------------------------------

    @property
    def input_buffer(self) -> str:
        """The resistance field."""
        return self.fields[RESISTANCE]

    # ------------------------------------------------------------------
    # Screen interface: update / draw / event handling
    # ------------------------------------------------------------------

    def update(self, dt: float) -> None:
        """No-op: this screen has no time-based animation."""
        pass

    def draw(self, surface: pygame.Surface | None = None) -> None:
        target = surface if surface is not None else self._surface

        # Always fill first; works on both real surfaces and MagicMocks.
        target.fill(ui.BG_COLOR)

        try:
            fnt = _fonts()
            self._draw_fields(target, fnt)
            self._draw_band_counts(target, fnt)
            self._draw_result(target, fnt)
        except TypeError:
            # pygame.draw.* rejects MagicMock surfaces in tests.
            pass

    def handle_event(self, event) -> None:
        """Keyboard input; see the module docstring for the key map."""
        if event.type != pygame.KEYDOWN:
            return

        if event.key == pygame.K_BACKSPACE:
            self.fields[self.focus] = self.fields[self.focus][:-1]
            return
        if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self.convert()
            return
        if event.key == pygame.K_TAB:
            self.focus = (self.focus + 1) % len(self.fields)
            return
        if event.key == pygame.K_LEFT:
            self.set_band_count(self.band_count - 1)
            return
        if event.key == pygame.K_RIGHT:
            self.set_band_count(self.band_count + 1)
            return

        ch = event.unicode
        if ch and ch in _FIELD_CHARS[self.focus] and len(self.fields[self.focus]) < _MAX_LEN:
            self.fields[self.focus] += ch

    def handle_touch(self, x: int, y: int) -> None:
        """Tap a field to focus it, or a band-count button to select it."""
        for i, rect in enumerate(self._field_rects):
            if rect.collidepoint(x, y):
                self.focus = i
                return
        for count, rect in self._count_rects:
            if rect.collidepoint(x, y):
                self.set_band_count(count)
                return

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def set_band_count(self, band_count: int) -> None:
        """Select *band_count* (ignored outside 3–6) and clear the old result."""
        if band_count not in BAND_COUNTS or band_count == self.band_count:
            return
        self.band_count = band_count
        self.result_bands = ()
        self.result_text = ""
        self.error_message = ""

    def convert(self) -> None:
        """Run the conversion for the current fields and store the outcome."""
        resistance, tolerance, tcr = (f or None for f in self.fields)
        if resistance is None:
            return
        try:
            bands = specs_to_colors(resistance, tolerance, tcr, self.band_count)
        except ConversionError as exc:
            log.debug("conversion rejected: %s", exc)
            self.result_bands = ()
            self.result_text = ""
            self.error_message = str(exc)
            return
        self.result_bands = tuple(bands)
        self.result_text = describe_bands(bands)
        self.error_message = ""

    # ------------------------------------------------------------------
    # Private: drawing
    # ------------------------------------------------------------------

    def _draw_fields(self, surface: pygame.Surface, fnt: dict) -> None:
        self._field_rects = []
        for i, (x, w) in enumerate(zip(_FIELD_XS, _FIELD_WS)):
            rect = pygame.Rect(x, _FIELD_Y, w, _FIELD_H)
            self._field_rects.append(rect)
            ui.draw_text(surface, _FIELD_LABELS[i], fnt["small"], ui.TEXT_MUTED,
                         x + 4, _FIELD_Y - 18)
            pygame.draw.rect(surface, ui.CARD_BG, rect, border_radius=8)
            if i == self.focus:
                pygame.draw.rect(surface, ui.ACCENT, rect, width=2, border_radius=8)
            ui.draw_text(surface, self.fields[i] or "—", fnt["heading"],
                         ui.TEXT_COLOR if self.fields[i] else ui.TEXT_MUTED,
                         rect.right - 8, rect.centery, anchor="midright")

    def _draw_band_counts(self, surface: pygame.Surface, fnt: dict) -> None:
        self._count_rects = []
        ui.draw_text(surface, "Bands", fnt["small"], ui.TEXT_MUTED,
                     _COUNT_X, _COUNT_Y + _COUNT_BTN_H // 2, anchor="midleft")
        for i, count in enumerate(BAND_COUNTS):
            x = _COUNT_X + 50 + i * (_COUNT_BTN_W + _FIELD_GAP)
            rect = pygame.Rect(x, _COUNT_Y, _COUNT_BTN_W, _COUNT_BTN_H)
            self._count_rects.append((count, rect))
            selected = count == self.band_count
            pygame.draw.rect(surface, ui.ACCENT if selected else ui.CARD_BG,
                             rect, border_radius=6)
            ui.draw_text(surface, str(count), fnt["body"],
                         ui.BG_COLOR if selected else ui.TEXT_COLOR,
                         rect.centerx, rect.centery, anchor="center")

    def _draw_result(self, surface: pygame.Surface, fnt: dict) -> None:
        rgbs = [rgb_of(c) for c in self.result_bands]
        stripes = ui.draw_resistor(surface, pygame.Rect(*_RES_RECT), rgbs)

        for color, stripe in zip(self.result_bands, stripes):
            ui.draw_text(surface, color.label, fnt["band"], ui.TEXT_MUTED,
                         stripe.centerx, _BAND_NAME_Y, anchor="midtop")

        if self.error_message:
            ui.draw_text(surface, self.error_message, fnt["small"], ui.RED,
                         ui.SCREEN_W // 2, _RESULT_Y, anchor="midtop")
        elif self.result_text:
            ui.draw_text(surface, self.result_text, fnt["body"], ui.GREEN,
                         ui.SCREEN_W // 2, _RESULT_Y, anchor="midtop")

    # ------------------------------------------------------------------
    # Lifecycle hooks
    # ------------------------------------------------------------------

    def on_enter(self) -> None:
        pass

    def on_exit(self) -> None:
        self.focus = RESISTANCE
