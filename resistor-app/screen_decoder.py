"""
Resistor Codec - Colors → Specs Screen

Pick the color of each band and read off resistance, tolerance and TCR.
Only colors that mean something in a band's position are offered, so the
bands on screen always describe a real part.

Keys:
  Left/Right   select band
  Up/Down      cycle the selected band's color
  3 4 5 6      change band count

Touch:
  tap a band   select it (tap again to cycle its color)
"""

from __future__ import annotations

import logging

import pygame

import config
import ui_manager as ui
from color_table import BAND_COUNTS, Color, band_layout, rgb_of, valid_colors
from color_code import band_labels, band_value_label, colors_to_specs, specs_to_colors
from errors import ConversionError

log = logging.getLogger(__name__)

_RES_RECT      = (40, 70, 400, 60)
_LABEL_Y       = 24
_VALUE_Y       = 140
_SUMMARY_Y     = 176
_BOUNDS_Y      = 206

# What each band count starts out showing: 4k7, ±5 %, 50 ppm/K.
_START_SPECS = {
    3: ("4k7", None, None),
    4: ("4k7", 5, None),
    5: ("4k7", 5, None),
    6: ("4k7", 5, 50),
}


def _palette(role) -> list[Color]:
    """Colors valid in *role*, in table order."""
    allowed = valid_colors(role)
    return [c for c in Color if c in allowed]


class ScreenDecoder:
    """Resistor color band → spec screen.

    Args:
        surface: pygame.Surface to render onto, OR a UIManager instance.
    """

    def __init__(self, surface, band_count: int = config.DEFAULT_BAND_COUNT) -> None:
        if hasattr(surface, "_surface"):
            self._ui      = surface
            self._surface = surface._surface
        else:
            self._ui      = None
            self._surface = surface

        self._fonts: dict[str, pygame.font.Font] | None = None
        self._stripe_rects: list[pygame.Rect] = []

        self.selected: int = 0
        self.spec = None
        self.error_message: str = ""
        self.set_band_count(band_count)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def set_band_count(self, band_count: int) -> None:
        """Switch to *band_count* bands, resetting them to a 4.7 kΩ part."""
        if band_count not in BAND_COUNTS:
            return
        self.band_count = band_count
        self.bands: list[Color] = list(specs_to_colors(*_START_SPECS[band_count],
                                                       band_count=band_count))
        self.selected = min(self.selected, band_count - 1)
        self._decode()

    def cycle_color(self, step: int = 1) -> None:
        """Move the selected band *step* places through its valid colors."""
        palette = _palette(band_layout(self.band_count)[self.selected])
        current = self.bands[self.selected]
        idx = palette.index(current) if current in palette else -step
        self.bands[self.selected] = palette[(idx + step) % len(palette)]
        self._decode()

    def _decode(self) -> None:
        try:
            self.spec = colors_to_specs(self.bands, self.band_count)
            self.error_message = ""
        except ConversionError as exc:
            log.debug("decode rejected: %s", exc)
            self.spec = None
            self.error_message = str(exc)

    # ------------------------------------------------------------------
    # Screen interface
    # ------------------------------------------------------------------

    def update(self, dt: float) -> None:
        pass

    def handle_event(self, event) -> None:
        if event.type != pygame.KEYDOWN:
            return
        if event.key == pygame.K_LEFT:
            self.selected = (self.selected - 1) % self.band_count
        elif event.key == pygame.K_RIGHT:
            self.selected = (self.selected + 1) % self.band_count
        elif event.key == pygame.K_UP:
            self.cycle_color(-1)
        elif event.key == pygame.K_DOWN:
            self.cycle_color(1)
        elif event.unicode in ("3", "4", "5", "6"):
            self.set_band_count(int(event.unicode))

    def handle_touch(self, x: int, y: int) -> None:
        for i, rect in enumerate(self._stripe_rects):
            # Stripes are narrow; accept taps a few pixels either side.
            if rect.inflate(12, 0).collidepoint(x, y):
                if i == self.selected:
                    self.cycle_color(1)
                else:
                    self.selected = i
                return

    def draw(self, surface: pygame.Surface | None = None) -> None:
        target = surface if surface is not None else self._surface
        target.fill(ui.BG_COLOR)
        try:
            self._draw(target)
        except TypeError:
            # pygame.draw.* rejects MagicMock surfaces in tests.
            pass

    def _draw(self, surface: pygame.Surface) -> None:
        if self._fonts is None:
            self._fonts = {
                "body":  ui.load_font("dejavusans", 16),
                "small": ui.load_font("dejavusans", 12),
                "big":   ui.load_font("dejavusans", 24, bold=True),
            }
        fnt = self._fonts

        self._stripe_rects = ui.draw_resistor(
            surface, pygame.Rect(*_RES_RECT), [rgb_of(c) for c in self.bands]
        )

        layout = band_layout(self.band_count)
        labels = band_labels(self.band_count)
        for i, stripe in enumerate(self._stripe_rects):
            muted = ui.ACCENT if i == self.selected else ui.TEXT_MUTED
            ui.draw_text(surface, labels[i], fnt["small"], muted,
                         stripe.centerx, _LABEL_Y, anchor="midtop")
            ui.draw_text(surface, self.bands[i].label, fnt["small"], muted,
                         stripe.centerx, _LABEL_Y + 16, anchor="midtop")
            ui.draw_text(surface, band_value_label(self.bands[i], layout[i]),
                         fnt["small"], ui.TEXT_COLOR,
                         stripe.centerx, _VALUE_Y, anchor="midtop")
            if i == self.selected:
                pygame.draw.rect(surface, ui.ACCENT, stripe.inflate(6, 6), width=2)

        if self.spec is None:
            ui.draw_text(surface, self.error_message, fnt["body"], ui.RED,
                         ui.SCREEN_W // 2, _SUMMARY_Y, anchor="midtop")
            return

        ui.draw_text(surface, str(self.spec), fnt["big"], ui.GREEN,
                     ui.SCREEN_W // 2, _SUMMARY_Y, anchor="midtop")
        if self.spec.tolerance is not None:
            low, high = self.spec.bounds()
            ui.draw_text(surface, f"{low.normalize():f} … {high.normalize():f} Ω",
                         fnt["body"], ui.TEXT_MUTED,
                         ui.SCREEN_W // 2, _BOUNDS_Y, anchor="midtop")

    def on_exit(self) -> None:
        self.selected = 0
