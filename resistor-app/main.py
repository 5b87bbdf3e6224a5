"""
Resistor Codec - Main Entry Point

Builds the pygame UI with both conversion screens and runs the main event
loop.  All conversion logic lives in color_code; the screens only collect
input and show results.

  Specs → Colors   ScreenCalculator  (specs_to_colors)
  Colors → Specs   ScreenDecoder     (colors_to_specs)
"""

import logging
import sys
import time

import pygame

import config
from screen_calculator import ScreenCalculator
from screen_decoder import ScreenDecoder
from ui_manager import UIManager

log = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )

    mgr = UIManager()

    calculator = ScreenCalculator(mgr, band_count=config.DEFAULT_BAND_COUNT)
    decoder    = ScreenDecoder(mgr, band_count=config.DEFAULT_BAND_COUNT)

    mgr.register_screen("calculator", calculator, label="Specs → Colors")
    mgr.register_screen("decoder",    decoder,    label="Colors → Specs")
    mgr.switch_to("calculator")

    log.info("Resistor Codec started (%d-band default, 3-band tolerance %s)",
             config.DEFAULT_BAND_COUNT,
             "unspecified" if config.THREE_BAND_TOLERANCE is None
             else f"±{config.THREE_BAND_TOLERANCE}%")

    last_t = time.monotonic()
    try:
        running = True
        while running:
            now = time.monotonic()
            dt  = now - last_t
            last_t = now

            running = mgr.handle_events()
            mgr.update(dt)
            mgr.draw()
    finally:
        pygame.quit()
        log.info("Pygame quit")


if __name__ == "__main__":
    main()
