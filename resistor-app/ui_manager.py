from __future__ import annotations

"""
Resistor Codec - Pygame Display Manager

Owns the 480×320 window, the tab bar along the bottom edge and the set of
conversion screens.  One screen is active at a time; it gets every key event,
every tap above the tab bar, and a draw call per frame.

Pass a surface to run headless (tests): pygame is not initialised, no window
is opened and draw() does not flip or tick the clock, so a MagicMock surface
under the SDL dummy driver works.
"""

import logging

import pygame

import config

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

SCREEN_W  = config.SCREEN_W
SCREEN_H  = config.SCREEN_H
TAB_H     = 48
CONTENT_H = SCREEN_H - TAB_H

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------

BG_COLOR     = (15,  23,  42)
CARD_BG      = (22,  33,  62)
TEXT_COLOR   = (226, 232, 240)
TEXT_MUTED   = (150, 160, 180)
ACCENT       = (56,  189, 248)   # focus, selected band, active tab
GREEN        = (52,  211, 153)   # conversion result
RED          = (248, 113, 113)   # conversion error
TAB_BG       = (8,   15,  30)
TAB_RULE     = (30,  41,  59)
RESISTOR_TAN = (210, 180, 140)
LEAD_COLOR   = (160, 160, 160)
GHOST_COLOR  = (80,  90,  120)   # outline shown before the first conversion


# ---------------------------------------------------------------------------
# Drawing helpers shared by the screens
# ---------------------------------------------------------------------------

def load_font(family: str | None, size: int, bold: bool = False) -> pygame.font.Font:
    """SysFont *family*, or pygame's default font if it cannot be loaded."""
    try:
        loaded = pygame.font.SysFont(family, size, bold=bold)
    except (RuntimeError, OSError):
        loaded = None
    if loaded is None:
        loaded = pygame.font.SysFont(None, size, bold=bold)
    return loaded


def draw_text(
    surface: pygame.Surface,
    text: str,
    font: pygame.font.Font,
    color: tuple,
    x: int,
    y: int,
    anchor: str = "topleft",
) -> pygame.Rect:
    """Blit *text* so that the Rect attribute named *anchor* lands on (x, y)."""
    rendered = font.render(text, True, color)
    placed = rendered.get_rect(**{anchor: (x, y)})
    surface.blit(rendered, placed)
    return placed


def draw_resistor(
    surface: pygame.Surface,
    rect: pygame.Rect,
    band_rgbs: list[tuple],
) -> list[pygame.Rect]:
    """Draw a resistor with one vertical stripe per entry in *band_rgbs*.

    The body spans the middle 70 % of *rect*, leads fill the rest.  Stripes
    are spread evenly across the body; the last one is pushed right so the
    tolerance / TCR bands sit apart from the value bands, as on a real part.
    An empty *band_rgbs* draws a ghost outline.

    Returns:
        The stripe rects, left to right (for hit-testing).
    """
    lead_w = int(rect.width * 0.15)
    body = pygame.Rect(rect.x + lead_w, rect.y, int(rect.width * 0.70), rect.height)
    cy = rect.centery
    radius = max(2, rect.height // 3)

    lead_color = LEAD_COLOR if band_rgbs else GHOST_COLOR
    pygame.draw.line(surface, lead_color, (rect.left, cy), (body.left, cy), 2)
    pygame.draw.line(surface, lead_color, (body.right, cy), (rect.right, cy), 2)

    if not band_rgbs:
        pygame.draw.rect(surface, GHOST_COLOR, body, width=2, border_radius=radius)
        return []

    pygame.draw.rect(surface, RESISTOR_TAN, body, border_radius=radius)

    n = len(band_rgbs)
    band_w = max(4, body.width // (2 * n + 2))
    step = body.width / (n + 1.5)
    stripes = []
    for i, rgb in enumerate(band_rgbs):
        offset = (i + 1) * step if i < n - 1 else (n + 0.5) * step
        stripe = pygame.Rect(int(body.x + offset - band_w / 2), body.y, band_w, body.height)
        stripe = stripe.clip(body)
        if stripe.width > 0:
            pygame.draw.rect(surface, rgb, stripe)
        stripes.append(stripe)

    # Stripes overlap the rounded ends; outline again on top.
    pygame.draw.rect(surface, RESISTOR_TAN, body, width=2, border_radius=radius)
    return stripes


# ---------------------------------------------------------------------------
# UIManager
# ---------------------------------------------------------------------------

class UIManager:
    """Screen registry plus the per-frame event / update / draw dispatch.

    A screen is any object with ``update(dt)``, ``draw(surface)`` and
    ``handle_event(event)``; ``handle_touch(x, y)``, ``on_enter()`` and
    ``on_exit()`` are called when present.  Screens get a tab in
    registration order.

    Args:
        surface: Draw here instead of opening a window (headless / tests).
    """

    def __init__(self, surface=None) -> None:
        self._headless = surface is not None

        if self._headless:
            pygame.font.init()
            self._surface = surface
            self.clock = None
        else:
            pygame.init()
            self._surface = pygame.display.set_mode((SCREEN_W, SCREEN_H))
            pygame.display.set_caption("Resistor Codec")
            self.clock = pygame.time.Clock()

        self.tab_font = load_font("dejavusans", 16)

        self._screens: dict[str, object] = {}
        self._labels: dict[str, str] = {}
        self._tabs: list[tuple[str, pygame.Rect]] = []

        self.current_screen: str | None = None

    # ------------------------------------------------------------------
    # Screens
    # ------------------------------------------------------------------

    def register_screen(self, name: str, screen_obj, label: str | None = None) -> None:
        """Add *screen_obj* under *name*; *label* is its tab caption."""
        self._screens[name] = screen_obj
        self._labels[name] = label or name.title()

    @property
    def active(self):
        """The active screen object, or None before the first switch_to()."""
        if self.current_screen is None:
            return None
        return self._screens[self.current_screen]

    def switch_to(self, name: str) -> None:
        """Make *name* the active screen.

        Raises:
            KeyError: *name* was never registered.
        """
        try:
            incoming = self._screens[name]
        except KeyError:
            raise KeyError(f"Unknown screen: {name!r}") from None
        if name == self.current_screen:
            return

        outgoing = self.active
        if outgoing is not None and hasattr(outgoing, "on_exit"):
            outgoing.on_exit()
        self.current_screen = name
        log.debug("active screen: %s", name)
        if hasattr(incoming, "on_enter"):
            incoming.on_enter()

    # ------------------------------------------------------------------
    # Per-frame hooks
    # ------------------------------------------------------------------

    def handle_event(self, event) -> None:
        if self.active is not None:
            self.active.handle_event(event)

    def handle_events(self) -> bool:
        """Process queued pygame events; return False once the user quits."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._tap(*event.pos)
            else:
                self.handle_event(event)
        return True

    def update(self, dt: float) -> None:
        if self.active is not None:
            self.active.update(dt)

    def draw(self) -> None:
        if self.active is not None:
            self.active.draw(self._surface)
        if self._headless:
            return
        self.draw_tabs()
        pygame.display.flip()
        self.clock.tick(config.FPS)

    # ------------------------------------------------------------------
    # Tab bar
    # ------------------------------------------------------------------

    def draw_tabs(self) -> None:
        """Draw one tab per registered screen and remember their rects."""
        top = SCREEN_H - TAB_H
        pygame.draw.line(self._surface, TAB_RULE, (0, top), (SCREEN_W - 1, top), 1)

        self._tabs = []
        if not self._screens:
            return
        tab_w = SCREEN_W // len(self._screens)
        for i, name in enumerate(self._screens):
            rect = pygame.Rect(i * tab_w, top + 1, tab_w, TAB_H - 1)
            self._tabs.append((name, rect))
            selected = name == self.current_screen
            pygame.draw.rect(self._surface, ACCENT if selected else TAB_BG, rect)
            draw_text(self._surface, self._labels[name], self.tab_font,
                      BG_COLOR if selected else TEXT_COLOR,
                      rect.centerx, rect.centery, anchor="center")

    def _tap(self, x: int, y: int) -> None:
        for name, rect in self._tabs:
            if rect.collidepoint(x, y):
                self.switch_to(name)
                return
        screen = self.active
        if screen is not None and hasattr(screen, "handle_touch"):
            screen.handle_touch(x, y)
