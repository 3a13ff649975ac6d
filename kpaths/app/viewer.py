# kpaths/app/viewer.py
#!/usr/bin/env python3
"""
K Disjoint Paths Viewer: click start, click end, see up to K ranked paths.

- Mouse:
    [LMB]        -> first click sets start, second sets end and runs the search
- Keyboard:
    [C]          -> clear paths/endpoints (walls kept)
    [R]          -> new random walls
    [+]/[-]      -> K
    [Q]/[ESC]    -> quit

Settings come from KPATHS_* env vars or --key=value flags (see core.config).
"""

import sys
from typing import List, Optional, Tuple

import pygame

from kpaths._logger import logger, set_level  # noqa
from kpaths.app.palette import GRID_LINE, cell_color, rank_color
from kpaths.core.config import Settings, resolve_settings
from kpaths.core.session import Phase, Session
from kpaths.core.types import Cell
from kpaths.core.walls import load_map, random_walls

# ---------- Config ----------
PANEL_W = 320            # right band: metrics + buttons
GRID_MARGIN = 16
FONT_NAME = None  # default pygame font
MAX_K = 9
CARD_TOP = 10
CARD_BASE_H = 150        # title, status, K, divider, exhaustion note
CARD_ROW_H = 24          # one line per ranked path
BUTTON_H = 38
BUTTON_GAP = 10
BUTTON_ROWS = 3

# Colors
TEXT_LIGHT  = (230, 235, 240)
ACCENT_GOLD = (255, 210, 0)
CARD_BG     = (24, 28, 36, 220)
CARD_HI     = (255, 255, 255, 18)


def card_height(k: int) -> int:
    return CARD_BASE_H + CARD_ROW_H * k


def panel_min_height() -> int:
    """Room for the tallest metrics card plus the button band below it."""
    return CARD_TOP + card_height(MAX_K) + BUTTON_GAP + BUTTON_ROWS * (BUTTON_H + BUTTON_GAP)


def screen_to_grid(pos: Tuple[int, int], origin: Tuple[int, int], cell_size: int) -> Cell:
    """Pixel -> (col, row); may be out of bounds, the session rejects those."""
    px, py = pos
    ox, oy = origin
    return ((px - ox) // cell_size, (py - oy) // cell_size)


def make_wall_factory(settings: Settings, map_mask: Optional[List[List[bool]]] = None):
    if map_mask is not None:
        return lambda: (lambda x, y: map_mask[y][x])
    # fresh seed stream per hard reset, reproducible when a seed is given
    seeds = iter(range(settings.seed, sys.maxsize)) if settings.seed is not None else None

    def factory():
        seed = next(seeds) if seeds is not None else None
        mask = random_walls(settings.width, settings.height, settings.wall_density, seed)
        return lambda x, y: mask[y][x]
    return factory


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        bg = (46, 50, 60, 230) if self.hover else (36, 40, 48, 220)
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)

        # subtle highlight top band
        hi = pygame.Surface((self.rect.width, 18), pygame.SRCALPHA)
        pygame.draw.rect(hi, (255, 255, 255, 20), hi.get_rect(), border_radius=10)
        base.blit(hi, (0, 0))
        screen.blit(base, self.rect.topleft)

        text = font.render(self.label, True, (235, 238, 242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, session: Session, cell_size: int):
        pygame.init()

        self.session = session
        self.cell_size = cell_size
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        grid_px_w = GRID_MARGIN * 2 + session.width * cell_size
        grid_px_h = GRID_MARGIN * 2 + session.height * cell_size
        win_w = grid_px_w + PANEL_W
        win_h = max(grid_px_h, panel_min_height())

        self.screen = pygame.display.set_mode((win_w, win_h))
        pygame.display.set_caption("K Disjoint Shortest Paths (Dijkstra)")

        self._grid_origin = (GRID_MARGIN, GRID_MARGIN)
        self._right_band = pygame.Rect(grid_px_w, 0, PANEL_W, win_h)
        self._buttons: List[UIButton] = []
        self._build_buttons()

        self.clock = pygame.time.Clock()
        self.status = "Click a start cell"
        if self.session.grid is None:
            self.session.start()

    def run(self):
        while True:
            self._handle_events()
            self._draw()
            self.clock.tick(60)

    # ---------- input ----------
    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_c:
                    self._reset(hard=False)
                elif e.key == pygame.K_r:
                    self._reset(hard=True)
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    self._bump_k(+1)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE, pygame.K_KP_MINUS):
                    self._bump_k(-1)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                if any(b.handle_mouse(e) for b in self._buttons):
                    continue
                if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                    self._click(e.pos)

    def _click(self, pos: Tuple[int, int]):
        cell = screen_to_grid(pos, self._grid_origin, self.cell_size)
        if not self.session.grid.in_bounds(cell):
            return
        self.session.click(cell)
        phase = self.session.phase
        if phase is Phase.AWAITING_END:
            self.status = "Click an end cell"
        elif phase is Phase.DONE:
            n = len(self.session.paths)
            self.status = f"{n} of {self.session.k} paths found"

    def _reset(self, hard: bool):
        self.session.reset(hard=hard)
        self.status = "Click a start cell"

    def _bump_k(self, dk: int):
        if self.session.phase is Phase.DONE:
            return
        self.session.k = int(max(1, min(MAX_K, self.session.k + dk)))

    # ---------- drawing ----------
    def _draw(self):
        self._draw_backdrop()
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_backdrop(self):
        w, h = self.screen.get_size()
        top = (24, 26, 32); bot = (36, 40, 48)
        for y in range(h):
            t = y / max(1, h - 1)
            c = (
                int(top[0] + (bot[0] - top[0]) * t),
                int(top[1] + (bot[1] - top[1]) * t),
                int(top[2] + (bot[2] - top[2]) * t),
            )
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def _draw_grid(self):
        grid = self.session.grid
        cs = self.cell_size
        ox, oy = self._grid_origin
        for row in range(grid.height):
            for col in range(grid.width):
                rect = pygame.Rect(ox + col * cs, oy + row * cs, cs, cs)
                color = cell_color(grid.cells[row][col], grid.ranks[row][col])
                pygame.draw.rect(self.screen, color, rect)
                pygame.draw.rect(self.screen, GRID_LINE, rect, 1)

    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + CARD_TOP + card_height(MAX_K) + BUTTON_GAP
        w = max(160, rb.width - 32)
        h = BUTTON_H
        gap = BUTTON_GAP

        self._buttons.append(UIButton("Clear  [C]", pygame.Rect(x, y, w, h),
                                      lambda: self._reset(hard=False)))
        y += h + gap
        self._buttons.append(UIButton("Randomize  [R]", pygame.Rect(x, y, w, h),
                                      lambda: self._reset(hard=True)))
        y += h + gap
        half = (w - 8) // 2
        self._buttons.append(UIButton("K −", pygame.Rect(x, y, half, h), lambda: self._bump_k(-1)))
        self._buttons.append(UIButton("K +", pygame.Rect(x + half + 8, y, half, h), lambda: self._bump_k(+1)))

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card_h = card_height(self.session.k)
        card = pygame.Surface((rb.width - 20, card_h), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0, 0))
        self.screen.blit(card, (rb.x + 10, rb.y + CARD_TOP))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT, swatch=None):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            x = x0
            if swatch is not None:
                pygame.draw.rect(self.screen, swatch, pygame.Rect(x0, y0 + 2, 12, 12))
                x += 20
            self.screen.blit(surf, (x, y0))
            y0 += surf.get_height() + 6

        line("Paths", big=True, color=ACCENT_GOLD)
        line(self.status)
        line(f"K: {self.session.k}")
        line("-" * 26)
        for rp in self.session.paths:
            line(f"Path {rp.rank}  cost {rp.path.cost}", swatch=rank_color(rp.rank))
        if self.session.phase is Phase.DONE and len(self.session.paths) < self.session.k:
            line("No more paths found.", color=(220, 120, 120))

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main():
    try:
        settings = resolve_settings()
        set_level(settings.log_level)
        mask = load_map(settings.map_path)[0] if settings.map_path else None
    except (ValueError, OSError) as ex:
        logger.error(f"Failed to start viewer: {ex}")
        sys.exit(1)

    factory = make_wall_factory(settings, mask)
    width, height = settings.width, settings.height
    if mask is not None:
        width, height = len(mask[0]), len(mask)
    session = Session(width, height, k=settings.k, wall_factory=factory)
    session.start()
    Viewer(session, settings.cell_size).run()


if __name__ == "__main__":
    main()
