"""
view.py — View layer.

Draws one SessionState per frame:
  - Header with title, version, best score and current score
  - Pre-rendered board grid (drawn once, blitted every frame)
  - Pulsing food with a soft glow
  - Snake with a bright, highlighted head
  - Ready / paused / game-over overlays with a clickable button
  - On-screen control pad under the board

Public API:
    GameView(screen)        — bind to a pygame surface
    view.render(state)      — draw the current frame
    view.hit_test(pos)      — Intent (or "start") under a mouse position
"""

import math
import pygame

from .config import (
    WIDTH, HEIGHT, GAME_W, GAME_H,
    OFFSET_X, OFFSET_Y, CELL, COLS, ROWS,
    PAD_BUTTON, PAD_GAP, PAD_Y,
    BG, BOARD_BG, GRID_COL, SNAKE_HEAD, SNAKE_BODY, FOOD_COL, ACCENT,
    UI_COL, UI_DIM, WHITE, BLACK, BORDER_COL,
    TITLE, VERSION,
    STATE_READY, STATE_PAUSED, STATE_OVER,
)
from .controls import Intent
from .model import SessionState

# Overlay button action that resets and immediately starts a new game.
START = "start"


# ─────────────────────── colour helpers ──────────────────────────
def _lerp_color(c1: tuple, c2: tuple, t: float) -> tuple:
    t = max(0.0, min(1.0, t))
    return tuple(int(c1[i] + (c2[i] - c1[i]) * t) for i in range(3))


def _with_alpha(color: tuple, alpha: int) -> tuple:
    return (*color[:3], max(0, min(255, alpha)))


def _cell_center(x: int, y: int) -> tuple[int, int]:
    return OFFSET_X + x * CELL + CELL // 2, OFFSET_Y + y * CELL + CELL // 2


def control_pad_layout() -> dict:
    """Screen rects of the on-screen pad, keyed by Intent."""
    step = PAD_BUTTON + PAD_GAP
    left = WIDTH // 2 - PAD_BUTTON // 2 - step
    slots = {
        Intent.UP:    (1, 0),
        Intent.LEFT:  (0, 1),
        Intent.PAUSE: (1, 1),
        Intent.RIGHT: (2, 1),
        Intent.DOWN:  (1, 2),
    }
    return {
        intent: pygame.Rect(left + col * step, PAD_Y + row * step, PAD_BUTTON, PAD_BUTTON)
        for intent, (col, row) in slots.items()
    }


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a SessionState snapshot."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._init_fonts()
        self._build_static_surfaces()
        self._pad = control_pad_layout()
        self._overlay_button: pygame.Rect | None = None
        self._overlay_action = None
        self._anim_tick: int = 0

    # ── Main entry ───────────────────────────────────────────────
    def render(self, state: SessionState) -> None:
        self._anim_tick += 1
        self.screen.fill(BG)

        self._draw_header(state)
        self.screen.blit(self._board_surf, (OFFSET_X, OFFSET_Y))
        if state.food is not None:
            self._draw_food(*state.food)
        self._draw_snake(state)
        pygame.draw.rect(self.screen, BORDER_COL,
                         (OFFSET_X - 1, OFFSET_Y - 1, GAME_W + 2, GAME_H + 2),
                         1, border_radius=6)

        self._overlay_button = None
        self._overlay_action = None
        if state.phase == STATE_READY:
            self._draw_overlay("NEON SNAKE", ACCENT, "PRESS SPACE TO START", "START", Intent.PAUSE)
        elif state.phase == STATE_PAUSED:
            self._draw_overlay("PAUSED", ACCENT, "", "RESUME", Intent.PAUSE)
        elif state.phase == STATE_OVER:
            self._draw_overlay("GAME OVER", FOOD_COL, f"FINAL SCORE: {state.score}", "TRY AGAIN", START)

        self._draw_control_pad(state)
        self._draw_footer()
        pygame.display.flip()

    @property
    def overlay_button(self) -> pygame.Rect | None:
        """Rect of the overlay button drawn by the last render, if any."""
        return self._overlay_button

    def hit_test(self, pos: tuple[int, int]):
        """What a click at `pos` means, or None."""
        if self._overlay_button is not None and self._overlay_button.collidepoint(pos):
            return self._overlay_action
        for intent, rect in self._pad.items():
            if rect.collidepoint(pos):
                return intent
        return None

    # ── Static surface pre-builds ─────────────────────────────────
    def _build_static_surfaces(self) -> None:
        self._board_surf = pygame.Surface((GAME_W, GAME_H))
        self._board_surf.fill(BOARD_BG)
        for x in range(COLS + 1):
            pygame.draw.line(self._board_surf, GRID_COL, (x * CELL, 0), (x * CELL, GAME_H))
        for y in range(ROWS + 1):
            pygame.draw.line(self._board_surf, GRID_COL, (0, y * CELL), (GAME_W, y * CELL))

    # ── Header ───────────────────────────────────────────────────
    def _draw_header(self, state: SessionState) -> None:
        self.screen.blit(self.font_title.render(TITLE, True, ACCENT), (OFFSET_X, 10))
        self.screen.blit(self.font_tiny.render(f"VERSION {VERSION}", True, UI_DIM),
                         (OFFSET_X, 48))

        best = self.font_small.render(f"BEST {state.high_score}", True, UI_COL)
        self.screen.blit(best, best.get_rect(topright=(WIDTH - OFFSET_X, 12)))
        score = self.font_big.render(str(state.score), True, WHITE)
        self.screen.blit(score, score.get_rect(topright=(WIDTH - OFFSET_X, 30)))

    # ── Food ─────────────────────────────────────────────────────
    def _draw_food(self, fx: int, fy: int) -> None:
        pulse = 1.0 + 0.2 * math.sin(self._anim_tick * 0.1)
        r = max(2, int(CELL * 0.4 * pulse))
        x, y = _cell_center(fx, fy)

        glow_r = r + 8
        glow = pygame.Surface((glow_r * 2, glow_r * 2), pygame.SRCALPHA)
        for gr in range(glow_r, r, -1):
            a = int(80 * (1 - (gr - r) / (glow_r - r)))
            pygame.draw.circle(glow, _with_alpha(FOOD_COL, a), (glow_r, glow_r), gr)
        self.screen.blit(glow, (x - glow_r, y - glow_r))
        pygame.draw.circle(self.screen, FOOD_COL, (x, y), r)

    # ── Snake ────────────────────────────────────────────────────
    def _draw_snake(self, state: SessionState) -> None:
        for i, (sx, sy) in enumerate(state.snake):
            rect = pygame.Rect(OFFSET_X + sx * CELL + 1, OFFSET_Y + sy * CELL + 1,
                               CELL - 2, CELL - 2)
            color = SNAKE_HEAD if i == 0 else SNAKE_BODY
            pygame.draw.rect(self.screen, color, rect, border_radius=3)
            if i == 0:
                hi = pygame.Rect(rect.x + 3, rect.y + 3, rect.w - 6, max(2, rect.h // 4))
                pygame.draw.rect(self.screen, _lerp_color(SNAKE_HEAD, WHITE, 0.5), hi,
                                 border_radius=2)

    # ── Overlays ─────────────────────────────────────────────────
    def _draw_overlay(self, title: str, color: tuple, subtitle: str,
                      button: str, action) -> None:
        surf = pygame.Surface((GAME_W, GAME_H), pygame.SRCALPHA)
        surf.fill((10, 10, 10, 205))
        self.screen.blit(surf, (OFFSET_X, OFFSET_Y))

        cx = OFFSET_X + GAME_W // 2
        cy = OFFSET_Y + GAME_H // 2 - 60
        t = self.font_title.render(title, True, color)
        self.screen.blit(t, t.get_rect(center=(cx, cy)))
        cy += 44
        if subtitle:
            s = self.font_small.render(subtitle, True, UI_COL)
            self.screen.blit(s, s.get_rect(center=(cx, cy)))
        cy += 30

        label = self.font_small.render(button, True, BLACK)
        rect = pygame.Rect(0, 0, max(160, label.get_width() + 48), 42)
        rect.midtop = (cx, cy)
        pygame.draw.rect(self.screen, WHITE, rect, border_radius=21)
        self.screen.blit(label, label.get_rect(center=rect.center))
        self._overlay_button = rect
        self._overlay_action = action

    # ── Control pad & footer ─────────────────────────────────────
    def _draw_control_pad(self, state: SessionState) -> None:
        glyphs = {
            Intent.UP: "^", Intent.DOWN: "v", Intent.LEFT: "<", Intent.RIGHT: ">",
            Intent.PAUSE: ">" if state.is_paused else "||",
        }
        for intent, rect in self._pad.items():
            is_pause = intent is Intent.PAUSE
            fill = _lerp_color(BG, ACCENT, 0.2) if is_pause else (23, 23, 23)
            edge = _lerp_color(BG, ACCENT, 0.4) if is_pause else BORDER_COL
            pygame.draw.rect(self.screen, fill, rect, border_radius=12)
            pygame.draw.rect(self.screen, edge, rect, 1, border_radius=12)
            g = self.font_med.render(glyphs[intent], True, SNAKE_HEAD if is_pause else UI_COL)
            self.screen.blit(g, g.get_rect(center=rect.center))

    def _draw_footer(self) -> None:
        hint = self.font_tiny.render("ARROWS OR BUTTONS TO MOVE  -  SPACE TO PAUSE", True, UI_DIM)
        self.screen.blit(hint, hint.get_rect(midbottom=(WIDTH // 2, HEIGHT - 10)))

    # ── Font init ─────────────────────────────────────────────────
    def _init_fonts(self) -> None:
        specs = [
            ("font_title", "courier", 34, True),
            ("font_big",   "courier", 28, True),
            ("font_med",   "courier", 18, True),
            ("font_small", "courier", 14, True),
            ("font_tiny",  "courier", 11, False),
        ]
        for attr, name, size, bold in specs:
            try:
                setattr(self, attr, pygame.font.SysFont(name, size, bold=bold))
            except Exception:
                setattr(self, attr, pygame.font.SysFont(None, size))
