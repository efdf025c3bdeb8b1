"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame event loop.
  - Translate raw keyboard and mouse events into intents.
  - Drive the tick scheduler and ask the view to render.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the session's job).

The controller is the only layer that reads pygame events.
"""

import logging
import sys
import pygame

from .config import WIDTH, HEIGHT, FPS, TITLE
from .controls import Intent, dispatch
from .scheduler import TickScheduler
from .session import GameSession
from .view import GameView, START

logger = logging.getLogger(__name__)

KEY_INTENTS = {
    pygame.K_UP:    Intent.UP,
    pygame.K_DOWN:  Intent.DOWN,
    pygame.K_LEFT:  Intent.LEFT,
    pygame.K_RIGHT: Intent.RIGHT,
    pygame.K_SPACE: Intent.PAUSE,
}
RESTART_KEYS = (pygame.K_r, pygame.K_RETURN)
QUIT_KEYS = (pygame.K_q, pygame.K_ESCAPE)


def intent_for_key(key: int):
    """Intent bound to `key`, START for restart keys, else None."""
    if key in RESTART_KEYS:
        return START
    return KEY_INTENTS.get(key)


def apply_action(session: GameSession, action) -> None:
    """
    Apply a key or click result to `session`.
    START resets and begins play at once; intents go through dispatch.
    """
    if action is None:
        return
    if action == START:
        session.reset()
        session.resume()
    else:
        dispatch(session, action)


class GameController:
    """
    Owns the main loop.
    Glues session <-> view without them knowing about each other.
    """

    def __init__(self, session: GameSession | None = None):
        pygame.init()
        try:
            self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        except pygame.error:
            logger.exception("could not open a %dx%d window", WIDTH, HEIGHT)
            raise
        pygame.display.set_caption(TITLE)
        self.clock     = pygame.time.Clock()
        self.session   = session or GameSession()
        self.scheduler = TickScheduler(self.session)
        self.view      = GameView(self.screen)

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the player quits."""
        logger.info("starting %s", TITLE)
        while True:
            dt = self.clock.tick(FPS)
            self._handle_events()
            self.scheduler.update(dt)
            self.view.render(self.session.state)

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                apply_action(self.session, self.view.hit_test(event.pos))

    def _handle_keydown(self, key: int) -> None:
        if key in QUIT_KEYS:
            self._quit()
        apply_action(self.session, intent_for_key(key))

    # ── Utilities ─────────────────────────────────────────────────
    @staticmethod
    def _quit() -> None:
        logger.info("quitting")
        pygame.quit()
        sys.exit()
