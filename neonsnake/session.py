"""
session.py — The game session.

Holds the current SessionState and is the only place it changes. The
timer callback and the input handlers both go through here; every change
is published to subscribers as a new frozen snapshot.
"""

import logging
from dataclasses import replace
from typing import Callable, Optional

from . import controls
from .engine import advance
from .food import FoodPlacer
from .model import Direction, SessionState, initial_state

logger = logging.getLogger(__name__)

Listener = Callable[[SessionState], None]


class GameSession:
    """
    Owns one game: snake, food, direction, score, high score, speed and
    the paused/over flags. High score survives `reset` for the lifetime of
    the object only.
    """

    def __init__(self, placer: Optional[FoodPlacer] = None, state: Optional[SessionState] = None):
        self.placer = placer or FoodPlacer()
        self._state = state or initial_state()
        self._listeners: list[Listener] = []

    # ── Accessors ────────────────────────────────────────────────
    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def interval(self) -> int:
        return self._state.interval

    @property
    def is_running(self) -> bool:
        return self._state.is_running

    # ── Subscription ─────────────────────────────────────────────
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call `listener` with every new snapshot. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ── Commands ─────────────────────────────────────────────────
    def reset(self) -> None:
        """Back to the starting position, paused. Keeps the high score."""
        high_score = self._state.high_score
        start = initial_state(high_score=high_score)
        self._commit(replace(start, food=self.placer.place(start.snake)))
        logger.info("session reset, high score %d", high_score)

    def step(self) -> None:
        """Advance one tick; does nothing while paused or over."""
        self._commit(advance(self._state, self.placer))

    def set_direction(self, direction: Direction) -> None:
        self._commit(controls.submit_direction(self._state, direction))

    def toggle_pause(self) -> None:
        self._commit(controls.toggle_pause(self._state))
        if not self._state.is_over:
            logger.info("session %s", "paused" if self._state.is_paused else "running")

    def pause(self) -> None:
        if self._state.is_running:
            self.toggle_pause()

    def resume(self) -> None:
        if self._state.is_paused and not self._state.is_over:
            self.toggle_pause()

    # ── Private helpers ──────────────────────────────────────────
    def _commit(self, new_state: SessionState) -> None:
        if new_state == self._state:
            return
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
