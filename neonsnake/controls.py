"""
controls.py — Input rules.

Turns abstract player intents into session changes. The event source
(keyboard, on-screen buttons) lives in the controller; this module only
knows which changes are legal.
"""

import logging
from dataclasses import replace
from enum import Enum

from .model import Direction, SessionState

logger = logging.getLogger(__name__)


class Intent(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAUSE = "pause"
    RESET = "reset"


DIRECTION_FOR_INTENT = {
    Intent.UP:    Direction.UP,
    Intent.DOWN:  Direction.DOWN,
    Intent.LEFT:  Direction.LEFT,
    Intent.RIGHT: Direction.RIGHT,
}


def submit_direction(state: SessionState, requested) -> SessionState:
    """
    Make `requested` the pending direction.

    Rejected when it reverses the direction the last tick applied, even if
    another direction was submitted since. Anything that is not a Direction
    is ignored.
    """
    if not isinstance(requested, Direction):
        return state
    if requested.is_opposite(state.last_direction):
        return state
    if requested == state.direction:
        return state
    return replace(state, direction=requested)


def toggle_pause(state: SessionState) -> SessionState:
    """Flip pause; a finished game stays as it is."""
    if state.is_over:
        return state
    return replace(state, is_paused=not state.is_paused)


def dispatch(session, intent) -> bool:
    """
    Route one intent to `session`.
    Returns False for anything that is not a known intent.
    """
    if intent in DIRECTION_FOR_INTENT:
        session.set_direction(DIRECTION_FOR_INTENT[intent])
    elif intent is Intent.PAUSE:
        session.toggle_pause()
    elif intent is Intent.RESET:
        session.reset()
    else:
        logger.debug("ignoring unknown intent %r", intent)
        return False
    return True
