"""
engine.py — Simulation step.

`advance` is the whole game rule set: it takes one snapshot and returns
the next. It never touches timers or input, so it can be driven by any
scheduler and tested without one.
"""

import logging
from dataclasses import replace

from .config import COLS, ROWS, FOOD_REWARD, SPEED_STEP, MIN_INTERVAL
from .food import FoodPlacer
from .grid import wrap_point
from .model import SessionState

logger = logging.getLogger(__name__)


def next_interval(interval: int) -> int:
    """Speed up by one step, never below the floor."""
    return max(interval - SPEED_STEP, MIN_INTERVAL)


def advance(state: SessionState, placer: FoodPlacer) -> SessionState:
    """
    Move the snake one cell in the pending direction.

    Returns `state` itself when the session is paused or over. A head that
    lands on any current segment ends the game, the tail included even
    though it would move away this tick.
    """
    if not state.is_running:
        return state

    direction = state.direction
    hx, hy = state.head
    new_head = wrap_point(hx + direction.x, hy + direction.y, COLS, ROWS)

    if new_head in state.snake:
        logger.info("game over: head hit %s, score %d", tuple(new_head), state.score)
        return replace(state, is_over=True)

    grown = (new_head,) + state.snake

    if new_head == state.food:
        score = state.score + FOOD_REWARD
        interval = next_interval(state.interval)
        logger.info("food eaten at %s, score %d, interval %dms",
                    tuple(new_head), score, interval)
        return replace(
            state,
            snake=grown,
            food=placer.place(grown),
            score=score,
            high_score=max(state.high_score, score),
            interval=interval,
            last_direction=direction,
            tick=state.tick + 1,
        )

    logger.debug("tick %d: head %s", state.tick + 1, tuple(new_head))
    return replace(
        state,
        snake=grown[:-1],
        last_direction=direction,
        tick=state.tick + 1,
    )
