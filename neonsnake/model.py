"""
model.py — Model layer.

Owns the game data. Zero rendering, zero input handling, zero timing.

Classes:
    Direction     — immutable (dx, dy) value object
    SessionState  — immutable snapshot of one game session
"""

from dataclasses import dataclass
from typing import Optional

from .config import (
    INITIAL_SNAKE, INITIAL_DIRECTION, INITIAL_FOOD, INITIAL_INTERVAL,
    STATE_READY, STATE_PLAYING, STATE_PAUSED, STATE_OVER,
)
from .grid import Point


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction."""
    __slots__ = ("x", "y")

    LEFT  = None  # filled below after class definition
    RIGHT = None
    UP    = None
    DOWN  = None

    def __init__(self, x: int, y: int):
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    def __setattr__(self, name, value):
        raise AttributeError(f"Direction is immutable, cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Direction is immutable, cannot delete {name!r}")

    def is_opposite(self, other: "Direction") -> bool:
        return self.x == -other.x and self.y == -other.y

    def __eq__(self, other):
        return isinstance(other, Direction) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction({self.x}, {self.y})"


Direction.LEFT  = Direction(-1,  0)
Direction.RIGHT = Direction( 1,  0)
Direction.UP    = Direction( 0, -1)
Direction.DOWN  = Direction( 0,  1)
ALL_DIRS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


# ───────────────────────── SessionState ──────────────────────────
@dataclass(frozen=True)
class SessionState:
    """
    Everything the renderer needs, frozen.

    `direction` is the pending direction applied on the next tick;
    `last_direction` is the one the previous tick actually used and is
    what reversals are checked against.
    """

    snake: tuple[Point, ...]
    food: Optional[Point]
    direction: Direction
    last_direction: Direction
    score: int = 0
    high_score: int = 0
    interval: int = INITIAL_INTERVAL
    is_paused: bool = True
    is_over: bool = False
    tick: int = 0

    @property
    def head(self) -> Point:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)

    @property
    def is_running(self) -> bool:
        return not self.is_paused and not self.is_over

    @property
    def phase(self) -> str:
        if self.is_over:
            return STATE_OVER
        if not self.is_paused:
            return STATE_PLAYING
        return STATE_READY if self.tick == 0 else STATE_PAUSED


def initial_state(high_score: int = 0, food: Optional[Point] = Point(*INITIAL_FOOD)) -> SessionState:
    """A fresh paused session at the starting position."""
    start = Direction(*INITIAL_DIRECTION)
    return SessionState(
        snake=tuple(Point(x, y) for x, y in INITIAL_SNAKE),
        food=food,
        direction=start,
        last_direction=start,
        high_score=high_score,
    )
