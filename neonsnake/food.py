"""
food.py — Food placement.

Picks a random free cell. Sampling is retried until it lands on an empty
cell; on a crowded board the free cells are enumerated instead so the
search always terminates.
"""

import logging
import random
from typing import Collection, Optional

from .config import COLS, ROWS, FOOD_DENSE_THRESHOLD, FOOD_MAX_ATTEMPTS
from .grid import Point, all_cells

logger = logging.getLogger(__name__)


class FoodPlacer:
    """Chooses food cells uniformly among the cells not in `occupied`."""

    def __init__(
        self,
        cols: int = COLS,
        rows: int = ROWS,
        rng: Optional[random.Random] = None,
        dense_threshold: float = FOOD_DENSE_THRESHOLD,
        max_attempts: int = FOOD_MAX_ATTEMPTS,
    ):
        self.cols = cols
        self.rows = rows
        self.rng = rng or random.Random()
        self.dense_threshold = dense_threshold
        self.max_attempts = max_attempts

    @property
    def cell_count(self) -> int:
        return self.cols * self.rows

    def place(self, occupied: Collection[tuple[int, int]]) -> Optional[Point]:
        """
        Return a free cell, or None when every cell is occupied.
        `occupied` is not modified.
        """
        taken = set(occupied)
        if len(taken) / self.cell_count <= self.dense_threshold:
            for _ in range(self.max_attempts):
                pos = Point(self.rng.randrange(self.cols), self.rng.randrange(self.rows))
                if pos not in taken:
                    return pos
            logger.debug("rejection sampling missed %d times", self.max_attempts)
        return self._place_from_free_cells(taken)

    def _place_from_free_cells(self, taken: set) -> Optional[Point]:
        free = [cell for cell in all_cells(self.cols, self.rows) if cell not in taken]
        if not free:
            logger.warning("no free cell left for food on a %dx%d board", self.cols, self.rows)
            return None
        return self.rng.choice(free)
