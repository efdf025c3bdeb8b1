"""
grid.py — Coordinate space of the toroidal board.

The board is COLS x ROWS cells; moving past one edge re-enters on the
opposite edge.
"""

from typing import Iterator, NamedTuple

from .config import COLS, ROWS


class Point(NamedTuple):
    """A grid cell. Compares equal to a plain (x, y) tuple."""
    x: int
    y: int


def wrap(coordinate: int, extent: int) -> int:
    """Map any integer into [0, extent) using floored modulo."""
    return coordinate % extent


def wrap_point(x: int, y: int, cols: int = COLS, rows: int = ROWS) -> Point:
    return Point(wrap(x, cols), wrap(y, rows))


def all_cells(cols: int = COLS, rows: int = ROWS) -> Iterator[Point]:
    """Every cell of the board, row by row."""
    for y in range(rows):
        for x in range(cols):
            yield Point(x, y)
