import random

from neonsnake.config import GRID_SIZE
from neonsnake.food import FoodPlacer
from neonsnake.grid import Point, all_cells


class TestFoodPlacer:
    """Tests for FoodPlacer.place."""

    def test_never_lands_on_occupied_cell(self, placer):
        occupied = {(10, 10), (10, 11), (10, 12), (10, 9)}
        for _ in range(500):
            food = placer.place(occupied)
            assert food not in occupied
            assert 0 <= food.x < GRID_SIZE and 0 <= food.y < GRID_SIZE

    def test_returns_point(self, placer):
        assert isinstance(placer.place([]), Point)

    def test_does_not_modify_occupied(self, placer):
        occupied = [(1, 1), (1, 2)]
        placer.place(occupied)
        assert occupied == [(1, 1), (1, 2)]

    def test_dense_board_picks_only_free_cell(self):
        placer = FoodPlacer(cols=5, rows=5, rng=random.Random(3))
        occupied = [c for c in all_cells(5, 5) if c != (2, 4)]
        for _ in range(20):
            assert placer.place(occupied) == (2, 4)

    def test_exhausted_sampling_falls_back_to_free_cells(self):
        placer = FoodPlacer(cols=4, rows=4, rng=random.Random(0), max_attempts=0)
        occupied = {(0, 0), (1, 0)}
        food = placer.place(occupied)
        assert food is not None
        assert food not in occupied

    def test_full_board_returns_none(self):
        placer = FoodPlacer(cols=3, rows=3, rng=random.Random(0))
        assert placer.place(list(all_cells(3, 3))) is None

    def test_seeded_placements_are_repeatable(self):
        a = FoodPlacer(rng=random.Random(99))
        b = FoodPlacer(rng=random.Random(99))
        assert [a.place([]) for _ in range(5)] == [b.place([]) for _ in range(5)]
