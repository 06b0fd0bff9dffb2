"""Tests for best-cell selection and movement resolution."""

import random

from taiga.ai.selection import available_directions, best_positions, resolve_step
from taiga.geo import Direction, Position


class TestBestPositions:
    def test_empty_map(self):
        assert best_positions({}) == []

    def test_single_maximum(self):
        values = {Position(0, 0): 1, Position(1, 0): 7, Position(2, 0): -3}
        assert best_positions(values) == [Position(1, 0)]

    def test_ties_sorted_lexicographically(self):
        values = {Position(2, 0): 5, Position(0, 3): 5, Position(0, 1): 5, Position(1, 1): 4}
        assert best_positions(values) == [Position(0, 1), Position(0, 3), Position(2, 0)]

    def test_negative_maximum(self):
        values = {Position(0, 0): -10, Position(1, 0): -2}
        assert best_positions(values) == [Position(1, 0)]


class TestAvailableDirections:
    def test_corner_allows_three_steps(self, seeded_rng):
        directions = available_directions(Position(0, 0), 5, 5, seeded_rng)
        assert set(directions) == {Direction.E, Direction.SE, Direction.S}

    def test_interior_allows_all_steps(self, seeded_rng):
        assert len(available_directions(Position(2, 2), 5, 5, seeded_rng)) == 8

    def test_single_cell_world_allows_nothing(self, seeded_rng):
        assert available_directions(Position(0, 0), 1, 1, seeded_rng) == []


class TestResolveStep:
    def test_no_targets(self, seeded_rng):
        assert resolve_step(Position(1, 1), [], 5, 5, seeded_rng) is None

    def test_already_at_target(self, seeded_rng):
        assert resolve_step(Position(1, 1), [Position(1, 1)], 5, 5, seeded_rng) is None

    def test_first_target_wins(self, seeded_rng):
        step = resolve_step(Position(2, 2), [Position(4, 4), Position(0, 0)], 5, 5, seeded_rng)
        assert step is Direction.SE

    def test_step_never_leaves_world(self):
        rng = random.Random(3)
        for _ in range(50):
            step = resolve_step(Position(0, 2), [Position(0, 4)], 5, 5, rng)
            assert step in {Direction.S, Direction.SE}
            assert not Position(0, 2).by(step).adjustable_in(0, 0, 5, 5)

    def test_ties_are_randomised(self):
        rng = random.Random(11)
        steps = {resolve_step(Position(2, 2), [Position(5, 2)], 8, 8, rng) for _ in range(60)}
        assert steps == {Direction.NE, Direction.E, Direction.SE}
