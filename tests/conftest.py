"""Pytest configuration and fixtures for decision core tests."""

import random

import pytest

from taiga.entities import Cell, Grass, ZooFactory
from taiga.geo import Position
from taiga.visibility import Visibility


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def zoo():
    """Factory creating creatures with sequential ids."""
    return ZooFactory()


@pytest.fixture
def open_field():
    """Build a snapshot where every cell of a width x height world is visible.

    ``grass`` maps positions to Grass overrides, ``scent`` maps positions to
    scent levels; all other cells hold ungrown grass and no scent.
    """

    def build(width, height, units=(), grass=None, scent=None):
        grass = grass or {}
        scent = scent or {}
        cells = [
            Cell(
                Position(x, y),
                grass.get(Position(x, y), Grass(0, 5)),
                scent.get(Position(x, y), 0),
            )
            for x in range(width)
            for y in range(height)
        ]
        return Visibility.of(cells, units, width, height)

    return build
