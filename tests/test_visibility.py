"""Tests for visibility snapshots and their validation."""

import pytest

from taiga.entities import Cell, Grass
from taiga.exceptions import InvalidVisibilityError, TaigaError
from taiga.geo import Position
from taiga.visibility import Visibility


def test_snapshot_copies_iterables_into_tuples(zoo):
    cells = [Cell(Position(0, 0)), Cell(Position(1, 0))]
    visibility = Visibility.of(iter(cells), [zoo.rabbit_unit(Position(1, 0))], 2, 1)
    cells.append(Cell(Position(0, 1)))

    assert isinstance(visibility.visible_cells, tuple)
    assert len(list(visibility.cells())) == 2
    # Repeated enumeration observes the same view.
    assert list(visibility.cells()) == list(visibility.cells())
    assert len(list(visibility.units())) == 1


def test_cell_at_and_positions():
    grass = Grass(3, 2)
    visibility = Visibility.of([Cell(Position(0, 0)), Cell(Position(1, 0), grass)], [], 2, 1)
    assert visibility.positions() == [Position(0, 0), Position(1, 0)]
    assert visibility.cell_at(Position(1, 0)).grass == grass
    assert visibility.cell_at(Position(5, 5)) is None


def test_empty_snapshot_is_valid():
    assert Visibility().validate() == Visibility()
    assert Visibility.empty(10, 10).validate() == Visibility.empty(10, 10)


def test_validate_rejects_cell_outside_world():
    visibility = Visibility.of([Cell(Position(5, 0))], [], 5, 5)
    with pytest.raises(InvalidVisibilityError, match="outside"):
        visibility.validate()


def test_validate_rejects_unit_outside_world(zoo):
    visibility = Visibility.of([], [zoo.wolf_unit(Position(0, -1))], 5, 5)
    with pytest.raises(InvalidVisibilityError):
        visibility.validate()


def test_validate_rejects_non_positive_extent():
    visibility = Visibility.of([Cell(Position(0, 0))], [], 0, 3)
    with pytest.raises(InvalidVisibilityError, match="positive"):
        visibility.validate()


def test_invalid_visibility_is_an_input_error():
    assert issubclass(InvalidVisibilityError, ValueError)
    assert issubclass(InvalidVisibilityError, TaigaError)
