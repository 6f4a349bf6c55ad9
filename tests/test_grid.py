from __future__ import annotations

import pytest

from columns.block import Block
from columns.grid import Coordinate, GameGrid, create_empty, for_each_cell, get, set_cell


def test_set_then_get_round_trips_every_visible_cell() -> None:
    grid = create_empty(3, 4)
    for y in range(1, 5):
        for x in range(1, 4):
            for block in (Block.RED, Block.BLUE, None):
                assert get(set_cell(grid, Coordinate(x, y), block), Coordinate(x, y)) == block


def test_missing_key_reads_as_empty() -> None:
    grid = create_empty()
    assert get(grid, Coordinate(1, 1)) is None
    assert grid.occupied() == 0


def test_set_returns_new_grid_and_leaves_original_untouched() -> None:
    grid = create_empty()
    updated = set_cell(grid, Coordinate(2, 3), Block.GREEN)
    assert updated is not grid
    assert grid.occupied() == 0
    assert updated.occupied() == 1


def test_setting_empty_removes_key() -> None:
    grid = set_cell(create_empty(), Coordinate(2, 3), Block.GREEN)
    cleared = set_cell(grid, Coordinate(2, 3), None)
    assert Coordinate(2, 3) not in cleared.cells
    assert cleared == create_empty()


def test_cells_above_board_are_allowed() -> None:
    grid = set_cell(create_empty(), Coordinate(4, -2), Block.RED)
    assert get(grid, Coordinate(4, -2)) == Block.RED
    assert not grid.in_bounds(Coordinate(4, -2))


@pytest.mark.parametrize("coord", [Coordinate(0, 1), Coordinate(7, 1), Coordinate(1, 14)])
def test_set_out_of_bounds_raises(coord: Coordinate) -> None:
    with pytest.raises(IndexError):
        set_cell(create_empty(6, 13), coord, Block.RED)


def test_invalid_size_rejected() -> None:
    with pytest.raises(ValueError):
        create_empty(0, 5)


def test_cells_mapping_is_read_only() -> None:
    grid = create_empty()
    with pytest.raises(TypeError):
        grid.cells[Coordinate(1, 1)] = Block.RED  # type: ignore[index]


def test_for_each_cell_is_row_major_over_visible_board() -> None:
    grid = set_cell(create_empty(2, 2), Coordinate(1, -1), Block.RED)
    grid = set_cell(grid, Coordinate(2, 1), Block.BLUE)
    seen = []
    for_each_cell(grid, lambda coord, cell: seen.append((tuple(coord), cell)))
    assert seen == [
        ((1, 1), None),
        ((2, 1), Block.BLUE),
        ((1, 2), None),
        ((2, 2), None),
    ]


def test_coordinates_compare_structurally() -> None:
    assert Coordinate(3, 4) == Coordinate(3, 4)
    assert {Coordinate(3, 4): 1}[Coordinate(3, 4)] == 1
    assert Coordinate(3, 4).below() == Coordinate(3, 5)
