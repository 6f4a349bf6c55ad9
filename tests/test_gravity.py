from __future__ import annotations

from columns.block import Block
from columns.grid import Coordinate, create_empty, set_cell
from columns.pieces import spawn_piece
from columns.game_state import Model, snapshot
from columns.utils import can_fall, render_grid, render_text, step_fall


def _column(grid, x, rows, block=Block.RED):
    for y in rows:
        grid = set_cell(grid, Coordinate(x, y), block)
    return grid


def test_step_moves_whole_piece_down_one_row() -> None:
    grid = spawn_piece(125, create_empty())
    result = step_fall(grid)
    assert not result.settled
    assert result.grid.get(Coordinate(4, 1)) == Block.BLUE
    assert result.grid.get(Coordinate(4, 0)) == Block.RED
    assert result.grid.get(Coordinate(4, -1)) == Block.GREEN
    assert result.grid.get(Coordinate(4, -2)) is None


def test_step_preserves_block_count_and_stays_on_board() -> None:
    grid = spawn_piece(1000, create_empty(6, 5))
    for _ in range(10):
        grid, _settled = step_fall(grid)[:2]
        assert grid.occupied() == 3
        assert all(c.y <= grid.height for c in grid.cells)


def test_piece_settles_on_floor() -> None:
    grid = _column(create_empty(6, 5), 4, (2, 3, 4))
    result = step_fall(grid)
    assert set(result.grid.cells) == {Coordinate(4, 3), Coordinate(4, 4), Coordinate(4, 5)}
    assert result.settled
    assert not result.overflow


def test_piece_stops_on_settled_block() -> None:
    grid = _column(create_empty(6, 5), 4, (5,), Block.BLUE)
    grid = _column(grid, 4, (1, 2, 3))
    result = step_fall(grid)
    assert result.settled
    assert result.grid.get(Coordinate(4, 5)) == Block.BLUE
    assert set(result.grid.cells) == {Coordinate(4, y) for y in (2, 3, 4, 5)}


def test_settled_blocks_do_not_move() -> None:
    grid = _column(create_empty(6, 5), 1, (4, 5), Block.GREEN)
    grid = spawn_piece(0, grid)
    moved, settled, _ = step_fall(grid)
    assert not settled
    assert moved.get(Coordinate(1, 5)) == Block.GREEN
    assert moved.get(Coordinate(1, 4)) == Block.GREEN


def test_overflow_when_piece_settles_above_board() -> None:
    grid = _column(create_empty(6, 3), 4, (1, 2, 3), Block.GREEN)
    grid = spawn_piece(0, grid)
    result = step_fall(grid)
    assert result.settled
    assert result.overflow
    assert result.grid.occupied() == 6


def test_can_fall_treats_floor_as_blocked() -> None:
    grid = create_empty(6, 5)
    assert can_fall(grid, Coordinate(1, 4))
    assert not can_fall(grid, Coordinate(1, 5))


def test_render_grid_hides_cells_above_board() -> None:
    grid = spawn_piece(125, create_empty(6, 5))
    grid = step_fall(grid).grid
    out = render_grid(grid)
    assert out.shape == (5, 6)
    assert int(out.sum()) == 3  # only (4, 1) is visible, holding BLUE
    assert int(out[0, 3]) == 3


def test_render_text_lays_out_rows_top_to_bottom() -> None:
    grid = set_cell(create_empty(3, 2), Coordinate(1, 1), Block.RED)
    grid = set_cell(grid, Coordinate(3, 2), Block.BLUE)
    grid = set_cell(grid, Coordinate(2, -1), Block.GREEN)
    assert render_text(snapshot(Model(grid=grid))) == "R..\n..B"
