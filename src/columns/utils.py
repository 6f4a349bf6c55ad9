"""Gravity and rendering helpers for the Columns engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, NamedTuple

import numpy as np
from numpy.typing import NDArray

from .block import BLOCK_VALUES, Block
from .grid import Coordinate, GameGrid

if TYPE_CHECKING:  # pragma: no cover
    from .game_state import Snapshot


# Minimum time between two fall steps.
FALL_INTERVAL_MS = 1000

RenderedGrid = NDArray[np.uint8]

# Characters used by :func:`render_text`.
TEXT_SYMBOLS = {None: ".", Block.RED: "R", Block.GREEN: "G", Block.BLUE: "B"}


class FallResult(NamedTuple):
    grid: GameGrid
    settled: bool
    overflow: bool = False


def can_fall(grid: GameGrid, coord: Coordinate) -> bool:
    """Return ``True`` if the block at ``coord`` has a free cell beneath it.

    The floor counts as occupied.
    """

    target = coord.below()
    return target.y <= grid.height and not grid.is_occupied(target)


def _sweep(grid: GameGrid) -> Dict[Coordinate, Block]:
    # Bottom rows first so blocks in a stack move one after the other instead
    # of colliding with cells that are about to vacate.
    cells = dict(grid.cells)
    for coord in sorted(grid.cells, key=lambda c: c.y, reverse=True):
        target = coord.below()
        if target.y <= grid.height and target not in cells:
            cells[target] = cells.pop(coord)
    return cells


def step_fall(grid: GameGrid) -> FallResult:
    """Move every unsupported block down by one row.

    Returns a :class:`FallResult`.  ``settled`` is ``True`` once no block can
    move any further, in which case ``overflow`` reports whether a settled
    block was left above the visible board.
    """

    moved = grid.with_cells(_sweep(grid))
    settled = not any(can_fall(moved, coord) for coord in moved.cells)
    overflow = settled and any(coord.y <= 0 for coord in moved.cells)
    return FallResult(moved, settled, overflow)


def render_grid(grid: GameGrid) -> RenderedGrid:
    """Return the visible board as a ``(height, width)`` integer array.

    Empty cells are ``0``; occupied cells hold ``BLOCK_VALUES[block]``.  Cells
    above the board are not included.
    """

    values = [0 if cell is None else BLOCK_VALUES[cell] for _, cell in grid.iter_cells()]
    return np.array(values, dtype=np.uint8).reshape(grid.height, grid.width)


def render_text(snapshot: "Snapshot") -> str:
    """Return an ASCII frame for ``snapshot``."""

    symbols = [TEXT_SYMBOLS[cell] for _, cell in snapshot.iter_cells()]
    width = snapshot.width
    return "\n".join(
        "".join(symbols[i : i + width]) for i in range(0, len(symbols), width)
    )
