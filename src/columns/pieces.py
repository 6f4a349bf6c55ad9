"""Spawning of new falling pieces.

A piece is three blocks stacked in :data:`SPAWN_COLUMN`, placed just above the
visible top row so it enters the board on the following fall steps.  Colours
come from a *colour source*: a callable mapping the spawn timestamp to three
blocks.  The default derives them from the timestamp digits which keeps a game
a deterministic function of its tick sequence.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Tuple

from .block import Block, block_for_index
from .grid import Coordinate, GameGrid


LOGGER = logging.getLogger(__name__)

SPAWN_COLUMN = 4
# Rows occupied by a fresh piece, from the bottom block up.
PIECE_ROWS: Tuple[int, ...] = (0, -1, -2)

PieceColors = Tuple[Block, Block, Block]
ColorSource = Callable[[int], PieceColors]


def timestamp_colors(timestamp_ms: int) -> PieceColors:
    """Return piece colours derived from ``timestamp_ms``.

    The bottom block uses ``t mod 3``, the middle ``t // 10 mod 3`` and the top
    ``t // 100 mod 3`` as index into :data:`~columns.block.COLOR_SEQUENCE`.
    """

    return (
        block_for_index(timestamp_ms),
        block_for_index(timestamp_ms // 10),
        block_for_index(timestamp_ms // 100),
    )


class SeededColors:
    """Colour source backed by :class:`random.Random`.

    Colours depend only on ``(seed, timestamp)``, so repeated calls with the
    same timestamp agree and the game reducer stays free of hidden state.
    """

    def __init__(self, seed: int = 0) -> None:
        self.seed = seed

    def __call__(self, timestamp_ms: int) -> PieceColors:
        rng = random.Random(self.seed * 1_000_003 + timestamp_ms)
        return (
            block_for_index(rng.randrange(3)),
            block_for_index(rng.randrange(3)),
            block_for_index(rng.randrange(3)),
        )

    def __repr__(self) -> str:
        return f"SeededColors(seed={self.seed})"


def piece_coordinates(column: int = SPAWN_COLUMN) -> Tuple[Coordinate, ...]:
    """Return the spawn coordinates of a piece, bottom block first."""

    return tuple(Coordinate(column, row) for row in PIECE_ROWS)


def spawn_piece(
    timestamp_ms: int,
    grid: GameGrid,
    colors: ColorSource = timestamp_colors,
) -> GameGrid:
    """Return ``grid`` with a new three-block piece above the spawn column.

    Any existing cells at the spawn coordinates are overwritten.
    """

    blocks = colors(timestamp_ms)
    cells = dict(grid.cells)
    for coord, block in zip(piece_coordinates(), blocks):
        cells[coord] = block
    LOGGER.debug(
        "Spawned piece %s at t=%d", "/".join(b.value for b in blocks), timestamp_ms
    )
    return grid.with_cells(cells)
