"""Sparse board representation for the Columns playfield."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterator, Mapping, NamedTuple, Optional, Tuple

from .block import Block


# Dimensions of the default board.
WIDTH = 6
HEIGHT = 13

# ``None`` represents an empty cell, a :class:`Block` an occupied one.
Cell = Optional[Block]
EMPTY: Cell = None


class Coordinate(NamedTuple):
    """Board position, 1-based.  ``y`` grows downwards."""

    x: int
    y: int

    def below(self) -> "Coordinate":
        return Coordinate(self.x, self.y + 1)


def _freeze(cells: Mapping[Coordinate, Block]) -> Mapping[Coordinate, Block]:
    return MappingProxyType(dict(cells))


@dataclass(frozen=True)
class GameGrid:
    """Immutable board of fixed size holding the occupied cells.

    ``cells`` is sparse: a coordinate missing from the mapping is empty.  Rows
    with ``y <= 0`` sit above the visible board and are used while a piece
    enters from the top.
    """

    width: int = WIDTH
    height: int = HEIGHT
    cells: Mapping[Coordinate, Block] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Invalid grid size {self.width}x{self.height}")
        for coord in self.cells:
            self._check_key(coord)
        object.__setattr__(self, "cells", _freeze(self.cells))

    def _check_key(self, coord: Coordinate) -> None:
        x, y = coord
        if not (1 <= x <= self.width) or y > self.height:
            raise IndexError(f"Cell {tuple(coord)} out of bounds")

    def in_bounds(self, coord: Coordinate) -> bool:
        """Return ``True`` if ``coord`` lies on the visible board."""

        x, y = coord
        return 1 <= x <= self.width and 1 <= y <= self.height

    def get(self, coord: Coordinate) -> Cell:
        return self.cells.get(Coordinate(*coord), EMPTY)

    def set(self, coord: Coordinate, cell: Cell) -> "GameGrid":
        """Return a copy of the grid with ``coord`` mapped to ``cell``.

        Setting a cell to :data:`EMPTY` removes the key.

        Raises:
            IndexError: If ``coord`` is outside the board columns or below the
                bottom row.
        """

        coord = Coordinate(*coord)
        self._check_key(coord)
        cells = dict(self.cells)
        if cell is EMPTY:
            cells.pop(coord, None)
        else:
            cells[coord] = Block(cell)
        return GameGrid(self.width, self.height, cells)

    def with_cells(self, cells: Mapping[Coordinate, Block]) -> "GameGrid":
        """Return a grid of the same size holding exactly ``cells``."""

        return GameGrid(self.width, self.height, cells)

    def is_occupied(self, coord: Coordinate) -> bool:
        return Coordinate(*coord) in self.cells

    def occupied(self) -> int:
        """Return the number of occupied cells, including any above the board."""

        return len(self.cells)

    def iter_cells(self) -> Iterator[Tuple[Coordinate, Cell]]:
        """Yield ``(coord, cell)`` for every visible cell in row-major order.

        Rows are the outer loop and columns the inner one, so the output maps
        directly onto the on-screen layout.
        """

        for y in range(1, self.height + 1):
            for x in range(1, self.width + 1):
                coord = Coordinate(x, y)
                yield coord, self.cells.get(coord, EMPTY)


def create_empty(width: int = WIDTH, height: int = HEIGHT) -> GameGrid:
    """Return a new grid with no occupied cells."""

    return GameGrid(width, height)


def get(grid: GameGrid, coord: Coordinate) -> Cell:
    return grid.get(coord)


def set_cell(grid: GameGrid, coord: Coordinate, cell: Cell) -> GameGrid:
    return grid.set(coord, cell)


def iter_cells(grid: GameGrid) -> Iterator[Tuple[Coordinate, Cell]]:
    return grid.iter_cells()


def for_each_cell(grid: GameGrid, func: Callable[[Coordinate, Cell], None]) -> None:
    """Call ``func(coord, cell)`` for every visible cell in row-major order."""

    for coord, cell in grid.iter_cells():
        func(coord, cell)
