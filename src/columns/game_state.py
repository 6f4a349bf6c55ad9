"""High level game state and the event reducer driving it.

The game is a pure function of its event stream: :func:`update` takes the
current :class:`Model` and one event and returns the next model.  Hosting
shells own the timer and forward :class:`Tick` and :class:`StartGame` events
in delivery order; nothing in this module reads a clock.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Mapping, Tuple, Union

from .block import Block
from .grid import HEIGHT, WIDTH, Cell, Coordinate, GameGrid, create_empty
from .pieces import ColorSource, spawn_piece, timestamp_colors
from .utils import FALL_INTERVAL_MS, step_fall


LOGGER = logging.getLogger(__name__)


# Phases -------------------------------------------------------------------
@dataclass(frozen=True)
class TitleScreen:
    pass


@dataclass(frozen=True)
class Spawning:
    pass


@dataclass(frozen=True)
class Falling:
    """A piece is falling; ``since_ms`` is the time of the last fall step.

    ``settled`` is set once the piece can no longer move; the next tick then
    hands over to :class:`Spawning`.
    """

    since_ms: int
    settled: bool = False


@dataclass(frozen=True)
class GameOver:
    pass


GamePhase = Union[TitleScreen, Spawning, Falling, GameOver]


# Events -------------------------------------------------------------------
@dataclass(frozen=True)
class Tick:
    timestamp_ms: int


@dataclass(frozen=True)
class StartGame:
    pass


Event = Union[Tick, StartGame]


@dataclass(frozen=True)
class Model:
    """Complete game state: the board plus the current phase."""

    grid: GameGrid = field(default_factory=create_empty)
    phase: GamePhase = field(default_factory=TitleScreen)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a :class:`Model` handed to renderers."""

    phase: GamePhase
    grid: GameGrid

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def cells(self) -> Mapping[Coordinate, Block]:
        return self.grid.cells

    def iter_cells(self) -> Iterator[Tuple[Coordinate, Cell]]:
        """Yield the visible cells in row-major order."""

        return self.grid.iter_cells()

    @property
    def show_start_button(self) -> bool:
        return isinstance(self.phase, TitleScreen)


def initial_model(width: int = WIDTH, height: int = HEIGHT) -> Model:
    """Return the starting model: title screen and an empty board."""

    return Model(grid=create_empty(width, height), phase=TitleScreen())


def snapshot(model: Model) -> Snapshot:
    return Snapshot(model.phase, model.grid)


def _start(model: Model) -> Model:
    grid = create_empty(model.grid.width, model.grid.height)
    LOGGER.info("Game started on a %dx%d board", grid.width, grid.height)
    return Model(grid=grid, phase=Spawning())


def _tick(model: Model, timestamp_ms: int, colors: ColorSource) -> Model:
    phase = model.phase
    if isinstance(phase, Spawning):
        grid = spawn_piece(timestamp_ms, model.grid, colors)
        return Model(grid=grid, phase=Falling(timestamp_ms))

    if isinstance(phase, Falling):
        if phase.settled:
            return Model(grid=model.grid, phase=Spawning())
        if timestamp_ms - phase.since_ms < FALL_INTERVAL_MS:
            return model
        grid, settled, overflow = step_fall(model.grid)
        if overflow:
            LOGGER.info("Game over: board overflow at t=%d", timestamp_ms)
            return Model(grid=grid, phase=GameOver())
        if settled:
            LOGGER.debug("Piece settled at t=%d", timestamp_ms)
            return Model(grid=grid, phase=Falling(timestamp_ms, settled=True))
        return Model(grid=grid, phase=Falling(timestamp_ms))

    # Title screen and game over wait for ``StartGame``.
    return model


def update(model: Model, event: Event, *, colors: ColorSource = timestamp_colors) -> Model:
    """Apply ``event`` to ``model`` and return the resulting model.

    Parameters
    ----------
    model:
        Current state.  It is never mutated.
    event:
        A :class:`Tick` or :class:`StartGame`.
    colors:
        Colour source used when a new piece spawns.

    Raises:
        TypeError: If ``event`` is not a known event type.
    """

    if isinstance(event, StartGame):
        new = _start(model)
    elif isinstance(event, Tick):
        new = _tick(model, event.timestamp_ms, colors)
    else:
        raise TypeError(f"Unknown event: {event!r}")

    if type(new.phase) is not type(model.phase):
        LOGGER.debug(
            "Phase %s -> %s", type(model.phase).__name__, type(new.phase).__name__
        )
    return new
