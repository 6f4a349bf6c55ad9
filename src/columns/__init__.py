"""Core engine for a Columns-style falling block game."""

from .block import Block, COLOR_SEQUENCE
from .grid import Coordinate, GameGrid, create_empty, for_each_cell, get, set_cell
from .pieces import SeededColors, spawn_piece, timestamp_colors
from .utils import FallResult, render_grid, render_text, step_fall
from .game_state import (
    Falling,
    GameOver,
    Model,
    Snapshot,
    Spawning,
    StartGame,
    Tick,
    TitleScreen,
    initial_model,
    snapshot,
    update,
)

__all__ = [
    "Block",
    "COLOR_SEQUENCE",
    "Coordinate",
    "GameGrid",
    "create_empty",
    "for_each_cell",
    "get",
    "set_cell",
    "SeededColors",
    "spawn_piece",
    "timestamp_colors",
    "FallResult",
    "render_grid",
    "render_text",
    "step_fall",
    "Falling",
    "GameOver",
    "Model",
    "Snapshot",
    "Spawning",
    "StartGame",
    "Tick",
    "TitleScreen",
    "initial_model",
    "snapshot",
    "update",
]
