"""Simple pygame front-end for the Columns engine.

The runner owns the clock and the window; every frame it forwards a
:class:`~columns.game_state.Tick` to the reducer and draws the resulting
snapshot.  On the title screen a start button is shown; clicking it or
pressing Enter sends :class:`~columns.game_state.StartGame`.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Optional

import pygame

from .block import BLOCK_VALUES, Block
from .game_state import (
    Event,
    GameOver,
    Model,
    Snapshot,
    StartGame,
    Tick,
    initial_model,
    snapshot,
    update,
)
from .grid import HEIGHT, WIDTH, Coordinate
from .utils import render_grid


LOGGER = logging.getLogger(__name__)

# Size of a single board cell in pixels
CELL_SIZE = 40
# Frames per second to run the game loop at
FPS = 60

EMPTY_COLOR = (20, 20, 20)
GRID_LINE_COLOR = (50, 50, 50)
BLOCK_COLORS = {
    Block.RED: (220, 40, 40),
    Block.GREEN: (40, 200, 70),
    Block.BLUE: (40, 90, 230),
}

# Mapping from the integer in a rendered grid to a colour
CELL_COLORS = {0: EMPTY_COLOR}
for block, value in BLOCK_VALUES.items():
    CELL_COLORS[value] = BLOCK_COLORS[block]

BUTTON_SIZE = (120, 40)
BUTTON_COLOR = (200, 200, 200)


def start_button_rect(width: int = WIDTH, height: int = HEIGHT) -> pygame.Rect:
    """Return the start button area, centred on the board."""

    rect = pygame.Rect((0, 0), BUTTON_SIZE)
    rect.center = (width * CELL_SIZE // 2, height * CELL_SIZE // 2)
    return rect


def cell_rect(coord: Coordinate) -> pygame.Rect:
    return pygame.Rect(
        (coord.x - 1) * CELL_SIZE, (coord.y - 1) * CELL_SIZE, CELL_SIZE, CELL_SIZE
    )


def event_to_message(event: pygame.event.Event, view: Snapshot) -> Optional[Event]:
    """Translate a pygame input event into a game event, if any."""

    if event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
        return StartGame()
    if event.type == pygame.MOUSEBUTTONDOWN and view.show_start_button:
        if start_button_rect(view.width, view.height).collidepoint(event.pos):
            return StartGame()
    return None


def draw(screen: pygame.Surface, view: Snapshot) -> None:
    """Render the board followed by the start button when visible."""

    screen.fill(EMPTY_COLOR)
    values = render_grid(view.grid)
    for coord, _cell in view.iter_cells():
        rect = cell_rect(coord)
        color = CELL_COLORS[int(values[coord.y - 1, coord.x - 1])]
        pygame.draw.rect(screen, color, rect)
        pygame.draw.rect(screen, GRID_LINE_COLOR, rect, 1)
    if view.show_start_button:
        pygame.draw.rect(screen, BUTTON_COLOR, start_button_rect(view.width, view.height))


class GameRunner:
    """Drive the reducer from the pygame clock."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.model: Model = initial_model(width, height)
        self._running = False
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None

    @property
    def running(self) -> bool:
        return self._running

    def dispatch(self, event: Event) -> None:
        """Feed ``event`` to the reducer, resetting the game if it fails."""

        try:
            self.model = update(self.model, event)
        except Exception:
            LOGGER.exception("Crash while handling %r; restarting", event)
            self.model = update(self.model, StartGame())

    def _caption(self) -> str:
        if isinstance(self.model.phase, GameOver):
            return "Bobby's Columns - Game over (Enter to restart)"
        return "Bobby's Columns"

    async def _run_loop(self) -> None:
        os.environ.setdefault("SDL_HINT_EMSCRIPTEN_CANVAS_ELEMENT_ID", "#canvas")
        pygame.init()
        grid = self.model.grid
        self._screen = pygame.display.set_mode(
            (grid.width * CELL_SIZE, grid.height * CELL_SIZE)
        )
        self._clock = pygame.time.Clock()
        LOGGER.info("Window opened")

        self._running = True
        while self._running:
            self._clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self._running = False
                    continue
                message = event_to_message(event, snapshot(self.model))
                if message is not None:
                    self.dispatch(message)

            self.dispatch(Tick(pygame.time.get_ticks()))
            draw(self._screen, snapshot(self.model))
            pygame.display.set_caption(self._caption())
            pygame.display.flip()

            # Yield to the host event loop to keep the UI responsive
            await asyncio.sleep(0)

        pygame.quit()
        LOGGER.info("Window closed")

    def start(self) -> None:
        if self._running:
            LOGGER.warning("Game already running")
            return
        asyncio.run(self._run_loop())

    def stop(self) -> None:
        if not self._running:
            LOGGER.warning("Stop ignored: game not running")
            return
        self._running = False


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    GameRunner().start()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
