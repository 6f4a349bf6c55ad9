"""Simple ASCII demo for the Columns engine.

Run with: `python -m columns`

Starts a game and feeds the reducer a synthetic tick every ``--tick-ms``
milliseconds, printing a frame whenever the board changes.  The run stops
after ``--ticks`` ticks or on game over.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from . import GameOver, SeededColors, StartGame, Tick, initial_model, render_text, snapshot, update
from .grid import HEIGHT, WIDTH
from .pieces import timestamp_colors


LOGGER = logging.getLogger(__name__)


def run(
    ticks: int,
    tick_ms: int,
    *,
    width: int = WIDTH,
    height: int = HEIGHT,
    seed: Optional[int] = None,
) -> List[str]:
    """Play ``ticks`` ticks and return the distinct frames produced."""

    colors = timestamp_colors if seed is None else SeededColors(seed)
    model = update(initial_model(width, height), StartGame())
    frames: List[str] = []
    for i in range(1, ticks + 1):
        model = update(model, Tick(i * tick_ms), colors=colors)
        frame = render_text(snapshot(model))
        if not frames or frames[-1] != frame:
            frames.append(frame)
        if isinstance(model.phase, GameOver):
            LOGGER.info("Game over after %d ticks", i)
            break
    return frames


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--width", type=int, default=WIDTH, help="Board width in cells.")
    parser.add_argument("--height", type=int, default=HEIGHT, help="Board height in cells.")
    parser.add_argument("--ticks", type=int, default=200, help="Number of ticks to simulate.")
    parser.add_argument("--tick-ms", type=int, default=250, help="Milliseconds between ticks.")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Use seeded random colours instead of timestamp-derived ones.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    frames = run(args.ticks, args.tick_ms, width=args.width, height=args.height, seed=args.seed)
    for frame in frames:
        print(frame)
        print()


if __name__ == "__main__":
    main()
