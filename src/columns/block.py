"""Block colours for falling pieces.

A block is the smallest unit on the board.  Each piece is a vertical stack of
blocks and every block carries one of three colours.  Blocks are plain values;
all positional information lives in :mod:`columns.grid`.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class Block(str, Enum):
    """Enumeration of the three block colours."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"


# Order used when turning a pseudo-random index into a colour.
COLOR_SEQUENCE: Tuple[Block, ...] = (Block.RED, Block.GREEN, Block.BLUE)

# Integer stored for each colour in rendered grids.  ``0`` is reserved for
# empty cells.
BLOCK_VALUES: Dict[Block, int] = {b: i + 1 for i, b in enumerate(COLOR_SEQUENCE)}


def block_for_index(index: int) -> Block:
    """Return the colour at ``index`` in :data:`COLOR_SEQUENCE`.

    Values are wrapped so any integer is accepted.
    """

    return COLOR_SEQUENCE[index % len(COLOR_SEQUENCE)]
