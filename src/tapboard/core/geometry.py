"""Square ↔ pixel mapping.

Rank 1 is drawn at the bottom, so the vertical axis is inverted:
``top = (7 - rank) * cell``. Files map directly: ``left = file * cell``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from tapboard.core.types import (
    Square,
    file_index,
    make_square,
    parse_square,
    rank_index,
)


@dataclass(frozen=True, slots=True)
class PixelRect:
    """Axis-aligned pixel rectangle of a board cell."""

    left: float
    top: float
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return self.left + self.width / 2, self.top + self.height / 2


def cell_size_for(board_width: float) -> float:
    """Cell edge length for a board rendered *board_width* pixels wide."""
    return board_width / 8


def square_to_xy(sq: Square) -> tuple[int, int]:
    """``'e4'`` → ``(4, 3)``.

    Raises:
        ValueError: if *sq* is not a square name.
    """
    sq = parse_square(sq)
    return file_index(sq), rank_index(sq)


def xy_to_square(x: int, y: int) -> Square | None:
    """``(4, 3)`` → ``'e4'``; ``None`` outside the 8×8 grid."""
    if not (0 <= x < 8 and 0 <= y < 8):
        return None
    return make_square(x, y)


def square_to_pixel_rect(sq: Square, cell_size: float) -> PixelRect:
    """Pixel rectangle of *sq* for the given cell size."""
    f, r = square_to_xy(sq)
    return PixelRect(f * cell_size, (7 - r) * cell_size, cell_size, cell_size)


def pixel_to_square(
    x: float,
    y: float,
    origin: tuple[float, float],
    cell_size: float,
) -> Square | None:
    """Board square under pixel ``(x, y)``, or ``None`` when off the board."""
    if cell_size <= 0 or not (math.isfinite(x) and math.isfinite(y)):
        return None
    col = math.floor((x - origin[0]) / cell_size)
    row = math.floor((y - origin[1]) / cell_size)
    if not (0 <= col < 8 and 0 <= row < 8):
        return None
    return xy_to_square(col, 7 - row)
