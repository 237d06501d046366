"""Core domain layer — value types and board geometry, no Qt dependencies.

Quick start::

    from tapboard.core import square_to_pixel_rect, pixel_to_square

    rect = square_to_pixel_rect("e4", 80.0)
    assert pixel_to_square(rect.left + 1, rect.top + 1, (0, 0), 80.0) == "e4"
"""

from tapboard.core.enums import CastleKind, Color, Decoration, PieceKind
from tapboard.core.geometry import (
    PixelRect,
    cell_size_for,
    pixel_to_square,
    square_to_pixel_rect,
    square_to_xy,
    xy_to_square,
)
from tapboard.core.move import LastMove, LegalMove, MoveRequest, MoveResult
from tapboard.core.piece import Piece
from tapboard.core.types import (
    ALL_SQUARES,
    FILES,
    RANKS,
    Square,
    file_index,
    is_valid_square,
    make_square,
    parse_square,
    rank_index,
)

__all__ = [
    # Enums
    "CastleKind",
    "Color",
    "Decoration",
    "PieceKind",
    # Types / helpers
    "ALL_SQUARES",
    "FILES",
    "RANKS",
    "Square",
    "file_index",
    "is_valid_square",
    "make_square",
    "parse_square",
    "rank_index",
    # Geometry
    "PixelRect",
    "cell_size_for",
    "pixel_to_square",
    "square_to_pixel_rect",
    "square_to_xy",
    "xy_to_square",
    # Value objects
    "LastMove",
    "LegalMove",
    "MoveRequest",
    "MoveResult",
    "Piece",
]
