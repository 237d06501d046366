"""Piece glyph helpers."""

from __future__ import annotations

from functools import lru_cache

from PyQt6.QtGui import QFont

from tapboard.core.enums import Color, PieceKind
from tapboard.core.piece import Piece

_GLYPHS: dict[tuple[Color, PieceKind], str] = {
    (Color.WHITE, PieceKind.PAWN): "♙",
    (Color.WHITE, PieceKind.KNIGHT): "♘",
    (Color.WHITE, PieceKind.BISHOP): "♗",
    (Color.WHITE, PieceKind.ROOK): "♖",
    (Color.WHITE, PieceKind.QUEEN): "♕",
    (Color.WHITE, PieceKind.KING): "♔",
    (Color.BLACK, PieceKind.PAWN): "♟",
    (Color.BLACK, PieceKind.KNIGHT): "♞",
    (Color.BLACK, PieceKind.BISHOP): "♝",
    (Color.BLACK, PieceKind.ROOK): "♜",
    (Color.BLACK, PieceKind.QUEEN): "♛",
    (Color.BLACK, PieceKind.KING): "♚",
}

_GLYPH_SCALE = 0.78


def piece_glyph(piece: Piece) -> str:
    """Unicode chess symbol for *piece*."""
    return _GLYPHS[(piece.color, piece.kind)]


@lru_cache(maxsize=32)
def glyph_font(cell_size: int) -> QFont:
    """Font sized so a glyph fills most of a *cell_size* square."""
    font = QFont("DejaVu Sans")
    font.setPixelSize(max(1, int(cell_size * _GLYPH_SCALE)))
    return font
