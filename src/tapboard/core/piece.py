"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from tapboard.core.enums import Color, PieceKind

_KIND_LETTERS: dict[PieceKind, str] = {
    PieceKind.PAWN: "p",
    PieceKind.KNIGHT: "n",
    PieceKind.BISHOP: "b",
    PieceKind.ROOK: "r",
    PieceKind.QUEEN: "q",
    PieceKind.KING: "k",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable (color, kind) pair."""

    color: Color
    kind: PieceKind

    @property
    def symbol(self) -> str:
        """FEN letter: uppercase for white, lowercase for black."""
        letter = _KIND_LETTERS[self.kind]
        return letter.upper() if self.color == Color.WHITE else letter

    def __str__(self) -> str:
        return self.symbol
