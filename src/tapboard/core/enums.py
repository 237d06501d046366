"""Core enumerations for the board layer."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def display_name(self) -> str:
        """Capitalised name used in status text, e.g. ``"White"``."""
        return self.name.capitalize()

    @property
    def back_rank(self) -> int:
        """Rank index of this side's home row."""
        return 0 if self is Color.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastleKind(IntEnum):
    """Castling classification of a move."""

    NONE = 0
    KINGSIDE = 1
    QUEENSIDE = 2


class Decoration(StrEnum):
    """Highlight markers layered on square nodes."""

    SELECTED = "selected"
    LEGAL_TARGET = "legal-target"
    LAST_MOVE = "last-move"
    CHECK = "check"
    CHECKMATE = "checkmate"
    ILLEGAL = "illegal"
