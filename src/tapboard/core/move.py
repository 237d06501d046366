"""Move value objects exchanged with the rules engine."""

from __future__ import annotations

from dataclasses import dataclass

from tapboard.core.enums import CastleKind, Color, PieceKind
from tapboard.core.types import Square, make_square

# Rook origin/destination file indices per castle kind.
_ROOK_FILES: dict[CastleKind, tuple[int, int]] = {
    CastleKind.KINGSIDE: (7, 5),
    CastleKind.QUEENSIDE: (0, 3),
}


@dataclass(frozen=True, slots=True)
class LegalMove:
    """A destination reachable from a queried origin square."""

    to_sq: Square
    castle: CastleKind = CastleKind.NONE
    promotion: PieceKind | None = None


@dataclass(frozen=True, slots=True)
class MoveRequest:
    """A move the board asks the engine to play."""

    from_sq: Square
    to_sq: Square
    promotion: PieceKind = PieceKind.QUEEN

    def __str__(self) -> str:
        return f"{self.from_sq}{self.to_sq}"


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Description of a move the engine executed (or undid)."""

    from_sq: Square
    to_sq: Square
    color: Color
    san: str | None = None
    castle: CastleKind = CastleKind.NONE

    @property
    def is_castle_kingside(self) -> bool:
        return self.castle == CastleKind.KINGSIDE

    @property
    def is_castle_queenside(self) -> bool:
        return self.castle == CastleKind.QUEENSIDE

    def rook_path(self) -> tuple[Square, Square] | None:
        """Fixed rook origin/destination for a castle, ``None`` otherwise."""
        files = _ROOK_FILES.get(self.castle)
        if files is None:
            return None
        rank = self.color.back_rank
        return make_square(files[0], rank), make_square(files[1], rank)

    def __str__(self) -> str:
        return self.san or f"{self.from_sq}{self.to_sq}"


@dataclass(frozen=True, slots=True)
class LastMove:
    """The from/to pair highlighted as the most recent move."""

    from_sq: Square
    to_sq: Square

    @classmethod
    def of(cls, result: MoveResult) -> LastMove:
        return cls(result.from_sq, result.to_sq)

    @property
    def squares(self) -> tuple[Square, Square]:
        return self.from_sq, self.to_sq
