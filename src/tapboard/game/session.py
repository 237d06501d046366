"""GameSession — the single owned controller object of a mounted board.

Holds the rules engine, the interaction selection and the last-move
history. The board scene receives it explicitly and replaces it wholesale
on "new game".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from tapboard.core.enums import Color, PieceKind
from tapboard.core.move import LastMove, MoveRequest, MoveResult
from tapboard.core.piece import Piece
from tapboard.core.types import ALL_SQUARES, Square
from tapboard.game.interfaces import IRulesEngine
from tapboard.game.status import engine_status

_LOGGER = logging.getLogger(__name__)


@dataclass
class SelectionState:
    """Interaction selection: origin square and its legal targets."""

    selected: Square | None = None
    targets: tuple[Square, ...] = ()

    @property
    def is_idle(self) -> bool:
        return self.selected is None

    def clear(self) -> None:
        self.selected = None
        self.targets = ()


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """Owns one game: engine, selection and last-move history.

    The engine is only mutated through :meth:`move`, :meth:`undo` and
    :meth:`reset` (single writer).
    """

    __slots__ = ("_engine", "_history", "selection")

    def __init__(self, engine: IRulesEngine) -> None:
        self._engine = engine
        self._history: list[LastMove] = []
        self.selection = SelectionState()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def engine(self) -> IRulesEngine:
        return self._engine

    @property
    def last_move(self) -> LastMove | None:
        return self._history[-1] if self._history else None

    @property
    def ply_count(self) -> int:
        """Moves played through this session and not undone."""
        return len(self._history)

    # ── Engine queries ───────────────────────────────────────────────────

    def occupied(self) -> dict[Square, Piece]:
        """Snapshot of every occupied square."""
        pieces: dict[Square, Piece] = {}
        for sq in ALL_SQUARES:
            piece = self._engine.piece_at(sq)
            if piece is not None:
                pieces[sq] = piece
        return pieces

    def king_square(self, color: Color) -> Square | None:
        king = Piece(color, PieceKind.KING)
        for sq in ALL_SQUARES:
            piece = self._engine.piece_at(sq)
            if piece == king:
                return sq
        return None

    def legal_targets(self, square: Square) -> tuple[Square, ...]:
        """Ordered, de-duplicated destinations of the piece on *square*."""
        moves = self._engine.legal_moves(square)
        return tuple(dict.fromkeys(m.to_sq for m in moves))

    def status(self) -> str:
        return engine_status(self._engine)

    # ── Mutations ────────────────────────────────────────────────────────

    def move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceKind = PieceKind.QUEEN,
    ) -> MoveResult | None:
        """Ask the engine to play *from_sq* → *to_sq*.

        Returns the engine's result, or ``None`` if it rejected the move.
        """
        result = self._engine.execute_move(MoveRequest(from_sq, to_sq, promotion))
        if result is None:
            _LOGGER.warning("Engine rejected %s-%s", from_sq, to_sq)
            return None

        self._history.append(LastMove.of(result))
        self.selection.clear()
        _LOGGER.debug("Move %d: %s (%s)", len(self._history), result.san, result)
        return result

    def undo(self) -> MoveResult | None:
        """Take back the last move and restore the previous last-move record."""
        result = self._engine.undo()
        self.selection.clear()
        if result is None:
            return None
        if self._history:
            self._history.pop()
        _LOGGER.debug("Undo %s, last move now %s", result, self.last_move)
        return result

    def reset(self) -> None:
        """Restore the initial position and forget history."""
        self._engine.reset()
        self._history.clear()
        self.selection.clear()
        _LOGGER.debug("Session reset")
