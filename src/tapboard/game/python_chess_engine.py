"""IRulesEngine adapter backed by python-chess."""

from __future__ import annotations

import logging

import chess

from tapboard.core.enums import CastleKind, Color, PieceKind
from tapboard.core.move import LegalMove, MoveRequest, MoveResult
from tapboard.core.piece import Piece
from tapboard.core.types import Square
from tapboard.game.interfaces import IRulesEngine

_LOGGER = logging.getLogger(__name__)


def _color(value: chess.Color) -> Color:
    return Color.WHITE if value == chess.WHITE else Color.BLACK


class PythonChessEngine(IRulesEngine):
    """Rules engine wrapping a :class:`chess.Board`.

    Args:
        fen: Optional starting position. Defaults to the standard setup.
    """

    __slots__ = ("_board", "_start_fen")

    def __init__(self, fen: str | None = None) -> None:
        self._start_fen = chess.STARTING_FEN if fen is None else fen
        self._board = chess.Board(self._start_fen)

    # ── IRulesEngine impl ────────────────────────────────────────────────

    def piece_at(self, square: Square) -> Piece | None:
        piece = self._board.piece_at(chess.parse_square(square))
        if piece is None:
            return None
        return Piece(_color(piece.color), PieceKind(piece.piece_type))

    def side_to_move(self) -> Color:
        return _color(self._board.turn)

    def legal_moves(self, from_square: Square) -> list[LegalMove]:
        origin = chess.parse_square(from_square)
        moves: list[LegalMove] = []
        for move in self._board.legal_moves:
            if move.from_square != origin:
                continue
            moves.append(
                LegalMove(
                    to_sq=chess.square_name(move.to_square),
                    castle=self._castle_kind(move),
                    promotion=(
                        PieceKind(move.promotion) if move.promotion else None
                    ),
                )
            )
        return moves

    def execute_move(self, request: MoveRequest) -> MoveResult | None:
        move = self._resolve(request)
        if move is None:
            _LOGGER.debug("python-chess rejected %s", request)
            return None
        result = self._describe(move)
        self._board.push(move)
        return result

    def undo(self) -> MoveResult | None:
        if not self._board.move_stack:
            return None
        move = self._board.pop()
        return self._describe(move)

    def reset(self) -> None:
        """Return to the position this engine was created with."""
        self._board.set_fen(self._start_fen)

    def is_in_check(self) -> bool:
        return self._board.is_check()

    def is_in_checkmate(self) -> bool:
        return self._board.is_checkmate()

    def is_in_draw(self) -> bool:
        board = self._board
        return (
            board.is_stalemate()
            or board.is_insufficient_material()
            or board.can_claim_fifty_moves()
            or board.is_repetition(3)
        )

    # ── Internal helpers ─────────────────────────────────────────────────

    def _resolve(self, request: MoveRequest) -> chess.Move | None:
        """Map *request* to a legal python-chess move.

        The requested promotion only applies when the move actually
        promotes; otherwise the plain move is used.
        """
        try:
            from_sq = chess.parse_square(request.from_sq)
            to_sq = chess.parse_square(request.to_sq)
        except ValueError:
            return None

        promoted = chess.Move(from_sq, to_sq, promotion=int(request.promotion))
        if self._board.is_legal(promoted):
            return promoted
        plain = chess.Move(from_sq, to_sq)
        if self._board.is_legal(plain):
            return plain
        return None

    def _castle_kind(self, move: chess.Move) -> CastleKind:
        if self._board.is_kingside_castling(move):
            return CastleKind.KINGSIDE
        if self._board.is_queenside_castling(move):
            return CastleKind.QUEENSIDE
        return CastleKind.NONE

    def _describe(self, move: chess.Move) -> MoveResult:
        """Build a MoveResult for *move* in the current (pre-move) position."""
        return MoveResult(
            from_sq=chess.square_name(move.from_square),
            to_sq=chess.square_name(move.to_square),
            color=_color(self._board.turn),
            san=self._board.san(move),
            castle=self._castle_kind(move),
        )

