"""Abstract interfaces for the game layer.

The board depends on ``IRulesEngine``, never on a concrete chess library.
Adapting a real library to it is the job of an integration shim such as
:class:`tapboard.game.python_chess_engine.PythonChessEngine`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tapboard.core.enums import Color
    from tapboard.core.move import LegalMove, MoveRequest, MoveResult
    from tapboard.core.piece import Piece
    from tapboard.core.types import Square


class EngineUnavailableError(RuntimeError):
    """Raised when the rules engine cannot be created at startup."""


class IRulesEngine(ABC):
    """Capability interface of a chess rules engine."""

    @abstractmethod
    def piece_at(self, square: Square) -> Piece | None:
        """Piece standing on *square*, if any."""

    @abstractmethod
    def side_to_move(self) -> Color: ...

    @abstractmethod
    def legal_moves(self, from_square: Square) -> list[LegalMove]:
        """Legal moves of the piece on *from_square* (captures included)."""

    @abstractmethod
    def execute_move(self, request: MoveRequest) -> MoveResult | None:
        """Play *request*. Returns ``None`` if the engine rejects it."""

    @abstractmethod
    def undo(self) -> MoveResult | None:
        """Take back the last move. ``None`` when there is nothing to undo."""

    @abstractmethod
    def reset(self) -> None:
        """Restore the initial position."""

    @abstractmethod
    def is_in_check(self) -> bool: ...

    @abstractmethod
    def is_in_checkmate(self) -> bool: ...

    @abstractmethod
    def is_in_draw(self) -> bool: ...
