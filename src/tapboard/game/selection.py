"""Selection/move state machine driven by resolved click squares.

The machine is Qt-free: it talks to the engine through the session and
reports visual effects to a :class:`SelectionView`. Every click re-reads the
engine, so a stale visual tree can never make an illegal move go through.
"""

from __future__ import annotations

from enum import IntEnum, auto
from typing import Protocol

from tapboard.core.enums import PieceKind
from tapboard.core.move import MoveResult
from tapboard.core.types import Square
from tapboard.game.session import GameSession
from tapboard.game.status import STATUS_ILLEGAL_MOVE, STATUS_NOT_YOUR_TURN


class SelectionPhase(IntEnum):
    IDLE = auto()
    PIECE_SELECTED = auto()


class ClickOutcome(IntEnum):
    """What a click did."""

    IGNORED = auto()  # empty square while idle
    WRONG_TURN = auto()  # opponent piece while idle
    SELECTED = auto()
    CANCELLED = auto()  # re-clicked the selected square
    ILLEGAL = auto()  # not a legal target; selection kept
    REJECTED = auto()  # engine refused a listed target; selection kept
    MOVED = auto()


class SelectionView(Protocol):
    """Visual side effects requested by the state machine."""

    def show_selection(self, square: Square, targets: tuple[Square, ...]) -> None: ...

    def clear_selection(self) -> None: ...

    def flash_illegal(self, square: Square) -> None: ...

    def show_status(self, text: str) -> None: ...

    def move_executed(self, result: MoveResult) -> None: ...


class SelectionMachine:
    """Turns clicks into selection, cancellation or move attempts."""

    __slots__ = ("_session", "_view", "promotion")

    def __init__(self, session: GameSession, view: SelectionView) -> None:
        self._session = session
        self._view = view
        self.promotion = PieceKind.QUEEN

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def phase(self) -> SelectionPhase:
        if self._session.selection.is_idle:
            return SelectionPhase.IDLE
        return SelectionPhase.PIECE_SELECTED

    @property
    def selected(self) -> Square | None:
        return self._session.selection.selected

    def cancel(self) -> None:
        """Drop any selection and its decorations."""
        self._session.selection.clear()
        self._view.clear_selection()

    def click(self, square: Square) -> ClickOutcome:
        selected = self._session.selection.selected
        if selected is not None and not self._owns(selected):
            # The engine changed under a pending selection.
            self.cancel()
            selected = None

        if selected is None:
            return self._click_idle(square)
        return self._click_selected(selected, square)

    # ── Transitions ──────────────────────────────────────────────────────

    def _click_idle(self, square: Square) -> ClickOutcome:
        engine = self._session.engine
        piece = engine.piece_at(square)
        if piece is None:
            return ClickOutcome.IGNORED
        if piece.color != engine.side_to_move():
            self._view.flash_illegal(square)
            self._view.show_status(STATUS_NOT_YOUR_TURN)
            return ClickOutcome.WRONG_TURN

        selection = self._session.selection
        selection.selected = square
        selection.targets = self._session.legal_targets(square)
        self._view.show_selection(square, selection.targets)
        return ClickOutcome.SELECTED

    def _click_selected(self, selected: Square, square: Square) -> ClickOutcome:
        if square == selected:
            self.cancel()
            return ClickOutcome.CANCELLED

        selection = self._session.selection
        selection.targets = self._session.legal_targets(selected)
        if square not in selection.targets:
            self._view.flash_illegal(square)
            self._view.show_status(STATUS_ILLEGAL_MOVE)
            return ClickOutcome.ILLEGAL

        result = self._session.move(selected, square, self.promotion)
        if result is None:
            self._view.flash_illegal(square)
            self._view.show_status(STATUS_ILLEGAL_MOVE)
            return ClickOutcome.REJECTED

        self._view.clear_selection()
        self._view.move_executed(result)
        return ClickOutcome.MOVED

    def _owns(self, square: Square) -> bool:
        engine = self._session.engine
        piece = engine.piece_at(square)
        return piece is not None and piece.color == engine.side_to_move()
