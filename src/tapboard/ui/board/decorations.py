"""DecorationManager — derived highlight markers on square items.

Every setter first sweeps its decoration off all squares, so state never
leaks across re-syncs and calls can be repeated in any order.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from functools import partial
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QTimer

from tapboard.core.enums import Decoration
from tapboard.core.move import LastMove
from tapboard.core.types import Square

if TYPE_CHECKING:
    from tapboard.game.session import GameSession
    from tapboard.ui.board.square_item import SquareItem


class DecorationManager:
    """Applies and clears decorations on a mapping of square items."""

    __slots__ = (
        "_squares",
        "_flash_timers",
        "_timer_parent",
        "flash_ms",
        "show_legal_targets",
    )

    def __init__(
        self,
        squares: Mapping[Square, SquareItem],
        *,
        flash_ms: int = 150,
        parent: QObject | None = None,
    ) -> None:
        self._squares = squares
        self._timer_parent = parent
        self._flash_timers: dict[Square, QTimer] = {}
        self.flash_ms = flash_ms
        self.show_legal_targets = True

    # ── Queries ──────────────────────────────────────────────────────────

    def squares_with(self, decoration: Decoration) -> set[Square]:
        return {
            sq for sq, item in self._squares.items() if item.has_decoration(decoration)
        }

    def is_flashing(self, square: Square) -> bool:
        timer = self._flash_timers.get(square)
        return timer is not None and timer.isActive()

    # ── Setters ──────────────────────────────────────────────────────────

    def set_selected(self, square: Square | None) -> None:
        self._sweep(Decoration.SELECTED)
        if square is not None:
            self._add(square, Decoration.SELECTED)

    def set_legal_targets(
        self,
        squares: Iterable[Square],
        captures: Iterable[Square] = (),
    ) -> None:
        """Mark *squares* as targets; *captures* are the occupied ones."""
        self._sweep(Decoration.LEGAL_TARGET)
        for item in self._squares.values():
            item.is_capture_target = False
        if not self.show_legal_targets:
            return
        capture_set = set(captures)
        for sq in squares:
            item = self._squares.get(sq)
            if item is None:
                continue
            item.is_capture_target = sq in capture_set
            item.add_decoration(Decoration.LEGAL_TARGET)

    def set_last_move(self, last_move: LastMove | None) -> None:
        self._sweep(Decoration.LAST_MOVE)
        if last_move is None:
            return
        for sq in last_move.squares:
            self._add(sq, Decoration.LAST_MOVE)

    def set_check_ring(self, square: Square | None) -> None:
        """Ring a king in check. Suppressed while a mate ring is shown."""
        self._sweep(Decoration.CHECK)
        if square is None or self.squares_with(Decoration.CHECKMATE):
            return
        self._add(square, Decoration.CHECK)

    def set_mate_ring(self, square: Square | None) -> None:
        self._sweep(Decoration.CHECKMATE)
        if square is None:
            return
        self._sweep(Decoration.CHECK)
        self._add(square, Decoration.CHECKMATE)

    def flash_illegal(self, square: Square) -> None:
        """Flash *square*; re-triggering restarts its timer."""
        item = self._squares.get(square)
        if item is None:
            return
        item.add_decoration(Decoration.ILLEGAL)
        timer = self._flash_timers.get(square)
        if timer is None:
            timer = QTimer(self._timer_parent)
            timer.setSingleShot(True)
            timer.timeout.connect(partial(self._end_flash, square))
            self._flash_timers[square] = timer
        timer.start(self.flash_ms)

    def clear_all(self) -> None:
        for timer in self._flash_timers.values():
            timer.stop()
        for decoration in Decoration:
            self._sweep(decoration)

    def refresh(self, session: GameSession) -> None:
        """Recompute every derived decoration from *session*."""
        selection = session.selection
        self.set_selected(selection.selected)
        engine = session.engine
        captures = [sq for sq in selection.targets if engine.piece_at(sq) is not None]
        self.set_legal_targets(selection.targets, captures)
        self.set_last_move(session.last_move)

        king = session.king_square(engine.side_to_move())
        if engine.is_in_checkmate():
            self.set_mate_ring(king)
            self.set_check_ring(None)
        elif engine.is_in_check():
            self.set_mate_ring(None)
            self.set_check_ring(king)
        else:
            self.set_mate_ring(None)
            self.set_check_ring(None)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _sweep(self, decoration: Decoration) -> None:
        for item in self._squares.values():
            item.remove_decoration(decoration)

    def _add(self, square: Square, decoration: Decoration) -> None:
        item = self._squares.get(square)
        if item is not None:
            item.add_decoration(decoration)

    def _end_flash(self, square: Square) -> None:
        item = self._squares.get(square)
        if item is not None:
            item.remove_decoration(Decoration.ILLEGAL)
