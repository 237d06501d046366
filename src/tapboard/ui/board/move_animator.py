"""MoveAnimator — incremental piece relocation followed by a full sync."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import (
    QAbstractAnimation,
    QEasingCurve,
    QObject,
    QPointF,
    QPropertyAnimation,
    QTimer,
)

from tapboard.core.geometry import square_to_pixel_rect
from tapboard.core.move import LastMove, MoveResult
from tapboard.core.types import Square

if TYPE_CHECKING:
    from tapboard.ui.board.board_scene import BoardScene
    from tapboard.ui.board.piece_item import PieceItem


class MoveAnimator(QObject):
    """Relocates piece items for an executed move, then schedules a re-sync.

    The incremental patch only has to look right for ``resync_delay_ms``;
    the trailing full sync snaps everything to engine truth, which covers
    en-passant captures and promotions.
    """

    def __init__(
        self,
        scene: BoardScene,
        *,
        slide_ms: int = 100,
        resync_delay_ms: int = 120,
    ) -> None:
        super().__init__(scene)
        self._scene = scene
        self._active: dict[PieceItem, QPropertyAnimation] = {}
        self.slide_ms = slide_ms
        self.animate_moves = True

        self._resync_timer = QTimer(self)
        self._resync_timer.setSingleShot(True)
        self._resync_timer.setInterval(resync_delay_ms)
        self._resync_timer.timeout.connect(self._resync)

    @property
    def resync_delay_ms(self) -> int:
        return self._resync_timer.interval()

    @resync_delay_ms.setter
    def resync_delay_ms(self, value: int) -> None:
        self._resync_timer.setInterval(value)

    @property
    def is_sync_pending(self) -> bool:
        return self._resync_timer.isActive()

    @property
    def is_sliding(self) -> bool:
        return bool(self._active)

    def is_moving(self, item: PieceItem) -> bool:
        """Whether *item* is in the middle of a slide."""
        return item in self._active

    def animate(self, result: MoveResult) -> None:
        """Apply the visual delta of *result* and arm the trailing sync."""
        scene = self._scene
        pieces = scene.piece_items
        scene.decorations.set_last_move(LastMove.of(result))

        # ── Castling rook jumps straight to its square ───────────────────
        rook_path = result.rook_path()
        if rook_path is not None:
            rook_from, rook_to = rook_path
            rook = pieces.pop(rook_from, None)
            if rook is not None:
                rook.square = rook_to
                rook.place(square_to_pixel_rect(rook_to, scene.cell_size))
                pieces[rook_to] = rook

        # ── Captured piece leaves before the mover lands ─────────────────
        mover = pieces.pop(result.from_sq, None)
        captured = pieces.pop(result.to_sq, None)
        if captured is not None and captured is not mover:
            scene.removeItem(captured)

        # ── Mover ────────────────────────────────────────────────────────
        if mover is not None:
            landed = scene.session.engine.piece_at(result.to_sq)
            if landed is not None:
                mover.set_piece(landed)
            mover.square = result.to_sq
            pieces[result.to_sq] = mover
            self._slide(mover, result.to_sq)

        self._resync_timer.start()

    def flush(self) -> None:
        """Run a pending trailing sync right away."""
        if self._resync_timer.isActive():
            self._resync_timer.stop()
            self._resync()

    def finish_slides(self) -> None:
        """Stop running slides; items are left for the caller to place."""
        active, self._active = self._active, {}
        for anim in active.values():
            anim.stop()

    def _slide(self, item: PieceItem, square: Square) -> None:
        rect = square_to_pixel_rect(square, self._scene.cell_size)
        if not self.animate_moves or self.slide_ms <= 0:
            item.place(rect)
            return

        item.set_cell_size(rect.width)
        item.setZValue(2)
        anim = QPropertyAnimation(item, b"pos", self)
        anim.setDuration(self.slide_ms)
        anim.setStartValue(item.pos())
        anim.setEndValue(QPointF(rect.left, rect.top))
        anim.setEasingCurve(QEasingCurve.Type.OutCubic)

        def _on_finished() -> None:
            if self._active.get(item) is anim:
                del self._active[item]
            item.setZValue(1)

        previous = self._active.pop(item, None)
        if previous is not None:
            previous.stop()
        anim.finished.connect(_on_finished)
        self._active[item] = anim
        anim.start(QAbstractAnimation.DeletionPolicy.DeleteWhenStopped)

    def _resync(self) -> None:
        self.finish_slides()
        self._scene.render_all()
        self._scene.decorations.refresh(self._scene.session)
