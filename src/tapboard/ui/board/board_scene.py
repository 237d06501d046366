"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, pyqtSignal
from PyQt6.QtGui import QBrush, QFont
from PyQt6.QtWidgets import (
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from tapboard.core.geometry import pixel_to_square, square_to_pixel_rect, square_to_xy
from tapboard.core.move import MoveResult
from tapboard.core.types import ALL_SQUARES, Square, is_valid_square
from tapboard.game.selection import SelectionMachine
from tapboard.game.session import GameSession
from tapboard.ui.board.decorations import DecorationManager
from tapboard.ui.board.move_animator import MoveAnimator
from tapboard.ui.board.piece_item import PieceItem
from tapboard.ui.board.square_item import SquareItem
from tapboard.ui.settings import BoardSettings
from tapboard.ui.styles.theme import BoardTheme, theme_named


class BoardScene(QGraphicsScene):
    """Renders squares, pieces and decorations for one game session.

    The session's engine is the only source of truth: every visual change
    is either a full re-derivation (:meth:`render_all`) or an incremental
    patch that is followed by one.

    Signals:
        status_changed(str): Status line text for the page chrome.
        move_made(MoveResult): Emitted after a click completes a move.
    """

    status_changed = pyqtSignal(str)
    move_made = pyqtSignal(object)

    DEFAULT_CELL = 80.0  # px per square until the view reports a size

    def __init__(
        self,
        session: GameSession,
        parent: QObject | None = None,
        *,
        settings: BoardSettings | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings if settings is not None else BoardSettings()
        self._theme = theme_named(self._settings.theme)
        self._cell_size = self.DEFAULT_CELL
        self._interactive = True

        # Visual layers
        self._square_items: dict[Square, SquareItem] = {}
        self._piece_items: dict[Square, PieceItem] = {}
        self._coord_items: list[tuple[Square, QGraphicsSimpleTextItem]] = []

        self._decorations = DecorationManager(
            self._square_items, flash_ms=self._settings.flash_ms, parent=self
        )
        self._animator = MoveAnimator(
            self,
            slide_ms=self._settings.slide_ms,
            resync_delay_ms=self._settings.resync_delay_ms,
        )
        self._session = session
        self._machine = SelectionMachine(session, self)

        self.apply_settings(self._settings)
        self.build_squares(self._cell_size)
        self.render_all()
        self._decorations.refresh(session)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def machine(self) -> SelectionMachine:
        return self._machine

    @property
    def decorations(self) -> DecorationManager:
        return self._decorations

    @property
    def animator(self) -> MoveAnimator:
        return self._animator

    @property
    def cell_size(self) -> float:
        return self._cell_size

    @property
    def square_items(self) -> dict[Square, SquareItem]:
        return self._square_items

    @property
    def piece_items(self) -> dict[Square, PieceItem]:
        return self._piece_items

    @property
    def theme(self) -> BoardTheme:
        return self._theme

    @property
    def settings(self) -> BoardSettings:
        return self._settings

    # ── Public API ───────────────────────────────────────────────────────

    def set_session(self, session: GameSession) -> None:
        """Replace the game wholesale (new game, loaded position)."""
        self._decorations.clear_all()
        self._session = session
        self._machine = SelectionMachine(session, self)
        self.rerender_everything()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable click handling."""
        self._interactive = interactive

    def apply_settings(self, settings: BoardSettings) -> None:
        self._settings = settings
        self.set_theme(theme_named(settings.theme))
        self._decorations.show_legal_targets = settings.show_legal_moves
        self._decorations.flash_ms = settings.flash_ms
        self._animator.animate_moves = settings.animate_moves
        self._animator.slide_ms = settings.slide_ms
        self._animator.resync_delay_ms = settings.resync_delay_ms
        for _sq, label in self._coord_items:
            label.setVisible(settings.show_coordinates)
        self._decorations.refresh(self._session)

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        for item in self._square_items.values():
            item.set_theme(theme)
        for sq, label in self._coord_items:
            label.setBrush(QBrush(theme.coord_color(self._square_items[sq].shade)))
        self.render_all()

    def rerender_everything(self) -> None:
        """Full geometry + piece + decoration resync from the session."""
        self._animator.finish_slides()
        self.build_squares(self._cell_size)
        self.render_all()
        self._decorations.refresh(self._session)
        self.status_changed.emit(self._session.status())

    def undo(self) -> MoveResult | None:
        """Take back the last move and resync."""
        result = self._session.undo()
        self._after_external_change()
        return result

    def reset(self) -> None:
        """Restore the initial position and resync."""
        self._session.reset()
        self._after_external_change()

    # ── Board surface ────────────────────────────────────────────────────

    def build_squares(self, cell_size: float) -> None:
        """Create the 64 square items, or reposition them if they exist."""
        if len(self._square_items) != 64:
            self._create_squares()
        for sq, item in self._square_items.items():
            item.set_geometry(square_to_pixel_rect(sq, cell_size))
        self._place_coordinates(cell_size)
        self.setSceneRect(0, 0, 8 * cell_size, 8 * cell_size)

    def _create_squares(self) -> None:
        for item in self._square_items.values():
            self.removeItem(item.marker)
            self.removeItem(item)
        self._square_items.clear()
        for _sq, label in self._coord_items:
            self.removeItem(label)
        self._coord_items.clear()

        for sq in ALL_SQUARES:
            item = SquareItem(sq, self._theme)
            self.addItem(item)
            self.addItem(item.marker)
            self._square_items[sq] = item

            f, r = square_to_xy(sq)
            # Rank numbers on the a-file, file letters on rank 1
            for text, wanted in ((sq[1], f == 0), (sq[0], r == 0)):
                if not wanted:
                    continue
                label = QGraphicsSimpleTextItem(text)
                label.setBrush(QBrush(self._theme.coord_color(item.shade)))
                label.setZValue(0.3)
                label.setVisible(self._settings.show_coordinates)
                self.addItem(label)
                self._coord_items.append((sq, label))

    def _place_coordinates(self, cell_size: float) -> None:
        font = QFont()
        font.setPixelSize(max(9, int(cell_size // 7)))
        for sq, label in self._coord_items:
            label.setFont(font)
            rect = square_to_pixel_rect(sq, cell_size)
            if label.text().isdigit():
                label.setPos(rect.left + 2, rect.top + 1)
            else:
                bounds = label.boundingRect()
                label.setPos(
                    rect.left + rect.width - bounds.width() - 3,
                    rect.top + rect.height - bounds.height() - 1,
                )

    # ── Piece synchronisation ────────────────────────────────────────────

    def render_all(self) -> None:
        """Re-create all piece items from the engine."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        for sq, piece in self._session.occupied().items():
            item = PieceItem(piece, sq, self._cell_size, self._theme.piece_ink)
            item.place(square_to_pixel_rect(sq, self._cell_size))
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Resize ───────────────────────────────────────────────────────────

    def relayout(self, cell_size: float) -> None:
        """Reposition squares, markers and pieces for a new cell size.

        Leaves selection, last move and engine state untouched.
        """
        if cell_size <= 0:
            return
        self._animator.finish_slides()
        self._cell_size = cell_size
        self.build_squares(cell_size)
        for sq, item in self._piece_items.items():
            item.setZValue(1)
            item.place(square_to_pixel_rect(sq, cell_size))

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or event is None:
            return super().mousePressEvent(event)

        sq = self.resolve_square(event.scenePos())
        if sq is None:
            return super().mousePressEvent(event)

        self._machine.click(sq)
        event.accept()

    def resolve_square(self, pos: QPointF) -> Square | None:
        """Square under scene position *pos*.

        Uses the square tag of the topmost tagged item, falling back to
        pixel geometry. Pieces still sliding are skipped, since their tag
        already names the destination.
        """
        for item in self.items(pos):
            if isinstance(item, PieceItem) and self._animator.is_moving(item):
                continue
            sq = getattr(item, "square", None)
            if is_valid_square(sq):
                return sq
        origin = self.sceneRect().topLeft()
        return pixel_to_square(
            pos.x(), pos.y(), (origin.x(), origin.y()), self._cell_size
        )

    # ── SelectionView ────────────────────────────────────────────────────

    def show_selection(self, square: Square, targets: tuple[Square, ...]) -> None:
        engine = self._session.engine
        captures = [sq for sq in targets if engine.piece_at(sq) is not None]
        self._decorations.set_selected(square)
        self._decorations.set_legal_targets(targets, captures)

    def clear_selection(self) -> None:
        self._decorations.set_selected(None)
        self._decorations.set_legal_targets(())

    def flash_illegal(self, square: Square) -> None:
        self._decorations.flash_illegal(square)

    def show_status(self, text: str) -> None:
        self.status_changed.emit(text)

    def move_executed(self, result: MoveResult) -> None:
        self._animator.animate(result)
        self._decorations.refresh(self._session)
        self.status_changed.emit(self._session.status())
        self.move_made.emit(result)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _after_external_change(self) -> None:
        # A trailing sync still pending re-reads the engine when it fires.
        self._animator.finish_slides()
        self.render_all()
        self._decorations.refresh(self._session)
        self.status_changed.emit(self._session.status())
