"""PieceItem — a chess piece glyph on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QColor, QCursor, QPainter
from PyQt6.QtWidgets import QGraphicsObject, QStyleOptionGraphicsItem, QWidget

from tapboard.core.geometry import PixelRect
from tapboard.core.piece import Piece
from tapboard.core.types import Square
from tapboard.ui.resources import glyph_font, piece_glyph


class PieceItem(QGraphicsObject):
    """A single chess piece on the board.

    ``square`` and ``piece`` mirror the engine at the last sync. Being a
    QGraphicsObject, its ``pos`` can be driven by QPropertyAnimation.
    """

    def __init__(
        self,
        piece: Piece,
        square: Square,
        cell_size: float,
        ink: QColor | None = None,
    ) -> None:
        super().__init__()
        self.piece = piece
        self.square = square
        self._cell_size = float(cell_size)
        self._glyph = piece_glyph(piece)
        self._ink = QColor(ink) if ink is not None else QColor(20, 20, 20)

        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)

    @property
    def glyph(self) -> str:
        return self._glyph

    @property
    def cell_size(self) -> float:
        return self._cell_size

    def set_piece(self, piece: Piece) -> None:
        """Swap the displayed piece (e.g. after promotion)."""
        self.piece = piece
        self._glyph = piece_glyph(piece)
        self.update()

    def set_cell_size(self, size: float) -> None:
        if size == self._cell_size:
            return
        self.prepareGeometryChange()
        self._cell_size = float(size)

    def place(self, rect: PixelRect) -> None:
        """Move to *rect* and adopt its size."""
        self.set_cell_size(rect.width)
        self.setPos(rect.left, rect.top)

    def boundingRect(self) -> QRectF:
        return QRectF(0.0, 0.0, self._cell_size, self._cell_size)

    def paint(
        self,
        painter: QPainter | None,
        option: QStyleOptionGraphicsItem | None,
        widget: QWidget | None = None,
    ) -> None:
        if painter is None:
            return
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        painter.setFont(glyph_font(max(1, int(self._cell_size))))
        painter.setPen(self._ink)
        painter.drawText(self.boundingRect(), Qt.AlignmentFlag.AlignCenter, self._glyph)
