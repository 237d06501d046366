"""SquareItem — one board cell plus its overlay marker."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QPainter, QPen
from PyQt6.QtWidgets import (
    QGraphicsItem,
    QGraphicsRectItem,
    QStyleOptionGraphicsItem,
    QWidget,
)

from tapboard.core.enums import Decoration
from tapboard.core.geometry import PixelRect, square_to_xy
from tapboard.core.types import Square
from tapboard.ui.styles.theme import BoardTheme

# Decorations painted as fills on the square itself (below pieces).
_FILL_DECORATIONS = (Decoration.LAST_MOVE, Decoration.SELECTED)


class SquareItem(QGraphicsRectItem):
    """A single board cell tagged with its square name.

    Carries geometry and decoration state only. Marker-style decorations
    (targets, rings, flashes) are drawn by :attr:`marker`, which sits above
    the piece layer so they stay visible on occupied squares.
    """

    def __init__(self, square: Square, theme: BoardTheme) -> None:
        super().__init__()
        self.square = square
        f, r = square_to_xy(square)
        self.shade = (f + r) % 2
        self.is_capture_target = False
        self._theme = theme
        self._decorations: set[Decoration] = set()

        self.setPen(QPen(Qt.PenStyle.NoPen))
        self.setBrush(QBrush(theme.square_color(self.shade)))
        self.setZValue(0)
        self.setToolTip(square)

        self.marker = SquareMarkerItem(self)

    # ── Geometry ─────────────────────────────────────────────────────────

    def set_geometry(self, rect: PixelRect) -> None:
        self.setRect(rect.left, rect.top, rect.width, rect.height)
        self.marker.set_geometry(self.rect())

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self.setBrush(QBrush(theme.square_color(self.shade)))
        self.marker.update()

    @property
    def theme(self) -> BoardTheme:
        return self._theme

    # ── Decorations ──────────────────────────────────────────────────────

    @property
    def decorations(self) -> frozenset[Decoration]:
        return frozenset(self._decorations)

    def has_decoration(self, decoration: Decoration) -> bool:
        return decoration in self._decorations

    def add_decoration(self, decoration: Decoration) -> None:
        if decoration not in self._decorations:
            self._decorations.add(decoration)
            self._repaint(decoration)

    def remove_decoration(self, decoration: Decoration) -> None:
        if decoration in self._decorations:
            self._decorations.discard(decoration)
            self._repaint(decoration)

    def _repaint(self, decoration: Decoration) -> None:
        if decoration in _FILL_DECORATIONS:
            self.update()
        else:
            self.marker.update()

    def paint(
        self,
        painter: QPainter | None,
        option: QStyleOptionGraphicsItem | None,
        widget: QWidget | None = None,
    ) -> None:
        super().paint(painter, option, widget)
        if painter is None:
            return
        rect = self.rect()
        if Decoration.LAST_MOVE in self._decorations:
            painter.fillRect(rect, self._theme.last_move)
        if Decoration.SELECTED in self._decorations:
            painter.fillRect(rect, self._theme.selected)


class SquareMarkerItem(QGraphicsItem):
    """Overlay for target dots, capture rings, check rings and flashes.

    Does not accept mouse buttons, so clicks reach the piece or square
    underneath.
    """

    def __init__(self, owner: SquareItem) -> None:
        super().__init__()
        self._owner = owner
        self._rect = QRectF()
        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
        self.setZValue(3)

    def set_geometry(self, rect: QRectF) -> None:
        self.prepareGeometryChange()
        self._rect = QRectF(rect)

    def boundingRect(self) -> QRectF:
        return QRectF(self._rect)

    def paint(
        self,
        painter: QPainter | None,
        option: QStyleOptionGraphicsItem | None,
        widget: QWidget | None = None,
    ) -> None:
        owner = self._owner
        if painter is None or not owner.decorations:
            return
        theme = owner.theme
        rect = self._rect
        cell = rect.width()
        center = rect.center()
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        if owner.has_decoration(Decoration.ILLEGAL):
            painter.fillRect(rect, theme.illegal)

        if owner.has_decoration(Decoration.CHECKMATE):
            self._ring(painter, center, cell * 0.46, cell * 0.08, theme.checkmate)
        elif owner.has_decoration(Decoration.CHECK):
            self._ring(painter, center, cell * 0.46, cell * 0.05, theme.check)

        if owner.has_decoration(Decoration.LEGAL_TARGET):
            if owner.is_capture_target:
                self._ring(
                    painter, center, cell * 0.44, cell * 0.07, theme.legal_target
                )
            else:
                radius = cell * 0.15
                painter.setPen(QPen(Qt.PenStyle.NoPen))
                painter.setBrush(QBrush(theme.legal_target))
                painter.drawEllipse(center, radius, radius)

    @staticmethod
    def _ring(
        painter: QPainter,
        center: QPointF,
        radius: float,
        width: float,
        color: QColor,
    ) -> None:
        pen = QPen(color)
        pen.setWidthF(width)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawEllipse(center, radius, radius)
