"""BoardView — QGraphicsView that sizes the board to the widget."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPainter, QResizeEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy, QWidget

from tapboard.core.geometry import cell_size_for
from tapboard.ui.board.board_scene import BoardScene


class BoardView(QGraphicsView):
    """Displays the board scene at 1:1 scale.

    On every resize the cell size is recomputed from the viewport and the
    scene re-lays itself out; nothing is scaled by the view transform.
    """

    def __init__(self, scene: BoardScene, parent: QWidget | None = None) -> None:
        self._scene = scene
        super().__init__(scene, parent)

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(240, 240)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def set_board_scene(self, scene: BoardScene) -> None:
        self._scene = scene
        self.setScene(scene)
        self.sync_geometry()

    def sync_geometry(self) -> None:
        """Recompute cell size from the viewport and relayout the scene."""
        viewport = self.viewport()
        if viewport is None:
            return
        side = min(viewport.width(), viewport.height())
        if side <= 0:
            return
        self._scene.relayout(cell_size_for(side))
        self.setSceneRect(self._scene.sceneRect())

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self.sync_geometry()
