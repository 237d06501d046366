"""MainWindow — hosts the board view and a status line."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar

from tapboard.game.session import GameSession
from tapboard.ui.board.board_scene import BoardScene
from tapboard.ui.board.board_view import BoardView
from tapboard.ui.settings import BoardSettings


class MainWindow(QMainWindow):
    """Top-level window: board, status bar, game and view menus.

    Args:
        session_factory: Builds a fresh :class:`GameSession` for each new game.
    """

    def __init__(
        self,
        session_factory: Callable[[], GameSession],
        settings: BoardSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Tapboard")
        self.setMinimumSize(360, 400)
        self.resize(640, 680)

        self._session_factory = session_factory
        self._scene = BoardScene(session_factory(), self, settings=settings)
        self._board_view = BoardView(self._scene)
        self.setCentralWidget(self._board_view)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel(self._scene.session.status())
        self._status.addWidget(self._status_label)
        self._scene.status_changed.connect(self._status_label.setText)

        self._setup_menu()

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        menu = menu_bar.addMenu("&Game")
        assert menu is not None

        self._act_new_game = QAction("&New game", self)
        self._act_new_game.setShortcut(QKeySequence("Ctrl+N"))
        self._act_new_game.triggered.connect(self.new_game)
        menu.addAction(self._act_new_game)

        self._act_undo = QAction("&Undo move", self)
        self._act_undo.setShortcuts(
            [QKeySequence("Ctrl+Z"), QKeySequence(Qt.Key.Key_Left)]
        )
        self._act_undo.triggered.connect(self.undo_move)
        menu.addAction(self._act_undo)

        view_menu = menu_bar.addMenu("&View")
        assert view_menu is not None

        self._act_show_legal = QAction("Show &legal moves", self)
        self._act_show_legal.setCheckable(True)
        self._act_show_legal.setChecked(self._scene.settings.show_legal_moves)
        self._act_show_legal.toggled.connect(self.set_show_legal_moves)
        view_menu.addAction(self._act_show_legal)

    def new_game(self) -> None:
        self._scene.set_session(self._session_factory())

    def undo_move(self) -> None:
        self._scene.undo()

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide target markers of the selected piece."""
        settings = replace(self._scene.settings, show_legal_moves=visible)
        self._scene.apply_settings(settings)
