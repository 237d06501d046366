"""Tests for BoardScene surface building, piece sync and click handling."""

from __future__ import annotations

import pytest
from PyQt6.QtCore import QEvent, QPointF
from PyQt6.QtWidgets import QGraphicsSceneMouseEvent

from tapboard.core.enums import Color, Decoration
from tapboard.core.geometry import square_to_pixel_rect
from tapboard.core.move import LastMove, MoveRequest, MoveResult
from tapboard.core.types import ALL_SQUARES
from tapboard.game.python_chess_engine import PythonChessEngine
from tapboard.game.selection import ClickOutcome
from tapboard.game.session import GameSession
from tapboard.ui.board.board_scene import BoardScene
from tapboard.ui.board.piece_item import PieceItem
from tapboard.ui.board.square_item import SquareItem
from tapboard.ui.settings import BoardSettings

SCHOLARS_MATE = [
    ("e2", "e4"),
    ("e7", "e5"),
    ("f1", "c4"),
    ("b8", "c6"),
    ("d1", "h5"),
    ("g8", "f6"),
    ("h5", "f7"),
]


def _static_scene(session: GameSession) -> BoardScene:
    return BoardScene(session, settings=BoardSettings(animate_moves=False))


def _play(scene: BoardScene, moves: list[tuple[str, str]]) -> None:
    for from_sq, to_sq in moves:
        assert scene.machine.click(from_sq) == ClickOutcome.SELECTED
        assert scene.machine.click(to_sq) == ClickOutcome.MOVED
    scene.animator.flush()


def _assert_in_sync(scene: BoardScene) -> None:
    occupied = scene.session.occupied()
    assert set(scene.piece_items) == set(occupied)
    for sq, item in scene.piece_items.items():
        assert item.square == sq
        assert item.piece == occupied[sq]
        rect = square_to_pixel_rect(sq, scene.cell_size)
        assert (item.pos().x(), item.pos().y()) == (rect.left, rect.top)
    on_scene = [i for i in scene.items() if isinstance(i, PieceItem)]
    assert len(on_scene) == len(occupied)


class TestSurface:
    def test_builds_64_tagged_squares(self, session: GameSession) -> None:
        scene = BoardScene(session)
        assert set(scene.square_items) == set(ALL_SQUARES)
        on_scene = [i for i in scene.items() if isinstance(i, SquareItem)]
        assert len(on_scene) == 64

    def test_square_shades(self, session: GameSession) -> None:
        scene = BoardScene(session)
        assert scene.square_items["a1"].shade == 0
        assert scene.square_items["h1"].shade == 1
        assert scene.square_items["h8"].shade == 0

    def test_rebuild_repositions_and_keeps_decorations(
        self, session: GameSession
    ) -> None:
        scene = BoardScene(session)
        before = dict(scene.square_items)
        scene.decorations.set_selected("c3")

        scene.build_squares(40)

        assert all(scene.square_items[sq] is item for sq, item in before.items())
        assert scene.square_items["c3"].has_decoration(Decoration.SELECTED)
        assert scene.square_items["a1"].rect().top() == 280

    def test_coordinate_labels_follow_settings(self, session: GameSession) -> None:
        scene = BoardScene(session, settings=BoardSettings(show_coordinates=False))
        assert scene._coord_items
        assert all(not label.isVisible() for _sq, label in scene._coord_items)

        scene.apply_settings(BoardSettings(show_coordinates=True))
        assert all(label.isVisible() for _sq, label in scene._coord_items)


class TestRenderAll:
    def test_start_position(self, session: GameSession) -> None:
        scene = BoardScene(session)
        assert len(scene.piece_items) == 32
        _assert_in_sync(scene)

    def test_matches_engine_after_external_change(self, session: GameSession) -> None:
        scene = BoardScene(session)
        # Bypass the session so the scene does not hear about the move.
        session.engine.execute_move(MoveRequest("g1", "f3"))
        scene.render_all()
        assert "f3" in scene.piece_items and "g1" not in scene.piece_items
        _assert_in_sync(scene)

    def test_is_idempotent(self, session: GameSession) -> None:
        scene = BoardScene(session)
        scene.render_all()
        scene.render_all()
        _assert_in_sync(scene)


class TestResolveSquare:
    def test_structural_lookup(self, session: GameSession) -> None:
        scene = BoardScene(session)
        assert scene.resolve_square(QPointF(1, 1)) == "a8"
        cx, cy = square_to_pixel_rect("e4", scene.cell_size).center
        assert scene.resolve_square(QPointF(cx, cy)) == "e4"

    def test_prefers_item_tag_over_geometry(self, session: GameSession) -> None:
        scene = BoardScene(session)
        item = scene.piece_items["e2"]
        item.place(square_to_pixel_rect("e4", scene.cell_size))
        cx, cy = square_to_pixel_rect("e4", scene.cell_size).center
        assert scene.resolve_square(QPointF(cx, cy)) == "e2"

    def test_falls_back_to_geometry(
        self, session: GameSession, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        scene = BoardScene(session)
        monkeypatch.setattr(scene, "items", lambda *_args: [])
        cx, cy = square_to_pixel_rect("c6", scene.cell_size).center
        assert scene.resolve_square(QPointF(cx, cy)) == "c6"

    def test_outside_board_is_none(self, session: GameSession) -> None:
        scene = BoardScene(session)
        assert scene.resolve_square(QPointF(-5, -5)) is None
        assert scene.resolve_square(QPointF(9 * scene.cell_size, 10)) is None


class TestMouse:
    @staticmethod
    def _press(scene: BoardScene, square: str) -> None:
        event = QGraphicsSceneMouseEvent(QEvent.Type.GraphicsSceneMousePress)
        cx, cy = square_to_pixel_rect(square, scene.cell_size).center
        event.setScenePos(QPointF(cx, cy))
        scene.mousePressEvent(event)

    def test_click_selects(self, session: GameSession) -> None:
        scene = BoardScene(session)
        self._press(scene, "e2")
        assert scene.machine.selected == "e2"

    def test_non_interactive_ignores_clicks(self, session: GameSession) -> None:
        scene = BoardScene(session)
        scene.set_interactive(False)
        self._press(scene, "e2")
        assert scene.machine.selected is None


class TestInteraction:
    def test_selection_decorates_and_reclick_clears(
        self, session: GameSession
    ) -> None:
        scene = BoardScene(session)
        scene.machine.click("e2")
        deco = scene.decorations
        assert deco.squares_with(Decoration.SELECTED) == {"e2"}
        assert {"e3", "e4"} <= deco.squares_with(Decoration.LEGAL_TARGET)
        assert "e5" not in deco.squares_with(Decoration.LEGAL_TARGET)

        scene.machine.click("e2")
        assert deco.squares_with(Decoration.SELECTED) == set()
        assert deco.squares_with(Decoration.LEGAL_TARGET) == set()

    def test_status_messages(self, session: GameSession) -> None:
        scene = BoardScene(session)
        statuses: list[str] = []
        scene.status_changed.connect(statuses.append)

        scene.machine.click("e7")
        scene.machine.click("e2")
        scene.machine.click("e5")
        scene.machine.click("e4")

        assert statuses == ["Not your turn.", "Illegal move.", "Black to move."]

    def test_move_scenario_e2_e4(self, session: GameSession) -> None:
        scene = _static_scene(session)
        made: list[MoveResult] = []
        scene.move_made.connect(made.append)

        _play(scene, [("e2", "e4")])

        assert session.last_move == LastMove("e2", "e4")
        assert session.engine.side_to_move() == Color.BLACK
        assert scene.decorations.squares_with(Decoration.LAST_MOVE) == {"e2", "e4"}
        assert [(m.from_sq, m.to_sq) for m in made] == [("e2", "e4")]
        _assert_in_sync(scene)

    def test_capture_removes_captured_node(self, session: GameSession) -> None:
        scene = _static_scene(session)
        _play(scene, [("e2", "e4"), ("d7", "d5")])
        scene.machine.click("e4")
        assert "d5" in scene.decorations.squares_with(Decoration.LEGAL_TARGET)
        assert scene.square_items["d5"].is_capture_target
        scene.machine.click("d5")

        # Before the trailing sync: exactly one node on d5, none on e4.
        assert scene.piece_items["d5"].piece.color == Color.WHITE
        assert "e4" not in scene.piece_items
        assert len([i for i in scene.items() if isinstance(i, PieceItem)]) == 31
        scene.animator.flush()
        _assert_in_sync(scene)

    def test_checkmate_scenario(self, session: GameSession) -> None:
        scene = _static_scene(session)
        _play(scene, SCHOLARS_MATE)

        deco = scene.decorations
        assert session.engine.is_in_checkmate()
        assert deco.squares_with(Decoration.CHECKMATE) == {"e8"}
        assert deco.squares_with(Decoration.CHECK) == set()

        scene.machine.click("e8")
        assert deco.squares_with(Decoration.LEGAL_TARGET) == set()

    def test_checkmate_status(self, session: GameSession) -> None:
        scene = _static_scene(session)
        statuses: list[str] = []
        scene.status_changed.connect(statuses.append)
        _play(scene, SCHOLARS_MATE)
        assert statuses[-1] == "Checkmate."


class TestUndoReset:
    def test_undo_restores_previous_record_and_layout(
        self, session: GameSession
    ) -> None:
        scene = _static_scene(session)
        _play(scene, [("e2", "e4"), ("e7", "e5")])

        scene.undo()

        assert session.last_move == LastMove("e2", "e4")
        assert scene.decorations.squares_with(Decoration.LAST_MOVE) == {"e2", "e4"}
        assert "e7" in scene.piece_items and "e5" not in scene.piece_items
        _assert_in_sync(scene)

    def test_undo_only_move_clears_last_move(self, session: GameSession) -> None:
        scene = _static_scene(session)
        _play(scene, [("g1", "f3")])
        scene.undo()
        assert session.last_move is None
        assert scene.decorations.squares_with(Decoration.LAST_MOVE) == set()
        _assert_in_sync(scene)

    def test_undo_clears_selection(self, session: GameSession) -> None:
        scene = _static_scene(session)
        _play(scene, [("e2", "e4")])
        scene.machine.click("e7")
        scene.undo()
        assert scene.machine.selected is None
        assert scene.decorations.squares_with(Decoration.SELECTED) == set()

    def test_reset(self, session: GameSession) -> None:
        scene = _static_scene(session)
        statuses: list[str] = []
        scene.status_changed.connect(statuses.append)
        _play(scene, [("e2", "e4"), ("e7", "e5")])

        scene.reset()

        assert session.last_move is None
        assert statuses[-1] == "White to move."
        assert scene.decorations.squares_with(Decoration.LAST_MOVE) == set()
        _assert_in_sync(scene)


class TestRerender:
    def test_set_session_replaces_game(self, session: GameSession) -> None:
        scene = _static_scene(session)
        _play(scene, [("e2", "e4")])
        statuses: list[str] = []
        scene.status_changed.connect(statuses.append)

        fresh = GameSession(PythonChessEngine("4k3/8/8/8/8/8/4R3/4K3 b - - 0 1"))
        scene.set_session(fresh)

        assert scene.session is fresh
        assert scene.machine.session is fresh
        assert set(scene.piece_items) == {"e8", "e2", "e1"}
        assert scene.decorations.squares_with(Decoration.LAST_MOVE) == set()
        assert scene.decorations.squares_with(Decoration.CHECK) == {"e8"}
        assert statuses == ["Black to move."]

    def test_rerender_everything_is_idempotent(self, session: GameSession) -> None:
        scene = BoardScene(session)
        scene.rerender_everything()
        scene.rerender_everything()
        assert len(scene.square_items) == 64
        _assert_in_sync(scene)


class TestRelayout:
    def test_resize_repositions_everything(self, session: GameSession) -> None:
        scene = _static_scene(session)
        _play(scene, [("e2", "e4")])
        scene.machine.click("e7")

        scene.relayout(50)

        assert scene.cell_size == 50
        for sq, item in scene.square_items.items():
            rect = square_to_pixel_rect(sq, 50)
            assert (item.rect().left(), item.rect().top()) == (rect.left, rect.top)
            assert item.rect().width() == 50
            assert item.marker.boundingRect() == item.rect()
        _assert_in_sync(scene)
        assert all(i.cell_size == 50 for i in scene.piece_items.values())
        assert scene.sceneRect().width() == 400

        assert scene.machine.selected == "e7"
        assert scene.decorations.squares_with(Decoration.SELECTED) == {"e7"}
        assert session.last_move == LastMove("e2", "e4")
        assert scene.decorations.squares_with(Decoration.LAST_MOVE) == {"e2", "e4"}

    def test_relayout_is_idempotent(self, session: GameSession) -> None:
        scene = BoardScene(session)
        scene.relayout(60)
        scene.relayout(60)
        _assert_in_sync(scene)

    def test_non_positive_size_is_ignored(self, session: GameSession) -> None:
        scene = BoardScene(session)
        scene.relayout(0)
        assert scene.cell_size == BoardScene.DEFAULT_CELL


def test_set_session_drops_pending_flash(session: GameSession) -> None:
    scene = BoardScene(session, settings=BoardSettings(flash_ms=5000))
    scene.machine.click("e7")
    assert scene.decorations.is_flashing("e7")

    scene.set_session(GameSession(PythonChessEngine()))

    assert not scene.decorations.is_flashing("e7")
    assert scene.decorations.squares_with(Decoration.ILLEGAL) == set()
