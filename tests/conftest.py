"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from tapboard.game.python_chess_engine import PythonChessEngine
from tapboard.game.session import GameSession

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

CASTLING_FEN = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()


@pytest.fixture
def session() -> GameSession:
    """A session on the standard starting position."""
    return GameSession(PythonChessEngine())


@pytest.fixture
def castling_session() -> GameSession:
    return GameSession(PythonChessEngine(CASTLING_FEN))
