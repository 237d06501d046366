"""Tests for default engine creation."""

from __future__ import annotations

import sys

import pytest

from tapboard.core.enums import Color
from tapboard.game.engine_factory import create_default_engine
from tapboard.game.interfaces import EngineUnavailableError


def test_creates_engine_on_start_position() -> None:
    assert create_default_engine().side_to_move() == Color.WHITE


def test_creates_engine_from_fen() -> None:
    engine = create_default_engine("4k3/8/8/8/8/8/8/4K2R b K - 0 1")
    assert engine.side_to_move() == Color.BLACK


def test_bad_fen_is_engine_unavailable() -> None:
    with pytest.raises(EngineUnavailableError, match="Cannot start"):
        create_default_engine("not a fen")


def test_missing_rules_library_is_engine_unavailable(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setitem(sys.modules, "chess", None)
    monkeypatch.delitem(sys.modules, "tapboard.game.python_chess_engine")

    with pytest.raises(EngineUnavailableError, match="not installed"):
        create_default_engine()
