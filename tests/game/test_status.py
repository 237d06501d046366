"""Tests for status line derivation."""

from __future__ import annotations

from tapboard.core.enums import Color
from tapboard.game.python_chess_engine import PythonChessEngine
from tapboard.game.status import engine_status, status_text


def test_side_to_move() -> None:
    text = status_text(is_checkmate=False, is_draw=False, side_to_move=Color.WHITE)
    assert text == "White to move."
    text = status_text(is_checkmate=False, is_draw=False, side_to_move=Color.BLACK)
    assert text == "Black to move."


def test_checkmate_wins_over_draw() -> None:
    text = status_text(is_checkmate=True, is_draw=True, side_to_move=Color.WHITE)
    assert text == "Checkmate."


def test_draw() -> None:
    text = status_text(is_checkmate=False, is_draw=True, side_to_move=Color.BLACK)
    assert text == "Draw."


def test_engine_status() -> None:
    assert engine_status(PythonChessEngine()) == "White to move."
    stalemate = PythonChessEngine("7k/5Q2/6K1/8/8/8/8/8 b - - 0 1")
    assert engine_status(stalemate) == "Draw."
