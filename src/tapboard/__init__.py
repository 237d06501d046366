"""Tapboard — a tap-to-move chessboard for PyQt6."""

__version__ = "0.3.0"
