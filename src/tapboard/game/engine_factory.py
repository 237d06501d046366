"""Resolves the default rules engine without importing python-chess eagerly.

Importing :mod:`tapboard.game` or the UI must work even when the rules
library is missing, so that startup can report it instead of crashing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tapboard.game.interfaces import EngineUnavailableError

if TYPE_CHECKING:
    from tapboard.game.interfaces import IRulesEngine


def create_default_engine(fen: str | None = None) -> IRulesEngine:
    """Create the python-chess backed engine.

    Raises:
        EngineUnavailableError: if python-chess is not installed or the
            position cannot be set up.
    """
    try:
        from tapboard.game.python_chess_engine import PythonChessEngine
    except ImportError as exc:
        raise EngineUnavailableError(
            f"The python-chess rules engine is not installed: {exc}"
        ) from exc

    try:
        return PythonChessEngine(fen)
    except ValueError as exc:
        raise EngineUnavailableError(f"Cannot start rules engine: {exc}") from exc
