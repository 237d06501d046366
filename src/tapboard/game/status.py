"""Status line derivation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tapboard.core.enums import Color
    from tapboard.game.interfaces import IRulesEngine

STATUS_CHECKMATE = "Checkmate."
STATUS_DRAW = "Draw."
STATUS_NOT_YOUR_TURN = "Not your turn."
STATUS_ILLEGAL_MOVE = "Illegal move."


def status_text(*, is_checkmate: bool, is_draw: bool, side_to_move: Color) -> str:
    """``"Checkmate."``, ``"Draw."`` or ``"<Color> to move."``."""
    if is_checkmate:
        return STATUS_CHECKMATE
    if is_draw:
        return STATUS_DRAW
    return f"{side_to_move.display_name} to move."


def engine_status(engine: IRulesEngine) -> str:
    """Status text for the engine's current position."""
    return status_text(
        is_checkmate=engine.is_in_checkmate(),
        is_draw=engine.is_in_draw(),
        side_to_move=engine.side_to_move(),
    )
