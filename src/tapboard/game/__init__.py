"""Game layer — engine contract, session controller, selection state machine.

Quick start::

    from tapboard.game import GameSession, SelectionMachine, create_default_engine

    session = GameSession(create_default_engine())
    machine = SelectionMachine(session, view)
    machine.click("e2")
    machine.click("e4")

The python-chess adapter lives in :mod:`tapboard.game.python_chess_engine`
and is only imported when an engine is created.
"""

from tapboard.game.engine_factory import create_default_engine
from tapboard.game.interfaces import EngineUnavailableError, IRulesEngine
from tapboard.game.selection import (
    ClickOutcome,
    SelectionMachine,
    SelectionPhase,
    SelectionView,
)
from tapboard.game.session import GameSession, SelectionState
from tapboard.game.status import engine_status, status_text

__all__ = [
    # Interfaces
    "EngineUnavailableError",
    "IRulesEngine",
    "SelectionView",
    # Concrete
    "ClickOutcome",
    "GameSession",
    "SelectionMachine",
    "SelectionPhase",
    "SelectionState",
    # Helpers
    "create_default_engine",
    "engine_status",
    "status_text",
]
