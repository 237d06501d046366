"""Board settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BoardSettings:
    """User-configurable board behaviour."""

    theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True
    animate_moves: bool = True

    # Timings (ms)
    slide_ms: int = 100
    resync_delay_ms: int = 120
    flash_ms: int = 150
