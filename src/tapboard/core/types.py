"""Square type alias and name helpers.

Squares are algebraic names (``"a1"`` .. ``"h8"``). File and rank indices
are zero-based: ``a`` = 0, rank ``1`` = 0.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = str  # "a1"–"h8"

FILES = "abcdefgh"
RANKS = "12345678"


def file_index(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return FILES.index(sq[0])


def rank_index(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return RANKS.index(sq[1])


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0–7) and rank (0–7)."""
    return FILES[file] + RANKS[rank]


def is_valid_square(name: object) -> bool:
    """Check whether *name* is a well-formed square name."""
    return (
        isinstance(name, str)
        and len(name) == 2
        and name[0] in FILES
        and name[1] in RANKS
    )


def parse_square(name: str) -> Square:
    """Validate a square name, e.g. ``'E4'`` → ``'e4'``."""
    normalized = name.strip().lower() if isinstance(name, str) else name
    if not is_valid_square(normalized):
        raise ValueError(f"Invalid square name: {name!r}")
    return normalized


ALL_SQUARES: tuple[Square, ...] = tuple(
    make_square(f, r) for r in range(8) for f in range(8)
)
