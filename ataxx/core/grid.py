"""Linear indexing over the padded Ataxx grid.

The real 7x7 board is surrounded by two layers of permanently blocked border
squares, so every square within two rows and columns of a real square is a
valid index and neighbour lookups never need bounds checks.
"""

from __future__ import annotations

from typing import Tuple

SIDE = 7
BORDER = 2
EXTENDED_SIDE = SIDE + 2 * BORDER
NUM_CELLS = EXTENDED_SIDE * EXTENDED_SIDE

COLUMNS = "abcdefg"
ROWS = "1234567"


def index(col: int, row: int) -> int:
    """Linear index of real square (col, row), both 0-based."""
    return (row + BORDER) * EXTENDED_SIDE + (col + BORDER)


def col_of(sq: int) -> int:
    return sq % EXTENDED_SIDE - BORDER


def row_of(sq: int) -> int:
    return sq // EXTENDED_SIDE - BORDER


def neighbor(sq: int, dc: int, dr: int) -> int:
    return sq + dc + dr * EXTENDED_SIDE


def is_real(sq: int) -> bool:
    if not 0 <= sq < NUM_CELLS:
        return False
    return 0 <= col_of(sq) < SIDE and 0 <= row_of(sq) < SIDE


def distance(a: int, b: int) -> int:
    """Chebyshev distance between two squares."""
    return max(abs(col_of(a) - col_of(b)), abs(row_of(a) - row_of(b)))


def square_index(name: str) -> int:
    """Parse a square name such as ``"c3"``."""
    text = name.strip().lower()
    if len(text) != 2 or text[0] not in COLUMNS or text[1] not in ROWS:
        raise ValueError(f"Invalid square name: {name!r}")
    return index(COLUMNS.index(text[0]), ROWS.index(text[1]))


def square_name(sq: int) -> str:
    return f"{COLUMNS[col_of(sq)]}{ROWS[row_of(sq)]}"


def reflections(sq: int) -> Tuple[int, ...]:
    """The square and its mirror images across the middle row and column."""
    col, row = col_of(sq), row_of(sq)
    mirrored = (
        index(col, row),
        index(col, SIDE - 1 - row),
        index(SIDE - 1 - col, row),
        index(SIDE - 1 - col, SIDE - 1 - row),
    )
    return tuple(sorted(set(mirrored)))


def _offsets(radius: int) -> Tuple[int, ...]:
    return tuple(
        dr * EXTENDED_SIDE + dc
        for dr in range(-radius, radius + 1)
        for dc in range(-radius, radius + 1)
        if max(abs(dc), abs(dr)) == radius
    )


EXTEND_OFFSETS: Tuple[int, ...] = _offsets(1)
JUMP_OFFSETS: Tuple[int, ...] = _offsets(2)
REAL_SQUARES: Tuple[int, ...] = tuple(index(c, r) for r in range(SIDE) for c in range(SIDE))
CORNERS: Tuple[int, ...] = (
    index(0, 0),
    index(SIDE - 1, 0),
    index(0, SIDE - 1),
    index(SIDE - 1, SIDE - 1),
)
