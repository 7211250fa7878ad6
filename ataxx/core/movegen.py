from __future__ import annotations

from typing import List, Optional

import numpy as np
from numpy.typing import NDArray

from . import grid
from .state import Move, PieceColor

EMPTY = int(PieceColor.EMPTY)

_REAL = np.array(grid.REAL_SQUARES, dtype=np.intp)
# Row i lists every square within jumping range of REAL_SQUARES[i].
_REACH = _REAL[:, None] + np.array(grid.EXTEND_OFFSETS + grid.JUMP_OFFSETS, dtype=np.intp)[None, :]


def _targets(board, sq: int, offsets) -> List[int]:
    cells = board.cells
    return [sq + offset for offset in offsets if cells[sq + offset] == EMPTY]


def extend_targets(board, sq: int) -> List[int]:
    """Empty squares adjacent to ``sq``."""
    return _targets(board, sq, grid.EXTEND_OFFSETS)


def jump_targets(board, sq: int) -> List[int]:
    """Empty squares exactly two rows or columns away from ``sq``."""
    return _targets(board, sq, grid.JUMP_OFFSETS)


def has_target(board, sq: int) -> bool:
    cells = board.cells
    for offset in grid.EXTEND_OFFSETS + grid.JUMP_OFFSETS:
        if cells[sq + offset] == EMPTY:
            return True
    return False


def mobile_contents(board) -> NDArray[np.int8]:
    """Contents of every real square that has at least one empty target.

    Comparing the result with a colour tells whether that colour can move,
    so one call answers the question for both sides.
    """
    cells = board.cells
    reachable = (cells[_REACH] == EMPTY).any(axis=1)
    return cells[_REAL][reachable]


def pieces_of_color(board, color: PieceColor) -> List[int]:
    cells = board.cells
    value = int(color)
    return [sq for sq in grid.REAL_SQUARES if cells[sq] == value]


def legal_moves(board, color: Optional[PieceColor] = None) -> List[Move]:
    """Every extend and jump available to ``color`` (default: side to move).

    Pass is never included; it is legal exactly when this list is empty.
    """
    if color is None:
        color = board.whose_move
    moves: List[Move] = []
    for sq in pieces_of_color(board, color):
        for target in extend_targets(board, sq):
            moves.append(Move(sq, target))
        for target in jump_targets(board, sq):
            moves.append(Move(sq, target))
    return moves
