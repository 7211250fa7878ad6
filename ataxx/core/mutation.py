"""Reversible move application.

Every :func:`apply_move` pushes exactly one :class:`MoveRecord` onto the
board's history and every :func:`undo_move` pops one, so applies and undos
must be paired in LIFO order. Search code should go through :func:`applied`,
which guarantees the undo on every exit path.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List, Optional

from . import grid
from .state import IllegalMoveError, Move, MoveRecord, PieceColor


def apply_move(board, move: Move) -> MoveRecord:
    if not board.legal_move(move):
        raise IllegalMoveError(f"Illegal move {move} for {board.whose_move.name}.")

    mover = board.whose_move
    if move.is_pass:
        record = MoveRecord(move=move, mover=mover)
    else:
        saved_jumps: Optional[int] = None
        board.set(move.to_sq, mover)
        if move.is_extend:
            saved_jumps = board.num_jumps
            board.num_jumps = 0
        else:
            board.set(move.from_sq, PieceColor.EMPTY)
            board.num_jumps += 1
        flipped = _capture_neighbors(board, move.to_sq, mover)
        record = MoveRecord(move=move, mover=mover, flipped=flipped, saved_jumps=saved_jumps)

    board.whose_move = mover.opposite()
    board.history.append(record)
    return record


def undo_move(board) -> Optional[Move]:
    """Reverse the most recent move; returns it, or None if there is none."""
    if not board.history:
        return None
    record: MoveRecord = board.history.pop()

    # A captured square still holds the mover's colour here.
    for sq in record.flipped:
        board.set(sq, board.get(sq).opposite())

    move = record.move
    if move.is_extend:
        board.set(move.to_sq, PieceColor.EMPTY)
        board.num_jumps = record.saved_jumps
    elif move.is_jump:
        board.set(move.from_sq, board.whose_move.opposite())
        board.set(move.to_sq, PieceColor.EMPTY)
        board.num_jumps -= 1

    board.whose_move = board.whose_move.opposite()
    return move


@contextmanager
def applied(board, move: Move) -> Iterator:
    apply_move(board, move)
    try:
        yield board
    finally:
        undo_move(board)


def _capture_neighbors(board, sq: int, mover: PieceColor) -> tuple:
    opponent = int(mover.opposite())
    cells = board.cells
    flipped: List[int] = []
    for offset in grid.EXTEND_OFFSETS:
        target = sq + offset
        if cells[target] == opponent:
            board.set(target, mover)
            flipped.append(target)
    return tuple(flipped)
