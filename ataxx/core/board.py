from __future__ import annotations

from typing import Callable, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from . import grid, movegen, mutation
from .state import GameResult, IllegalBlockError, Move, MoveRecord, PASS, PieceColor

JUMP_LIMIT = 25

Listener = Callable[["Board"], None]


class Board:
    """An Ataxx board with incremental piece counts and an undo history.

    ``cells`` is a flat ``int8`` array over the padded grid (see
    :mod:`ataxx.core.grid`); border squares are BLOCKED and never change.
    """

    def __init__(self) -> None:
        self.cells: NDArray[np.int8] = np.zeros(grid.NUM_CELLS, dtype=np.int8)
        self.whose_move: PieceColor = PieceColor.RED
        self.num_jumps: int = 0
        self.history: List[MoveRecord] = []
        self._counts = {PieceColor.RED: 0, PieceColor.BLUE: 0, PieceColor.BLOCKED: 0}
        self._listeners: List[Listener] = []
        self._reset()

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------
    def _reset(self) -> None:
        self.cells[:] = PieceColor.BLOCKED
        self.cells[list(grid.REAL_SQUARES)] = PieceColor.EMPTY
        for color in self._counts:
            self._counts[color] = 0
        self.set(grid.square_index("a1"), PieceColor.RED)
        self.set(grid.square_index("g7"), PieceColor.RED)
        self.set(grid.square_index("a7"), PieceColor.BLUE)
        self.set(grid.square_index("g1"), PieceColor.BLUE)
        self.whose_move = PieceColor.RED
        self.num_jumps = 0
        self.history = []

    def clear(self) -> None:
        """Restore the starting position, with no blocks and no history."""
        self._reset()
        self._notify()

    def copy(self) -> "Board":
        other = Board.__new__(Board)
        other.cells = self.cells.copy()
        other.whose_move = self.whose_move
        other.num_jumps = self.num_jumps
        other.history = list(self.history)
        other._counts = dict(self._counts)
        other._listeners = []
        return other

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def get(self, sq: int) -> PieceColor:
        return PieceColor(int(self.cells[sq]))

    def set(self, sq: int, value: PieceColor) -> None:
        """Write a real square directly, keeping the counts in step.

        History is not touched; callers that need undo record it themselves.
        """
        if not grid.is_real(sq):
            raise ValueError(f"Square {sq} is outside the playing area.")
        old = PieceColor(int(self.cells[sq]))
        if old in self._counts:
            self._counts[old] -= 1
        if value in self._counts:
            self._counts[value] += 1
        self.cells[sq] = value

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def num_pieces(self, color: PieceColor) -> int:
        if not color.is_piece:
            raise ValueError(f"{color.name} is not a player colour.")
        return self._counts[color]

    def num_blocks(self) -> int:
        return self._counts[PieceColor.BLOCKED]

    def num_empty(self) -> int:
        return len(grid.REAL_SQUARES) - sum(self._counts.values())

    def num_moves(self) -> int:
        return len(self.history)

    def can_move(self, color: PieceColor) -> bool:
        return bool(np.any(movegen.mobile_contents(self) == color))

    def game_over(self) -> bool:
        if self.num_pieces(PieceColor.RED) == 0 or self.num_pieces(PieceColor.BLUE) == 0:
            return True
        if self.num_jumps > JUMP_LIMIT:
            return True
        mobile = movegen.mobile_contents(self)
        return not np.any((mobile == PieceColor.RED) | (mobile == PieceColor.BLUE))

    def legal_move(self, move: Optional[Move]) -> bool:
        if move is None:
            return False
        if move.is_pass:
            return not self.can_move(self.whose_move)
        if not (grid.is_real(move.from_sq) and grid.is_real(move.to_sq)):
            return False
        return bool(
            self.cells[move.from_sq] == self.whose_move
            and self.cells[move.to_sq] == PieceColor.EMPTY
            and move.distance in (1, 2)
        )

    def result(self) -> GameResult:
        if not self.game_over():
            return GameResult.ONGOING
        red = self.num_pieces(PieceColor.RED)
        blue = self.num_pieces(PieceColor.BLUE)
        if red > blue:
            return GameResult.RED_WIN
        if blue > red:
            return GameResult.BLUE_WIN
        return GameResult.DRAW

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------
    def legal_block(self, sq: int) -> bool:
        if self.history or not grid.is_real(sq):
            return False
        squares = grid.reflections(sq)
        if any(s in grid.CORNERS for s in squares):
            return False
        return all(self.cells[s] == PieceColor.EMPTY for s in squares)

    def set_block(self, square) -> None:
        """Block ``square`` (index or name) and its reflections."""
        sq = grid.square_index(square) if isinstance(square, str) else square
        if not self.legal_block(sq):
            raise IllegalBlockError("illegal block placement")
        for s in grid.reflections(sq):
            self.set(s, PieceColor.BLOCKED)
        self._notify()

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------
    def make_move(self, move: Move) -> None:
        mutation.apply_move(self, move)
        self._notify()

    def pass_turn(self) -> None:
        self.make_move(PASS)

    def undo(self) -> Optional[Move]:
        move = mutation.undo_move(self)
        if move is not None:
            self._notify()
        return move

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------
    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # ------------------------------------------------------------------
    # Comparison and display
    # ------------------------------------------------------------------
    def snapshot(self) -> Tuple[bytes, PieceColor, int, int, int]:
        return (
            self.cells.tobytes(),
            self.whose_move,
            self.num_pieces(PieceColor.RED),
            self.num_pieces(PieceColor.BLUE),
            self.num_jumps,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    def render(self, legend: bool = False) -> str:
        lines = ["==="]
        for row in range(grid.SIDE - 1, -1, -1):
            cells = " ".join(self.get(grid.index(col, row)).symbol for col in range(grid.SIDE))
            prefix = f"{grid.ROWS[row]} " if legend else ""
            lines.append(f"  {prefix}{cells}")
        if legend:
            lines.append("    " + " ".join(grid.COLUMNS))
        lines.append("===")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Board(to_move={self.whose_move.name}, red={self.num_pieces(PieceColor.RED)}, "
            f"blue={self.num_pieces(PieceColor.BLUE)}, jumps={self.num_jumps})\n{self.render()}"
        )
