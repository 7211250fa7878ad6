from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional, Tuple

from . import grid


class PieceColor(IntEnum):
    EMPTY = 0
    RED = 1
    BLUE = 2
    BLOCKED = 3

    @property
    def is_piece(self) -> bool:
        return self in (PieceColor.RED, PieceColor.BLUE)

    def opposite(self) -> "PieceColor":
        if self == PieceColor.RED:
            return PieceColor.BLUE
        if self == PieceColor.BLUE:
            return PieceColor.RED
        raise ValueError(f"{self.name} has no opposite colour.")

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    PieceColor.EMPTY: "-",
    PieceColor.RED: "r",
    PieceColor.BLUE: "b",
    PieceColor.BLOCKED: "X",
}


class GameResult(Enum):
    ONGOING = "ongoing"
    RED_WIN = "red_win"
    BLUE_WIN = "blue_win"
    DRAW = "draw"


class IllegalMoveError(ValueError):
    pass


class IllegalBlockError(ValueError):
    pass


@dataclass(frozen=True)
class Move:
    """A transfer between two linear indices, or a pass when both are None."""

    from_sq: Optional[int] = None
    to_sq: Optional[int] = None

    def __post_init__(self) -> None:
        if (self.from_sq is None) != (self.to_sq is None):
            raise ValueError(f"Move needs both squares or neither, got {self.from_sq!r}, {self.to_sq!r}")

    @property
    def is_pass(self) -> bool:
        return self.from_sq is None and self.to_sq is None

    @property
    def distance(self) -> int:
        if self.is_pass:
            return 0
        return grid.distance(self.from_sq, self.to_sq)

    @property
    def is_extend(self) -> bool:
        return not self.is_pass and self.distance == 1

    @property
    def is_jump(self) -> bool:
        return not self.is_pass and self.distance == 2

    @staticmethod
    def between(source: str, destination: str) -> "Move":
        return Move(grid.square_index(source), grid.square_index(destination))

    @staticmethod
    def parse(text: str) -> "Move":
        """Parse ``"a1-b2"`` or ``"-"`` (pass)."""
        raw = text.strip().lower()
        if raw == "-":
            return PASS
        parts = raw.split("-")
        if len(parts) != 2:
            raise ValueError(f"Invalid move: {text!r}")
        return Move.between(parts[0], parts[1])

    def __str__(self) -> str:
        if self.is_pass:
            return "-"
        return f"{grid.square_name(self.from_sq)}-{grid.square_name(self.to_sq)}"


PASS = Move()


@dataclass(frozen=True)
class MoveRecord:
    move: Move
    mover: PieceColor
    flipped: Tuple[int, ...] = field(default_factory=tuple)
    saved_jumps: Optional[int] = None
