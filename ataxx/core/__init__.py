"""Core game logic for Ataxx."""

from . import grid
from .board import JUMP_LIMIT, Board
from .movegen import extend_targets, has_target, jump_targets, legal_moves, mobile_contents, pieces_of_color
from .mutation import applied, apply_move, undo_move
from .state import (
    PASS,
    GameResult,
    IllegalBlockError,
    IllegalMoveError,
    Move,
    MoveRecord,
    PieceColor,
)

__all__ = [
    "grid",
    "Board",
    "JUMP_LIMIT",
    "GameResult",
    "IllegalBlockError",
    "IllegalMoveError",
    "Move",
    "MoveRecord",
    "PASS",
    "PieceColor",
    "applied",
    "apply_move",
    "undo_move",
    "extend_targets",
    "has_target",
    "jump_targets",
    "legal_moves",
    "mobile_contents",
    "pieces_of_color",
]
