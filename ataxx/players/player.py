"""Move sources for the two sides of a game."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from ataxx.core import PASS, Board, Move, PieceColor
from ataxx.search import SearchEngine

logger = logging.getLogger(__name__)

MoveSource = Callable[[PieceColor, Board], Optional[Move]]


class Player(Protocol):
    color: PieceColor

    def next_move(self, board: Board) -> Optional[Move]:
        """Return the next move for ``color``, or None when there is none."""
        ...


class AIPlayer:
    def __init__(self, color: PieceColor, engine: Optional[SearchEngine] = None) -> None:
        self.color = color
        self.engine = engine or SearchEngine()

    def next_move(self, board: Board) -> Optional[Move]:
        if board.game_over():
            return None
        move = self.engine.find_move(board)
        if move.is_pass or not board.can_move(self.color):
            logger.info("%s passes.", self.color.name.capitalize())
            return PASS
        logger.info("%s moves %s.", self.color.name.capitalize(), move)
        return move


class ManualPlayer:
    """Takes moves from ``source``, asking again until one is legal."""

    def __init__(self, color: PieceColor, source: MoveSource) -> None:
        self.color = color
        self.source = source

    def next_move(self, board: Board) -> Optional[Move]:
        while True:
            move = self.source(self.color, board)
            if move is None:
                return None
            if board.legal_move(move):
                return move
            if move.is_pass:
                logger.warning("Unable to pass: %s still has moves.", self.color.name.capitalize())
            else:
                logger.warning("Not a legal move: %s", move)
