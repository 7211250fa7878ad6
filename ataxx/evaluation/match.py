from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ataxx.core import Board, GameResult, Move, PieceColor
from ataxx.players import Player

logger = logging.getLogger(__name__)

PlayerFactory = Callable[[PieceColor], Player]


@dataclass
class MatchRecord:
    result: GameResult
    moves: List[Move] = field(default_factory=list)
    red_pieces: int = 0
    blue_pieces: int = 0

    @property
    def length(self) -> int:
        return len(self.moves)


@dataclass
class EvaluationResult:
    games_played: int
    red_wins: int
    blue_wins: int
    draws: int
    average_length: float

    def winrate_red(self) -> float:
        return self.red_wins / max(1, self.games_played)

    def winrate_blue(self) -> float:
        return self.blue_wins / max(1, self.games_played)


def winner_message(result: GameResult) -> str:
    if result == GameResult.RED_WIN:
        return "Red wins."
    if result == GameResult.BLUE_WIN:
        return "Blue wins."
    return "Draw."


def play_game(
    red: Player,
    blue: Player,
    board: Optional[Board] = None,
    *,
    max_moves: Optional[int] = None,
) -> MatchRecord:
    """Play until the game ends, a player returns None, or ``max_moves``."""
    board = board if board is not None else Board()
    moves: List[Move] = []

    while not board.game_over():
        if max_moves is not None and len(moves) >= max_moves:
            logger.info("Stopping after %d moves.", len(moves))
            break
        player = red if board.whose_move == PieceColor.RED else blue
        move = player.next_move(board)
        if move is None:
            logger.info("%s has no move; ending game.", board.whose_move.name.capitalize())
            break
        board.make_move(move)
        moves.append(move)

    result = board.result()
    if result != GameResult.ONGOING:
        logger.info(winner_message(result))
    return MatchRecord(
        result=result,
        moves=moves,
        red_pieces=board.num_pieces(PieceColor.RED),
        blue_pieces=board.num_pieces(PieceColor.BLUE),
    )


def evaluate_players(
    make_red: PlayerFactory,
    make_blue: PlayerFactory,
    *,
    episodes: int,
    board_factory: Callable[[], Board] = Board,
    max_moves: Optional[int] = None,
) -> EvaluationResult:
    red_wins = 0
    blue_wins = 0
    draws = 0
    total_moves = 0

    for _ in range(episodes):
        record = play_game(
            make_red(PieceColor.RED),
            make_blue(PieceColor.BLUE),
            board_factory(),
            max_moves=max_moves,
        )
        total_moves += record.length
        if record.result == GameResult.RED_WIN:
            red_wins += 1
        elif record.result == GameResult.BLUE_WIN:
            blue_wins += 1
        else:
            draws += 1

    return EvaluationResult(
        games_played=episodes,
        red_wins=red_wins,
        blue_wins=blue_wins,
        draws=draws,
        average_length=total_moves / max(1, episodes),
    )
