"""Ataxx rules and search engine."""

from . import core, evaluation, players, search
from .config import AtaxxConfig, load_config
from .core import (
    PASS,
    Board,
    GameResult,
    IllegalBlockError,
    IllegalMoveError,
    Move,
    PieceColor,
    legal_moves,
)
from .evaluation import EvaluationResult, MatchRecord, evaluate_players, play_game
from .players import AIPlayer, ManualPlayer, Player
from .search import SearchConfig, SearchEngine

__all__ = [
    "core",
    "evaluation",
    "players",
    "search",
    "AtaxxConfig",
    "load_config",
    "Board",
    "GameResult",
    "IllegalBlockError",
    "IllegalMoveError",
    "Move",
    "PASS",
    "PieceColor",
    "legal_moves",
    "SearchConfig",
    "SearchEngine",
    "AIPlayer",
    "ManualPlayer",
    "Player",
    "EvaluationResult",
    "MatchRecord",
    "evaluate_players",
    "play_game",
]
