"""Game driving and evaluation helpers for Ataxx."""

from .match import EvaluationResult, MatchRecord, evaluate_players, play_game, winner_message

__all__ = ["EvaluationResult", "MatchRecord", "evaluate_players", "play_game", "winner_message"]
