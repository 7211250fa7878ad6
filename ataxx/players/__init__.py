from .player import AIPlayer, ManualPlayer, MoveSource, Player

__all__ = ["AIPlayer", "ManualPlayer", "MoveSource", "Player"]
