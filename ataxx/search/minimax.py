from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from ataxx.core import PASS, Board, Move, applied, legal_moves

logger = logging.getLogger(__name__)

INF = 10**9


@dataclass
class SearchConfig:
    max_depth: int = 1
    endgame_empty_threshold: int = 5


@dataclass
class SearchStats:
    nodes: int = 0
    fallbacks: int = 0
    elapsed_ms: int = 0


class SearchEngine:
    """Depth-limited search maximising the mover's piece count.

    Ties are broken uniformly at random with the injected generator, so play is
    reproducible only when ``rng`` is seeded.
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        *,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or SearchConfig()
        self.rng = rng or np.random.default_rng()
        self.stats = SearchStats()

    # ------------------------------------------------------------------
    def find_move(self, board: Board) -> Move:
        """Choose a move for the side to move; ``board`` is left untouched."""
        self.stats = SearchStats()
        start = time.perf_counter()
        work = board.copy()
        if not work.can_move(work.whose_move):
            move = PASS
        else:
            move = self._find_max(work, self.config.max_depth)
        self.stats.elapsed_ms = int((time.perf_counter() - start) * 1000)
        logger.debug(
            "%s search chose %s (nodes=%d fallbacks=%d elapsed_ms=%d)",
            board.whose_move.name,
            move,
            self.stats.nodes,
            self.stats.fallbacks,
            self.stats.elapsed_ms,
        )
        return move

    # ------------------------------------------------------------------
    def _find_max(self, board: Board, depth: int) -> Move:
        root = depth == self.config.max_depth
        if depth <= 0 or board.num_empty() < self.config.endgame_empty_threshold:
            return self._greedy(board, root=root)

        color = board.whose_move
        best_score = -INF
        best: List[Move] = []
        for move in legal_moves(board):
            with applied(board, move):
                self.stats.nodes += 1
                if board.game_over():
                    return move
                reply = self._find_max(board, depth - 1)
                with applied(board, reply):
                    self.stats.nodes += 1
                    score = board.num_pieces(color)
            if score > best_score:
                best_score = score
                best = [move]
            elif score == best_score:
                best.append(move)

        if not best:
            # Only reachable when the side to move has to pass.
            self.stats.fallbacks += 1
            logger.debug("No candidate moves for %s at depth %d; using greedy ply", color.name, depth)
            return self._greedy(board, root=root)
        return self._choose(best)

    def _greedy(self, board: Board, *, root: bool) -> Move:
        color = board.whose_move
        opponent = color.opposite()
        best_score = -INF
        best: List[Move] = []
        for move in legal_moves(board):
            with applied(board, move):
                self.stats.nodes += 1
                if board.game_over():
                    return move
                if root:
                    score = board.num_pieces(color)
                else:
                    score = -board.num_pieces(opponent)
            if score > best_score:
                best_score = score
                best = [move]
            elif score == best_score:
                best.append(move)

        if not best:
            return PASS
        return self._choose(best)

    def _choose(self, moves: List[Move]) -> Move:
        return moves[int(self.rng.integers(len(moves)))]
