import numpy as np

from ataxx.core import PASS, Board, Move, PieceColor, grid
from ataxx.players import AIPlayer, ManualPlayer
from ataxx.search import SearchConfig, SearchEngine

sq = grid.square_index


def scripted_source(moves):
    pending = list(moves)
    calls = []

    def source(color, board):
        calls.append(color)
        if not pending:
            return None
        text = pending.pop(0)
        return None if text is None else Move.parse(text)

    source.calls = calls
    return source


def ai(color: PieceColor, seed: int = 0) -> AIPlayer:
    engine = SearchEngine(SearchConfig(max_depth=1), rng=np.random.default_rng(seed))
    return AIPlayer(color, engine)


def test_ai_player_returns_legal_move():
    board = Board()
    move = ai(PieceColor.RED).next_move(board)
    assert move is not None
    assert board.legal_move(move)
    assert board == Board()


def test_ai_player_passes_when_stuck():
    board = Board()
    for square in grid.REAL_SQUARES:
        board.set(square, PieceColor.EMPTY)
    board.set(sq("a1"), PieceColor.RED)
    for name in ("a2", "a3", "b1", "b2", "b3", "c1", "c2", "c3"):
        board.set(sq(name), PieceColor.BLUE)
    assert ai(PieceColor.RED).next_move(board) is PASS


def test_ai_player_has_no_move_after_game_over():
    board = Board()
    board.set(sq("a7"), PieceColor.EMPTY)
    board.set(sq("g1"), PieceColor.EMPTY)
    assert board.game_over()
    assert ai(PieceColor.RED).next_move(board) is None


def test_manual_player_reasks_until_legal():
    board = Board()
    source = scripted_source(["a1-a4", "-", "a7-a6", "a1-b2"])
    player = ManualPlayer(PieceColor.RED, source)

    move = player.next_move(board)

    assert move == Move.parse("a1-b2")
    assert len(source.calls) == 4
    assert board == Board()


def test_manual_player_passes_through_end_of_session():
    board = Board()
    player = ManualPlayer(PieceColor.RED, scripted_source([None]))
    assert player.next_move(board) is None
