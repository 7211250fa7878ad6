import numpy as np
import pytest

from ataxx.core import (
    PASS,
    Board,
    IllegalMoveError,
    Move,
    PieceColor,
    applied,
    apply_move,
    grid,
    legal_moves,
    undo_move,
)

sq = grid.square_index

GAME1 = ["a1-a2", "a7-b7", "a2-a4", "b7-b5", "g7-f6", "g1-e3"]


def empty_board() -> Board:
    board = Board()
    for square in grid.REAL_SQUARES:
        board.set(square, PieceColor.EMPTY)
    return board


def make_moves(board: Board, moves) -> None:
    for text in moves:
        board.make_move(Move.parse(text))


def assert_counts_consistent(board: Board) -> None:
    red = sum(1 for s in grid.REAL_SQUARES if board.get(s) == PieceColor.RED)
    blue = sum(1 for s in grid.REAL_SQUARES if board.get(s) == PieceColor.BLUE)
    assert board.num_pieces(PieceColor.RED) == red
    assert board.num_pieces(PieceColor.BLUE) == blue
    assert red + blue + board.num_empty() + board.num_blocks() == 49


def test_extend_from_corner_and_undo():
    board = Board()
    start = board.snapshot()
    board.make_move(Move.parse("g7-f6"))
    assert board.get(sq("f6")) == PieceColor.RED
    assert board.get(sq("g7")) == PieceColor.RED
    assert board.num_pieces(PieceColor.RED) == 3
    assert board.num_pieces(PieceColor.BLUE) == 2
    assert board.whose_move == PieceColor.BLUE

    board.undo()
    assert board.snapshot() == start
    assert board.num_pieces(PieceColor.RED) == 2
    assert board.num_pieces(PieceColor.BLUE) == 2


def test_capture_flips_exactly_adjacent_opponents():
    board = empty_board()
    board.set(sq("c3"), PieceColor.RED)
    for name in ("d4", "e4", "e5", "a1"):
        board.set(sq(name), PieceColor.BLUE)
    board.set(sq("c4"), PieceColor.RED)

    record = apply_move(board, Move.parse("c3-d3"))

    assert names(record.flipped) == {"d4", "e4"}
    assert board.get(sq("d4")) == PieceColor.RED
    assert board.get(sq("e4")) == PieceColor.RED
    assert board.get(sq("e5")) == PieceColor.BLUE
    assert board.num_pieces(PieceColor.RED) == 5
    assert board.num_pieces(PieceColor.BLUE) == 2
    assert_counts_consistent(board)

    undo_move(board)
    assert board.get(sq("d4")) == PieceColor.BLUE
    assert board.get(sq("e4")) == PieceColor.BLUE
    assert board.get(sq("d3")) == PieceColor.EMPTY
    assert board.num_pieces(PieceColor.RED) == 2
    assert board.num_pieces(PieceColor.BLUE) == 4


def names(squares):
    return {grid.square_name(s) for s in squares}


def test_jump_vacates_source_and_counts_streak():
    board = Board()
    board.make_move(Move.parse("a1-a3"))
    assert board.get(sq("a1")) == PieceColor.EMPTY
    assert board.get(sq("a3")) == PieceColor.RED
    assert board.num_pieces(PieceColor.RED) == 2
    assert board.num_jumps == 1

    board.make_move(Move.parse("a7-a5"))
    assert board.num_jumps == 2
    board.make_move(Move.parse("g7-f6"))
    assert board.num_jumps == 0

    board.undo()
    assert board.num_jumps == 2
    board.undo()
    board.undo()
    assert board == Board()


def test_capture_by_jump_and_full_game_undo():
    board = Board()
    start = board.copy()
    make_moves(board, GAME1[:4])
    assert board.get(sq("a4")) == PieceColor.BLUE
    assert board.num_pieces(PieceColor.RED) == 2
    assert board.num_pieces(PieceColor.BLUE) == 4

    make_moves(board, GAME1[4:])
    after = board.copy()
    for _ in GAME1:
        board.undo()
    assert board == start

    make_moves(board, GAME1)
    assert board == after


def test_pass_is_recorded_and_undone():
    board = empty_board()
    board.set(sq("a1"), PieceColor.RED)
    for name in ("a2", "a3", "b1", "b2", "b3", "c1", "c2", "c3"):
        board.set(sq(name), PieceColor.BLUE)
    before = board.snapshot()

    board.pass_turn()
    assert board.whose_move == PieceColor.BLUE
    assert board.num_moves() == 1

    board.make_move(Move.parse("c3-d4"))
    board.undo()
    board.undo()
    assert board.snapshot() == before


def test_illegal_moves_are_refused_without_mutation():
    board = Board()
    before = board.snapshot()
    for move in (PASS, Move.parse("a1-a4"), Move.parse("a7-a6"), Move.parse("a1-a7")):
        with pytest.raises(IllegalMoveError):
            board.make_move(move)
    assert board.snapshot() == before
    assert board.num_moves() == 0


def test_undo_on_empty_history_is_noop():
    board = Board()
    assert board.undo() is None
    assert board == Board()


def test_applied_undoes_on_exception():
    board = Board()
    before = board.snapshot()
    with pytest.raises(RuntimeError):
        with applied(board, Move.parse("a1-b2")):
            assert board.num_pieces(PieceColor.RED) == 3
            raise RuntimeError("boom")
    assert board.snapshot() == before


def test_random_playout_undo_restores_every_position():
    rng = np.random.default_rng(1234)
    board = Board()
    board.set_block("c4")
    snapshots = [board.snapshot()]
    for _ in range(80):
        if board.game_over():
            break
        moves = legal_moves(board) or [PASS]
        board.make_move(moves[int(rng.integers(len(moves)))])
        assert_counts_consistent(board)
        snapshots.append(board.snapshot())

    played = [record.move for record in board.history]
    final = board.snapshot()
    for expected in reversed(snapshots[:-1]):
        board.undo()
        assert_counts_consistent(board)
        assert board.snapshot() == expected

    for move in played:
        board.make_move(move)
    assert board.snapshot() == final


def test_half_built_move_is_rejected():
    with pytest.raises(ValueError):
        Move(sq("a1"), None)
    with pytest.raises(ValueError):
        Move(None, sq("b2"))
    assert Move().is_pass
    assert not Move(sq("a1"), sq("b2")).is_pass
