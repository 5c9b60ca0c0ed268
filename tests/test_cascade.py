import random

import pytest

from jump61.core.board import Board
from jump61.core.square import EMPTY, Square


def _random_game(size, seed, max_moves=60):
    """Boards after each move of a random legal game, plus the moves played."""
    rng = random.Random(seed)
    board = Board(size)
    moves = []
    while board.winner() is None and len(moves) < max_moves:
        side = board.whose_move()
        n = rng.choice(board.valid_moves(side))
        board.add_spot_at(side, n)
        moves.append((side, n))
    return board, moves


def test_corner_capture_on_two_by_two():
    board = Board(2)
    for _ in range(3):
        board.add_spot("red", 1, 1)

    assert board.get(1, 1) == Square("red", 1)
    assert board.get(1, 2) == Square("red", 1)
    assert board.get(2, 1) == Square("red", 1)
    assert board.get(2, 2) == EMPTY
    assert board.winner() is None


def test_jump_captures_enemy_squares():
    board = Board(3)
    board.set(1, 2, 1, "blue")
    board.set(1, 1, 2, "red")
    board.add_spot("red", 1, 1)

    assert board.get(1, 1) == Square("red", 1)
    assert board.get(1, 2) == Square("red", 2)
    assert board.get(2, 1) == Square("red", 1)


def test_winning_cascade():
    board = Board(2)
    board.set(1, 1, 2, "red")
    board.set(1, 2, 2, "red")
    board.set(2, 1, 1, "red")
    board.set(2, 2, 1, "blue")

    board.add_spot("red", 1, 1)

    assert board.winner() == "red"
    assert board.num_pieces() == 7


def test_cascade_stops_once_game_is_won():
    board = Board(2)
    board.set(1, 1, 2, "red")
    board.set(1, 2, 2, "red")
    board.set(2, 1, 2, "red")
    board.set(2, 2, 1, "blue")

    board.add_spot("red", 1, 1)

    assert board.winner() == "red"
    # (2, 1) is left overfull: the game was decided before it was processed
    assert board.get(2, 1) == Square("red", 3)
    assert board.get(1, 1) == Square("red", 2)
    assert board.get(1, 2) == Square("red", 1)
    assert board.get(2, 2) == Square("red", 2)
    assert board.num_pieces() == 8


def test_requeued_square_topples_first():
    # (2, 1) is queued early and refilled by the center; it must topple
    # again before (2, 3), which reaches the blue corner and wins.
    board = Board(3)
    for (r, c), num in {
        (1, 1): 2, (1, 2): 3, (1, 3): 1,
        (2, 1): 3, (2, 2): 4, (2, 3): 3,
        (3, 1): 1, (3, 2): 1,
    }.items():
        board.set(r, c, num, "red")
    board.set(3, 3, 1, "blue")

    board.add_spot("red", 1, 1)

    assert board.winner() == "red"
    assert str(board) == "===\n    1r 3r 3r\n    3r 3r 1r\n    2r 2r 2r\n==="
    assert board.num_pieces() == 20


def test_single_square_board():
    board = Board(1)
    board.add_spot("red", 1, 1)
    assert board.get(1, 1) == Square("red", 1)
    assert board.winner() == "red"


@pytest.mark.parametrize("size,seed", [(2, 0), (3, 1), (4, 2), (5, 3), (6, 4)])
def test_spots_are_conserved(size, seed):
    rng = random.Random(seed)
    board = Board(size)
    moves = 0
    while board.winner() is None and moves < 80:
        side = board.whose_move()
        board.add_spot_at(side, rng.choice(board.valid_moves(side)))
        moves += 1
        assert board.num_pieces() == moves
        assert board.history_depth() == moves


@pytest.mark.parametrize("size,seed", [(3, 5), (4, 6), (5, 7)])
def test_no_square_left_overfull_in_undecided_game(size, seed):
    rng = random.Random(seed)
    board = Board(size)
    for _ in range(80):
        if board.winner() is not None:
            break
        side = board.whose_move()
        board.add_spot_at(side, rng.choice(board.valid_moves(side)))
        if board.winner() is None:
            for n in range(board.area()):
                assert board.square(n).spots <= board.neighbors(n)


@pytest.mark.parametrize("size,seed", [(2, 10), (3, 11), (4, 12), (5, 13)])
def test_undo_inverts_every_move(size, seed):
    rng = random.Random(seed)
    board = Board(size)
    snapshots = []
    while board.winner() is None and len(snapshots) < 60:
        side = board.whose_move()
        n = rng.choice(board.valid_moves(side))

        before = board.copy()
        board.add_spot_at(side, n)
        board.undo()
        assert board == before

        snapshots.append(before)
        board.add_spot_at(side, n)

    for before in reversed(snapshots):
        board.undo()
        assert board == before
    assert board == Board(size)
    assert board.history_depth() == 0


def test_undo_restores_administrative_setup():
    board = Board(2)
    board.set(1, 1, 2, "red")
    board.set(1, 2, 2, "red")
    board.set(2, 1, 2, "red")
    board.set(2, 2, 1, "blue")
    before = board.copy()

    board.add_spot("red", 1, 1)
    board.undo()
    assert board == before


@pytest.mark.parametrize("size,seed", [(3, 20), (4, 21), (6, 22)])
def test_same_moves_give_same_board(size, seed):
    played, moves = _random_game(size, seed)
    replay = Board(size)
    for side, n in moves:
        replay.add_spot_at(side, n)
    assert replay == played
    assert str(replay) == str(played)
