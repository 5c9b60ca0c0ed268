import random
from math import inf

import pytest

from jump61.ai.minimax_agent import MinimaxAgent
from jump61.config import WINNING_VALUE
from jump61.core.board import Board
from jump61.core.scoring import evaluate
from jump61.game.state import GameState


def _full_minimax(board, depth, maximizing):
    """Unpruned minimax. Returns (value, first best move, nodes)."""
    if depth == 0 or board.winner() is not None:
        return evaluate(board), None, 1

    side = "red" if maximizing else "blue"
    moves = board.valid_moves(side)
    if not moves:
        return evaluate(board), None, 1

    best, best_move, nodes = (-inf if maximizing else inf), None, 1
    for n in moves:
        board.add_spot_at(side, n)
        v, _, sub = _full_minimax(board, depth - 1, not maximizing)
        board.undo()
        nodes += sub
        if (maximizing and v > best) or (not maximizing and v < best):
            best, best_move = v, n
    return best, best_move, nodes


def _random_position(size, plies, seed):
    rng = random.Random(seed)
    board = Board(size)
    for _ in range(plies):
        if board.winner() is not None:
            break
        side = board.whose_move()
        board.add_spot_at(side, rng.choice(board.valid_moves(side)))
    return board


def _win_in_one(side):
    enemy = "blue" if side == "red" else "red"
    board = Board(2)
    board.set(1, 1, 2, side)
    board.set(1, 2, 2, side)
    board.set(2, 1, 1, side)
    board.set(2, 2, 1, enemy)
    return board


@pytest.mark.parametrize("seed", range(12))
@pytest.mark.parametrize("depth", [1, 2, 3])
def test_pruned_search_matches_full_minimax(seed, depth):
    board = _random_position(3, seed % 7, seed)
    if board.winner() is not None:
        pytest.skip("random opening finished the game")
    side = board.whose_move()

    expected_value, expected_move, _ = _full_minimax(board.copy(), depth, side == "red")

    agent = MinimaxAgent(depth=depth)
    assert agent.search(board, side) == expected_move
    assert agent.last_info["eval"] == expected_value


def test_search_restores_board():
    board = _random_position(4, 6, 3)
    before = board.copy()
    depth_before = board.history_depth()

    MinimaxAgent(depth=3).search(board, board.whose_move())

    assert board == before
    assert board.history_depth() == depth_before


def test_pruning_visits_fewer_nodes():
    board = Board(3)
    _, _, full_nodes = _full_minimax(board.copy(), 3, True)

    agent = MinimaxAgent(depth=3)
    agent.search(board, "red")

    assert agent.last_info["cutoffs"] > 0
    assert agent.last_info["nodes"] < full_nodes


def test_first_best_move_wins_ties():
    agent = MinimaxAgent(depth=1)
    assert agent.search(Board(2), "red") == 0
    assert agent.last_info["eval"] == 1


@pytest.mark.parametrize("depth", [1, 4])
def test_red_takes_immediate_win(depth):
    agent = MinimaxAgent(depth=depth)
    assert agent.search(_win_in_one("red"), "red") == 0
    assert agent.last_info["eval"] == WINNING_VALUE


def test_blue_takes_immediate_win():
    agent = MinimaxAgent(depth=1)
    assert agent.search(_win_in_one("blue"), "blue") == 0
    assert agent.last_info["eval"] == -WINNING_VALUE


def test_search_rejects_finished_game_and_zero_depth():
    won = Board(2)
    for r in (1, 2):
        for c in (1, 2):
            won.set(r, c, 1, "red")
    with pytest.raises(ValueError):
        MinimaxAgent().search(won, "blue")
    with pytest.raises(ValueError):
        MinimaxAgent(depth=0).search(Board(3), "red")


def test_choose_move_reports_and_leaves_game_board_alone():
    state = GameState(board=Board(3))
    state.board.add_spot("red", 2, 2)
    before = state.board.copy()

    agent = MinimaxAgent(depth=2)
    move = agent.choose_move(state)

    row, col = move
    assert state.board == before
    assert state.board.history_depth() == 1
    assert state.moves == [("blue", row, col)]
    assert state.board.is_legal("blue", row, col)
    assert agent.last_info["move"] == f"{row} {col}"
    assert state.last_status == f"Blue moves {row} {col}."


def test_side_without_legal_moves_gets_static_value():
    # A side with no legal square only arises once the other side owns the
    # whole board; the max/min steps still return the static value.
    blue_board = Board(2)
    red_board = Board(2)
    for r in (1, 2):
        for c in (1, 2):
            blue_board.set(r, c, 1, "blue")
            red_board.set(r, c, 1, "red")

    agent = MinimaxAgent(depth=2)
    assert blue_board.valid_moves("red") == []
    assert agent._max_value(blue_board, 2, True, -inf, inf) == evaluate(blue_board) == -WINNING_VALUE
    assert red_board.valid_moves("blue") == []
    assert agent._min_value(red_board, 2, True, -inf, inf) == evaluate(red_board) == WINNING_VALUE
    assert agent._found_move == -1
    assert blue_board.history_depth() == 0


def test_search_error_message_for_missing_move(monkeypatch):
    agent = MinimaxAgent(depth=1)
    monkeypatch.setattr(Board, "valid_moves", lambda self, side: [])
    with pytest.raises(ValueError, match="No legal moves."):
        agent.search(Board(2), "red")
