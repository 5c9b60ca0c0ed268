from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from math import inf

from jump61.config import SEARCH_DEPTH
from jump61.core.board import Board
from jump61.core.scoring import evaluate
from jump61.game.state import GameState
from jump61.types import Move, Side

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MinimaxAgent:
    """
    Depth-limited minimax with alpha-beta pruning.

    Red maximizes and blue minimizes the static evaluation. Moves are tried
    in increasing square order and the first move reaching the best value
    is kept, so the choice is fully deterministic.
    """

    name: str = "Minimax AI"
    depth: int = SEARCH_DEPTH

    # Stats
    last_info: dict = field(default_factory=dict)

    _nodes: int = 0
    _cutoffs: int = 0
    _found_move: int = -1

    def choose_move(self, state: GameState) -> Move:
        board = state.board
        side = state.current

        n = self.search(board.copy(), side)
        row, col = board.row(n), board.col(n)
        state.report_move(side, row, col)
        return row, col

    def search(self, board: Board, side: Side) -> int:
        """
        Return the square number of the best move for SIDE on BOARD. BOARD is
        used as scratch space and is restored before returning.
        """
        if self.depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {self.depth}.")
        if board.winner() is not None:
            raise ValueError("Game is already over.")

        self._nodes = 0
        self._cutoffs = 0
        self._found_move = -1

        start = time.perf_counter()
        value = self._minimax(board, self.depth, True, side == "red", -inf, inf)
        elapsed = time.perf_counter() - start

        if self._found_move < 0:
            raise ValueError("No legal moves.")

        n = self._found_move
        self.last_info = {
            "depth": self.depth,
            "nodes": self._nodes,
            "cutoffs": self._cutoffs,
            "eval": value,
            "move": board.move_string(board.row(n), board.col(n)),
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.debug(
            "%s (%s) chose %s: eval=%s nodes=%d cutoffs=%d",
            self.name, side, self.last_info["move"], value, self._nodes, self._cutoffs,
        )
        return n

    def _minimax(self, board: Board, depth: int, save_move: bool, maximizing: bool, alpha: float, beta: float) -> float:
        """
        Value of BOARD searched DEPTH plies further, recording the best move
        in _found_move iff SAVE_MOVE. Decided games and depth 0 return the
        static evaluation.
        """
        self._nodes += 1

        if depth == 0 or board.winner() is not None:
            return evaluate(board)
        if maximizing:
            return self._max_value(board, depth, save_move, alpha, beta)
        return self._min_value(board, depth, save_move, alpha, beta)

    def _max_value(self, board: Board, depth: int, save_move: bool, alpha: float, beta: float) -> float:
        moves = board.valid_moves("red")
        if not moves:
            return evaluate(board)

        best = -inf
        for n in moves:
            board.add_spot_at("red", n)
            try:
                v = self._minimax(board, depth - 1, False, False, alpha, beta)
            finally:
                board.undo()

            if v > best:
                best = v
                if save_move:
                    self._found_move = n

            alpha = max(alpha, best)
            if alpha >= beta:
                self._cutoffs += 1
                break

        return best

    def _min_value(self, board: Board, depth: int, save_move: bool, alpha: float, beta: float) -> float:
        moves = board.valid_moves("blue")
        if not moves:
            return evaluate(board)

        best = inf
        for n in moves:
            board.add_spot_at("blue", n)
            try:
                v = self._minimax(board, depth - 1, False, True, alpha, beta)
            finally:
                board.undo()

            if v < best:
                best = v
                if save_move:
                    self._found_move = n

            beta = min(beta, best)
            if alpha >= beta:
                self._cutoffs += 1
                break

        return best
