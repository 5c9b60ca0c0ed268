from __future__ import annotations
import random
from dataclasses import dataclass, field

from jump61.game.state import GameState
from jump61.types import Move


@dataclass(slots=True)
class RandomAgent:
    name: str = "Random AI"
    rng: random.Random = field(default_factory=random.Random)

    def choose_move(self, state: GameState) -> Move:
        board = state.board
        side = state.current
        moves = board.valid_moves(side)
        if not moves:
            raise ValueError("No valid moves.")
        n = self.rng.choice(moves)
        state.report_move(side, board.row(n), board.col(n))
        return board.row(n), board.col(n)
