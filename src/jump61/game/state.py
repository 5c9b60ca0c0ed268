from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple

from jump61.core.board import Board
from jump61.types import Side


@dataclass(slots=True)
class GameState:
    board: Board
    last_status: str = "Red starts."
    moves: List[Tuple[Side, int, int]] = field(default_factory=list)

    @property
    def current(self) -> Side:
        return self.board.whose_move()

    def report_move(self, side: Side, row: int, col: int) -> None:
        """Record a move announced by a player before it is applied."""
        self.moves.append((side, row, col))
        self.last_status = f"{side.capitalize()} moves {self.board.move_string(row, col)}."
