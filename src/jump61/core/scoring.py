from __future__ import annotations

from jump61.config import WINNING_VALUE
from jump61.core.board import Board


def evaluate(board: Board) -> int:
    """
    Static value of BOARD from red's point of view: +/-WINNING_VALUE once the
    game is decided, otherwise red squares minus blue squares.
    """
    w = board.winner()
    if w == "red":
        return WINNING_VALUE
    if w == "blue":
        return -WINNING_VALUE
    return board.num_of_side("red") - board.num_of_side("blue")
