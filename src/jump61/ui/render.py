from __future__ import annotations
import re

from jump61.config import CLEAR_SCREEN
from jump61.core.board import Board
from jump61.ui.colors import c, BOLD, DIM, FG_BLUE, FG_CYAN, FG_GRAY, FG_RED

_CELL = re.compile(r"\b(\d+)([rb-])")
_CELL_COLORS = {"r": FG_RED, "b": FG_BLUE, "-": FG_GRAY}


def _color_cell(m: re.Match) -> str:
    return c(m.group(0), _CELL_COLORS[m.group(2)])


def colorize(display: str) -> str:
    """Color the `<spots><side>` cells of a board display string."""
    return _CELL.sub(_color_cell, display)


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(board: Board, status: str = "") -> None:
    clear_screen()

    print(c("JUMP61", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    print(colorize(board.to_display_string()))
    print(c(f"   Enter 'row col' (1-{board.size()}) to add a spot. Enter q to quit.", DIM))
