# src/jump61/types.py

from __future__ import annotations
from typing import Literal, Optional, Tuple

Side = Literal["red", "blue"]
Owner = Optional[Side]      # None == unowned square
Move = Tuple[int, int]      # (row, col), both 1-based


def other(side: Side) -> Side:
    return "blue" if side == "red" else "red"
