from __future__ import annotations
from typing import Optional

from jump61.types import Move


def parse_move(raw: str, size: int) -> Optional[Move]:
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return None
    parts = s.replace(",", " ").split()
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ValueError("Invalid input. Enter 'row col' or q.")
    row, col = int(parts[0]), int(parts[1])
    if not (1 <= row <= size and 1 <= col <= size):
        raise ValueError(f"Row and column must be between 1 and {size}.")
    return row, col
