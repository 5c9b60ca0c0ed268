from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List

from jump61.types import Owner


@dataclass
class SideStats:
    moves: int = 0
    time_ms: int = 0
    nodes: int = 0
    cutoffs: int = 0


@dataclass
class GameRecord:
    """Outcome of one headless game. `winner` is None if the move cap was hit."""

    red: str
    blue: str
    size: int
    seed: int
    winner: Owner = None
    plies: int = 0
    stats: Dict[str, SideStats] = field(default_factory=lambda: {"red": SideStats(), "blue": SideStats()})
    # red squares minus blue squares after every ply
    material: List[int] = field(default_factory=list)
