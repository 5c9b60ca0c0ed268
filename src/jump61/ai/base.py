from __future__ import annotations
from typing import Protocol

from jump61.game.state import GameState
from jump61.types import Move


class Agent(Protocol):
    name: str

    def choose_move(self, state: GameState) -> Move:
        ...
