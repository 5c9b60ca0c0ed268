from __future__ import annotations
from dataclasses import dataclass

from jump61.types import Owner


@dataclass(frozen=True, slots=True)
class Square:
    """Contents of one board square: an owner and a number of spots.

    An empty square (0 spots) is always unowned, and a square with spots
    always belongs to red or blue.
    """

    side: Owner = None
    spots: int = 0

    def __post_init__(self) -> None:
        if self.spots < 0:
            raise ValueError(f"Spot count must be non-negative, got {self.spots}.")
        if (self.spots == 0) != (self.side is None):
            raise ValueError(f"Invalid square: {self.spots} spots owned by {self.side}.")


EMPTY = Square()
