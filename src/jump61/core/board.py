
# src/jump61/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, List

from jump61.config import DEFAULT_SIZE
from jump61.core.square import EMPTY, Square
from jump61.types import Owner, Side

Notifier = Callable[["Board"], None]

# Cells touched by one move, mapped to their contents before the move.
UndoRecord = Dict[int, Square]

_LETTERS = {"red": "r", "blue": "b", None: "-"}


def _nop(board: "Board") -> None:
    pass


@dataclass(slots=True)
class Board:
    """
    An N x N Jump61 board.

    Squares are addressed either by (row, col), both 1-based, or by a 0-based
    square number in row-major order. Equality compares size and contents
    only; the undo history and the notifier are not part of a board's value.
    """

    width: int = DEFAULT_SIZE
    squares: List[Square] = field(default_factory=list)
    _history: List[UndoRecord] = field(default_factory=list, init=False, repr=False, compare=False)
    _notifier: Notifier = field(default=_nop, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError(f"Board size must be positive, got {self.width}.")
        if not self.squares:
            self.squares = [EMPTY] * (self.width * self.width)
        elif len(self.squares) != self.width * self.width:
            raise ValueError("Square count does not match board size.")

    def copy(self) -> "Board":
        """Independent board with my contents, a clear history and no notifier."""
        return Board(self.width, list(self.squares))

    def clear(self, n: int) -> None:
        """Reinitialize to an empty N x N board and clear the undo history."""
        if n < 1:
            raise ValueError(f"Board size must be positive, got {n}.")
        self.width = n
        self.squares = [EMPTY] * (n * n)
        self._history.clear()
        self._announce()

    # ---------------------------------------------------------------
    # Geometry
    # ---------------------------------------------------------------
    def size(self) -> int:
        return self.width

    def area(self) -> int:
        return self.width * self.width

    def exists(self, r: int, c: int) -> bool:
        return 1 <= r <= self.width and 1 <= c <= self.width

    def exists_index(self, n: int) -> bool:
        return 0 <= n < self.area()

    def row(self, n: int) -> int:
        return n // self.width + 1

    def col(self, n: int) -> int:
        return n % self.width + 1

    def sq_num(self, r: int, c: int) -> int:
        if not self.exists(r, c):
            raise ValueError(f"Square ({r}, {c}) is off the board.")
        return (c - 1) + (r - 1) * self.width

    def move_string(self, r: int, c: int) -> str:
        return f"{r} {c}"

    def neighbors_at(self, r: int, c: int) -> int:
        return (r > 1) + (c > 1) + (r < self.width) + (c < self.width)

    def neighbors(self, n: int) -> int:
        return self.neighbors_at(self.row(n), self.col(n))

    def _adjacent(self, n: int) -> List[int]:
        """Square numbers next to #N, in the order up, down, right, left."""
        r, c, w = self.row(n), self.col(n), self.width
        out = []
        if r > 1:
            out.append(n - w)
        if r < w:
            out.append(n + w)
        if c < w:
            out.append(n + 1)
        if c > 1:
            out.append(n - 1)
        return out

    def _check_index(self, n: int) -> None:
        if not self.exists_index(n):
            raise ValueError(f"Square number {n} is off the board.")

    # ---------------------------------------------------------------
    # Queries
    # ---------------------------------------------------------------
    def get(self, r: int, c: int) -> Square:
        return self.squares[self.sq_num(r, c)]

    def square(self, n: int) -> Square:
        self._check_index(n)
        return self.squares[n]

    def num_pieces(self) -> int:
        return sum(sq.spots for sq in self.squares)

    def num_of_side(self, side: Side) -> int:
        return sum(1 for sq in self.squares if sq.side == side)

    def whose_move(self) -> Side:
        """Red moves when an even number of spots has been placed."""
        return "red" if self.num_pieces() % 2 == 0 else "blue"

    def is_legal(self, side: Side, r: int, c: int) -> bool:
        return self.is_legal_at(side, self.sq_num(r, c))

    def is_legal_at(self, side: Side, n: int) -> bool:
        self._check_index(n)
        owner = self.squares[n].side
        return owner is None or owner == side

    def is_legal_turn(self, side: Side) -> bool:
        return self.whose_move() == side

    def valid_moves(self, side: Side) -> List[int]:
        return [n for n, sq in enumerate(self.squares) if sq.side is None or sq.side == side]

    def winner(self) -> Owner:
        """The side owning every square, or None while the game is undecided."""
        side = self.squares[0].side
        if side is None:
            return None
        if all(sq.side == side for sq in self.squares):
            return side
        return None

    def history_depth(self) -> int:
        return len(self._history)

    # ---------------------------------------------------------------
    # Mutation
    # ---------------------------------------------------------------
    def add_spot(self, side: Side, r: int, c: int) -> None:
        self.add_spot_at(side, self.sq_num(r, c))

    def add_spot_at(self, side: Side, n: int) -> None:
        """Add a spot for SIDE at square #N, then resolve all jumps."""
        if not self.is_legal_at(side, n):
            raise ValueError(f"Illegal move for {side} at {self.move_string(self.row(n), self.col(n))}.")

        record: UndoRecord = {}
        self._history.append(record)
        self._put(n, Square(side, self.squares[n].spots + 1), record)
        self._jump(n, record)
        self._announce()

    def set(self, r: int, c: int, num: int, side: Owner) -> None:
        """
        Put NUM spots of SIDE on square (R, C), bypassing jumps and history.
        Zero spots always leaves the square unowned.
        """
        n = self.sq_num(r, c)
        self.squares[n] = Square(side if num > 0 else None, num)
        self._announce()

    def undo(self) -> None:
        """Revert the most recent add_spot."""
        if not self._history:
            raise ValueError("Cannot undo: no moves in history.")
        record = self._history.pop()
        for n, prior in record.items():
            self.squares[n] = prior

    def _put(self, n: int, sq: Square, record: UndoRecord) -> None:
        if n not in record:
            record[n] = self.squares[n]
        self.squares[n] = sq

    def _overfull(self, n: int) -> bool:
        return self.squares[n].spots > self.neighbors(n)

    def _jump(self, start: int, record: UndoRecord) -> None:
        """
        Redistribute overfull squares until none remain or the game is won,
        assuming START is the only square that might be overfull initially.

        Every square that receives a spot is pushed on the work stack; squares
        no longer overfull when popped are skipped.
        """
        if not self._overfull(start):
            return

        whose = self.squares[start].side
        work = [start]

        while work:
            n = work.pop()

            spots = self.squares[n].spots
            if spots <= self.neighbors(n):
                continue

            for nb in self._adjacent(n):
                spots -= 1
                self._put(nb, Square(whose, self.squares[nb].spots + 1), record)
                work.append(nb)

            self._put(n, Square(whose, spots), record)

            if self.winner() is not None:
                return

    # ---------------------------------------------------------------
    # Observers
    # ---------------------------------------------------------------
    def set_notifier(self, notify: Notifier) -> None:
        """Replace my change callback and call it once with the current state."""
        self._notifier = notify
        self._announce()

    def _announce(self) -> None:
        self._notifier(self)

    # ---------------------------------------------------------------
    # Text forms
    # ---------------------------------------------------------------
    def __str__(self) -> str:
        lines = ["==="]
        for r in range(1, self.width + 1):
            cells = []
            for c in range(1, self.width + 1):
                sq = self.get(r, c)
                cells.append(f"{sq.spots}{_LETTERS[sq.side]}")
            lines.append("    " + " ".join(cells))
        lines.append("===")
        return "\n".join(lines)

    def to_display_string(self) -> str:
        """Dump with 1-based row numbers on the left and column numbers below."""
        lines = str(self).splitlines()
        out = [f"{i:2d} {lines[i].strip()}" for i in range(1, len(lines) - 1)]
        out.append("  " + "".join(f"{c:3d}" for c in range(1, self.width + 1)))
        return "\n".join(out)
