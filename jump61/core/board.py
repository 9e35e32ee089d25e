"""Jump61 board: cell storage, move application, chain reactions and undo.

Cells are addressed either by (row, col), both between 1 and size(), or by
square number in row-major order: row 1 holds squares 0 .. size()-1, row 2
holds size() .. 2*size()-1, and so on.

A Board may be given a notifier, a callable taking the board, which is
called whenever the board's contents change.
"""

import logging
from collections import deque
from typing import Callable, List, Optional, Tuple

from jump61.core.cell import Cell, EMPTY_CELL
from jump61.core.side import Side

logger = logging.getLogger(__name__)

Snapshot = Tuple[Cell, ...]


class UnsupportedOperation(TypeError):
    """Raised when a read-only board is asked to change."""


def _nop(board: "Board") -> None:
    pass


class Board:
    def __init__(self, size: int = 6):
        """An N x N board in initial configuration."""
        if size < 1:
            raise ValueError(f"board size must be positive, got {size}")
        self._notifier: Callable[["Board"], None] = _nop
        self._reset(size)

    def _reset(self, size: int):
        self._size = size
        self._cells: List[Cell] = [EMPTY_CELL] * (size * size)
        self._history: List[Snapshot] = [tuple(self._cells)]
        self._current = 0

    def copy(self) -> "Board":
        """Return a board with my contents, a clear undo history and no notifier."""
        board = Board(self._size)
        board._cells = list(self._cells)
        board._history = [tuple(board._cells)]
        return board

    def copy_from(self, other: "Board"):
        """Copy the contents of OTHER into me and clear my undo history."""
        self._reset(other.size())
        self._cells = list(other._cells)
        self._history = [tuple(self._cells)]
        self._announce()

    def clear(self, size: int):
        """Reinitialize to an empty SIZE x SIZE board with no undo history."""
        if size < 1:
            raise ValueError(f"board size must be positive, got {size}")
        self._reset(size)
        self._announce()

    def readonly(self) -> "ConstantBoard":
        return ConstantBoard(self)

    # Geometry

    def size(self) -> int:
        return self._size

    def exists(self, r: int, c: Optional[int] = None) -> bool:
        """True iff (R, C), or square number R when C is omitted, is on the board."""
        if c is None:
            return 0 <= r < self._size * self._size
        return 1 <= r <= self._size and 1 <= c <= self._size

    def row(self, n: int) -> int:
        return n // self._size + 1

    def col(self, n: int) -> int:
        return n % self._size + 1

    def sq_num(self, r: int, c: int) -> int:
        return (r - 1) * self._size + (c - 1)

    def move_string(self, r: int, c: Optional[int] = None) -> str:
        if c is None:
            r, c = self.row(r), self.col(r)
        return f"{r} {c}"

    def neighbors(self, r: int, c: Optional[int] = None) -> int:
        """Number of orthogonal neighbors of (R, C) or of square R."""
        if c is None:
            r, c = self.row(r), self.col(r)
        size = self._size
        return (r > 1) + (c > 1) + (r < size) + (c < size)

    def _index(self, r: int, c: Optional[int] = None) -> Optional[int]:
        if not self.exists(r, c):
            return None
        return r if c is None else self.sq_num(r, c)

    # Queries

    def get(self, r: int, c: Optional[int] = None) -> Optional[Cell]:
        """The cell at (R, C), or at square R; None if there is no such cell."""
        n = self._index(r, c)
        return None if n is None else self._cells[n]

    def is_overfull(self, r: int, c: Optional[int] = None) -> bool:
        n = self._index(r, c)
        return n is not None and self._cells[n].spots > self.neighbors(n)

    def total_pieces(self) -> int:
        return sum(cell.spots for cell in self._cells)

    def num_cells_of(self, side: Side) -> int:
        return sum(1 for cell in self._cells if cell.side is side)

    def num_of_red(self) -> int:
        return self.num_cells_of(Side.RED)

    def num_of_blue(self) -> int:
        return self.num_cells_of(Side.BLUE)

    def whose_move(self) -> Side:
        """The side to move next. On a won board this is the loser."""
        return Side.RED if (self.total_pieces() + self._size) % 2 == 0 else Side.BLUE

    def get_winner(self) -> Optional[Side]:
        """The side owning every cell, or None while the game is undecided."""
        owner = self._cells[0].side
        if owner is Side.NEUTRAL:
            return None
        if all(cell.side is owner for cell in self._cells):
            return owner
        return None

    def is_playable(self, side: Side, r: int, c: Optional[int] = None) -> bool:
        """True iff SIDE may add a spot to the cell, whoever's turn it is."""
        n = self._index(r, c)
        if n is None or side is Side.NEUTRAL:
            return False
        return side.playable_square(self._cells[n].side)

    def is_legal(self, side: Side, r: Optional[int] = None, c: Optional[int] = None) -> bool:
        """With no square, whether it is SIDE's turn; otherwise whether SIDE
        may play there now."""
        if r is None:
            return self.whose_move() is side
        return self.is_playable(side, r, c) and self.whose_move() is side

    @property
    def history(self) -> Tuple[Snapshot, ...]:
        """Undo snapshots up to and including the current position."""
        return tuple(self._history[: self._current + 1])

    # Mutation

    def add_spot(self, side: Side, r: int, c: Optional[int] = None, *,
                 check_turn: bool = True) -> bool:
        """Add a spot from SIDE at (R, C), or at square R, and resolve any
        chain reaction. Illegal moves are ignored. With CHECK_TURN false only
        cell ownership is checked. Returns True iff the move was made."""
        n = self._index(r, c)
        if n is None or not self.is_playable(side, n):
            logger.debug("rejected %s at %s: not playable", side, (r, c))
            return False
        if check_turn and self.whose_move() is not side:
            logger.debug("rejected %s at %s: not %s's turn", side, (r, c), side)
            return False
        self._simple_add(side, n, 1)
        if self.get_winner() is None and self.is_overfull(n):
            self._jump(n)
        self._mark_undo()
        self._announce()
        return True

    def set(self, *args):
        """set(r, c, num, side) or set(n, num, side).

        Set the square to NUM spots of SIDE, or clear it when NUM is 0.
        Replaces the current undo snapshot, so undo() comes back here.
        Raises ValueError for a square that is not on the board."""
        if len(args) == 4:
            r, c, num, side = args
        elif len(args) == 3:
            (r, num, side), c = args, None
        else:
            raise TypeError(f"set() takes 3 or 4 arguments ({len(args)} given)")
        n = self._index(r, c)
        if n is None:
            raise ValueError(f"no such square: {r if c is None else self.move_string(r, c)}")
        self._internal_set(n, num, side)
        self._history[self._current] = tuple(self._cells)
        self._announce()

    def undo(self):
        """Undo one move. Only goes back to the last clear or construction."""
        if self._current > 0:
            self._current -= 1
            self._cells = list(self._history[self._current])
            self._announce()

    def set_notifier(self, notify: Optional[Callable[["Board"], None]]):
        self._notifier = notify or _nop
        self._announce()

    def _announce(self):
        self._notifier(self)

    def _internal_set(self, n: int, num: int, side: Side):
        self._cells[n] = EMPTY_CELL if num == 0 else Cell(side, num)

    def _simple_add(self, side: Side, n: int, delta: int):
        self._internal_set(n, self._cells[n].spots + delta, side)

    def _mark_undo(self):
        del self._history[self._current + 1:]
        self._history.append(tuple(self._cells))
        self._current += 1

    def _jump(self, start: int):
        """Fire overfull squares until none is left or someone has won,
        assuming START is the only square that may be overfull initially."""
        work_queue = deque([start])
        queued = {start}
        fired = 0
        while work_queue:
            n = work_queue.popleft()
            queued.discard(n)
            if self.is_overfull(n):
                self._fire(n)
                fired += 1
            if self.get_winner() is not None:
                break
            for i in range(len(self._cells)):
                if i not in queued and self.is_overfull(i):
                    work_queue.append(i)
                    queued.add(i)
        logger.debug("chain reaction from %s fired %d squares", self.move_string(start), fired)

    def _fire(self, n: int):
        """Move one spot from overfull square N to each of its neighbors."""
        cell = self._cells[n]
        r, c = self.row(n), self.col(n)
        self._internal_set(n, cell.spots - self.neighbors(n), cell.side)
        for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if self.exists(nr, nc):
                self._simple_add(cell.side, self.sq_num(nr, nc), 1)

    # Rendering

    def __str__(self) -> str:
        lines = ["==="]
        for r in range(1, self._size + 1):
            lines.append("   " + "".join(f" {self.get(r, c)}" for c in range(1, self._size + 1)))
        lines.append("===")
        return "\n".join(lines) + "\n"

    def to_display_string(self) -> str:
        """Board with row and column numbers, for people to read."""
        rows = str(self).strip().splitlines()[1:-1]
        out = [f"{i:2d} {line.strip()}" for i, line in enumerate(rows, 1)]
        out.append("  " + "".join(f"{c:3d}" for c in range(1, self._size + 1)))
        return "\n".join(out)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size() == other.size() and self._cells == other._cells

    def __hash__(self) -> int:
        return self.total_pieces()


class ConstantBoard(Board):
    """A read-only view of another board. Queries see the live position."""

    def __init__(self, board: Board):
        self._source = board

    _size = property(lambda self: self._source._size)
    _cells = property(lambda self: self._source._cells)
    _history = property(lambda self: self._source._history)
    _current = property(lambda self: self._source._current)

    def _refuse(self, *args, **kwargs):
        raise UnsupportedOperation("cannot modify a read-only board")

    add_spot = set = undo = clear = copy_from = set_notifier = _refuse
