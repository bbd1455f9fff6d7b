"""Board state container: a raw N x N grid of tri-state cells."""

from contextlib import contextmanager
from enum import IntEnum

try:
    from .Move import Move
except ImportError:
    from Move import Move


class Cell(IntEnum):
    # -1 (black), 0 (empty), 1 (white); -cell flips a stone to its opponent
    BLACK = -1
    EMPTY = 0
    WHITE = 1

    @property
    def opponent(self):
        if self is Cell.EMPTY:
            raise ValueError("empty cell has no opponent")
        return Cell(-self.value)

    @property
    def label(self):
        return {Cell.BLACK: "Black", Cell.WHITE: "White", Cell.EMPTY: "Empty"}[self]


class Board:
    def __init__(self, size=15):
        self.size = size
        self.cells = [[Cell.EMPTY] * size for _ in range(size)]
        self.occupied = set()

    def reset(self):
        self.cells = [[Cell.EMPTY] * self.size for _ in range(self.size)]
        self.occupied.clear()

    def get(self, x, y):
        return self.cells[y][x]

    def set(self, x, y, cell):
        """Overwrite (x, y) unconditionally; callers own bounds and occupancy checks."""
        self.cells[y][x] = cell
        if cell == Cell.EMPTY:
            self.occupied.discard((x, y))
        else:
            self.occupied.add((x, y))

    def is_full(self):
        return len(self.occupied) == self.size * self.size

    @property
    def stone_count(self):
        return len(self.occupied)

    @property
    def center(self):
        return (self.size - 1) // 2

    def in_bounds(self, x, y):
        return 0 <= x < self.size and 0 <= y < self.size

    def is_empty(self, x, y):
        return self.in_bounds(x, y) and self.cells[y][x] == Cell.EMPTY

    def empty_cells(self):
        """Yield empty (x, y) in row-major order."""
        for y in range(self.size):
            row = self.cells[y]
            for x in range(self.size):
                if row[x] == Cell.EMPTY:
                    yield x, y

    @contextmanager
    def simulate(self, x, y, cell, history=None):
        """
        Speculatively place `cell` at (x, y) for the duration of the block.
        The previous content (and the history entry, when a history is given)
        is restored on every exit path, including break and exceptions.
        """
        previous = self.cells[y][x]
        self.set(x, y, cell)
        pushed = False
        try:
            if history is not None:
                history.push(Move(x, y, cell))
                pushed = True
            yield
        finally:
            if pushed:
                history.pop()
            self.set(x, y, previous)
