"""Move record and the bounded LIFO history used for undo and last-move marking."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    x: int
    y: int
    owner: int  # Cell of the player who made the move

    @property
    def pos(self):
        return (self.x, self.y)


class MoveHistory:
    """Ordered stack of applied moves, capped at size * size entries."""

    def __init__(self, size=15):
        self.capacity = size * size
        self._moves = []

    def push(self, move):
        if len(self._moves) >= self.capacity:
            raise ValueError("move history is full")
        self._moves.append(move)

    def pop(self):
        if not self._moves:
            raise IndexError("pop from empty move history")
        return self._moves.pop()

    def peek(self):
        """Most recent move, or None when nothing has been played."""
        return self._moves[-1] if self._moves else None

    def clear(self):
        self._moves.clear()

    def __len__(self):
        return len(self._moves)

    def __iter__(self):
        return iter(self._moves)

    def __bool__(self):
        return bool(self._moves)
