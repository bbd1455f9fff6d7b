"""Five-or-more win detection and draw checks (overlines count as wins)."""

from typing import NamedTuple, Optional, Tuple

try:
    from ..Board import Board, Cell
    from ..Move import Move
except ImportError:
    from Board import Board, Cell
    from Move import Move


WIN_LENGTH = 5
DIRECTIONS = [(1, 0), (0, 1), (1, 1), (1, -1)]


class WinResult(NamedTuple):
    won: bool
    line: Optional[Tuple[Move, ...]] = None


NO_WIN = WinResult(False, None)


def _count_dir(board: Board, x: int, y: int, dx: int, dy: int, color: int) -> int:
    """Count contiguous stones of color from (x,y) (exclusive) in (dx,dy)."""
    count = 0
    cx, cy = x + dx, y + dy
    while board.in_bounds(cx, cy) and board.cells[cy][cx] == color:
        count += 1
        cx += dx
        cy += dy
    return count


def check_win(board: Board, x: int, y: int) -> WinResult:
    """Check for 5+ in any direction through the stone at (x, y)."""
    color = board.cells[y][x]
    if color == Cell.EMPTY:
        return NO_WIN
    owner = Cell(color)

    for dx, dy in DIRECTIONS:
        forward = _count_dir(board, x, y, dx, dy, owner)
        backward = _count_dir(board, x, y, -dx, -dy, owner)
        if 1 + forward + backward >= WIN_LENGTH:
            # Full run, negative end first.
            line = tuple(
                Move(x + dx * i, y + dy * i, owner)
                for i in range(-backward, forward + 1)
            )
            return WinResult(True, line)
    return NO_WIN


def is_draw(board: Board, x: int, y: int) -> bool:
    """Draw only when the last move did not win and no empty cell remains."""
    return not check_win(board, x, y).won and board.is_full()
