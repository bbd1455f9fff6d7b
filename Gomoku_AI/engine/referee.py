"""Move validation for the game controller (bounds, occupancy, finished game)."""

try:
    from ..Board import Board
except ImportError:
    from Board import Board


def check_move(move, board: Board, game_over=False):
    """
    Validate a move before it is applied to the board.
    Raises ValueError on invalid moves.
    """
    if game_over:
        raise ValueError("Game is already over")

    try:
        x, y = move
    except (TypeError, ValueError) as exc:
        raise ValueError("Move must be an (x, y) pair") from exc
    if not isinstance(x, int) or not isinstance(y, int):
        raise ValueError("Move coordinates must be integers")
    if not board.in_bounds(x, y):
        raise ValueError("Move out of bounds")
    if not board.is_empty(x, y):
        raise ValueError("Cell already occupied")

    return True
