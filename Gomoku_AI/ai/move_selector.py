"""Single-ply cell selection: centre-distance tie-break and greedy best-cell scan."""

try:
    from ..Move import Move
except ImportError:
    from Move import Move


def center_distance(board, x: int, y: int) -> int:
    """Manhattan distance from (x, y) to the board centre."""
    center = board.center
    return abs(x - center) + abs(y - center)


def closer_to_center(board, x: int, y: int, best) -> bool:
    """True if (x, y) is strictly closer to the centre than `best` (None counts as farthest)."""
    if best is None:
        return True
    return center_distance(board, x, y) < center_distance(board, best[0], best[1])


def greedy_cell(board, score_fn, threshold=0):
    """
    Scan empty cells row-major and return ((x, y), score) of the best one.
    A cell must beat `threshold` strictly; equal scores keep the cell closer to
    the centre, then the first one scanned. Returns (None, threshold) when
    no cell clears the threshold.
    """
    best = None
    best_score = threshold
    for x, y in board.empty_cells():
        score = score_fn(x, y)
        if score > best_score or (
            best is not None and score == best_score and closer_to_center(board, x, y, best)
        ):
            best = (x, y)
            best_score = score
    return best, best_score


def fallback_move(board, color):
    """Empty cell closest to the centre (first in row-major order on ties)."""
    best = None
    for x, y in board.empty_cells():
        if closer_to_center(board, x, y, best):
            best = (x, y)
    if best is None:
        return None
    return Move(best[0], best[1], color)
