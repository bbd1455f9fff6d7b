"""Single-ply hint for the human player: no search, evaluator only."""

from . import heuristic
from . import move_selector

try:
    from ..Move import Move
except ImportError:
    from Move import Move


def hint(board, for_player, weights=None):
    """
    Return the Move with the strictly greatest positive score for `for_player`,
    ties broken by distance to the centre. Returns None when every empty cell
    scores 0 (for instance on an empty board).
    """
    best, _ = move_selector.greedy_cell(
        board,
        lambda x, y: heuristic.evaluate(board, x, y, for_player, weights),
        threshold=0,
    )
    if best is None:
        return None
    return Move(best[0], best[1], for_player)
