"""Run-length and openness scoring for single stones and whole positions."""

from pathlib import Path
import yaml

try:
    from ..Board import Cell
except ImportError:
    from Board import Cell


# Default weights; can be overridden by loading config/weights.yaml if desired.
DEFAULT_WEIGHTS = {
    "five": 100000,         # five or more, returned immediately
    "four": 10000,          # four with at least one open end
    "open_three": 1000,
    "closed_three": 100,
    "open_two": 10,
    "closed_two": 5,
}

DIRECTIONS = [(1, 0), (0, 1), (1, 1), (1, -1)]
SCAN_STEPS = 4


def load_weights(path="config/weights.yaml"):
    """Load evaluator weights from YAML; fallback to defaults on error/missing."""
    path = Path(path)
    if not path.is_absolute() and not path.exists():
        # Allow running from repo root (e.g., `python -m Gomoku_AI.main`).
        candidate = Path(__file__).resolve().parents[1] / path
        if candidate.exists():
            path = candidate

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return dict(DEFAULT_WEIGHTS)

    weights = dict(DEFAULT_WEIGHTS)
    for key, value in (data.get("weights") or {}).items():
        if key not in DEFAULT_WEIGHTS:
            raise ValueError(f"Unknown weight '{key}' in {path}")
        weights[key] = int(value)
    return weights


def _scan(board, x, y, dx, dy, owner):
    """
    Walk up to SCAN_STEPS cells from (x, y) (exclusive) along (dx, dy).
    Returns (matching stones, open) where open means the first non-matching
    cell is on the board and empty. Running out of steps leaves the side closed.
    """
    size = board.size
    cells = board.cells
    count = 0
    cx, cy = x, y
    for _ in range(SCAN_STEPS):
        cx += dx
        cy += dy
        if not (0 <= cx < size and 0 <= cy < size):
            return count, False
        v = cells[cy][cx]
        if v == owner:
            count += 1
        elif v == Cell.EMPTY:
            return count, True
        else:
            return count, False
    return count, False


def evaluate(board, x, y, owner, weights=None):
    """
    Score a stone of `owner` at (x, y), assumed to be already placed.
    Axes are summed; a run of five or more short-circuits to the win weight.
    """
    weights = weights or DEFAULT_WEIGHTS
    score = 0
    for dx, dy in DIRECTIONS:
        forward, forward_open = _scan(board, x, y, dx, dy, owner)
        backward, backward_open = _scan(board, x, y, -dx, -dy, owner)
        run = 1 + forward + backward
        open_ends = forward_open + backward_open

        if run >= 5:
            return weights["five"]
        if open_ends == 0:
            continue
        if run == 4:
            score += weights["four"]
        elif run == 3:
            score += weights["open_three"] if open_ends == 2 else weights["closed_three"]
        elif run == 2:
            score += weights["open_two"] if open_ends == 2 else weights["closed_two"]
    return score


def evaluate_board(board, ai_owner=Cell.WHITE, weights=None):
    """Signed advantage for `ai_owner`: its stones add, opponent stones subtract."""
    weights = weights or DEFAULT_WEIGHTS
    total = 0
    cells = board.cells
    for x, y in board.occupied:
        owner = cells[y][x]
        if owner == ai_owner:
            total += evaluate(board, x, y, owner, weights)
        else:
            total -= evaluate(board, x, y, owner, weights)
    return total
