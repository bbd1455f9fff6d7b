"""Versioned JSON save/load of a game: fixed grid encoding plus ordered move list."""

import json
import logging
from pathlib import Path

try:
    from ..Board import Cell
    from ..Move import Move
    from ..ai.search_minimax import Difficulty
except ImportError:
    from Board import Cell
    from Move import Move
    from ai.search_minimax import Difficulty


LOGGER = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1
CELL_CODES = {Cell.EMPTY: ".", Cell.BLACK: "B", Cell.WHITE: "W"}
CODE_CELLS = {code: cell for cell, code in CELL_CODES.items()}


def _encode_move(move):
    return [move.x, move.y, CELL_CODES[move.owner]]


def _decode_cell(code, what):
    try:
        cell = CODE_CELLS.get(code)
    except TypeError as exc:
        raise ValueError(f"Invalid {what} code: {code!r}") from exc
    if cell is None:
        raise ValueError(f"Invalid {what} code: {code!r}")
    return cell


def _decode_move(item, size):
    try:
        x, y, code = item
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid move entry: {item!r}") from exc
    owner = _decode_cell(code, "move owner")
    if owner == Cell.EMPTY or not all(isinstance(v, int) and 0 <= v < size for v in (x, y)):
        raise ValueError(f"Invalid move entry: {item!r}")
    return Move(x, y, owner)


def to_dict(game):
    """Return a JSON-serializable snapshot of the game state."""
    board = game.board
    winner = None if game.winner is None else CELL_CODES[game.winner]
    return {
        "version": SNAPSHOT_VERSION,
        "board_size": board.size,
        "grid": ["".join(CELL_CODES[c] for c in row) for row in board.cells],
        "moves": [_encode_move(m) for m in game.history],
        "current_player": CELL_CODES[game.current_player],
        "game_over": game.game_over,
        "winner": winner,
        "winning_line": [_encode_move(m) for m in game.winning_line] if game.winning_line else None,
        "ai_mode": game.ai_mode,
        "difficulty": int(game.difficulty),
        "hint": _encode_move(game.hint_move) if game.hint_move else None,
    }


def from_dict(game, data):
    """Restore `game` in place from a snapshot produced by to_dict."""
    version = data.get("version")
    if version != SNAPSHOT_VERSION:
        raise ValueError(f"Unsupported snapshot version: {version!r}")

    size = data.get("board_size")
    grid = data.get("grid")
    if size != game.board.size:
        raise ValueError(f"Snapshot board_size={size} does not match game board_size={game.board.size}")
    if not isinstance(grid, list) or len(grid) != size or any(not isinstance(row, str) or len(row) != size for row in grid):
        raise ValueError("Snapshot grid has the wrong shape")
    if not isinstance(data.get("moves"), list):
        raise ValueError("Snapshot moves must be a list")
    for field in ("winning_line", "hint"):
        if not isinstance(data.get(field) or [], list):
            raise ValueError(f"Snapshot {field} must be a list")

    cells = [[_decode_cell(code, "grid") for code in row] for row in grid]
    moves = [_decode_move(item, size) for item in data["moves"]]

    # The grid must be exactly the stones named by the move list.
    replay = [[Cell.EMPTY] * size for _ in range(size)]
    for move in moves:
        if replay[move.y][move.x] != Cell.EMPTY:
            raise ValueError(f"Move list plays ({move.x}, {move.y}) twice")
        replay[move.y][move.x] = move.owner
    if replay != cells:
        raise ValueError("Snapshot grid does not match its move list")

    current_player = _decode_cell(data.get("current_player"), "current player")
    if current_player == Cell.EMPTY:
        raise ValueError("Snapshot current player must be a stone")
    winner = data.get("winner")
    winner = None if winner is None else _decode_cell(winner, "winner")
    line = data.get("winning_line")
    winning_line = tuple(_decode_move(item, size) for item in line) if line else None
    hint = data.get("hint")
    hint_move = _decode_move(hint, size) if hint else None
    difficulty = data.get("difficulty", 2)
    if difficulty not in (1, 2, 3):
        raise ValueError(f"Invalid snapshot difficulty: {difficulty!r}")

    game.new_game()
    for move in moves:
        game.board.set(move.x, move.y, move.owner)
        game.history.push(move)
    game.current_player = current_player
    game.game_over = bool(data.get("game_over", False))
    game.winner = winner
    game.winning_line = winning_line
    game.hint_move = hint_move
    game.ai_mode = bool(data.get("ai_mode", False))
    game.difficulty = Difficulty(difficulty)
    return game


def save_game(game, path):
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(to_dict(game), f)
    return path


def load_game(game, path):
    """Load a snapshot file into `game`; raises ValueError on a malformed file."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            LOGGER.warning("Bad JSON in snapshot %s: %s", path, e)
            raise ValueError(f"Snapshot {path} is not valid JSON") from e
    if not isinstance(data, dict):
        raise ValueError(f"Snapshot {path} must contain a JSON object")
    return from_dict(game, data)
