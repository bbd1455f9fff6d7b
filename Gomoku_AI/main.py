"""Entry point for Gomoku AI games. Load config, wire players, start Gomokugame."""

import random

import yaml
from pathlib import Path

try:
    from utils.cli import parse_args
    from utils.logger import configure, log_event
    from Board import Cell
    from Gomokugame import Gomokugame
    from Player import AIPlayer, HumanPlayer
    from ai import heuristic
    from engine import snapshot
except ImportError:
    from Gomoku_AI.utils.cli import parse_args
    from Gomoku_AI.utils.logger import configure, log_event
    from Gomoku_AI.Board import Cell
    from Gomoku_AI.Gomokugame import Gomokugame
    from Gomoku_AI.Player import AIPlayer, HumanPlayer
    from Gomoku_AI.ai import heuristic
    from Gomoku_AI.engine import snapshot


PROJECT_DIR = Path(__file__).resolve().parent
STONES = {Cell.EMPTY: ".", Cell.BLACK: "X", Cell.WHITE: "O"}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `Gomoku_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def render_text(game):
    """Print the board; the last move is bracketed, winning stones are marked '*'."""
    board = game.board
    last = game.last_move
    line = {(m.x, m.y) for m in game.winning_line} if game.winning_line else set()
    hint = game.hint_move

    print("    " + "".join(f"{x:>3}" for x in range(board.size)))
    for y in range(board.size):
        row = []
        for x in range(board.size):
            mark = STONES[board.cells[y][x]]
            if (x, y) in line:
                mark = "*"
            elif hint is not None and (x, y) == (hint.x, hint.y):
                mark = "?"
            if last is not None and (x, y) == (last.x, last.y):
                row.append(f"[{mark}]")
            else:
                row.append(f" {mark} ")
        print(f"{y:>3} " + "".join(row))

    if game.game_over:
        if game.winner == Cell.EMPTY:
            print("Draw!")
        else:
            print(f"{game.winner.label} wins!")
    else:
        print(f"{game.current_player.label} to play")


def build_players(mode, difficulty, rng, weights):
    def ai(color):
        return AIPlayer(color, difficulty=difficulty, rng=rng, weights=weights)

    if mode == "human-vs-ai":
        return HumanPlayer(Cell.BLACK), ai(Cell.WHITE)
    if mode == "ai-vs-human":
        return ai(Cell.BLACK), HumanPlayer(Cell.WHITE)
    if mode == "ai-vs-ai":
        return ai(Cell.BLACK), ai(Cell.WHITE)
    if mode == "human-vs-human":
        return HumanPlayer(Cell.BLACK), HumanPlayer(Cell.WHITE)
    raise ValueError(f"Unsupported mode: {mode}")


def resume_game(game, path, mode, difficulty=None):
    """
    Load a saved game into `game`, falling back to a new game on a bad file.
    The running `mode` decides ai_mode; an explicit `difficulty` overrides the saved one.
    """
    try:
        snapshot.load_game(game, resolve_project_path(path))
    except (OSError, ValueError) as exc:
        log_event(f"Could not load {path}: {exc}; starting a new game")
        game.new_game()
        return False

    game.ai_mode = mode == "human-vs-ai"
    if difficulty is not None:
        game.set_difficulty(difficulty)
    log_event(f"Loaded game from {path}")
    return True


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    configure(args.log_level or settings.get("log_level", "WARNING"))
    board_size = args.board_size or settings.get("board_size", 15)
    difficulty = args.difficulty or settings.get("difficulty", 2)
    mode = args.mode or settings.get("mode", "human-vs-ai")
    seed = args.seed if args.seed is not None else settings.get("seed")
    undo_limit = settings.get("undo_limit", 10)
    weights = heuristic.load_weights(args.weights or settings.get("weights_path", "config/weights.yaml"))

    rng = random.Random(seed)
    game = Gomokugame(
        board_size=board_size,
        ai_mode=(mode == "human-vs-ai"),
        difficulty=difficulty,
        undo_limit=undo_limit,
        rng=rng,
        weights=weights,
        logger=log_event,
    )

    if args.load:
        resume_game(game, args.load, mode, difficulty=args.difficulty)

    black, white = build_players(mode, game.difficulty, rng, weights)
    result = game.play(black, white, renderer=render_text)
    outcome = {Cell.BLACK: "Black wins", Cell.WHITE: "White wins", Cell.EMPTY: "Draw"}
    print(outcome.get(result, "Unknown result"))
    return result


if __name__ == "__main__":
    main()
