"""Abstract player interface for human or AI controllers."""

try:
    from ai import search_minimax
    from engine import snapshot
except ImportError:
    from Gomoku_AI.ai import search_minimax
    from Gomoku_AI.engine import snapshot


class Player:
    def __init__(self, color):
        self.color = color

    def next_move(self, game):
        """Return (x, y) for the next move, or None after acting on the game directly."""
        raise NotImplementedError


class HumanPlayer(Player):
    """
    Text-input player. Besides 'x y' it understands the commands
    undo, hint, save PATH and resign, which act on the game and return None.
    """

    PROMPT = "Enter move as 'x y' (0-indexed), or undo / hint / save PATH / resign: "

    def __init__(self, color, input_fn=input):
        super().__init__(color)
        self.input_fn = input_fn

    def next_move(self, game):
        raw = self.input_fn(self.PROMPT).strip()
        command, _, arg = raw.partition(" ")
        command = command.lower()

        if command == "undo":
            game.undo_turn()
            return None
        if command == "hint":
            game.show_hint()
            return None
        if command == "resign":
            game.surrender()
            return None
        if command == "save":
            if not arg.strip():
                raise ValueError("save needs a file path")
            try:
                snapshot.save_game(game, arg.strip())
            except OSError as exc:
                raise ValueError(f"Could not save game: {exc}") from exc
            game.logger(f"Game saved to {arg.strip()}")
            return None

        try:
            x_str, y_str = raw.split()
            return int(x_str), int(y_str)
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc


class AIPlayer(Player):
    def __init__(self, color, difficulty=search_minimax.Difficulty.MEDIUM, rng=None, weights=None):
        super().__init__(color)
        self.difficulty = difficulty
        self.rng = rng
        self.weights = weights
        self.stats = []

    def next_move(self, game):
        move = search_minimax.choose_move(
            game.board,
            game.history,
            difficulty=self.difficulty,
            color=self.color,
            rng=self.rng,
            weights=self.weights,
            stats=self.stats,
        )
        if move is None:
            raise ValueError("No empty cell left for AI player")
        return move.x, move.y
