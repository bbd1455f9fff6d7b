"""Game controller: turn management, undo, hints, and end-of-game state."""

try:
    from Board import Board, Cell
    from Move import Move, MoveHistory
    from engine import referee, win_detector
    from ai import search_minimax
    from ai.hint import hint
except ImportError:
    from Gomoku_AI.Board import Board, Cell
    from Gomoku_AI.Move import Move, MoveHistory
    from Gomoku_AI.engine import referee, win_detector
    from Gomoku_AI.ai import search_minimax
    from Gomoku_AI.ai.hint import hint


Difficulty = search_minimax.Difficulty
UNDO_LIMIT = 10
AI_COLOR = Cell.WHITE  # in ai_mode the human plays black and moves first


class Gomokugame:
    def __init__(self, board_size=15, ai_mode=False, difficulty=Difficulty.MEDIUM, undo_limit=UNDO_LIMIT, rng=None, weights=None, logger=print):
        self.board = Board(size=board_size)
        self.history = MoveHistory(size=board_size)
        self.ai_mode = ai_mode
        self.difficulty = Difficulty(difficulty)
        self.undo_limit = undo_limit
        self.rng = rng
        self.weights = weights
        self.logger = logger
        self.search_stats = []
        self.new_game()

    def new_game(self):
        self.board.reset()
        self.history.clear()
        self.current_player = Cell.BLACK
        self.game_over = False
        self.winner = None  # Cell of the winner, Cell.EMPTY for a draw
        self.winning_line = None
        self.hint_move = None

    @property
    def last_move(self):
        return self.history.peek()

    def is_ai_turn(self):
        return self.ai_mode and self.current_player == AI_COLOR

    def _apply(self, move):
        """Write a validated move, then settle win/draw or pass the turn."""
        self.board.set(move.x, move.y, move.owner)
        self.history.push(move)
        self.hint_move = None
        self.logger(f"Move {len(self.history)}: {move.owner.label} ({move.x}, {move.y})")

        result = win_detector.check_win(self.board, move.x, move.y)
        if result.won:
            self.game_over = True
            self.winner = move.owner
            self.winning_line = result.line
            self.logger(f"Winner: {move.owner.label}")
        elif self.board.is_full():
            self.game_over = True
            self.winner = Cell.EMPTY
            self.logger("Result: Draw (board full)")
        else:
            self.current_player = self.current_player.opponent
        return result

    def place_stone(self, x, y):
        """Place the current player's stone; raises ValueError on an illegal move."""
        referee.check_move((x, y), self.board, game_over=self.game_over)
        return self._apply(Move(x, y, self.current_player))

    def make_ai_move(self):
        """Let the search pick and play a move for the current player."""
        if self.game_over:
            return None
        move = search_minimax.choose_move(
            self.board,
            self.history,
            difficulty=self.difficulty,
            color=self.current_player,
            rng=self.rng,
            weights=self.weights,
            stats=self.search_stats,
        )
        if move is None:
            return None
        self._apply(move)
        return move

    def undo(self, steps=1):
        """Take back up to `steps` moves (bounded by history and undo_limit)."""
        if not self.history:
            self.logger("Nothing to undo")
            return 0

        steps = min(steps, len(self.history), self.undo_limit)
        for _ in range(steps):
            move = self.history.pop()
            self.board.set(move.x, move.y, Cell.EMPTY)
            self.current_player = move.owner

        self.game_over = False
        self.winner = None
        self.winning_line = None
        self.hint_move = None
        self.logger(f"Undid {steps} move(s); {self.current_player.label} to play")
        return steps

    def undo_turn(self):
        """Undo button: in ai_mode also withdraw the AI's reply so the human moves again."""
        last = self.history.peek()
        if self.ai_mode and not self.is_ai_turn() and last is not None and last.owner == AI_COLOR and len(self.history) >= 2:
            return self.undo(2)
        return self.undo(1)

    def surrender(self):
        if self.game_over:
            self.logger("Game is already over")
            return False
        self.game_over = True
        self.winner = self.current_player.opponent
        self.logger(f"{self.current_player.label} resigns; {self.winner.label} wins")
        return True

    def set_difficulty(self, level):
        if level not in (1, 2, 3):
            raise ValueError("Difficulty must be between 1 and 3")
        self.difficulty = Difficulty(level)
        self.logger(f"AI difficulty set to {difficulty_name(level)}")

    def set_ai_mode(self, enabled):
        self.ai_mode = bool(enabled)
        self.logger("Mode: human vs AI (you play Black)" if self.ai_mode else "Mode: human vs human")
        self.new_game()

    def show_hint(self):
        if self.game_over:
            self.logger("Game is over; no hint available")
            return None
        if self.is_ai_turn():
            self.logger("It is the AI's turn; no hint available")
            return None
        move = hint(self.board, self.current_player, self.weights)
        if move is not None:
            self.hint_move = move
            self.logger(f"Hint for {move.owner.label}: ({move.x}, {move.y})")
        return move

    def play(self, black_player, white_player, renderer=None):
        """Run a single game. Returns Cell.BLACK, Cell.WHITE, or Cell.EMPTY (draw)."""
        players = {Cell.BLACK: black_player, Cell.WHITE: white_player}
        while not self.game_over:
            if renderer:
                renderer(self)
            player = players[self.current_player]
            try:
                move = player.next_move(self)
                if move is None:
                    continue  # the player acted on the game directly (undo, hint, ...)
                self.place_stone(*move)
            except ValueError as exc:
                self.logger(f"Invalid move by {self.current_player.label}: {exc}")

        if renderer:
            renderer(self)
        return self.winner


def difficulty_name(level):
    return Difficulty(level).label
