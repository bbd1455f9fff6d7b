"""Three-tier move selection: greedy, and full-width minimax with alpha-beta pruning."""

import logging
import random
import time
from enum import IntEnum

from . import heuristic
from . import move_selector

try:
    from ..Board import Cell
    from ..Move import Move
except ImportError:
    from Board import Cell
    from Move import Move


LOGGER = logging.getLogger(__name__)

INF = 10 ** 9


class Difficulty(IntEnum):
    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def label(self):
        return self.name.capitalize()


# Plies searched below the root trial placement.
SEARCH_DEPTH = {
    Difficulty.EASY: 0,
    Difficulty.MEDIUM: 1,
    Difficulty.HARD: 2,
}


class MinimaxSearcher:
    """Encapsulates the state and logic for one move search."""

    def __init__(self, color=Cell.WHITE, difficulty=Difficulty.MEDIUM, rng=None, weights=None, prune=True, stats=None):
        self.color = Cell(color)
        self.opp = self.color.opponent
        self.difficulty = Difficulty(difficulty)
        self.depth = SEARCH_DEPTH[self.difficulty]
        self.rng = rng if rng is not None else random.Random()
        self.weights = weights or heuristic.DEFAULT_WEIGHTS
        self.prune = prune
        self.stats_list = stats

        # Internal state
        self.node_counter = 0
        self.start_time = None
        self.root_score = None

    def choose_move(self, board, history=None):
        """Return the Move for self.color, or None when the board is full."""
        if board.is_full():
            return None

        self.start_time = time.time()
        self.node_counter = 0

        if self.difficulty == Difficulty.EASY:
            best_move = self._choose_greedy(board)
        elif self.difficulty == Difficulty.MEDIUM:
            best_move = self._choose_deterministic(board, history)
        else:
            best_move = self._choose_randomized(board, history)

        if self.stats_list is not None:
            self._record_stats()

        return best_move

    def _choose_greedy(self, board):
        """Best attack-or-block cell with no lookahead."""
        def attack_or_block(x, y):
            self.node_counter += 1
            return max(
                heuristic.evaluate(board, x, y, self.color, self.weights),
                heuristic.evaluate(board, x, y, self.opp, self.weights),
            )

        best, best_score = move_selector.greedy_cell(board, attack_or_block, threshold=0)
        if best is None:
            # Nothing scores above zero (e.g. an empty board): take the centre-most cell.
            return move_selector.fallback_move(board, self.color)
        self.root_score = best_score
        return Move(best[0], best[1], self.color)

    def _root_scores(self, board, history):
        """Yield ((x, y), score) for every trial placement of self.color."""
        for x, y in board.empty_cells():
            with board.simulate(x, y, self.color, history=history):
                score = self.minimax(self.depth, False, -INF, INF, board)
            yield (x, y), score

    def _choose_deterministic(self, board, history):
        best = None
        best_score = -INF
        for (x, y), score in self._root_scores(board, history):
            if score > best_score or (score == best_score and move_selector.closer_to_center(board, x, y, best)):
                best = (x, y)
                best_score = score
        self.root_score = best_score
        return Move(best[0], best[1], self.color)

    def _choose_randomized(self, board, history):
        best_moves = []
        best_score = -INF
        for pos, score in self._root_scores(board, history):
            if score > best_score:
                best_score = score
                best_moves = [pos]
            elif score == best_score:
                best_moves.append(pos)
        self.root_score = best_score
        x, y = self.rng.choice(best_moves)
        return Move(x, y, self.color)

    def minimax(self, depth, maximizing, alpha, beta, board):
        """
        Score `board` for self.color looking `depth` plies ahead.
        Every speculative stone is removed again before this returns.
        """
        self.node_counter += 1
        if depth == 0:
            return heuristic.evaluate_board(board, self.color, self.weights)

        node_color = self.color if maximizing else self.opp
        best_score = -INF if maximizing else INF
        expanded = False

        for x, y in board.empty_cells():
            expanded = True
            with board.simulate(x, y, node_color):
                score = self.minimax(depth - 1, not maximizing, alpha, beta, board)

            if maximizing:
                best_score = max(best_score, score)
                alpha = max(alpha, best_score)
            else:
                best_score = min(best_score, score)
                beta = min(beta, best_score)

            if self.prune and beta <= alpha:
                break

        if not expanded:
            # Full board: nothing to expand, fall back to the static evaluation.
            return heuristic.evaluate_board(board, self.color, self.weights)
        return best_score

    def _record_stats(self):
        total_time = max(time.time() - self.start_time, 1e-9)
        entry = {
            "color": int(self.color),
            "difficulty": int(self.difficulty),
            "depth": self.depth,
            "nodes": self.node_counter,
            "time": total_time,
            "nps": self.node_counter / total_time,
        }
        self.stats_list.append(entry)
        LOGGER.debug("search stats: %s", entry)


def choose_move(board, history=None, difficulty=Difficulty.MEDIUM, color=Cell.WHITE, rng=None, weights=None, prune=True, stats=None):
    """
    Public function to start a search. Instantiates and uses MinimaxSearcher.
    `board` and `history` are returned to the caller unchanged.
    """
    searcher = MinimaxSearcher(
        color=color,
        difficulty=difficulty,
        rng=rng,
        weights=weights,
        prune=prune,
        stats=stats,
    )
    return searcher.choose_move(board, history)
