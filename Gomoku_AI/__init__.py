"""Gomoku_AI package exports."""

from .Board import Board, Cell
from .Move import Move, MoveHistory
from .Gomokugame import Gomokugame
from .Player import Player, HumanPlayer, AIPlayer

# Subpackages for rules, AI search, and helpers
from . import ai, engine, utils
from .ai.search_minimax import Difficulty, choose_move
from .ai.heuristic import evaluate, evaluate_board
from .ai.hint import hint
from .engine.win_detector import WinResult, check_win

__all__ = [
    "Board",
    "Cell",
    "Move",
    "MoveHistory",
    "Gomokugame",
    "Player",
    "HumanPlayer",
    "AIPlayer",
    "Difficulty",
    "choose_move",
    "evaluate",
    "evaluate_board",
    "hint",
    "WinResult",
    "check_win",
    "ai",
    "engine",
    "utils",
]
