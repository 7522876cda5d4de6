"""XO package exposing game logic, the minimax opponent, and the web application."""

from .ai import MinimaxAI, minimax, select_computer_move
from .game import Outcome, XOGame, evaluate_board
from .ui import app

__all__ = [
    "MinimaxAI",
    "Outcome",
    "XOGame",
    "app",
    "evaluate_board",
    "minimax",
    "select_computer_move",
]
