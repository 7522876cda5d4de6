"""Exhaustive minimax opponent for the 3x3 XO game."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from .game import COMPUTER, EMPTY, HUMAN, Player, evaluate_board

if TYPE_CHECKING:
    from .game import XOGame


# Leaf values, always from O's (the computer's) point of view. Wins are not
# discounted by depth.
SCORES = {HUMAN: -1, COMPUTER: 1}


def minimax(cells: Sequence[str], maximizing: bool) -> Tuple[int, Optional[int]]:
    """Return ``(score, move)`` for the side to move on ``cells``.

    ``maximizing`` means O is to move. Terminal boards yield a ``None`` move.
    Among equally scored moves the lowest cell index wins.
    """
    outcome = evaluate_board(cells)
    if outcome.winner is not None:
        return SCORES[outcome.winner], None
    if outcome.drawn:
        return 0, None

    mark = COMPUTER if maximizing else HUMAN
    best_score: Optional[int] = None
    best_move: Optional[int] = None
    for index, cell in enumerate(cells):
        if cell != EMPTY:
            continue
        child: List[str] = list(cells)
        child[index] = mark
        score, _ = minimax(child, not maximizing)
        if (
            best_score is None
            or (maximizing and score > best_score)
            or (not maximizing and score < best_score)
        ):
            best_score, best_move = score, index

    assert best_score is not None
    return best_score, best_move


def select_computer_move(cells: Sequence[str]) -> int:
    """Best cell for O on an unfinished board."""
    _, move = minimax(cells, True)
    if move is None:
        raise ValueError("No moves available on a finished board")
    return move


@dataclass
class MinimaxAI:
    """Computer opponent. Always plays the maximizing side of the search."""

    player: Player = field(default=COMPUTER, init=False)

    def choose(self, game: "XOGame") -> int:
        if game.current_player != self.player:
            raise ValueError("It is not this AI player's turn")
        return select_computer_move(game.cells)
