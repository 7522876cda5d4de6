"""Core rules and turn orchestration for a 3x3 XO (tic-tac-toe) game."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from .ai import MinimaxAI

logger = logging.getLogger(__name__)

Player = str  # "X" or "O"

EMPTY = " "
HUMAN: Player = "X"
COMPUTER: Player = "O"

WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


# ---------- Terminal-state detection ----------


@dataclass(frozen=True)
class Outcome:
    winner: Optional[Player] = None
    drawn: bool = False

    @property
    def finished(self) -> bool:
        return self.winner is not None or self.drawn


IN_PROGRESS = Outcome()


def evaluate_board(cells: Sequence[str]) -> Outcome:
    """Return the winner, a draw, or ``IN_PROGRESS`` for ``cells``."""
    for a, b, c in WINNING_LINES:
        v = cells[a]
        if v != EMPTY and v == cells[b] == cells[c]:
            return Outcome(winner=v)
    if all(c != EMPTY for c in cells):
        return Outcome(drawn=True)
    return IN_PROGRESS


def other(player: Player) -> Player:
    return COMPUTER if player == HUMAN else HUMAN


# ---------- Game ----------


@dataclass
class XOGame:
    """Board, side to move and opponent mode for a single game.

    ``play`` is the only entry point for human placements and silently
    ignores anything illegal. Whenever the board, turn or mode changes and
    it is O's turn in bot mode on an unfinished board, the computer move
    is computed and applied before control returns to the caller.
    """

    cells: List[str] = field(default_factory=lambda: [EMPTY] * 9)
    current_player: Player = HUMAN
    bot_mode: bool = True
    ai: Optional["MinimaxAI"] = field(default=None, repr=False)
    move_log: List[Tuple[Player, int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.ai is None:
            from .ai import MinimaxAI

            self.ai = MinimaxAI()

    # ---- API used by UI & AI ----

    @property
    def outcome(self) -> Outcome:
        return evaluate_board(self.cells)

    @property
    def winner(self) -> Optional[Player]:
        return self.outcome.winner

    @property
    def drawn(self) -> bool:
        return self.outcome.drawn

    def available_moves(self) -> List[int]:
        if self.outcome.finished:
            return []
        return [i for i, c in enumerate(self.cells) if c == EMPTY]

    def computer_to_move(self) -> bool:
        return (
            self.bot_mode
            and self.current_player == COMPUTER
            and not self.outcome.finished
        )

    def play(self, index: int) -> bool:
        """Place the current player's mark at ``index`` on behalf of a human.

        Returns False (and changes nothing) when the cell is taken or out of
        range, the game is over, or the computer is due to move.
        """
        if self.computer_to_move():
            logger.debug("Ignoring move %s: computer is to move", index)
            return False
        if not self._place(index, self.current_player):
            return False
        self._after_transition()
        return True

    def reset(self) -> None:
        """Empty the board and give X the move; ``bot_mode`` is kept."""
        self.cells = [EMPTY] * 9
        self.current_player = HUMAN
        self.move_log.clear()

    def toggle_mode(self) -> None:
        # Board and turn are left as they are, even mid-game.
        self.bot_mode = not self.bot_mode
        self._after_transition()

    def clone(self) -> "XOGame":
        return XOGame(
            cells=self.cells.copy(),
            current_player=self.current_player,
            bot_mode=self.bot_mode,
            ai=self.ai,
            move_log=list(self.move_log),
        )

    # ---- helpers ----

    def _place(self, index: int, player: Player) -> bool:
        if not 0 <= index < len(self.cells):
            logger.debug("Ignoring move %s: out of range", index)
            return False
        if self.cells[index] != EMPTY:
            logger.debug("Ignoring move %s: cell occupied", index)
            return False
        if self.outcome.finished:
            logger.debug("Ignoring move %s: game already finished", index)
            return False
        self.cells[index] = player
        self.move_log.append((player, index))
        self.current_player = other(player)
        return True

    def _after_transition(self) -> None:
        if not self.computer_to_move():
            return
        assert self.ai is not None
        index = self.ai.choose(self)
        logger.info("Computer plays %s at %d", COMPUTER, index)
        self._place(index, COMPUTER)
