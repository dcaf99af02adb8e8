"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, Sequence, Tuple
from dataclasses import dataclass
from .game_state import GameState, Mark


class OutcomeStatus(Enum):
    """Where a game stands."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating a board.

    winner and line are only set for a WIN.
    """
    status: OutcomeStatus
    winner: Optional[Mark] = None
    line: Optional[Tuple[int, int, int]] = None

    @property
    def is_over(self) -> bool:
        return self.status != OutcomeStatus.IN_PROGRESS


IN_PROGRESS = Outcome(OutcomeStatus.IN_PROGRESS)
DRAW = Outcome(OutcomeStatus.DRAW)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines as cell indices, checked in this order
    WINNING_LINES = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def evaluate(self, board: Sequence[Optional[Mark]]) -> Outcome:
        """
        Classify a board as a win, a draw or still in progress.

        Args:
            board: 9 cells, None for empty.

        Returns:
            Win(mark) for the first completed line, Draw if the board is
            full, InProgress otherwise.
        """
        line = self.get_winning_line(board)
        if line is not None:
            return Outcome(OutcomeStatus.WIN, winner=board[line[0]], line=line)

        if None not in board:
            return DRAW

        return IN_PROGRESS

    def check_winner(self, board: Sequence[Optional[Mark]]) -> Optional[Mark]:
        """
        Check if there's a winner.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        for a, b, c in self.WINNING_LINES:
            mark = board[a]
            if mark is not None and mark == board[b] == board[c]:
                return mark
        return None

    def get_winning_line(self, board: Sequence[Optional[Mark]]) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as a tuple of 3 cell indices, or None.
        """
        for line in self.WINNING_LINES:
            a, b, c = line
            if board[a] is not None and board[a] == board[b] == board[c]:
                return line
        return None

    def check_draw(self, board: Sequence[Optional[Mark]]) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        if self.check_winner(board) is not None:
            return False

        return None not in board

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with winner/draw information.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        outcome = self.evaluate(game_state.board)

        if outcome.status == OutcomeStatus.WIN:
            game_state.winner = outcome.winner
            game_state.is_game_over = True
        elif outcome.status == OutcomeStatus.DRAW:
            game_state.is_draw = True
            game_state.is_game_over = True

        return game_state


_checker = WinChecker()


def evaluate(board: Sequence[Optional[Mark]]) -> Outcome:
    """Evaluate a board with a shared WinChecker."""
    return _checker.evaluate(board)
