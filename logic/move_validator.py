"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List, Sequence
from dataclasses import dataclass
from .game_state import GameState, Mark, NUM_CELLS, get_empty_cells
from .win_checker import WinChecker


class InvalidStateError(Exception):
    """
    The computer was asked to move on a board where no move is possible.

    This is a bug in the caller's turn or game-over bookkeeping, so it is
    raised straight back to the caller.
    """


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Cell index must be 0-8
    3. Can only place on empty cells
    """

    def __init__(self):
        self.win_checker = WinChecker()

    def validate_move(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place the mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over or self.win_checker.evaluate(game_state.board).is_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not 0 <= index < NUM_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{NUM_CELLS - 1}."
            )

        occupant = game_state.board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            List of valid cell indices.
        """
        if game_state.is_game_over or self.win_checker.evaluate(game_state.board).is_over:
            return []

        return game_state.get_empty_cells()

    def ensure_playable(self, board: Sequence[Optional[Mark]]):
        """
        Check that the computer can move on this board.

        Raises:
            InvalidStateError: If the board is malformed, full, or already
                won or drawn.
        """
        if len(board) != NUM_CELLS:
            raise InvalidStateError(f"Board must have {NUM_CELLS} cells, got {len(board)}")

        if not get_empty_cells(board):
            raise InvalidStateError("No empty cells left to move on")

        outcome = self.win_checker.evaluate(board)
        if outcome.is_over:
            raise InvalidStateError(f"Game is already finished ({outcome.status.value})")
