"""
AI player for TicTacToe.
Picks the computer's move: random (EASY), minimax (HARD), or a coin flip
between the two (MEDIUM).
"""

from typing import Optional, Sequence

import numpy as np

from .config import GameConfig
from .game_state import Mark, Difficulty, get_empty_cells, index_to_cell
from .move_validator import MoveValidator, InvalidStateError
from .win_checker import WinChecker


class AIPlayer:
    """
    An AI that plays TicTacToe.

    On HARD it uses a full minimax search (no pruning) and always plays
    optimally - it will win if possible, block the opponent if needed,
    and never lose.
    """

    def __init__(
        self,
        player: Optional[Mark] = None,
        config: Optional[GameConfig] = None,
        rng: Optional[np.random.Generator] = None,
        verbose: Optional[bool] = None
    ):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays (default: GameConfig.AI_MARK, O).
            config: Game configuration.
            rng: Random source for EASY/MEDIUM. A fresh generator if None.
            verbose: Print search stats (default: GameConfig.DEBUG_MODE).
        """
        self.config = config or GameConfig()
        self.player = player or self.config.AI_MARK
        self.opponent = self.player.opposite()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.verbose = self.config.DEBUG_MODE if verbose is None else verbose

        self.win_checker = WinChecker()
        self.validator = MoveValidator()

        # Minimax nodes visited by the last search (for debugging)
        self.positions_evaluated = 0

    def select_move(
        self,
        board: Sequence[Optional[Mark]],
        difficulty: Difficulty,
        rng: Optional[np.random.Generator] = None
    ) -> int:
        """
        Choose a cell for the AI's mark.

        Args:
            board: Current board (never modified).
            difficulty: Which move policy to use.
            rng: Random source for this call, overriding the player's own.

        Returns:
            Index (0-8) of the chosen empty cell.

        Raises:
            InvalidStateError: If the board is full or the game is over.
        """
        self.validator.ensure_playable(board)
        rng = rng if rng is not None else self.rng

        if difficulty == Difficulty.EASY:
            return self.get_random_move(board, rng)

        if difficulty == Difficulty.MEDIUM:
            # One roll per call, not per candidate move
            if rng.random() < self.config.MEDIUM_OPTIMAL_PROBABILITY:
                return self.get_best_move(board)
            return self.get_random_move(board, rng)

        if difficulty == Difficulty.HARD:
            return self.get_best_move(board)

        raise ValueError(f"Unknown difficulty: {difficulty!r}")

    def get_random_move(
        self,
        board: Sequence[Optional[Mark]],
        rng: Optional[np.random.Generator] = None
    ) -> int:
        """Pick a uniformly random empty cell."""
        empty_cells = get_empty_cells(board)
        if not empty_cells:
            raise InvalidStateError("No empty cells left to move on")

        rng = rng if rng is not None else self.rng
        return empty_cells[int(rng.integers(len(empty_cells)))]

    def get_best_move(self, board: Sequence[Optional[Mark]]) -> int:
        """
        Get the best move for the current position.

        Ties go to the lowest cell index.

        Args:
            board: Current board (never modified).

        Returns:
            Index of the best move.
        """
        self.positions_evaluated = 0

        empty_cells = get_empty_cells(board)
        if not empty_cells:
            raise InvalidStateError("No empty cells left to move on")

        # Private scratch board, marks are placed and undone in place
        scratch = list(board)

        best_score = float('-inf')
        best_move = empty_cells[0]

        for index in empty_cells:
            scratch[index] = self.player
            score = self._minimax(scratch, depth=0, is_maximizing=False)
            scratch[index] = None

            if score > best_score:
                best_score = score
                best_move = index

        if self.verbose:
            print(f"AI evaluated {self.positions_evaluated} positions. "
                  f"Best move: {best_move} (score: {best_score})")

        return best_move

    def _minimax(self, board: list, depth: int, is_maximizing: bool) -> float:
        """
        Plain minimax over every remaining move.

        Args:
            board: Scratch board to search (restored before returning).
            depth: Plies played since the candidate move.
            is_maximizing: True if it's the AI's turn.

        Returns:
            The score of the position.
        """
        self.positions_evaluated += 1

        winner = self.win_checker.check_winner(board)
        if winner == self.player:
            return self.config.WIN_SCORE - depth  # Prefer faster wins
        elif winner == self.opponent:
            return depth - self.config.WIN_SCORE  # Prefer slower losses
        elif None not in board:
            return 0  # Draw

        if is_maximizing:
            max_score = float('-inf')
            for index in get_empty_cells(board):
                board[index] = self.player
                score = self._minimax(board, depth + 1, False)
                board[index] = None
                max_score = max(max_score, score)
            return max_score
        else:
            min_score = float('inf')
            for index in get_empty_cells(board):
                board[index] = self.opponent
                score = self._minimax(board, depth + 1, True)
                board[index] = None
                min_score = min(min_score, score)
            return min_score

    def get_move_suggestion(self, board: Sequence[Optional[Mark]]) -> str:
        """
        Get a human-readable move suggestion.

        Returns:
            A string describing the suggested move.
        """
        if not get_empty_cells(board) or self.win_checker.evaluate(board).is_over:
            return "No moves available!"

        index = self.get_best_move(board)
        row, col = index_to_cell(index)

        return f"Place {self.player.value} at cell {index} (row {row}, col {col})"


def select_move(
    board: Sequence[Optional[Mark]],
    difficulty: Difficulty,
    rng: Optional[np.random.Generator] = None,
    player: Mark = Mark.O
) -> int:
    """Choose the computer's move with a one-off AIPlayer."""
    return AIPlayer(player, rng=rng).select_move(board, difficulty)
