"""
Game session for TicTacToe.
Ties together mode selection, difficulty selection, turns, the computer
opponent and the "play again?" prompt. Front ends call into this and only
take care of drawing and timing.
"""

from typing import Optional

import numpy as np

from .ai_player import AIPlayer
from .config import GameConfig
from .game_state import GameState, GameMode, Difficulty
from .move_validator import MoveValidator
from .win_checker import WinChecker, Outcome


class GameSession:
    """
    One player session, from the mode menu through any number of games.

    Flow:
    1. Choose game mode (single / multi)
    2. In single mode, choose difficulty
    3. Play: human clicks, computer answers after a short delay
    4. Game over: play again (back to step 1) or stop
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[np.random.Generator] = None
    ):
        self.config = config or GameConfig()

        self.game_state = GameState()
        self.mode: Optional[GameMode] = None
        self.difficulty: Optional[Difficulty] = None
        self.show_difficulty_selection = False

        # Set when the player declines another game
        self.game_over = False

        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(self.config.AI_MARK, config=self.config, rng=rng)

    def reset_game(self):
        """Clear the board for a fresh game."""
        self.game_state = GameState()
        self.game_over = False

    def start_game(self, single_player: bool):
        """
        Pick the game mode.

        Single player goes on to difficulty selection; multi player
        starts right away.
        """
        self.mode = GameMode.SINGLE if single_player else GameMode.MULTI
        if single_player:
            self.show_difficulty_selection = True
        else:
            self.difficulty = None
            self.reset_game()

    def select_difficulty(self, difficulty: Difficulty):
        """Set the computer's difficulty and start the game."""
        self.difficulty = difficulty
        self.show_difficulty_selection = False
        self.reset_game()
        print(f"Difficulty set to: {difficulty.name}")

    @property
    def is_playing(self) -> bool:
        """True while the board is on screen (mode and difficulty chosen)."""
        if self.mode is None or self.game_over:
            return False
        if self.mode == GameMode.SINGLE:
            return self.difficulty is not None and not self.show_difficulty_selection
        return True

    def outcome(self) -> Outcome:
        """Outcome of the current board."""
        return self.win_checker.evaluate(self.game_state.board)

    def is_finished(self) -> bool:
        """True once the current game is won or drawn."""
        return self.outcome().is_over

    def is_ai_turn(self) -> bool:
        """True when the computer should move next."""
        return (
            self.is_playing
            and self.mode == GameMode.SINGLE
            and self.game_state.current_player == self.config.AI_MARK
            and not self.is_finished()
        )

    def handle_click(self, index: int) -> bool:
        """
        Place the current player's mark on a clicked cell.

        Returns:
            True if the mark was placed.
        """
        if not self.is_playing:
            return False

        # Against the computer, clicks only place the human's mark
        if self.mode == GameMode.SINGLE and self.game_state.current_player != self.config.HUMAN_MARK:
            return False

        result = self.validator.validate_move(self.game_state, index)
        if not result.is_valid:
            if self.config.DEBUG_MODE:
                print(f"Ignored click: {result.error_message}")
            return False

        self.game_state.make_move(index)
        self.win_checker.update_game_state(self.game_state)
        return True

    def make_ai_move(self) -> Optional[int]:
        """
        Let the computer play its move.

        Returns:
            The cell the computer played, or None if it is not the
            computer's turn (game finished, human to move, multi player).
        """
        if not self.is_ai_turn():
            return None

        index = self.ai.select_move(self.game_state.board, self.difficulty)
        self.game_state.make_move(index)
        self.win_checker.update_game_state(self.game_state)

        if self.config.DEBUG_MODE:
            print(f"AI ({self.difficulty.name}) played cell {index}")

        return index

    def status_text(self) -> str:
        """Status line shown above the board."""
        outcome = self.outcome()
        if outcome.winner is not None:
            return f"Winner: {outcome.winner.value}"
        if outcome.is_over:
            return "It's a draw!"
        return f"Next player: {self.game_state.current_player.value}"

    def handle_continue(self, play_again: bool):
        """
        Answer the "play again?" prompt.

        Either way the session goes back to the mode menu with a clean
        board; declining also marks the session as over.
        """
        self.mode = None
        self.difficulty = None
        self.show_difficulty_selection = False
        self.reset_game()
        self.game_over = not play_again
