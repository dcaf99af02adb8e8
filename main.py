"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default, or a console game with --no-ui.

Run this script to play TicTacToe against the computer (or a friend)!
"""

import time
from typing import Callable, Optional

import numpy as np

from logic.ai_player import AIPlayer
from logic.config import GameConfig
from logic.game_session import GameSession
from logic.game_state import Difficulty


class ConsoleGame:
    """
    Console front end for TicTacToe.

    Game flow:
    1. Human (X) types a cell number 0-8
    2. Computer (O) answers after a short pause (single player)
       or the second human types theirs (multi player)
    3. Repeat until someone wins or it's a draw
    4. Ask to play again
    """

    def __init__(
        self,
        session: GameSession,
        single_player: bool = True,
        difficulty: Difficulty = GameConfig.DEFAULT_DIFFICULTY,
        input_fn: Callable[[str], str] = input,
        delay_s: Optional[float] = None
    ):
        """
        Initialize the console game.

        Args:
            session: Game session to drive.
            single_player: Play against the computer.
            difficulty: Computer difficulty (single player only).
            input_fn: Where moves are read from.
            delay_s: Computer "thinking" pause (default from GameConfig).
        """
        self.session = session
        self.single_player = single_player
        self.difficulty = difficulty
        self.input_fn = input_fn
        if delay_s is None:
            delay_s = session.config.AI_MOVE_DELAY_MS / 1000.0
        self.delay_s = delay_s

    def start(self):
        """Play games until the player declines another one."""
        print("\nCells are numbered 0-8, left to right, top to bottom.")
        print("Type 'h' for a hint, 'q' to quit.\n")

        while True:
            self._new_game()
            if not self._game_loop():
                print("\nGame quit by user.")
                return

            self._show_game_result()

            answer = self.input_fn("Play again? [y/n]: ").strip().lower()
            play_again = answer.startswith("y")
            self.session.handle_continue(play_again)
            if not play_again:
                return

    def _new_game(self):
        self.session.start_game(self.single_player)
        if self.single_player:
            self.session.select_difficulty(self.difficulty)

    def _game_loop(self) -> bool:
        """
        Play one game.

        Returns:
            False if the user quit mid-game.
        """
        while not self.session.is_finished():
            self.session.game_state.print_board()

            if self.session.is_ai_turn():
                print("\n>>> Computer is thinking...")
                time.sleep(self.delay_s)
                index = self.session.make_ai_move()
                print(f">>> Computer plays cell {index}")
                continue

            command = self.input_fn(f"{self.session.status_text()} - cell: ").strip().lower()
            if command == "q":
                return False
            if command == "h":
                advisor = AIPlayer(self.session.game_state.current_player, config=self.session.config)
                print(advisor.get_move_suggestion(self.session.game_state.board))
                continue

            try:
                index = int(command)
            except ValueError:
                print("Please type a number 0-8.")
                continue

            if not self.session.handle_click(index):
                print("Illegal move. Try again.")

        return True

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)

        self.session.game_state.print_board()
        print(f"\n{self.session.status_text()}")

        print("\n" + "="*60)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--mode",
        choices=["single", "multi"],
        default="single",
        help="Console mode: play the computer or a second human"
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.name.lower() for d in Difficulty],
        default=GameConfig.DEFAULT_DIFFICULTY.name.lower(),
        help="Console mode: computer difficulty"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random moves"
    )

    args = parser.parse_args()

    session = GameSession(GameConfig(), rng=np.random.default_rng(args.seed))

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   Tic-Tac-Toe")
        print("="*60 + "\n")
        ui = TicTacToeUI(session)
        ui.run()
        return

    game = ConsoleGame(
        session,
        single_player=(args.mode == "single"),
        difficulty=Difficulty.parse(args.difficulty)
    )

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
