"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- Game mode selection (single / multi player)
- Difficulty selection for the computer opponent
- The board, rendered with OpenCV and shown through Pillow
- Game status and a "play again?" prompt
"""

import cv2
import time
import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
from typing import Optional

from display.config import DisplayConfig
from display.renderer import BoardRenderer

from logic.config import GameConfig
from logic.game_session import GameSession
from logic.game_state import Difficulty
from logic.move_validator import InvalidStateError


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(
        self,
        session: Optional[GameSession] = None,
        display_config: Optional[DisplayConfig] = None
    ):
        """Initialize the UI."""
        self.session = session or GameSession()
        self.game_config = self.session.config
        self.display_config = display_config or DisplayConfig()
        self.renderer = BoardRenderer(self.display_config)

        self.pending_ai_move: Optional[str] = None

        self._create_ui()
        self._show_screen()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(self.display_config.WINDOW_TITLE)
        self.root.configure(bg=self.display_config.WINDOW_BG)
        self.root.resizable(False, False)

        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        self.main_frame = ttk.Frame(self.root)
        self.main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        ttk.Label(self.main_frame, text="Tic-Tac-Toe", style='Title.TLabel').pack(pady=(0, 10))

        # Mode selection
        self.mode_frame = ttk.Frame(self.main_frame)
        ttk.Label(self.mode_frame, text="Choose Game Mode").pack(pady=5)
        self._button(self.mode_frame, "Single Player", '#10b981',
                     lambda: self._start_game(True)).pack(side=tk.LEFT, padx=5)
        self._button(self.mode_frame, "Multi Player", '#6366f1',
                     lambda: self._start_game(False)).pack(side=tk.LEFT, padx=5)

        # Difficulty selection
        self.diff_frame = ttk.Frame(self.main_frame)
        ttk.Label(self.diff_frame, text="Choose Difficulty").pack(pady=5)
        diff_buttons = [
            ("Easy", Difficulty.EASY, "#4ade80"),
            ("Medium", Difficulty.MEDIUM, "#fbbf24"),
            ("Hard", Difficulty.HARD, "#f87171")
        ]
        for text, difficulty, color in diff_buttons:
            self._button(self.diff_frame, text, color,
                         lambda d=difficulty: self._select_difficulty(d)).pack(side=tk.LEFT, padx=5)

        # Game board
        self.game_frame = ttk.Frame(self.main_frame)
        self.status_label = ttk.Label(self.game_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        size = self.display_config.BOARD_PIXELS
        self.board_canvas = tk.Canvas(self.game_frame, width=size, height=size,
                                      highlightthickness=2, highlightbackground='#00d4ff')
        self.board_canvas.pack()
        self.board_canvas.bind("<Button-1>", self._on_click)

        # Play again prompt
        self.prompt_frame = ttk.Frame(self.game_frame)
        ttk.Label(self.prompt_frame, text="Game Over! Do you want to play again?").pack(pady=5)
        self._button(self.prompt_frame, "Yes", '#10b981',
                     lambda: self._handle_continue(True)).pack(side=tk.LEFT, padx=5)
        self._button(self.prompt_frame, "No", '#ef4444',
                     lambda: self._handle_continue(False)).pack(side=tk.LEFT, padx=5)

        # Quit button
        tk.Button(
            self.main_frame,
            text="Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=26,
            command=self._quit
        ).pack(side=tk.BOTTOM, pady=10)

        self.root.bind("<Key-s>", lambda _event: self._save_screenshot())
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _button(self, parent, text: str, color: str, command) -> tk.Button:
        return tk.Button(
            parent,
            text=text,
            font=('Segoe UI', 10, 'bold'),
            width=12,
            bg=color,
            fg='black',
            activebackground=color,
            command=command
        )

    def _show_screen(self):
        """Show whichever screen matches the session state."""
        for frame in (self.mode_frame, self.diff_frame, self.game_frame):
            frame.pack_forget()

        if self.session.mode is None:
            self.mode_frame.pack(pady=10)
        elif self.session.show_difficulty_selection:
            self.diff_frame.pack(pady=10)
        else:
            self.game_frame.pack(pady=10)
            self._update_board()

    def _start_game(self, single_player: bool):
        self.session.start_game(single_player)
        self._show_screen()

    def _select_difficulty(self, difficulty: Difficulty):
        self.session.select_difficulty(difficulty)
        self._show_screen()

    def _on_click(self, event):
        """Map a canvas click to a cell and play it."""
        index = self.renderer.pixel_to_index(event.x, event.y)
        if index is None:
            return

        if self.session.handle_click(index):
            self._update_board()
            self._schedule_ai_move()

    def _schedule_ai_move(self):
        """Let the computer move after a short "thinking" delay."""
        if self.pending_ai_move is not None or not self.session.is_ai_turn():
            return
        self.pending_ai_move = self.root.after(self.game_config.AI_MOVE_DELAY_MS, self._ai_move)

    def _ai_move(self):
        """Run the computer's move (on the UI thread)."""
        self.pending_ai_move = None
        try:
            self.session.make_ai_move()
        except InvalidStateError as e:
            print(f"AI move error: {e}")
            self.status_label.configure(text=f"ERROR: {str(e)[:40]}")
            return
        self._update_board()

    def _update_board(self):
        """Redraw the board and status."""
        outcome = self.session.outcome()
        image = self.renderer.render(self.session.game_state.board, outcome.line)

        # Convert BGR to RGB for Pillow
        image_rgb = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
        photo = ImageTk.PhotoImage(Image.fromarray(image_rgb))

        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

        self.status_label.configure(text=self.session.status_text())

        if outcome.is_over:
            self.prompt_frame.pack(pady=10)
        else:
            self.prompt_frame.pack_forget()

    def _handle_continue(self, play_again: bool):
        self._cancel_ai_move()
        self.session.handle_continue(play_again)
        if not play_again:
            print("Thanks for playing!")
        self._show_screen()

    def _cancel_ai_move(self):
        if self.pending_ai_move is not None:
            self.root.after_cancel(self.pending_ai_move)
            self.pending_ai_move = None

    def _save_screenshot(self):
        """Save the current board image."""
        if self.session.mode is None:
            return
        filename = self.display_config.SCREENSHOT_PATTERN.format(timestamp=int(time.time()))
        self.renderer.save_snapshot(
            filename,
            self.session.game_state.board,
            self.session.status_text(),
            self.session.outcome().line
        )
        print(f"Saved: {filename}")

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._cancel_ai_move()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    print("\n" + "="*60)
    print("   Tic-Tac-Toe")
    print("="*60 + "\n")

    ui = TicTacToeUI(GameSession(GameConfig()))
    ui.run()


if __name__ == "__main__":
    main()
