"""
Logic module for TicTacToe.
Handles game state, rules, outcome checks, and the AI opponent.
"""

__version__ = "1.0.0"

from .game_state import (
    GameState, GameMode, Difficulty, Mark, Move,
    new_board, parse_board, format_board, get_empty_cells,
)
from .config import GameConfig
from .win_checker import WinChecker, Outcome, OutcomeStatus, evaluate
from .move_validator import MoveValidator, ValidationResult, InvalidStateError
from .ai_player import AIPlayer, select_move
from .game_session import GameSession
