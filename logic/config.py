"""
Game configuration for TicTacToe.
Settings for the computer opponent and game pacing.
"""

from .game_state import Mark, Difficulty


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tweak the computer opponent!
    """

    # ==================== PLAYERS ====================
    # X always moves first
    HUMAN_MARK = Mark.X
    AI_MARK = Mark.O

    # ==================== DIFFICULTY ====================
    DEFAULT_DIFFICULTY = Difficulty.HARD

    # Chance that MEDIUM plays the optimal move instead of a random one
    MEDIUM_OPTIMAL_PROBABILITY = 0.5

    # ==================== MINIMAX SCORING ====================
    # Win = WIN_SCORE - depth, loss = depth - WIN_SCORE, draw = 0
    WIN_SCORE = 10

    # ==================== PACING ====================
    # "Thinking" delay before the computer move is applied (milliseconds)
    AI_MOVE_DELAY_MS = 500

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
