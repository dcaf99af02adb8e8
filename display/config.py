"""
Display configuration for TicTacToe.
All the settings for drawing the board and the game window.

Colors are BGR, as OpenCV expects them.
"""

import cv2


class DisplayConfig:
    """
    Configuration class for display settings.
    Change these values to restyle the board!
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3

    # Rendered board image size (pixels, square)
    BOARD_PIXELS = 360
    CELL_PIXELS = BOARD_PIXELS // BOARD_SIZE  # 120 pixels per cell

    # Empty space kept between a mark and its cell border
    MARK_PADDING = 28

    # ==================== COLORS (BGR) ====================
    BACKGROUND_COLOR = (255, 255, 255)
    GRID_COLOR = (153, 153, 153)
    X_COLOR = (113, 107, 248)      # Red-ish
    O_COLOR = (136, 255, 0)        # Green-ish
    WIN_LINE_COLOR = (0, 215, 255)  # Gold
    TEXT_COLOR = (40, 40, 40)

    # ==================== STROKES ====================
    GRID_THICKNESS = 2
    MARK_THICKNESS = 8
    WIN_LINE_THICKNESS = 10

    # ==================== TEXT ====================
    FONT = cv2.FONT_HERSHEY_SIMPLEX
    FONT_SCALE = 0.7
    FONT_THICKNESS = 2

    # ==================== WINDOW ====================
    WINDOW_TITLE = "Tic-Tac-Toe"
    WINDOW_BG = '#1a1a2e'
    SCREENSHOT_PATTERN = "tictactoe_{timestamp}.png"

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
