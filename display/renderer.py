"""
Board renderer for TicTacToe.
Draws the 3x3 board into an OpenCV image and maps clicks back to cells.
"""

import cv2
import numpy as np
from typing import Optional, Sequence, Tuple

from logic.game_state import Mark, NUM_CELLS, index_to_cell, cell_to_index
from .config import DisplayConfig


class BoardRenderer:
    """
    Renders a board as a top-down BGR image.

    Cell layout matches the board indices:
        0 | 1 | 2
        3 | 4 | 5
        6 | 7 | 8
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration.
        """
        self.config = config or DisplayConfig()
        self.size = self.config.BOARD_PIXELS
        self.cell_size = self.config.CELL_PIXELS

    def render(
        self,
        board: Sequence[Optional[Mark]],
        winning_line: Optional[Tuple[int, int, int]] = None
    ) -> np.ndarray:
        """
        Draw the board.

        Args:
            board: 9 cells, None for empty.
            winning_line: Cell indices to strike through, if any.

        Returns:
            BGR image of shape (BOARD_PIXELS, BOARD_PIXELS, 3).
        """
        image = np.full((self.size, self.size, 3), self.config.BACKGROUND_COLOR, dtype=np.uint8)

        self._draw_grid(image)

        for index in range(NUM_CELLS):
            mark = board[index]
            if mark == Mark.X:
                self._draw_x(image, index)
            elif mark == Mark.O:
                self._draw_o(image, index)

        if winning_line is not None:
            start = self.cell_center(winning_line[0])
            end = self.cell_center(winning_line[-1])
            cv2.line(image, start, end, self.config.WIN_LINE_COLOR, self.config.WIN_LINE_THICKNESS)

        return image

    def _draw_grid(self, image: np.ndarray):
        """Draw the two vertical and two horizontal grid lines."""
        for i in range(1, self.config.BOARD_SIZE):
            offset = i * self.cell_size
            # Vertical lines
            cv2.line(
                image,
                (offset, 0),
                (offset, self.size),
                self.config.GRID_COLOR,
                self.config.GRID_THICKNESS
            )
            # Horizontal lines
            cv2.line(
                image,
                (0, offset),
                (self.size, offset),
                self.config.GRID_COLOR,
                self.config.GRID_THICKNESS
            )

    def _draw_x(self, image: np.ndarray, index: int):
        """Draw an X as two diagonal strokes."""
        x1, y1, x2, y2 = self._mark_box(index)
        cv2.line(image, (x1, y1), (x2, y2), self.config.X_COLOR, self.config.MARK_THICKNESS)
        cv2.line(image, (x1, y2), (x2, y1), self.config.X_COLOR, self.config.MARK_THICKNESS)

    def _draw_o(self, image: np.ndarray, index: int):
        """Draw an O as a circle."""
        radius = self.cell_size // 2 - self.config.MARK_PADDING
        cv2.circle(image, self.cell_center(index), radius, self.config.O_COLOR, self.config.MARK_THICKNESS)

    def _mark_box(self, index: int) -> Tuple[int, int, int, int]:
        """Padded bounding box (x1, y1, x2, y2) of a cell."""
        row, col = index_to_cell(index)
        pad = self.config.MARK_PADDING
        x1 = col * self.cell_size + pad
        y1 = row * self.cell_size + pad
        return x1, y1, x1 + self.cell_size - 2 * pad, y1 + self.cell_size - 2 * pad

    def cell_center(self, index: int) -> Tuple[int, int]:
        """Pixel (x, y) of a cell's center."""
        row, col = index_to_cell(index)
        half = self.cell_size // 2
        return col * self.cell_size + half, row * self.cell_size + half

    def pixel_to_index(self, x: float, y: float) -> Optional[int]:
        """
        Map a click position to a cell index.

        Args:
            x: Pixel X coordinate on the board image.
            y: Pixel Y coordinate on the board image.

        Returns:
            Cell index (0-8), or None if the click is outside the board.
        """
        if not (0 <= x < self.size and 0 <= y < self.size):
            return None

        col = min(int(x) // self.cell_size, self.config.BOARD_SIZE - 1)
        row = min(int(y) // self.cell_size, self.config.BOARD_SIZE - 1)
        index = cell_to_index(row, col)

        if self.config.DEBUG_MODE:
            print(f"Click ({x}, {y}) -> cell {index}")

        return index

    def draw_status(self, image: np.ndarray, text: str) -> np.ndarray:
        """
        Write a status line at the top-left of a copy of the image.

        Returns:
            The annotated copy.
        """
        annotated = image.copy()
        cv2.putText(
            annotated, text, (10, 24),
            self.config.FONT, self.config.FONT_SCALE,
            self.config.TEXT_COLOR, self.config.FONT_THICKNESS
        )
        return annotated

    def save_snapshot(
        self,
        path: str,
        board: Sequence[Optional[Mark]],
        status: str,
        winning_line: Optional[Tuple[int, int, int]] = None
    ) -> np.ndarray:
        """
        Render the board with its status line and write it to disk.

        Args:
            path: Output image file (format from the extension).
            board: 9 cells, None for empty.
            status: Text written at the top of the image.
            winning_line: Cell indices to strike through, if any.

        Returns:
            The image that was saved.
        """
        image = self.draw_status(self.render(board, winning_line), status)
        if not cv2.imwrite(path, image):
            raise IOError(f"Could not write image to {path}")
        return image
