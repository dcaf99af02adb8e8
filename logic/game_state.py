"""
Game state management for TicTacToe.
Tracks the board, current player, and move history.
"""

from enum import Enum
from typing import Optional, List, Tuple, Sequence
from dataclasses import dataclass, field


class Mark(Enum):
    """The two player marks. X always moves first."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X


class Difficulty(Enum):
    """Computer opponent difficulty levels."""
    EASY = 1      # Random moves
    MEDIUM = 2    # Coin flip between random and minimax
    HARD = 3      # Full minimax

    @classmethod
    def parse(cls, name: str) -> "Difficulty":
        """
        Look up a difficulty by name, ignoring case.

        Raises:
            ValueError: If the name is not a known difficulty.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown difficulty: {name!r}") from None


class GameMode(Enum):
    """Single player (against the computer) or two players on one screen."""
    SINGLE = "single"
    MULTI = "multi"


BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE

# A board is a flat list of 9 cells, row-major. None means empty.
Board = List[Optional[Mark]]

_EMPTY_CHARS = (".", "_", " ", "-")


def new_board() -> Board:
    """Create an empty board."""
    return [None] * NUM_CELLS


def parse_board(text: str) -> Board:
    """
    Build a board from a 9 character string, e.g. "OO.XX....".

    X and O are marks; '.', '_', '-' and spaces are empty cells.
    Any '|' or newline separators are ignored.
    """
    chars = [c for c in text if c not in "|\n"]
    if len(chars) != NUM_CELLS:
        raise ValueError(f"Board needs {NUM_CELLS} cells, got {len(chars)}")

    board = new_board()
    for i, c in enumerate(chars):
        if c.upper() in ("X", "O"):
            board[i] = Mark(c.upper())
        elif c not in _EMPTY_CHARS:
            raise ValueError(f"Invalid cell character: {c!r}")
    return board


def format_board(board: Sequence[Optional[Mark]]) -> str:
    """Inverse of parse_board, empty cells shown as '.'."""
    return "".join(cell.value if cell is not None else "." for cell in board)


def get_empty_cells(board: Sequence[Optional[Mark]]) -> List[int]:
    """Indices of all empty cells, in increasing order."""
    return [i for i, cell in enumerate(board) if cell is None]


def index_to_cell(index: int) -> Tuple[int, int]:
    """Cell index (0-8) to (row, col)."""
    return index // BOARD_SIZE, index % BOARD_SIZE


def cell_to_index(row: int, col: int) -> int:
    """(row, col) to cell index (0-8)."""
    return row * BOARD_SIZE + col


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Mark            # Who made the move
    index: int              # Cell index (0-8)
    move_number: int        # Which move this is in the game (0-8)


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 3x3 board
    - Current player
    - Move history
    - Game status (ongoing, won, draw)
    """

    board: Board = field(default_factory=new_board)

    # X always starts
    current_player: Mark = Mark.X

    moves: List[Move] = field(default_factory=list)

    # Game result (filled in by WinChecker.update_game_state)
    winner: Optional[Mark] = None
    is_draw: bool = False
    is_game_over: bool = False

    def make_move(self, index: int) -> bool:
        """
        Place the current player's mark at the given cell.

        Args:
            index: Cell index (0-8).

        Returns:
            True if move was successful, False otherwise.
        """
        if self.is_game_over:
            print("Game is already over!")
            return False

        if not 0 <= index < NUM_CELLS:
            print(f"Invalid cell {index}. Must be 0-{NUM_CELLS - 1}.")
            return False

        if self.board[index] is not None:
            print(f"Cell {index} is already occupied!")
            return False

        self.board[index] = self.current_player
        self.moves.append(Move(
            player=self.current_player,
            index=index,
            move_number=len(self.moves)
        ))

        # Winner is checked by WinChecker, just switch turns here
        self.current_player = self.current_player.opposite()

        return True

    def get_empty_cells(self) -> List[int]:
        """Get all empty cell indices."""
        return get_empty_cells(self.board)

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            moves=list(self.moves),
            winner=self.winner,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over
        )

    def print_board(self):
        """Print the board to console."""
        print("\n  0   1   2")
        print("+---+---+---+")

        for row in range(BOARD_SIZE):
            row_str = "|"
            for col in range(BOARD_SIZE):
                cell = self.board[cell_to_index(row, col)]
                row_str += f" {cell.value if cell else ' '} |"
            print(f"{row_str} {row}")
            print("+---+---+---+")

        if self.is_game_over:
            if self.winner:
                print(f"\n{self.winner.value} WINS!")
            else:
                print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_player.value}")
