"""
Board model for TicTacToe.
Marks, positions, and the helpers shared by every other logic module.
"""

from enum import Enum
from typing import List, NamedTuple, Optional

from .config import GameConfig


class Mark(Enum):
    """The two marks that can be placed on the board."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X


class Position(NamedTuple):
    """A (row, col) coordinate on the board."""
    row: int
    col: int


# None means empty, otherwise the Mark in that cell
Board = List[List[Optional[Mark]]]


def new_board() -> Board:
    """Create an empty 3x3 board."""
    size = GameConfig.BOARD_SIZE
    return [[None for _ in range(size)] for _ in range(size)]


def copy_board(board: Board) -> Board:
    """Copy a board so it can be changed without touching the original."""
    return [[cell for cell in row] for row in board]


def get_empty_cells(board: Board) -> List[Position]:
    """
    Get all empty cells on the board, in row-major order.

    Args:
        board: The board to scan.

    Returns:
        List of Positions, top-left to bottom-right.
    """
    empty = []
    for row in range(len(board)):
        for col in range(len(board[row])):
            if board[row][col] is None:
                empty.append(Position(row, col))
    return empty


def is_valid_shape(board: Board) -> bool:
    """True if the board is exactly BOARD_SIZE x BOARD_SIZE."""
    size = GameConfig.BOARD_SIZE
    return len(board) == size and all(len(row) == size for row in board)


def board_from_rows(rows: List[str]) -> Board:
    """
    Build a board from strings like "XO_".
    Any character other than X or O is an empty cell.
    """
    return [
        [Mark(ch) if ch in ("X", "O") else None for ch in row]
        for row in rows
    ]


def format_board(board: Board) -> str:
    """Render the board as text, with row and column numbers."""
    lines = ["  0   1   2"]
    for row in range(len(board)):
        cells = [cell.value if cell is not None else " " for cell in board[row]]
        lines.append(f"{row} " + " | ".join(cells))
        if row < len(board) - 1:
            lines.append("  ---------")
    return "\n".join(lines)
