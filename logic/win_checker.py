"""
Win checker for TicTacToe.
Checks if a mark has won or if the game is a draw.
"""

from typing import Optional, List, Tuple

from .board import Board, Mark, Position


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally).
    Every method is read-only; the board is never modified.
    """

    # All possible winning lines, checked in this order
    WINNING_LINES: Tuple[Tuple[Position, ...], ...] = (
        # Rows
        (Position(0, 0), Position(0, 1), Position(0, 2)),
        (Position(1, 0), Position(1, 1), Position(1, 2)),
        (Position(2, 0), Position(2, 1), Position(2, 2)),
        # Columns
        (Position(0, 0), Position(1, 0), Position(2, 0)),
        (Position(0, 1), Position(1, 1), Position(2, 1)),
        (Position(0, 2), Position(1, 2), Position(2, 2)),
        # Diagonals
        (Position(0, 0), Position(1, 1), Position(2, 2)),
        (Position(0, 2), Position(1, 1), Position(2, 0)),
    )

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The board to check.

        Returns:
            The Mark filling the first complete line, or None.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner

        return None

    def _check_line(self, board: Board, line: Tuple[Position, ...]) -> Optional[Mark]:
        """Return the mark if all 3 cells of the line hold it, else None."""
        first = board[line[0].row][line[0].col]
        if first is None:
            return None

        for row, col in line[1:]:
            if board[row][col] != first:
                return None

        return first

    def is_full(self, board: Board) -> bool:
        """True if every cell is set."""
        return all(cell is not None for row in board for cell in row)

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        if self.check_winner(board) is not None:
            return False

        return self.is_full(board)

    def is_terminal(self, board: Board) -> bool:
        """True if the board is won or full."""
        return self.check_winner(board) is not None or self.is_full(board)

    def get_winning_line(self, board: Board) -> Optional[List[Position]]:
        """
        Get the winning line if there is one.

        Args:
            board: The board to check.

        Returns:
            The winning line as a list of Positions, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return list(line)
        return None


# Quick test
if __name__ == "__main__":
    from .board import board_from_rows

    print("Testing WinChecker...")

    checker = WinChecker()

    board = board_from_rows(["XXX", "_O_", "O__"])
    print(f"Horizontal: winner = {checker.check_winner(board)}")
    assert checker.check_winner(board) == Mark.X

    board = board_from_rows(["OX_", "OX_", "O__"])
    print(f"Vertical: winner = {checker.check_winner(board)}")
    assert checker.check_winner(board) == Mark.O

    board = board_from_rows(["XOX", "OXO", "OXO"])
    print(f"Full, no line: draw = {checker.check_draw(board)}")
    assert checker.check_draw(board)

    print("\nWinChecker test done!")
