"""
AI player for TicTacToe.
Uses the Minimax algorithm with alpha-beta pruning to choose the best move.
"""

from typing import Optional

from .board import Board, Mark, Position, copy_board, get_empty_cells, is_valid_shape
from .config import GameConfig
from .win_checker import WinChecker


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI always plays optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    Search is exhaustive; there is no depth limit.
    """

    def __init__(self, mark: Mark = Mark.O, prune: bool = True):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI plays (default: O).
            prune: Use alpha-beta pruning. Turning it off gives the same
                moves, only slower.
        """
        self.mark = mark
        self.opponent = mark.opposite()
        self.prune = prune
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def get_best_move(self, board: Board) -> Optional[Position]:
        """
        Get the best move for the current position.

        The caller's board is left untouched; every candidate is tried
        on a copy.

        Args:
            board: Current 3x3 board.

        Returns:
            Position of the best move, or None if no moves available.
        """
        assert is_valid_shape(board), "board must be 3x3"

        self.positions_evaluated = 0

        best_score = float('-inf')
        best_move = None

        # Row-major order; first move found wins ties
        for row, col in get_empty_cells(board):
            new_board = copy_board(board)
            new_board[row][col] = self.mark

            score = self.minimax(new_board, is_maximizing=False)

            if score > best_score:
                best_score = score
                best_move = Position(row, col)

        if GameConfig.DEBUG_MODE:
            print(f"AI evaluated {self.positions_evaluated} positions. "
                  f"Best move: {best_move} (score: {best_score})")

        return best_move

    def minimax(
        self,
        board: Board,
        is_maximizing: bool,
        alpha: float = float('-inf'),
        beta: float = float('inf')
    ) -> int:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            board: Position to evaluate.
            is_maximizing: True if it's the AI's turn to move.
            alpha: Best score the AI can guarantee so far.
            beta: Best score the opponent can guarantee so far.

        Returns:
            The score of the position from the AI's point of view.
        """
        self.positions_evaluated += 1

        score = self._evaluate_board(board)
        if score is not None:
            return score

        if is_maximizing:
            max_score = float('-inf')
            for row, col in get_empty_cells(board):
                new_board = copy_board(board)
                new_board[row][col] = self.mark
                score = self.minimax(new_board, False, alpha, beta)
                max_score = max(max_score, score)
                if self.prune:
                    alpha = max(alpha, max_score)
                    if beta <= alpha:
                        break  # Prune
            return max_score
        else:
            min_score = float('inf')
            for row, col in get_empty_cells(board):
                new_board = copy_board(board)
                new_board[row][col] = self.opponent
                score = self.minimax(new_board, True, alpha, beta)
                min_score = min(min_score, score)
                if self.prune:
                    beta = min(beta, min_score)
                    if beta <= alpha:
                        break  # Prune
            return min_score

    def _evaluate_board(self, board: Board) -> Optional[int]:
        """Terminal score from the AI's point of view, or None if the game goes on."""
        winner = self.win_checker.check_winner(board)

        if winner == self.mark:
            return GameConfig.WIN_SCORE
        elif winner == self.opponent:
            return GameConfig.LOSS_SCORE
        elif self.win_checker.is_full(board):
            return GameConfig.DRAW_SCORE

        return None

    def get_move_suggestion(self, board: Board) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: Current board.

        Returns:
            A string describing the suggested move.
        """
        move = self.get_best_move(board)

        if move is None:
            return "No moves available!"

        row, col = move
        return f"Place {self.mark.value} at ({row}, {col})"


# Quick test
if __name__ == "__main__":
    from .board import board_from_rows

    print("Testing AIPlayer...")

    ai = AIPlayer(Mark.O)

    # Test 1: AI should block a winning move
    board = board_from_rows(["XX_", "O__", "_O_"])
    print("\nAI is O. X is about to win with (0,2)!")
    move = ai.get_best_move(board)
    print(f"AI's move: {move}")
    assert move == (0, 2), f"Expected (0, 2), got {move}"
    print("✓ AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    board = board_from_rows(["OO_", "XX_", "___"])
    print("\nAI is O. Can win with (0,2)!")
    move = ai.get_best_move(board)
    print(f"AI's move: {move}")
    assert move == (0, 2), f"Expected (0, 2), got {move}"
    print("✓ AI correctly takes the win!")

    print("\nAIPlayer test done!")
