"""Tests for the minimax AI."""

import random

import pytest

from logic.ai_player import AIPlayer
from logic.board import Mark, Position, board_from_rows, copy_board, get_empty_cells, new_board
from logic.win_checker import WinChecker


def random_positions(count, min_marks, max_marks, seed=0):
    """Boards reached by random play that are not yet decided, with the mark to move."""
    rng = random.Random(seed)
    checker = WinChecker()
    found = []
    while len(found) < count:
        board = new_board()
        to_move = Mark.X
        target = rng.randint(min_marks, max_marks)
        for _ in range(target):
            row, col = rng.choice(get_empty_cells(board))
            board[row][col] = to_move
            to_move = to_move.opposite()
            if checker.is_terminal(board):
                break
        if not checker.is_terminal(board):
            found.append((board, to_move))
    return found


def test_ai_takes_immediate_win():
    board = board_from_rows(["OO_", "XX_", "___"])

    move = AIPlayer(Mark.O).get_best_move(board)

    assert move == Position(0, 2)


def test_ai_blocks_opponent_win():
    board = board_from_rows(["XX_", "O__", "_O_"])

    move = AIPlayer(Mark.O).get_best_move(board)

    assert move == (0, 2)


def test_ai_prefers_win_over_block():
    # X can block O's column or win on its own row
    board = board_from_rows(["XX_", "O__", "O__"])

    move = AIPlayer(Mark.X).get_best_move(board)

    assert move == (0, 2)


def test_full_board_has_no_move():
    board = board_from_rows(["XOX", "OXO", "OXO"])

    assert AIPlayer(Mark.X).get_best_move(board) is None


def test_empty_board_ties_go_to_first_cell():
    # Every opening is a draw with perfect play, so the first cell wins the tie
    assert AIPlayer(Mark.X).get_best_move(new_board()) == (0, 0)


def test_best_move_is_deterministic():
    board = board_from_rows(["X__", "_O_", "___"])
    ai = AIPlayer(Mark.X)

    assert ai.get_best_move(board) == ai.get_best_move(board)


def test_wrong_board_shape_is_rejected():
    with pytest.raises(AssertionError):
        AIPlayer(Mark.X).get_best_move([[None, None], [None, None]])


@pytest.mark.parametrize("rows, mark, expected", [
    (["OOO", "XX_", "X__"], Mark.O, 10),
    (["OOO", "XX_", "X__"], Mark.X, -10),
    (["XOX", "OXO", "OXO"], Mark.O, 0),
])
def test_minimax_scores_terminal_board_without_recursing(rows, mark, expected):
    ai = AIPlayer(mark)
    ai.positions_evaluated = 0

    assert ai.minimax(board_from_rows(rows), is_maximizing=True) == expected
    assert ai.positions_evaluated == 1


def test_minimax_scores_forced_outcomes():
    board = board_from_rows(["OO_", "XX_", "___"])

    # O to move wins; X to move wins
    assert AIPlayer(Mark.O).minimax(board, is_maximizing=True) == 10
    assert AIPlayer(Mark.O).minimax(board, is_maximizing=False) == -10


def test_move_is_empty_cell_and_board_is_untouched():
    for board, to_move in random_positions(40, 0, 7, seed=1):
        before = copy_board(board)

        move = AIPlayer(to_move).get_best_move(board)

        assert board == before
        assert move in get_empty_cells(board)


def test_pruned_and_unpruned_choose_the_same_move():
    for board, to_move in random_positions(40, 0, 7, seed=2):
        pruned = AIPlayer(to_move, prune=True)
        unpruned = AIPlayer(to_move, prune=False)

        assert pruned.get_best_move(board) == unpruned.get_best_move(board)


def test_pruning_visits_fewer_positions():
    board = board_from_rows(["X__", "___", "___"])
    pruned = AIPlayer(Mark.O, prune=True)
    unpruned = AIPlayer(Mark.O, prune=False)

    pruned.get_best_move(board)
    unpruned.get_best_move(board)

    assert pruned.positions_evaluated < unpruned.positions_evaluated


def test_self_play_is_a_draw():
    checker = WinChecker()
    players = {Mark.X: AIPlayer(Mark.X), Mark.O: AIPlayer(Mark.O)}
    board = new_board()
    to_move = Mark.X

    while not checker.is_terminal(board):
        row, col = players[to_move].get_best_move(board)
        board[row][col] = to_move
        to_move = to_move.opposite()

    assert checker.check_winner(board) is None
    assert checker.check_draw(board)


@pytest.mark.parametrize("ai_mark", [Mark.X, Mark.O])
def test_ai_never_loses_to_random_play(ai_mark):
    checker = WinChecker()
    ai = AIPlayer(ai_mark)
    rng = random.Random(7)

    for _ in range(5):
        board = new_board()
        to_move = Mark.X
        while not checker.is_terminal(board):
            if to_move == ai_mark:
                row, col = ai.get_best_move(board)
            else:
                row, col = rng.choice(get_empty_cells(board))
            board[row][col] = to_move
            to_move = to_move.opposite()

        assert checker.check_winner(board) != ai_mark.opposite()


def test_move_suggestion():
    board = board_from_rows(["OO_", "XX_", "___"])

    assert AIPlayer(Mark.O).get_move_suggestion(board) == "Place O at (0, 2)"
    assert AIPlayer(Mark.O).get_move_suggestion(board_from_rows(["XOX", "OXO", "OXO"])) == "No moves available!"
