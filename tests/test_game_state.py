"""Tests for the game engine."""

from logic.board import Mark, board_from_rows
from logic.config import GameConfig
from logic.game_state import Computer, GameMode, GameState, Human


def play(game, moves):
    result = None
    for row, col in moves:
        result = game.make_move(row, col)
    return result


X_WINS_TOP_ROW = [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]
DRAW = [(0, 0), (0, 1), (0, 2), (1, 2), (1, 0), (2, 0), (1, 1), (2, 2), (2, 1)]


def test_game_initializes_with_empty_board():
    game = GameState("A", "B")

    assert all(cell is None for row in game.board for cell in row)
    assert game.current_player == Mark.X
    assert not game.is_game_over
    assert game.winner is None


def test_can_play_valid_moves():
    game = GameState("A", "B")

    first = game.make_move(0, 0)
    assert game.board[0][0] == Mark.X
    assert game.current_player == Mark.O
    assert first.winner is None
    assert not first.is_draw

    game.make_move(1, 1)
    assert game.board[1][1] == Mark.O
    assert game.current_player == Mark.X
    assert [m.move_number for m in game.moves] == [0, 1]


def test_prevents_move_on_occupied_cell():
    game = GameState("A", "B")
    game.make_move(0, 0)

    assert game.make_move(0, 0) is None
    assert game.current_player == Mark.O


def test_prevents_move_off_the_board():
    game = GameState("A", "B")

    assert game.make_move(3, 1) is None
    assert game.moves == []


def test_detects_wins():
    game = GameState("A", "B")

    result = play(game, X_WINS_TOP_ROW)

    assert result.winner == Mark.X
    assert result.winning_line == [(0, 0), (0, 1), (0, 2)]
    assert game.is_game_over
    assert game.winner == Mark.X
    assert game.make_move(2, 2) is None


def test_detects_draw():
    game = GameState("A", "B")

    result = play(game, DRAW)

    assert result.is_draw
    assert result.winner is None
    assert game.is_game_over
    assert game.winner is None


def test_win_increases_winner_stats():
    game = GameState("A", "B")
    play(game, X_WINS_TOP_ROW)

    assert game.get_player(Mark.X).wins == 1
    assert game.get_player(Mark.O).wins == 0


def test_reset_clears_board_and_keeps_stats():
    game = GameState("A", "B")
    play(game, X_WINS_TOP_ROW)

    game.reset_game()

    assert all(cell is None for row in game.board for cell in row)
    assert game.current_player == Mark.X
    assert not game.is_game_over
    assert game.moves == []
    assert game.get_player(Mark.X).wins == 1
    assert game.get_player(Mark.X).name == "A"


def test_default_names_depend_on_mode():
    two_humans = GameState()
    assert [p.name for p in two_humans.get_player_stats()] == ["Player X", "Player O"]

    against_ai = GameState(mode=GameMode.HUMAN_VS_AI)
    assert [p.name for p in against_ai.get_player_stats()] == [GameConfig.HUMAN_NAME, GameConfig.COMPUTER_NAME]


def test_seats():
    game = GameState(mode=GameMode.HUMAN_VS_AI)

    assert game.get_player(Mark.X).seat == Human()
    assert game.get_player(Mark.O).seat == Computer(Mark.O)
    assert not game.is_current_player_ai()

    game.make_move(1, 1)
    assert game.is_current_player_ai()


def test_set_player_names():
    game = GameState("A", "B")

    game.set_player_names("  Ann  ", "")

    assert game.get_player(Mark.X).name == "Ann"
    assert game.get_player(Mark.O).name == "Player O"


def test_computer_keeps_its_name():
    game = GameState(mode=GameMode.HUMAN_VS_AI)

    game.set_player_names("Ann", "Bob")

    assert game.get_player(Mark.X).name == "Ann"
    assert game.get_player(Mark.O).name == GameConfig.COMPUTER_NAME


def test_ai_move_blocks_winning_move():
    game = GameState("A", mode=GameMode.HUMAN_VS_AI)
    game.board = board_from_rows(["XX_", "O__", "_O_"])
    game.current_player = Mark.O

    assert game.get_ai_move() == (0, 2)

    result = game.make_ai_move()

    assert result is not None
    assert game.board[0][2] == Mark.O
    assert game.current_player == Mark.X


def test_ai_move_takes_win():
    game = GameState("A", mode=GameMode.HUMAN_VS_AI)
    game.board = board_from_rows(["OO_", "XX_", "___"])
    game.current_player = Mark.O

    result = game.make_ai_move()

    assert result.winner == Mark.O
    assert game.get_player(Mark.O).wins == 1


def test_no_ai_move_on_human_turn():
    human_game = GameState()
    assert human_game.make_ai_move() is None

    ai_game = GameState(mode=GameMode.HUMAN_VS_AI)
    assert ai_game.get_ai_move() is None


def test_computer_can_play_first():
    game = GameState(mode=GameMode.HUMAN_VS_AI, computer_mark=Mark.X)

    assert game.is_current_player_ai()
    assert game.get_player(Mark.O).name == GameConfig.HUMAN_NAME

    game.make_ai_move()

    assert game.board[0][0] == Mark.X
    assert game.current_player == Mark.O


def test_human_cannot_beat_ai():
    game = GameState(mode=GameMode.HUMAN_VS_AI)

    while not game.is_game_over:
        if game.is_current_player_ai():
            game.make_ai_move()
        else:
            # Human always takes the first free cell
            row, col = game.get_empty_cells()[0]
            game.make_move(row, col)

    assert game.winner != Mark.X


def test_copy_is_independent():
    game = GameState("A", "B")
    play(game, X_WINS_TOP_ROW)

    clone = game.copy()
    clone.reset_game()
    clone.players[Mark.X].wins += 1

    assert game.is_game_over
    assert game.board[0][0] == Mark.X
    assert game.get_player(Mark.X).wins == 1
    assert clone.get_player(Mark.X).wins == 2


def test_get_hint():
    game = GameState()
    game.board = board_from_rows(["XX_", "OO_", "___"])

    assert game.get_hint() == "Place X at (0, 2)"
