"""
Game state management for TicTacToe.
Tracks the board, current player, seats, names, and wins.
"""

from enum import Enum
from typing import Dict, List, Optional, Union
from dataclasses import dataclass, field, replace

from .ai_player import AIPlayer
from .board import Board, Mark, Position, copy_board, format_board, get_empty_cells, new_board
from .config import GameConfig
from .move_validator import MoveValidator
from .win_checker import WinChecker


class GameMode(Enum):
    """Who sits at the board."""
    HUMAN_VS_HUMAN = "human-vs-human"
    HUMAN_VS_AI = "human-vs-ai"


@dataclass(frozen=True)
class Human:
    """A seat whose moves come from a person."""


@dataclass(frozen=True)
class Computer:
    """A seat whose moves come from the search engine."""
    mark: Mark


Seat = Union[Human, Computer]


@dataclass
class PlayerInfo:
    """A player's name, mark, seat and win count."""
    mark: Mark
    name: str
    wins: int = 0
    seat: Seat = field(default_factory=Human)

    @property
    def is_ai(self) -> bool:
        return isinstance(self.seat, Computer)


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Mark            # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # Which move this is (0-8)


@dataclass
class MoveResult:
    """What happened after a move was played."""
    winner: Optional[Mark] = None
    is_draw: bool = False
    winning_line: Optional[List[Position]] = None


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The 3x3 board (which marks are where)
    - Current player
    - Both players (name, seat, wins)
    - Move history
    - Game status (ongoing, won, draw)

    Wins and names survive reset_game(); everything else is cleared.
    """

    player_x_name: Optional[str] = None
    player_o_name: Optional[str] = None
    mode: GameMode = GameMode.HUMAN_VS_HUMAN

    # Which mark the computer plays in HUMAN_VS_AI mode
    computer_mark: Mark = Mark.O

    # The 3x3 board - None means empty
    board: Board = field(default_factory=new_board)

    # Current player's turn (X always starts)
    current_player: Mark = Mark.X

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Mark] = None
    is_draw: bool = False
    is_game_over: bool = False

    players: Dict[Mark, PlayerInfo] = field(init=False, repr=False)

    def __post_init__(self):
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        self.players = {}
        for mark in (Mark.X, Mark.O):
            seat = self._seat_for(mark)
            self.players[mark] = PlayerInfo(
                mark=mark,
                name=self._initial_name(mark, seat),
                seat=seat
            )

        # One search engine per computer seat
        self._engines: Dict[Mark, AIPlayer] = {
            mark: AIPlayer(info.seat.mark)
            for mark, info in self.players.items()
            if isinstance(info.seat, Computer)
        }

    def _seat_for(self, mark: Mark) -> Seat:
        if self.mode == GameMode.HUMAN_VS_AI and mark == self.computer_mark:
            return Computer(mark)
        return Human()

    def _initial_name(self, mark: Mark, seat: Seat) -> str:
        if isinstance(seat, Computer):
            return GameConfig.COMPUTER_NAME

        given = self.player_x_name if mark == Mark.X else self.player_o_name
        if given:
            return given

        if self.mode == GameMode.HUMAN_VS_AI:
            return GameConfig.HUMAN_NAME
        return self._default_name(mark)

    @staticmethod
    def _default_name(mark: Mark) -> str:
        return GameConfig.DEFAULT_X_NAME if mark == Mark.X else GameConfig.DEFAULT_O_NAME

    def make_move(self, row: int, col: int) -> Optional[MoveResult]:
        """
        Make a move at the given position for the current player.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            MoveResult describing the outcome, or None if the move was rejected.
        """
        validation = self.validator.validate_move(self, row, col)
        if not validation.is_valid:
            print(validation.error_message)
            return None

        mark = self.current_player
        self.board[row][col] = mark
        self.moves.append(Move(
            player=mark,
            row=row,
            col=col,
            move_number=len(self.moves)
        ))

        winner = self.win_checker.check_winner(self.board)
        if winner is not None:
            self.winner = winner
            self.is_game_over = True
            self.players[winner].wins += 1
            return MoveResult(
                winner=winner,
                winning_line=self.win_checker.get_winning_line(self.board)
            )

        if self.win_checker.is_full(self.board):
            self.is_draw = True
            self.is_game_over = True
            return MoveResult(is_draw=True)

        self.current_player = self.current_player.opposite()
        return MoveResult()

    def make_ai_move(self) -> Optional[MoveResult]:
        """
        Let the computer play if it's its turn.

        Returns:
            MoveResult of the computer's move, or None if it's not the
            computer's turn or the game is over.
        """
        move = self.get_ai_move()
        if move is None:
            return None

        return self.make_move(move.row, move.col)

    def get_ai_move(self) -> Optional[Position]:
        """
        Ask the computer seat for its move without playing it.

        Returns:
            The chosen Position, or None if it's not the computer's turn,
            the game is over, or the board is full.
        """
        if self.is_game_over or not self.is_current_player_ai():
            return None

        return self._engines[self.current_player].get_best_move(self.board)

    def get_hint(self) -> str:
        """Suggest a move for whoever is to play."""
        if self.is_game_over:
            return "Game is over!"
        return AIPlayer(self.current_player).get_move_suggestion(self.board)

    def get_empty_cells(self) -> List[Position]:
        """Get all empty cells on the board."""
        return get_empty_cells(self.board)

    def get_player(self, mark: Mark) -> PlayerInfo:
        return self.players[mark]

    def get_current_player_info(self) -> PlayerInfo:
        """Get the player whose turn it is."""
        return self.players[self.current_player]

    def is_current_player_ai(self) -> bool:
        return self.get_current_player_info().is_ai

    def get_player_stats(self) -> List[PlayerInfo]:
        """Both players, X first."""
        return [self.players[Mark.X], self.players[Mark.O]]

    def set_player_names(self, x_name: str, o_name: str):
        """
        Rename the players.

        Blank names fall back to the defaults; the computer keeps its name.
        """
        for mark, name in ((Mark.X, x_name), (Mark.O, o_name)):
            info = self.players[mark]
            if info.is_ai:
                continue
            name = (name or "").strip()
            info.name = name or self._default_name(mark)

    def reset_game(self):
        """Start a new round. Names and wins are kept."""
        self.board = new_board()
        self.current_player = Mark.X
        self.moves = []
        self.winner = None
        self.is_draw = False
        self.is_game_over = False

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        new_state = GameState(
            player_x_name=self.player_x_name,
            player_o_name=self.player_o_name,
            mode=self.mode,
            computer_mark=self.computer_mark,
            board=copy_board(self.board),
            current_player=self.current_player,
            moves=list(self.moves),
            winner=self.winner,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over
        )
        new_state.players = {mark: replace(info) for mark, info in self.players.items()}
        return new_state

    def print_board(self):
        """Print the board to console."""
        print()
        print(format_board(self.board))

        # Print game info
        if self.is_game_over:
            if self.winner:
                print(f"\n🏆 {self.players[self.winner].name} ({self.winner.value}) WINS!")
            else:
                print("\n🤝 It's a DRAW!")
        else:
            info = self.get_current_player_info()
            print(f"\nCurrent turn: {info.name} ({info.mark.value})")


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState()

    # Simulate a game
    moves = [
        (1, 1),  # X center
        (0, 0),  # O top-left
        (0, 2),  # X top-right
        (2, 2),  # O bottom-right
        (2, 0),  # X bottom-left - this should be a win!
    ]

    for row, col in moves:
        print(f"\n{game.current_player.value} moves to ({row}, {col})")
        game.make_move(row, col)
        game.print_board()

    assert game.winner == Mark.X

    print("\nGame state test done!")
