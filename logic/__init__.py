"""
Logic module for TicTacToe.
Handles the board, game state, rules, and AI opponent.
"""

from .config import GameConfig
from .board import Board, Mark, Position, new_board, copy_board, get_empty_cells
from .game_state import GameState, GameMode, Human, Computer, PlayerInfo, MoveResult
from .move_validator import MoveValidator
from .win_checker import WinChecker
from .ai_player import AIPlayer
