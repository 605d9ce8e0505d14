"""
TicTacToe
=========
Two-player TicTacToe with an optional computer opponent.
The computer searches the whole game tree (Minimax with alpha-beta
pruning), so it never loses.

Play in a window (ui.py) or in the console (main.py --no-ui).
"""

__version__ = "1.0.0"
