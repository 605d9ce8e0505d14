"""
Main entry point for TicTacToe.

This script ties together:
- Logic (game state, move validation, AI)
- The Tkinter window (ui.py), or a console game loop

Run this script to play TicTacToe!
"""

from typing import Optional, Tuple

from logic.board import Mark
from logic.game_state import GameState, GameMode


class TicTacToeConsole:
    """
    Console controller for TicTacToe.

    Game flow:
    1. The player to move types "row col"
    2. If the other seat is the computer, it answers straight away
    3. Repeat until someone wins or it's a draw
    4. Offer another round (wins are kept)
    """

    def __init__(self, game_state: GameState):
        """
        Initialize the console game.

        Args:
            game_state: The game to play.
        """
        self.game_state = game_state
        self.is_running = False

    def start(self):
        """Start the game."""
        print("\nStarting TicTacToe game...")
        print("Type 'row col' to play, 'h' for a hint, 'r' to reset, 'q' to quit\n")

        self.is_running = True
        while self.is_running:
            self._game_loop()
            if self.is_running:
                self._show_game_result()
                self.is_running = self._ask_play_again()
                if self.is_running:
                    self._reset_game()

    def _game_loop(self):
        """Play one round."""
        while self.is_running and not self.game_state.is_game_over:
            if self.game_state.is_current_player_ai():
                self._ai_move()
                continue

            self.game_state.print_board()
            command = self._read_command()
            if command is None:
                continue

            if command == "q":
                print("\nGame quit by user.")
                self.is_running = False
            elif command == "h":
                print(self.game_state.get_hint())
            elif command == "r":
                self._reset_game()
            else:
                row, col = command
                self.game_state.make_move(row, col)

    def _read_command(self):
        """
        Read one command from the player.

        Returns:
            "q", "h", "r", a (row, col) tuple, or None if the input didn't parse.
        """
        info = self.game_state.get_current_player_info()
        text = input(f"{info.name} ({info.mark.value}) > ").strip().lower()

        if text in ("q", "h", "r"):
            return text

        move = parse_move(text)
        if move is None:
            print("Please type a row and column, e.g. '1 2'.")
        return move

    def _ai_move(self):
        """Let the computer play."""
        info = self.game_state.get_current_player_info()
        print(f"\n>>> {info.name} is thinking...")

        result = self.game_state.make_ai_move()
        if result is None:
            print("ERROR: AI could not find a move!")
            self.is_running = False
            return

        last = self.game_state.moves[-1]
        print(f">>> {info.name} plays {last.player.value} at ({last.row}, {last.col})")

    def _show_game_result(self):
        """Show the final result and the running score."""
        print("\n" + "="*40)
        print("   GAME OVER!")
        print("="*40)

        self.game_state.print_board()

        print()
        for player in self.game_state.get_player_stats():
            print(f"  {player.name} ({player.mark.value}): {player.wins} wins")

        print("\n" + "="*40)

    def _ask_play_again(self) -> bool:
        answer = input("Play again? [y/N] ").strip().lower()
        return answer in ("y", "yes")

    def _reset_game(self):
        """Reset the board for a new round."""
        print("\nResetting game...")
        self.game_state.reset_game()


def parse_move(text: str) -> Optional[Tuple[int, int]]:
    """
    Parse "row col" (or "row,col") into a tuple.

    Range checks are left to the move validator.
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def build_game(args) -> GameState:
    """Create the game state from command line arguments."""
    mode = GameMode.HUMAN_VS_AI if args.mode == "ai" else GameMode.HUMAN_VS_HUMAN
    computer_mark = Mark.X if args.ai_first else Mark.O

    return GameState(
        player_x_name=args.player_x,
        player_o_name=args.player_o,
        mode=mode,
        computer_mark=computer_mark
    )


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--mode",
        choices=["human", "ai"],
        default="ai",
        help="Opponent type (default: ai)"
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the computer play first (as X)"
    )
    parser.add_argument("--player-x", default=None, help="Name for player X")
    parser.add_argument("--player-o", default=None, help="Name for player O")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )

    args = parser.parse_args(argv)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(
            computer_mark=Mark.X if args.ai_first else Mark.O,
            player_x_name=args.player_x,
            player_o_name=args.player_o
        )
        ui.run()
        return

    game = TicTacToeConsole(build_game(args))

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
