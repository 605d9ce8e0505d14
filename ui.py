"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- Start menu (Human vs Human / Human vs AI)
- The 3x3 board, with the winning line highlighted
- Game status and running score
- Player names dialog
"""

import tkinter as tk
from tkinter import ttk
import threading
from typing import List, Optional

from logic.board import Mark, Position
from logic.config import GameConfig
from logic.game_state import GameState, GameMode, MoveResult


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    The computer's search runs on a background thread; its result is
    applied on the UI thread through root.after().
    """

    def __init__(
        self,
        computer_mark: Mark = Mark.O,
        player_x_name: Optional[str] = None,
        player_o_name: Optional[str] = None
    ):
        """
        Initialize the UI.

        Args:
            computer_mark: Which mark the computer plays in Human vs AI.
            player_x_name: Name for X (None for the default).
            player_o_name: Name for O (None for the default).
        """
        self.computer_mark = computer_mark
        self.player_x_name = player_x_name
        self.player_o_name = player_o_name
        self.game_state: Optional[GameState] = None
        self.ai_thinking = False

        # Create UI
        self._create_ui()
        self._show_start_menu()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(GameConfig.WINDOW_TITLE)
        self.root.configure(bg=GameConfig.BG_COLOR)
        self.root.minsize(420, 560)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=GameConfig.BG_COLOR)
        style.configure('TLabel', background=GameConfig.BG_COLOR, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        # Start menu
        self.start_frame = ttk.Frame(self.root)

        ttk.Label(self.start_frame, text="🎮 TicTacToe", style='Title.TLabel').pack(pady=(40, 20))

        tk.Button(
            self.start_frame,
            text="👥 Human vs Human",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=20,
            command=lambda: self._start_game(GameMode.HUMAN_VS_HUMAN)
        ).pack(pady=10)

        tk.Button(
            self.start_frame,
            text="🤖 Human vs AI",
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=20,
            command=lambda: self._start_game(GameMode.HUMAN_VS_AI)
        ).pack(pady=10)

        # Game screen
        self.game_frame = ttk.Frame(self.root)

        self.status_label = ttk.Label(self.game_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=(10, 5))

        board_frame = ttk.Frame(self.game_frame)
        board_frame.pack(pady=10)

        self.board_cells: List[List[tk.Button]] = []
        for row in range(GameConfig.BOARD_SIZE):
            row_cells = []
            for col in range(GameConfig.BOARD_SIZE):
                cell = tk.Button(
                    board_frame,
                    text="",
                    font=('Segoe UI', 24, 'bold'),
                    width=4,
                    height=2,
                    bg=GameConfig.CELL_COLOR,
                    fg=GameConfig.EMPTY_COLOR,
                    relief='ridge',
                    borderwidth=2,
                    command=lambda r=row, c=col: self._on_cell_click(r, c)
                )
                cell.grid(row=row, column=col, padx=2, pady=2)
                row_cells.append(cell)
            self.board_cells.append(row_cells)

        # Score section
        ttk.Separator(self.game_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        ttk.Label(self.game_frame, text="📊 Score", style='Title.TLabel').pack()

        self.score_labels = {}
        for mark, color in ((Mark.X, GameConfig.X_COLOR), (Mark.O, GameConfig.O_COLOR)):
            label = ttk.Label(self.game_frame, text="", foreground=color)
            label.pack()
            self.score_labels[mark] = label

        # Control buttons
        ttk.Separator(self.game_frame, orient='horizontal').pack(fill=tk.X, pady=10)

        control_frame = ttk.Frame(self.game_frame)
        control_frame.pack(pady=5)

        for text, color, command in (
            ("🔄 Reset", '#6366f1', self._reset_game),
            ("✏️ Names", '#f59e0b', self._show_names_dialog),
            ("↩ Menu", '#ef4444', self._show_start_menu),
        ):
            tk.Button(
                control_frame,
                text=text,
                font=('Segoe UI', 10, 'bold'),
                bg=color,
                fg='white',
                width=9,
                command=command
            ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _show_start_menu(self):
        """Show the start menu and drop the current game."""
        self.game_frame.pack_forget()
        self.start_frame.pack(fill=tk.BOTH, expand=True)
        self.game_state = None
        self.ai_thinking = False

    def _start_game(self, mode: GameMode):
        """Start a game in the chosen mode."""
        self.game_state = create_game_state(
            mode,
            self.computer_mark,
            self.player_x_name,
            self.player_o_name
        )
        self.start_frame.pack_forget()
        self.game_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)
        self._reset_game()

    def _on_cell_click(self, row: int, col: int):
        """Handle a click on a board cell."""
        # Ignore clicks while the AI is thinking or no game is running
        if self.game_state is None or self.ai_thinking or self.game_state.is_current_player_ai():
            return

        result = self.game_state.make_move(row, col)
        if result is None:
            return

        self._apply_result(result)

    def _apply_result(self, result: MoveResult):
        """Refresh the window after a move, and hand over to the AI if needed."""
        self._update_ui()

        if result.winning_line:
            self._highlight_winning_line(result.winning_line)

        if not self.game_state.is_game_over and self.game_state.is_current_player_ai():
            self._schedule_ai_move()

    def _schedule_ai_move(self):
        """Start the AI after a short delay so its move is visible."""
        self.ai_thinking = True
        self._update_game_info()
        self.root.after(GameConfig.AI_MOVE_DELAY_MS, self._start_ai_thread)

    def _start_ai_thread(self):
        game_state = self.game_state
        if game_state is None:
            self.ai_thinking = False
            return

        # The search only ever sees a private copy
        snapshot = game_state.copy()
        threading.Thread(target=self._ai_move, args=(game_state, snapshot), daemon=True).start()

    def _ai_move(self, game_state: GameState, snapshot: GameState):
        """Run the search (background thread)."""
        try:
            move = snapshot.get_ai_move()
        except Exception as e:
            self.root.after(0, lambda error=e: self._on_ai_error(error))
            return

        self.root.after(0, lambda: self._on_ai_done(game_state, snapshot, move))

    def _on_ai_done(self, game_state: GameState, snapshot: GameState, move: Optional[Position]):
        """Apply the AI's move (UI thread)."""
        self.ai_thinking = False

        # The game was reset or left while the AI was thinking
        if game_state is not self.game_state or game_state.board != snapshot.board:
            return

        if move is None or not game_state.is_current_player_ai():
            return

        result = game_state.make_move(move.row, move.col)
        if result is not None:
            self._apply_result(result)

    def _on_ai_error(self, error: Exception):
        self.ai_thinking = False
        self.status_label.configure(text=f"ERROR: {str(error)[:30]}")
        print(f"AI error: {error}")

    def _update_ui(self):
        if self.game_state is None:
            return
        self._update_board_display()
        self._update_game_info()

    def _update_board_display(self):
        """Update the board grid display."""
        for row in range(GameConfig.BOARD_SIZE):
            for col in range(GameConfig.BOARD_SIZE):
                mark = self.game_state.board[row][col]
                cell = self.board_cells[row][col]

                if mark is None:
                    cell.configure(text="", bg=GameConfig.CELL_COLOR, fg=GameConfig.EMPTY_COLOR)
                else:
                    color = GameConfig.X_COLOR if mark == Mark.X else GameConfig.O_COLOR
                    cell.configure(text=mark.value, fg=color)

    def _update_game_info(self):
        """Update status and score labels."""
        if self.game_state is None:
            return

        if self.game_state.is_game_over:
            if self.game_state.winner:
                winner = self.game_state.get_player(self.game_state.winner)
                self.status_label.configure(text=f"🎉 {winner.name} wins!")
            else:
                self.status_label.configure(text="🤝 It's a draw!")
        else:
            current = self.game_state.get_current_player_info()
            if current.is_ai:
                self.status_label.configure(text=f"{current.name} is thinking...")
            else:
                self.status_label.configure(text=f"{current.name}'s turn ({current.mark.value})")

        for player in self.game_state.get_player_stats():
            self.score_labels[player.mark].configure(
                text=f"{player.name} ({player.mark.value}): {player.wins}"
            )

    def _highlight_winning_line(self, winning_line: List[Position]):
        for row, col in winning_line:
            self.board_cells[row][col].configure(bg=GameConfig.WIN_CELL_COLOR)

    def _reset_game(self):
        """Reset the board. Names and scores are kept."""
        if self.game_state is None:
            return

        # A pending computer move is dropped by _on_ai_done
        self.ai_thinking = False
        self.game_state.reset_game()
        self._update_ui()

        # The computer may be X
        if self.game_state.is_current_player_ai():
            self._schedule_ai_move()

    def _show_names_dialog(self):
        """Show the player names dialog."""
        if self.game_state is None:
            return

        dialog = tk.Toplevel(self.root)
        dialog.title("Player Names")
        dialog.configure(bg=GameConfig.BG_COLOR)
        dialog.transient(self.root)
        dialog.grab_set()

        entries = {}
        for mark in (Mark.X, Mark.O):
            player = self.game_state.get_player(mark)
            ttk.Label(dialog, text=f"Player {mark.value}:").pack(padx=20, pady=(10, 0))

            entry = ttk.Entry(dialog)
            entry.insert(0, player.name)
            # The computer keeps its name
            if player.is_ai:
                entry.configure(state='disabled')
            entry.pack(padx=20)
            entries[mark] = entry

        def save():
            self.game_state.set_player_names(entries[Mark.X].get(), entries[Mark.O].get())
            self._update_game_info()
            dialog.destroy()

        button_frame = ttk.Frame(dialog)
        button_frame.pack(pady=10)
        tk.Button(button_frame, text="Save", bg='#10b981', fg='white', width=8, command=save).pack(side=tk.LEFT, padx=5)
        tk.Button(button_frame, text="Cancel", bg='#2d3748', fg='white', width=8, command=dialog.destroy).pack(side=tk.LEFT, padx=5)

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def create_game_state(
    mode: GameMode,
    computer_mark: Mark,
    player_x_name: Optional[str] = None,
    player_o_name: Optional[str] = None
) -> GameState:
    """Build the game the window plays for the chosen mode."""
    return GameState(
        player_x_name=player_x_name,
        player_o_name=player_o_name,
        mode=mode,
        computer_mark=computer_mark
    )


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the computer play first (as X)"
    )
    parser.add_argument("--player-x", default=None, help="Name for player X")
    parser.add_argument("--player-o", default=None, help="Name for player O")

    args = parser.parse_args()

    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60 + "\n")

    ui = TicTacToeUI(
        computer_mark=Mark.X if args.ai_first else Mark.O,
        player_x_name=args.player_x,
        player_o_name=args.player_o
    )
    ui.run()


if __name__ == "__main__":
    main()
