"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- Game status (next player or winner)
- The 3x3 board, with the winning line highlighted
- Move history; click an entry to go back to that move
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional

from logic.board import Player, index_to_cell
from logic.config import GameConfig
from logic.game_state import GameState


BG_COLOR = '#1a1a2e'
CELL_BG = '#16213e'
WIN_BG = '#b45309'
MARK_COLORS = {
    Player.X: '#f87171',
    Player.O: '#10b981',
}


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    The window is redrawn from GameState after every move or jump, through
    a listener registered on the game state.
    """

    def __init__(self):
        """Initialize the UI."""
        self.game_state: Optional[GameState] = None
        self.board_cells = []
        self.history_buttons = []

        self._create_ui()
        self._new_game()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg=BG_COLOR)
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=BG_COLOR)
        style.configure('TLabel', background=BG_COLOR, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        # Left panel - board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.BOTH, padx=(0, 10))

        ttk.Label(left_frame, text="🎮 Game Board", style='Title.TLabel').pack(pady=(0, 5))

        self.status_label = ttk.Label(left_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        board_frame = ttk.Frame(left_frame)
        board_frame.pack(pady=10)

        for index in range(GameConfig.NUM_CELLS):
            row, col = index_to_cell(index)
            cell = tk.Button(
                board_frame,
                text="",
                font=('Segoe UI', 24, 'bold'),
                width=3,
                height=1,
                bg=CELL_BG,
                fg='white',
                activebackground='#1f2b4d',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        # Right panel - history
        right_frame = ttk.Frame(main_frame, width=220)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        ttk.Label(right_frame, text="📜 History", style='Title.TLabel').pack(pady=(0, 10))

        self.history_frame = ttk.Frame(right_frame)
        self.history_frame.pack(fill=tk.X)

        # Control buttons
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)

        tk.Button(
            right_frame,
            text="🔄 New Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=16,
            command=self._new_game
        ).pack(pady=5)

        tk.Button(
            right_frame,
            text="✕ Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=16,
            command=self._quit
        ).pack(pady=5)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _new_game(self):
        """Start a fresh game and redraw."""
        print("Starting new game...")
        self.game_state = GameState()
        self.game_state.add_listener(self._on_state_change)
        self._refresh()

    def _on_cell_click(self, index: int):
        """Play the current player's mark on a clicked cell."""
        player = self.game_state.current_player
        if self.game_state.attempt_move(index) is not None:
            row, col = index_to_cell(index)
            print(f"{player.value} placed at ({row}, {col})")

    def _on_history_click(self, move: int):
        self.game_state.jump_to(move)

    def _on_state_change(self, game_state: GameState):
        self._refresh()

    def _refresh(self):
        """Redraw status, board and history from the game state."""
        self.status_label.configure(text=self.game_state.status_text())
        self._update_board_display()
        self._update_history_display()

    def _update_board_display(self):
        """Update the board grid display."""
        board = self.game_state.current_board
        result = self.game_state.winner()

        for index, cell in enumerate(self.board_cells):
            mark = board[index]
            bg_color = WIN_BG if result and result.contains(index) else CELL_BG

            if mark is None:
                cell.configure(text="", bg=bg_color)
            else:
                cell.configure(text=mark.value, bg=bg_color, fg=MARK_COLORS[mark])

    def _update_history_display(self):
        """Rebuild the list of history buttons."""
        for button in self.history_buttons:
            button.destroy()
        self.history_buttons = []

        for move, description in self.game_state.move_descriptions():
            is_current = move == self.game_state.current_move
            button = tk.Button(
                self.history_frame,
                text=description,
                font=('Segoe UI', 10, 'bold' if is_current else 'normal'),
                bg='#00d4ff' if is_current else '#2d3748',
                fg='black' if is_current else 'white',
                anchor='w',
                command=lambda m=move: self._on_history_click(m)
            )
            button.pack(fill=tk.X, pady=1)
            self.history_buttons.append(button)

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print rejected moves and history jumps"
    )

    args = parser.parse_args()
    GameConfig.DEBUG_MODE = args.debug

    print("\n" + "="*40)
    print("   TicTacToe UI")
    print("="*40 + "\n")

    ui = TicTacToeUI()
    ui.run()


if __name__ == "__main__":
    main()
