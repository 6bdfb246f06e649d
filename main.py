"""
Main script for TicTacToe.

Launches the Tkinter window by default, or a console game with --no-ui.

Console commands:
- 0-8          place the current player's mark on that cell
- jump N, j N  go back (or forward) to move N
- history, h   list the moves of the current history
- new          start a new game
- quit, q      exit
"""

from typing import Callable, Optional

from logic.config import GameConfig
from logic.game_state import GameState


class ConsoleGame:
    """
    Console front-end for TicTacToe with time travel.

    Game flow:
    1. The board is printed with cell numbers on empty squares
    2. The current player types a cell number
    3. Any earlier move can be revisited with 'jump N'; playing from there
       replaces the moves that came after it
    4. Repeat until someone wins or the players quit
    """

    def __init__(self, input_func: Optional[Callable[[str], str]] = None):
        """
        Initialize the console game.

        Args:
            input_func: Reads one line of input given a prompt (default: input).
        """
        self.input_func = input_func or input
        self.game_state = GameState()
        self.is_running = False

    def start(self):
        """Start the game."""
        print("\nStarting TicTacToe game...")
        print("Type a cell number (0-8), 'jump N', 'history', 'new' or 'quit'\n")

        self.is_running = True
        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            self.game_state.print_board()

            try:
                line = self.input_func(f"{self.game_state.current_player.value}> ")
            except EOFError:
                self.is_running = False
                break

            self.handle_command(line)

    def handle_command(self, line: str):
        """
        Handle one line of console input.

        Args:
            line: The raw input line.
        """
        parts = line.strip().lower().split()
        if not parts:
            return

        command = parts[0]

        if command in ("q", "quit", "exit"):
            print("\nGame quit by user.")
            self.is_running = False
        elif command in ("h", "history"):
            self._show_history()
        elif command == "new":
            self._reset_game()
        elif command in ("j", "jump"):
            if len(parts) != 2:
                print("Usage: jump N")
                return
            self._jump(parts[1])
        else:
            self._play(command)

    def _play(self, text: str):
        """Play the current player's mark on a typed cell."""
        try:
            index = int(text)
        except ValueError:
            print(f"Unknown command: {text!r}")
            return

        player = self.game_state.current_player
        result = self.game_state.validator.validate_move(self.game_state.current_board, index)
        if not result.is_valid:
            print(f"Illegal move: {result.error_message}")
            return

        self.game_state.attempt_move(index)
        print(f"\n>>> {player.value} played cell {index}")

        if self.game_state.is_game_over:
            self._show_game_result()

    def _jump(self, text: str):
        """Jump to a typed history index."""
        try:
            move = int(text)
            self.game_state.jump_to(move)
        except ValueError:
            print(f"Not a move number: {text!r}")
            return
        except IndexError as e:
            print(f"Can't jump: {e}")
            return

        print(f"\n>>> {self.game_state.describe_move(move)}")

    def _show_history(self):
        """Print every history entry, marking the one being viewed."""
        print("\nHistory:")
        for move, description in self.game_state.move_descriptions():
            marker = "*" if move == self.game_state.current_move else " "
            if move > 0:
                played = self.game_state.get_move(move)
                detail = f" ({played.player.value} at row {played.row}, col {played.col})"
            else:
                detail = ""
            print(f" {marker} {move}: {description}{detail}")

    def _show_game_result(self):
        """Show the winner."""
        result = self.game_state.winner()

        print("\n" + "="*40)
        print("   GAME OVER!")
        print("="*40)
        print(f"\n🏆 {result.winner.value} WINS! Line: {list(result.line)}")
        print("Type 'jump N' to look back, 'new' for another game.")

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.game_state = GameState()
        print("Game reset!")


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe with time travel")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print rejected moves and history jumps"
    )

    args = parser.parse_args(argv)

    GameConfig.DEBUG_MODE = args.debug

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*40)
        print("   TicTacToe UI")
        print("="*40 + "\n")
        ui = TicTacToeUI()
        ui.run()
        return

    # Console mode (--no-ui)
    game = ConsoleGame()

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
