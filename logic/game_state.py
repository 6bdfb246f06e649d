"""
Game state management for TicTacToe.
Tracks the board history, the viewed move, and whose turn it is.
"""

from typing import Callable, List, Optional, Tuple
from dataclasses import dataclass, field

from .board import Board, Move, Player
from .config import GameConfig
from .move_validator import MoveValidator
from .win_checker import WinChecker, WinResult


Listener = Callable[["GameState"], None]


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - Every board snapshot of the current line of play (history)
    - Which snapshot is being viewed/played from (current_move)

    Whose turn it is follows from current_move alone: X moves on even
    moves, O on odd ones. Playing while viewing an old move drops every
    later snapshot before the new one is added.
    """

    # Board snapshots - index 0 is always the empty board
    history: List[Board] = field(default_factory=lambda: [Board.empty()])

    # Index into history of the board being shown
    current_move: int = 0

    win_checker: WinChecker = field(default_factory=WinChecker, repr=False, compare=False)
    validator: MoveValidator = field(default_factory=MoveValidator, repr=False, compare=False)
    _listeners: List[Listener] = field(default_factory=list, repr=False, compare=False)

    @property
    def current_board(self) -> Board:
        """The board at the current move."""
        return self.history[self.current_move]

    @property
    def current_player(self) -> Player:
        """The player who moves next from the current board."""
        first = Player(GameConfig.FIRST_PLAYER)
        return first if self.current_move % 2 == 0 else first.opposite()

    @property
    def x_is_next(self) -> bool:
        return self.current_player == Player.X

    @property
    def is_game_over(self) -> bool:
        """True once the current board has a winning line."""
        return self.winner() is not None

    def winner(self) -> Optional[WinResult]:
        """Get the winner and winning line of the current board."""
        return self.win_checker.evaluate(self.current_board)

    def attempt_move(self, index: int) -> Optional[Board]:
        """
        Place the current player's mark at the given cell.

        Args:
            index: Cell index (0-8).

        Returns:
            The new board, or None if the move was rejected (game already
            won, cell occupied, or index out of range). A rejected move
            leaves the state untouched.
        """
        result = self.validator.validate_move(self.current_board, index)
        if not result.is_valid:
            if GameConfig.DEBUG_MODE:
                print(f"Move rejected: {result.error_message}")
            return None

        next_board = self.current_board.place(index, self.current_player)

        # Drop any moves after the one being viewed, then add the new board
        self.history = self.history[:self.current_move + 1] + [next_board]
        self.current_move = len(self.history) - 1

        self._notify()
        return next_board

    def jump_to(self, move: int) -> Board:
        """
        View an earlier (or later) snapshot without changing history.

        Args:
            move: History index, 0 <= move < len(history).

        Returns:
            The board at that move.

        Raises:
            IndexError: If move is not in history.
        """
        if not 0 <= move < len(self.history):
            raise IndexError(
                f"Move {move} out of range (history has {len(self.history)} boards)"
            )

        self.current_move = move
        if GameConfig.DEBUG_MODE:
            print(f"Jumped to move {move}")

        self._notify()
        return self.history[move]

    def get_move(self, move_number: int) -> Move:
        """
        Get the move that produced history[move_number].

        Args:
            move_number: History index (1 or more).

        Returns:
            Move with the player and cell that changed.
        """
        if not 1 <= move_number < len(self.history):
            raise IndexError(f"No move #{move_number} in history")

        before = self.history[move_number - 1]
        after = self.history[move_number]
        for index, (old, new) in enumerate(zip(before, after)):
            if old != new:
                return Move(player=new, index=index, move_number=move_number)

        raise ValueError(f"History boards {move_number - 1} and {move_number} are identical")

    def moves(self) -> List[Move]:
        """All moves of the current history, in order."""
        return [self.get_move(k) for k in range(1, len(self.history))]

    def status_text(self) -> str:
        result = self.winner()
        if result is not None:
            return f"Winner: {result.winner.value}"
        return f"Next player: {self.current_player.value}"

    @staticmethod
    def describe_move(move: int) -> str:
        """Label for a history entry."""
        if move > 0:
            return f"Go to move #{move}"
        return "Go to game start"

    def move_descriptions(self) -> List[Tuple[int, str]]:
        """(move, label) for every snapshot in history."""
        return [(move, self.describe_move(move)) for move in range(len(self.history))]

    def add_listener(self, callback: Listener):
        """Call `callback(game_state)` after every committed move or jump."""
        self._listeners.append(callback)

    def remove_listener(self, callback: Listener):
        self._listeners.remove(callback)

    def _notify(self):
        for callback in list(self._listeners):
            callback(self)

    def print_board(self):
        """Print the board to console."""
        print()
        print(self.current_board.pretty())
        print(f"\n{self.status_text()}")
