"""
Win checker for TicTacToe.
Checks if a player has completed a line on a board snapshot.
"""

from typing import Optional, Sequence, Tuple
from dataclasses import dataclass

from .board import Board, Cell, Player


# All possible winning lines (as cell indices), in priority order
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass(frozen=True)
class WinResult:
    """A completed line and the player who owns it."""
    winner: Player
    line: Tuple[int, int, int]

    def contains(self, index: int) -> bool:
        """Check if a cell is part of the winning line."""
        return index in self.line


def evaluate(board: Sequence[Cell]) -> Optional[WinResult]:
    """
    Find the winning line on a board, if any.

    Lines are checked in WINNING_LINES order and the first complete one is
    returned, so the result is deterministic even if two lines are filled.
    A full board with no line returns None; there is no draw result.

    Args:
        board: A board snapshot (9 cells).

    Returns:
        WinResult for the first complete line, or None.
    """
    for a, b, c in WINNING_LINES:
        if board[a] is not None and board[a] == board[b] == board[c]:
            return WinResult(winner=board[a], line=(a, b, c))
    return None


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def evaluate(self, board: Board) -> Optional[WinResult]:
        """Get the winner and winning line, or None."""
        return evaluate(board)

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            board: The board snapshot.

        Returns:
            The winning Player, or None if no winner yet.
        """
        result = evaluate(board)
        return result.winner if result else None

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """Get the winning line as cell indices, or None."""
        result = evaluate(board)
        return result.line if result else None
