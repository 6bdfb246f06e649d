"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass

from .board import Board
from .config import GameConfig
from .win_checker import evaluate


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. No moves once the board has a winner
    2. Cell index must be 0-8
    3. Can only place on empty cells
    """

    def validate_move(self, board: Board, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: The board the move would be played on.
            index: Cell to place the mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        result = evaluate(board)
        if result is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Game is already over! Winner: {result.winner.value}"
            )

        # Check if index is in valid range
        if not 0 <= index < GameConfig.NUM_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{GameConfig.NUM_CELLS - 1}."
            )

        # Check if cell is empty
        occupant = board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all valid moves on a board.

        Returns:
            List of cell indices; empty once the board has a winner.
        """
        if evaluate(board) is not None:
            return []
        return board.empty_cells()
