"""
Board model for TicTacToe.
Players, immutable board snapshots, and single moves.
"""

from enum import Enum
from typing import Iterator, List, Optional, Tuple
from dataclasses import dataclass

from .config import GameConfig


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


# None means an empty cell
Cell = Optional[Player]


def index_to_cell(index: int) -> Tuple[int, int]:
    """Convert a cell index (0-8) to (row, col)."""
    return divmod(index, GameConfig.BOARD_SIZE)


def cell_to_index(row: int, col: int) -> int:
    """Convert (row, col) to a cell index (0-8)."""
    return row * GameConfig.BOARD_SIZE + col


@dataclass(frozen=True)
class Board:
    """
    One snapshot of the 3x3 board.

    Cells are stored as a tuple in row-major order, so a Board can never
    change after it is created. Placing a mark returns a new Board.
    """

    cells: Tuple[Cell, ...]

    def __post_init__(self) -> None:
        assert len(self.cells) == GameConfig.NUM_CELLS

    @classmethod
    def empty(cls) -> "Board":
        """The all-empty starting board."""
        return cls((None,) * GameConfig.NUM_CELLS)

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def place(self, index: int, player: Player) -> "Board":
        """
        Return a copy of this board with `player`'s mark at `index`.

        Args:
            index: Cell index (0-8).
            player: Whose mark to place.

        Returns:
            A new Board; this one is left untouched.
        """
        new_cells = list(self.cells)
        new_cells[index] = player
        return Board(tuple(new_cells))

    def empty_cells(self) -> List[int]:
        """Get the indices of all empty cells."""
        return [i for i, cell in enumerate(self.cells) if cell is None]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def rows(self) -> List[Tuple[Cell, ...]]:
        """Split the board into its three rows."""
        size = GameConfig.BOARD_SIZE
        return [self.cells[i:i + size] for i in range(0, GameConfig.NUM_CELLS, size)]

    def pretty(self) -> str:
        """
        Render the board as text.
        Empty cells show their index so a console player knows what to type.
        """
        lines = []
        for row_num, row in enumerate(self.rows()):
            symbols = []
            for col, cell in enumerate(row):
                if cell is None:
                    symbols.append(str(cell_to_index(row_num, col)))
                else:
                    symbols.append(cell.value)
            lines.append(" " + " | ".join(symbols))
        return "\n---+---+---\n".join(lines)


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    index: int              # Cell index (0-8)
    move_number: int        # History index this move produced (1-9)

    @property
    def row(self) -> int:
        return index_to_cell(self.index)[0]

    @property
    def col(self) -> int:
        return index_to_cell(self.index)[1]
