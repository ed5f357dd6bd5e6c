"""
Board module for Reversi.
Holds the immutable board snapshot used by the rules, the search and the game history.
"""
from typing import List, Optional, Sequence, Tuple
import numpy as np


class Board:
    """
    Immutable 8x8 Reversi board.

    Cells are stored in a read-only numpy array indexed ``[y, x]``; every
    public coordinate is ``(x, y)`` with x the column and y the row.
    """

    # Board dimensions
    SIZE = 8
    BOARD_SIZE = SIZE * SIZE

    # Player constants
    EMPTY = 0
    BLACK = 1  # Player 1, moves first
    WHITE = 2  # Player 2

    SYMBOLS = {EMPTY: '.', BLACK: 'B', WHITE: 'W'}

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Create a board.

        Args:
            grid: Optional 8x8 array of cell values. When omitted the standard
                starting position is used. The array is copied.
        """
        if grid is None:
            grid = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)
            grid[3, 3] = self.WHITE
            grid[3, 4] = self.BLACK
            grid[4, 3] = self.BLACK
            grid[4, 4] = self.WHITE
        else:
            grid = np.asarray(grid)
            if grid.shape != (self.SIZE, self.SIZE):
                raise ValueError("Only 8x8 board is supported")
            # Checked before the cast so that 1.7 is not truncated to BLACK
            if not np.isin(grid, (self.EMPTY, self.BLACK, self.WHITE)).all():
                raise ValueError("Board cells must be EMPTY, BLACK or WHITE")
            grid = grid.astype(np.int8)

        grid.flags.writeable = False
        self._grid = grid

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """
        Build a board from eight strings using '.', 'B' and 'W'.

        Whitespace inside a row is ignored, so ``"B . W ..."`` is accepted.
        """
        lookup = {symbol: value for value, symbol in cls.SYMBOLS.items()}
        cleaned = [''.join(row.split()) for row in rows]
        if len(cleaned) != cls.SIZE or any(len(row) != cls.SIZE for row in cleaned):
            raise ValueError("Expected 8 rows of 8 cells")
        try:
            grid = [[lookup[ch.upper()] for ch in row] for row in cleaned]
        except KeyError as e:
            raise ValueError(f"Unknown cell symbol: {e.args[0]!r}") from None
        return cls(np.array(grid, dtype=np.int8))

    @staticmethod
    def is_on_board(x: int, y: int) -> bool:
        """Check if the coordinates are within the board boundaries."""
        return 0 <= x < Board.SIZE and 0 <= y < Board.SIZE

    @staticmethod
    def opponent(player: int) -> int:
        """Return the other player."""
        return Board.WHITE if player == Board.BLACK else Board.BLACK

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the underlying grid, indexed [y, x]."""
        return self._grid

    def get(self, x: int, y: int) -> int:
        """Value of the cell at column x, row y."""
        return int(self._grid[y, x])

    def rows(self) -> List[List[int]]:
        """The grid as nested Python lists (row-major)."""
        return self._grid.tolist()

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        return Board(self._grid.copy())

    def get_board_state(self) -> np.ndarray:
        """
        Get the board state as a writable numpy array.

        Returns:
            2D numpy array; changing it does not affect this board
        """
        return self._grid.copy()

    def count(self, player: int) -> int:
        """Number of stones owned by player."""
        return int(np.count_nonzero(self._grid == player))

    def get_score(self) -> Tuple[int, int]:
        """
        Get the stone count.

        Returns:
            Tuple of (black_count, white_count)
        """
        return self.count(self.BLACK), self.count(self.WHITE)

    def total_stones(self) -> int:
        return int(np.count_nonzero(self._grid))

    def empty_count(self) -> int:
        return self.BOARD_SIZE - self.total_stones()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self._grid, other._grid)

    def __hash__(self) -> int:
        return hash(self._grid.tobytes())

    def __repr__(self) -> str:
        black, white = self.get_score()
        return f"Board(black={black}, white={white})"

    def __str__(self) -> str:
        """Return a string representation of the board."""
        lines = ["  " + " ".join("ABCDEFGH")]
        for y in range(self.SIZE):
            row = [self.SYMBOLS[int(v)] for v in self._grid[y]]
            lines.append(f"{y + 1} " + " ".join(row))
        return "\n".join(lines)
