"""Immutable grid snapshots and the Game of Life rule."""

from typing import Any, Iterable, List, Optional, Tuple
import numpy as np
import torch
import torch.nn.functional as F

from .cell import Cell, CellGenerator
from .errors import InvalidBoardError, InvalidIndexError

# Moore neighbourhood, centre excluded
_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)


def next_cell_state(alive: bool, neighbors: int) -> bool:
    """Apply Conway's rule to a single cell.

    Args:
        alive: Current state of the cell
        neighbors: Number of living neighbors (0-8)

    Returns:
        State of the cell in the next generation
    """
    if alive:
        return neighbors in (2, 3)
    return neighbors == 3


def apply_rules(cells: np.ndarray, neighbors: np.ndarray) -> np.ndarray:
    """Apply Conway's rule to a whole block of cells.

    Args:
        cells: Current states (0 or 1)
        neighbors: Neighbor counts, same shape as cells

    Returns:
        New int8 array with the next-generation states
    """
    alive = cells > 0

    # Survival: live cell with 2 or 3 neighbors
    survive = alive & ((neighbors == 2) | (neighbors == 3))

    # Birth: dead cell with exactly 3 neighbors
    birth = ~alive & (neighbors == 3)

    return (survive | birth).astype(np.int8)


def check_dimensions(width: Any, height: Any) -> None:
    """Raise InvalidBoardError unless width and height are positive integers."""
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidBoardError(f"Board {name} must be an integer, got {value!r}")
    if width < 1:
        raise InvalidBoardError("Board must be at least one cell wide.")
    if height < 1:
        raise InvalidBoardError("Board must be at least one cell tall.")


def _as_state(value: Any) -> bool:
    if isinstance(value, Cell):
        return value.alive
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, (int, np.integer)) and value in (0, 1):
        return bool(value)
    raise InvalidBoardError(f"Expected a Cell or bool for a cell state, got {value!r}")


def _as_state_array(array: np.ndarray) -> np.ndarray:
    """Convert a 2D array of cell states to int8, rejecting anything else.

    Accepts bool arrays, integer arrays holding only 0 and 1, and object
    arrays of Cells or bools.
    """
    if array.dtype == np.bool_:
        return array.astype(np.int8)
    if np.issubdtype(array.dtype, np.integer):
        if not np.isin(array, (0, 1)).all():
            raise InvalidBoardError("Integer cell states must be 0 or 1")
        return array.astype(np.int8)
    if array.dtype == object:
        return np.vectorize(_as_state, otypes=[np.int8])(array)
    raise InvalidBoardError(f"Expected Cells, bools or 0/1 integers, got an array of {array.dtype}")


class LifeGrid:
    """A read-only snapshot of a board's cells.

    Cells are stored row-major as an int8 array of shape (height, width).
    The array's writeable flag is cleared, so a snapshot can be shared
    between threads without copying. Cells outside the grid count as dead;
    edges do not wrap.
    """

    def __init__(self, cells: Any, copy: bool = True) -> None:
        """Wrap a 2D array of cell states.

        Args:
            cells: 2D array-like of states, indexed [row, col]
            copy: Copy and validate the data. Pass False only for a fresh
                int8 array of 0/1 values that nothing else will write to.

        Raises:
            InvalidBoardError: If the data is not a non-empty 2D array of
                Cells, bools or 0/1 integers
        """
        if copy:
            array = np.asarray(cells)
            if array.ndim != 2:
                raise InvalidBoardError(f"Board must be two-dimensional, got shape {array.shape}")
            array = _as_state_array(array)
        else:
            array = cells
            if array.ndim != 2 or array.dtype != np.int8:
                raise InvalidBoardError(f"Expected a 2D int8 array, got {array.dtype} {array.shape}")

        height, width = array.shape
        check_dimensions(width, height)

        array.flags.writeable = False
        self._cells = array

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Any]]) -> "LifeGrid":
        """Build a grid from rows of cells or booleans.

        Args:
            rows: Top-to-bottom rows, each a left-to-right sequence of Cell or bool

        Raises:
            InvalidBoardError: If the rows are empty or ragged
        """
        matrix = [[_as_state(value) for value in row] for row in rows]
        if not matrix:
            raise InvalidBoardError("Board must be at least one cell tall.")
        width = len(matrix[0])
        if width == 0:
            raise InvalidBoardError("Board must be at least one cell wide.")
        if any(len(row) != width for row in matrix):
            raise InvalidBoardError("Board must have rows of consistent size.")
        return cls(np.array(matrix, dtype=np.int8), copy=False)

    @classmethod
    def generate(cls, width: int, height: int, cell_generator: CellGenerator) -> "LifeGrid":
        """Build a grid by asking a generator for every cell.

        Args:
            width: Number of columns
            height: Number of rows
            cell_generator: Called as cell_generator(row, col) for each cell
        """
        check_dimensions(width, height)
        cells = np.zeros((height, width), dtype=np.int8)
        for row in range(height):
            for col in range(width):
                cells[row, col] = _as_state(cell_generator(row, col))
        return cls(cells, copy=False)

    @property
    def width(self) -> int:
        return self._cells.shape[1]

    @property
    def height(self) -> int:
        return self._cells.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions as (width, height)."""
        return (self.width, self.height)

    @property
    def cells(self) -> np.ndarray:
        """The read-only cell array, indexed [row, col]."""
        return self._cells

    @property
    def population(self) -> int:
        """Number of living cells."""
        return int(np.count_nonzero(self._cells))

    def check_index(self, row: int, col: int) -> None:
        """Raise InvalidIndexError unless (row, col) are integers inside the grid."""
        for value in (row, col):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidIndexError(f"Cell coordinates must be integers, got ({row!r}, {col!r})")
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise InvalidIndexError(
                f"Cell ({row}, {col}) out of bounds for a {self.width}x{self.height} board"
            )

    def is_cell_alive(self, row: int, col: int) -> bool:
        self.check_index(row, col)
        return bool(self._cells[row, col])

    def cell_at(self, row: int, col: int) -> Cell:
        return Cell.of(self.is_cell_alive(row, col))

    def num_alive_neighbors_at(self, row: int, col: int) -> int:
        """Count living neighbors of a single cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        self.check_index(row, col)
        count = 0
        for dr in [-1, 0, 1]:
            for dc in [-1, 0, 1]:
                if dr == 0 and dc == 0:
                    continue

                nr, nc = row + dr, col + dc
                if 0 <= nr < self.height and 0 <= nc < self.width:
                    count += int(self._cells[nr, nc])

        return count

    def next_cell_state_at(self, row: int, col: int) -> Cell:
        """State the cell at (row, col) will have in the next generation."""
        alive = self.is_cell_alive(row, col)
        return Cell.of(next_cell_state(alive, self.num_alive_neighbors_at(row, col)))

    def count_neighbors(self, start: int = 0, stop: Optional[int] = None) -> np.ndarray:
        """Count neighbors for every cell in rows [start, stop).

        Rows just outside the band are read from this snapshot, so a band
        sees its neighbors across partition boundaries. Zero padding is
        applied only at the real edges of the grid.

        Args:
            start: First row of the band
            stop: One past the last row of the band (defaults to the last row)

        Returns:
            int8 array of shape (stop - start, width)
        """
        if stop is None:
            stop = self.height
        if not 0 <= start <= stop <= self.height:
            raise InvalidIndexError(f"Row band [{start}, {stop}) out of bounds for height {self.height}")
        if start == stop:
            return np.zeros((0, self.width), dtype=np.int8)

        lo = max(start - 1, 0)
        hi = min(stop + 1, self.height)
        band = torch.from_numpy(self._cells[lo:hi].astype(np.float32)).unsqueeze(0).unsqueeze(0)

        top = 1 if start == 0 else 0
        bottom = 1 if stop == self.height else 0
        padded = F.pad(band, (1, 1, top, bottom))
        neighbors = F.conv2d(padded, _KERNEL)

        return neighbors[0, 0].numpy().astype(np.int8)

    def next_rows(self, start: int = 0, stop: Optional[int] = None) -> np.ndarray:
        """Next-generation states for rows [start, stop)."""
        if stop is None:
            stop = self.height
        neighbors = self.count_neighbors(start, stop)
        return apply_rules(self._cells[start:stop], neighbors)

    def next_generation(self) -> "LifeGrid":
        """Compute the whole next generation as a new snapshot."""
        return LifeGrid(self.next_rows(0, self.height), copy=False)

    def to_matrix(self) -> List[List[bool]]:
        """Convert to nested lists of booleans, row by row."""
        return self._cells.astype(bool).tolist()

    def render(self, alive: str = "#", dead: str = " ") -> str:
        """Render one line per row, one character per cell."""
        return "\n".join("".join(alive if state else dead for state in row) for row in self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LifeGrid):
            return False
        return self._cells.shape == other._cells.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"LifeGrid(width={self.width}, height={self.height}, population={self.population})"
