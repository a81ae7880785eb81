"""Single-threaded Game of Life board."""

from typing import Any, Iterable, List, Optional
import logging
import numpy as np

from .cell import Cell, CellGenerator, random_cell_generator
from .grid import LifeGrid

logger = logging.getLogger(__name__)


def check_steps(n: int) -> None:
    """Raise TypeError or ValueError unless n is a non-negative integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Step count must be an integer, got {n!r}")
    if n < 0:
        raise ValueError(f"Step count must be non-negative, got {n}")


class BaseLifeBoard:
    """Serial Game of Life board.

    Each step builds a complete new grid from the current one and then
    replaces it. Cells outside the board are never counted as neighbors,
    so edge and corner cells have fewer than eight candidates.
    """

    def __init__(self, grid: LifeGrid, generation: int = 0) -> None:
        """Initialize a board around an existing grid snapshot.

        Args:
            grid: Initial cells
            generation: Generation number of the grid
        """
        self._grid = grid
        self._generation = generation

    @classmethod
    def gen(
        cls, width: int, height: int, cell_generator: Optional[CellGenerator] = None
    ) -> "BaseLifeBoard":
        """Build a board, asking cell_generator(row, col) for every cell.

        Args:
            width: Number of columns
            height: Number of rows
            cell_generator: Cell factory; random 50% cells if omitted

        Raises:
            InvalidBoardError: If either dimension is not positive
        """
        if cell_generator is None:
            cell_generator = random_cell_generator()
        return cls(LifeGrid.generate(width, height, cell_generator))

    @classmethod
    def from_bool_matrix(cls, rows: Iterable[Iterable[bool]]) -> "BaseLifeBoard":
        """Build a board from rows of booleans, top row first."""
        return cls(LifeGrid.from_rows(rows))

    @classmethod
    def from_cell_matrix(cls, rows: Iterable[Iterable[Cell]]) -> "BaseLifeBoard":
        """Build a board from rows of Cells, top row first."""
        return cls(LifeGrid.from_rows(rows))

    @classmethod
    def from_grid(cls, grid: LifeGrid, generation: int = 0) -> "BaseLifeBoard":
        return cls(grid, generation)

    @property
    def grid(self) -> LifeGrid:
        """The current generation."""
        return self._grid

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def generation(self) -> int:
        """Number of steps simulated so far."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._grid.population

    @property
    def cells(self) -> np.ndarray:
        """Read-only cell array, indexed [row, col]."""
        return self._grid.cells

    def get(self, row: int, col: int) -> Cell:
        """Get the cell at (row, col).

        Raises:
            InvalidIndexError: If the coordinates are outside the board
        """
        return self._grid.cell_at(row, col)

    def is_cell_alive(self, row: int, col: int) -> bool:
        return self._grid.is_cell_alive(row, col)

    def num_alive_neighbors_at(self, row: int, col: int) -> int:
        return self._grid.num_alive_neighbors_at(row, col)

    def next_cell_state_at(self, row: int, col: int) -> Cell:
        return self._grid.next_cell_state_at(row, col)

    def simulate_step(self) -> None:
        """Advance the simulation by one generation."""
        self._grid = self._grid.next_generation()
        self._generation += 1

    def simulate_n_steps(self, n: int) -> None:
        """Advance the simulation by n generations, one after another."""
        check_steps(n)
        for _ in range(n):
            self.simulate_step()
        logger.debug("Board %dx%d advanced %d steps to generation %d", self.width, self.height, n, self._generation)

    def copy(self) -> "BaseLifeBoard":
        """Independent board with the same cells and generation."""
        return BaseLifeBoard(self._grid, self._generation)

    def to_matrix(self) -> List[List[bool]]:
        """Cell states as nested lists, row by row."""
        return self._grid.to_matrix()

    def render(self, alive: str = "#", dead: str = " ") -> str:
        """Render one line per row, one character per cell."""
        return self._grid.render(alive, dead)

    def __eq__(self, other: Any) -> bool:
        other_grid = getattr(other, "grid", None)
        if not isinstance(other_grid, LifeGrid):
            return False
        return self._grid == other_grid

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"BaseLifeBoard(width={self.width}, height={self.height}, generation={self._generation})"
