"""Multi-threaded Game of Life board."""

from concurrent.futures import ThreadPoolExecutor, wait
from typing import Any, Iterable, List, Optional, Tuple
import logging
import threading
import numpy as np
import torch

from .board import BaseLifeBoard, check_steps
from .cell import Cell, CellGenerator
from .errors import SimulationError
from .grid import LifeGrid
from .partition import row_partitions

logger = logging.getLogger(__name__)

# Worker count used when a board is built through the shared gen() signature
DEFAULT_N_THREADS = 4


def _compute_partition(snapshot: LifeGrid, rows: range, out: np.ndarray) -> None:
    """Worker body: write the next generation of `rows` into `out`.

    `out` is this worker's own slice of the shared next-generation buffer.
    """
    if len(rows) == 0:
        return
    out[:] = snapshot.next_rows(rows.start, rows.stop)


def _run_worker(start_line: threading.Barrier, snapshot: LifeGrid, rows: range, out: np.ndarray) -> None:
    """Hold a pool thread until every worker has one, then compute.

    No task can finish before all n_threads tasks are running, so the pool
    never hands a second partition to a thread that is already done.
    """
    start_line.wait()
    _compute_partition(snapshot, rows, out)


class ParallelLifeBoard:
    """Game of Life board that splits every step across worker threads.

    Rows are divided into ``n_threads`` contiguous partitions once, at
    construction. During a step every worker reads the previous generation
    from a shared read-only snapshot, neighbors in other partitions
    included, and writes only its own rows of the next-generation buffer.
    The new grid is committed after all workers have finished, so results
    are identical to BaseLifeBoard for any thread count.
    """

    def __init__(self, grid: LifeGrid, n_threads: int, generation: int = 0) -> None:
        """Initialize a parallel board.

        Args:
            grid: Initial cells
            n_threads: Number of worker threads (at least 1)
            generation: Generation number of the grid

        Raises:
            InvalidBoardError: If n_threads is less than 1
        """
        self._partitions = tuple(row_partitions(grid.height, n_threads))
        self._n_threads = n_threads
        self._grid = grid
        self._generation = generation

        # The workers supply the parallelism; keep each conv2d on one thread
        torch.set_num_threads(1)

        logger.debug(
            "Partitioned %d rows across %d threads: %s",
            grid.height,
            n_threads,
            [(r.start, r.stop) for r in self._partitions],
        )

    @classmethod
    def from_board(cls, board: BaseLifeBoard, n_threads: int) -> "ParallelLifeBoard":
        """Upgrade a serial board, keeping its cells and generation."""
        return cls(board.grid, n_threads, board.generation)

    @classmethod
    def from_bool_matrix(cls, rows: Iterable[Iterable[bool]], n_threads: int) -> "ParallelLifeBoard":
        """Build a board from rows of booleans, top row first."""
        return cls(LifeGrid.from_rows(rows), n_threads)

    @classmethod
    def gen(
        cls,
        width: int,
        height: int,
        cell_generator: Optional[CellGenerator] = None,
        n_threads: int = DEFAULT_N_THREADS,
    ) -> "ParallelLifeBoard":
        """Build a board, asking cell_generator(row, col) for every cell.

        Matches LifeBoard.gen, so generic code can build either board kind;
        such callers get DEFAULT_N_THREADS workers.

        Args:
            width: Number of columns
            height: Number of rows
            cell_generator: Cell factory; random 50% cells if omitted
            n_threads: Number of worker threads (at least 1)
        """
        return cls.from_board(BaseLifeBoard.gen(width, height, cell_generator), n_threads)

    @property
    def grid(self) -> LifeGrid:
        """The current generation."""
        return self._grid

    @property
    def n_threads(self) -> int:
        return self._n_threads

    @property
    def partitions(self) -> Tuple[range, ...]:
        """Row range owned by each worker."""
        return self._partitions

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def population(self) -> int:
        return self._grid.population

    @property
    def cells(self) -> np.ndarray:
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
        """Advance the simulation by one generation.

        Each of the ``n_threads`` workers runs on its own thread and computes
        exactly one partition. Blocks until every worker has finished.

        Raises:
            SimulationError: If any worker failed; the board is unchanged
        """
        snapshot = self._grid
        next_cells = np.zeros((snapshot.height, snapshot.width), dtype=np.int8)
        start_line = threading.Barrier(self._n_threads)

        # One partition per pool thread, empty partitions included
        with ThreadPoolExecutor(max_workers=self._n_threads, thread_name_prefix="lifeboard") as executor:
            futures = {
                executor.submit(_run_worker, start_line, snapshot, rows, next_cells[rows.start:rows.stop]): rows
                for rows in self._partitions
            }
            wait(futures)

        for future, rows in futures.items():
            error = future.exception()
            if error is not None:
                raise SimulationError(
                    f"Worker for rows [{rows.start}, {rows.stop}) failed at generation {self._generation}: {error}"
                ) from error

        self._grid = LifeGrid(next_cells, copy=False)
        self._generation += 1

    def simulate_n_steps(self, n: int) -> None:
        """Advance the simulation by n generations, one after another."""
        check_steps(n)
        for _ in range(n):
            self.simulate_step()
        logger.debug(
            "Board %dx%d advanced %d steps on %d threads to generation %d",
            self.width,
            self.height,
            n,
            self._n_threads,
            self._generation,
        )

    def to_base_board(self) -> BaseLifeBoard:
        """Serial board holding the same cells and generation."""
        return BaseLifeBoard(self._grid, self._generation)

    def to_matrix(self) -> List[List[bool]]:
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
        return (
            f"ParallelLifeBoard(width={self.width}, height={self.height}, "
            f"n_threads={self._n_threads}, generation={self._generation})"
        )
