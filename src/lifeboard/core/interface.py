"""The capability set shared by every life board."""

from typing import List, Optional, Protocol, runtime_checkable

from .cell import Cell, CellGenerator


@runtime_checkable
class LifeBoard(Protocol):
    """A fixed-size Game of Life board.

    Implementations own their grid and advance it one whole generation at
    a time. Queries outside the board raise InvalidIndexError.
    """

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    @property
    def generation(self) -> int: ...

    @property
    def population(self) -> int: ...

    @classmethod
    def gen(cls, width: int, height: int, cell_generator: Optional[CellGenerator] = None) -> "LifeBoard":
        """Build a board, asking cell_generator(row, col) for every cell."""
        ...

    def get(self, row: int, col: int) -> Cell: ...

    def is_cell_alive(self, row: int, col: int) -> bool: ...

    def num_alive_neighbors_at(self, row: int, col: int) -> int: ...

    def next_cell_state_at(self, row: int, col: int) -> Cell: ...

    def simulate_step(self) -> None: ...

    def simulate_n_steps(self, n: int) -> None: ...

    def to_matrix(self) -> List[List[bool]]: ...

    def render(self, alive: str = "#", dead: str = " ") -> str: ...
