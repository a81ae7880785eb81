"""Cell state and random cell generators."""

from typing import Callable, Optional
import numpy as np


class Cell:
    """A single alive/dead cell.

    Cells are immutable; boards replace them wholesale each generation.
    """

    __slots__ = ("_alive",)

    def __init__(self, alive: bool = False) -> None:
        self._alive = bool(alive)

    @property
    def alive(self) -> bool:
        """Whether the cell is alive."""
        return self._alive

    @classmethod
    def of(cls, alive: bool) -> "Cell":
        """Return the shared instance for a state."""
        return ALIVE if alive else DEAD

    @classmethod
    def gen(cls, probability: float = 0.5, rng: Optional[np.random.Generator] = None) -> "Cell":
        """Create a random cell.

        Args:
            probability: Chance the cell is alive (0.0 to 1.0)
            rng: Random generator to draw from (a fresh one if omitted)

        Returns:
            ALIVE or DEAD
        """
        _check_probability(probability)
        rng = rng or np.random.default_rng()
        return cls.of(rng.random() < probability)

    def __bool__(self) -> bool:
        return self._alive

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self._alive == other._alive

    def __hash__(self) -> int:
        return hash(self._alive)

    def __repr__(self) -> str:
        return f"Cell(alive={self._alive})"


ALIVE = Cell(True)
DEAD = Cell(False)

CellGenerator = Callable[[int, int], Cell]


def _check_probability(probability: float) -> None:
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"Probability must be between 0.0 and 1.0, got {probability}")


def random_cell_generator(probability: float = 0.5, seed: Optional[int] = None) -> CellGenerator:
    """Build a cell generator that seeds cells at random.

    Args:
        probability: Chance each cell will be alive (0.0 to 1.0)
        seed: Optional seed for reproducible boards

    Returns:
        Callable taking (row, col) and returning a Cell
    """
    _check_probability(probability)
    rng = np.random.default_rng(seed)

    def generate(row: int, col: int) -> Cell:
        return Cell.of(rng.random() < probability)

    return generate
