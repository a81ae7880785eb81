"""Conway's Game of Life on fixed-size boards, serial and multi-threaded."""

__version__ = "0.1.0"

from .core.cell import Cell, random_cell_generator
from .core.board import BaseLifeBoard
from .core.parallel import ParallelLifeBoard
from .core.interface import LifeBoard
from .core.errors import LifeBoardError, InvalidBoardError, InvalidIndexError, SimulationError

__all__ = [
    "Cell",
    "random_cell_generator",
    "BaseLifeBoard",
    "ParallelLifeBoard",
    "LifeBoard",
    "LifeBoardError",
    "InvalidBoardError",
    "InvalidIndexError",
    "SimulationError",
]
