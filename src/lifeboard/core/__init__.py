"""Core life board logic."""

from .cell import Cell, CellGenerator, ALIVE, DEAD, random_cell_generator
from .grid import LifeGrid
from .interface import LifeBoard
from .board import BaseLifeBoard
from .parallel import ParallelLifeBoard
from .partition import row_partitions
from .patterns import Pattern, PatternLibrary
from .config import SimulationConfig, build_board

__all__ = [
    "Cell",
    "CellGenerator",
    "ALIVE",
    "DEAD",
    "random_cell_generator",
    "LifeGrid",
    "LifeBoard",
    "BaseLifeBoard",
    "ParallelLifeBoard",
    "row_partitions",
    "Pattern",
    "PatternLibrary",
    "SimulationConfig",
    "build_board",
]
