"""Simulation settings and board construction from them."""

from dataclasses import dataclass
from typing import List, Optional, Union

from .board import BaseLifeBoard
from .cell import random_cell_generator
from .errors import InvalidBoardError
from .parallel import DEFAULT_N_THREADS, ParallelLifeBoard
from .patterns import PatternLibrary


@dataclass
class SimulationConfig:
    """Configuration for a simulation run.

    ``n_threads=None`` selects the serial board.
    """

    width: int = 64
    height: int = 32
    n_threads: Optional[int] = DEFAULT_N_THREADS
    steps: int = 10
    population_rate: float = 0.5
    seed: Optional[int] = None
    pattern: Optional[str] = None
    pattern_row: Optional[int] = None
    pattern_col: Optional[int] = None
    alive_char: str = "#"
    dead_char: str = " "

    def validate(self) -> List[str]:
        """Check the settings.

        Returns:
            Human-readable problems, empty if the configuration is usable
        """
        errors = []

        if self.width <= 0:
            errors.append("Width must be positive")

        if self.height <= 0:
            errors.append("Height must be positive")

        if self.n_threads is not None and self.n_threads <= 0:
            errors.append("Thread count must be positive")

        if self.steps < 0:
            errors.append("Steps must be non-negative")

        if not 0.0 <= self.population_rate <= 1.0:
            errors.append("Population rate must be between 0.0 and 1.0")

        if self.pattern_row is not None and self.pattern_row < 0:
            errors.append("Pattern row offset must be non-negative")

        if self.pattern_col is not None and self.pattern_col < 0:
            errors.append("Pattern column offset must be non-negative")

        if len(self.alive_char) != 1 or len(self.dead_char) != 1:
            errors.append("Cell glyphs must be single characters")

        return errors


def build_board(
    config: SimulationConfig, library: Optional[PatternLibrary] = None
) -> Union[BaseLifeBoard, ParallelLifeBoard]:
    """Create the board described by a configuration.

    A named pattern is centred unless offsets are given; otherwise cells
    are seeded at random with ``population_rate``.

    Raises:
        InvalidBoardError: If the pattern is unknown or the board is invalid
    """
    if config.pattern:
        library = library or PatternLibrary()
        pattern = library.get_pattern(config.pattern)
        if pattern is None:
            raise InvalidBoardError(f"Pattern '{config.pattern}' not found")

        pattern_width, pattern_height = pattern.get_size()
        row = config.pattern_row
        col = config.pattern_col
        if row is None:
            row = max(0, (config.height - pattern_height) // 2)
        if col is None:
            col = max(0, (config.width - pattern_width) // 2)
        cell_generator = pattern.cell_generator(row, col)
    else:
        cell_generator = random_cell_generator(config.population_rate, config.seed)

    board = BaseLifeBoard.gen(config.width, config.height, cell_generator)
    if config.n_threads is None:
        return board
    return ParallelLifeBoard.from_board(board, config.n_threads)
