"""Common Conway's Game of Life patterns for seeding boards."""

from typing import Dict, List, Optional, Tuple

from .cell import ALIVE, DEAD, Cell, CellGenerator
from .interface import LifeBoard


class Pattern:
    """Represents a Game of Life pattern.

    Cells are (x, y) offsets, x being the column and y the row.
    """

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (x, y) coordinates for living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        xs, ys = zip(*self.cells)
        return (min(xs), min(ys), max(xs), max(ys))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size.

        Returns:
            Tuple of (width, height)
        """
        min_x, min_y, max_x, max_y = self.get_bounding_box()
        return (max_x - min_x + 1, max_y - min_y + 1)

    def cell_generator(self, offset_row: int = 0, offset_col: int = 0) -> CellGenerator:
        """Build a cell generator that places this pattern on a dead board.

        Cells that fall outside the board are never asked for, so they are
        dropped.

        Args:
            offset_row: Rows to shift the pattern down
            offset_col: Columns to shift the pattern right
        """
        living = {(y + offset_row, x + offset_col) for x, y in self.cells}

        def generate(row: int, col: int) -> Cell:
            return ALIVE if (row, col) in living else DEAD

        return generate

    @classmethod
    def from_board(cls, board: LifeBoard, name: str, description: str = "") -> "Pattern":
        """Create pattern from the living cells of a board."""
        cells = []
        for row in range(board.height):
            for col in range(board.width):
                if board.is_cell_alive(row, col):
                    cells.append((col, row))

        return cls(name, cells, description)

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, {len(self.cells)} cells)"


class PatternLibrary:
    """Manages a collection of named patterns."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        # Still lifes
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))
        self.add_pattern(
            Pattern("Beehive", [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)], "Beehive still life")
        )
        self.add_pattern(
            Pattern("Loaf", [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (3, 2), (2, 3)], "Loaf still life")
        )

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(0, 0), (1, 0), (2, 0)], "Period-2 oscillator"))
        self.add_pattern(
            Pattern("Toad", [(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)], "Period-2 oscillator")
        )
        self.add_pattern(
            Pattern("Beacon", [(0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)], "Period-2 oscillator")
        )

        # Spaceships
        self.add_pattern(
            Pattern("Glider", [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)], "Smallest spaceship, period-4")
        )

    def add_pattern(self, pattern: Pattern) -> None:
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Look a pattern up by name, ignoring case."""
        if name in self._patterns:
            return self._patterns[name]
        for key, pattern in self._patterns.items():
            if key.lower() == name.lower():
                return pattern
        return None

    def list_patterns(self) -> List[str]:
        """Names of all patterns, in insertion order."""
        return list(self._patterns)
