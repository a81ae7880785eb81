"""Exceptions raised by life boards."""


class LifeBoardError(Exception):
    """Base class for all life board errors."""


class InvalidBoardError(LifeBoardError, ValueError):
    """Raised when a board cannot be constructed from the given arguments."""


class InvalidIndexError(LifeBoardError, IndexError):
    """Raised when a cell is requested outside the board."""


class SimulationError(LifeBoardError, RuntimeError):
    """Raised when a worker fails while computing a generation.

    The board keeps the generation it had before the failed step.
    """
