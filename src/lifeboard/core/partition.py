"""Splitting a board's rows between worker threads."""

from typing import List

from .errors import InvalidBoardError


def row_partitions(height: int, n_threads: int) -> List[range]:
    """Split rows [0, height) into n_threads contiguous ranges.

    Ranges are returned top to bottom, cover every row exactly once and
    differ in length by at most one row; the first ``height % n_threads``
    ranges take the extra rows. With more threads than rows the trailing
    ranges are empty.

    Args:
        height: Number of rows on the board
        n_threads: Number of workers

    Returns:
        One range per worker

    Raises:
        InvalidBoardError: If height or n_threads is less than 1
    """
    if isinstance(n_threads, bool) or not isinstance(n_threads, int) or n_threads < 1:
        raise InvalidBoardError(f"n_threads must be a positive integer, got {n_threads!r}")
    if height < 1:
        raise InvalidBoardError("Board must be at least one cell tall.")

    base, extra = divmod(height, n_threads)
    partitions = []
    start = 0
    for index in range(n_threads):
        size = base + 1 if index < extra else base
        partitions.append(range(start, start + size))
        start += size

    return partitions
