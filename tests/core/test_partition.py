"""Tests for row partitioning."""

import pytest

from lifeboard.core.errors import InvalidBoardError
from lifeboard.core.partition import row_partitions


class TestRowPartitions:
    """Test cases for row_partitions."""

    def test_even_split(self):
        assert row_partitions(9, 3) == [range(0, 3), range(3, 6), range(6, 9)]

    def test_remainder_goes_to_first_partitions(self):
        assert row_partitions(7, 3) == [range(0, 3), range(3, 5), range(5, 7)]

    def test_single_thread(self):
        assert row_partitions(5, 1) == [range(0, 5)]

    def test_more_threads_than_rows(self):
        """Extra workers get empty partitions."""
        partitions = row_partitions(3, 5)
        assert partitions == [range(0, 1), range(1, 2), range(2, 3), range(3, 3), range(3, 3)]

    def test_coverage_and_balance(self):
        """Partitions cover every row exactly once and differ by at most one row."""
        for height in range(1, 41):
            for n_threads in range(1, 45):
                partitions = row_partitions(height, n_threads)
                assert len(partitions) == n_threads

                rows = [row for part in partitions for row in part]
                assert rows == list(range(height)), (height, n_threads)

                sizes = [len(part) for part in partitions]
                assert max(sizes) - min(sizes) <= 1, (height, n_threads)

    @pytest.mark.parametrize("n_threads", [0, -2, 1.5, True])
    def test_invalid_thread_count(self, n_threads):
        with pytest.raises(InvalidBoardError):
            row_partitions(10, n_threads)

    def test_invalid_height(self):
        with pytest.raises(InvalidBoardError):
            row_partitions(0, 2)
