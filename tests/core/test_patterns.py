"""Tests for the Pattern and PatternLibrary classes."""

from lifeboard.core.board import BaseLifeBoard
from lifeboard.core.cell import ALIVE, DEAD
from lifeboard.core.parallel import ParallelLifeBoard
from lifeboard.core.patterns import Pattern, PatternLibrary


def place(pattern, width, height, offset_row=0, offset_col=0):
    return BaseLifeBoard.gen(width, height, pattern.cell_generator(offset_row, offset_col))


def living_cells(board):
    return {
        (row, col)
        for row in range(board.height)
        for col in range(board.width)
        if board.is_cell_alive(row, col)
    }


class TestPattern:
    """Test cases for the Pattern class."""

    def test_initialization(self):
        """Test pattern initialization."""
        cells = [(0, 0), (1, 0), (2, 0)]
        pattern = Pattern("Blinker", cells, "Period-2 oscillator")

        assert pattern.name == "Blinker"
        assert pattern.cells == cells
        assert pattern.description == "Period-2 oscillator"

    def test_cell_generator(self):
        """Test placing a pattern at the origin."""
        pattern = Pattern("Blinker", [(0, 0), (1, 0), (2, 0)])
        board = place(pattern, 10, 10)

        assert living_cells(board) == {(0, 0), (0, 1), (0, 2)}
        assert board.population == 3

    def test_cell_generator_with_offset(self):
        """Offsets shift the pattern down and to the right."""
        pattern = Pattern("Blinker", [(0, 0), (1, 0), (2, 0)])
        generate = pattern.cell_generator(offset_row=3, offset_col=5)

        assert generate(3, 5) == ALIVE
        assert generate(3, 7) == ALIVE
        assert generate(0, 0) == DEAD

        board = BaseLifeBoard.gen(10, 10, generate)
        assert living_cells(board) == {(3, 5), (3, 6), (3, 7)}

    def test_cell_generator_clips_to_board(self):
        """Cells past the edge of the board are dropped."""
        pattern = Pattern("Test", [(0, 0), (1, 0), (2, 0), (3, 0)])
        board = place(pattern, 3, 3)

        assert board.population == 3

    def test_get_bounding_box(self):
        """Test bounding box calculation."""
        assert Pattern("Empty", []).get_bounding_box() == (0, 0, 0, 0)
        assert Pattern("Single", [(5, 3)]).get_bounding_box() == (5, 3, 5, 3)

        pattern = Pattern("Multi", [(1, 2), (3, 1), (2, 4)])
        assert pattern.get_bounding_box() == (1, 1, 3, 4)

    def test_get_size(self):
        """Test size calculation."""
        assert Pattern("Single", [(0, 0)]).get_size() == (1, 1)
        assert Pattern("Line", [(0, 0), (1, 0), (2, 0)]).get_size() == (3, 1)
        assert Pattern("Rect", [(0, 0), (2, 0), (0, 3), (2, 3)]).get_size() == (3, 4)

    def test_from_board(self):
        """Test creating a pattern from a board's living cells."""
        board = BaseLifeBoard.from_bool_matrix([
            [False, False, False, False],
            [False, True, True, False],
            [False, False, True, False],
        ])

        pattern = Pattern.from_board(board, "Extracted", "From board")

        assert pattern.name == "Extracted"
        assert pattern.description == "From board"
        assert sorted(pattern.cells) == [(1, 1), (2, 1), (2, 2)]

    def test_from_board_round_trip(self):
        """A pattern read off a board places the same cells again."""
        original = PatternLibrary().get_pattern("Beacon")
        board = place(original, 6, 6, 1, 1)
        extracted = Pattern.from_board(board, "Copy")

        assert living_cells(place(extracted, 6, 6)) == living_cells(board)

    def test_repr(self):
        assert repr(Pattern("Blinker", [(0, 0), (1, 0), (2, 0)])) == "Pattern('Blinker', 3 cells)"


class TestPatternLibrary:
    """Test cases for the PatternLibrary class."""

    def test_builtin_patterns(self):
        """Test that built-in patterns are loaded."""
        library = PatternLibrary()
        patterns = library.list_patterns()

        for name in ["Block", "Beehive", "Loaf", "Blinker", "Toad", "Beacon", "Glider"]:
            assert name in patterns

    def test_get_pattern(self):
        library = PatternLibrary()

        block = library.get_pattern("Block")
        assert block is not None
        assert block.name == "Block"
        assert len(block.cells) == 4

        assert library.get_pattern("NonExistent") is None

    def test_get_pattern_ignores_case(self):
        library = PatternLibrary()
        assert library.get_pattern("glider") is library.get_pattern("Glider")
        assert library.get_pattern("BLOCK").name == "Block"

    def test_add_pattern(self):
        """Test adding custom patterns."""
        library = PatternLibrary()
        custom = Pattern("Custom", [(0, 0), (1, 1)], "Custom pattern")
        library.add_pattern(custom)

        assert library.get_pattern("Custom") is custom
        assert "Custom" in library.list_patterns()

    def test_still_lifes_do_not_change(self):
        library = PatternLibrary()
        for name in ["Block", "Beehive", "Loaf"]:
            board = place(library.get_pattern(name), 8, 8, 2, 2)
            before = board.to_matrix()
            board.simulate_n_steps(3)
            assert board.to_matrix() == before, name

    def test_oscillators_have_period_two(self):
        library = PatternLibrary()
        for name in ["Blinker", "Toad", "Beacon"]:
            board = place(library.get_pattern(name), 8, 8, 2, 2)
            before = board.to_matrix()

            board.simulate_step()
            assert board.to_matrix() != before, name
            board.simulate_step()
            assert board.to_matrix() == before, name

    def test_glider_moves_diagonally(self):
        """After four generations the glider has moved one cell down and right."""
        glider = PatternLibrary().get_pattern("Glider")
        board = ParallelLifeBoard.from_board(place(glider, 10, 10, 1, 1), 3)

        board.simulate_n_steps(4)

        assert living_cells(board) == living_cells(place(glider, 10, 10, 2, 2))
