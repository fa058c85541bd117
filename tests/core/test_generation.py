"""Tests for the generation transition."""

from lifeduel.core.damage import DamageReport
from lifeduel.core.generation import advance, next_generation
from lifeduel.core.grid import Grid


class TestNextGeneration:
    """Test cases for the Game of Life rules on a bounded board."""

    def test_empty_grid_stays_empty(self):
        """Test that no life appears from nothing."""
        grid = Grid(8, 6)
        assert next_generation(grid).population == 0

    def test_lone_cell_dies(self):
        """Test underpopulation."""
        grid = Grid(5, 5)
        grid.set_cell(2, 2, True)

        assert next_generation(grid).population == 0

    def test_block_is_still_life(self):
        """Test that a 2x2 block neither dies nor grows."""
        grid = Grid.from_rows(["....", ".**.", ".**.", "...."])

        assert next_generation(grid) == grid

    def test_block_in_corner_is_still_life(self):
        """Test that a block pressed into a corner survives hard edges."""
        grid = Grid.from_rows(["**..", "**..", "....", "...."])

        assert next_generation(grid) == grid

    def test_blinker_oscillates(self):
        """Test that a blinker has period 2."""
        vertical = Grid.from_rows([".....", "..*..", "..*..", "..*..", "....."])
        horizontal = Grid.from_rows([".....", ".....", ".***.", ".....", "....."])

        first = next_generation(vertical)
        second = next_generation(first)

        assert first == horizontal
        assert second == vertical

    def test_overpopulation(self):
        """Test that a live cell with more than 3 neighbors dies."""
        grid = Grid.from_rows([".*.", "***", ".*."])
        result = next_generation(grid)

        assert not result.get_cell(1, 1)

    def test_blinker_on_top_edge_does_not_wrap(self):
        """Test that cells beyond the top edge are never counted or born."""
        grid = Grid.from_rows([".***.", ".....", ".....", ".....", "....."])

        result = next_generation(grid)

        assert result == Grid.from_rows(["..*..", "..*..", ".....", ".....", "....."])

    def test_input_is_not_modified(self):
        """Test that the next generation goes into a fresh grid."""
        grid = Grid.from_rows([".....", "..*..", "..*..", "..*..", "....."])
        before = grid.copy()

        result = next_generation(grid)

        assert grid == before
        assert result is not grid


class TestAdvance:
    """Test cases for advancing with damage detection."""

    def test_returns_next_generation(self):
        """Test that advance evolves the board."""
        grid = Grid.from_rows([".....", "..*..", "..*..", "..*..", "....."])
        next_grid, report = advance(grid)

        assert next_grid == next_generation(grid)
        assert report == DamageReport(False, False)

    def test_damage_comes_from_pre_transition_board(self):
        """Test that damage reflects the board before it evolved."""
        grid = Grid.from_rows(["*....", "*....", "*....", ".....", "....."])

        next_grid, report = advance(grid)

        assert report == DamageReport(True, False)
        # The line has turned into a horizontal pair, only one cell left on the border
        assert next_grid.column(0).sum() == 1
        assert next_grid.get_cell(1, 1)

    def test_threshold_is_passed_through(self):
        """Test a custom damage threshold."""
        grid = Grid.from_rows(["....*", "....*", ".....", ".....", "....."])

        _, default_report = advance(grid)
        _, low_report = advance(grid, threshold=2)

        assert default_report == DamageReport(False, False)
        assert low_report == DamageReport(False, True)
