"""Tests for the CLI frontend."""

from io import StringIO
from unittest.mock import patch

import pytest
from lifeduel.core.config import MatchConfig, PlayerId
from lifeduel.core.grid import Grid
from lifeduel.core.match import PlacementError
from lifeduel.frontends.cli import (
    CLIMatch,
    create_parser,
    format_outcome,
    main,
    parse_placement,
    print_results,
    validate_args,
)

# Player one owns x 2-6 and player two x 13-17 on this board, rows 1-8
SMALL = MatchConfig(width=20, height=10)


class TestCLIMatch:
    """Test cases for the CLI duel runner."""

    def test_initialization(self):
        cli = CLIMatch()
        assert "Glider" in cli.pattern_library.list_patterns()

    def test_run_without_placements(self):
        cli = CLIMatch()

        ticks, reason, stats = cli.run_match(SMALL, max_ticks=5)

        assert ticks == 5
        assert reason == "max_ticks"
        assert stats["winner"] is None
        assert stats["player_one_tier"] == 0
        assert stats["initial_population"] == 0
        assert "duration_seconds" in stats

    def test_run_with_pattern(self):
        cli = CLIMatch()

        _, reason, stats = cli.run_match(SMALL, {PlayerId.ONE: [("Block", 3, 3)]}, max_ticks=10)

        assert reason == "max_ticks"
        assert stats["initial_population"] == 4
        assert stats["population"] == 4

    def test_spaceship_reaches_right_border(self):
        """Test a full duel: a spaceship flies into player two's border."""
        cli = CLIMatch()
        config = MatchConfig(width=20, height=10, damage_threshold=1, health_tiers=2)

        ticks, reason, stats = cli.run_match(
            config, {PlayerId.ONE: [("Lightweight spaceship", 2, 3)]}, max_ticks=200
        )

        assert reason == "defeat"
        assert stats["winner"] == 1
        assert stats["player_two_tier"] == 1
        assert stats["player_one_tier"] == 0
        assert ticks < 200

    def test_player_two_patterns_are_mirrored(self):
        cli = CLIMatch()
        config = MatchConfig(width=20, height=10, damage_threshold=1, health_tiers=2)

        _, reason, stats = cli.run_match(
            config, {PlayerId.TWO: [("Lightweight spaceship", 13, 3)]}, max_ticks=200
        )

        assert reason == "defeat"
        assert stats["winner"] == 2

    def test_unknown_pattern(self):
        with pytest.raises(ValueError, match="not found"):
            CLIMatch().run_match(SMALL, {PlayerId.ONE: [("Nope", 3, 3)]})

    def test_placement_outside_region(self):
        with pytest.raises(PlacementError):
            CLIMatch().run_match(SMALL, {PlayerId.ONE: [("Block", 10, 3)]})

    @patch("sys.stdout", new_callable=StringIO)
    def test_show_grid(self, mock_stdout):
        CLIMatch().run_match(SMALL, {PlayerId.ONE: [("Block", 3, 3)]}, max_ticks=1, show_grid=True)

        output = mock_stdout.getvalue()
        assert "Initial board:" in output
        assert "Final board (tick 1):" in output
        assert "|...**" in output

    def test_format_grid_large(self):
        formatted = CLIMatch()._format_grid(Grid(100, 100), max_size=80)
        assert "too large to display" in formatted

    @patch("sys.stdout", new_callable=StringIO)
    def test_list_patterns(self, mock_stdout):
        CLIMatch().list_patterns()

        output = mock_stdout.getvalue()
        assert "Available patterns:" in output
        assert "Glider (3x3, 5 cells)" in output


class TestParsing:
    """Test cases for argument helpers."""

    def test_parse_placement(self):
        assert parse_placement("Glider@8,10") == ("Glider", 8, 10)
        assert parse_placement("Lightweight spaceship@30,12") == ("Lightweight spaceship", 30, 12)

    @pytest.mark.parametrize("value", ["Glider", "Glider@8", "@1,2", "Glider@a,b", "Glider@1,2,3"])
    def test_parse_placement_invalid(self, value):
        with pytest.raises(ValueError):
            parse_placement(value)

    def test_parser_defaults(self):
        args = create_parser().parse_args([])

        assert args.width == 43
        assert args.height == 28
        assert args.threshold == 3
        assert args.tiers == 6
        assert args.counting == "total"
        assert args.p1 == []
        assert args.max_ticks == 1000

    def test_parser_repeated_placements(self):
        args = create_parser().parse_args(["--p1", "Glider@8,2", "--p1", "Block@6,20", "--p2", "Glider@30,2"])

        assert args.p1 == ["Glider@8,2", "Block@6,20"]
        assert args.p2 == ["Glider@30,2"]

    @patch("sys.stdout", new_callable=StringIO)
    def test_validate_args(self, mock_stdout):
        parser = create_parser()

        assert validate_args(parser.parse_args([]))
        assert not validate_args(parser.parse_args(["-W", "3", "--tiers", "1"]))

        output = mock_stdout.getvalue()
        assert "Width must be at least 8" in output
        assert "Tiers must be at least 2" in output

    def test_format_outcome(self):
        assert format_outcome("defeat", {"winner": 2, "ticks": 40}) == "Player 2 wins after 40 ticks"
        assert format_outcome("draw", {"ticks": 7}) == "Draw: both players fell on tick 7"
        assert format_outcome("max_ticks", {"ticks": 9}) == "No winner after 9 ticks"
        assert "Unknown" in format_outcome("other", {})

    @patch("sys.stdout", new_callable=StringIO)
    def test_print_results(self, mock_stdout):
        _, reason, stats = CLIMatch().run_match(SMALL, max_ticks=2)
        print_results(reason, stats, verbose=True)

        output = mock_stdout.getvalue()
        assert "No winner after 2 ticks" in output
        assert "Health tiers: player 1 0, player 2 0" in output
        assert "Population: 0 -> 0" in output


class TestMain:
    """Test cases for the CLI entry point."""

    @patch("sys.stdout", new_callable=StringIO)
    def test_list_patterns(self, mock_stdout):
        assert main(["--list-patterns"]) == 0
        assert "Available patterns:" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_run(self, mock_stdout):
        assert main(["-W", "20", "-H", "10", "--p1", "Block@3,3", "-m", "3"]) == 0
        assert "No winner after 3 ticks" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_invalid_args(self, mock_stdout):
        assert main(["-W", "2"]) == 1
        assert "Invalid arguments" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_unknown_pattern(self, mock_stdout):
        assert main(["-W", "20", "-H", "10", "--p1", "Nope@3,3"]) == 1
        assert "Error: Pattern 'Nope' not found" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_bad_config(self, mock_stdout):
        assert main(["-H", "5", "--threshold", "6"]) == 1
        assert "Invalid match configuration" in mock_stdout.getvalue()
