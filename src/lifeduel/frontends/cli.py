"""Command-line interface for headless duels."""

import argparse
import logging
import sys
import time
from typing import Dict, List, Optional, Tuple

from ..core.config import (
    DAMAGE_THRESHOLD,
    HEALTH_TIERS,
    HORIZONTAL_BLOCKS,
    VERTICAL_BLOCKS,
    MatchConfig,
    PlayerId,
)
from ..core.damage import EdgeCounting
from ..core.grid import Grid
from ..core.match import Match, Outcome
from ..core.patterns import PatternLibrary

Placement = Tuple[str, int, int]


class CLIMatch:
    """Command-line interface for running scripted duels."""

    def __init__(self):
        self.pattern_library = PatternLibrary()

    def run_match(
        self,
        config: MatchConfig,
        placements: Optional[Dict[PlayerId, List[Placement]]] = None,
        max_ticks: int = 1000,
        verbose: bool = False,
        show_grid: bool = False,
    ) -> Tuple[int, str, dict]:
        """Run a duel until one side falls or the tick limit is reached.

        Player two's shapes are mirrored so they travel towards player one's
        border.

        Args:
            config: Match settings
            placements: Per player list of (pattern name, x, y) deployments,
                x and y being the shape's top-left tile on the board
            max_ticks: Maximum generations to run
            verbose: Print progress updates
            show_grid: Show initial and final board

        Returns:
            Tuple of (ticks, finish_reason, statistics) where finish_reason is
            one of 'defeat', 'draw', 'max_ticks'

        Raises:
            ValueError: If a pattern is unknown or lands outside its player's region
        """
        match = Match(config, start_paused=False)

        if verbose:
            print(f"Initializing {config.width}x{config.height} board")
            for player_id in PlayerId:
                region = config.placement_region(player_id)
                print(
                    f"Player {player_id.value} region: x {region.x_min}-{region.x_max}, "
                    f"y {region.y_min}-{region.y_max}"
                )

        for player_id, deployments in (placements or {}).items():
            for name, x, y in deployments:
                pattern = self.pattern_library.get_pattern(name)
                if pattern is None:
                    raise ValueError(f"Pattern '{name}' not found")
                if player_id is PlayerId.TWO:
                    pattern = pattern.mirrored()
                if verbose:
                    print(f"Player {player_id.value} deploys '{pattern.name}' at ({x}, {y})")
                match.commit(player_id, pattern.placed_at(x, y))

        initial_population = match.grid.population

        if show_grid:
            print("\nInitial board:")
            print(self._format_grid(match.grid))

        damage_events = {PlayerId.ONE: 0, PlayerId.TWO: 0}
        start_time = time.time()

        ticks = 0
        while ticks < max_ticks and match.outcome is None:
            result = match.advance()
            ticks += 1
            damage_events[PlayerId.ONE] += int(result.left_damaged)
            damage_events[PlayerId.TWO] += int(result.right_damaged)
            if verbose and (result.left_damaged or result.right_damaged):
                print(
                    f"Tick {ticks}: damage left={result.left_damaged} right={result.right_damaged} "
                    f"(tiers {match.health(PlayerId.ONE)}/{match.health(PlayerId.TWO)})"
                )

        duration = time.time() - start_time

        if match.outcome is None:
            reason = "max_ticks"
        elif match.outcome is Outcome.DRAW:
            reason = "draw"
        else:
            reason = "defeat"

        stats = {
            "ticks": ticks,
            "outcome": match.outcome.value if match.outcome else None,
            "winner": match.winner.value if match.winner else None,
            "player_one_tier": match.health(PlayerId.ONE),
            "player_two_tier": match.health(PlayerId.TWO),
            "player_one_hits": damage_events[PlayerId.ONE],
            "player_two_hits": damage_events[PlayerId.TWO],
            "initial_population": initial_population,
            "population": match.grid.population,
            "duration_seconds": duration,
            "ticks_per_second": ticks / duration if duration > 0 else 0,
        }

        if show_grid:
            print(f"\nFinal board (tick {ticks}):")
            print(self._format_grid(match.grid))

        return ticks, reason, stats

    def _format_grid(self, grid: Grid, max_size: int = 80) -> str:
        """Format a board for display, with '|' marking the two borders."""
        if grid.width > max_size or grid.height > max_size:
            return f"Board too large to display ({grid.width}x{grid.height})"

        return "\n".join(f"|{row}|" for row in str(grid).split("\n"))

    def list_patterns(self) -> None:
        """Print available patterns."""
        print("Available patterns:")
        for name in self.pattern_library.list_patterns():
            pattern = self.pattern_library.get_pattern(name)
            width, height = pattern.get_size()
            print(f"  {name} ({width}x{height}, {len(pattern.cells)} cells)")
            if pattern.description:
                print(f"      {pattern.description}")


def parse_placement(value: str) -> Placement:
    """Parse a 'Name@x,y' deployment.

    Raises:
        ValueError: If the value is malformed
    """
    if "@" not in value:
        raise ValueError(f"Invalid placement '{value}', expected NAME@X,Y")

    name, coords = value.rsplit("@", 1)
    parts = coords.split(",")
    if not name.strip() or len(parts) != 2:
        raise ValueError(f"Invalid placement '{value}', expected NAME@X,Y")

    try:
        x, y = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"Invalid coordinates in placement '{value}'") from None

    return name.strip(), x, y


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="Run a Game of Life duel from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Player one sends a glider, player two a mirrored spaceship
  lifeduel-cli --p1 Glider@8,2 --p2 "Lightweight spaceship@30,12"

  # Small board, contiguous-run damage, show the board
  lifeduel-cli -W 20 -H 12 --counting consecutive --p1 Glider@3,2 --show-grid

  # List available patterns
  lifeduel-cli --list-patterns
        """,
    )

    parser.add_argument(
        "-W", "--width", type=int, default=HORIZONTAL_BLOCKS, help=f"Board width (default: {HORIZONTAL_BLOCKS})"
    )

    parser.add_argument(
        "-H", "--height", type=int, default=VERTICAL_BLOCKS, help=f"Board height (default: {VERTICAL_BLOCKS})"
    )

    parser.add_argument(
        "--threshold",
        type=int,
        default=DAMAGE_THRESHOLD,
        help=f"Live border rows that deal one hit (default: {DAMAGE_THRESHOLD})",
    )

    parser.add_argument(
        "--tiers",
        type=int,
        default=HEALTH_TIERS,
        help=f"Health tiers per player, the last one is defeat (default: {HEALTH_TIERS})",
    )

    parser.add_argument(
        "--counting",
        choices=[mode.value for mode in EdgeCounting],
        default=EdgeCounting.TOTAL.value,
        help="Count all live border rows, or only an uninterrupted run (default: total)",
    )

    parser.add_argument(
        "--p1",
        action="append",
        default=[],
        metavar="NAME@X,Y",
        help="Deploy a pattern for player one (repeatable)",
    )

    parser.add_argument(
        "--p2",
        action="append",
        default=[],
        metavar="NAME@X,Y",
        help="Deploy a mirrored pattern for player two (repeatable)",
    )

    parser.add_argument(
        "-m",
        "--max-ticks",
        type=int,
        default=1000,
        help="Maximum generations to simulate (default: 1000)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    parser.add_argument(
        "-g",
        "--show-grid",
        action="store_true",
        help="Display initial and final boards",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def format_outcome(reason: str, stats: dict) -> str:
    """Format how the duel ended for display."""
    if reason == "defeat":
        return f"Player {stats['winner']} wins after {stats['ticks']} ticks"
    elif reason == "draw":
        return f"Draw: both players fell on tick {stats['ticks']}"
    elif reason == "max_ticks":
        return f"No winner after {stats['ticks']} ticks"
    else:
        return f"Unknown reason: {reason}"


def print_results(reason: str, stats: dict, verbose: bool) -> None:
    """Print duel results."""
    print(format_outcome(reason, stats))
    print(
        f"Health tiers: player 1 {stats['player_one_tier']}, player 2 {stats['player_two_tier']} "
        f"(hits {stats['player_one_hits']}/{stats['player_two_hits']})"
    )

    if verbose:
        print(f"Population: {stats['initial_population']} -> {stats['population']}")
        print(f"Duration: {stats['duration_seconds']:.3f}s ({stats['ticks_per_second']:.0f} ticks/s)")


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width < 8:
        errors.append("Width must be at least 8")

    if args.height < 3:
        errors.append("Height must be at least 3")

    if args.threshold < 1:
        errors.append("Threshold must be positive")

    if args.tiers < 2:
        errors.append("Tiers must be at least 2")

    if args.max_ticks <= 0:
        errors.append("Max ticks must be positive")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    cli = CLIMatch()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = MatchConfig(
            width=args.width,
            height=args.height,
            damage_threshold=args.threshold,
            health_tiers=args.tiers,
            edge_counting=EdgeCounting(args.counting),
        )
        placements = {
            PlayerId.ONE: [parse_placement(value) for value in args.p1],
            PlayerId.TWO: [parse_placement(value) for value in args.p2],
        }

        ticks, reason, stats = cli.run_match(
            config,
            placements,
            max_ticks=args.max_ticks,
            verbose=args.verbose,
            show_grid=args.show_grid,
        )

        print_results(reason, stats, args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nDuel interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
