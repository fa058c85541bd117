"""Conway's Game of Life transition on a bounded board."""

from typing import Tuple

from .damage import DamageReport, EdgeCounting, detect_damage
from .grid import Grid


def next_generation(grid: Grid) -> Grid:
    """Compute the next generation into a fresh grid.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    The input grid is never modified.
    """
    neighbor_counts = grid.count_all_neighbors()
    cells = grid.cells

    survive_mask = (cells > 0) & ((neighbor_counts == 2) | (neighbor_counts == 3))
    birth_mask = (cells == 0) & (neighbor_counts == 3)

    result = Grid(grid.width, grid.height)
    result.cells[survive_mask | birth_mask] = 1
    return result


def advance(
    grid: Grid,
    threshold: int = 3,
    counting: EdgeCounting = EdgeCounting.TOTAL,
) -> Tuple[Grid, DamageReport]:
    """Advance one generation.

    Damage is read from the board as it stood before this tick's evolution.

    Args:
        grid: Current generation
        threshold: Live rows on an edge column that constitute a hit
        counting: Edge counting mode

    Returns:
        Tuple of (next generation grid, damage report)
    """
    report = detect_damage(grid, threshold, counting)
    return next_generation(grid), report
