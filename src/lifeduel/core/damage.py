"""Edge-damage detection: living shapes that reach a player's border."""

from enum import Enum
from typing import NamedTuple

from .grid import Grid


class EdgeCounting(Enum):
    """How live rows in an edge column are counted during a scan.

    TOTAL counts every live row seen so far in the top-to-bottom pass.
    CONSECUTIVE restarts the count whenever a dead row interrupts the run.
    """

    TOTAL = "total"
    CONSECUTIVE = "consecutive"


class DamageReport(NamedTuple):
    """Which borders were hit during one tick."""

    left: bool
    right: bool

    @property
    def any(self) -> bool:
        return self.left or self.right


NO_DAMAGE = DamageReport(False, False)


def detect_damage(
    grid: Grid,
    threshold: int = 3,
    counting: EdgeCounting = EdgeCounting.TOTAL,
) -> DamageReport:
    """Scan the two outer columns for living rows.

    Column 0 is the left border (player one's side) and column ``width - 1``
    the right border (player two's side). Each side is damaged the first time
    its counter reaches ``threshold``; the scan stops once both are.

    Args:
        grid: Board to scan
        threshold: Number of live rows that constitutes a hit
        counting: Whether a dead row resets the counter

    Returns:
        DamageReport for this tick
    """
    left_column = grid.column(0)
    right_column = grid.column(grid.width - 1)
    reset_on_gap = counting is EdgeCounting.CONSECUTIVE

    left_damaged = right_damaged = False
    left_count = right_count = 0

    for y in range(grid.height):
        if not left_damaged:
            if left_column[y]:
                left_count += 1
                if left_count >= threshold:
                    left_damaged = True
            elif reset_on_gap:
                left_count = 0

        if not right_damaged:
            if right_column[y]:
                right_count += 1
                if right_count >= threshold:
                    right_damaged = True
            elif reset_on_gap:
                right_count = 0

        if left_damaged and right_damaged:
            break

    return DamageReport(left_damaged, right_damaged)
