"""Player cursor and tile selection inside a placement region."""

from enum import Enum
from typing import List, NamedTuple, Optional

from .grid import Position


class Direction(Enum):
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)


class PlacementRegion(NamedTuple):
    """Inclusive rectangle of tiles a player may deploy into."""

    x_min: int
    x_max: int
    y_min: int
    y_max: int

    def contains(self, x: int, y: int) -> bool:
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max

    @property
    def width(self) -> int:
        return self.x_max - self.x_min + 1

    @property
    def height(self) -> int:
        return self.y_max - self.y_min + 1


class Player:
    """Hover cursor and pending selection of one player.

    The cursor never leaves the placement region: moving past one side lands
    it on the opposite side of the region.
    """

    def __init__(self, region: PlacementRegion, start: Optional[Position] = None) -> None:
        """Initialize a player.

        Args:
            region: Rectangle the cursor and selections are confined to
            start: Initial cursor tile, defaults to the middle of the region
        """
        self.region = region
        if start is None:
            start = Position(region.x_min + region.width // 2, (region.y_min + region.y_max + 1) // 2)
        if not region.contains(*start):
            raise ValueError(f"Cursor start {tuple(start)} lies outside region {tuple(region)}")
        self._start = Position(*start)
        self.cursor = self._start
        self._selected: List[Position] = []

    @property
    def selected(self) -> List[Position]:
        """Selected tiles in selection order."""
        return list(self._selected)

    def move(self, direction: Direction, amount: int = 1) -> Position:
        """Move the cursor, wrapping to the opposite bound when it would leave the region.

        Returns:
            New cursor position
        """
        x, y = self.cursor
        region = self.region

        if direction is Direction.UP:
            y = region.y_max if y - amount < region.y_min else y - amount
        elif direction is Direction.DOWN:
            y = region.y_min if y + amount > region.y_max else y + amount
        elif direction is Direction.LEFT:
            x = region.x_max if x - amount < region.x_min else x - amount
        elif direction is Direction.RIGHT:
            x = region.x_min if x + amount > region.x_max else x + amount

        self.cursor = Position(x, y)
        return self.cursor

    def toggle_selection(self) -> bool:
        """Select the hovered tile, or deselect it if already selected.

        Returns:
            True if the tile is now selected
        """
        if self.cursor in self._selected:
            self._selected.remove(self.cursor)
            return False
        self._selected.append(self.cursor)
        return True

    def take_selection(self) -> List[Position]:
        """Return the pending selection and clear it."""
        selected, self._selected = self._selected, []
        return selected

    def reset(self) -> None:
        self.cursor = self._start
        self._selected.clear()
