"""Ready-made shapes players can deploy, and pattern management."""

from typing import Dict, List, Optional, Tuple

from .grid import Position


class Pattern:
    """Represents a Game of Life shape."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (x, y) coordinates for living cells
            description: Optional description
        """
        self.name = name
        self.cells = [Position(*cell) for cell in cells]
        self.description = description

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        xs, ys = zip(*self.cells)
        return (min(xs), min(ys), max(xs), max(ys))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (width, height)."""
        min_x, min_y, max_x, max_y = self.get_bounding_box()
        return (max_x - min_x + 1, max_y - min_y + 1)

    def normalize(self) -> "Pattern":
        """Return a new pattern with coordinates normalized to start at (0, 0)."""
        if not self.cells:
            return Pattern(self.name, [], self.description)

        min_x, min_y, _, _ = self.get_bounding_box()
        return Pattern(self.name, [(x - min_x, y - min_y) for x, y in self.cells], self.description)

    def mirrored(self) -> "Pattern":
        """Return the pattern flipped left-to-right within its bounding box.

        A shape travelling towards the right border travels towards the left
        one once mirrored.
        """
        min_x, _, max_x, _ = self.get_bounding_box()
        return Pattern(self.name, [(min_x + max_x - x, y) for x, y in self.cells], self.description)

    def placed_at(self, x: int, y: int) -> List[Position]:
        """Absolute coordinates of the normalized pattern with its top-left corner at (x, y)."""
        return [Position(cx + x, cy + y) for cx, cy in self.normalize().cells]

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, {len(self.cells)} cells)"


class PatternLibrary:
    """Collection of named shapes.

    Travelling shapes are stored heading right, towards player two's border.
    """

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        self.add_pattern(Pattern("Block", [(0, 0), (1, 0), (0, 1), (1, 1)], "2x2 still life"))

        self.add_pattern(Pattern("Blinker", [(0, 0), (1, 0), (2, 0)], "Period 2 oscillator"))

        self.add_pattern(
            Pattern(
                "Glider",
                [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)],
                "Travels one tile diagonally down-right every 4 generations",
            )
        )

        self.add_pattern(
            Pattern(
                "Lightweight spaceship",
                [(0, 0), (3, 0), (4, 1), (0, 2), (4, 2), (1, 3), (2, 3), (3, 3), (4, 3)],
                "Travels two tiles right every 4 generations",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Look a pattern up by name, case-insensitively."""
        if name in self._patterns:
            return self._patterns[name]
        for key, pattern in self._patterns.items():
            if key.lower() == name.lower():
                return pattern
        return None

    def list_patterns(self) -> List[str]:
        return sorted(self._patterns.keys())
