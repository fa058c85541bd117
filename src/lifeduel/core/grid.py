"""Bounded grid data structure for the duel board."""

from typing import Iterable, Iterator, List, NamedTuple, Tuple
import numpy as np
import torch
import torch.nn.functional as F


# Relative offsets of the 8 surrounding cells
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


class Position(NamedTuple):
    """A tile coordinate on the board."""

    x: int
    y: int


class Grid:
    """Represents the 2D board of a duel.

    Cells are stored in a numpy array indexed ``[x, y]``. Edges are hard:
    cells beyond the border do not exist and are never counted as neighbors.
    Dimensions are fixed at construction.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize an empty grid.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If either dimension is not positive
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self._width = width
        self._height = height
        self._cells = np.zeros((width, height), dtype=np.int8)

        # Single-threaded to keep ticks deterministic and cheap on small boards
        torch.set_num_threads(1)

        # PyTorch tensors for convolution (reused for efficiency)
        self._torch_input = torch.zeros(1, 1, height, width, dtype=torch.float32)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cells(self) -> np.ndarray:
        """Get the current cell array."""
        return self._cells

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self._width, self._height)

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies on the board."""
        return 0 <= x < self._width and 0 <= y < self._height

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds for {self._width}x{self._height} grid")

    def get_cell(self, x: int, y: int) -> bool:
        """Get the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            True if cell is alive, False if dead

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(x, y)
        return bool(self._cells[x, y])

    def set_cell(self, x: int, y: int, alive: bool) -> None:
        """Set the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate
            alive: Whether the cell should be alive

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(x, y)
        self._cells[x, y] = 1 if alive else 0

    def set_alive(self, positions: Iterable[Tuple[int, int]]) -> None:
        """Mark every given coordinate alive.

        All coordinates are checked before any cell is written, so a bad
        coordinate leaves the grid untouched.

        Raises:
            IndexError: If any coordinate is out of bounds
        """
        positions = [Position(*p) for p in positions]
        for x, y in positions:
            self._check_bounds(x, y)
        for x, y in positions:
            self._cells[x, y] = 1

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(0)

    def copy(self) -> "Grid":
        """Return an independent grid with the same cell states."""
        other = Grid(self._width, self._height)
        other._cells[:] = self._cells
        return other

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.sum(self._cells > 0))

    def column(self, x: int) -> np.ndarray:
        """Get a boolean view of one column, top row first."""
        if not 0 <= x < self._width:
            raise IndexError(f"Column {x} out of bounds for width {self._width}")
        return self._cells[x, :] > 0

    def living_cells(self) -> Iterator[Position]:
        """Yield the coordinates of every living cell."""
        xs, ys = np.where(self._cells > 0)
        for x, y in zip(xs, ys):
            yield Position(int(x), int(y))

    def get_neighbors(self, x: int, y: int) -> int:
        """Count living neighbors of a cell.

        Offsets landing outside the board are skipped, so corners see at most
        3 neighbors, edges 5 and interior cells 8.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        self._check_bounds(x, y)
        count = 0
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self._width and 0 <= ny < self._height:
                count += int(self._cells[nx, ny])
        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using PyTorch-accelerated convolution.

        Zero padding keeps the edges hard.

        Returns:
            2D array with neighbor counts for each cell, indexed [x, y]
        """
        # Grid uses (width, height) but PyTorch expects (height, width), so transpose
        self._torch_input[0, 0] = torch.from_numpy((self._cells.T > 0).astype(np.float32))
        neighbors = F.conv2d(self._torch_input, self._torch_kernel, padding=1)

        return neighbors[0, 0].numpy().astype(np.int8).T

    @classmethod
    def from_rows(cls, rows: List[str], alive: str = "*") -> "Grid":
        """Build a grid from text rows, top row first.

        Args:
            rows: Equal-length strings, one per row
            alive: Character marking a living cell

        Raises:
            ValueError: If rows are empty or ragged
        """
        if not rows:
            raise ValueError("At least one row is required")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("All rows must have the same length")

        grid = cls(width, len(rows))
        for y, row in enumerate(rows):
            for x, char in enumerate(row):
                if char == alive:
                    grid._cells[x, y] = 1
        return grid

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        result = []
        for y in range(self._height):
            row = []
            for x in range(self._width):
                row.append("*" if self._cells[x, y] else ".")
            result.append("".join(row))
        return "\n".join(result)
