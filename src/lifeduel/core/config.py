"""Match configuration constants."""

from dataclasses import dataclass, field
from enum import Enum

from .damage import EdgeCounting
from .player import PlacementRegion


# Board size of the reference window layout (1502x952 px, 34 px blocks,
# 20 px health bars on each side)
HORIZONTAL_BLOCKS = 43
VERTICAL_BLOCKS = 28

DAMAGE_THRESHOLD = 3
HEALTH_TIERS = 6
GENERATION_DELAY = 0.15


class PlayerId(Enum):
    """The two sides of a duel."""

    ONE = 1
    TWO = 2

    @property
    def opponent(self) -> "PlayerId":
        return PlayerId.TWO if self is PlayerId.ONE else PlayerId.ONE


@dataclass(frozen=True)
class MatchConfig:
    """Immutable settings of a match.

    Placement regions are derived from the board size: each is a quarter of
    the board wide, player one's starts an eighth of the way in and player
    two's is its mirror image across the vertical center line. Both leave one
    row free at the top and bottom and never touch a border column.
    """

    width: int = HORIZONTAL_BLOCKS
    height: int = VERTICAL_BLOCKS
    damage_threshold: int = DAMAGE_THRESHOLD
    health_tiers: int = HEALTH_TIERS
    generation_delay: float = GENERATION_DELAY
    edge_counting: EdgeCounting = field(default=EdgeCounting.TOTAL)

    def __post_init__(self) -> None:
        errors = []

        if self.width < 8:
            errors.append(f"width must be at least 8, got {self.width}")
        if self.height < 3:
            errors.append(f"height must be at least 3, got {self.height}")
        if not 1 <= self.damage_threshold <= self.height:
            errors.append(f"damage_threshold must be between 1 and height, got {self.damage_threshold}")
        if self.health_tiers < 2:
            errors.append(f"health_tiers must be at least 2, got {self.health_tiers}")
        if self.generation_delay < 0:
            errors.append(f"generation_delay must be non-negative, got {self.generation_delay}")

        if errors:
            raise ValueError("Invalid match configuration: " + "; ".join(errors))

        one = self.placement_region(PlayerId.ONE)
        two = self.placement_region(PlayerId.TWO)
        if one.x_min < 1 or one.x_max >= two.x_min:
            raise ValueError(f"Placement regions do not fit a {self.width}-column board")

    def placement_region(self, player: PlayerId) -> PlacementRegion:
        """Get the rectangle a player may commit cells into."""
        x_min = self.width // 8
        x_max = x_min + self.width // 4 - 1
        if player is PlayerId.TWO:
            x_min, x_max = self.width - 1 - x_max, self.width - 1 - x_min
        return PlacementRegion(x_min, x_max, 1, self.height - 2)
