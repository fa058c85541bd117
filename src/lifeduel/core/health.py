"""Per-player health tiers."""


class PlayerHealth:
    """Tracks how far a player has slid down the severity tiers.

    Tier 0 is full health; the last tier means defeat. The tier only goes up
    during a match and saturates at the last tier.
    """

    def __init__(self, tiers: int = 6) -> None:
        if tiers < 2:
            raise ValueError(f"At least two health tiers are required, got {tiers}")
        self._tiers = tiers
        self._tier = 0

    @property
    def tier(self) -> int:
        """Current tier index (0 = full health)."""
        return self._tier

    @property
    def tiers(self) -> int:
        return self._tiers

    @property
    def last_tier(self) -> int:
        return self._tiers - 1

    @property
    def remaining(self) -> int:
        """Hits left before defeat."""
        return self.last_tier - self._tier

    def take_damage(self) -> None:
        """Drop one tier, saturating at the last one."""
        if self._tier < self.last_tier:
            self._tier += 1

    def is_defeated(self) -> bool:
        return self._tier == self.last_tier

    def reset(self) -> None:
        self._tier = 0

    def __repr__(self) -> str:
        return f"PlayerHealth(tier={self._tier}, tiers={self._tiers})"
