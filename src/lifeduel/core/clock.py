"""Tick throttling for the generation loop."""


class TickClock:
    """Accumulates frame time and signals when a generation is due.

    At most one generation fires per call; the accumulator restarts from
    zero when it does.
    """

    def __init__(self, delay: float) -> None:
        if delay < 0:
            raise ValueError(f"Delay must be non-negative, got {delay}")
        self.delay = delay
        self._elapsed = 0.0

    @property
    def elapsed(self) -> float:
        """Seconds accumulated since the last generation."""
        return self._elapsed

    def tick(self, seconds: float) -> bool:
        """Add elapsed time.

        Args:
            seconds: Time since the previous call

        Returns:
            True if a generation should be advanced now
        """
        self._elapsed += seconds
        if self._elapsed < self.delay:
            return False
        self._elapsed = 0.0
        return True

    def reset(self) -> None:
        self._elapsed = 0.0
