"""Two-player duel built on Conway's Game of Life."""

__version__ = "0.1.0"

from .core.grid import Grid
from .core.config import MatchConfig, PlayerId
from .core.match import Match, MatchState, Outcome

__all__ = ["Grid", "MatchConfig", "PlayerId", "Match", "MatchState", "Outcome"]
