"""Core simulation engine."""

from .grid import Grid, Position
from .damage import DamageReport, EdgeCounting, detect_damage
from .generation import advance, next_generation
from .health import PlayerHealth
from .player import Direction, PlacementRegion, Player
from .config import MatchConfig, PlayerId
from .clock import TickClock
from .patterns import Pattern, PatternLibrary
from .match import Match, MatchState, Outcome, PlacementError, TickResult

__all__ = [
    "Grid",
    "Position",
    "DamageReport",
    "EdgeCounting",
    "detect_damage",
    "advance",
    "next_generation",
    "PlayerHealth",
    "Direction",
    "PlacementRegion",
    "Player",
    "MatchConfig",
    "PlayerId",
    "TickClock",
    "Pattern",
    "PatternLibrary",
    "Match",
    "MatchState",
    "Outcome",
    "PlacementError",
    "TickResult",
]
