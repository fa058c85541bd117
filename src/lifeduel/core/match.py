"""Two-player duel: board, health and match state."""

import logging
import threading
from enum import Enum
from typing import Dict, Iterable, NamedTuple, Optional, Tuple

from .config import MatchConfig, PlayerId
from .damage import NO_DAMAGE, DamageReport
from .generation import advance as advance_generation
from .grid import Grid, Position
from .health import PlayerHealth
from .player import Player

logger = logging.getLogger(__name__)


class MatchState(Enum):
    PAUSED = "paused"
    PLAYING = "playing"
    TERMINAL = "terminal"
    REVIEWING = "reviewing"


class Outcome(Enum):
    PLAYER_ONE_WINS = "player_one_wins"
    PLAYER_TWO_WINS = "player_two_wins"
    DRAW = "draw"

    @property
    def winner(self) -> Optional[PlayerId]:
        if self is Outcome.PLAYER_ONE_WINS:
            return PlayerId.ONE
        if self is Outcome.PLAYER_TWO_WINS:
            return PlayerId.TWO
        return None


class PlacementError(ValueError):
    """Raised when a player commits cells outside their placement region."""


class TickResult(NamedTuple):
    """What one call to :meth:`Match.advance` produced."""

    grid: Grid
    left_damaged: bool
    right_damaged: bool
    left_defeated: bool
    right_defeated: bool


class Match:
    """A duel between two players on a shared Game of Life board.

    Player one defends the left border (column 0), player two the right
    border. Generations only advance while the match is PLAYING. Every public
    mutation runs under a single lock, so a commit never lands in the middle
    of a generation.
    """

    def __init__(self, config: Optional[MatchConfig] = None, start_paused: bool = True) -> None:
        """Initialize a match.

        Args:
            config: Match settings, defaults to the reference board
            start_paused: Open on the pause menu rather than straight into play
        """
        self.config = config or MatchConfig()
        self._lock = threading.Lock()
        self._grid = Grid(self.config.width, self.config.height)
        self._health: Dict[PlayerId, PlayerHealth] = {
            player_id: PlayerHealth(self.config.health_tiers) for player_id in PlayerId
        }
        self.players: Dict[PlayerId, Player] = {
            player_id: Player(self.config.placement_region(player_id)) for player_id in PlayerId
        }
        self._state = MatchState.PAUSED if start_paused else MatchState.PLAYING
        self._outcome: Optional[Outcome] = None
        self._generation = 0

    @property
    def grid(self) -> Grid:
        """The live board. Use :meth:`snapshot` for a copy."""
        return self._grid

    @property
    def state(self) -> MatchState:
        return self._state

    @property
    def outcome(self) -> Optional[Outcome]:
        return self._outcome

    @property
    def winner(self) -> Optional[PlayerId]:
        return self._outcome.winner if self._outcome else None

    @property
    def generation(self) -> int:
        """Number of generations advanced since the last reset."""
        return self._generation

    def snapshot(self) -> Grid:
        with self._lock:
            return self._grid.copy()

    def health(self, player_id: PlayerId) -> int:
        """Current health tier of a player, 0 being full health."""
        with self._lock:
            return self._health[player_id].tier

    def is_defeated(self, player_id: PlayerId) -> bool:
        return self._health[player_id].is_defeated()

    def advance(self) -> TickResult:
        """Advance one generation and apply the border damage it caused.

        Outside the PLAYING state the board is left untouched and no damage
        is reported.
        """
        with self._lock:
            if self._state is not MatchState.PLAYING:
                return self._result(NO_DAMAGE)

            self._grid, report = advance_generation(
                self._grid, self.config.damage_threshold, self.config.edge_counting
            )
            self._generation += 1
            self._apply_damage(report)
            return self._result(report)

    def apply_damage(self, report: DamageReport) -> None:
        """Apply a damage report to both players' health.

        Ignored unless the match is PLAYING.
        """
        with self._lock:
            if self._state is MatchState.PLAYING:
                self._apply_damage(report)

    def commit(self, player_id: PlayerId, coordinates: Iterable[Tuple[int, int]]) -> None:
        """Bring a player's chosen tiles to life.

        Args:
            player_id: Committing player
            coordinates: (x, y) tiles, duplicates allowed

        Raises:
            PlacementError: If any tile lies outside the player's placement region
        """
        region = self.config.placement_region(player_id)
        positions = [Position(*c) for c in coordinates]
        outside = [p for p in positions if not region.contains(p.x, p.y)]
        if outside:
            raise PlacementError(
                f"Player {player_id.value} cannot place at {[tuple(p) for p in outside]}; "
                f"region is x {region.x_min}-{region.x_max}, y {region.y_min}-{region.y_max}"
            )

        with self._lock:
            self._grid.set_alive(positions)
        logger.debug("Player %d committed %d cells", player_id.value, len(set(positions)))

    def deploy(self, player_id: PlayerId) -> int:
        """Commit everything the player has selected and clear the selection.

        Returns:
            Number of tiles deployed
        """
        selection = self.players[player_id].take_selection()
        self.commit(player_id, selection)
        return len(selection)

    def reset(self) -> None:
        """Start a fresh match: empty board, full health, PLAYING."""
        with self._lock:
            self._grid = Grid(self.config.width, self.config.height)
            for health in self._health.values():
                health.reset()
            for player in self.players.values():
                player.reset()
            self._outcome = None
            self._generation = 0
            self._state = MatchState.PLAYING
        logger.info("Match reset")

    def toggle_pause(self) -> MatchState:
        """Switch between PLAYING and PAUSED; other states are unaffected."""
        with self._lock:
            if self._state is MatchState.PLAYING:
                self._set_state(MatchState.PAUSED)
            elif self._state is MatchState.PAUSED:
                self._set_state(MatchState.PLAYING)
            return self._state

    def toggle_review(self) -> MatchState:
        """Switch between the final result and a frozen view of the board."""
        with self._lock:
            if self._state is MatchState.TERMINAL:
                self._set_state(MatchState.REVIEWING)
            elif self._state is MatchState.REVIEWING:
                self._set_state(MatchState.TERMINAL)
            return self._state

    def _set_state(self, state: MatchState) -> None:
        logger.info("Match state %s -> %s", self._state.value, state.value)
        self._state = state

    def _apply_damage(self, report: DamageReport) -> None:
        if report.left:
            self._health[PlayerId.ONE].take_damage()
        if report.right:
            self._health[PlayerId.TWO].take_damage()
        if report.any:
            logger.debug(
                "Generation %d damage left=%s right=%s tiers=%d/%d",
                self._generation,
                report.left,
                report.right,
                self._health[PlayerId.ONE].tier,
                self._health[PlayerId.TWO].tier,
            )

        one_down = self._health[PlayerId.ONE].is_defeated()
        two_down = self._health[PlayerId.TWO].is_defeated()
        if not (one_down or two_down):
            return

        if one_down and two_down:
            self._outcome = Outcome.DRAW
        elif one_down:
            self._outcome = Outcome.PLAYER_TWO_WINS
        else:
            self._outcome = Outcome.PLAYER_ONE_WINS
        logger.info("Match over after %d generations: %s", self._generation, self._outcome.value)
        self._set_state(MatchState.TERMINAL)

    def _result(self, report: DamageReport) -> TickResult:
        return TickResult(
            self._grid.copy(),
            report.left,
            report.right,
            self._health[PlayerId.ONE].is_defeated(),
            self._health[PlayerId.TWO].is_defeated(),
        )
