"""Basic tests for the lifeduel package."""

from lifeduel import Grid, Match, MatchConfig, MatchState, PlayerId
from lifeduel.core.patterns import PatternLibrary


def test_grid_creation():
    """Test basic grid creation and cell operations."""
    grid = Grid(10, 10)
    assert grid.width == 10
    assert grid.height == 10
    assert grid.get_cell(0, 0) is False

    grid.set_cell(5, 5, True)
    assert grid.get_cell(5, 5) is True


def test_match_creation():
    """Test basic match creation."""
    match = Match()
    assert match.state is MatchState.PAUSED
    assert match.grid.shape == (43, 28)
    assert match.config == MatchConfig()


def test_pattern_library():
    """Test pattern library has some patterns."""
    library = PatternLibrary()
    assert "Glider" in library.list_patterns()


def test_reset_after_play():
    """Test that reset restores an empty board and full health."""
    match = Match(start_paused=False)
    match.commit(PlayerId.ONE, [(10, 10), (11, 10), (12, 10)])
    match.commit(PlayerId.TWO, [(30, 10), (30, 11)])
    for _ in range(3):
        match.advance()

    match.reset()

    assert match.grid.population == 0
    assert match.health(PlayerId.ONE) == 0
    assert match.health(PlayerId.TWO) == 0
