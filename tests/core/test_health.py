"""Tests for the PlayerHealth class."""

import pytest
from lifeduel.core.health import PlayerHealth


class TestPlayerHealth:
    """Test cases for health tiers."""

    def test_initialization(self):
        health = PlayerHealth()
        assert health.tier == 0
        assert health.tiers == 6
        assert health.last_tier == 5
        assert health.remaining == 5
        assert not health.is_defeated()

    def test_defeat_after_five_hits(self):
        """Test that the fifth hit reaches the last tier."""
        health = PlayerHealth(6)

        for _ in range(4):
            health.take_damage()
        assert health.tier == 4
        assert not health.is_defeated()

        health.take_damage()
        assert health.tier == 5
        assert health.is_defeated()

    def test_saturates_at_last_tier(self):
        """Test that further hits never go past defeat."""
        health = PlayerHealth(3)
        for _ in range(10):
            health.take_damage()

        assert health.tier == 2
        assert health.remaining == 0
        assert health.is_defeated()

    def test_reset(self):
        health = PlayerHealth()
        health.take_damage()
        health.take_damage()

        health.reset()
        assert health.tier == 0

    def test_too_few_tiers(self):
        with pytest.raises(ValueError):
            PlayerHealth(1)
