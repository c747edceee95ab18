"""
Pytest configuration and fixtures for scoreboard tests.
"""
import os
import sys
import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

# Set testing environment before importing the package
os.environ['SCOREBOARD_ENV'] = 'testing'

from scoreboard import MatchRegistry
from scoreboard.config import DEFAULT_TEAMS


class FrozenClock:
    """Clock that only moves when told to."""
    
    def __init__(self, now: int = 1_700_000_000_000):
        self.now = now
    
    def __call__(self) -> int:
        return self.now
    
    def advance(self, ms: int = 1):
        self.now += ms


@pytest.fixture
def clock():
    """Controllable millisecond clock."""
    return FrozenClock()


@pytest.fixture
def registry():
    """Empty registry with the default team list."""
    return MatchRegistry(teams=DEFAULT_TEAMS)


@pytest.fixture
def mock_redis(mocker):
    """Mock Redis client."""
    return mocker.MagicMock()


@pytest.fixture
def registry_with_events(mock_redis):
    """Registry that publishes events to a mocked Redis."""
    return MatchRegistry(teams=DEFAULT_TEAMS, redis_client=mock_redis, channel='test:events')


@pytest.fixture
def world_cup(registry):
    """Registry with the five ranked fixtures in play."""
    fixtures = [
        ('Mexico', 'Canada', 0, 5),
        ('Spain', 'Brazil', 10, 2),
        ('Germany', 'France', 2, 2),
        ('Uruguay', 'Italy', 6, 6),
        ('Argentina', 'Australia', 3, 1),
    ]
    for home, away, _, _ in fixtures:
        registry.start_game(home, away)
    for home, away, home_score, away_score in fixtures:
        registry.update_score(home, away, home_score, away_score)
    return registry
