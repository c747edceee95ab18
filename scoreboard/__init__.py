"""
Live Scoreboard

Responsibilities:
- Track matches currently in play (start, score updates, finish)
- Rank them by total score, most recent kick-off first on ties
- Render the plain-text live board
- Announce changes on a Redis channel (optional)
"""
import logging
import os

import redis

from .config import config
from .errors import (
    ScoreboardError,
    InvalidArgumentError,
    UnknownTeamError,
    DuplicateMatchError,
    TeamBusyError,
    NoSuchMatchError,
    InvalidScoreError,
)
from .models import Match
from .registry import MatchRegistry, SynchronizedRegistry

Scoreboard = MatchRegistry


def create_scoreboard(config_name: str = None) -> MatchRegistry:
    """Factory for a registry configured from the environment."""
    if config_name is None:
        config_name = os.getenv('SCOREBOARD_ENV', 'development')
    
    settings = config.get(config_name, config['default'])
    logging.getLogger(__name__).setLevel(settings.LOG_LEVEL)
    
    redis_client = None
    if settings.REDIS_URL:
        redis_client = redis.Redis.from_url(settings.REDIS_URL)
    
    return MatchRegistry(
        teams=settings.RECOGNIZED_TEAMS,
        redis_client=redis_client,
        channel=settings.EVENTS_CHANNEL
    )
