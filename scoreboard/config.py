import os


DEFAULT_TEAMS = (
    'Argentina',
    'Germany',
    'France',
    'Spain',
    'Brazil',
    'Uruguay',
    'Italy',
    'Australia',
    'Mexico',
    'Canada',
)


def parse_teams(raw: str = None) -> tuple:
    """Split a comma-separated team list, falling back to DEFAULT_TEAMS."""
    if not raw:
        return DEFAULT_TEAMS
    teams = tuple(t.strip() for t in raw.split(',') if t.strip())
    return teams or DEFAULT_TEAMS


class Config:
    # Recognized teams
    RECOGNIZED_TEAMS = parse_teams(os.getenv('SCOREBOARD_TEAMS'))
    
    # Event stream (disabled when empty)
    REDIS_URL = os.getenv('REDIS_URL', '')
    EVENTS_CHANNEL = os.getenv('SCOREBOARD_EVENTS_CHANNEL', 'scoreboard:events')
    
    # Logging
    LOG_LEVEL = os.getenv('SCOREBOARD_LOG_LEVEL', 'INFO').upper()


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    DEBUG = True
    RECOGNIZED_TEAMS = DEFAULT_TEAMS
    REDIS_URL = ''


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
