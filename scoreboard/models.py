import time
import uuid
from dataclasses import dataclass
from typing import Callable, Tuple


def generate_match_id() -> str:
    """Opaque identifier for a new match."""
    return str(uuid.uuid4())


def wall_clock_ms() -> int:
    return int(time.time() * 1000)


class KickOffClock:
    """
    Issues kick-off timestamps in epoch milliseconds.
    Values never repeat: when the underlying clock has not advanced since the
    last call, the previous value plus one is returned instead.
    """
    
    def __init__(self, source: Callable[[], int] = None):
        self._source = source or wall_clock_ms
        self._last = None
    
    def __call__(self) -> int:
        now = int(self._source())
        if self._last is not None and now <= self._last:
            now = self._last + 1
        self._last = now
        return now


@dataclass(frozen=True)
class Match:
    match_id: str
    started_at: int
    home_team: str
    away_team: str
    home_score: int = 0
    away_score: int = 0
    
    @property
    def score(self) -> Tuple[int, int]:
        return (self.home_score, self.away_score)
    
    @property
    def total(self) -> int:
        return self.home_score + self.away_score
    
    def involves(self, team: str) -> bool:
        return team in (self.home_team, self.away_team)
    
    def is_fixture(self, home_team: str, away_team: str) -> bool:
        return self.home_team == home_team and self.away_team == away_team
    
    def to_dict(self) -> dict:
        return {
            'id': self.match_id,
            'startedAt': self.started_at,
            'homeTeam': self.home_team,
            'awayTeam': self.away_team,
            'score': [self.home_score, self.away_score],
        }
    
    def __str__(self) -> str:
        return f"{self.home_team} {self.home_score} - {self.away_team} {self.away_score}"
