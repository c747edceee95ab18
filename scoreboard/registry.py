import dataclasses
import logging
import threading
from typing import Callable, Iterable, List, Optional

import redis

from .config import Config
from .errors import (
    DuplicateMatchError,
    InvalidArgumentError,
    InvalidScoreError,
    NoSuchMatchError,
    TeamBusyError,
    UnknownTeamError,
)
from .models import KickOffClock, Match, generate_match_id
from shared.events import Event, match_finished_event, match_started_event, score_updated_event

logger = logging.getLogger(__name__)


def _is_team_name(value) -> bool:
    return isinstance(value, str) and bool(value)


def _is_valid_score(value) -> bool:
    # bool is an int subclass but never a score
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


class MatchRegistry:
    """
    In-memory registry of matches currently in play.
    - Start, update and finish matches keyed by their (home, away) pairing
    - Enforce one active match per team
    - Serve ranked snapshots and a plain-text board

    Not thread-safe; see SynchronizedRegistry.
    """

    def __init__(
        self,
        teams: Iterable[str] = None,
        redis_client: redis.Redis = None,
        channel: str = None,
        clock: Callable[[], int] = None
    ):
        self._teams = frozenset(Config.RECOGNIZED_TEAMS if teams is None else teams)
        self._matches: List[Match] = []
        self._clock = KickOffClock(clock)
        self.redis = redis_client
        self.channel = channel or Config.EVENTS_CHANNEL

    def __len__(self) -> int:
        return len(self._matches)

    @property
    def teams(self) -> frozenset:
        return self._teams

    def _find_index(self, home_team: str, away_team: str) -> int:
        for index, match in enumerate(self._matches):
            if match.is_fixture(home_team, away_team):
                return index
        return -1

    def _is_team_playing(self, team: str) -> bool:
        return any(match.involves(team) for match in self._matches)

    def _publish(self, event: Event):
        if not self.redis:
            return
        try:
            self.redis.publish(self.channel, event.to_json())
            logger.debug(f"Published {event.type.value} for {event.match_id} to {self.channel}")
        except redis.RedisError as e:
            logger.error(f"Failed to publish {event.type.value} for {event.match_id}: {e}")

    def start_game(self, home_team: str = None, away_team: str = None) -> None:
        """Start a new match between two recognized teams at 0 - 0."""
        if not _is_team_name(home_team) or not _is_team_name(away_team):
            raise InvalidArgumentError()

        unknown = [team for team in (home_team, away_team) if team not in self._teams]
        if unknown:
            raise UnknownTeamError(unknown)

        if self._find_index(home_team, away_team) != -1:
            raise DuplicateMatchError(home_team, away_team)

        if home_team == away_team:
            raise TeamBusyError(home_team, f"{home_team} cannot play against itself")
        for team in (home_team, away_team):
            if self._is_team_playing(team):
                raise TeamBusyError(team)

        match = Match(
            match_id=generate_match_id(),
            started_at=self._clock(),
            home_team=home_team,
            away_team=away_team
        )
        self._matches.append(match)
        logger.info(f"Started {home_team} vs {away_team} ({match.match_id})")

        self._publish(match_started_event(match))

    def finish_game(self, home_team: str = None, away_team: str = None) -> None:
        """Remove a finished match from the board."""
        if not _is_team_name(home_team) or not _is_team_name(away_team):
            raise InvalidArgumentError()

        index = self._find_index(home_team, away_team)
        if index == -1:
            raise NoSuchMatchError(home_team, away_team)

        match = self._matches.pop(index)
        logger.info(f"Finished {match}")

        self._publish(match_finished_event(match))

    def update_score(
        self,
        home_team: str = None,
        away_team: str = None,
        home_score: int = None,
        away_score: int = None
    ) -> None:
        """
        Replace the score of an active match.

        The new pair overwrites the old one; it is not added to it.
        """
        if not _is_team_name(home_team) or not _is_team_name(away_team):
            raise InvalidArgumentError()
        if not _is_valid_score(home_score) or not _is_valid_score(away_score):
            raise InvalidScoreError()

        index = self._find_index(home_team, away_team)
        if index == -1:
            raise NoSuchMatchError(home_team, away_team)

        previous = self._matches[index]
        match = dataclasses.replace(previous, home_score=home_score, away_score=away_score)
        self._matches[index] = match
        logger.info(f"Score update {match}")

        self._publish(score_updated_event(match, previous.score))

    def live_scores(self) -> List[Match]:
        """
        Active matches, highest total score first.
        Equal totals are ordered by most recent kick-off.
        """
        return sorted(
            self._matches,
            key=lambda m: (m.total, m.started_at),
            reverse=True
        )

    def live_board(self) -> str:
        """The live scores as text, one match per line."""
        return "\n".join(str(match) for match in self.live_scores())


class SynchronizedRegistry:
    """Serializes access to a MatchRegistry shared between threads."""

    def __init__(self, registry: Optional[MatchRegistry] = None):
        self._registry = registry if registry is not None else MatchRegistry()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._registry)

    @property
    def teams(self) -> frozenset:
        return self._registry.teams

    def start_game(self, home_team: str, away_team: str) -> None:
        with self._lock:
            self._registry.start_game(home_team, away_team)

    def finish_game(self, home_team: str, away_team: str) -> None:
        with self._lock:
            self._registry.finish_game(home_team, away_team)

    def update_score(self, home_team: str, away_team: str, home_score: int, away_score: int) -> None:
        with self._lock:
            self._registry.update_score(home_team, away_team, home_score, away_score)

    def live_scores(self) -> List[Match]:
        with self._lock:
            return self._registry.live_scores()

    def live_board(self) -> str:
        with self._lock:
            return self._registry.live_board()
