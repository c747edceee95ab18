"""
Unit tests for the scoreboard error taxonomy.
"""
import pytest
from scoreboard.errors import (
    ScoreboardError,
    InvalidArgumentError,
    UnknownTeamError,
    DuplicateMatchError,
    TeamBusyError,
    NoSuchMatchError,
    InvalidScoreError,
)


class TestErrorHierarchy:
    """All errors share a base class."""
    
    @pytest.mark.parametrize('error', [
        InvalidArgumentError(),
        UnknownTeamError(['Jupiter']),
        DuplicateMatchError('Germany', 'France'),
        TeamBusyError('France'),
        NoSuchMatchError('Spain', 'Brazil'),
        InvalidScoreError(),
    ])
    def test_is_scoreboard_error(self, error):
        """Every error can be caught as ScoreboardError."""
        assert isinstance(error, ScoreboardError)
        assert str(error) == error.reason


class TestErrorAttributes:
    """Errors carry the teams involved."""
    
    def test_unknown_team(self):
        error = UnknownTeamError(['Jupiter', 'Saturn'])
        assert error.teams == ['Jupiter', 'Saturn']
        assert str(error) == "At least one team provided does not exist: Jupiter, Saturn"
    
    def test_duplicate_match(self):
        error = DuplicateMatchError('Germany', 'France')
        assert (error.home_team, error.away_team) == ('Germany', 'France')
    
    def test_team_busy(self):
        error = TeamBusyError('France')
        assert error.team == 'France'
        assert str(error) == "France is already playing a game"
    
    def test_no_such_match(self):
        error = NoSuchMatchError('Spain', 'Brazil')
        assert (error.home_team, error.away_team) == ('Spain', 'Brazil')
        assert str(error) == "This game is not currently being played"
    
    def test_custom_reason(self):
        """Custom reason should be used if provided."""
        error = TeamBusyError('Germany', 'Custom error message')
        assert str(error) == 'Custom error message'
