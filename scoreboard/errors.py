from typing import Iterable


class ScoreboardError(Exception):
    """Base class for every rejected scoreboard operation."""
    
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(self.reason)


class InvalidArgumentError(ScoreboardError):
    def __init__(self, reason: str = None):
        super().__init__(reason or "Expected home and away team names as strings")


class UnknownTeamError(ScoreboardError):
    def __init__(self, teams: Iterable[str], reason: str = None):
        self.teams = list(teams)
        super().__init__(
            reason or f"At least one team provided does not exist: {', '.join(self.teams)}"
        )


class DuplicateMatchError(ScoreboardError):
    def __init__(self, home_team: str, away_team: str, reason: str = None):
        self.home_team = home_team
        self.away_team = away_team
        super().__init__(reason or "This game is already in play")


class TeamBusyError(ScoreboardError):
    def __init__(self, team: str, reason: str = None):
        self.team = team
        super().__init__(reason or f"{team} is already playing a game")


class NoSuchMatchError(ScoreboardError):
    def __init__(self, home_team: str, away_team: str, reason: str = None):
        self.home_team = home_team
        self.away_team = away_team
        super().__init__(reason or "This game is not currently being played")


class InvalidScoreError(ScoreboardError):
    def __init__(self, reason: str = None):
        super().__init__(reason or "Expected home and away scores to be numbers >= 0")
