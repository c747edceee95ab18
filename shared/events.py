from enum import Enum
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Tuple
import json


class EventType(str, Enum):
    MATCH_STARTED = "match.started"
    SCORE_UPDATED = "match.score_updated"
    MATCH_FINISHED = "match.finished"


@dataclass
class Event:
    type: EventType
    match_id: str
    timestamp: str = None
    data: dict = None
    
    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")
        if self.data is None:
            self.data = {}
    
    def to_dict(self) -> dict:
        return {
            "type": self.type.value if isinstance(self.type, EventType) else self.type,
            "match_id": self.match_id,
            "timestamp": self.timestamp,
            "data": self.data
        }
    
    def to_json(self) -> str:
        return json.dumps(self.to_dict())
    
    @classmethod
    def from_dict(cls, data: dict) -> "Event":
        return cls(
            type=EventType(data["type"]) if data["type"] in [e.value for e in EventType] else data["type"],
            match_id=data["match_id"],
            timestamp=data.get("timestamp"),
            data=data.get("data", {})
        )
    
    @classmethod
    def from_json(cls, json_str: str) -> "Event":
        return cls.from_dict(json.loads(json_str))


def match_started_event(match) -> Event:
    return Event(
        type=EventType.MATCH_STARTED,
        match_id=match.match_id,
        data=match.to_dict()
    )


def score_updated_event(match, previous_score: Tuple[int, int]) -> Event:
    return Event(
        type=EventType.SCORE_UPDATED,
        match_id=match.match_id,
        data={
            "home_team": match.home_team,
            "away_team": match.away_team,
            "previous_score": list(previous_score),
            "score": list(match.score)
        }
    )


def match_finished_event(match) -> Event:
    return Event(
        type=EventType.MATCH_FINISHED,
        match_id=match.match_id,
        data=match.to_dict()
    )
