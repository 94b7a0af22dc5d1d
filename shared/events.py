from enum import Enum
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List
import json

from .pairing import find_bye


class EventType(str, Enum):
    # Pairing rounds
    PAIRINGS_CREATED = "pairings.created"


@dataclass
class Event:
    type: EventType
    room_id: str
    timestamp: str = None
    data: dict = None

    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')
        if self.data is None:
            self.data = {}

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "room_id": self.room_id,
            "timestamp": self.timestamp,
            "data": self.data
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


def pairings_created_event(room_id: str, groups: List[List[str]], allow_triple: bool) -> Event:
    return Event(
        type=EventType.PAIRINGS_CREATED,
        room_id=room_id,
        data={
            "groups": groups,
            "group_count": len(groups),
            "participant_count": sum(len(g) for g in groups),
            "bye": find_bye(groups),
            "allow_triple": allow_triple
        }
    )
