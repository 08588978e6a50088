from dataclasses import dataclass
from enum import Enum
from typing import Optional

from application.actions import KeyPress


class EventKind(Enum):
    TICK = "tick"
    RENDER = "render"
    KEY = "key"


@dataclass(frozen=True)
class Event:
    kind: EventKind
    key: Optional[KeyPress] = None

    @classmethod
    def for_key(cls, key: KeyPress) -> "Event":
        return cls(EventKind.KEY, key=key)


TICK_EVENT = Event(EventKind.TICK)
RENDER_EVENT = Event(EventKind.RENDER)
