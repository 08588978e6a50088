from enum import Enum
from typing import Final

DONE_MARKER: Final[str] = "x"


class TaskState(Enum):
    OPEN = ("OPEN", " ")
    DONE = ("DONE", DONE_MARKER)

    @property
    def marker(self) -> str:
        """Character written between the brackets of a persisted line."""
        return self.value[1]

    @classmethod
    def from_marker(cls, char: str) -> "TaskState":
        """Only a literal ``x`` means done; anything else (blank, ``X``, ``-``) is open."""
        return cls.DONE if char == DONE_MARKER else cls.OPEN

    def toggled(self) -> "TaskState":
        return TaskState.OPEN if self is TaskState.DONE else TaskState.DONE
