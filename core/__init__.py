from .status import TaskState, DONE_MARKER
from .task_item import TaskItem

__all__ = [
    "TaskState",
    "DONE_MARKER",
    "TaskItem",
]
