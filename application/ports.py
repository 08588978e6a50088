from typing import List, Protocol, Sequence

from core import TaskItem


class TaskRepository(Protocol):
    def load(self) -> List[TaskItem]:
        ...

    def save(self, tasks: Sequence[TaskItem]) -> None:
        ...


class TaskWriter(Protocol):
    """Accepts snapshots for background persistence; must not block the caller."""

    def submit(self, tasks: Sequence[TaskItem]) -> None:
        ...
