from dataclasses import dataclass

from .status import TaskState


@dataclass
class TaskItem:
    """Single checklist entry. Identity is its position in the list."""

    text: str
    state: TaskState = TaskState.OPEN

    @property
    def done(self) -> bool:
        return self.state is TaskState.DONE

    def toggle_state(self) -> None:
        self.state = self.state.toggled()

    def copy(self) -> "TaskItem":
        return TaskItem(self.text, self.state)
