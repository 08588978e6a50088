from pathlib import Path
from typing import List, Sequence

from core import TaskItem
from application.ports import TaskRepository
from infrastructure.task_file_parser import TaskFileParser


class FileTaskRepository(TaskRepository):
    """Whole-file storage: read once at start, overwrite on every save."""

    def __init__(self, path: Path):
        self.path = Path(path).expanduser()

    def load(self) -> List[TaskItem]:
        return TaskFileParser.parse(self.path)

    def save(self, tasks: Sequence[TaskItem]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # open(..., "w") truncates before writing
        with open(self.path, "w", encoding="utf-8", newline="") as fh:
            fh.write(TaskFileParser.to_file_content(tasks))
