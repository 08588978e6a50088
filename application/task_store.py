import logging
from typing import List, Optional

from core import TaskItem, TaskState
from application.ports import TaskRepository, TaskWriter

logger = logging.getLogger("checklist.store")


class TaskStore:
    """Owns the in-memory task list.

    Every mutation is applied synchronously and then handed to the writer as a
    snapshot; the writer decides when it reaches disk.
    """

    def __init__(self, repo: TaskRepository, writer: Optional[TaskWriter] = None):
        self.repo = repo
        self.writer = writer
        self.items: List[TaskItem] = []

    def __len__(self) -> int:
        return len(self.items)

    def load(self) -> List[TaskItem]:
        self.items = self.repo.load()
        logger.info("Loaded %d tasks", len(self.items))
        return self.items

    def get(self, index: int) -> TaskItem:
        self._check_index(index)
        return self.items[index]

    def append(self, text: str) -> TaskItem:
        item = TaskItem(text, TaskState.OPEN)
        self.items.append(item)
        self.persist()
        return item

    def toggle(self, index: int) -> TaskItem:
        item = self.get(index)
        item.toggle_state()
        self.persist()
        return item

    def edit(self, index: int, text: str) -> TaskItem:
        item = self.get(index)
        item.text = text
        self.persist()
        return item

    def delete(self, index: int) -> TaskItem:
        self._check_index(index)
        item = self.items.pop(index)
        self.persist()
        return item

    def snapshot(self) -> List[TaskItem]:
        return [item.copy() for item in self.items]

    def persist(self) -> None:
        if self.writer is None:
            return
        self.writer.submit(self.snapshot())

    def _check_index(self, index: int) -> None:
        # negative indexes would silently address from the end
        if not 0 <= index < len(self.items):
            raise IndexError(f"task index out of range: {index}")
