from pathlib import Path
from typing import Iterable, List, Optional

from core import TaskItem, TaskState


class TaskFileParser:
    """Line codec for checklist files: ``- [ ] text`` / ``- [x] text``.

    Decoding is lossy per line: anything that does not look like a checkbox
    line is dropped instead of failing the whole file.
    """

    STATE_OFFSET = 3
    TEXT_SEPARATOR = "] "
    LINE_TEMPLATE = "- [{marker}] {text}"

    @classmethod
    def parse_line(cls, line: str) -> Optional[TaskItem]:
        line = line.rstrip("\r\n")
        if len(line) <= cls.STATE_OFFSET:
            return None
        state = TaskState.from_marker(line[cls.STATE_OFFSET])
        head, sep, text = line.partition(cls.TEXT_SEPARATOR)
        if not sep:
            return None
        return TaskItem(text, state)

    @classmethod
    def decode(cls, lines: Iterable[str]) -> List[TaskItem]:
        items: List[TaskItem] = []
        for line in lines:
            item = cls.parse_line(line)
            if item is not None:
                items.append(item)
        return items

    @classmethod
    def format_line(cls, task: TaskItem) -> str:
        return cls.LINE_TEMPLATE.format(marker=task.state.marker, text=task.text)

    @classmethod
    def encode(cls, tasks: Iterable[TaskItem]) -> List[str]:
        return [cls.format_line(task) for task in tasks]

    @classmethod
    def to_file_content(cls, tasks: Iterable[TaskItem]) -> str:
        return "".join(f"{line}\n" for line in cls.encode(tasks))

    @classmethod
    def parse(cls, filepath: Path) -> List[TaskItem]:
        if not filepath.exists():
            return []
        # newline="" keeps stray \r and other separators inside task text
        with filepath.open(encoding="utf-8", newline="") as fh:
            content = fh.read()
        return cls.decode(content.split("\n"))
