"""Background single-writer for the checklist file."""

import logging
import threading
from typing import Callable, List, Optional, Sequence

from core import TaskItem
from application.ports import TaskRepository

logger = logging.getLogger("checklist.save")


class SaveWorker:
    """Serializes saves through one thread.

    Only the newest submitted snapshot is kept while a write is in flight, so
    a burst of mutations turns into at most two writes and the file always
    ends up holding the last submitted list.
    """

    def __init__(
        self,
        repo: TaskRepository,
        on_saved: Optional[Callable[[int], None]] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
    ):
        self.repo = repo
        self.on_saved = on_saved
        self.on_error = on_error
        self.saves = 0
        self.failures = 0
        self._cond = threading.Condition()
        self._pending: Optional[List[TaskItem]] = None
        self._busy = False
        self._closed = False
        self._thread: Optional[threading.Thread] = None

    def start(self) -> "SaveWorker":
        if self._thread is None:
            self._thread = threading.Thread(target=self._run, name="checklist-save", daemon=True)
            self._thread.start()
        return self

    def submit(self, tasks: Sequence[TaskItem]) -> None:
        snapshot = [task.copy() for task in tasks]
        with self._cond:
            if self._closed:
                raise RuntimeError("save worker is closed")
            if self._pending is not None:
                logger.debug("Coalescing pending save (%d tasks)", len(self._pending))
            self._pending = snapshot
            self._cond.notify_all()

    @property
    def idle(self) -> bool:
        with self._cond:
            return self._pending is None and not self._busy

    def flush(self, timeout: Optional[float] = None) -> bool:
        """Block until nothing is pending or in flight. Returns False on timeout."""
        with self._cond:
            return self._cond.wait_for(lambda: self._pending is None and not self._busy, timeout)

    def close(self, timeout: Optional[float] = 5.0) -> bool:
        drained = self.flush(timeout)
        with self._cond:
            self._closed = True
            self._cond.notify_all()
        if self._thread is not None:
            self._thread.join(timeout)
        if not drained:
            logger.warning("Save worker closed with a write still pending")
        return drained

    def _run(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._pending is not None or self._closed)
                if self._pending is None:
                    return
                snapshot, self._pending = self._pending, None
                self._busy = True
            try:
                self._write(snapshot)
            finally:
                with self._cond:
                    self._busy = False
                    self._cond.notify_all()

    def _write(self, snapshot: List[TaskItem]) -> None:
        try:
            self.repo.save(snapshot)
        except Exception as exc:
            self.failures += 1
            logger.warning("Failed to save %d tasks: %s", len(snapshot), exc)
            if self.on_error:
                self.on_error(exc)
            return
        self.saves += 1
        logger.debug("Saved %d tasks", len(snapshot))
        if self.on_saved:
            self.on_saved(len(snapshot))
