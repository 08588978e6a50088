import queue
from typing import Iterator

from application.actions import Action


class ChannelClosedError(RuntimeError):
    """Raised when sending on a channel whose loop has shut down."""


class ActionChannel:
    """Unbounded thread-safe action inbox.

    The loop is the only consumer; background threads may send.
    """

    def __init__(self):
        self._queue: "queue.SimpleQueue[Action]" = queue.SimpleQueue()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, action: Action) -> None:
        if self._closed:
            raise ChannelClosedError(f"action channel closed, dropped {action.kind.value}")
        self._queue.put(action)

    def drain(self) -> Iterator[Action]:
        """Yield queued actions without blocking, including ones sent while draining."""
        while True:
            try:
                yield self._queue.get_nowait()
            except queue.Empty:
                return

    def close(self) -> None:
        self._closed = True
