"""Merges tick, render and keyboard producers into one ordered event stream."""

import asyncio
from typing import List, Optional

from application.actions import KeyPress
from application.events import RENDER_EVENT, TICK_EVENT, Event


class EventMultiplexer:
    """Events come out in arrival order; no source has priority over another."""

    def __init__(self, tick_rate: float = 1.0, frame_rate: float = 30.0):
        self.tick_interval = 1.0 / tick_rate
        self.render_interval = 1.0 / frame_rate
        self._queue: Optional["asyncio.Queue[Event]"] = None
        self._producers: List["asyncio.Task[None]"] = []

    @property
    def queue(self) -> "asyncio.Queue[Event]":
        if self._queue is None:
            self._queue = asyncio.Queue()
        return self._queue

    @property
    def running(self) -> bool:
        return any(not task.done() for task in self._producers)

    def start(self) -> None:
        if self.running:
            return
        self._producers = [
            asyncio.create_task(self._periodic(TICK_EVENT, self.tick_interval), name="checklist-tick"),
            asyncio.create_task(self._periodic(RENDER_EVENT, self.render_interval), name="checklist-render"),
        ]

    async def stop(self) -> None:
        producers, self._producers = self._producers, []
        for task in producers:
            task.cancel()
        await asyncio.gather(*producers, return_exceptions=True)

    def push(self, event: Event) -> None:
        self.queue.put_nowait(event)

    def push_key(self, key: KeyPress) -> None:
        self.push(Event.for_key(key))

    async def next(self) -> Event:
        return await self.queue.get()

    async def _periodic(self, event: Event, interval: float) -> None:
        while True:
            await asyncio.sleep(interval)
            self.push(event)
