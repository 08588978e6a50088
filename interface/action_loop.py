import logging
from typing import Awaitable, Callable, Optional, Protocol

from application.channel import ActionChannel
from application.events import Event
from application.keymap import resolve_event
from application.update import AppState, apply_action

logger = logging.getLogger("checklist.loop")


class EventSource(Protocol):
    def next(self) -> Awaitable[Event]:
        ...


async def run_loop(
    state: AppState,
    events: EventSource,
    channel: ActionChannel,
    on_render: Optional[Callable[[AppState], None]] = None,
) -> None:
    """Consume events until a Quit action has been applied.

    Each event becomes one action on ``channel``; then everything queued there
    (including actions posted by background threads) is applied, each with its
    whole follow-up chain, before the next event is awaited.
    """
    while not state.should_quit:
        event = await events.next()
        channel.send(resolve_event(state.mode, event))
        for action in channel.drain():
            apply_action(state, action, on_render)
    logger.info("Action loop finished")
