"""State transitions for the checklist app."""

import logging
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from application.actions import CLEAR_BUFFER, Action, ActionKind, Mode, switch_mode
from application.navigator import ListNavigator
from application.task_store import TaskStore
from application.text_input import TextInput

logger = logging.getLogger("checklist.loop")

MAX_CHAIN_LENGTH = 16


@dataclass
class AppState:
    store: TaskStore
    navigator: ListNavigator = field(default_factory=ListNavigator)
    editor: TextInput = field(default_factory=TextInput)
    mode: Mode = Mode.NORMAL
    should_quit: bool = False
    status_message: str = ""
    status_expires: float = 0.0
    status_ttl: float = 4.0
    clock: Callable[[], float] = time.monotonic

    @property
    def selected(self) -> Optional[int]:
        return self.navigator.selected

    def set_status_message(self, message: str, ttl: Optional[float] = None) -> None:
        self.status_message = message
        self.status_expires = self.clock() + (self.status_ttl if ttl is None else ttl)

    def sync_selection(self) -> None:
        """Select the first task when tasks exist but nothing is selected yet."""
        length = len(self.store)
        self.navigator.clamp(length)
        if self.navigator.selected is None and length:
            self.navigator.select(0)


def update(state: AppState, action: Action) -> Optional[Action]:
    """Apply one action to ``state``; returns a follow-up action, if any."""
    kind = action.kind
    if kind is ActionKind.TICK:
        if state.status_message and state.clock() >= state.status_expires:
            state.status_message = ""
    elif kind is ActionKind.QUIT:
        state.should_quit = True
    elif kind is ActionKind.NEXT_TASK:
        state.navigator.next(len(state.store))
    elif kind is ActionKind.PREVIOUS_TASK:
        state.navigator.previous(len(state.store))
    elif kind is ActionKind.TOGGLE_TASK:
        _with_selected(state, state.store.toggle)
    elif kind is ActionKind.DELETE_TASK:
        _with_selected(state, state.store.delete)
        state.navigator.clamp(len(state.store))
    elif kind is ActionKind.SWITCH_MODE:
        return _switch_mode(state, action.mode or Mode.NORMAL)
    elif kind is ActionKind.CLEAR_BUFFER:
        state.editor.reset()
        if state.mode is not Mode.NORMAL:
            return switch_mode(Mode.NORMAL)
    elif kind is ActionKind.SUBMIT_CREATE:
        text = state.editor.value
        if text.strip():
            state.store.append(text)
            state.sync_selection()
        return CLEAR_BUFFER
    elif kind is ActionKind.SUBMIT_EDIT:
        text = state.editor.value
        if text.strip():
            _with_selected(state, lambda index: state.store.edit(index, text))
        return CLEAR_BUFFER
    elif kind is ActionKind.FORWARD_KEY:
        if state.mode.accepts_text and action.key is not None:
            state.editor.handle_key(action.key)
    elif kind is ActionKind.SHOW_STATUS:
        state.set_status_message(action.message)
    return None


def _switch_mode(state: AppState, target: Mode) -> Optional[Action]:
    if target is Mode.EDIT:
        index = state.selected
        if index is None or index >= len(state.store):
            return None
        state.editor.set_text(state.store.get(index).text)
    elif target is Mode.CREATE:
        state.editor.reset()
    state.mode = target
    return None


def _with_selected(state: AppState, operation: Callable[[int], object]) -> None:
    index = state.selected
    if index is None:
        return
    try:
        operation(index)
    except IndexError:
        logger.debug("Ignoring stale selection %s (len=%d)", index, len(state.store))
        state.navigator.clamp(len(state.store))


def apply_action(
    state: AppState,
    action: Action,
    on_render: Optional[Callable[[AppState], None]] = None,
) -> List[Action]:
    """Run ``action`` and every follow-up it produces before returning.

    Returns the actions in the order they were applied.
    """
    pending = deque([action])
    applied: List[Action] = []
    while pending:
        if len(applied) >= MAX_CHAIN_LENGTH:
            logger.error("Action chain exceeded %d steps, dropping %s", MAX_CHAIN_LENGTH, pending[0].kind.value)
            break
        current = pending.popleft()
        follow_up = update(state, current)
        applied.append(current)
        if current.kind is ActionKind.RENDER and on_render is not None:
            on_render(state)
        if follow_up is not None:
            pending.append(follow_up)
    return applied
