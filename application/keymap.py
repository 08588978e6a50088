"""Pure (mode, key) -> action resolution."""

from typing import Dict, Tuple

from application.actions import (
    CLEAR_BUFFER,
    DELETE_TASK,
    NEXT_TASK,
    NOOP,
    PREVIOUS_TASK,
    QUIT,
    RENDER,
    SUBMIT_CREATE,
    SUBMIT_EDIT,
    TICK,
    TOGGLE_TASK,
    Action,
    KeyPress,
    Mode,
    forward_key,
    switch_mode,
)
from application.events import Event, EventKind

KEY_ENTER = "c-m"
KEY_ESCAPE = "escape"
KEY_INTERRUPT = "c-c"

NORMAL_KEYS: Dict[str, Action] = {
    "j": NEXT_TASK,
    "down": NEXT_TASK,
    "k": PREVIOUS_TASK,
    "up": PREVIOUS_TASK,
    " ": TOGGLE_TASK,
    "d": DELETE_TASK,
    "e": switch_mode(Mode.EDIT),
    KEY_ENTER: switch_mode(Mode.CREATE),
    "q": QUIT,
}

SUBMIT_BY_MODE: Dict[Mode, Action] = {
    Mode.CREATE: SUBMIT_CREATE,
    Mode.EDIT: SUBMIT_EDIT,
}


def _build_table() -> Dict[Tuple[Mode, str], Action]:
    table: Dict[Tuple[Mode, str], Action] = {(Mode.NORMAL, key): action for key, action in NORMAL_KEYS.items()}
    for mode, submit in SUBMIT_BY_MODE.items():
        table[(mode, KEY_ENTER)] = submit
        table[(mode, KEY_ESCAPE)] = CLEAR_BUFFER
    for mode in Mode:
        table[(mode, KEY_INTERRUPT)] = QUIT
    return table


KEY_TABLE: Dict[Tuple[Mode, str], Action] = _build_table()


def resolve_key(mode: Mode, key: KeyPress) -> Action:
    action = KEY_TABLE.get((mode, key.key))
    if action is not None:
        return action
    if mode.accepts_text:
        return forward_key(key)
    return NOOP


def resolve_event(mode: Mode, event: Event) -> Action:
    if event.kind is EventKind.TICK:
        return TICK
    if event.kind is EventKind.RENDER:
        return RENDER
    if event.kind is EventKind.KEY and event.key is not None:
        return resolve_key(mode, event.key)
    return NOOP


__all__ = ["KEY_TABLE", "KEY_ENTER", "KEY_ESCAPE", "KEY_INTERRUPT", "resolve_key", "resolve_event"]
