"""Closed set of actions consumed by the update function."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Mode(Enum):
    NORMAL = "normal"
    CREATE = "create"
    EDIT = "edit"

    @property
    def accepts_text(self) -> bool:
        return self is not Mode.NORMAL


class ActionKind(Enum):
    TICK = "tick"
    RENDER = "render"
    QUIT = "quit"
    NEXT_TASK = "next_task"
    PREVIOUS_TASK = "previous_task"
    TOGGLE_TASK = "toggle_task"
    DELETE_TASK = "delete_task"
    SWITCH_MODE = "switch_mode"
    CLEAR_BUFFER = "clear_buffer"
    SUBMIT_CREATE = "submit_create"
    SUBMIT_EDIT = "submit_edit"
    FORWARD_KEY = "forward_key"
    SHOW_STATUS = "show_status"
    NOOP = "noop"


@dataclass(frozen=True)
class KeyPress:
    """Terminal key as prompt_toolkit names it (``"j"``, ``"c-m"``, ``"left"``...).

    ``data`` carries the text the key produced, which differs from ``key`` for
    wildcard matches.
    """

    key: str
    data: str = ""

    @property
    def printable(self) -> bool:
        text = self.data or self.key
        return len(text) == 1 and text.isprintable()


@dataclass(frozen=True)
class Action:
    kind: ActionKind
    mode: Optional[Mode] = None
    key: Optional[KeyPress] = None
    message: str = ""


TICK = Action(ActionKind.TICK)
RENDER = Action(ActionKind.RENDER)
QUIT = Action(ActionKind.QUIT)
NEXT_TASK = Action(ActionKind.NEXT_TASK)
PREVIOUS_TASK = Action(ActionKind.PREVIOUS_TASK)
TOGGLE_TASK = Action(ActionKind.TOGGLE_TASK)
DELETE_TASK = Action(ActionKind.DELETE_TASK)
CLEAR_BUFFER = Action(ActionKind.CLEAR_BUFFER)
SUBMIT_CREATE = Action(ActionKind.SUBMIT_CREATE)
SUBMIT_EDIT = Action(ActionKind.SUBMIT_EDIT)
NOOP = Action(ActionKind.NOOP)


def switch_mode(mode: Mode) -> Action:
    return Action(ActionKind.SWITCH_MODE, mode=mode)


def forward_key(key: KeyPress) -> Action:
    return Action(ActionKind.FORWARD_KEY, key=key)


def show_status(message: str) -> Action:
    return Action(ActionKind.SHOW_STATUS, message=message)
