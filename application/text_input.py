"""Single-line text buffer used while creating or editing a task."""

from typing import Callable, Dict

from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document
from wcwidth import wcswidth

from application.actions import KeyPress

PASTE_KEY = "<bracketed-paste>"


def display_width(text: str) -> int:
    width = wcswidth(text)
    # wcswidth reports -1 for control characters
    return width if width >= 0 else len(text)


class TextInput:
    """Wraps a prompt_toolkit ``Buffer`` and adds a horizontal scroll window."""

    def __init__(self, value: str = ""):
        self.buffer = Buffer(multiline=False)
        self.scroll_offset = 0
        self.set_text(value)
        self._handlers: Dict[str, Callable[[], None]] = {
            "c-h": self.delete_prev_char,
            "backspace": self.delete_prev_char,
            "delete": self.delete_next_char,
            "left": self.move_left,
            "right": self.move_right,
            "home": self.move_home,
            "c-a": self.move_home,
            "end": self.move_end,
            "c-e": self.move_end,
            "c-u": self.delete_to_start,
            "c-k": self.delete_to_end,
            "c-w": self.delete_prev_word,
        }

    @property
    def value(self) -> str:
        return self.buffer.text

    @property
    def cursor(self) -> int:
        return self.buffer.cursor_position

    @property
    def document(self) -> Document:
        return self.buffer.document

    def reset(self) -> None:
        self.set_text("")

    def set_text(self, value: str) -> None:
        self.buffer.set_document(Document(value, len(value)), bypass_readonly=True)
        self.scroll_offset = 0

    def handle_key(self, key: KeyPress) -> bool:
        """Apply one key; returns False when the key means nothing to the editor."""
        handler = self._handlers.get(key.key)
        if handler is not None:
            handler()
            return True
        if key.key == PASTE_KEY:
            # single-line buffer: pasted newlines become spaces
            self.insert(" ".join(key.data.splitlines()))
            return True
        if key.printable:
            self.insert(key.data or key.key)
            return True
        return False

    def insert(self, text: str) -> None:
        self.buffer.insert_text(text)

    def delete_prev_char(self) -> None:
        self.buffer.delete_before_cursor(1)

    def delete_next_char(self) -> None:
        self.buffer.delete(1)

    def delete_to_start(self) -> None:
        self.buffer.delete_before_cursor(len(self.document.current_line_before_cursor))

    def delete_to_end(self) -> None:
        self.buffer.delete(len(self.document.current_line_after_cursor))

    def delete_prev_word(self) -> None:
        pos = self.document.find_start_of_previous_word(WORD=True)
        if pos is None:
            # only whitespace before the cursor
            pos = -self.cursor
        self.buffer.delete_before_cursor(-pos)

    def move_left(self) -> None:
        self.buffer.cursor_position += self.document.get_cursor_left_position()

    def move_right(self) -> None:
        self.buffer.cursor_position += self.document.get_cursor_right_position()

    def move_home(self) -> None:
        self.buffer.cursor_position += self.document.get_start_of_line_position()

    def move_end(self) -> None:
        self.buffer.cursor_position += self.document.get_end_of_line_position()

    def visual_cursor(self) -> int:
        return display_width(self.value[: self.cursor])

    def visual_scroll(self, width: int) -> int:
        """Shift ``scroll_offset`` just enough to keep the cursor in ``width`` columns."""
        width = max(1, width)
        cursor = self.visual_cursor()
        if cursor < self.scroll_offset:
            self.scroll_offset = cursor
        elif cursor >= self.scroll_offset + width:
            self.scroll_offset = cursor - width + 1
        return self.scroll_offset

    def visible_text(self, width: int) -> str:
        """Slice of ``value`` that fits in the window starting at ``scroll_offset``."""
        offset = self.visual_scroll(width)
        out = []
        col = 0
        for ch in self.value:
            w = display_width(ch)
            if col >= offset and col + w <= offset + width:
                out.append(ch)
            col += w
        return "".join(out)
