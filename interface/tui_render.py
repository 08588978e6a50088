"""Frame builders for ChecklistTUI. Read-only over AppState."""

from typing import List, Tuple

from prompt_toolkit.formatted_text import FormattedText

from application.actions import Mode
from application.text_input import display_width
from application.update import AppState

INPUT_PROMPTS = {
    Mode.CREATE: "+ ",
    Mode.EDIT: "✎ ",
}


def render_task_list(state: AppState) -> FormattedText:
    items = state.store.items
    if not items:
        return FormattedText([("class:text.dim", "  No tasks yet. Press Enter to add one.\n")])
    selected = state.selected
    fragments: List[Tuple[str, str]] = []
    for idx, item in enumerate(items):
        is_selected = idx == selected
        if is_selected:
            style = "class:selected.done" if item.done else "class:selected"
        else:
            style = "class:text.done" if item.done else "class:text"
        marker_style = style if is_selected else ("class:status.done" if item.done else "class:status.open")
        pointer = "› " if is_selected else "  "
        fragments.append((style, pointer))
        fragments.append((marker_style, f"[{item.state.marker}] "))
        fragments.append((style, item.text))
        fragments.append(("", "\n"))
    return FormattedText(fragments)


def _split_at_column(text: str, column: int) -> Tuple[str, str]:
    col = 0
    for idx, ch in enumerate(text):
        if col >= column:
            return text[:idx], text[idx:]
        col += display_width(ch)
    return text, ""


def render_input_line(state: AppState, width: int) -> FormattedText:
    """Sub-editor line with the terminal cursor placed at the edit position."""
    prompt = INPUT_PROMPTS.get(state.mode)
    if prompt is None:
        return FormattedText([])
    editor = state.editor
    room = max(1, width - display_width(prompt))
    visible = editor.visible_text(room)
    before, after = _split_at_column(visible, editor.visual_cursor() - editor.scroll_offset)
    return FormattedText(
        [
            ("class:input.prompt", prompt),
            ("class:input", before),
            ("[SetCursorPosition]", ""),
            ("class:input", after),
        ]
    )
