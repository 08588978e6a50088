"""Status bar and key hints for ChecklistTUI."""

from prompt_toolkit.formatted_text import FormattedText

from application.actions import Mode
from application.update import AppState

MODE_LABELS = {
    Mode.NORMAL: " NORMAL ",
    Mode.CREATE: " NEW ",
    Mode.EDIT: " EDIT ",
}

HINTS = {
    Mode.NORMAL: "j/k move · space toggle · enter new · e edit · d delete · q quit",
    Mode.CREATE: "enter add · esc cancel",
    Mode.EDIT: "enter save · esc cancel",
}


def build_status_text(state: AppState, title: str = "") -> FormattedText:
    items = state.store.items
    done = sum(1 for item in items if item.done)
    fragments = [
        ("class:mode", MODE_LABELS[state.mode]),
        ("class:border", " "),
        ("class:header", title),
        ("class:text.dim", f"  {done}/{len(items)} done"),
    ]
    if state.status_message:
        fragments.append(("class:border", "  · "))
        fragments.append(("class:message", state.status_message))
    return FormattedText(fragments)


def build_footer_text(state: AppState) -> FormattedText:
    return FormattedText([("class:text.dim", HINTS[state.mode])])
