#!/usr/bin/env python3
"""TUI application - ChecklistTUI class and cmd_tui command."""

import asyncio
import logging
import os
from pathlib import Path
from typing import Any, Optional

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPressEvent
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl

from application.actions import KeyPress, show_status
from application.channel import ActionChannel
from application.task_store import TaskStore
from application.update import AppState
from infrastructure.file_repository import FileTaskRepository
from infrastructure.save_worker import SaveWorker

from .action_loop import run_loop
from .event_source import EventMultiplexer
from .tui_render import render_input_line, render_task_list
from .tui_status import build_footer_text, build_status_text
from .tui_themes import DEFAULT_THEME, build_style

logger = logging.getLogger("checklist.loop")

SAVE_DRAIN_TIMEOUT = 5.0


def key_press_from_event(event: KeyPressEvent) -> KeyPress:
    press = event.key_sequence[-1]
    key = press.key.value if isinstance(press.key, Keys) else press.key
    return KeyPress(key=key, data=press.data)


class ChecklistTUI:
    """Wires the action loop to a prompt_toolkit full-screen application.

    prompt_toolkit only delivers keys and paints frames; every state change
    goes through the action loop, and frames are rebuilt only on Render.
    """

    def __init__(
        self,
        file_path: Path,
        theme: str = DEFAULT_THEME,
        tick_rate: float = 1.0,
        frame_rate: float = 30.0,
        status_ttl: float = 4.0,
        *,
        input: Any = None,
        output: Any = None,
    ):
        self.file_path = Path(file_path).expanduser()
        self.repo = FileTaskRepository(self.file_path)
        self.channel = ActionChannel()
        self.writer = SaveWorker(self.repo, on_saved=self._on_saved, on_error=self._on_save_error)
        self.store = TaskStore(self.repo, self.writer)
        self.store.load()
        self.state = AppState(store=self.store, status_ttl=status_ttl)
        self.state.sync_selection()
        self.events = EventMultiplexer(tick_rate=tick_rate, frame_rate=frame_rate)

        self._list_frame = FormattedText([])
        self._status_frame = FormattedText([])
        self._input_frame = FormattedText([])
        self._footer_frame = FormattedText([])

        kb = KeyBindings()

        @kb.add("escape", eager=True)
        def _(event):
            """Esc must not wait for a possible escape sequence."""
            self.events.push_key(key_press_from_event(event))

        @kb.add(Keys.Any)
        def _(event):
            self.events.push_key(key_press_from_event(event))

        @kb.add(Keys.BracketedPaste)
        def _(event):
            self.events.push_key(key_press_from_event(event))

        root = HSplit(
            [
                Window(content=FormattedTextControl(lambda: self._status_frame), height=1, always_hide_cursor=True),
                Window(height=1, char="─", style="class:border"),
                Window(content=FormattedTextControl(lambda: self._list_frame), always_hide_cursor=True, wrap_lines=False),
                Window(content=FormattedTextControl(lambda: self._input_frame, show_cursor=True), height=1),
                Window(content=FormattedTextControl(lambda: self._footer_frame), height=1, always_hide_cursor=True),
            ]
        )

        self.app: Application = Application(
            layout=Layout(root),
            key_bindings=kb,
            style=build_style(theme),
            full_screen=True,
            input=input,
            output=output,
        )
        # Allow override for slow terminals/SSH sessions.
        try:
            self.app.ttimeoutlen = max(0.0, float(os.getenv("CHECKLIST_TUI_TTIMEOUTLEN", "0.05")))
        except ValueError:
            self.app.ttimeoutlen = 0.05
        self.render(self.state)

    def input_width(self) -> int:
        """Columns available to the input line on the application's own output."""
        return max(1, self.app.output.get_size().columns)

    def render(self, state: AppState) -> None:
        self._status_frame = build_status_text(state, self.file_path.name)
        self._list_frame = render_task_list(state)
        self._input_frame = render_input_line(state, self.input_width())
        self._footer_frame = build_footer_text(state)
        self.app.invalidate()

    def _on_saved(self, count: int) -> None:
        self.channel.send(show_status(f"Saved {count} tasks"))

    def _on_save_error(self, exc: Exception) -> None:
        self.channel.send(show_status(f"Save failed: {exc}"))

    async def _drive(self) -> None:
        self.events.start()
        try:
            await run_loop(self.state, self.events, self.channel, self.render)
        except Exception as exc:
            logger.exception("Action loop failed")
            self.app.exit(exception=exc)
            return
        finally:
            await self.events.stop()
        self.app.exit()

    def _start_loop(self) -> None:
        self.app.create_background_task(self._drive())

    async def run_async(self) -> None:
        self.writer.start()
        try:
            await self.app.run_async(pre_run=self._start_loop)
        finally:
            await self.events.stop()
            if not self.writer.close(SAVE_DRAIN_TIMEOUT):
                logger.error("Last changes to %s may not have been written", self.file_path)
            self.channel.close()

    def run(self) -> None:
        asyncio.run(self.run_async())


def cmd_tui(args) -> int:
    tui = ChecklistTUI(
        Path(args.file),
        theme=args.theme,
        tick_rate=args.tick_rate,
        frame_rate=args.frame_rate,
        status_ttl=args.status_ttl,
    )
    tui.run()
    return 0
