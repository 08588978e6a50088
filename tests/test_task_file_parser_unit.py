#!/usr/bin/env python3
"""Unit tests for the checklist line codec."""

import pytest

from core import TaskItem, TaskState
from infrastructure.task_file_parser import TaskFileParser


class TestDecode:
    def test_decodes_open_and_done_lines(self):
        items = TaskFileParser.decode("- [ ] buy milk\n- [x] call mom\n".splitlines())
        assert items == [
            TaskItem("buy milk", TaskState.OPEN),
            TaskItem("call mom", TaskState.DONE),
        ]

    def test_line_without_separator_is_skipped(self):
        assert TaskFileParser.decode(["garbage"]) == []

    def test_short_lines_are_skipped(self):
        assert TaskFileParser.decode(["", "-", "- [", "- [x"]) == []

    def test_bad_lines_do_not_drop_good_ones(self):
        items = TaskFileParser.decode(["- [x] one", "nonsense", "", "- [ ] two"])
        assert [i.text for i in items] == ["one", "two"]

    @pytest.mark.parametrize("marker", [" ", "X", "-", "v"])
    def test_only_lowercase_x_means_done(self, marker):
        item = TaskFileParser.parse_line(f"- [{marker}] task")
        assert item is not None
        assert item.state is TaskState.OPEN

    def test_text_keeps_everything_after_first_separator(self):
        item = TaskFileParser.parse_line("- [ ] see [ref] here")
        assert item == TaskItem("see [ref] here", TaskState.OPEN)

    def test_empty_text_after_separator(self):
        assert TaskFileParser.parse_line("- [ ] ") == TaskItem("", TaskState.OPEN)

    def test_missing_trailing_space_is_skipped(self):
        assert TaskFileParser.parse_line("- [x]") is None

    def test_strips_line_endings(self):
        assert TaskFileParser.parse_line("- [x] done\r\n") == TaskItem("done", TaskState.DONE)


class TestEncode:
    def test_encode_lines(self):
        tasks = [TaskItem("a", TaskState.OPEN), TaskItem("b", TaskState.DONE)]
        assert TaskFileParser.encode(tasks) == ["- [ ] a", "- [x] b"]

    def test_file_content_has_trailing_newline(self):
        tasks = [TaskItem("a"), TaskItem("b", TaskState.DONE)]
        assert TaskFileParser.to_file_content(tasks) == "- [ ] a\n- [x] b\n"

    def test_empty_list_is_empty_file(self):
        assert TaskFileParser.to_file_content([]) == ""

    def test_round_trip(self):
        tasks = [
            TaskItem("write report", TaskState.DONE),
            TaskItem("  indented  ", TaskState.OPEN),
            TaskItem("unicode ✓ задача", TaskState.OPEN),
            TaskItem("", TaskState.DONE),
        ]
        assert TaskFileParser.decode(TaskFileParser.encode(tasks)) == tasks


class TestParseFile:
    def test_missing_file_is_empty_list(self, tmp_path):
        assert TaskFileParser.parse(tmp_path / "nope.md") == []

    def test_parse_file(self, tmp_path):
        path = tmp_path / "todo.md"
        path.write_text("- [ ] buy milk\n- [x] call mom\n", encoding="utf-8")
        assert [(t.text, t.done) for t in TaskFileParser.parse(path)] == [("buy milk", False), ("call mom", True)]
