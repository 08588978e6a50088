from core import TaskItem, TaskState
from infrastructure.file_repository import FileTaskRepository


def test_load_missing_file_returns_empty(tmp_path):
    repo = FileTaskRepository(tmp_path / "todo.md")
    assert repo.load() == []
    assert not (tmp_path / "todo.md").exists()


def test_save_overwrites_whole_file(tmp_path):
    path = tmp_path / "todo.md"
    path.write_text("- [ ] one\n- [ ] two\n- [ ] three\n", encoding="utf-8")
    repo = FileTaskRepository(path)

    repo.save([TaskItem("only", TaskState.DONE)])

    assert path.read_text(encoding="utf-8") == "- [x] only\n"


def test_save_creates_parent_dirs(tmp_path):
    repo = FileTaskRepository(tmp_path / "nested" / "dir" / "todo.md")
    repo.save([TaskItem("a")])
    assert repo.load() == [TaskItem("a", TaskState.OPEN)]


def test_round_trip_keeps_non_newline_separators(tmp_path):
    tasks = [
        TaskItem("page\x0cbreak"),
        TaskItem("a b", TaskState.DONE),
        TaskItem("nel\x85x"),
        TaskItem("para\u2028graph"),
    ]
    repo = FileTaskRepository(tmp_path / "todo.md")

    repo.save(tasks)

    assert repo.load() == tasks


def test_load_accepts_crlf_line_endings(tmp_path):
    path = tmp_path / "todo.md"
    path.write_bytes(b"- [x] one\r\n- [ ] two\r\n")
    assert FileTaskRepository(path).load() == [
        TaskItem("one", TaskState.DONE),
        TaskItem("two", TaskState.OPEN),
    ]
