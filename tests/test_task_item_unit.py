from core import DONE_MARKER, TaskItem, TaskState


def test_new_task_is_open():
    assert TaskItem("a").state is TaskState.OPEN


def test_toggle_pair_restores_state():
    item = TaskItem("a")
    item.toggle_state()
    assert item.done
    item.toggle_state()
    assert item.state is TaskState.OPEN


def test_markers():
    assert TaskState.DONE.marker == DONE_MARKER == "x"
    assert TaskState.OPEN.marker == " "
    assert TaskState.from_marker("x") is TaskState.DONE
    assert TaskState.from_marker("X") is TaskState.OPEN


def test_copy_is_independent():
    item = TaskItem("a")
    clone = item.copy()
    clone.toggle_state()
    assert item.state is TaskState.OPEN
    assert clone == TaskItem("a", TaskState.DONE)
