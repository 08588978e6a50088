import pytest

from application.navigator import ListNavigator


@pytest.mark.parametrize("length", [1, 2, 5])
@pytest.mark.parametrize("move", ["next", "previous"])
def test_n_moves_return_to_start(length, move):
    for start in range(length):
        nav = ListNavigator(start)
        for _ in range(length):
            getattr(nav, move)(length)
        assert nav.selected == start


def test_next_without_selection_selects_first():
    nav = ListNavigator()
    nav.next(3)
    assert nav.selected == 0


def test_previous_without_selection_selects_last():
    nav = ListNavigator()
    nav.previous(3)
    assert nav.selected == 2


def test_previous_wraps_from_first_to_last():
    nav = ListNavigator(0)
    nav.previous(3)
    assert nav.selected == 2


def test_next_wraps_from_last_to_first():
    nav = ListNavigator(2)
    nav.next(3)
    assert nav.selected == 0


def test_empty_list_keeps_no_selection():
    nav = ListNavigator()
    nav.next(0)
    assert nav.selected is None
    nav.previous(0)
    assert nav.selected is None


def test_empty_list_drops_stale_selection():
    nav = ListNavigator(3)
    nav.next(0)
    assert nav.selected is None


def test_stale_selection_is_recovered():
    nav = ListNavigator(7)
    nav.previous(3)
    assert nav.selected == 2
    nav = ListNavigator(7)
    nav.next(3)
    assert nav.selected == 0


@pytest.mark.parametrize(
    "selected,length,expected",
    [(None, 3, None), (0, 3, 0), (5, 3, 2), (2, 0, None), (-1, 2, 0)],
)
def test_clamp(selected, length, expected):
    nav = ListNavigator(selected)
    nav.clamp(length)
    assert nav.selected == expected
