"""Selection tracking over a list whose length is owned elsewhere."""

from typing import Optional


class ListNavigator:
    """Holds only an index; callers pass the current list length on every call."""

    def __init__(self, selected: Optional[int] = None):
        self.selected: Optional[int] = selected

    def select(self, index: Optional[int]) -> None:
        self.selected = index

    def next(self, length: int) -> None:
        if length <= 0:
            self.selected = None
            return
        if self.selected is None or self.selected >= length - 1:
            self.selected = 0
        else:
            self.selected += 1

    def previous(self, length: int) -> None:
        if length <= 0:
            self.selected = None
            return
        if self.selected is None or self.selected == 0 or self.selected >= length:
            self.selected = length - 1
        else:
            self.selected -= 1

    def clamp(self, length: int) -> None:
        """Re-establish ``selected is None or 0 <= selected < length`` after a resize."""
        if length <= 0:
            self.selected = None
        elif self.selected is not None:
            self.selected = max(0, min(self.selected, length - 1))


__all__ = ["ListNavigator"]
