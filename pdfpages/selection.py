"""Page selection state for the page grid."""
from typing import List, Optional, Set


class SelectionModel:
    """
    Tracks which page indices are marked.

    Plain clicks toggle a single page. Shift-clicks add every page between
    the last toggled page and the clicked one; range gestures only ever add,
    so a non-contiguous set can be built up from several ranges.
    """

    def __init__(self, total_pages: int = 0):
        self.total_pages = total_pages
        self.indices: Set[int] = set()
        self.last_index: Optional[int] = None

    def __contains__(self, index):
        return index in self.indices

    def __len__(self):
        return len(self.indices)

    def _check(self, index):
        if not 0 <= index < self.total_pages:
            raise IndexError(f"Page index {index} out of range (0-{self.total_pages - 1})")

    def toggle(self, index: int):
        """Add the page if absent, remove it if present"""
        self._check(index)
        if index in self.indices:
            self.indices.remove(index)
        else:
            self.indices.add(index)
        self.last_index = index

    def extend_range(self, index: int, is_range_modifier: bool):
        """Handle a click, extending from the last toggled page when the modifier is held"""
        if not is_range_modifier or self.last_index is None:
            self.toggle(index)
            return

        self._check(index)
        start = min(self.last_index, index)
        end = max(self.last_index, index)
        self.indices.update(range(start, end + 1))

    def clear(self):
        """Deselect everything; the last toggled page is kept"""
        self.indices.clear()

    def reset(self, total_pages: int = 0):
        """Start over for a newly loaded document"""
        self.total_pages = total_pages
        self.indices.clear()
        self.last_index = None

    def selected(self) -> List[int]:
        return sorted(self.indices)
