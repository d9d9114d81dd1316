"""
Row selection of one dashboard list.

A selection moves between three states: ``idle`` (nothing selected),
``selecting`` (at least one row picked) and ``deleting`` (a bulk delete of
the picked rows is in flight). Changes are ignored while deleting.
"""
from typing import FrozenSet, Iterable, Optional

IDLE = 'idle'
SELECTING = 'selecting'
DELETING = 'deleting'


class ListSelection:

    def __init__(self):
        self._selected = set()
        self._deleting = False

    @property
    def state(self) -> str:
        if self._deleting:
            return DELETING
        return SELECTING if self._selected else IDLE

    @property
    def selected(self) -> FrozenSet[int]:
        return frozenset(self._selected)

    def __contains__(self, record_id) -> bool:
        return record_id in self._selected

    def __len__(self) -> int:
        return len(self._selected)

    def toggle(self, record_id: int, checked: Optional[bool] = None) -> bool:
        """
        Check or uncheck one row; ``checked=None`` flips it.

        Returns whether the row is selected afterwards.
        """
        if self._deleting:
            return record_id in self._selected
        if checked is None:
            checked = record_id not in self._selected
        if checked:
            self._selected.add(record_id)
        else:
            self._selected.discard(record_id)
        return checked

    def toggle_all(self, checked: bool, loaded_ids: Iterable[int]) -> None:
        """Select or clear every currently loaded row."""
        if self._deleting:
            return
        self._selected = set(loaded_ids) if checked else set()

    def begin_delete(self) -> FrozenSet[int]:
        if self._deleting:
            raise RuntimeError("A bulk delete is already running for this list")
        if not self._selected:
            raise RuntimeError("Nothing is selected")
        self._deleting = True
        return self.selected

    def finish_delete(self, ok: bool) -> None:
        # a failed delete keeps the rows selected for a manual retry
        self._deleting = False
        if ok:
            self._selected.clear()

    def reset(self) -> None:
        self._deleting = False
        self._selected.clear()
