"""Selected item ids."""

from typing import Iterator

from .models import ItemId


def _sort_key(item_id: ItemId) -> tuple[int, ItemId]:
    # numbers sort before strings so mixed id types still compare
    if isinstance(item_id, str):
        return (1, item_id)
    return (0, item_id)


class SelectionSet:
    """
    Mutable set of selected item ids.

    Ids are not checked against the catalog, so a selection survives a
    catalog refresh that drops or renames items.
    """

    def __init__(self) -> None:
        self._ids: set[ItemId] = set()

    def toggle(self, item_id: ItemId) -> bool:
        """Add the id if absent, remove it if present. Returns True if now selected."""
        if item_id in self._ids:
            self._ids.remove(item_id)
            return False
        self._ids.add(item_id)
        return True

    def snapshot(self) -> list[ItemId]:
        """Selected ids in ascending order."""
        return sorted(self._ids, key=_sort_key)

    @property
    def is_empty(self) -> bool:
        return not self._ids

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[ItemId]:
        return iter(self.snapshot())
