"""
Module: editor.selection

Purpose:
    Ordered set of selected element ids. Order is selection order, which
    callers use to decide e.g. which element a properties panel shows.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Tuple


class SelectionSet:
    """
    Ordered set of selected element ids.

    Example:
        >>> sel = SelectionSet()
        >>> sel.select("a"); sel.select("b", additive=True)
        >>> sel.ids
        ('a', 'b')
        >>> sel.select("a", additive=True)  # toggles off
        >>> sel.ids
        ('b',)
    """

    def __init__(self, ids: Iterable[str] = ()) -> None:
        self._ids: dict[str, None] = dict.fromkeys(ids)

    @property
    def ids(self) -> Tuple[str, ...]:
        return tuple(self._ids)

    @property
    def primary(self) -> str | None:
        """Most recently selected id, if any."""
        return next(reversed(self._ids), None) if self._ids else None

    def __contains__(self, element_id: object) -> bool:
        return element_id in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._ids))

    def __len__(self) -> int:
        return len(self._ids)

    def select(self, element_id: str, *, additive: bool = False) -> None:
        """Select one id; with ``additive`` toggle it within the current set."""
        if not additive:
            self._ids = {element_id: None}
        elif element_id in self._ids:
            del self._ids[element_id]
        else:
            self._ids[element_id] = None

    def replace(self, ids: Iterable[str]) -> None:
        self._ids = dict.fromkeys(ids)

    def discard(self, ids: Iterable[str]) -> None:
        for element_id in ids:
            self._ids.pop(element_id, None)

    def retain(self, valid_ids: Iterable[str]) -> None:
        """Drop ids that are no longer in the live collection."""
        valid = set(valid_ids)
        self._ids = {i: None for i in self._ids if i in valid}

    def clear(self) -> None:
        self._ids = {}
