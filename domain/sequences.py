"""
Ordered meal sequences.

Streak computation only makes sense over meals read most recent first, with
meals that share a timestamp kept in insertion order. ``OrderedMeals`` marks a
sequence as already being in that canonical order so the aggregator never has
to guess (and never sorts on its own).
"""

from collections.abc import Sequence
from typing import Any, Iterable, Iterator, Tuple


class OrderedMeals(Sequence):
    """Immutable, reverse-chronological sequence of meal records.

    Instances come from ``MealRepository.list_by_owner``. Code that builds a
    sequence by other means must call ``assume_ordered`` and take
    responsibility for the ordering.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Tuple[Any, ...]):
        self._items = items

    @classmethod
    def assume_ordered(cls, records: Iterable[Any]) -> "OrderedMeals":
        """Wrap records that the caller guarantees are most-recent-first."""
        return cls(tuple(records))

    def __getitem__(self, index):
        if isinstance(index, slice):
            return OrderedMeals(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other) -> bool:
        if isinstance(other, OrderedMeals):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"OrderedMeals({len(self._items)} meals)"
