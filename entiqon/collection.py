"""An ordered container with chainable mutators and functional helpers.

Example::

    nums = Collection([1, 2, 3]).remove(2)
    nums.items()                         # [1, 3]
    nums.filter(lambda x: x % 2 == 0)    # empty collection
    nums.map(lambda x: x * x).items()    # [1, 9]
"""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class Collection(Generic[T]):
    """An ordered collection of values; mutators return the collection itself."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items: List[T] = list(items) if items is not None else []

    def __repr__(self) -> str:
        return f"Collection({self._items!r})"

    def add(self, *args: T) -> "Collection[T]":
        """Append values to the end."""
        self._items.extend(args)
        return self

    def at(self, idx: int, default: Optional[T] = None) -> Optional[T]:
        """Return the element at idx, or default when idx is out of range.

        Negative indices are out of range.
        """
        if 0 <= idx < len(self._items):
            return self._items[idx]
        return default

    def clear(self) -> None:
        """Remove all elements."""
        self._items = []

    def clone(self) -> "Collection[T]":
        """Return an independent copy."""
        return Collection(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def contains(self, value: T) -> bool:
        """Report whether value is present."""
        return value in self

    def filter(self, fn: Callable[[T], bool]) -> "Collection[T]":
        """Return a new collection of the elements for which fn is true."""
        return Collection(item for item in self._items if fn(item))

    def for_each(self, fn: Callable[[T], object]) -> None:
        """Call fn on each element in order."""
        for item in list(self._items):
            fn(item)

    def index_of(self, value: T) -> int:
        """Index of the first occurrence of value, or -1."""
        try:
            return self._items.index(value)
        except ValueError:
            return -1

    def insert_at(self, idx: int, *args: T) -> "Collection[T]":
        """Insert values at idx, clamped to the start or end of the collection."""
        idx = max(0, min(idx, len(self._items)))
        self._items[idx:idx] = args
        return self

    def items(self) -> List[T]:
        """Return a copy of the elements as a list."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def map(self, fn: Callable[[T], R]) -> "Collection[R]":
        """Return a new collection of fn applied to each element."""
        return Collection(fn(item) for item in self._items)

    def remove(self, value: T) -> "Collection[T]":
        """Remove every occurrence of value."""
        self._items = [item for item in self._items if item != value]
        return self

    def remove_at(self, idx: int) -> "Collection[T]":
        """Remove the element at idx; out-of-range indices are ignored."""
        if 0 <= idx < len(self._items):
            del self._items[idx]
        return self