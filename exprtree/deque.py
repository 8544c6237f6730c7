"""A double-ended queue with the operations the expression pipeline needs."""

from __future__ import annotations

from collections import deque
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class Deque(Generic[T]):
    """Double-ended queue; popping from an empty deque does nothing."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items: deque[T] = deque(() if items is None else items)

    def empty(self) -> bool:
        """Return True when the deque holds no items."""
        return not self._items

    def push_front(self, item: T) -> None:
        self._items.appendleft(item)

    def push_back(self, item: T) -> None:
        self._items.append(item)

    def pop_front(self) -> Optional[T]:
        """Remove and return the first item, or return None if empty."""
        return self._items.popleft() if self._items else None

    def pop_back(self) -> Optional[T]:
        """Remove and return the last item, or return None if empty."""
        return self._items.pop() if self._items else None

    def front(self) -> T:
        if not self._items:
            raise IndexError("front of an empty deque")
        return self._items[0]

    def back(self) -> T:
        if not self._items:
            raise IndexError("back of an empty deque")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deque):
            return NotImplemented
        return list(self._items) == list(other._items)

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self._items) + "]"

    def __repr__(self) -> str:
        return f"Deque({list(self._items)!r})"