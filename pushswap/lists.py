"""A singly linked sequence of arbitrary contents with front and back insertion."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional

Deleter = Optional[Callable[[Any], None]]


class LinkedList:
    """An ordered collection of contents, first element at the front."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"LinkedList({list(self._items)!r})"

    def add_front(self, content: Any) -> None:
        """Insert content before the first element."""
        self._items.appendleft(content)

    def add_back(self, content: Any) -> None:
        """Append content after the last element."""
        self._items.append(content)

    def last(self) -> Any:
        """Return the content of the last element."""
        if not self._items:
            raise IndexError("last of an empty list")
        return self._items[-1]

    def remove_first(self, delete: Deleter = None) -> Any:
        """Remove the first element, hand its content to delete, and return it."""
        if not self._items:
            raise IndexError("remove_first on an empty list")
        content = self._items.popleft()
        if delete is not None:
            delete(content)
        return content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every element from the front, handing each content to delete."""
        while self._items:
            content = self._items.popleft()
            if delete is not None:
                delete(content)

    def apply(self, func: Callable[[Any], Any]) -> None:
        """Call func on every content, front to back."""
        for content in self._items:
            func(content)

    def map(
        self, func: Callable[[Any], Any], delete: Callable[[Any], None]
    ) -> LinkedList:
        """Return a new list of func applied to every content.

        If func fails part way, the contents made so far are handed to delete
        before the error propagates.
        """
        if func is None or delete is None:
            raise TypeError("map needs both a function and a deleter")
        result = LinkedList()
        try:
            for content in self._items:
                result.add_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result