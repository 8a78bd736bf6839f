"""Stacks of integers and the named operations that move values between them."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Callable, Iterable, Iterator


class StackError(Exception):
    """Raised when an operation needs values that a stack does not hold."""


class Stack:
    """A stack of integers; iteration and construction run from the top down."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def top(self) -> int:
        """Return the value on top without removing it."""
        if not self._items:
            raise StackError("stack is empty")
        return self._items[0]

    def push(self, value: int) -> None:
        """Put a value on top."""
        self._items.appendleft(value)

    def pop(self) -> int:
        """Remove and return the value on top."""
        if not self._items:
            raise StackError("stack is empty")
        return self._items.popleft()

    def swap(self) -> None:
        """Exchange the two values on top."""
        if len(self._items) < 2:
            raise StackError("swap needs at least two values")
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)

    def rotate(self) -> None:
        """Move the top value to the bottom; a no-op with fewer than two values."""
        if len(self._items) >= 2:
            self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom value to the top; a no-op with fewer than two values."""
        if len(self._items) >= 2:
            self._items.rotate(1)

    def copy(self) -> Stack:
        """Return an independent stack holding the same values."""
        return Stack(self._items)

    def index_of(self, value: int) -> int:
        """Return the distance of value from the top, or the size if absent."""
        for position, item in enumerate(self._items):
            if item == value:
                return position
        return len(self._items)


def _print_operation(name: str) -> None:
    sys.stdout.write(name + "\n")


class Stacks:
    """The pair of stacks a and b, with every operation reported to emit."""

    def __init__(
        self,
        values: Iterable[int] = (),
        emit: Callable[[str], None] | None = None,
    ) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self._emit = emit if emit is not None else _print_operation

    def sa(self) -> None:
        self.a.swap()
        self._emit("sa")

    def sb(self) -> None:
        self.b.swap()
        self._emit("sb")

    def ss(self) -> None:
        self.a.swap()
        self.b.swap()
        self._emit("ss")

    def pa(self) -> None:
        if not self.b:
            raise StackError("pa needs a value on stack b")
        self.a.push(self.b.pop())
        self._emit("pa")

    def pb(self) -> None:
        if not self.a:
            raise StackError("pb needs a value on stack a")
        self.b.push(self.a.pop())
        self._emit("pb")

    def ra(self) -> None:
        self.a.rotate()
        self._emit("ra")

    def rb(self) -> None:
        self.b.rotate()
        self._emit("rb")

    def rr(self) -> None:
        self.a.rotate()
        self.b.rotate()
        self._emit("rr")

    def rra(self) -> None:
        self.a.reverse_rotate()
        self._emit("rra")

    def rrb(self) -> None:
        self.b.reverse_rotate()
        self._emit("rrb")

    def rrr(self) -> None:
        self.a.reverse_rotate()
        self.b.reverse_rotate()
        self._emit("rrr")


def sorted_values(stack: Stack) -> Stack:
    """Return a new stack of the same values, smallest on top."""
    return Stack(sorted(stack))