"""The push_swap sorting strategy: small fixed cases and chunked sorting."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.stack import Stack, Stacks, StackError, sorted_values


def is_sorted(stack: Iterable[int]) -> bool:
    """Return True when values never decrease from the top down."""
    values = list(stack)
    return all(upper <= lower for upper, lower in zip(values, values[1:]))


def smallest(stack: Iterable[int]) -> int:
    """Return the smallest value of a non-empty stack."""
    values = list(stack)
    if not values:
        raise StackError("stack is empty")
    return min(values)


def biggest(stack: Iterable[int]) -> int:
    """Return the biggest value of a non-empty stack."""
    values = list(stack)
    if not values:
        raise StackError("stack is empty")
    return max(values)


def sort_two(stacks: Stacks) -> None:
    """Put the two values of stack a in order."""
    first, second = list(stacks.a)[:2]
    if first > second:
        stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Put the three values of stack a in order with at most two operations."""
    if is_sorted(stacks.a):
        return
    first, second, third = list(stacks.a)[:3]
    if first < second and second > third and third > first:
        stacks.sa()
        stacks.ra()
    elif first > second and second < third and third < first:
        stacks.ra()
    elif first < second and second > third and third < first:
        stacks.rra()
    elif first > second and second > third and third < first:
        stacks.sa()
        stacks.rra()
    elif first > second and second < third and third > first:
        stacks.sa()


def search_in_a(stacks: Stacks, value: int) -> None:
    """Pass once over stack a, pushing to b every value up to value.

    Stops early once three values remain, which are then sorted in place.
    """
    for _ in range(len(stacks.a)):
        if len(stacks.a) <= 3:
            break
        if stacks.a.top() <= value:
            stacks.pb()
        else:
            stacks.ra()
    if len(stacks.a) == 3:
        sort_three(stacks)


def move_a_to_b(
    stacks: Stacks, ordered: Iterable[int], chunk_index: int, chunk_size: int
) -> None:
    """Push the values of one chunk, given by its upper bound in ordered, to b."""
    values = list(ordered)
    target = (chunk_index + 1) * chunk_size - 1
    if 0 <= target < len(values):
        limit = values[target]
    else:
        limit = biggest(values)
    search_in_a(stacks, limit)


def move_b_to_a(stacks: Stacks) -> None:
    """Bring every value back from b to a, biggest first, rotating b the short way."""
    while stacks.b:
        largest = biggest(stacks.b)
        while stacks.b.top() != largest:
            if stacks.b.index_of(largest) <= len(stacks.b) // 2:
                stacks.rb()
            else:
                stacks.rrb()
        stacks.pa()


def sort_more(stacks: Stacks) -> None:
    """Sort stack a by moving it to b in value chunks and back by maximum."""
    ordered: Stack = sorted_values(stacks.a)
    size = len(stacks.a)
    chunk_count = 8 if size > 100 else 4
    chunk_size = -(-size // chunk_count)
    for chunk_index in range(chunk_count):
        move_a_to_b(stacks, ordered, chunk_index, chunk_size)
    move_b_to_a(stacks)


def sort_a(stacks: Stacks) -> None:
    """Sort stack a, choosing the strategy by its size."""
    if is_sorted(stacks.a):
        return
    size = len(stacks.a)
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size > 3:
        sort_more(stacks)