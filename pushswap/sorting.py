"""The sorting strategy: a few fixed moves for small stacks, and for larger
ones a split into ``b`` followed by inserting back the cheapest element at
each step.
"""

from __future__ import annotations

from collections.abc import Sequence

from .stacks import (
    Operation,
    Stacks,
    diff_num,
    find_biggest,
    find_smallest,
    node_position,
)


def median_index(stack: Sequence[int]) -> int:
    """Return the 1-based middle position of a stack (upper middle if odd)."""
    length = len(stack)
    return length // 2 if length % 2 == 0 else length // 2 + 1


def is_smallest(i: int, j: int) -> int:
    """Return the smaller of two move counts, or 0 if either is 0."""
    if i == 0 or j == 0:
        return 0
    return min(i, j)


def is_sorted(stack: Sequence[int]) -> bool:
    """Tell whether the stack is in ascending order from the top."""
    return list(stack) == sorted(stack)


def sorted_values(stack: Sequence[int]) -> list[int]:
    """Return the values of the stack in ascending order."""
    return sorted(stack)


def median_value(stack: Sequence[int]) -> int:
    """Return the value at :func:`median_index` of the sorted values.

    When that index falls past the last value the result is 0.
    """
    values = sorted_values(stack)
    mid = median_index(values)
    return values[mid] if mid < len(values) else 0


def _repeat(stacks: Stacks, operation: Operation, count: int) -> None:
    for _ in range(count):
        stacks.apply(operation)


def fill_stack_b(stacks: Stacks) -> None:
    """Push up to two values to ``b`` while leaving at least three in ``a``."""
    _repeat(stacks, Operation.PB, min(2, max(0, len(stacks.a) - 3)))


def two_element_order(stacks: Stacks) -> None:
    """Order the two top values of ``a``."""
    if stacks.a[0] > stacks.a[1]:
        stacks.apply(Operation.SA)


def three_element_order(stacks: Stacks) -> None:
    """Sort a stack ``a`` of exactly three values in at most two moves."""
    first, second, third = stacks.a[0], stacks.a[1], stacks.a[2]
    if first > second and first > third:
        stacks.apply(Operation.RA)
    elif first > second and second > third:
        stacks.apply(Operation.RRA)
    elif first < second and second > third:
        stacks.apply(Operation.RRA)
    if stacks.a[0] > stacks.a[1]:
        stacks.apply(Operation.SA)


def sort_small(stacks: Stacks) -> None:
    """Sort up to three values; with more, first move two of them to ``b``."""
    count = len(stacks.a)
    if count == 1:
        return
    if count == 2:
        two_element_order(stacks)
    elif count == 3:
        three_element_order(stacks)
    elif count > 3:
        fill_stack_b(stacks)
    count = len(stacks.a)
    if count == 2:
        two_element_order(stacks)
    elif count == 3:
        three_element_order(stacks)


def move_to_b(stacks: Stacks) -> None:
    """Push the top of ``a`` to ``b``, rotating it down if above ``b``'s median."""
    median = median_value(stacks.b)
    stacks.apply(Operation.PB)
    if stacks.b[0] > median:
        stacks.apply(Operation.RB)


def move_top_distance(value: int, stack: Sequence[int]) -> int:
    """Return how many rotations, either way, bring ``value`` to the top."""
    if stack[0] == value:
        return 0
    if len(stack) > 1 and stack[1] == value:
        return 1
    position = node_position(list(stack), value)
    if position <= median_index(stack):
        return position - 1
    return len(stack) - position + 1


def rotation_cost(value: int, stack: Sequence[int]) -> int:
    """Return the signed rotations bringing ``value`` to the top.

    Positive counts are forward rotations, negative ones reverse rotations.
    """
    position = node_position(list(stack), value)
    if position == 1:
        return 0
    if position <= median_index(stack):
        return position - 1
    return -max(len(stack) - position + 1, 0)


def move_cost(target: int, element: int, stacks: Stacks) -> int:
    """Estimate the moves needed to bring ``element`` and ``target`` on top."""
    move_a = move_top_distance(element, stacks.b)
    move_b = move_top_distance(target, stacks.a)
    smallest = is_smallest(move_a, move_b)
    if (move_a < 0 and move_b < 0) or (move_a >= 0 and move_b >= 0):
        return move_a + move_b - smallest
    return move_a + move_b


def target_in_a(stack: Sequence[int], value: int) -> int:
    """Return the value of ``a`` that ``value`` should be placed above."""
    biggest = find_biggest(list(stack))
    if value > biggest:
        return find_smallest(list(stack))
    target = stack[0]
    diff = biggest
    for current in stack:
        if value < current and diff > diff_num(value, current):
            target = current
            diff = diff_num(value, current)
    return target


def find_cheapest(stacks: Stacks) -> int:
    """Return the first value of ``b`` whose insertion into ``a`` costs least."""
    return min(
        stacks.b,
        key=lambda value: move_cost(target_in_a(stacks.a, value), value, stacks),
    )


def move_both_down(move_a: int, move_b: int, stacks: Stacks) -> None:
    """Reverse-rotate both stacks, sharing moves through ``rrr``."""
    move_a, move_b = -move_a, -move_b
    shared = is_smallest(move_a, move_b)
    _repeat(stacks, Operation.RRR, shared)
    _repeat(stacks, Operation.RRA, move_a - shared)
    _repeat(stacks, Operation.RRB, move_b - shared)


def move_both_up(move_a: int, move_b: int, stacks: Stacks) -> None:
    """Rotate both stacks, sharing moves through ``rr``."""
    shared = is_smallest(move_a, move_b)
    _repeat(stacks, Operation.RR, shared)
    _repeat(stacks, Operation.RA, move_a - shared)
    _repeat(stacks, Operation.RB, move_b - shared)


def move_mixed(move_a: int, move_b: int, stacks: Stacks) -> None:
    """Rotate each stack on its own, in the direction its sign gives."""
    if move_a < 0:
        _repeat(stacks, Operation.RRA, -move_a)
    if move_b < 0:
        _repeat(stacks, Operation.RRB, -move_b)
    if move_a > 0:
        _repeat(stacks, Operation.RA, move_a)
    if move_b > 0:
        _repeat(stacks, Operation.RB, move_b)


def move_ups(target: int, cheap: int, stacks: Stacks) -> None:
    """Bring ``target`` to the top of ``a`` and ``cheap`` to the top of ``b``."""
    move_a = rotation_cost(target, stacks.a)
    move_b = rotation_cost(cheap, stacks.b)
    if move_a < 0 and move_b < 0:
        move_both_down(move_a, move_b, stacks)
    elif move_a >= 0 and move_b >= 0:
        move_both_up(move_a, move_b, stacks)
    else:
        move_mixed(move_a, move_b, stacks)


def bring_final(stacks: Stacks) -> None:
    """Rotate ``a`` the short way until its smallest value is on top."""
    smallest = find_smallest(stacks.a)
    median = median_index(stacks.a)
    while (position := node_position(stacks.a, smallest)) != 1:
        stacks.apply(Operation.RRA if position > median else Operation.RA)


def execute_sort(stacks: Stacks) -> None:
    """Sort a stack ``a`` of more than three values."""
    count = len(stacks.a)
    sort_small(stacks)
    for _ in range(count - 5):
        move_to_b(stacks)
    three_element_order(stacks)
    for _ in range(len(stacks.b)):
        cheap = find_cheapest(stacks)
        target = target_in_a(stacks.a, cheap)
        move_ups(target, cheap, stacks)
        stacks.apply(Operation.PA)
    bring_final(stacks)


def sort_stacks(stacks: Stacks) -> None:
    """Sort ``a`` unless it already is, choosing the strategy by its size."""
    if is_sorted(stacks.a):
        return
    if len(stacks.a) <= 3:
        sort_small(stacks)
    else:
        execute_sort(stacks)