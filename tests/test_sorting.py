import io
import itertools

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.sorting import (
    bring_final,
    execute_sort,
    fill_stack_b,
    find_cheapest,
    is_smallest,
    is_sorted,
    median_index,
    median_value,
    move_both_down,
    move_both_up,
    move_cost,
    move_mixed,
    move_to_b,
    move_top_distance,
    move_ups,
    rotation_cost,
    sort_small,
    sort_stacks,
    sorted_values,
    target_in_a,
    three_element_order,
    two_element_order,
)
from pushswap.stacks import Operation, Stacks


def make(values, b=None):
    stacks = Stacks(values, out=io.StringIO())
    if b is not None:
        stacks.b = list(b)
    return stacks


def replay(values, operations):
    stacks = make(values)
    for operation in operations:
        stacks.apply(operation)
    return stacks


@pytest.mark.parametrize("length", range(0, 12))
def test_median_index_is_upper_middle(length):
    index = median_index(list(range(length)))
    assert index * 2 in (length, length + 1)


def test_is_smallest():
    assert is_smallest(3, 7) == 3
    assert is_smallest(7, 3) == 3
    assert is_smallest(0, 5) == 0
    assert is_smallest(5, 0) == 0


def test_is_sorted():
    assert is_sorted([1, 2, 3])
    assert is_sorted([])
    assert not is_sorted([2, 1, 3])


def test_sorted_values():
    assert sorted_values([5, -1, 3]) == [-1, 3, 5]


def test_median_value():
    assert median_value([40, 10, 30, 20]) == 30
    assert median_value([9, 7, 8]) == 9
    assert median_value([]) == 0


def test_fill_stack_b_keeps_three():
    three = make([3, 1, 2])
    fill_stack_b(three)
    assert three.b == []
    six = make([6, 5, 4, 3, 2, 1])
    fill_stack_b(six)
    assert six.b == [5, 6]
    assert six.a == [4, 3, 2, 1]


def test_two_element_order():
    stacks = make([2, 1])
    two_element_order(stacks)
    assert stacks.a == [1, 2]
    assert stacks.history == [Operation.SA]


@pytest.mark.parametrize("values", list(itertools.permutations([1, 2, 3])))
def test_three_element_order_sorts_every_permutation(values):
    stacks = make(values)
    three_element_order(stacks)
    assert stacks.a == [1, 2, 3]
    assert len(stacks.history) <= 2


@pytest.mark.parametrize("values", [[5], [2, 1], [1, 2], [3, 1, 2], [2, 3, 1]])
def test_sort_small(values):
    stacks = make(values)
    sort_small(stacks)
    assert stacks.a == sorted(values)
    assert stacks.b == []


def test_move_to_b_moves_head():
    stacks = make([7, 1, 2], b=[5, 3, 4])
    move_to_b(stacks)
    assert stacks.a == [1, 2]
    assert 7 in stacks.b
    assert sorted(stacks.b) == [3, 4, 5, 7]


def test_move_top_distance():
    stack = [10, 20, 30, 40, 50]
    assert move_top_distance(10, stack) == 0
    assert move_top_distance(20, stack) == 1


@pytest.mark.parametrize("value", [1, 2, 3, 4, 5, 6, 7])
def test_rotation_cost_brings_value_on_top(value):
    values = [4, 7, 1, 6, 2, 5, 3]
    cost = rotation_cost(value, values)
    stacks = make(values)
    operation = Operation.RA if cost > 0 else Operation.RRA
    for _ in range(abs(cost)):
        stacks.apply(operation)
    assert stacks.a[0] == value
    assert abs(cost) <= len(values) // 2


def test_move_cost_is_zero_when_both_on_top():
    stacks = make([1, 5, 9], b=[3, 7])
    assert move_cost(1, 3, stacks) == 0


def test_target_in_a():
    stack = [8, 2, 5, 11]
    assert target_in_a(stack, 3) == 5
    assert target_in_a(stack, 9) == 11
    assert target_in_a(stack, 20) == 2


def test_find_cheapest_belongs_to_b():
    stacks = make([1, 5, 9, 13], b=[10, 2, 6])
    cheapest = find_cheapest(stacks)
    assert cheapest in stacks.b
    costs = [move_cost(target_in_a(stacks.a, v), v, stacks) for v in stacks.b]
    assert move_cost(target_in_a(stacks.a, cheapest), cheapest, stacks) == min(costs)


def test_move_both_up():
    stacks = make([1, 2, 3, 4], b=[5, 6, 7])
    move_both_up(2, 1, stacks)
    assert stacks.a == [3, 4, 1, 2]
    assert stacks.b == [6, 7, 5]
    assert stacks.history.count(Operation.RR) == 1


def test_move_both_down():
    stacks = make([1, 2, 3, 4], b=[5, 6, 7])
    move_both_down(-2, -1, stacks)
    assert stacks.a == [3, 4, 1, 2]
    assert stacks.b == [7, 5, 6]
    assert stacks.history.count(Operation.RRR) == 1


def test_move_mixed():
    stacks = make([1, 2, 3, 4], b=[5, 6, 7])
    move_mixed(-1, 2, stacks)
    assert stacks.a == [4, 1, 2, 3]
    assert stacks.b == [7, 5, 6]
    assert Operation.RR not in stacks.history


def test_move_ups_puts_both_on_top():
    stacks = make([1, 5, 9, 13, 17], b=[4, 8, 12, 16])
    move_ups(13, 12, stacks)
    assert stacks.a[0] == 13
    assert stacks.b[0] == 12


def test_bring_final():
    stacks = make([4, 5, 6, 1, 2, 3])
    bring_final(stacks)
    assert stacks.a == [1, 2, 3, 4, 5, 6]


def test_sort_stacks_leaves_sorted_input_alone():
    stacks = make([1, 2, 3, 4, 5])
    sort_stacks(stacks)
    assert stacks.history == []
    assert stacks.out.getvalue() == ""


@pytest.mark.parametrize("values", [[4, 3, 2, 1], [5, 1, 4, 2, 3], [9, 2, 7, 4, 1, 8]])
def test_execute_sort_sorts(values):
    stacks = make(values)
    execute_sort(stacks)
    assert stacks.a == sorted(values)
    assert stacks.b == []


@settings(max_examples=60, deadline=None)
@given(st.lists(st.integers(min_value=1, max_value=10_000), unique=True,
                min_size=1, max_size=40))
def test_sort_stacks_sorts_and_output_replays(values):
    stacks = make(values)
    sort_stacks(stacks)
    assert stacks.a == sorted(values)
    assert stacks.b == []
    printed = stacks.out.getvalue().split()
    assert printed == [op.value for op in stacks.history]
    assert replay(values, printed).a == sorted(values)