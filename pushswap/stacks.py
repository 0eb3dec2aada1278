"""The two stacks of the puzzle and the operations that act on them.

A stack is a list whose first item is the top.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from enum import Enum
from typing import TextIO


class Operation(str, Enum):
    """The instructions the puzzle allows."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RR = "rr"
    RRR = "rrr"
    RA = "ra"
    RB = "rb"
    RRA = "rra"
    RRB = "rrb"


class UnknownOperationError(ValueError):
    """Raised when an instruction name is not one of the known operations."""


def swap(stack: list[int]) -> None:
    """Exchange the two top items; a stack with fewer than two is left alone."""
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def push(source: list[int], destination: list[int]) -> None:
    """Move the top of ``source`` onto ``destination``; no-op if ``source`` is empty."""
    if source:
        destination.insert(0, source.pop(0))


def rotate(stack: list[int]) -> None:
    """Move the top item to the bottom."""
    if len(stack) >= 2:
        stack.append(stack.pop(0))


def reverse_rotate(stack: list[int]) -> None:
    """Move the bottom item to the top."""
    if len(stack) >= 2:
        stack.insert(0, stack.pop())


def node_position(stack: list[int], value: int) -> int:
    """Return the 1-based position of ``value``, or ``len(stack) + 1`` if absent."""
    try:
        return stack.index(value) + 1
    except ValueError:
        return len(stack) + 1


def diff_num(start: int, end: int) -> int:
    """Return the distance between two numbers."""
    return abs(start - end)


def find_smallest(stack: list[int]) -> int:
    """Return the smallest value; raises ValueError on an empty stack."""
    return min(stack)


def find_biggest(stack: list[int]) -> int:
    """Return the biggest value; raises ValueError on an empty stack."""
    return max(stack)


class Stacks:
    """Stacks ``a`` and ``b``; every applied operation is written to ``out``."""

    def __init__(self, values: Iterable[int], out: TextIO | None = None) -> None:
        self.a: list[int] = list(values)
        self.b: list[int] = []
        self.out = out if out is not None else sys.stdout
        self.history: list[Operation] = []
        self._actions: dict[Operation, Callable[[], None]] = {
            Operation.SA: lambda: swap(self.a),
            Operation.SB: lambda: swap(self.b),
            Operation.SS: self._swap_both,
            Operation.PA: lambda: push(self.b, self.a),
            Operation.PB: lambda: push(self.a, self.b),
            Operation.RR: self._rotate_both,
            Operation.RRR: self._reverse_both,
            Operation.RA: lambda: rotate(self.a),
            Operation.RB: lambda: rotate(self.b),
            Operation.RRA: lambda: reverse_rotate(self.a),
            Operation.RRB: lambda: reverse_rotate(self.b),
        }

    def _swap_both(self) -> None:
        swap(self.a)
        swap(self.b)

    def _rotate_both(self) -> None:
        rotate(self.a)
        rotate(self.b)

    def _reverse_both(self) -> None:
        reverse_rotate(self.a)
        reverse_rotate(self.b)

    def apply(self, name: str | Operation) -> Operation:
        """Perform the named operation, print its name and return it."""
        try:
            operation = Operation(name)
        except ValueError:
            raise UnknownOperationError(f"unknown operation: {name!r}") from None
        self._actions[operation]()
        self.out.write(f"{operation.value}\n")
        self.history.append(operation)
        return operation

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"