"""The two stacks, their nodes and the eleven operations that move them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


@dataclass(eq=False)
class Node:
    """One value on a stack, with the bookkeeping the sorter attaches to it."""

    data: int
    index: int = -1
    push_cost: int = 0
    above_median: bool = False
    cheapest: bool = False
    target: Node | None = None


class Operation(Enum):
    """The instructions a solution is written in."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _swap(stack: deque[Node]) -> None:
    if len(stack) > 1:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: deque[Node]) -> None:
    if len(stack) > 1:
        stack.rotate(-1)


def _reverse_rotate(stack: deque[Node]) -> None:
    if len(stack) > 1:
        stack.rotate(1)


def _push(dst: deque[Node], src: deque[Node]) -> None:
    if src:
        dst.appendleft(src.popleft())


class Stacks:
    """Stacks a and b, top first, with a record of every operation applied."""

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[Node] = deque(Node(value) for value in values)
        self.b: deque[Node] = deque()
        self.operations: list[Operation] = []

    def apply(self, op: Operation | str) -> None:
        """Perform one operation and record it."""
        op = Operation(op)
        if op is Operation.SA:
            _swap(self.a)
        elif op is Operation.SB:
            _swap(self.b)
        elif op is Operation.SS:
            _swap(self.a)
            _swap(self.b)
        elif op is Operation.PA:
            _push(self.a, self.b)
        elif op is Operation.PB:
            _push(self.b, self.a)
        elif op is Operation.RA:
            _rotate(self.a)
        elif op is Operation.RB:
            _rotate(self.b)
        elif op is Operation.RR:
            _rotate(self.a)
            _rotate(self.b)
        elif op is Operation.RRA:
            _reverse_rotate(self.a)
        elif op is Operation.RRB:
            _reverse_rotate(self.b)
        else:
            _reverse_rotate(self.a)
            _reverse_rotate(self.b)
        self.operations.append(op)

    def values_a(self) -> list[int]:
        """Values of stack a, top first."""
        return [node.data for node in self.a]

    def values_b(self) -> list[int]:
        """Values of stack b, top first."""
        return [node.data for node in self.b]


def is_sorted(values: Iterable[int]) -> bool:
    """True when the values never decrease from first to last."""
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))


def find_biggest(nodes: Iterable[Node]) -> Node | None:
    """The first node holding the largest value, or None when there is none."""
    return max(nodes, key=lambda node: node.data, default=None)


def find_smallest(nodes: Iterable[Node]) -> Node | None:
    """The first node holding the smallest value, or None when there is none."""
    return min(nodes, key=lambda node: node.data, default=None)