"""Sorting stack a with the help of stack b, choosing the cheapest move each turn."""

from __future__ import annotations

from collections.abc import Iterable

from .stacks import Node, Operation, Stacks, find_biggest, find_smallest, is_sorted


def index_stack(nodes: Iterable[Node]) -> None:
    """Record each node's position and whether it lies in the upper half."""
    items = list(nodes)
    median = len(items) // 2
    for position, node in enumerate(items):
        node.index = position
        node.above_median = position <= median


def set_targets(dest: Iterable[Node], to_move: Iterable[Node]) -> None:
    """Give every node to move the closest larger node of dest, else dest's smallest."""
    candidates = list(dest)
    fallback = find_smallest(candidates)
    for node in to_move:
        larger = (candidate for candidate in candidates if candidate.data > node.data)
        node.target = min(larger, key=lambda candidate: candidate.data, default=fallback)


def update_costs(stack_a: Iterable[Node], stack_b: Iterable[Node]) -> None:
    """Count the rotations that bring each node of b and its target to their tops."""
    nodes_a = list(stack_a)
    nodes_b = list(stack_b)
    len_a = len(nodes_a)
    len_b = len(nodes_b)
    for node in nodes_b:
        target = node.target
        if target is None:
            raise ValueError(f"node {node.data} has no target")
        cost = node.index if node.above_median else len_b - node.index
        cost += target.index if target.above_median else len_a - target.index
        node.push_cost = cost


def mark_cheapest(nodes: Iterable[Node]) -> Node | None:
    """Flag the first node with the lowest push cost and return it."""
    cheapest = min(nodes, key=lambda node: node.push_cost, default=None)
    if cheapest is not None:
        cheapest.cheapest = True
    return cheapest


def bring_to_top(stacks: Stacks, node: Node, stack_name: str) -> None:
    """Rotate the named stack, in the direction its half suggests, until node is on top."""
    if stack_name == "a":
        stack, forward, backward = stacks.a, Operation.RA, Operation.RRA
    elif stack_name == "b":
        stack, forward, backward = stacks.b, Operation.RB, Operation.RRB
    else:
        raise ValueError(f"unknown stack: {stack_name!r}")
    if node not in stack:
        raise ValueError(f"node {node.data} is not on stack {stack_name}")
    while stack[0] is not node:
        stacks.apply(forward if node.above_median else backward)


def sort_three(stacks: Stacks) -> None:
    """Sort the three nodes of stack a in at most two operations."""
    if len(stacks.a) < 3:
        return
    biggest = find_biggest(stacks.a)
    if biggest is stacks.a[0]:
        stacks.apply(Operation.RA)
    elif biggest is stacks.a[1]:
        stacks.apply(Operation.RRA)
    if stacks.a[0].data > stacks.a[1].data:
        stacks.apply(Operation.SA)


def _prepare(stacks: Stacks) -> None:
    index_stack(stacks.a)
    index_stack(stacks.b)
    set_targets(stacks.a, stacks.b)
    update_costs(stacks.a, stacks.b)
    mark_cheapest(stacks.b)


def _rotate_together(stacks: Stacks, cheapest: Node, target: Node, op: Operation) -> None:
    while stacks.a[0] is not target and stacks.b[0] is not cheapest:
        stacks.apply(op)
    index_stack(stacks.a)
    index_stack(stacks.b)


def _move_cheapest(stacks: Stacks) -> None:
    cheapest = next(node for node in stacks.b if node.cheapest)
    target = cheapest.target
    if target is None:
        raise ValueError(f"node {cheapest.data} has no target")
    if cheapest.above_median and target.above_median:
        _rotate_together(stacks, cheapest, target, Operation.RR)
    elif not cheapest.above_median and not target.above_median:
        _rotate_together(stacks, cheapest, target, Operation.RRR)
    bring_to_top(stacks, cheapest, "b")
    bring_to_top(stacks, target, "a")
    stacks.apply(Operation.PA)


def sort_stack(stacks: Stacks) -> None:
    """Sort stack a of any size, leaving b empty."""
    while len(stacks.a) > 3:
        stacks.apply(Operation.PB)
    sort_three(stacks)
    while stacks.b:
        _prepare(stacks)
        _move_cheapest(stacks)
    if not is_sorted(stacks.values_a()):
        index_stack(stacks.a)
        smallest = find_smallest(stacks.a)
        while stacks.a[0] is not smallest:
            stacks.apply(Operation.RA if smallest.above_median else Operation.RRA)


def solve(values: Iterable[int]) -> list[Operation]:
    """The operations that sort the given distinct values on stack a."""
    stacks = Stacks(values)
    count = len(stacks.a)
    if count > 1 and not is_sorted(stacks.values_a()):
        if count == 2:
            stacks.apply(Operation.SA)
        elif count == 3:
            sort_three(stacks)
        else:
            sort_stack(stacks)
    return list(stacks.operations)