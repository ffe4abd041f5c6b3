"""Chunks, ranks and the small questions the chunk sorter asks of its stacks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from itertools import chain, islice, pairwise
from typing import Iterable, Iterator, Optional

from pushswap.operations import Board
from pushswap.stack import Node, Stack


class Part(IntEnum):
    """The three thirds of a chunk, numbered from the smallest values up."""

    MIN = 1
    MID = 2
    MAX = 3


@dataclass(eq=False)
class Chunk:
    """A run of values split into thirds, with the nodes that mark each third."""

    division: int = 0
    top_size: int = 0
    mid_size: int = 0
    min_size: int = 0
    top: Optional[Node] = None
    mid: Optional[Node] = None
    min: Optional[Node] = None
    top_count: int = 0
    mid_count: int = 0
    min_count: int = 0


def _walk(node: Optional[Node], count: int, backward: bool = False) -> Iterator[Node]:
    while node is not None and count > 0:
        yield node
        node = node.prev if backward else node.next
        count -= 1


def _rank(nodes: Iterable[Node]) -> None:
    for order, node in enumerate(sorted(nodes, key=lambda n: n.nbr), start=1):
        node.order = order


def rank_down(head: Optional[Node], size: int) -> None:
    """Give the `size` nodes from `head` downwards the ranks 1.. by value."""
    _rank(_walk(head, size))


def rank_up(tail: Optional[Node], size: int) -> None:
    """Give the `size` nodes from `tail` upwards the ranks 1.. by value."""
    _rank(_walk(tail, size, backward=True))


def _needs_swap(stack: Stack, want_descending: bool) -> bool:
    head = stack.head
    if head is None or head.next is None:
        return False
    if want_descending:
        return head.next.order > head.order
    return head.next.order < head.order


def check_swap(board: Board, on_a: bool, on_b: bool) -> None:
    """Swap the tops that are out of rank order: a ascending, b descending."""
    swap_a = on_a and _needs_swap(board.a, want_descending=False)
    swap_b = on_b and _needs_swap(board.b, want_descending=True)
    if swap_a and swap_b:
        board.ss()
    elif swap_a:
        board.sa()
    elif swap_b:
        board.sb()


def is_bottom(node: Optional[Node], stack: Stack) -> bool:
    """True when `node` is the bottom node of `stack`."""
    return stack.last() is node


def is_lonely(node: Optional[Node], size: int, stack: Stack) -> bool:
    """True when `node` sits at position `size` (counting from 1) of `stack`."""
    target = next(islice(stack, max(size, 1) - 1, None), None)
    return target is not None and target is node


def contains(stack: Stack, node: Optional[Node]) -> bool:
    """True when `node` is one of the nodes of `stack`."""
    return any(candidate is node for candidate in stack)


def check_max(stack: Stack, node: Optional[Node]) -> bool:
    """True when `node` is among the first five places of `stack`.

    The place just past the bottom counts as None.
    """
    return any(candidate is node for candidate in islice(chain(stack, [None]), 5))


def lonely_max(stack: Stack, chunk: Chunk) -> bool:
    """True when the top third of the chunk reaches the bottom of `stack`."""
    return is_lonely(stack.last(), chunk.top_size, stack)


def chunk_is_sorted(head: Optional[Node], size: int) -> bool:
    """True when ranks never decrease over `size` nodes from `head` down."""
    return all(x.order <= y.order for x, y in pairwise(_walk(head, size)))


def chunk_is_sorted_reverse(head: Optional[Node], size: int) -> bool:
    """True when ranks never increase over `size` nodes from `head` down."""
    return all(x.order >= y.order for x, y in pairwise(_walk(head, size)))


def is_bot_sorted(tail: Optional[Node], size: int) -> bool:
    """True when ranks never decrease over `size` nodes from `tail` up."""
    nodes = _walk(tail, size, backward=True)
    return all(x.order <= y.order for x, y in pairwise(nodes))


def is_bot_sorted_rev(tail: Optional[Node], size: int) -> bool:
    """True when ranks never increase over `size` nodes from `tail` up."""
    nodes = _walk(tail, size, backward=True)
    return all(x.order >= y.order for x, y in pairwise(nodes))


def min_on_top(stack: Stack, chunk: Chunk) -> bool:
    """True when the chunk's min node is within the first min_size + 1 places."""
    return any(node is chunk.min for node in islice(stack, chunk.min_size + 1))