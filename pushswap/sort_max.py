"""Sorting the highest third of a chunk, whether it lies at the top or the bottom of a."""

from __future__ import annotations

from itertools import islice
from typing import Callable, Union

from pushswap.chunk_utils import (
    Chunk,
    check_max,
    check_swap,
    chunk_is_sorted,
    is_bot_sorted_rev,
    lonely_max,
    rank_down,
    rank_up,
)
from pushswap.operations import Board
from pushswap.stack import Node, Stack

_Step = Union[str, Callable[[Board], None]]


def _play(board: Board, *steps: _Step) -> None:
    """Run instructions by name, or helper steps that take the board."""
    for step in steps:
        if isinstance(step, str):
            board.apply(step)
        else:
            step(board)


def _order_at(stack: Stack, index: int) -> int:
    node = next(islice(stack, index, None), None)
    return node.order if node is not None else 0


def _rotations(size: int) -> int:
    return size if 2 <= size <= 4 else 1


def _fix_a(board: Board) -> None:
    check_swap(board, True, False)


def _fix_both(board: Board) -> None:
    check_swap(board, True, True)


def _return_pair(board: Board) -> None:
    """Order the tops of both stacks, then bring the two parked nodes back to a."""
    _play(board, _fix_both, "pa", _fix_a, "pa", _fix_a)


def _bottom_three(board: Board, marker: Node) -> None:
    """Raise three ranked nodes from the bottom of a, the first one being marker."""
    if marker.order == 3:
        _play(board, "rra", "rra", "rra", _fix_a)
    elif marker.prev.order == 3:
        _play(board, "rra", "rra", "sa", "rra", _fix_a)
    else:
        _play(board, "rra", "rra", "pb", "rra", _fix_a, "pa", _fix_a)


def sort_max(board: Board, chunk: Chunk) -> None:
    """Rank the chunk's top third where it lies and sort it onto the top of a."""
    if check_max(board.a, chunk.top):
        rank_down(board.a.head, chunk.top_size)
        sort_max_top(board, chunk)
    else:
        rank_up(board.a.last(), chunk.top_size)
        sort_max_bottom(board, chunk)


def sort_max_top(board: Board, chunk: Chunk) -> None:
    """Sort the ranked top third lying on top of a into ascending order."""
    a = board.a
    if chunk_is_sorted(a.head, chunk.top_size):
        return
    if chunk.top_size == 2:
        _fix_a(board)
    elif lonely_max(a, chunk):
        lonely_max_sort(board, chunk)
    elif _order_at(a, 3) == 4 or chunk.top_size == 3:
        sort_three_top(board)
    elif _order_at(a, 2) == 4:
        _play(board, "pb", "pb", _return_pair)
    elif _order_at(a, 1) == 4:
        _play(board, "pb", "sa", "pb", _return_pair)
    else:
        _play(board, "sa", "pb", "sa", "pb", _return_pair)


def sort_three_top(board: Board) -> None:
    """Sort ranks 1 to 3 on top of a without disturbing the nodes below."""
    a = board.a
    if _order_at(a, 2) == 3:
        if _order_at(a, 1) == 1:
            board.sa()
    elif _order_at(a, 1) == 3:
        _play(board, "ra", "sa", "rra")
        if a.head.order == 2:
            board.sa()
    elif a.head.order == 3:
        _play(board, "sa", "ra", "sa", "rra", _fix_a)


def lonely_max_sort(board: Board, chunk: Chunk) -> None:
    """Sort a top third that reaches the bottom of a."""
    if chunk.top_size != 3:
        _lonely_four(board)
        return
    a = board.a
    if a.is_sorted():
        return
    biggest = a.biggest()
    if a.head.nbr == biggest.nbr:
        board.ra()
    elif a.head.next.nbr == biggest.nbr:
        board.rra()
    if a.head.nbr > a.head.next.nbr:
        board.sa()


def _lonely_four(board: Board) -> None:
    first, second, third, fourth = (_order_at(board.a, index) for index in range(4))
    pair = {first, second}
    if fourth == 4:
        sort_three_top(board)
    elif pair == {1, 2}:
        if third == 3:
            _fix_a(board)
        else:
            _play(board, "pb", "pb", _fix_both, "pa", "pa")
    elif pair == {3, 4}:
        if first == 4:
            board.sa()
        _play(board, "ra", "ra", _fix_both)
    elif 4 in pair:
        if second == 4:
            board.sa()
        _play(board, "ra", sort_three_top)
    else:
        _play(board, "pb", "pb", _return_pair)


def sort_max_bottom(board: Board, chunk: Chunk) -> None:
    """Bring the ranked top third from the bottom of a to its top, sorted."""
    size = chunk.top_size
    top = chunk.top
    if is_bot_sorted_rev(board.a.last(), size):
        _play(board, *["rra"] * _rotations(size))
    elif size == 2:
        _play(board, "rra", "rra", _fix_a)
    elif size == 3:
        _bottom_three(board, top)
    elif top.prev.prev.prev.order == 4 or top.prev.prev.order == 4:
        _play(board, "rra", "rra", "pb", "pb", "rra", "rra", _return_pair)
    else:
        _play(board, "rra", "rra", _fix_a, "rra")
        if board.a.head.order == 3:
            _play(board, _fix_a, "rra", _fix_a)
        else:
            _play(board, "pb", "rra", _fix_a, "pa", _fix_a)