"""Sorting the lowest third of a chunk out of stack b onto the top of a."""

from __future__ import annotations

from itertools import islice

from pushswap.chunk_utils import (
    Chunk,
    check_swap,
    chunk_is_sorted_reverse,
    is_bot_sorted,
    is_bot_sorted_rev,
    is_lonely,
    min_on_top,
)
from pushswap.operations import Board
from pushswap.stack import Stack


def _order_at(stack: Stack, index: int) -> int:
    node = next(islice(stack, index, None), None)
    return node.order if node is not None else 0


def _rotations(size: int) -> int:
    return size if 2 <= size <= 4 else 1


def _fix_a(board: Board) -> None:
    check_swap(board, True, False)


def _fix_b(board: Board) -> None:
    check_swap(board, False, True)


def _fix_both(board: Board) -> None:
    check_swap(board, True, True)


def _return_pair(board: Board) -> None:
    """Order the tops of both stacks, then bring two more nodes over to a."""
    _fix_both(board)
    board.pa()
    _fix_a(board)
    board.pa()
    _fix_a(board)


def sort_min(board: Board, chunk: Chunk) -> None:
    """Move the ranked lowest third from b onto a in ascending order."""
    b = board.b
    size = chunk.min_size
    if min_on_top(b, chunk):
        min_is_top(board, chunk)
        return
    if is_bot_sorted_rev(b.last(), size):
        for _ in range(_rotations(size)):
            board.rrb()
            board.pa()
        return
    if is_bot_sorted(b.last(), size):
        board.rrb()
        if 2 <= size <= 4:
            for _ in range(size - 1):
                board.rrb()
            for _ in range(size):
                board.pa()
        return
    if size == 4:
        _min_bottom_four(board)
    elif size == 3:
        sort_min_three_bottom(board)
    else:
        _min_bottom_two(board, chunk)


def _min_bottom_two(board: Board, chunk: Chunk) -> None:
    if not min_on_top(board.b, chunk):
        board.rrb()
    if board.b.head.order == 1:
        board.rrb()
        board.pa()
        board.pa()
    else:
        board.pa()
        board.rrb()
        board.pa()


def _min_bottom_four(board: Board) -> None:
    b = board.b
    board.rrb()
    board.rrb()
    if _order_at(b, 0) == 4 or _order_at(b, 1) == 4:
        board.pa()
        board.pa()
        board.rrb()
        board.rrb()
        _return_pair(board)
        return
    board.pa()
    board.rrb()
    if _order_at(b, 0) == 4:
        board.pa()
        board.rrb()
    else:
        board.rrb()
        board.pa()
    _return_pair(board)


def sort_min_three_bottom(board: Board) -> None:
    """Raise three ranked nodes from the bottom of b onto a, ascending."""
    b = board.b
    board.rrb()
    if _order_at(b, 0) == 3:
        board.pa()
        board.rrb()
        board.pa()
        board.rrb()
        board.pa()
        _fix_a(board)
        return
    board.rrb()
    if _order_at(b, 0) == 3:
        board.pa()
        board.rrb()
    else:
        board.rrb()
        board.pa()
    _fix_b(board)
    board.pa()
    board.pa()


def min_is_top(board: Board, chunk: Chunk) -> None:
    """Move a lowest third lying on top of b onto a, ascending."""
    b = board.b
    size = chunk.min_size
    if chunk_is_sorted_reverse(b.head, size):
        if 1 <= size <= 4:
            for _ in range(size):
                board.pa()
        return
    if is_lonely(b.last(), size, b):
        min_lonely_sort(board, chunk)
        return
    if size == 2:
        _fix_b(board)
        board.pa()
        board.pa()
    elif size == 3:
        _min_top_three(board)
    else:
        _min_top_four(board)


def _min_top_three(board: Board) -> None:
    b = board.b
    if _order_at(b, 0) == 3:
        board.pa()
        board.pa()
        board.pa()
        _fix_a(board)
    elif _order_at(b, 1) == 3:
        board.pa()
        board.pa()
        _fix_a(board)
        board.pa()
        _fix_a(board)
    else:
        board.pa()
        _fix_b(board)
        board.pa()
        _fix_a(board)
        board.pa()
        _fix_a(board)


def _min_top_four(board: Board) -> None:
    b = board.b
    if _order_at(b, 0) == 4 or _order_at(b, 1) == 4:
        board.pa()
        board.pa()
        _return_pair(board)
        return
    board.pa()
    board.rb()
    if _order_at(b, 0) == 4:
        board.pa()
    else:
        board.rb()
        board.pa()
        board.rrb()
    board.rrb()
    _return_pair(board)


def min_lonely_sort(board: Board, chunk: Chunk) -> None:
    """Move a lowest third that makes up the whole of b onto a, ascending."""
    b = board.b
    size = chunk.min_size
    if size == 4:
        if _order_at(b, 3) == 4:
            board.rrb()
        elif _order_at(b, 2) == 4:
            board.rrb()
            board.rrb()
        board.pa()
        board.pa()
        _return_pair(board)
    elif size == 3:
        if _order_at(b, 2) == 3:
            board.rrb()
        elif _order_at(b, 1) == 3:
            board.rb()
        board.pa()
        board.pa()
        _fix_a(board)
        board.pa()
        _fix_a(board)
    elif size == 2:
        _fix_b(board)
        board.pa()
        board.pa()
    else:
        board.pa()