"""Sorting the middle third of a chunk onto the top of a."""

from __future__ import annotations

from pushswap.chunk_utils import (
    Chunk,
    chunk_is_sorted_reverse,
    is_bot_sorted_rev,
    min_on_top,
)
from pushswap.operations import Board
from pushswap.sort_max import (
    _bottom_three,
    _fix_a,
    _fix_both,
    _order_at,
    _play,
    _return_pair,
    _rotations,
)

# Extra moves after the first rrr when the middle third is already in order,
# keyed by (mid_size, min_size).
_SORTED_MID_EXTRA = {
    (3, 2): ("rrr", "rra"),
    (3, 3): ("rrr", "rrr"),
    (4, 4): ("rrr", "rrr", "rrr"),
    (4, 3): ("rrr", "rrr", "rra"),
}


def sort_mid(board: Board, chunk: Chunk) -> None:
    """Move the ranked middle third from the top of b onto a, ascending."""
    size = chunk.mid_size
    b = board.b
    if chunk_is_sorted_reverse(b.head, size):
        if 1 <= size <= 4:
            _play(board, *["pa"] * size)
    elif size == 2:
        _play(board, "pa", "pa", _fix_a)
    elif size == 4:
        if _order_at(b, 0) == 4 or _order_at(b, 1) == 4:
            _play(board, "pa", "pa", _return_pair)
        elif _order_at(b, 2) == 4:
            _play(board, "pa", "rb", "pa", "rrb", _return_pair)
        else:
            _play(board, "pa", "rb", "rb", "pa", "rrb", "rrb", _return_pair)
    else:
        if _order_at(b, 0) == 3 or _order_at(b, 1) == 3:
            _play(board, "pa", "pa", _fix_a)
        else:
            _play(board, "pa", "rb", "pa", "rrb", _fix_a)
        _play(board, "pa", _fix_a)


def sort_mid_bottom(board: Board, chunk: Chunk) -> None:
    """Bring the ranked middle third from the bottom of a to its top, sorted."""
    size = chunk.mid_size
    mid = chunk.mid
    if is_bot_sorted_rev(board.a.last(), size):
        _play(board, *["rra"] * _rotations(size))
    elif not min_on_top(board.b, chunk):
        sort_mid_and_min_bottom(board, chunk)
    elif size == 2:
        _play(board, "rra", "rra", _fix_a)
    elif size == 3:
        _bottom_three(board, mid)
    elif mid.prev.prev.order == 4 or mid.prev.prev.prev.order == 4:
        _play(board, "rra", "rra", "pb", "pb", "rra", "rra", _return_pair)
    else:
        _play(board, "rra", "rra", "rra", "pb", "rra", "pb", _return_pair)


def sort_mid_and_min_bottom(board: Board, chunk: Chunk) -> None:
    """Sort the middle third up from the bottom of a while raising the lowest third in b."""
    mid_size, min_size = chunk.mid_size, chunk.min_size
    if is_bot_sorted_rev(board.a.last(), mid_size):
        if mid_size == 2:
            extra = ("rrr",) if min_size > 1 else ("rra",)
        else:
            extra = _SORTED_MID_EXTRA.get((mid_size, min_size), ())
        _play(board, "rrr", *extra)
    elif mid_size == 2:
        _play(board, "rrr", "rrr" if min_size == 2 else "rra", _fix_a)
    elif mid_size == 3:
        _three_mid_with_min(board, chunk)
    else:
        _four_mid_with_min(board, chunk)


def _three_mid_with_min(board: Board, chunk: Chunk) -> None:
    mid = chunk.mid
    three_min = chunk.min_size == 3
    if mid.order == 3:
        _play(board, "rrr", "rrr", "rrr" if three_min else "rra", _fix_both)
    elif mid.prev.order == 3:
        _play(board, "rrr", "rrr", _fix_both)
        if three_min:
            _play(board, "rrr", _fix_both)
        else:
            _play(board, "rra", _fix_a)
    else:
        _play(board, "rrr", "rrr", "pb", "rra", _fix_both, "pa")
        if three_min:
            _play(board, "rrb", _fix_both)
        _fix_a(board)


def _four_mid_with_min(board: Board, chunk: Chunk) -> None:
    mid = chunk.mid
    finish = (_fix_both, "pa", _fix_a, "pa", _fix_both)
    if mid.prev.prev.order == 4 or mid.prev.prev.prev.order == 4:
        _play(board, "rrr", "rrr", "pb", "pb", "rra", "rra", *finish, "rrb")
    else:
        _play(board, "rrr", "rrr", "rrr", "pb", "rra", "pb", *finish)
    if chunk.min_size == 4:
        board.rrb()