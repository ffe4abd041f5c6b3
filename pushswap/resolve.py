"""The recursive chunk sort and the direct sorts for two and three numbers."""

from __future__ import annotations

from typing import Iterable, Union

from pushswap.chunk_utils import (
    Chunk,
    Part,
    contains,
    is_bottom,
    is_lonely,
    rank_down,
    rank_up,
)
from pushswap.deals import split_chunk, split_chunk_bottom
from pushswap.operations import Board, Operation
from pushswap.sort_max import sort_max
from pushswap.sort_mid import sort_mid, sort_mid_bottom
from pushswap.sort_min import sort_min

_SMALL_DIVISION = 13


def small_sort(board: Board, chunk: Chunk, part: Union[Part, int]) -> None:
    """Sort one third of a chunk small enough to be sorted in place."""
    part = Part(part)
    if part is Part.MAX:
        sort_max(board, chunk)
    elif part is Part.MIN:
        sort_min(board, chunk)
    elif contains(board.a, chunk.mid):
        rank_up(chunk.mid, chunk.mid_size)
        sort_mid_bottom(board, chunk)
    else:
        rank_down(board.b.head, chunk.mid_size)
        sort_mid(board, chunk)


def decide_chunk(board: Board, chunk: Chunk, part: Union[Part, int]) -> Chunk:
    """Split one third of a chunk further, from the top or bottom of its stack."""
    part = Part(part)
    a, b = board.a, board.b
    if part is Part.MIN:
        if not is_bottom(chunk.min, b) or is_lonely(chunk.min, chunk.min_size, b):
            return split_chunk(board, b, a, chunk.min_size)
        return split_chunk_bottom(board, b, a, chunk.min_size)
    if part is Part.MAX:
        if not is_bottom(chunk.top, a) or is_lonely(a.last(), chunk.top_size, a):
            return split_chunk(board, a, b, chunk.top_size)
        return split_chunk_bottom(board, a, b, chunk.top_size)
    if contains(a, chunk.mid):
        analyze, split = a, b
    else:
        analyze, split = b, a
    if is_bottom(chunk.mid, analyze):
        return split_chunk_bottom(board, analyze, split, chunk.mid_size)
    return split_chunk(board, analyze, split, chunk.mid_size)


def _resolve_parts(board: Board, chunk: Chunk) -> None:
    for part in (Part.MAX, Part.MID, Part.MIN):
        recursive_chunk(board, chunk, part)


def recursive_chunk(board: Board, chunk: Chunk, part: Union[Part, int]) -> None:
    """Sort one third of a chunk, splitting it again while the chunk is large."""
    if chunk.division < _SMALL_DIVISION:
        small_sort(board, chunk, part)
        return
    _resolve_parts(board, decide_chunk(board, chunk, part))


def resolve(board: Board) -> None:
    """Sort the whole of stack a by splitting it into chunks."""
    _resolve_parts(board, split_chunk(board, board.a, board.b, len(board.a)))


def sort_two(board: Board) -> None:
    """Sort two numbers on a."""
    if not board.a.is_sorted():
        board.sa()


def sort_three(board: Board) -> None:
    """Sort three numbers on a in at most two moves."""
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


def sort_values(values: Iterable[int]) -> list[Operation]:
    """The moves that sort the numbers, given top first."""
    board = Board(values)
    count = len(board.a)
    if count == 2:
        sort_two(board)
    elif count == 3:
        sort_three(board)
    elif count >= 4:
        resolve(board)
    return list(board.operations)