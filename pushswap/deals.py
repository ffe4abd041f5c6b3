"""Dealing a chunk of one stack into its three thirds."""

from __future__ import annotations

from pushswap.chunk_utils import Chunk, rank_down, rank_up
from pushswap.operations import Board
from pushswap.stack import Stack


def _analyses_a(board: Board, analyze: Stack, split: Stack) -> bool:
    if analyze is board.a and split is board.b:
        return True
    if analyze is board.b and split is board.a:
        return False
    raise ValueError("analyze and split must be the two stacks of the board")


def deal_min(board: Board, analyze: Stack, split: Stack, up: bool) -> None:
    """Send one node of the lowest third to the bottom of b."""
    if _analyses_a(board, analyze, split):
        if up:
            board.rra()
        board.pb()
        board.rb()
    elif up:
        board.rrb()
    else:
        board.rb()


def deal_mid(board: Board, analyze: Stack, split: Stack, up: bool) -> None:
    """Send one node of the middle third to the top of b or the bottom of a."""
    if _analyses_a(board, analyze, split):
        if up:
            board.rra()
        board.pb()
    else:
        if up:
            board.rrb()
        board.pa()
        board.ra()


def deal_max(board: Board, analyze: Stack, split: Stack, up: bool) -> None:
    """Keep one node of the top third in a, or move it there from b."""
    if _analyses_a(board, analyze, split):
        if up:
            board.rra()
        else:
            board.ra()
    else:
        if up:
            board.rrb()
        board.pa()


def deal_rr_min(board: Board, analyze: Stack, split: Stack, chunk: Chunk) -> None:
    """Deal a min followed by a max from a, rotating both stacks at once."""
    if not _analyses_a(board, analyze, split):
        raise ValueError("the paired min deal works on stack a")
    board.pb()
    if chunk.top_count == 0:
        chunk.top = board.a.head
    board.rr()
    chunk.top_count += 1


def deal_rr_mid(board: Board, analyze: Stack, split: Stack, chunk: Chunk) -> None:
    """Deal a mid followed by a min from b, rotating both stacks at once.

    The chunk's mid marker and count are left as they are.
    """
    if _analyses_a(board, analyze, split):
        raise ValueError("the paired mid deal works on stack b")
    board.pa()
    board.rr()


def deal_top(board: Board, chunk: Chunk, analyze: Stack, split: Stack) -> None:
    """Deal the chunk's nodes from the top of `analyze` into thirds."""
    on_a = _analyses_a(board, analyze, split)
    chunk.top_count = 0
    chunk.mid_count = 0
    rank_down(analyze.head, chunk.division)
    low = chunk.min_size
    high = chunk.min_size + chunk.mid_size
    dealt = 0
    while dealt < chunk.division:
        dealt += 1
        node = analyze.head
        can_pair = dealt + 1 < chunk.division
        if node.order <= low:
            if can_pair and on_a and node.next.order > high:
                deal_rr_min(board, analyze, split, chunk)
                dealt += 1
            else:
                deal_min(board, analyze, split, False)
        elif node.order <= high:
            if can_pair and not on_a and node.next.order <= low:
                deal_rr_mid(board, analyze, split, chunk)
                dealt += 1
            else:
                chunk.mid_count += 1
                if chunk.mid_count == 1:
                    chunk.mid = node
                deal_mid(board, analyze, split, False)
        else:
            chunk.top_count += 1
            if chunk.top_count == 1:
                chunk.top = node
            deal_max(board, analyze, split, False)


def deal_bottom(board: Board, chunk: Chunk, analyze: Stack, split: Stack) -> None:
    """Deal the chunk's nodes from the bottom of `analyze` into thirds."""
    on_a = _analyses_a(board, analyze, split)
    chunk.top_count = 0
    chunk.mid_count = 0
    chunk.min_count = 0
    rank_up(analyze.last(), chunk.division)
    low = chunk.min_size
    high = chunk.min_size + chunk.mid_size
    for _ in range(chunk.division):
        tail = analyze.last()
        if tail.order <= low:
            chunk.min_count += 1
            if chunk.min_count == 1:
                chunk.min = tail
            deal_min(board, analyze, split, True)
        elif tail.order <= high:
            chunk.mid_count += 1
            if chunk.mid_count == 1:
                chunk.mid = tail
            deal_mid(board, analyze, split, True)
        else:
            chunk.top_count += 1
            if chunk.top_count == 1:
                chunk.top = tail
            deal_max(board, analyze, split, True)
    if on_a:
        chunk.min = split.last()


def _sized_chunk(size: int) -> Chunk:
    third, rest = divmod(size, 3)
    return Chunk(
        division=size,
        min_size=third,
        mid_size=third + int(rest == 2),
        top_size=third + int(rest > 0),
    )


def split_chunk(board: Board, analyze: Stack, split: Stack, size: int) -> Chunk:
    """Split the top `size` nodes of `analyze` into thirds and describe them."""
    chunk = _sized_chunk(size)
    deal_top(board, chunk, analyze, split)
    if analyze is board.a:
        chunk.min = split.last()
        chunk.top = analyze.last()
    else:
        chunk.mid = split.last()
        chunk.min = analyze.last()
    return chunk


def split_chunk_bottom(board: Board, analyze: Stack, split: Stack, size: int) -> Chunk:
    """Split the bottom `size` nodes of `analyze` into thirds and describe them."""
    chunk = _sized_chunk(size)
    deal_bottom(board, chunk, analyze, split)
    if analyze is not board.a:
        chunk.mid = split.last()
    return chunk