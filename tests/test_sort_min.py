from itertools import permutations

import pytest

from pushswap.chunk_utils import Chunk
from pushswap.operations import Board
from pushswap.sort_min import (
    min_is_top,
    min_lonely_sort,
    sort_min,
    sort_min_three_bottom,
)
from pushswap.stack import Stack

BASE = [100, 200]
EXTRAS = [50, 60, 70]


def _board(chunk_orders, above=(), below=()):
    board = Board(BASE)
    board.b = Stack(list(above) + list(chunk_orders) + list(below))
    nodes = list(board.b)
    start = len(above)
    for node in nodes[start:start + len(chunk_orders)]:
        node.order = node.nbr
    return board


def _all_perms(*sizes):
    return [p for size in sizes for p in permutations(range(1, size + 1))]


@pytest.mark.parametrize("orders", _all_perms(1, 2, 3, 4))
def test_min_lonely_sort_sorts_whole_b(orders):
    board = _board(orders)
    min_lonely_sort(board, Chunk(min_size=len(orders), min=board.b.head))
    assert board.a.values() == sorted(orders) + BASE
    assert board.b.values() == []


@pytest.mark.parametrize("orders", _all_perms(1, 2, 3, 4))
def test_min_is_top_with_nodes_below(orders):
    board = _board(orders, below=EXTRAS)
    min_is_top(board, Chunk(min_size=len(orders), min=board.b.head))
    assert board.a.values() == sorted(orders) + BASE
    assert board.b.values() == EXTRAS


@pytest.mark.parametrize("orders", _all_perms(1, 2, 3, 4))
def test_sort_min_with_chunk_on_top(orders):
    board = _board(orders, below=EXTRAS)
    sort_min(board, Chunk(min_size=len(orders), min=board.b.head))
    assert board.a.values() == sorted(orders) + BASE
    assert board.b.values() == EXTRAS


@pytest.mark.parametrize("orders", _all_perms(1, 2, 3, 4))
def test_sort_min_with_chunk_at_bottom(orders):
    board = _board(orders, above=EXTRAS)
    sort_min(board, Chunk(min_size=len(orders), min=board.b.last()))
    assert board.a.values() == sorted(orders) + BASE
    assert board.b.values() == EXTRAS


@pytest.mark.parametrize("orders", _all_perms(3))
def test_sort_min_three_bottom(orders):
    board = _board(orders, above=EXTRAS)
    sort_min_three_bottom(board)
    assert board.a.values() == [1, 2, 3] + BASE
    assert board.b.values() == EXTRAS


def test_reverse_sorted_top_is_pushed_straight_over():
    board = _board((3, 2, 1), below=EXTRAS)
    min_is_top(board, Chunk(min_size=3, min=board.b.head))
    assert [str(op) for op in board.operations] == ["pa", "pa", "pa"]
    assert board.a.values()[:3] == [1, 2, 3]


def test_sort_min_keeps_node_identity():
    board = _board((2, 1), below=EXTRAS)
    nodes = {id(node) for node in list(board.b)[:2]}
    sort_min(board, Chunk(min_size=2, min=board.b.head))
    assert {id(node) for node in list(board.a)[:2]} == nodes