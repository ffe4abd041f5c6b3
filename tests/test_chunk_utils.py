import pytest

from pushswap.chunk_utils import (
    Chunk,
    Part,
    check_max,
    check_swap,
    chunk_is_sorted,
    chunk_is_sorted_reverse,
    contains,
    is_bot_sorted,
    is_bot_sorted_rev,
    is_bottom,
    is_lonely,
    lonely_max,
    min_on_top,
    rank_down,
    rank_up,
)
from pushswap.operations import Board, Operation
from pushswap.stack import Stack


def _orders(stack):
    return [node.order for node in stack]


def _ranked(values):
    stack = Stack(values)
    rank_down(stack.head, len(values))
    return stack


def test_part_orders_thirds_from_smallest():
    assert Part.MIN < Part.MID < Part.MAX
    assert Part(3) is Part.MAX


@pytest.mark.parametrize(
    "values, pushes, on_a, on_b, ops, expected_a, expected_b",
    [
        ([2, 1, 3], 0, True, False, [Operation.SA], [1, 2, 3], []),
        ([1, 2, 3], 0, True, True, [], [1, 2, 3], []),
        ([2, 1], 0, False, True, [], [2, 1], []),
        ([4, 3, 2, 1], 2, True, True, [Operation.SS], [1, 2], [4, 3]),
        ([6, 5, 1, 2], 2, True, True, [Operation.SB], [1, 2], [6, 5]),
        ([1], 0, True, True, [], [1], []),
    ],
)
def test_check_swap(values, pushes, on_a, on_b, ops, expected_a, expected_b):
    board = Board(values)
    for _ in range(pushes):
        board.pb()
    for stack in (board.a, board.b):
        if len(stack):
            rank_down(stack.head, len(stack))
    check_swap(board, on_a, on_b)
    assert board.operations[pushes:] == ops
    assert board.a.values() == expected_a
    assert board.b.values() == expected_b


def test_position_checks():
    stack = Stack([1, 2, 3, 4])
    other = Stack([1, 2, 3, 4])
    assert is_bottom(stack.last(), stack)
    assert not is_bottom(stack.head, stack)
    assert is_lonely(stack.last(), 4, stack)
    assert not is_lonely(stack.last(), 3, stack)
    assert is_lonely(stack.head, 1, stack)
    assert not is_lonely(stack.last(), 6, stack)
    assert all(contains(stack, node) for node in stack)
    assert not contains(stack, other.head)


def test_check_max_looks_at_five_places():
    stack = Stack(range(10))
    nodes = list(stack)
    assert check_max(stack, nodes[4])
    assert not check_max(stack, nodes[5])
    assert not check_max(stack, None)
    assert check_max(Stack([1, 2]), None)


def test_lonely_max():
    stack = Stack([1, 2, 3])
    assert lonely_max(stack, Chunk(top_size=3))
    assert not lonely_max(stack, Chunk(top_size=2))


@pytest.mark.parametrize(
    "values, size, ascending, descending",
    [
        ([1, 2, 3, 4], 4, True, False),
        ([5, 9, 12], 3, True, False),
        ([1, 2, 3, 0], 3, True, False),
        ([1, 2, 3, 0], 4, False, False),
        ([9, 4, 1], 3, False, True),
    ],
)
def test_chunk_sorted_from_head(values, size, ascending, descending):
    stack = _ranked(values)
    assert chunk_is_sorted(stack.head, size) is bool(ascending)
    assert chunk_is_sorted_reverse(stack.head, size) is bool(descending)


@pytest.mark.parametrize(
    "values, downwards, upwards",
    [([1, 2, 3], False, True), ([3, 2, 1], True, False)],
)
def test_bot_sorted_reads_upwards(values, downwards, upwards):
    stack = _ranked(values)
    assert is_bot_sorted(stack.last(), 3) is downwards
    assert is_bot_sorted_rev(stack.last(), 3) is upwards


def test_min_on_top():
    stack = Stack(range(6))
    marker = list(stack)[3]
    assert min_on_top(stack, Chunk(min_size=3, min=marker))
    assert not min_on_top(stack, Chunk(min_size=2, min=marker))
    assert not min_on_top(Stack([1]), Chunk(min_size=3, min=stack.head))