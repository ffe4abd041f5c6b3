"""Command that reads moves from standard input and says whether they sort the numbers."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from pushswap.operations import Board, Operation
from pushswap.parsing import ParseError, parse_arguments


class CheckerError(ValueError):
    """An instruction line names no known move."""


# The order in which an instruction line is tried against the move names.
_ORDER = (
    Operation.PB,
    Operation.PA,
    Operation.RA,
    Operation.RB,
    Operation.RR,
    Operation.RRR,
    Operation.RRA,
    Operation.RRB,
    Operation.SA,
    Operation.SB,
)

# Moves that are skipped, or narrowed to stack a, while b is empty.
_SKIPPED_ON_EMPTY_B = {Operation.PA, Operation.RB, Operation.RRB, Operation.SB}
_NARROWED_ON_EMPTY_B = {Operation.RR: Operation.RA, Operation.RRR: Operation.RRA}


def _matches(operation: Operation, line: str) -> bool:
    """True when the move's line and `line` agree over their common length."""
    expected = f"{operation.value}\n"
    return all(x == y for x, y in zip(expected, line))


def _identify(line: str) -> Operation:
    for operation in _ORDER:
        if _matches(operation, line):
            return operation
    raise CheckerError(f"unknown instruction: {line!r}")


def apply_instruction(board: Board, line: str) -> Optional[Operation]:
    """Perform the move named by one instruction line and return it.

    Moves that need stack b do nothing while b is empty and return None;
    the double rotations then act on a alone.
    """
    operation = _identify(line)
    if not board.b:
        if operation in _SKIPPED_ON_EMPTY_B:
            return None
        operation = _NARROWED_ON_EMPTY_B.get(operation, operation)
    board.apply(operation)
    return operation


def check(values: Iterable[int], lines: Iterable[str]) -> bool:
    """True when the instruction lines leave a sorted and b empty."""
    board = Board(values, record=False)
    for line in lines:
        apply_instruction(board, line)
    return board.a.is_sorted() and not board.b


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print OK or KO for the moves read from standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        return 1
    try:
        values = parse_arguments(args)
    except ParseError:
        print("Error")
        return 0
    try:
        sorted_ok = check(values, sys.stdin)
    except CheckerError:
        print("Error")
        return 1
    print("OK" if sorted_ok else "KO")
    return 0


if __name__ == "__main__":
    sys.exit(main())