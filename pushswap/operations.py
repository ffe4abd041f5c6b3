"""The eleven moves of the puzzle, applied to a pair of stacks."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Union

from pushswap.stack import Stack


class Operation(str, Enum):
    """A move, named as it is written in an instruction list."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


class Board:
    """Stacks a and b, with the list of moves made when recording is on."""

    def __init__(self, values: Iterable[int] = (), record: bool = True) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.record = record
        self.operations: list[Operation] = []

    def _log(self, operation: Operation) -> None:
        if self.record:
            self.operations.append(operation)

    def sa(self) -> None:
        self.a.swap()
        self._log(Operation.SA)

    def sb(self) -> None:
        self.b.swap()
        self._log(Operation.SB)

    def ss(self) -> None:
        self.a.swap()
        self.b.swap()
        self._log(Operation.SS)

    def pa(self) -> None:
        """Move the top of b onto a; an empty b leaves both unchanged."""
        if self.b:
            self.a.push_front(self.b.pop_front())
        self._log(Operation.PA)

    def pb(self) -> None:
        """Move the top of a onto b; an empty a leaves both unchanged."""
        if self.a:
            self.b.push_front(self.a.pop_front())
        self._log(Operation.PB)

    def ra(self) -> None:
        self.a.rotate()
        self._log(Operation.RA)

    def rb(self) -> None:
        self.b.rotate()
        self._log(Operation.RB)

    def rr(self) -> None:
        self.a.rotate()
        self.b.rotate()
        self._log(Operation.RR)

    def rra(self) -> None:
        self.a.reverse_rotate()
        self._log(Operation.RRA)

    def rrb(self) -> None:
        self.b.reverse_rotate()
        self._log(Operation.RRB)

    def rrr(self) -> None:
        self.a.reverse_rotate()
        self.b.reverse_rotate()
        self._log(Operation.RRR)

    def apply(self, operation: Union[Operation, str]) -> None:
        """Perform a move given as an Operation or its name."""
        move = Operation(operation)
        getattr(self, move.value)()