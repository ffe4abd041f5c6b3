"""Command that prints the moves sorting the numbers given as arguments."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.parsing import ParseError, parse_arguments
from pushswap.resolve import sort_values


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one move per line; print Error and return 1 on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        return 1
    try:
        values = parse_arguments(args)
    except ParseError:
        print("Error")
        return 1
    for operation in sort_values(values):
        print(operation)
    return 0


if __name__ == "__main__":
    sys.exit(main())