"""Two-stack integer sorting puzzle: stacks and moves, a chunk-splitting solver, and a checker."""

__version__ = "1.0.0"