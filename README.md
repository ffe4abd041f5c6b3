# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a
fixed set of instructions:

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | reverse rotate: the bottom element comes to the top |

All numbers start on stack `a`, with the first argument on top. A sequence
of instructions solves the puzzle when `a` ends up in ascending order and
`b` is empty.

## Installation

```
pip install .
```

## Finding a solution

```
push-swap 3 1 2 5 4
```

The program prints one instruction per line and exits with status 0.

- With fewer than two numbers it prints nothing and exits with status 1.
- Two or three numbers are sorted directly; nothing is printed if they are
  already in order. Four or more numbers are sorted by splitting them
  into chunks of thirds, recursively, which produces moves even when the
  input is already sorted.
- If an argument is not an optional sign followed by digits, does not fit
  in a 32-bit signed integer, or repeats another one, it prints `Error`
  and exits with status 1.

## Checking a solution

`pushswap-checker` takes the same arguments and reads instructions from
standard input, one per line:

```
push-swap 3 1 2 5 4 | pushswap-checker 3 1 2 5 4
```

It prints `OK` if the instructions leave `a` sorted and `b` empty, and `KO`
otherwise.

- While `b` is empty, `pa`, `rb`, `rrb` and `sb` are ignored, and `rr` and
  `rrr` act on `a` alone.
- A line that names no instruction makes it print `Error` and exit with
  status 1.
- Invalid arguments make it print `Error` and exit with status 0; fewer
  than two arguments make it exit with status 1 without output.

## Using it from Python

```python
from pushswap.resolve import sort_values
from pushswap.checker import check

moves = sort_values([3, 1, 2, 5, 4])
print(check([3, 1, 2, 5, 4], [f"{move}\n" for move in moves]))  # True
```

- `pushswap.resolve.sort_values` returns the list of
  `pushswap.operations.Operation` moves that sort the numbers.
- `pushswap.operations.Board` holds the two stacks (`a` and `b`, each a
  `pushswap.stack.Stack`), has one method per instruction, and applies an
  instruction by name with `apply`. With `record=True` (the default) it
  keeps the moves made in `operations`.
- `pushswap.checker.apply_instruction` performs one instruction line on a
  board, following the checker's rules; `pushswap.checker.check` runs a
  whole sequence and raises `pushswap.checker.CheckerError` on an unknown
  line.
- `pushswap.parsing.parse_arguments` checks command-line arguments and
  turns them into integers, and raises `pushswap.parsing.ParseError` when
  the input is not valid.

## Running the tests

```
pip install .[test]
pytest
```