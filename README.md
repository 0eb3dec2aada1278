# pushswap

Sorts a list of integers using only the operations of the push_swap
puzzle. Each operation it performs is printed on its own line.

The puzzle has two stacks, `a` and `b`. Stack `a` starts with the given
numbers, with the first number on top. Stack `b` starts empty. The
allowed operations are:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both up by one (the top goes to the bottom) |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both down by one (the bottom goes to the top) |

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
python -m pushswap.cli 5 1 4
```

You can give the numbers as separate arguments, as one quoted argument,
or as a mix of both. The operations go to standard output, one per line.
After the last operation the word `GOOD` is written, with no newline.

- With no arguments, nothing is printed.
- If the numbers are already in ascending order, nothing is printed.
- If the input is invalid, `Error` is printed on standard error. The
  input is invalid when:
  - an argument is empty or holds only spaces,
  - a token is not an optionally signed run of digits,
  - two tokens denote the same number,
  - a number has more than ten significant digits, or
  - a number lies outside the signed 32-bit range.

The exit status is 0 in every case.

## Library use

```python
import io

from pushswap.stacks import Stacks
from pushswap.sorting import sort_stacks

out = io.StringIO()
stacks = Stacks([3, 1, 2], out)
sort_stacks(stacks)
print(out.getvalue())   # "rra\nsa\n" style listing
print(stacks.a)         # [1, 2, 3]
print(stacks.history)   # the Operation members applied
```

- `pushswap.stacks`
  - `Stacks` holds the lists `a` and `b`. The first item of each list is the top.
  - `Stacks.apply(name)` performs one operation and writes its name to the output stream. The name may be a string or an `Operation` member. It then records the operation in `history` and returns it.
  - An unknown name raises `UnknownOperationError`, which is a `ValueError`.
  - The functions `swap`, `push`, `rotate` and `reverse_rotate` act on plain lists.
- `pushswap.parsing`
  - `parse_arguments(args)` turns command-line arguments into a list of integers. It raises `ParseError` on invalid input.
  - The individual checks are also available: `has_blank_argument`, `has_bad_sign`, `has_duplicate`, `has_long_number`, `is_out_of_limits` and `check_tokens`.
  - The conversion helpers `atoi`, `atol` and `split_words` are available too.
- `pushswap.sorting`
  - `sort_stacks(stacks)` sorts `a`. It leaves an already sorted stack alone.
  - Stacks of up to three numbers are sorted with a few fixed moves.
  - Larger stacks are first split into `b`. The cheapest element is then inserted back into `a` at each step.

## What it does not do

There is no checker command. The package does not read a list of
instructions from input to verify that they sort a stack. To replay
instructions yourself, call `Stacks.apply` for each one and compare the
result with `pushswap.sorting.is_sorted`.

## Running the tests

```
pip install ".[test]"
pytest
```