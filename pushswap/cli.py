"""Command-line entry point: print the instructions that sort the arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import ParseError, parse_arguments
from .sorting import is_sorted, sort_stacks
from .stacks import Stacks


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the numbers given as arguments, printing each operation used."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 0
    if not values:
        return 0
    stacks = Stacks(values, out=sys.stdout)
    if is_sorted(stacks.a):
        return 0
    sort_stacks(stacks)
    sys.stdout.write("GOOD")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())