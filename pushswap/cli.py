"""Command line entry: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.args import ArgumentError, parse_arguments
from pushswap.sort import sort_a
from pushswap.stack import Stacks


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the numbers given as arguments and print each operation used."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        return 0
    try:
        values = parse_arguments(argv)
    except ArgumentError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    stacks = Stacks(values)
    sort_a(stacks)
    return 0


if __name__ == "__main__":
    sys.exit(main())