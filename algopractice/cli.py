"""Command that answers k-th smallest element queries read from input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path

from algopractice.arrays import kth_smallest


def _next_int(tokens: Iterator[str]) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer, got {token!r}") from None


def _answers(tokens: Iterable[str]) -> Iterator[int]:
    stream = iter(tokens)
    for _ in range(_next_int(stream)):
        count = _next_int(stream)
        values = [_next_int(stream) for _ in range(count)]
        k = _next_int(stream)
        yield kth_smallest(values, k)


def main(argv: list[str] | None = None) -> int:
    """Read test cases (t, then n, n values and k per case) and print each answer."""
    parser = argparse.ArgumentParser(
        prog="algopractice",
        description="Print the k-th smallest element of each array given as input.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="file holding the test cases; standard input if left out",
    )
    args = parser.parse_args(argv)

    try:
        text = sys.stdin.read() if args.input is None else Path(args.input).read_text()
    except OSError as exc:
        parser.error(f"cannot read {args.input}: {exc}")

    try:
        for answer in _answers(text.split()):
            print(answer)
    except ValueError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())