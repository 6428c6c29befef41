"""Elementary array and number exercises."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Iterable, Sequence


def missing_number(arr: Iterable[int], n: int) -> int:
    """Return the value missing from ``arr``, which holds ``1..n+1`` less one."""
    return sum(range(1, n + 2)) - sum(arr)


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end in place, keeping the other values in order."""
    zeros = nums.count(0)
    nums[:] = [value for value in nums if value != 0] + [0] * zeros


def odd_occurrence(arr: Iterable[int]) -> int | None:
    """Return a value that occurs an odd number of times, or None if none does."""
    counts = Counter(arr)
    return next((value for value, count in counts.items() if count % 2 == 1), None)


def is_palindrome(x: int) -> bool:
    """Tell whether the decimal digits of ``x`` read the same both ways."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def reverse_array(arr: list[int]) -> None:
    """Reverse ``arr`` in place."""
    arr.reverse()


def sort_colors(nums: list[int]) -> None:
    """Sort a list holding only 0, 1 and 2 in place."""
    counts = Counter(nums)
    unexpected = set(counts) - {0, 1, 2}
    if unexpected:
        raise ValueError(f"values other than 0, 1 and 2: {sorted(unexpected)}")
    nums[:] = [0] * counts[0] + [1] * counts[1] + [2] * counts[2]


def repeating_elements(arr: Iterable[int]) -> list[int]:
    """Return the values that occur more than once, in order of first appearance."""
    return [value for value, count in Counter(arr).items() if count > 1]


def union_intersection(
    a: Sequence[int], b: Sequence[int]
) -> tuple[list[int], list[int]]:
    """Return the sorted union of both lists and the items of ``a`` found in ``b``."""
    union = sorted(set(a) | set(b))
    members = set(b)
    intersection = [value for value in a if value in members]
    return union, intersection


def _read_list(tokens: Iterable[str], parser: argparse.ArgumentParser) -> list[int]:
    tokens = iter(tokens)
    try:
        count = int(next(tokens))
        values = [int(next(tokens)) for _ in range(count)]
    except StopIteration:
        parser.error("input ended early")
    except ValueError as exc:
        parser.error(f"not an integer: {exc}")
    return values


def main(argv: Sequence[str] | None = None) -> int:
    """Read two counted integer lists from stdin and print their union and intersection."""
    parser = argparse.ArgumentParser(
        prog="dsadrills-union",
        description="Read 'n a1..an m b1..bm' from standard input and print "
        "the sorted union and the intersection of the two lists.",
    )
    parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    a = _read_list(tokens, parser)
    b = _read_list(tokens, parser)
    union, intersection = union_intersection(a, b)
    print("".join(f"{value} " for value in union))
    print("".join(f"{value} " for value in intersection))
    return 0