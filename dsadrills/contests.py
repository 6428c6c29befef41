"""Short contest problems: marks, bit strings, mirror pairs, frogs, crafting, trails."""

from __future__ import annotations

import argparse
import math
import sys
from collections import defaultdict
from collections.abc import Iterator, Sequence

# Cutoff on the running product; longer windows are not examined past it.
_PRODUCT_LIMIT = 1_215_752_192


def add_twenty(n: int) -> int:
    """Return ``n`` plus twenty."""
    return n + 20


def increasing_marks(values: Sequence[int]) -> list[int]:
    """Mark each value 1 if it beats every earlier value, 0 if it is below the best.

    A value equal to the best so far gets no mark at all.
    """
    marks: list[int] = []
    best: int | None = None
    for value in values:
        if best is None or value > best:
            marks.append(1)
            best = value
        elif value < best:
            marks.append(0)
    return marks


def binary_strings_verdict(s1: str, s2: str) -> bool:
    """Tell whether two bit strings differ somewhere or share an odd number of ones."""
    if len(s1) != len(s2):
        raise ValueError("the two strings must have the same length")
    both_ones = 0
    differ = False
    for a, b in zip(s1, s2):
        if a == "1" and b == "1":
            both_ones += 1
        elif not (a == "0" and b == "0"):
            differ = True
    return both_ones % 2 == 1 or differ


def max_product_equivalent_length(nums: Sequence[int]) -> int:
    """Length of the longest window whose product equals its lcm times its gcd."""
    best = 1
    for i, first in enumerate(nums):
        gcd_value = lcm_value = product = first
        for j in range(i + 1, len(nums)):
            if product > _PRODUCT_LIMIT:
                break
            value = nums[j]
            product *= value
            lcm_value = math.lcm(lcm_value, value)
            gcd_value = math.gcd(gcd_value, value)
            if product == lcm_value * gcd_value:
                best = max(best, j - i + 1)
    return best


def mirror_score(s: str) -> int:
    """Sum the distances between each letter and the nearest unmatched mirror before it."""
    open_positions: defaultdict[str, list[int]] = defaultdict(list)
    total = 0
    for i, char in enumerate(s):
        mirror = chr(ord("z") - (ord(char) - ord("a")))
        waiting = open_positions[mirror]
        if waiting:
            total += i - waiting.pop()
        else:
            open_positions[char].append(i)
    return total


def two_frogs(n: int, a: int, b: int) -> bool:
    """Tell whether the first frog wins: the pads are an even distance apart."""
    return abs(a - b) % 2 == 0


def can_craft(own: Sequence[int], need: Sequence[int]) -> bool:
    """Tell whether the two smallest surpluses of owned over needed still add to zero or more."""
    if len(own) != len(need):
        raise ValueError("own and need must have the same length")
    if not own:
        raise ValueError("can_craft() needs at least one material")
    surplus = sorted(have - want for have, want in zip(own, need))
    if len(surplus) == 1:
        return surplus[0] >= 0
    return surplus[0] + surplus[1] >= 0


def restore_trail(
    n: int, m: int, steps: str, grid: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Fill the path cells so that every row and column sums to zero.

    The path starts at the top-left cell and follows ``steps`` of 'R' and 'D'.
    A new grid is returned; ``grid`` is left unchanged.
    """
    if len(grid) != n or any(len(row) != m for row in grid):
        raise ValueError(f"grid must be {n} by {m}")
    result = [list(row) for row in grid]
    path = [(0, 0)]
    x = y = 0
    for step in steps:
        if step == "R":
            y += 1
        elif step == "D":
            x += 1
        else:
            raise ValueError(f"unknown step {step!r}")
        if x >= n or y >= m:
            raise ValueError("the path leaves the grid")
        path.append((x, y))

    row_sums = [sum(row) for row in result]
    col_sums = [sum(column) for column in zip(*result)] if m else []
    for (row, col), step in zip(path, steps):
        value = -row_sums[row] if step == "D" else -col_sums[col]
        result[row][col] = value
        row_sums[row] += value
        col_sums[col] += value
    result[n - 1][m - 1] = -col_sums[m - 1]
    return result


class _Tokens:
    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("input ended early") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"not an integer: {token!r}") from None

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]


def _spaced(values: Sequence[int]) -> str:
    return "".join(f"{value} " for value in values)


def _run_plus20(tokens: _Tokens) -> None:
    print(add_twenty(tokens.integer()))


def _run_marks(tokens: _Tokens) -> None:
    for _ in range(tokens.integer()):
        n = tokens.integer()
        print(_spaced(increasing_marks(tokens.integers(n))))


def _run_binary(tokens: _Tokens) -> None:
    for _ in range(tokens.integer()):
        tokens.integer()
        s1, s2 = tokens.word(), tokens.word()
        print("YES" if binary_strings_verdict(s1, s2) else "NO")
        print()


def _run_frogs(tokens: _Tokens) -> None:
    for _ in range(tokens.integer()):
        n, a, b = tokens.integers(3)
        print("yes" if two_frogs(n, a, b) else "no")


def _run_crafting(tokens: _Tokens) -> None:
    for _ in range(tokens.integer()):
        n = tokens.integer()
        own = tokens.integers(n)
        need = tokens.integers(n)
        print("YES" if can_craft(own, need) else "NO")


def _run_trail(tokens: _Tokens) -> None:
    for _ in range(tokens.integer()):
        n, m = tokens.integers(2)
        steps = tokens.word()
        grid = [tokens.integers(m) for _ in range(n)]
        for row in restore_trail(n, m, steps, grid):
            print(_spaced(row))


_PROBLEMS = {
    "plus20": _run_plus20,
    "marks": _run_marks,
    "binary": _run_binary,
    "frogs": _run_frogs,
    "crafting": _run_crafting,
    "trail": _run_trail,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the chosen contest problem for the test cases on standard input."""
    parser = argparse.ArgumentParser(
        prog="dsadrills-contest",
        description="Read a contest problem's input from standard input and print its answers.",
    )
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    args = parser.parse_args(argv)
    tokens = _Tokens(sys.stdin.read())
    try:
        _PROBLEMS[args.problem](tokens)
    except ValueError as exc:
        parser.error(str(exc))
    return 0