"""Array and subarray problems: sums, products, rotations and counting."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return ``[i, j]`` with ``j < i`` and ``nums[i] + nums[j] == target``, or ``[]``."""
    seen: dict[int, int] = {}
    for i, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return [i, seen[complement]]
        seen[value] = i
    return []


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct sorted triple of values that sums to zero."""
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        j, k = i + 1, n - 1
        while j < k:
            total = first + values[j] + values[k]
            if total < 0:
                j += 1
            elif total > 0:
                k -= 1
            else:
                result.append([first, values[j], values[k]])
                while k > j and values[j] == values[j + 1]:
                    j += 1
                while k > j and values[k] == values[k - 1]:
                    k -= 1
                j += 1
                k -= 1
    return result


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct sorted quadruple of values that sums to ``target``."""
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    for i in range(n):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, n):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            k, l = j + 1, n - 1
            while k < l:
                total = values[i] + values[j] + values[k] + values[l]
                if total == target:
                    result.append([values[i], values[j], values[k], values[l]])
                    k += 1
                    l -= 1
                    while k < l and values[k] == values[k - 1]:
                        k += 1
                    while k < l and values[l] == values[l + 1]:
                        l -= 1
                elif total < target:
                    k += 1
                else:
                    l -= 1
    return result


def find_max_length(nums: Sequence[int]) -> int:
    """Length of the longest contiguous subarray with equal numbers of 0 and 1."""
    first_seen = {0: -1}
    prefix = 0
    best = 0
    for i, value in enumerate(nums):
        prefix += -1 if value == 0 else 1
        if prefix in first_seen:
            best = max(best, i - first_seen[prefix])
        else:
            first_seen[prefix] = i
    return best


def increasing_triplet(nums: Sequence[int]) -> bool:
    """Tell whether some ``i < j < k`` has ``nums[i] < nums[j] < nums[k]``."""
    low = mid = math.inf
    for value in nums:
        if value > mid:
            return True
        if low < value < mid:
            mid = value
        elif value < low:
            low = value
    return False


def max_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("max_subarray() needs at least one value")
    running = 0
    best = -math.inf
    for value in nums:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return int(best)


def max_ascending_sum(nums: Sequence[int]) -> int:
    """Largest sum of a strictly ascending contiguous subarray; 0 for no values."""
    best = 0
    running = 0
    previous = None
    for value in nums:
        if previous is None or previous < value:
            running += value
        else:
            running = value
        best = max(best, running)
        previous = value
    return best


def max_product(nums: Sequence[int]) -> int:
    """Largest product of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("max_product() needs at least one value")
    prefix = suffix = 1
    best = -math.inf
    for front, back in zip(nums, reversed(nums)):
        if prefix == 0:
            prefix = 1
        if suffix == 0:
            suffix = 1
        prefix *= front
        suffix *= back
        best = max(best, prefix, suffix)
    return int(best)


def product_except_self(arr: Sequence[int]) -> list[int]:
    """For each position, the product of every other value."""
    prefixes = []
    running = 1
    for value in arr:
        prefixes.append(running)
        running *= value
    suffixes = []
    running = 1
    for value in reversed(arr):
        suffixes.append(running)
        running *= value
    suffixes.reverse()
    return [p * s for p, s in zip(prefixes, suffixes)]


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places in place."""
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = nums[-k:] + nums[:-k]


def row_and_maximum_ones(mat: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Return the index of the first row with the most ones, and that count."""
    if not mat:
        raise ValueError("row_and_maximum_ones() needs at least one row")
    best_index, best_count = -1, -1
    for index, row in enumerate(mat):
        count = sum(1 for value in row if value == 1)
        if count > best_count:
            best_index, best_count = index, count
    return best_index, best_count


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Number of contiguous subarrays whose sum is ``k``."""
    seen = Counter({0: 1})
    prefix = 0
    result = 0
    for value in nums:
        prefix += value
        result += seen[prefix - k]
        seen[prefix] += 1
    return result


def num_subarray_product_less_than_k(nums: Sequence[int], k: int) -> int:
    """Number of contiguous subarrays of positive values whose product is below ``k``."""
    if k <= 0:
        return 0
    product = 1
    start = 0
    count = 0
    for end, value in enumerate(nums):
        product *= value
        while product >= k and start <= end:
            product //= nums[start]
            start += 1
        count += end - start + 1
    return count


def zero_sum_subarray_exists(arr: Sequence[int]) -> bool:
    """Tell whether some non-empty contiguous subarray sums to zero."""
    seen: set[int] = set()
    total = 0
    for value in arr:
        total += value
        if total == 0 or total in seen:
            return True
        seen.add(total)
    return False