import math

import pytest

from dsadrills.arrays import (
    find_max_length,
    four_sum,
    increasing_triplet,
    max_ascending_sum,
    max_product,
    max_subarray,
    num_subarray_product_less_than_k,
    product_except_self,
    rotate,
    row_and_maximum_ones,
    subarray_sum,
    three_sum,
    two_sum,
    zero_sum_subarray_exists,
)


@pytest.mark.parametrize(
    "nums, target", [([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([3, 3], 6)]
)
def test_two_sum_indices_hit_target(nums, target):
    i, j = two_sum(nums, target)
    assert j < i
    assert nums[i] + nums[j] == target


def test_two_sum_no_answer():
    assert two_sum([1, 2, 3], 100) == []


def test_three_sum_example():
    assert three_sum([-1, 0, 1, 2, -1, -4]) == [[-1, -1, 2], [-1, 0, 1]]


def test_three_sum_invariants_and_input_untouched():
    nums = [0, 0, 0, 0, -2, 2, 1, -1, 3, -3]
    snapshot = list(nums)
    triples = three_sum(nums)
    assert nums == snapshot
    assert all(sum(t) == 0 and t == sorted(t) for t in triples)
    assert len({tuple(t) for t in triples}) == len(triples)
    assert [0, 0, 0] in triples


def test_four_sum_repeated_values():
    assert four_sum([2, 2, 2, 2, 2], 8) == [[2, 2, 2, 2]]


def test_four_sum_invariants():
    quads = four_sum([1, 0, -1, 0, -2, 2], 0)
    assert quads
    assert all(sum(q) == 0 and q == sorted(q) for q in quads)
    assert len({tuple(q) for q in quads}) == len(quads)


def test_find_max_length_alternating_is_whole():
    nums = [0, 1] * 3
    assert find_max_length(nums) == len(nums)


def test_find_max_length_no_balance():
    assert find_max_length([0, 0, 0]) == 0


def test_increasing_triplet():
    assert increasing_triplet([1, 2, 3, 4, 5]) is True
    assert increasing_triplet([5, 4, 3, 2, 1]) is False
    assert increasing_triplet([2, 1, 5, 0, 4, 6]) is True


def test_max_subarray_example():
    assert max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_max_subarray_properties():
    negatives = [-8, -3, -6]
    positives = [4, 1, 9]
    assert max_subarray(negatives) == max(negatives)
    assert max_subarray(positives) == sum(positives)


def test_max_subarray_empty_raises():
    with pytest.raises(ValueError):
        max_subarray([])


def test_max_ascending_sum_properties():
    ascending = [1, 4, 9, 20]
    descending = [20, 9, 4, 1]
    assert max_ascending_sum(ascending) == sum(ascending)
    assert max_ascending_sum(descending) == max(descending)
    assert max_ascending_sum([]) == 0


def test_max_product_properties():
    positives = [2, 3, 4]
    assert max_product(positives) == math.prod(positives)
    assert max_product([-2, 0, -1]) == 0
    assert max_product([-5]) == -5


def test_max_product_empty_raises():
    with pytest.raises(ValueError):
        max_product([])


def test_product_except_self_invariant():
    arr = [1, 2, 3, 4, 5]
    result = product_except_self(arr)
    total = math.prod(arr)
    assert all(r * v == total for r, v in zip(result, arr))


def test_product_except_self_with_zero():
    result = product_except_self([3, 0, 4])
    assert result[0] == 0
    assert result[2] == 0
    assert result[1] == 3 * 4


def test_rotate_by_one_moves_last_to_front():
    original = [1, 2, 3, 4, 5, 6, 7]
    nums = list(original)
    rotate(nums, 1)
    assert nums == [original[-1]] + original[:-1]


@pytest.mark.parametrize("k", [0, 3, 7, 10])
def test_rotate_round_trip(k):
    original = [1, 2, 3, 4, 5, 6, 7]
    nums = list(original)
    rotate(nums, k)
    rotate(nums, len(nums) - (k % len(nums)))
    assert nums == original


def test_row_and_maximum_ones_first_row_wins_tie():
    assert row_and_maximum_ones([[0, 1], [1, 0]]) == (0, 1)


def test_row_and_maximum_ones_counts_row():
    mat = [[0, 0, 0], [0, 1, 1], [1, 0, 1]]
    index, count = row_and_maximum_ones(mat)
    assert index == 1
    assert count == mat[1].count(1)


def test_row_and_maximum_ones_empty_raises():
    with pytest.raises(ValueError):
        row_and_maximum_ones([])


def test_subarray_sum():
    assert subarray_sum([1, 1, 1], 2) == 2
    assert subarray_sum([0, 0], 0) == 3


def test_num_subarray_product_less_than_k_example():
    assert num_subarray_product_less_than_k([10, 5, 2, 6], 100) == 8


def test_num_subarray_product_less_than_k_edges():
    assert num_subarray_product_less_than_k([1, 2, 3], 0) == 0
    assert num_subarray_product_less_than_k([1, 2, 3], 1) == 0
    nums = [1, 2, 3]
    n = len(nums)
    assert num_subarray_product_less_than_k(nums, 1000) == n * (n + 1) // 2


def test_zero_sum_subarray_exists():
    assert zero_sum_subarray_exists([4, 2, -3, 1, 6]) is True
    assert zero_sum_subarray_exists([4, 2, 0, 1, 6]) is True
    assert zero_sum_subarray_exists([1, 2, 3]) is False
    assert zero_sum_subarray_exists([]) is False