import io
import sys

import pytest

from dsadrills.basics import (
    is_palindrome,
    main,
    missing_number,
    move_zeroes,
    odd_occurrence,
    repeating_elements,
    reverse_array,
    sort_colors,
    union_intersection,
)


def test_missing_number_source_example():
    assert missing_number([1, 2, 3, 5], 4) == 4


@pytest.mark.parametrize("gap", [1, 3, 7, 10])
def test_missing_number_recovers_removed_value(gap):
    full = list(range(1, 11))
    arr = [v for v in full if v != gap]
    assert missing_number(arr, len(arr)) == gap


def test_move_zeroes_invariants():
    original = [0, 1, 0, 3, 12, 0, 5]
    nums = list(original)
    move_zeroes(nums)
    nonzero = [v for v in original if v != 0]
    assert nums[: len(nonzero)] == nonzero
    assert all(v == 0 for v in nums[len(nonzero):])
    assert len(nums) == len(original)


def test_move_zeroes_all_zero_unchanged():
    nums = [0, 0, 0]
    move_zeroes(nums)
    assert nums == [0, 0, 0]


def test_odd_occurrence_source_example():
    assert odd_occurrence([2, 3, 5, 4, 5, 2, 4, 3, 5, 2, 4, 4, 2]) == 5


def test_odd_occurrence_none_when_all_even():
    assert odd_occurrence([1, 1, 2, 2]) is None


@pytest.mark.parametrize(
    "x, expected",
    [(121, True), (-121, False), (10, False), (0, True), (1221, True), (123, False)],
)
def test_is_palindrome(x, expected):
    assert is_palindrome(x) is expected


def test_reverse_array_source_example():
    original = [1, 4, 3, 2, 6, 5]
    arr = list(original)
    reverse_array(arr)
    assert arr == original[::-1]


def test_reverse_array_twice_is_identity():
    arr = [9, 8, 7]
    reverse_array(arr)
    reverse_array(arr)
    assert arr == [9, 8, 7]


def test_sort_colors_sorts():
    original = [2, 0, 2, 1, 1, 0]
    nums = list(original)
    sort_colors(nums)
    assert nums == sorted(original)


def test_sort_colors_rejects_other_values():
    with pytest.raises(ValueError):
        sort_colors([0, 3, 1])


def test_repeating_elements_source_example():
    assert repeating_elements([1, 5, 2, 4, 8, 9, 3, 1, 4, 0]) == [1, 4]


def test_repeating_elements_none():
    assert repeating_elements([1, 2, 3]) == []


def test_union_intersection_invariants():
    a = [5, 1, 3, 3, 7]
    b = [3, 9, 7, 2]
    union, intersection = union_intersection(a, b)
    assert union == sorted(set(a) | set(b))
    assert all(v in b for v in intersection)
    assert [v for v in a if v in intersection] == intersection
    assert intersection.count(3) == 2


def test_main_prints_union_and_intersection(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("4\n1 2 3 4\n3\n3 4 5\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "1 2 3 4 5 \n3 4 \n"


def test_main_rejects_short_input(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n1 2\n"))
    with pytest.raises(SystemExit):
        main([])