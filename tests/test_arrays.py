from collections import Counter

import pytest

from drillbook.arrays import (
    k_sum,
    min_subarray_len,
    move_zeroes,
    sorted_squares,
    subarray_sum,
    three_sum,
    top_k_frequent,
    trap,
    two_sum,
)


@pytest.mark.parametrize("nums", [[-1, 0, 1, 2, -1, -4], [0, 0, 0, 0], [-2, 0, 1, 1, 2, -1]])
def test_three_sum_triples_sum_to_zero_and_are_unique(nums):
    triples = three_sum(nums)
    assert triples
    assert all(sum(t) == 0 for t in triples)
    assert all(t == sorted(t) for t in triples)
    assert len({tuple(t) for t in triples}) == len(triples)
    assert all(Counter(t) <= Counter(nums) for t in triples)


def test_three_sum_no_solution():
    assert not three_sum([1, 2, 3])
    assert not three_sum([])


def test_three_sum_does_not_mutate():
    nums = [3, -3, 0]
    three_sum(nums)
    assert nums == [3, -3, 0]


@pytest.mark.parametrize(
    "nums, target", [([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([3, 3], 6), ([-1, 5, 8, -4], 4)]
)
def test_two_sum_finds_pair(nums, target):
    i, j = two_sum(nums, target)
    assert i < j
    assert nums[i] + nums[j] == target


def test_two_sum_no_pair():
    assert not two_sum([1, 2, 3], 100)


@pytest.mark.parametrize(
    "target, nums", [(7, [2, 3, 1, 2, 4, 3]), (4, [1, 4, 4]), (11, [1, 2, 3, 4, 5])]
)
def test_min_subarray_len_is_minimal(target, nums):
    length = min_subarray_len(target, nums)
    windows = [nums[i:i + length] for i in range(len(nums) - length + 1)]
    assert any(sum(w) >= target for w in windows)
    shorter = [nums[i:i + length - 1] for i in range(len(nums) - length + 2)]
    assert all(sum(w) < target for w in shorter)


def test_min_subarray_len_no_solution():
    assert min_subarray_len(100, [1, 1, 1]) == 0
    assert min_subarray_len(5, []) == 0


def test_min_subarray_len_rejects_non_positive_target():
    with pytest.raises(ValueError):
        min_subarray_len(0, [1, 2])


@pytest.mark.parametrize("nums", [[2, 4, -2], [1, -2, 3, 4, -10, 12], [-5, -1]])
def test_k_sum_sequence(nums):
    sums = [k_sum(nums, k) for k in range(1, 2 ** len(nums) + 1)]
    assert sums[0] == sum(x for x in nums if x > 0)
    assert sums[-1] == sum(x for x in nums if x < 0)
    assert all(a >= b for a, b in zip(sums, sums[1:]))


def test_k_sum_errors():
    with pytest.raises(ValueError):
        k_sum([], 1)
    with pytest.raises(ValueError):
        k_sum([1, 2], 0)
    with pytest.raises(ValueError):
        k_sum([1, 2], 5)


@pytest.mark.parametrize("nums", [[0, 1, 0, 3, 12], [0, 0], [4, 5], []])
def test_move_zeroes(nums):
    original = list(nums)
    result = move_zeroes(nums)
    nonzero = len(nums) - nums.count(0)
    assert Counter(result) == Counter(nums)
    assert 0 not in result[:nonzero]
    assert all(v == 0 for v in result[nonzero:])
    assert nums == original


def test_trap_example():
    assert trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6


def test_trap_monotone_and_empty():
    assert trap([]) == 0
    assert trap([1, 2, 3, 4]) == 0
    assert trap([5, 3, 1]) == 0


@pytest.mark.parametrize("height", [[4, 2, 0, 3, 2, 5], [3, 0, 0, 2, 0, 4]])
def test_trap_symmetric_under_reversal(height):
    assert trap(height) == trap(height[::-1])
    assert trap(height) >= 0


def test_subarray_sum_example():
    assert subarray_sum([1, 1, 1], 2) == 2


@pytest.mark.parametrize("nums", [[1, 2, 3], [3, -1, 4, -2]])
def test_subarray_sum_whole_array_counts(nums):
    assert subarray_sum(nums, sum(nums)) >= 1
    assert subarray_sum(nums, 1000) == 0


@pytest.mark.parametrize("nums", [[-4, -1, 0, 3, 10], [-7, -3, 2, 3, 11], [], [-2, -2]])
def test_sorted_squares(nums):
    result = sorted_squares(nums)
    assert all(a <= b for a, b in zip(result, result[1:]))
    assert Counter(result) == Counter(x * x for x in nums)


def test_top_k_frequent_example():
    assert top_k_frequent([5, 3, 1, 1, 1, 3, 73, 1], 1) == [1]


@pytest.mark.parametrize("k", [1, 2, 3, 10])
def test_top_k_frequent_invariants(k):
    nums = [4, 4, 4, 4, 2, 2, 2, 9, 9, 7]
    result = top_k_frequent(nums, k)
    counts = Counter(nums)
    assert len(result) == min(k, len(counts))
    assert len(set(result)) == len(result)
    assert all(counts[a] <= counts[b] for a, b in zip(result, result[1:]))
    left_out = set(counts) - set(result)
    assert all(counts[v] <= counts[result[0]] for v in left_out)


def test_top_k_frequent_zero():
    assert not top_k_frequent([1, 2, 2], 0)