"""Classic problems on integer arrays."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from itertools import accumulate
from typing import Sequence


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct triple of values summing to zero, each sorted."""
    values = sorted(nums)
    n = len(values)
    triples: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        target = -first
        k = n - 1
        for j in range(i + 1, n):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            while j < k and values[j] + values[k] > target:
                k -= 1
            if j == k:
                break
            if values[j] + values[k] == target:
                triples.append([first, values[j], values[k]])
    return triples


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return indices ``[i, j]`` with ``nums[i] + nums[j] == target``, or ``[]``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [partner, index]
        seen[value] = index
    return []


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Length of the shortest contiguous run with sum at least ``target``; 0 if none."""
    if target <= 0:
        raise ValueError("target must be positive")
    best: int | None = None
    total = 0
    start = 0
    for end, value in enumerate(nums):
        total += value
        while total >= target:
            length = end - start + 1
            best = length if best is None else min(best, length)
            total -= nums[start]
            start += 1
    return best or 0


def k_sum(nums: Sequence[int], k: int) -> int:
    """Return the k-th largest sum over all subsequences (the empty one included)."""
    if not nums:
        raise ValueError("nums must not be empty")
    if k < 1:
        raise ValueError("k must be at least 1")
    total = sum(value for value in nums if value > 0)
    magnitudes = sorted(abs(value) for value in nums)
    heap = [(magnitudes[0], 0)]
    removed = 0
    for _ in range(k - 1):
        if not heap:
            raise ValueError("k exceeds the number of subsequences")
        removed, i = heapq.heappop(heap)
        if i + 1 < len(magnitudes):
            following = magnitudes[i + 1]
            heapq.heappush(heap, (removed + following, i + 1))
            heapq.heappush(heap, (removed - magnitudes[i] + following, i + 1))
    return total - removed


def move_zeroes(nums: Sequence[int]) -> list[int]:
    """Return the values with every zero moved to the end, order otherwise kept."""
    nonzero = [value for value in nums if value != 0]
    return nonzero + [0] * (len(nums) - len(nonzero))


def trap(height: Sequence[int]) -> int:
    """Units of rain water held between the bars of an elevation map."""
    if not height:
        return 0
    left = accumulate(height, max)
    right = list(accumulate(reversed(height), max))[::-1]
    return sum(min(lo, hi) - h for lo, hi, h in zip(left, right, height))


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Count contiguous subarrays whose sum equals ``k``."""
    prefix_counts = Counter({0: 1})
    running = 0
    count = 0
    for value in nums:
        running += value
        count += prefix_counts[running - k]
        prefix_counts[running] += 1
    return count


def sorted_squares(nums: Sequence[int]) -> list[int]:
    """Squares of a sorted sequence, themselves in ascending order."""
    result: deque[int] = deque()
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        if abs(nums[lo]) >= abs(nums[hi]):
            result.appendleft(nums[lo] * nums[lo])
            lo += 1
        else:
            result.appendleft(nums[hi] * nums[hi])
            hi -= 1
    return list(result)


def top_k_frequent(nums: Sequence[int], k: int) -> list[int]:
    """The ``k`` most frequent values, least frequent of them first."""
    if k <= 0:
        return []
    chosen = Counter(nums).most_common(k)
    return [value for value, _ in reversed(chosen)]