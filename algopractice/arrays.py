"""Classic algorithms over flat sequences of integers."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from itertools import groupby


def kth_smallest(values: Iterable[int], k: int) -> int:
    """Return the k-th smallest value, counting from 1."""
    ordered = sorted(values)
    if not 1 <= k <= len(ordered):
        raise ValueError(f"k must be between 1 and {len(ordered)}, got {k}")
    return ordered[k - 1]


def max_element(values: Iterable[int]) -> int:
    """Return the largest value of a non-empty sequence."""
    items = list(values)
    if not items:
        raise ValueError("max_element() of an empty sequence")
    return max(items)


def min_element(values: Iterable[int]) -> int:
    """Return the smallest value of a non-empty sequence."""
    items = list(values)
    if not items:
        raise ValueError("min_element() of an empty sequence")
    return min(items)


def _reverse_digits(number: int) -> int:
    if number <= 0:
        return 0
    return int(str(number)[::-1])


def is_palindrome_array(values: Iterable[int]) -> bool:
    """Tell whether every number reads the same with its digits reversed.

    Negative numbers never qualify; zero does.
    """
    return all(_reverse_digits(value) == value for value in values)


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane)."""
    best: int | None = None
    running = 0
    for value in values:
        running += value
        best = running if best is None else max(best, running)
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum() of an empty sequence")
    return best


def longest_consecutive(values: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers present."""
    present = set(values)
    longest = 0
    for value in present:
        if value - 1 in present:
            continue
        end = value + 1
        while end in present:
            end += 1
        longest = max(longest, end - value)
    return longest


def max_consecutive_ones(values: Iterable[int]) -> int:
    """Return the length of the longest run of ones."""
    return max(
        (sum(1 for _ in run) for key, run in groupby(values) if key == 1),
        default=0,
    )


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping closed intervals; the result is sorted by start."""
    merged: list[list[int]] = []
    for start, end in sorted(list(pair) for pair in intervals):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def remove_duplicates(values: MutableSequence[int]) -> int:
    """Drop repeated neighbours of a sorted list in place; return the new length."""
    if not values:
        return 0
    last = 0
    for current in range(1, len(values)):
        if values[current] != values[last]:
            last += 1
            values[last] = values[current]
    del values[last + 1:]
    return len(values)


def reverse_segment(values: MutableSequence[int], start: int, end: int) -> None:
    """Reverse values[start..end] (both ends inclusive) in place."""
    while start < end:
        values[start], values[end] = values[end], values[start]
        start += 1
        end -= 1


def sort012(values: MutableSequence[int]) -> None:
    """Sort a list holding only 0, 1 and 2 in place in a single pass."""
    low, mid, high = 0, 0, len(values) - 1
    while mid <= high:
        value = values[mid]
        if value == 0:
            values[low], values[mid] = values[mid], values[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        elif value == 2:
            values[mid], values[high] = values[high], values[mid]
            high -= 1
        else:
            raise ValueError(f"sort012() accepts only 0, 1 and 2, got {value}")


def majority_element(values: Iterable[int]) -> int:
    """Return the Boyer-Moore majority candidate of a non-empty sequence."""
    count = 0
    candidate: int | None = None
    for value in values:
        if count == 0:
            candidate = value
        count += 1 if value == candidate else -1
    if candidate is None:
        raise ValueError("majority_element() of an empty sequence")
    return candidate


def majority_elements_third(values: Sequence[int]) -> list[int]:
    """Return every value occurring more than len(values) // 3 times."""
    first: int | None = None
    second: int | None = None
    first_count = second_count = 0
    for value in values:
        if value == first:
            first_count += 1
        elif value == second:
            second_count += 1
        elif first_count == 0:
            first, first_count = value, 1
        elif second_count == 0:
            second, second_count = value, 1
        else:
            first_count -= 1
            second_count -= 1

    threshold = len(values) // 3
    return [
        candidate
        for candidate in (first, second)
        if candidate is not None and values.count(candidate) > threshold
    ]


def three_sum(values: Iterable[int]) -> list[list[int]]:
    """Return the distinct triples of values that sum to zero, in sorted order."""
    nums = sorted(values)
    triples: list[list[int]] = []
    for i, value in enumerate(nums[:-2]):
        if i > 0 and value == nums[i - 1]:
            continue
        lo, hi = i + 1, len(nums) - 1
        wanted = -value
        while lo < hi:
            pair = nums[lo] + nums[hi]
            if pair == wanted:
                triples.append([value, nums[lo], nums[hi]])
                while lo < hi and nums[lo] == nums[lo + 1]:
                    lo += 1
                while lo < hi and nums[hi] == nums[hi - 1]:
                    hi -= 1
                lo += 1
                hi -= 1
            elif pair < wanted:
                lo += 1
            else:
                hi -= 1
    return triples


def trap_rain_water(heights: Sequence[int]) -> int:
    """Return how much water an elevation profile holds after rain."""
    left, right = 0, len(heights) - 1
    max_left = max_right = 0
    water = 0
    while left <= right:
        if heights[left] <= heights[right]:
            if heights[left] >= max_left:
                max_left = heights[left]
            else:
                water += max_left - heights[left]
            left += 1
        else:
            if heights[right] >= max_right:
                max_right = heights[right]
            else:
                water += max_right - heights[right]
            right -= 1
    return water