"""Binary search over a sorted sequence of integers."""

from __future__ import annotations

from typing import Sequence


def find(numbers: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in sorted ``numbers``, or -1 if absent."""
    left, right = 0, len(numbers) - 1
    while left <= right:
        mid = (left + right) // 2
        value = numbers[mid]
        if value == target:
            return mid
        if value < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1