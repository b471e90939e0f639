"""Two-, three- and four-sum problems."""

from __future__ import annotations

from typing import Iterable, List


def two_sum(nums: Iterable[int], target: int) -> List[int]:
    """Return ``[x, target - x]`` for the first x whose complement came earlier, else []."""
    seen = set()
    for value in nums:
        if target - value in seen:
            return [value, target - value]
        seen.add(value)
    return []


def three_sum(nums: Iterable[int]) -> List[List[int]]:
    """All distinct ascending triples summing to zero."""
    values = sorted(nums)
    result: List[List[int]] = []
    if len(values) <= 2:
        return result
    for k, first in enumerate(values):
        if first > 0:
            break
        if k > 0 and values[k - 1] == first:
            continue
        i, j = k + 1, len(values) - 1
        while i < j:
            total = first + values[i] + values[j]
            if total == 0:
                result.append([first, values[i], values[j]])
                i += 1
                j -= 1
                while i < j and values[i] == values[i - 1]:
                    i += 1
                while i < j and values[j] == values[j + 1]:
                    j -= 1
            elif total < 0:
                i += 1
            else:
                j -= 1
    return result


def three_sum_closest(nums: Iterable[int], target: int) -> int:
    """Sum of three numbers closest to ``target``; 0 when there are fewer than three."""
    values = sorted(nums)
    if len(values) <= 2:
        return 0
    best = values[0] + values[1] + values[2]
    for i, first in enumerate(values):
        left, right = i + 1, len(values) - 1
        while left < right:
            total = first + values[left] + values[right]
            if abs(target - total) < abs(target - best):
                best = total
            if total == target:
                return target
            if total < target:
                left += 1
            else:
                right -= 1
    return best


def four_sum(nums: Iterable[int], target: int) -> List[List[int]]:
    """All distinct ascending quadruples summing to ``target``."""
    values = sorted(nums)
    result: List[List[int]] = []
    n = len(values)
    for z in range(n):
        if z > 0 and values[z] == values[z - 1]:
            continue
        rest = target - values[z]
        for k in range(z + 1, n):
            if k > z + 1 and values[k] == values[k - 1]:
                continue
            need = rest - values[k]
            i, j = k + 1, n - 1
            while i < j:
                pair = values[i] + values[j]
                if pair == need:
                    result.append([values[z], values[k], values[i], values[j]])
                    while i < j and values[i] == values[i + 1]:
                        i += 1
                    while i < j and values[j] == values[j - 1]:
                        j -= 1
                    i += 1
                    j -= 1
                elif pair < need:
                    i += 1
                else:
                    j -= 1
    return result