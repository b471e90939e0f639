"""Counting and finding palindromes in strings."""

from __future__ import annotations

from itertools import chain
from typing import Iterator, Tuple


def _expand(s: str, left: int, right: int) -> Iterator[Tuple[int, int]]:
    """Yield the bounds of each palindrome grown outward from the given centre."""
    while left >= 0 and right < len(s) and s[left] == s[right]:
        yield left, right
        left -= 1
        right += 1


def _centres(s: str) -> Iterator[Tuple[int, int]]:
    return chain.from_iterable(
        chain(_expand(s, c, c), _expand(s, c, c + 1)) for c in range(len(s))
    )


def count_palindromes(s: str) -> int:
    """Number of palindromic substrings (by position), by centre expansion."""
    return sum(1 for _ in _centres(s))


def count_palindromes_dp(s: str) -> int:
    """Number of palindromic substrings, by dynamic programming."""
    n = len(s)
    dp = [[False] * n for _ in range(n)]
    count = 0
    for i in reversed(range(n)):
        for j in range(i, n):
            dp[i][j] = s[i] == s[j] and (j - i <= 2 or dp[i + 1][j - 1])
            count += dp[i][j]
    return count


def longest_palindrome(s: str) -> str:
    """Leftmost longest palindromic substring, by centre expansion."""
    if len(s) < 2:
        return s
    best_left, best_right = 0, 0
    for left, right in _centres(s):
        if right - left > best_right - best_left:
            best_left, best_right = left, right
    return s[best_left : best_right + 1]


def longest_palindrome_dp(s: str) -> str:
    """Leftmost longest palindromic substring, by dynamic programming."""
    n = len(s)
    if n < 2:
        return s
    dp = [[False] * n for _ in range(n)]
    best = s[0]
    for j in range(1, n):
        for i in range(j):
            dp[i][j] = s[i] == s[j] and (j - i <= 2 or dp[i + 1][j - 1])
            if dp[i][j] and j - i + 1 > len(best):
                best = s[i : j + 1]
    return best


def longest_palindromic_subsequence(s: str) -> int:
    """Length of the longest palindrome that can be formed by deleting characters."""
    n = len(s)
    if n < 2:
        return n
    dp = [[0] * n for _ in range(n)]
    for i in reversed(range(n)):
        dp[i][i] = 1
        for j in range(i + 1, n):
            if s[i] == s[j]:
                dp[i][j] = dp[i + 1][j - 1] + 2
            else:
                dp[i][j] = max(dp[i + 1][j], dp[i][j - 1])
    return dp[0][n - 1]