"""Longest common subsequence of two line sequences"""

from typing import Sequence


def lcs_table(a: Sequence[str], b: Sequence[str]) -> list[list[int]]:
    """Return the (len(a)+1) x (len(b)+1) table where [i][j] is the LCS length of a[:i] and b[:j]."""
    m, n = len(a), len(b)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        row, prev = dp[i], dp[i - 1]
        line = a[i - 1]
        for j in range(1, n + 1):
            if line == b[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])
    return dp


def longest_common_subsequence(a: Sequence[str], b: Sequence[str]) -> list[str]:
    """Return one longest common subsequence of a and b, by exact line equality.

    Backtracking starts at the bottom-right cell. When the two neighbouring
    cells tie, the index into `a` is decremented first, so the result is
    reproducible for a given input pair. Inputs are not modified.
    """
    dp = lcs_table(a, b)
    lcs: list[str] = []
    i, j = len(a), len(b)

    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            lcs.append(a[i - 1])
            i -= 1
            j -= 1
        elif dp[i - 1][j] >= dp[i][j - 1]:
            i -= 1
        else:
            j -= 1

    lcs.reverse()
    return lcs
