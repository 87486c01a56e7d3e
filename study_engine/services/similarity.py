"""
Fuzzy string matching for typed answers.

Similarity is the Levenshtein edit distance normalised by the longer string:
    similarity = 1 - distance / max(len(a), len(b))
Both inputs are trimmed and case-folded first. Characters are compared
code point by code point; no Unicode normalisation is applied.
"""
from __future__ import annotations

MATCH_THRESHOLD = 0.8


def levenshtein_distance(a: str, b: str) -> int:
    """Number of single-character inserts, deletes and substitutions turning a into b."""
    m, n = len(a), len(b)
    # dp[i][j] = distance between a[:i] and b[:j]
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if a[i - 1] == b[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = 1 + min(
                    dp[i - 1][j],  # deletion
                    dp[i][j - 1],  # insertion
                    dp[i - 1][j - 1],  # substitution
                )
    return dp[m][n]


def similarity(a: str, b: str) -> float:
    """Similarity ratio in [0, 1]; 1 means identical ignoring case and surrounding whitespace."""
    a_norm = a.strip().casefold()
    b_norm = b.strip().casefold()

    max_len = max(len(a_norm), len(b_norm))
    if max_len == 0:
        return 1.0

    return 1.0 - levenshtein_distance(a_norm, b_norm) / max_len


def is_close_enough(user: str, correct: str, threshold: float = MATCH_THRESHOLD) -> bool:
    return similarity(user, correct) >= threshold
