"""Edit-distance utilities for family search and report clustering.

Design constraints
------------------
* No network calls, no external model inference.
* Pure Python + standard library only.
* Comparisons are case-sensitive; callers lowercase first.

Safety rule: raw values are never logged.
"""
from __future__ import annotations


# ---------------------------------------------------------------------------
# Levenshtein distance
# ---------------------------------------------------------------------------

def levenshtein(a: str, b: str) -> int:
    """Return the Levenshtein edit distance between *a* and *b*.

    The minimum number of single-character insertions, deletions or
    substitutions turning *a* into *b*, each costing 1.  Computed over a
    ``(len(a) + 1) x (len(b) + 1)`` table where cell ``[i][j]`` holds the
    distance between the first ``i`` characters of *a* and the first ``j``
    characters of *b*.

    Raises
    ------
    TypeError
        If either argument is not a ``str``.  Values are not coerced.
    """
    if not isinstance(a, str) or not isinstance(b, str):
        raise TypeError(
            f"levenshtein() expects two str, got {type(a).__name__} and {type(b).__name__}"
        )

    la, lb = len(a), len(b)
    dp = [[0] * (lb + 1) for _ in range(la + 1)]
    for i in range(la + 1):
        dp[i][0] = i
    for j in range(lb + 1):
        dp[0][j] = j

    for i in range(1, la + 1):
        for j in range(1, lb + 1):
            if a[i - 1] == b[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = 1 + min(
                    dp[i - 1][j],      # delete
                    dp[i][j - 1],      # insert
                    dp[i - 1][j - 1],  # substitute
                )

    return dp[la][lb]


# ---------------------------------------------------------------------------
# Containment
# ---------------------------------------------------------------------------

def contains_either(a: str, b: str) -> bool:
    """Return True if *a* is a substring of *b* or *b* of *a*."""
    return a in b or b in a


def is_near(a: str, b: str, max_distance: int) -> bool:
    """Return True if ``levenshtein(a, b) < max_distance``.

    Skips the table when the length gap alone already rules a match out.
    """
    if abs(len(a) - len(b)) >= max_distance:
        return False
    return levenshtein(a, b) < max_distance
