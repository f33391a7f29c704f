# Fli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Approximate string matching used for "did you mean" suggestions.

Functions:
- levenshtein: Edit distance between two strings.
- max_distance_for: Default distance threshold for a token of a given length.
- suggest_similar: Candidates within the threshold, ranked by distance with
  ties kept in candidate (registration) order.
"""
from __future__ import annotations

from typing import Iterable


def levenshtein(s1: str, s2: str) -> int:
    """Compute the Levenshtein distance between two strings."""
    if len(s1) < len(s2):
        return levenshtein(s2, s1)
    if not s2:
        return len(s1)
    prev_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        curr_row = [i + 1]
        for j, c2 in enumerate(s2):
            cost = 0 if c1 == c2 else 1
            curr_row.append(
                min(
                    curr_row[j] + 1,
                    prev_row[j + 1] + 1,
                    prev_row[j] + cost,
                )
            )
        prev_row = curr_row
    return prev_row[-1]


def max_distance_for(token: str) -> int:
    """Return the allowed edit distance for `token`: 1 for short tokens, else 2."""
    return max(1, min(2, len(token) // 2))


def suggest_similar(
    token: str, candidates: Iterable[str], max_distance: int | None = None
) -> list[str]:
    """
    Return candidates close to `token`.

    Args:
        token (str): The unmatched input.
        candidates (Iterable[str]): Known names, in registration order.
        max_distance (int | None): Threshold override; defaults to
            `max_distance_for(token)`.

    Returns:
        list[str]: Matches ranked by increasing distance. `sorted` is stable, so
        equal distances keep the order of `candidates`.
    """
    if max_distance is None:
        max_distance = max_distance_for(token)
    scored = []
    for candidate in candidates:
        distance = levenshtein(token, candidate)
        if distance <= max_distance:
            scored.append((distance, candidate))
    scored.sort(key=lambda item: item[0])
    return [candidate for _, candidate in scored]
