"""Edit-distance similarity used for brand and keyword matching."""

from __future__ import annotations

import math
from typing import List, Optional

from anchorlens.core.cache import SimilarityCache


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance with unit costs, using two rolling rows."""

    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    # Keep the shorter string on the row axis.
    if len(b) > len(a):
        a, b = b, a

    previous: List[int] = list(range(len(b) + 1))
    current: List[int] = [0] * (len(b) + 1)

    for i in range(1, len(a) + 1):
        current[0] = i
        char_a = a[i - 1]
        for j in range(1, len(b) + 1):
            cost = 0 if char_a == b[j - 1] else 1
            current[j] = min(
                current[j - 1] + 1,
                previous[j] + 1,
                previous[j - 1] + cost,
            )
        previous, current = current, previous

    return previous[len(b)]


def similarity_percent(a: str, b: str) -> int:
    """Return how alike ``a`` and ``b`` are as an integer percentage.

    The score is ``(max_len - distance) / max_len`` rounded half-up, and two
    empty strings count as identical.
    """

    max_length = max(len(a), len(b))
    if max_length == 0:
        return 100
    distance = edit_distance(a, b)
    percentage = ((max_length - distance) / max_length) * 100
    return int(math.floor(percentage + 0.5))


class SimilarityEngine:
    """Memoised :func:`similarity_percent` backed by a :class:`SimilarityCache`."""

    def __init__(self, cache: Optional[SimilarityCache] = None) -> None:
        self.cache = cache if cache is not None else SimilarityCache()

    def similarity(self, a: str, b: str) -> int:
        key = (a, b)
        cached = self.cache.get(key)
        if cached is not None:
            return cached
        score = similarity_percent(a, b)
        self.cache.set(key, score)
        return score

    __call__ = similarity
