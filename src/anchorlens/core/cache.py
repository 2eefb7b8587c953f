"""Bounded in-memory cache for similarity scores."""

from __future__ import annotations

import dataclasses
import logging
import threading
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)

CacheKey = Tuple[str, str]


@dataclasses.dataclass(slots=True)
class CacheConfig:
    """Configuration for :class:`SimilarityCache`."""

    enabled: bool = True
    max_entries: int = 10_000
    shared: bool = False


class SimilarityCache:
    """Maps an ordered string pair to its similarity percentage.

    When more than ``max_entries`` pairs are held, the next insert clears the
    whole cache first. Keys are order-sensitive: ``(a, b)`` and ``(b, a)`` are
    stored separately even though their scores are equal.
    """

    def __init__(self, config: Optional[CacheConfig] = None) -> None:
        self._config = config or CacheConfig()
        self._lock = threading.RLock()
        self._data: Dict[CacheKey, int] = {}
        self.stats: Dict[str, int] = {"hits": 0, "misses": 0, "resets": 0}

    @property
    def config(self) -> CacheConfig:
        return self._config

    def __len__(self) -> int:
        return len(self._data)

    def get(self, key: CacheKey) -> Optional[int]:
        """Return the cached score for ``key`` if present."""

        if not self._config.enabled:
            return None
        with self._lock:
            value = self._data.get(key)
            if value is None:
                self.stats["misses"] += 1
            else:
                self.stats["hits"] += 1
            return value

    def set(self, key: CacheKey, value: int) -> None:
        """Store ``value`` under ``key``, clearing everything once over the bound."""

        if not self._config.enabled:
            return
        with self._lock:
            if len(self._data) > self._config.max_entries:
                logger.debug("Similarity cache exceeded %d entries, clearing", self._config.max_entries)
                self._data.clear()
                self.stats["resets"] += 1
            self._data[key] = value


_SHARED_CACHE: Optional[SimilarityCache] = None


def cache_for_run(config: CacheConfig) -> SimilarityCache:
    """Return a fresh cache, or the process-wide one when ``config.shared``.

    The process-wide cache is replaced whenever a run asks for different
    settings than the ones it was built with.
    """

    global _SHARED_CACHE
    if not config.shared:
        return SimilarityCache(config)
    if _SHARED_CACHE is None or _SHARED_CACHE.config != config:
        if _SHARED_CACHE is not None:
            logger.debug("Cache settings changed, replacing the shared similarity cache")
        _SHARED_CACHE = SimilarityCache(config)
    return _SHARED_CACHE
