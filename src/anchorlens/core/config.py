"""Configuration dataclasses for the anchorlens classifier."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from anchorlens.core.cache import CacheConfig
    from anchorlens.reporting.config import ReportConfig


@dataclass(slots=True)
class ThresholdConfig:
    """Tunable cut-offs used by the anchor heuristics and keyword matching."""

    exact_match: int = 90
    partial_match: int = 60
    branded_similarity: int = 85
    brand_word_ratio: float = 0.6
    special_char_ratio: float = 0.3
    max_anchor_length: int = 100


@dataclass(slots=True)
class WorkerConfig:
    """Settings for the executor that runs a classification."""

    executor: str = "process"

    def __post_init__(self) -> None:
        if self.executor not in {"process", "thread"}:
            raise ValueError(f"Unknown executor type: {self.executor}")


@dataclass(slots=True)
class RunConfig:
    """Aggregate configuration for a classification run."""

    thresholds: "ThresholdConfig"
    cache: "CacheConfig"
    worker: "WorkerConfig"
    report: "ReportConfig"
