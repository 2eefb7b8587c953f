"""Configuration loading utilities for classification runs."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from anchorlens.core.cache import CacheConfig
from anchorlens.core.config import RunConfig, ThresholdConfig, WorkerConfig
from anchorlens.reporting.config import ReportConfig


def _load_yaml_config(path: Optional[Path]) -> Dict[str, Any]:
    """
    - Opens and safely parses a YAML file into a Python dictionary.
    - Returns an empty dict if the file is missing.
    - Raises ``ValueError`` when the file does not hold a mapping.
    """
    if path and path.exists():
        with path.open("r", encoding="utf-8") as handle:
            payload = yaml.safe_load(handle) or {}
        if not isinstance(payload, dict):
            raise ValueError(f"Invalid YAML config structure at {path}")
        return payload
    return {}


def _section(payload: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = payload.get(name, {})
    return section if isinstance(section, dict) else {}


def build_run_config(args: argparse.Namespace) -> RunConfig:
    # Load the YAML configuration and overlay CLI overrides.
    config_path = Path(args.config) if getattr(args, "config", None) else None
    yaml_payload = _load_yaml_config(config_path)

    # Thresholds
    defaults = ThresholdConfig()
    threshold_section = _section(yaml_payload, "thresholds")
    thresholds_cfg = ThresholdConfig(
        exact_match=int(threshold_section.get("exact_match", defaults.exact_match)),
        partial_match=int(threshold_section.get("partial_match", defaults.partial_match)),
        branded_similarity=int(threshold_section.get("branded_similarity", defaults.branded_similarity)),
        brand_word_ratio=float(threshold_section.get("brand_word_ratio", defaults.brand_word_ratio)),
        special_char_ratio=float(threshold_section.get("special_char_ratio", defaults.special_char_ratio)),
        max_anchor_length=int(threshold_section.get("max_anchor_length", defaults.max_anchor_length)),
    )
    if getattr(args, "exact_threshold", None) is not None:
        thresholds_cfg.exact_match = int(args.exact_threshold)
    if getattr(args, "partial_threshold", None) is not None:
        thresholds_cfg.partial_match = int(args.partial_threshold)
    if thresholds_cfg.partial_match > thresholds_cfg.exact_match:
        raise ValueError("Partial match threshold cannot exceed the exact match threshold")

    # Similarity cache
    cache_section = _section(yaml_payload, "cache")
    cache_cfg = CacheConfig(
        enabled=bool(cache_section.get("enabled", True)),
        max_entries=int(cache_section.get("max_entries", 10_000)),
        shared=bool(cache_section.get("shared", False)),
    )
    if getattr(args, "cache", None) is not None:
        cache_cfg.enabled = args.cache == "on"
    if getattr(args, "cache_size", None) is not None:
        cache_cfg.max_entries = max(0, int(args.cache_size))

    # Worker
    worker_section = _section(yaml_payload, "worker")
    worker_cfg = WorkerConfig(executor=str(worker_section.get("executor", "process")))
    if getattr(args, "executor", None):
        worker_cfg = WorkerConfig(executor=args.executor)

    # Reporting
    report_section = _section(yaml_payload, "report")
    report_cfg = ReportConfig(
        path=Path(report_section["path"]) if report_section.get("path") else None,
        details_path=Path(report_section["details_path"]) if report_section.get("details_path") else None,
        output_format=str(report_section.get("format", "table")),
    )
    if getattr(args, "report", None):
        report_cfg.path = Path(args.report)
    if getattr(args, "details", None):
        report_cfg.details_path = Path(args.details)
    if getattr(args, "format", None):
        report_cfg.output_format = args.format

    return RunConfig(
        thresholds=thresholds_cfg,
        cache=cache_cfg,
        worker=worker_cfg,
        report=report_cfg,
    )
