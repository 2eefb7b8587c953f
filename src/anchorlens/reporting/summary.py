"""Summary tables and reports for classification results."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping

import pandas as pd

from anchorlens.core.models import ClassificationResult
from anchorlens.reporting.config import ReportConfig

logger = logging.getLogger(__name__)

# Result-table rows, in display order.
CATEGORY_LABELS: Dict[str, str] = {
    "branded": "Branded",
    "naked_url": "Naked URL",
    "exact_match": "Exact Match",
    "partial_match": "Phrase Match",
    "empty": "Empty Anchors",
    "generic": "Generic",
    "miscellaneous": "Miscellaneous",
}

# Copy-block order; ``None`` is an empty separator line.
COPY_ORDER = ("branded", "naked_url", "exact_match", "partial_match", "empty", None, "generic", "miscellaneous")


def _share(count: int, total: int) -> float:
    if total == 0:
        return 0.0
    return round(100 * count / total, 2)


def results_dataframe(result: ClassificationResult) -> pd.DataFrame:
    """One row per category plus a Total row."""

    rows = [
        {"Type": label, "Count": getattr(result, name), "Share": _share(getattr(result, name), result.total)}
        for name, label in CATEGORY_LABELS.items()
    ]
    rows.append({"Type": "Total", "Count": result.total, "Share": 100.0 if result.total else 0.0})
    return pd.DataFrame(rows, columns=["Type", "Count", "Share"])


def format_copy_block(result: ClassificationResult) -> str:
    """Render the counts as a newline-separated block for pasting into a sheet."""

    lines = ["" if name is None else str(getattr(result, name)) for name in COPY_ORDER]
    return "\n".join(lines)


def generate_summary_report(
    *,
    result: ClassificationResult,
    inputs: Mapping[str, Any],
    config_payload: Mapping[str, Any],
    report_config: ReportConfig,
) -> Dict[str, Any]:
    """Generate an in-memory summary report and optionally persist it."""

    table = results_dataframe(result)
    summary: Dict[str, Any] = {
        "inputs": dict(inputs),
        "results": result.to_payload(),
        "distribution": {
            row["Type"]: {"count": int(row["Count"]), "share": float(row["Share"])}
            for row in table.to_dict(orient="records")
        },
        "config": dict(config_payload),
    }

    if report_config.path:
        report_config.path.parent.mkdir(parents=True, exist_ok=True)
        with report_config.path.open("w", encoding="utf-8") as handle:
            json.dump(summary, handle, ensure_ascii=False, indent=2)
        logger.info("Summary report written to %s", report_config.path)

    return summary


def render_result(result: ClassificationResult, output_format: str = "table") -> str:
    """Render ``result`` for the terminal as ``table``, ``json`` or ``copy``."""

    if output_format == "json":
        return json.dumps(result.to_payload(), indent=2)
    if output_format == "copy":
        return format_copy_block(result)
    return results_dataframe(result).to_string(index=False)


__all__ = [
    "CATEGORY_LABELS",
    "format_copy_block",
    "generate_summary_report",
    "render_result",
    "results_dataframe",
]
