"""Reporting configuration models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(slots=True)
class ReportConfig:
    """Where and how the classification summary is written."""

    path: Optional[Path] = None
    details_path: Optional[Path] = None
    output_format: str = "table"
