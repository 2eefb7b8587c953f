"""I/O helpers for reading exports and writing per-anchor details."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Mapping, Sequence

import pandas as pd

DETAIL_COLUMNS = ["line", "anchor", "category"]


def read_csv_text(path: Path) -> str:
    """Return the raw text of the export at ``path``."""

    if not path.exists():
        raise FileNotFoundError(path)
    return path.read_text(encoding="utf-8-sig", errors="replace")


def read_keywords(path: Path) -> List[str]:
    """Read one keyword per line, ignoring blank lines."""

    if not path.exists():
        raise FileNotFoundError(path)
    lines = path.read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip()]


def rows_dataframe(rows: Sequence[Mapping[str, Any]]) -> pd.DataFrame:
    """Tabulate per-row response payloads as ``line``/``anchor``/``category``."""

    return pd.DataFrame(list(rows), columns=DETAIL_COLUMNS)


def save_dataframe(df: pd.DataFrame, path: Path) -> None:
    """Persist ``df`` to ``path`` as CSV."""

    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
