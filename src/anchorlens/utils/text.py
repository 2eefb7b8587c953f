"""Text helpers for splitting anchor-text exports into rows and fields."""

from __future__ import annotations

import re
from typing import List

from anchorlens.core.errors import RowParseError

BOM = "\ufeff"


def normalise_whitespace(text: str) -> str:
    """Collapse repeated whitespace and trim the string."""

    return re.sub(r"\s+", " ", text).strip()


def split_lines(text: str) -> List[str]:
    """Split ``text`` on newlines, dropping the carriage return of CRLF files."""

    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def tokenize_row(line: str) -> List[str]:
    """Split one CSV line into fields.

    Double quotes toggle quoted mode and are not kept; commas inside quotes
    are part of the field. Escaped quotes (``""``) are not supported, they
    simply toggle twice. A line that ends inside a quoted field raises
    :class:`RowParseError`.
    """

    fields: List[str] = []
    current: List[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)

    if in_quotes:
        raise RowParseError(f"Unterminated quoted field in row: {line[:50]!r}")

    fields.append("".join(current))
    return fields


def find_column(headers: List[str], name: str) -> int:
    """Return the index of ``name`` in ``headers`` (case-insensitive), or -1."""

    wanted = name.strip().lower()
    for index, header in enumerate(headers):
        if header.replace(BOM, "").strip().lower() == wanted:
            return index
    return -1
