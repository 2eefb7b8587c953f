"""End-to-end classification of an anchor-text export."""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterator, List, Optional, Tuple

from anchorlens.classification.rules import CATEGORIES, AnchorRuleEngine
from anchorlens.classification.similarity import SimilarityEngine
from anchorlens.core.cache import SimilarityCache, cache_for_run
from anchorlens.core.config import RunConfig, ThresholdConfig
from anchorlens.core.errors import InvalidCsvError, RowParseError
from anchorlens.core.models import AnchorRow, ClassificationInput, ClassificationResult, RowOutcome
from anchorlens.utils.logging import structured_log
from anchorlens.utils.text import find_column, split_lines, tokenize_row

logger = logging.getLogger(__name__)

ANCHOR_COLUMN = "Anchor"


def locate_anchor_column(header_line: str) -> int:
    """Return the position of the Anchor column in ``header_line``."""

    try:
        headers = tokenize_row(header_line)
    except RowParseError as exc:
        raise InvalidCsvError(f"Could not parse CSV header: {exc}") from exc
    index = find_column(headers, ANCHOR_COLUMN)
    if index == -1:
        raise InvalidCsvError(f'Could not find "{ANCHOR_COLUMN}" column in CSV')
    return index


def split_export(csv_text: str) -> Tuple[int, List[Tuple[int, str]]]:
    """Return the anchor column index and the non-blank data lines.

    Data lines are paired with their 1-based line number in the export.
    """

    lines = split_lines(csv_text)
    if len(lines) <= 1:
        raise InvalidCsvError("CSV file appears to be empty or invalid")

    anchor_index = locate_anchor_column(lines[0])
    data_lines = [(number, line) for number, line in enumerate(lines[1:], start=2) if line.strip()]
    if not data_lines:
        raise InvalidCsvError("CSV file has a header but no data rows")
    return anchor_index, data_lines


def parse_row(line_number: int, line: str, anchor_index: int) -> AnchorRow:
    """Parse one data line; raises :class:`RowParseError` on malformed input."""

    return AnchorRow(line_number=line_number, fields=tokenize_row(line), anchor_index=anchor_index)


def iter_rows(csv_text: str, skipped: Optional[List[int]] = None) -> Iterator[AnchorRow]:
    """Yield parsed rows, skipping (and recording) rows that fail to parse."""

    anchor_index, data_lines = split_export(csv_text)
    for line_number, line in data_lines:
        try:
            yield parse_row(line_number, line, anchor_index)
        except RowParseError as exc:
            logger.warning("Skipping row %d: %s", line_number, exc)
            if skipped is not None:
                skipped.append(line_number)


def build_engine(
    run_input: ClassificationInput,
    *,
    thresholds: Optional[ThresholdConfig] = None,
    cache: Optional[SimilarityCache] = None,
) -> AnchorRuleEngine:
    return AnchorRuleEngine(
        company_name=run_input.company_name,
        website_url=run_input.website_url,
        keywords=run_input.keywords,
        thresholds=thresholds,
        similarity=SimilarityEngine(cache if cache is not None else SimilarityCache()),
    )


def classify_rows(
    run_input: ClassificationInput,
    *,
    engine: Optional[AnchorRuleEngine] = None,
    skipped: Optional[List[int]] = None,
) -> Iterator[RowOutcome]:
    """Yield the category of every parseable row of ``run_input``."""

    engine = engine or build_engine(run_input)
    for row in iter_rows(run_input.csv_text, skipped):
        anchor = row.anchor.strip()
        yield RowOutcome(line_number=row.line_number, anchor=anchor, category=engine.classify(anchor))


def count_anchors(
    run_input: ClassificationInput,
    *,
    run_config: Optional[RunConfig] = None,
    cache: Optional[SimilarityCache] = None,
    outcomes: Optional[List[RowOutcome]] = None,
) -> ClassificationResult:
    """Classify every row of the export and return the category counts.

    ``outcomes``, when given, collects the per-row categories as well.
    """

    thresholds = run_config.thresholds if run_config else None
    if cache is None:
        cache = cache_for_run(run_config.cache) if run_config else SimilarityCache()
    engine = build_engine(run_input, thresholds=thresholds, cache=cache)

    structured_log(
        logging.INFO,
        event="classification_start",
        company=engine.company,
        site_domain=engine.site_domain,
        keywords=len(engine.keywords),
    )
    started = time.time()

    counts: Dict[str, int] = {category: 0 for category in CATEGORIES}
    skipped: List[int] = []
    for outcome in classify_rows(run_input, engine=engine, skipped=skipped):
        counts[outcome.category] += 1
        if outcomes is not None:
            outcomes.append(outcome)

    result = ClassificationResult.from_counts(counts)
    structured_log(
        logging.INFO,
        event="classification_complete",
        total=result.total,
        skipped_rows=len(skipped),
        elapsed_seconds=round(time.time() - started, 3),
        cache=dict(cache.stats),
        **result.counts(),
    )
    return result
