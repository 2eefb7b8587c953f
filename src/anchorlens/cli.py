"""
Command line front end for the anchor-text classifier.

1. Parses the command line arguments and merges them with defaults from
   ``config.yaml`` into a ``RunConfig`` via ``build_run_config``.
2. Reads the backlink export and the keyword list from disk.
3. Sends one request message to a ``ClassificationWorker`` and waits for the
   single response message.
4. Prints the counts as a table, JSON, or the copy block used for pasting into
   a research sheet, and optionally writes:
   - a JSON summary report (``--report``),
   - a per-anchor CSV with the category of each row (``--details``).
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional, Sequence

from anchorlens.core.configuration import build_run_config
from anchorlens.core.errors import AnchorLensError
from anchorlens.core.models import ClassificationInput, ClassificationResult
from anchorlens.core.worker import ClassificationWorker
from anchorlens.reporting.summary import generate_summary_report, render_result
from anchorlens.settings import env_path, load_environment
from anchorlens.utils.io import read_csv_text, read_keywords, rows_dataframe, save_dataframe
from anchorlens.utils.logging import configure_logging, structured_log

logger = logging.getLogger(__name__)


def parse_args(args: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classify backlink anchor texts into anchor categories")
    parser.add_argument("--config", type=Path, default=env_path("ANCHORLENS_CONFIG", "config.yaml"), help="Path to configuration YAML")
    parser.add_argument("--input", type=Path, required=True, help="Anchor text export (CSV with an Anchor column)")
    parser.add_argument("--company", required=True, help="Base company name, e.g. 'Jenmon'")
    parser.add_argument("--website", required=True, help="Homepage URL of the company")
    parser.add_argument("--keyword", action="append", default=[], help="Target keyword (repeatable)")
    parser.add_argument("--keywords-file", type=Path, default=None, help="File with one keyword per line")
    parser.add_argument("--executor", choices=["process", "thread"], default=None, help="Where the run executes")
    parser.add_argument("--exact-threshold", type=int, default=None, help="Similarity needed for an exact match")
    parser.add_argument("--partial-threshold", type=int, default=None, help="Similarity needed for a phrase match")
    parser.add_argument("--cache", choices=["on", "off"], default=None, help="Enable or disable the similarity cache")
    parser.add_argument("--cache-size", type=int, default=None, help="Entries held before the cache is cleared")
    parser.add_argument("--format", choices=["table", "json", "copy"], default=None, help="Output format")
    parser.add_argument("--report", type=Path, default=None, help="Path to summary report JSON")
    parser.add_argument("--details", type=Path, default=None, help="Path to per-anchor CSV")
    parser.add_argument("--log-level", default=os.environ.get("LOG_LEVEL", "WARNING"))
    return parser.parse_args(args)


def collect_keywords(args: argparse.Namespace) -> List[str]:
    keywords = [keyword.strip() for keyword in args.keyword if keyword.strip()]
    if args.keywords_file:
        keywords.extend(read_keywords(args.keywords_file))
    return keywords


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_environment()
    args = parse_args(argv)
    configure_logging(args.log_level)

    run_config = build_run_config(args)
    run_input = ClassificationInput(
        csv_text=read_csv_text(args.input),
        company_name=args.company,
        website_url=args.website,
        keywords=tuple(collect_keywords(args)),
    )
    message = run_input.to_message()
    message["includeRows"] = run_config.report.details_path is not None

    try:
        with ClassificationWorker(run_config=run_config) as worker:
            response = worker.request(message)
    except AnchorLensError as exc:
        logger.error("%s", exc)
        return 2

    if not response["success"]:
        print(f"Error: {response['error']}", file=sys.stderr)
        return 1

    payload = response["results"]
    result = ClassificationResult.from_payload(payload)
    print(render_result(result, run_config.report.output_format))

    if run_config.report.details_path:
        details = rows_dataframe(response.get("rows", []))
        save_dataframe(details, run_config.report.details_path)
        logger.info("Per-anchor details written to %s", run_config.report.details_path)

    if run_config.report.path:
        generate_summary_report(
            result=result,
            inputs={
                "input": str(args.input),
                "company": args.company,
                "website": args.website,
                "keywords": list(run_input.keywords),
            },
            config_payload={
                "thresholds": asdict(run_config.thresholds),
                "cache": asdict(run_config.cache),
                "executor": run_config.worker.executor,
            },
            report_config=run_config.report,
        )

    structured_log(logging.INFO, event="run_complete", input=str(args.input), **payload)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
