"""Tests for result tables, copy blocks and summary reports."""

import json
from pathlib import Path

from anchorlens.core.models import ClassificationResult
from anchorlens.reporting.config import ReportConfig
from anchorlens.reporting.summary import format_copy_block, generate_summary_report, render_result, results_dataframe

RESULT = ClassificationResult.from_counts(
    {
        "branded": 4,
        "naked_url": 3,
        "exact_match": 1,
        "partial_match": 2,
        "generic": 6,
        "miscellaneous": 1,
        "empty": 3,
    }
)


def test_results_dataframe_rows_and_shares():
    df = results_dataframe(RESULT)

    assert list(df["Type"]) == [
        "Branded",
        "Naked URL",
        "Exact Match",
        "Phrase Match",
        "Empty Anchors",
        "Generic",
        "Miscellaneous",
        "Total",
    ]
    assert df.loc[df["Type"] == "Total", "Count"].iat[0] == 20
    assert df.loc[df["Type"] == "Generic", "Share"].iat[0] == 30.0


def test_copy_block_order():
    assert format_copy_block(RESULT) == "4\n3\n1\n2\n3\n\n6\n1"


def test_render_json_uses_wire_names():
    payload = json.loads(render_result(RESULT, "json"))
    assert payload["nakedUrl"] == 3
    assert payload["total"] == 20


def test_empty_result_has_zero_shares():
    df = results_dataframe(ClassificationResult())
    assert df["Share"].sum() == 0.0


def test_generate_summary_report_writes_json(tmp_path: Path):
    report_path = tmp_path / "reports" / "summary.json"
    summary = generate_summary_report(
        result=RESULT,
        inputs={"company": "Acme"},
        config_payload={"executor": "thread"},
        report_config=ReportConfig(path=report_path),
    )

    on_disk = json.loads(report_path.read_text(encoding="utf-8"))
    assert on_disk == summary
    assert summary["distribution"]["Branded"] == {"count": 4, "share": 20.0}
    assert summary["results"]["exactMatch"] == 1
