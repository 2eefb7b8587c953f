"""End-to-end tests for the command line front end."""

from pathlib import Path

import pandas as pd

from anchorlens.cli import main

EXPORT = "\n".join(
    [
        "Source,Target,Anchor",
        "https://a.io,https://acme.com,Acme Cranes",
        "https://b.io,https://acme.com,www.acme.com",
        "https://c.io,https://acme.com,crane riggings",
        "https://d.io,https://acme.com,crane rig",
        "https://e.io,https://acme.com,",
        "https://f.io,https://acme.com,read more",
        "https://g.io,https://acme.com,!!!???",
    ]
)


def write_inputs(tmp_path: Path) -> tuple[Path, Path]:
    export_path = tmp_path / "anchors.csv"
    export_path.write_text(EXPORT, encoding="utf-8")
    keywords_path = tmp_path / "keywords.txt"
    keywords_path.write_text("crane rigging\n\ncrane hire\n", encoding="utf-8")
    return export_path, keywords_path


def base_args(tmp_path: Path) -> list[str]:
    export_path, keywords_path = write_inputs(tmp_path)
    return [
        "--config",
        str(tmp_path / "missing.yaml"),
        "--input",
        str(export_path),
        "--company",
        "Acme",
        "--website",
        "https://www.acme.com/",
        "--keywords-file",
        str(keywords_path),
        "--executor",
        "thread",
    ]


def test_cli_prints_copy_block(tmp_path: Path, capsys):
    exit_code = main(base_args(tmp_path) + ["--format", "copy"])

    assert exit_code == 0
    # branded, naked URL, exact, phrase, empty, blank, generic, miscellaneous
    assert capsys.readouterr().out.strip() == "1\n1\n1\n1\n1\n\n1\n1"


def test_cli_writes_details_and_report(tmp_path: Path, capsys):
    details_path = tmp_path / "out" / "details.csv"
    report_path = tmp_path / "out" / "report.json"

    exit_code = main(base_args(tmp_path) + ["--details", str(details_path), "--report", str(report_path)])

    assert exit_code == 0
    assert "Phrase Match" in capsys.readouterr().out
    details = pd.read_csv(details_path, keep_default_na=False)
    assert list(details.columns) == ["line", "anchor", "category"]
    assert list(details["category"]) == [
        "branded",
        "naked_url",
        "exact_match",
        "partial_match",
        "empty",
        "generic",
        "miscellaneous",
    ]
    assert report_path.exists()


def test_cli_reports_invalid_export(tmp_path: Path, capsys):
    args = base_args(tmp_path)
    bad_export = tmp_path / "bad.csv"
    bad_export.write_text("Source,Target\nx,y\n", encoding="utf-8")
    args[args.index("--input") + 1] = str(bad_export)

    assert main(args) == 1
    assert 'Could not find "Anchor" column' in capsys.readouterr().err
