from __future__ import annotations

import csv
import io
from pathlib import Path

import pytest

from iptreport import main as cli
from iptreport.crawler.report import REPORT_COLUMNS
from tests.test_http_client import _install_pages, _testdata

GOELDI_URL = "http://ipt.example.org/goeldi/"
BROKEN_URL = "http://ipt.example.org/broken/"


def _write_config(tmp_path: Path) -> Path:
    path = tmp_path / "ipts.ini"
    path.write_text(
        "\n".join(
            [
                "url = http://ipt.example.org/ignored/",
                "[goeldi]",
                f"url = {GOELDI_URL}",
                "[broken]",
                f"url = {BROKEN_URL}",
            ]
        ),
        encoding="utf-8",
    )
    return path


def test_main_writes_csv_to_stdout(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    requested = _install_pages(
        monkeypatch,
        {GOELDI_URL: _testdata("home_index.html"), BROKEN_URL: "Should error"},
    )

    exit_code = cli.main(["--file", str(_write_config(tmp_path))])

    assert exit_code == 0
    assert sorted(requested) == sorted([GOELDI_URL, BROKEN_URL])
    lines = list(csv.reader(io.StringIO(capsys.readouterr().out)))
    assert lines[0] == REPORT_COLUMNS
    by_alias = {line[0]: line for line in lines[1:]}
    assert set(by_alias) == {"goeldi", "broken"}
    assert by_alias["goeldi"][1] == "Repatriation Data for SiBBr"
    assert by_alias["goeldi"][9] == "3537502"
    assert by_alias["goeldi"][12] == ""
    assert by_alias["broken"][15] == f"No json found at {BROKEN_URL}"
    assert by_alias["broken"][1:15] == [""] * 14


def test_main_writes_csv_file_and_log(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _install_pages(monkeypatch, {GOELDI_URL: _testdata("home_index.html")})
    output = tmp_path / "report.csv"
    log_file = tmp_path / "crawl.log"

    try:
        exit_code = cli.main(
            [
                "--file",
                str(_write_config(tmp_path)),
                "--output",
                str(output),
                "--log-file",
                str(log_file),
            ]
        )
    finally:
        cli.configure_logger(None)

    assert exit_code == 0
    lines = list(csv.reader(output.open(encoding="utf-8", newline="")))
    assert len(lines) == 3
    assert "[REPORT] Wrote 2 rows for 2 IPTs" in log_file.read_text(encoding="utf-8")


def test_main_missing_config(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    exit_code = cli.main(["--file", str(tmp_path / "nope.ini")])

    assert exit_code == 1
    assert capsys.readouterr().out == ""
