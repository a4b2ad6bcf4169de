from __future__ import annotations

import pytest

from iptreport.crawler import page_fetcher
from iptreport.crawler.error_codes import ErrorCode
from iptreport.crawler.http_client import FetchError
from tests.test_http_client import _install_pages, _testdata

HOME_URL = "http://ipt.example.org/ipt/"


def test_fetch_source_returns_rows(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_pages(monkeypatch, {HOME_URL: _testdata("home_index.html")})

    rows = page_fetcher.fetch_source(HOME_URL)

    assert rows == [
        [
            "--",
            '<a href="https://ipt.sibbr.gov.br/repatriados/resource?r=repatriados"><if>Repatriation Data for SiBBr</a>',
            "Not registered",
            "Occurrence",
            "--",
            "3,537,502",
            "2017-08-07",
            "2017-08-07",
            "--",
            "Public",
            "--",
        ]
    ]


def test_fetch_source_unreachable_host(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_pages(monkeypatch, {})

    with pytest.raises(FetchError) as excinfo:
        page_fetcher.fetch_source(HOME_URL)

    assert excinfo.value.error_code == ErrorCode.NETWORK


def test_fetch_source_without_data_literal(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_pages(monkeypatch, {HOME_URL: "Should error"})

    with pytest.raises(FetchError) as excinfo:
        page_fetcher.fetch_source(HOME_URL)

    assert excinfo.value.error_code == ErrorCode.NO_DATA_LITERAL
    assert str(excinfo.value) == f"No json found at {HOME_URL}"


def test_fetch_source_malformed_literal(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_pages(monkeypatch, {HOME_URL: _testdata("home_bad_json.html")})

    with pytest.raises(FetchError) as excinfo:
        page_fetcher.fetch_source(HOME_URL)

    assert excinfo.value.error_code == ErrorCode.DECODE


def test_decode_rows_rejects_non_string_cells() -> None:
    with pytest.raises(FetchError) as excinfo:
        page_fetcher.decode_rows("[\n[1, 2]\n]", url=HOME_URL)

    assert excinfo.value.error_code == ErrorCode.DECODE


def test_extract_data_literal_takes_first_shortest_match() -> None:
    body = (
        "<script>\nvar aDataSet = [\n['a']\n];\nvar other = 1;\n"
        "var aDataSet = [['b']];\n</script>"
    )

    assert page_fetcher.extract_data_literal(body) == "[\n['a']\n]"


def test_extract_data_literal_missing() -> None:
    assert page_fetcher.extract_data_literal("<html>var aDataSet = null;</html>") is None


def test_fetch_source_empty_table(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_pages(monkeypatch, {HOME_URL: "<script>var aDataSet = [];</script>"})

    assert page_fetcher.fetch_source(HOME_URL) == []
