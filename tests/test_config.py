import pytest

from iptreport.crawler import config


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, None),
        ("", None),
        ("abc", None),
        ("0", None),
        ("-3", None),
        ("30", 30.0),
        ("2.5", 2.5),
    ],
)
def test_parse_timeout_seconds(monkeypatch: pytest.MonkeyPatch, raw, expected) -> None:
    if raw is None:
        monkeypatch.delenv("IPTREPORT_TEST_TIMEOUT", raising=False)
    else:
        monkeypatch.setenv("IPTREPORT_TEST_TIMEOUT", raw)

    assert config._parse_timeout_seconds("IPTREPORT_TEST_TIMEOUT") == expected
