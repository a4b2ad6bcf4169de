from __future__ import annotations

"""Loading of the configured IPTs.

The configuration is an INI file with one section per IPT; the section name
is the alias printed in the report and ``url`` points at the IPT home page::

    [sibbr]
    url = https://ipt.sibbr.gov.br/sibbr/

Keys written before the first section belong to the global section, which is
loaded with an empty alias and never crawled.
"""

import configparser
from pathlib import Path
from typing import List

from .logging_utils import _crawler_event
from .models import Source
from .utils import log_line

GLOBAL_ALIAS = ""
_GLOBAL_SECTION = "__global__"
_UNUSED_DEFAULT_SECTION = "__defaults__"


class SourceConfigError(Exception):
    """Raised when the IPT configuration file cannot be loaded."""


def parse_sources(text: str) -> List[Source]:
    """Parse INI ``text`` into sources, in file order."""

    parser = configparser.ConfigParser(
        interpolation=None,
        default_section=_UNUSED_DEFAULT_SECTION,
    )
    try:
        parser.read_string(f"[{_GLOBAL_SECTION}]\n{text}")
    except configparser.Error as exc:
        raise SourceConfigError(f"Invalid IPT configuration: {exc}") from exc

    result: List[Source] = []
    for section in parser.sections():
        alias = GLOBAL_ALIAS if section == _GLOBAL_SECTION else section
        if alias == GLOBAL_ALIAS and not parser.items(section):
            continue
        url = parser.get(section, "url", fallback="").strip()
        if alias and not url:
            log_line(f"[SOURCES][WARN] IPT {alias!r} has no url configured.")
        result.append(Source(alias=alias, url=url))
    return result


def load_sources(path: Path) -> List[Source]:
    """Read the INI file at ``path`` and return the configured sources."""

    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise SourceConfigError(f"Cannot read IPT configuration {path}: {exc}") from exc

    result = parse_sources(text)
    _crawler_event(
        "state",
        phase="config",
        path=str(path),
        sources=sum(1 for source in result if source.alias),
    )
    return result


__all__ = ["GLOBAL_ALIAS", "SourceConfigError", "parse_sources", "load_sources"]
