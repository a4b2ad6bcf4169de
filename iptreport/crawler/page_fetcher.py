from __future__ import annotations

"""Extraction of the resource table from an IPT home page."""

import json
import re
from typing import Any, List

from .error_codes import ErrorCode
from .http_client import FetchError, get_text
from .logging_utils import _crawler_event
from .models import RawRow
from .quasi_json import escape_json

_DATA_SET_PATTERN = re.compile(r"var aDataSet = (\[.*?\]);", re.DOTALL)


def extract_data_literal(body: str) -> str | None:
    """Return the first ``aDataSet`` array literal in ``body``, if any."""

    match = _DATA_SET_PATTERN.search(body)
    return match.group(1) if match else None


def _is_raw_row(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def decode_rows(literal: str, *, url: str | None = None) -> List[RawRow]:
    """Normalise and decode a data literal into raw rows."""

    try:
        decoded = json.loads(escape_json(literal))
    except json.JSONDecodeError as exc:
        raise FetchError(ErrorCode.DECODE, str(exc), url=url) from exc

    if not isinstance(decoded, list) or not all(_is_raw_row(row) for row in decoded):
        raise FetchError(
            ErrorCode.DECODE,
            f"Data literal at {url} is not a list of string rows",
            url=url,
        )
    return decoded


def fetch_source(url: str) -> List[RawRow]:
    """Fetch the IPT home page at ``url`` and return its resource rows.

    Every failure raises ``FetchError`` and fails the whole IPT; there is no
    partial result.
    """

    body = get_text(url)

    literal = extract_data_literal(body)
    if literal is None:
        raise FetchError(ErrorCode.NO_DATA_LITERAL, f"No json found at {url}", url=url)

    rows = decode_rows(literal, url=url)
    _crawler_event("state", phase="fetch", kind="rows_decoded", url=url, rows=len(rows))
    return rows


__all__ = ["extract_data_literal", "decode_rows", "fetch_source"]
