from __future__ import annotations

"""Binding of raw IPT table rows into ``Resource`` records."""

import re
from datetime import datetime, timezone
from typing import Callable, Optional

from .enrichment import crawl_resource
from .error_codes import ErrorCode
from .http_client import FetchError
from .models import RAW_ROW_FIELDS, RawRow, Resource

_LOGO_PATTERN = re.compile(r'src\s*=\s*"([^"]+)')
_NAME_PATTERN = re.compile(r"<if>([^<]+)")
_LINK_PATTERN = re.compile(r'href\s*=\s*"([^"]+)')
# Occurrence cell rendered as a link to the resource page: <a ...>1,234</a>
_LINKED_COUNT_PATTERN = re.compile(r".+?>([^<]+).+")
_COUNT_PATTERN = re.compile(r"\d+")

_DATE_FORMAT = "%Y-%m-%d"
_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
# strptime accepts unpadded fields; the IPT always pads them.
_DATE_SHAPES = {
    _DATE_FORMAT: re.compile(r"\d{4}-\d{2}-\d{2}"),
    _DATETIME_FORMAT: re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}"),
}
_ABSENT = "--"

Enricher = Callable[[Resource], None]


class BindError(Exception):
    def __init__(self, error_code: str, message: str) -> None:
        super().__init__(message)
        self.error_code = error_code


def _first_group(pattern: re.Pattern[str], value: str) -> str:
    match = pattern.search(value)
    return match.group(1) if match else ""


def parse_count(value: str) -> int:
    """Parse a thousands-separated, non-negative integer such as ``3,537,502``."""

    digits = value.replace(",", "")
    if not _COUNT_PATTERN.fullmatch(digits):
        raise BindError(ErrorCode.FIELD_PARSE, f"invalid count {value!r}")
    try:
        return int(digits)
    except ValueError as exc:
        raise BindError(ErrorCode.FIELD_PARSE, f"invalid count {value[:32]!r}...: {exc}") from exc


def parse_timestamp(value: str, fmt: str) -> Optional[datetime]:
    """Parse an IPT date cell; ``--`` means the date is absent."""

    if value == _ABSENT:
        return None
    shape = _DATE_SHAPES.get(fmt)
    if shape is not None and not shape.fullmatch(value):
        raise BindError(ErrorCode.FIELD_PARSE, f"invalid date {value!r}: expected {fmt}")
    try:
        return datetime.strptime(value, fmt).replace(tzinfo=timezone.utc)
    except ValueError as exc:
        raise BindError(ErrorCode.FIELD_PARSE, f"invalid date {value!r}: {exc}") from exc


def bind(row: RawRow, *, enrich: Enricher = crawl_resource) -> Resource:
    """Build a ``Resource`` from one raw row of the IPT data table.

    When the occurrence cell is a link, ``enrich`` is called with the
    partially bound resource to read precise counts from its page. Any
    malformed count or date, and any failure to fetch the resource page,
    raises ``BindError``.
    """

    if len(row) < RAW_ROW_FIELDS:
        raise BindError(
            ErrorCode.FIELD_PARSE,
            f"expected {RAW_ROW_FIELDS} fields, got {len(row)}",
        )

    resource = Resource(
        logo=_first_group(_LOGO_PATTERN, row[0]),
        name=_first_group(_NAME_PATTERN, row[1]),
        link=_first_group(_LINK_PATTERN, row[1]),
        organization=row[2],
        type=row[3],
        subtype=row[4],
    )

    linked = _LINKED_COUNT_PATTERN.search(row[5])
    if linked:
        resource.occurrences = parse_count(linked.group(1))
        try:
            enrich(resource)
        except FetchError as exc:
            raise BindError(
                ErrorCode.ENRICHMENT,
                f"cannot read counts from {resource.link!r}: {exc}",
            ) from exc
    else:
        resource.occurrences = parse_count(row[5])

    resource.last_modified = parse_timestamp(row[6], _DATE_FORMAT)
    resource.last_publication = parse_timestamp(row[7], _DATE_FORMAT)
    resource.next_publication = parse_timestamp(row[8], _DATETIME_FORMAT)

    resource.author = row[9]
    resource.visibility = row[10]
    return resource


__all__ = ["BindError", "Enricher", "bind", "parse_count", "parse_timestamp"]
