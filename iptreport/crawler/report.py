from __future__ import annotations

"""CSV rendering of the crawl report."""

import csv
from datetime import datetime, timezone
from typing import Iterable, Iterator, List, Optional, TextIO

from .models import IptReport, Resource

REPORT_COLUMNS: List[str] = [
    "IPT",
    "Resource Name",
    "Link",
    "Logo",
    "Organization",
    "Type",
    "Subtype",
    "Events",
    "Measurements",
    "Occurrences",
    "LastModified",
    "LastPublication",
    "NextPublication",
    "Visibility",
    "Author",
    "Error",
]

# "Zero" instant; a next publication not after it is treated as unscheduled.
ZERO_INSTANT = datetime(1, 1, 1, tzinfo=timezone.utc)


def format_timestamp(value: Optional[datetime]) -> str:
    """Render ``value`` as ``2017-08-07 00:00:00 +0000 UTC``; ``None`` as ``""``."""

    if value is None:
        return ""
    return value.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S +0000 UTC")


def _resource_row(alias: str, resource: Resource) -> List[str]:
    next_publication = resource.next_publication
    if next_publication is not None and not next_publication > ZERO_INSTANT:
        next_publication = None

    return [
        alias,
        resource.name,
        resource.link,
        resource.logo,
        resource.organization,
        resource.type,
        resource.subtype,
        str(resource.events),
        str(resource.measurements),
        str(resource.occurrences),
        format_timestamp(resource.last_modified),
        format_timestamp(resource.last_publication),
        format_timestamp(next_publication),
        resource.visibility,
        resource.author,
        "",
    ]


def iter_report_rows(report: Iterable[IptReport]) -> Iterator[List[str]]:
    """Yield the CSV rows (without header) for ``report``.

    A failed IPT yields a single row holding only its alias and error message.
    """

    for entry in report:
        if entry.error is not None:
            line = [""] * len(REPORT_COLUMNS)
            line[0] = entry.alias
            line[-1] = str(entry.error)
            yield line
            continue
        for resource in entry.resources:
            yield _resource_row(entry.alias, resource)


def write_report(report: Iterable[IptReport], stream: TextIO) -> int:
    """Write the header and every report row to ``stream``; return the row count."""

    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(REPORT_COLUMNS)
    written = 0
    for line in iter_report_rows(report):
        writer.writerow(line)
        written += 1
    return written


__all__ = [
    "REPORT_COLUMNS",
    "ZERO_INSTANT",
    "format_timestamp",
    "iter_report_rows",
    "write_report",
]
