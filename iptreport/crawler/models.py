"""Data model shared by the fetchers, the binder and the CSV report."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

RawRow = List[str]

# Number of positional fields in one row of the IPT home page data table.
RAW_ROW_FIELDS = 11


@dataclass(frozen=True)
class Source:
    """One configured IPT: ``alias`` is the INI section name."""

    alias: str
    url: str


@dataclass
class Resource:
    """A dataset published by an IPT, bound from one raw table row.

    Timestamps are timezone-aware UTC datetimes or ``None`` when the IPT
    reports ``--``.
    """

    logo: str = ""
    name: str = ""
    link: str = ""
    organization: str = ""
    type: str = ""
    subtype: str = ""
    events: int = 0
    measurements: int = 0
    occurrences: int = 0
    last_modified: Optional[datetime] = None
    last_publication: Optional[datetime] = None
    next_publication: Optional[datetime] = None
    visibility: str = ""
    author: str = ""


@dataclass(frozen=True)
class IptResult:
    """Outcome of crawling one IPT home page, sent back to the orchestrator."""

    alias: str
    rows: List[RawRow] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class IptReport:
    """Per-IPT entry of the final report."""

    alias: str
    resources: List[Resource] = field(default_factory=list)
    error: Optional[Exception] = None
    dropped_rows: int = 0


__all__ = ["RawRow", "RAW_ROW_FIELDS", "Source", "Resource", "IptResult", "IptReport"]
