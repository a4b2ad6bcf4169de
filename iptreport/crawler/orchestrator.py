from __future__ import annotations

"""Concurrent crawl of every configured IPT.

One task per IPT is started at once, each task sends exactly one
``IptResult`` back on a queue, and the orchestrator performs exactly as many
blocking receives as tasks it started. Rows are bound on the orchestrator
thread as results arrive, so enrichment fetches run there as well.
"""

import queue
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List

from .binder import BindError, bind
from .error_codes import ErrorCode
from .http_client import FetchError
from .logging_utils import _crawler_event
from .models import IptReport, IptResult, Source
from .page_fetcher import fetch_source
from .utils import log_line


def crawl_ipt(url: str, alias: str, results: queue.Queue[IptResult]) -> None:
    """Crawl the IPT home page at ``url`` and put one result on ``results``."""

    try:
        rows = fetch_source(url)
    except FetchError as exc:
        results.put(IptResult(alias=alias, error=exc))
        return
    except Exception as exc:  # noqa: BLE001
        # The orchestrator waits for one reply per task; never skip it.
        error = FetchError(ErrorCode.INTERNAL, f"{type(exc).__name__}: {exc}", url=url)
        results.put(IptResult(alias=alias, error=error))
        return

    results.put(IptResult(alias=alias, rows=rows))


def _drop_row(report: IptReport, index: int, error_code: str, exc: Exception) -> None:
    report.dropped_rows += 1
    _crawler_event(
        "error",
        phase="bind",
        ipt=report.alias,
        row=index,
        error_code=error_code,
        error=str(exc),
    )
    log_line(f"[CRAWL] IPT {report.alias} row {index} dropped: {exc}")


def build_report(result: IptResult) -> IptReport:
    """Turn one crawl result into a report entry, dropping unbindable rows."""

    report = IptReport(alias=result.alias, error=result.error)
    if not result.ok:
        error_code = getattr(result.error, "error_code", ErrorCode.INTERNAL)
        _crawler_event(
            "error",
            phase="fetch",
            ipt=result.alias,
            error_code=error_code,
            error=str(result.error),
        )
        log_line(f"[CRAWL] IPT {result.alias} failed: {result.error}")
        return report

    for index, row in enumerate(result.rows):
        try:
            report.resources.append(bind(row))
        except BindError as exc:
            _drop_row(report, index, exc.error_code, exc)
        except Exception as exc:  # noqa: BLE001
            # One unexpected row must not take the rest of the IPT with it.
            _drop_row(report, index, ErrorCode.INTERNAL, exc)
    return report


def crawl_sources(sources: Iterable[Source]) -> List[IptReport]:
    """Crawl every source with a non-empty alias and return the report.

    Entries are in arrival order. There is no cancellation: a task that never
    answers blocks this call.
    """

    targets = [source for source in sources if source.alias]
    count = len(targets)
    if count == 0:
        return []

    results: queue.Queue[IptResult] = queue.Queue()
    reports: List[IptReport] = []

    with ThreadPoolExecutor(max_workers=count, thread_name_prefix="ipt") as pool:
        for source in targets:
            pool.submit(crawl_ipt, source.url, source.alias, results)
        for _ in range(count):
            reports.append(build_report(results.get()))

    rows_total = sum(len(report.resources) for report in reports)
    _crawler_event(
        "state",
        phase="crawl",
        kind="summary",
        sources=count,
        failed_sources=sum(1 for report in reports if report.error is not None),
        resources=rows_total,
        dropped_rows=sum(report.dropped_rows for report in reports),
    )
    return reports


__all__ = ["crawl_ipt", "build_report", "crawl_sources"]
