from __future__ import annotations

"""Command line entry point: crawl the configured IPTs and print a CSV report."""

import argparse
import sys
from pathlib import Path
from typing import Sequence

from iptreport.crawler import config
from iptreport.crawler.orchestrator import crawl_sources
from iptreport.crawler.report import write_report
from iptreport.crawler.sources import SourceConfigError, load_sources
from iptreport.crawler.utils import configure_logger, log_line


def _build_parser() -> argparse.ArgumentParser:
    """Return an argument parser for the report CLI."""

    parser = argparse.ArgumentParser(
        description="Crawl IPT instances and write a CSV report of their resources.",
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=config.DEFAULT_CONFIG_FILE,
        help="Path to the INI file listing the IPTs (default: %(default)s).",
    )
    parser.add_argument(
        "--output",
        default="-",
        help="CSV destination; '-' writes to stdout (default).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=config.LOG_FILE,
        help="Also append log lines to this file.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the report CLI."""

    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    configure_logger(args.log_file)

    try:
        sources = load_sources(args.file)
    except SourceConfigError as exc:
        log_line(f"[CONFIG] {exc}")
        return 1

    report = crawl_sources(sources)

    if args.output == "-":
        rows = write_report(report, sys.stdout)
        sys.stdout.flush()
    else:
        with open(args.output, "w", encoding="utf-8", newline="") as handle:
            rows = write_report(report, handle)

    log_line(f"[REPORT] Wrote {rows} rows for {len(report)} IPTs to {args.output}")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
