from __future__ import annotations

from typing import Any

from .utils import log_line


def _crawler_event(label: str, *, phase: str, **fields: Any) -> None:
    """Emit ``[CRAWLER][LABEL][PHASE] key=value, ...`` with keys sorted.

    ``label`` is the event kind (``state`` or ``error``); ``phase`` names the
    pipeline stage (``config``, ``fetch``, ``bind``, ``enrich``, ``crawl``).
    """

    try:
        payload = ", ".join(f"{k}={v!r}" for k, v in sorted(fields.items()))
        log_line(f"[CRAWLER][{label.upper()}][{phase.upper()}] {payload}")
    except Exception:
        # Never let logging break the crawl.
        return


__all__ = ["_crawler_event"]
