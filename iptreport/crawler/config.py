"""Configuration constants for the IPT report crawler."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

DEFAULT_CONFIG_FILE: Path = Path(os.getenv("IPTREPORT_CONFIG_FILE", "ipts.ini"))

# Optional log file; logs always go to stderr because stdout carries the CSV.
LOG_FILE: Optional[Path] = (
    Path(os.environ["IPTREPORT_LOG_FILE"]) if os.getenv("IPTREPORT_LOG_FILE") else None
)


def _parse_timeout_seconds(env_var: str) -> Optional[float]:
    """Parse an optional timeout in seconds from the environment.

    Unset, invalid or non-positive values mean "no timeout", which matches the
    crawler's default behaviour of waiting on every request indefinitely.
    """

    raw = os.getenv(env_var, "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


# Per-request timeout applied to both the IPT home page and resource pages.
HTTP_TIMEOUT_SECONDS: Optional[float] = _parse_timeout_seconds(
    "IPTREPORT_HTTP_TIMEOUT_SECONDS"
)
