from __future__ import annotations

"""Selectors for the counters block of an IPT resource page."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ResourcePageSelectors:
    """Where the record counts live on ``resource?r=...`` pages.

    The class of the counter element is rewritten by javascript in the
    browser; the served HTML carries ``grey_bar``. Label prefixes are checked
    in order and the first match wins.
    """

    item_selector: str = ".no_bullets > li"
    label_selector: str = "span"
    counter_selector: str = ".grey_bar"
    label_prefixes: Tuple[Tuple[str, str], ...] = (
        ("Event", "events"),
        ("MeasurementOrFact", "measurements"),
        ("Occurrence", "occurrences"),
    )


RESOURCE_PAGE_SELECTORS = ResourcePageSelectors()

__all__ = [
    "ResourcePageSelectors",
    "RESOURCE_PAGE_SELECTORS",
]
