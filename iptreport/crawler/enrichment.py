from __future__ import annotations

"""Record counts scraped from an IPT resource page.

The home page only shows a linked summary for some resources; the resource
page lists per-core counts (events, measurements, occurrences). Its markup has
changed between IPT releases, so extraction is best effort: unreadable
counters are skipped rather than reported.
"""

from typing import Dict

from bs4 import BeautifulSoup

from .http_client import get_text
from .logging_utils import _crawler_event
from .models import Resource
from .selectors_resource_page import RESOURCE_PAGE_SELECTORS, ResourcePageSelectors


def _label_field(label: str, selectors: ResourcePageSelectors) -> str | None:
    for prefix, field_name in selectors.label_prefixes:
        if label.startswith(prefix):
            return field_name
    return None


def extract_counts(
    html: str, selectors: ResourcePageSelectors = RESOURCE_PAGE_SELECTORS
) -> Dict[str, int]:
    """Return the counts found in ``html`` keyed by ``Resource`` field name.

    Only fields with a readable counter are present in the result.
    """

    soup = BeautifulSoup(html, "html5lib")
    counts: Dict[str, int] = {}
    for item in soup.select(selectors.item_selector):
        label = "".join(node.get_text() for node in item.select(selectors.label_selector))
        field_name = _label_field(label, selectors)
        if field_name is None:
            continue
        counter = "".join(
            node.get_text() for node in item.select(selectors.counter_selector)
        ).strip()
        if not counter.isdecimal():
            continue
        counts[field_name] = int(counter)
    return counts


def crawl_resource(resource: Resource) -> None:
    """Fill events, measurements and occurrences of ``resource`` in place.

    Raises ``FetchError`` when the resource page cannot be fetched. Fields
    without a readable counter keep their current values.
    """

    counts = extract_counts(get_text(resource.link))
    for field_name, value in counts.items():
        setattr(resource, field_name, value)
    _crawler_event("state", phase="enrich", link=resource.link, **counts)


__all__ = ["extract_counts", "crawl_resource"]
