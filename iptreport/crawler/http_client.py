from __future__ import annotations

"""Plain HTTP GET used for both IPT home pages and resource pages.

No custom headers, no retries; redirects follow the ``requests`` defaults.
"""

import requests

from . import config
from .error_codes import ErrorCode


class FetchError(Exception):
    def __init__(self, error_code: str, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.url = url


def get_text(url: str) -> str:
    """GET ``url`` and return the full body decoded as UTF-8.

    Raises ``FetchError`` with ``ErrorCode.NETWORK`` when the request fails
    (including malformed URLs) and ``ErrorCode.BODY_READ`` when the body cannot
    be read. The HTTP status is not inspected.
    """

    try:
        response = requests.get(url, stream=True, timeout=config.HTTP_TIMEOUT_SECONDS)
    except requests.RequestException as exc:
        raise FetchError(ErrorCode.NETWORK, str(exc), url=url) from exc

    with response:
        try:
            body = response.content
        except (requests.RequestException, OSError) as exc:
            raise FetchError(ErrorCode.BODY_READ, str(exc), url=url) from exc

    return body.decode("utf-8", errors="replace")


__all__ = ["FetchError", "get_text"]
