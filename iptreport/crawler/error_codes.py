from __future__ import annotations

"""Error code taxonomy for crawl failures.

Source-scoped codes end up in the report's Error column through the error
message; row-scoped codes only appear in log lines. Keep the values stable,
they are what people grep for in the logs.
"""


class ErrorCode:
    # Source-scoped: the whole IPT is reported as failed.
    NETWORK = "network_error"
    BODY_READ = "body_read_error"
    NO_DATA_LITERAL = "no_data_literal"
    DECODE = "decode_error"
    # Row-scoped: the resource row is dropped.
    FIELD_PARSE = "field_parse_error"
    ENRICHMENT = "enrichment_error"
    INTERNAL = "internal_error"


__all__ = ["ErrorCode"]
