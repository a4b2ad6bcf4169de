from __future__ import annotations

"""Repair of the JavaScript array literal embedded in IPT home pages.

The IPT renders its resource table as ``var aDataSet = [...];`` with single
quoted strings and HTML fragments whose attribute quotes are not escaped, so
the literal is not JSON. ``escape_json`` turns it into something ``json.loads``
accepts.
"""

import re

_LONE_BACKSLASH = re.compile(r'\\(?!")')
# A quote that neither opens a string (after whitespace or "[") nor closes one
# (before "," or "]") sits inside an HTML attribute value.
_ATTRIBUTE_QUOTE = re.compile(r'([^\\\s\[])"([^,\]])')


def escape_json(text: str) -> str:
    """Normalise a quasi-JSON array literal into valid JSON text.

    Steps run in a fixed order: double lone backslashes, turn single quotes
    into double quotes, then escape double quotes inside attribute values.
    Nothing is validated here; ``json.loads`` reports what is still broken.
    """

    text = _LONE_BACKSLASH.sub(r"\\\\", text)
    text = text.replace("'", '"')
    text = _ATTRIBUTE_QUOTE.sub(r'\1\\"\2', text).replace("'", '"')
    return text


__all__ = ["escape_json"]
