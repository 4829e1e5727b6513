"""RFC 8288 ``Link`` header parsing for pagination.

Only the ``next`` and ``prev`` relations matter for traversal. Other
relations are ignored, but the header as a whole must be well formed and the
URLs of the two recognized relations must be absolute (a scheme and a
network location, any scheme): a bad value fails the whole header instead of
silently dropping one direction.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from urllib.parse import urlsplit

from ...core.exceptions import LinkHeaderParseError

# One parameter: ``; name=value`` where value may be a quoted string with commas.
_PARAM = r'\s*;\s*[^;,"]*(?:"[^"]*"[^;,"]*)*'
_LINK_VALUE = re.compile(r"\s*<(?P<url>[^<>]*)>(?P<params>(?:" + _PARAM + r")*)\s*(?:,|\Z)")
_PARAM_PAIR = re.compile(r';\s*(?P<name>[^=;\s]+)\s*(?:=\s*(?P<value>"[^"]*"|[^;]*))?')


def _iter_link_values(header: str) -> Iterator[tuple[str, str]]:
    pos = 0
    while header[pos:].strip():
        match = _LINK_VALUE.match(header, pos)
        if match is None:
            raise LinkHeaderParseError(
                f"Malformed link-value at offset {pos}: {header[pos:]!r}", header=header
            )
        yield match["url"].strip(), match["params"]
        pos = match.end()


def _relations(params: str) -> set[str]:
    rels: set[str] = set()
    for match in _PARAM_PAIR.finditer(params):
        if match["name"].lower() != "rel" or match["value"] is None:
            continue
        value = match["value"].strip().strip('"')
        rels.update(token.lower() for token in value.split())
    return rels


def _validate_url(url: str, header: str) -> str:
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise LinkHeaderParseError(f"Malformed URL in Link header: {url!r}", header=header) from exc
    if not parts.scheme or not parts.netloc or any(c.isspace() for c in url):
        raise LinkHeaderParseError(f"Malformed URL in Link header: {url!r}", header=header)
    return url


def parse_link_header(value: str | None) -> tuple[str | None, str | None]:
    """Extract the ``(prev, next)`` URLs from a Link header value.

    Args:
        value: Raw header value, or None when the response had no Link header

    Returns:
        ``(prev, next)``; either side is None when the relation is missing.
        When a relation appears more than once the last one wins.

    Raises:
        LinkHeaderParseError: If the header is malformed or a next/prev URL is
            not an absolute URL.
    """
    prev: str | None = None
    next_: str | None = None
    if value is None:
        return prev, next_

    for url, params in _iter_link_values(value):
        rels = _relations(params)
        if "next" in rels:
            next_ = _validate_url(url, value)
        if "prev" in rels:
            prev = _validate_url(url, value)
    return prev, next_
