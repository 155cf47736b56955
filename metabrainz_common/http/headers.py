"""Independent copies of HTTP header collections.

Copies are built from the raw byte pairs of the source, so no name or value is
re-validated and malformed values survive verbatim. The copy never shares
storage with the source collection.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import httpx

HeaderSource = (
    httpx.Headers
    | Mapping[str, str]
    | Mapping[bytes, bytes]
    | Iterable[tuple[str, str]]
    | Iterable[tuple[bytes, bytes]]
)

# Entity headers describing the body rather than the response itself.
CONTENT_HEADER_NAMES = frozenset(
    {
        "allow",
        "content-disposition",
        "content-encoding",
        "content-language",
        "content-length",
        "content-location",
        "content-md5",
        "content-range",
        "content-type",
        "expires",
        "last-modified",
    }
)


def copy_headers(source: HeaderSource) -> httpx.Headers:
    """Return a new header collection holding the same name/value pairs."""
    if isinstance(source, httpx.Headers):
        return httpx.Headers(list(source.raw), encoding=source.encoding)
    if isinstance(source, Mapping):
        return httpx.Headers(list(source.items()))
    return httpx.Headers(list(source))


def split_content_headers(source: httpx.Headers) -> tuple[httpx.Headers, httpx.Headers]:
    """Split headers into fresh (content headers, response headers) copies."""
    content: list[tuple[bytes, bytes]] = []
    other: list[tuple[bytes, bytes]] = []
    for name, value in source.raw:
        if name.lower().decode("latin-1") in CONTENT_HEADER_NAMES:
            content.append((name, value))
        else:
            other.append((name, value))
    encoding = source.encoding
    return (
        httpx.Headers(content, encoding=encoding),
        httpx.Headers(other, encoding=encoding),
    )
