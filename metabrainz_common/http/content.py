"""Reading response bodies as correctly decoded text."""

from __future__ import annotations

import asyncio
import codecs
import contextlib
import email.message
import logging
import threading

import httpx

from metabrainz_common.asyncs import raise_if_cancelled, run_sync
from metabrainz_common.logging import fields, log_context

from .tracing import trace_response_start, trace_response_text

DEFAULT_ENCODING = "utf-8"


def get_content_encoding(
    headers: httpx.Headers, default: str | None = DEFAULT_ENCODING
) -> str | None:
    """Return the text encoding named by content headers, lower-cased.

    The first ``Content-Encoding`` value wins; otherwise the ``charset``
    parameter of ``Content-Type`` is used. Blank values count as absent, in
    which case ``default`` is returned as given.
    """
    encodings = headers.get_list("content-encoding", split_commas=True)
    character_set: str | None = encodings[0] if encodings else None
    if character_set is None or not character_set.strip():
        character_set = _content_type_charset(headers.get("content-type"))
    if character_set is None or not character_set.strip():
        return default
    return character_set.strip().lower()


def _content_type_charset(content_type: str | None) -> str | None:
    if not content_type:
        return None
    message = email.message.Message()
    message["content-type"] = content_type
    return message.get_content_charset(failobj=None)


async def aget_string_content(
    response: httpx.Response,
    *,
    cancellation: threading.Event | None = None,
    tracer: logging.Logger | None = None,
) -> str:
    """Read the whole response body and decode it using its declared encoding.

    The response is closed once the read ends, whether it succeeded or not.
    Read, lookup and decode errors propagate unchanged; a set ``cancellation``
    event aborts with ``OperationCancelledError``. Blocking streams are read on
    a worker thread so the running event loop is never stalled.
    """
    headers = response.headers
    request = request_of(response)
    with log_context(
        **{
            fields.REQUEST_METHOD: None if request is None else request.method,
            fields.REQUEST_URI: None if request is None else str(request.url),
            fields.STATUS_CODE: response.status_code,
        }
    ):
        parts: list[str] = []
        try:
            raise_if_cancelled(cancellation)
            encoding = get_content_encoding(headers) or DEFAULT_ENCODING
            decoder = _incremental_decoder(encoding)
            trace_response_start(
                tracer,
                content_type=headers.get("content-type"),
                content_length=headers.get("content-length"),
                encoding=encoding,
            )
            if isinstance(response.stream, httpx.AsyncByteStream):
                async with contextlib.aclosing(response.aiter_bytes()) as chunks:
                    async for chunk in chunks:
                        raise_if_cancelled(cancellation)
                        parts.append(decoder.decode(chunk))
            else:
                parts.extend(
                    await asyncio.to_thread(
                        _read_blocking, response, decoder, cancellation
                    )
                )
            parts.append(decoder.decode(b"", final=True))
        finally:
            await _close(response)
        text = "".join(parts)
        trace_response_text(tracer, text)
    return text


def get_string_content(
    response: httpx.Response,
    *,
    cancellation: threading.Event | None = None,
    tracer: logging.Logger | None = None,
) -> str:
    """Blocking form of ``aget_string_content``."""
    return run_sync(
        aget_string_content(response, cancellation=cancellation, tracer=tracer)
    )


def _incremental_decoder(encoding: str) -> codecs.IncrementalDecoder:
    # Rejects unknown names and bytes-to-bytes codecs such as base64 or zlib.
    b"".decode(encoding)
    if codecs.lookup(encoding).name == "utf-8":
        # A leading UTF-8 byte-order mark is not part of the text.
        encoding = "utf-8-sig"
    return codecs.getincrementaldecoder(encoding)()


def _read_blocking(
    response: httpx.Response,
    decoder: codecs.IncrementalDecoder,
    cancellation: threading.Event | None,
) -> list[str]:
    parts: list[str] = []
    with contextlib.closing(response.iter_bytes()) as chunks:
        for chunk in chunks:
            raise_if_cancelled(cancellation)
            parts.append(decoder.decode(chunk))
    return parts


async def _close(response: httpx.Response) -> None:
    if isinstance(response.stream, httpx.AsyncByteStream):
        await response.aclose()
    else:
        response.close()


def request_of(response: httpx.Response) -> httpx.Request | None:
    """Return the request a response was produced for, if one is attached."""
    try:
        return response.request
    except RuntimeError:
        return None
