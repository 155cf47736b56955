"""Diagnostic tracing of response bodies.

Tracing is opt-in: helpers accept an explicit ``tracer`` logger and do nothing
when it is ``None``.
"""

from __future__ import annotations

import logging

from metabrainz_common.config import CommonSettings
from metabrainz_common.logging import context_extra, fields, get_logger
from metabrainz_common.text import format_multiline


def get_http_tracer(settings: CommonSettings | None = None) -> logging.Logger | None:
    """Return the response tracer when tracing is enabled in settings."""
    if settings is None or not settings.http.trace:
        return None
    return get_logger(settings.http.logger)


def trace_response_start(
    tracer: logging.Logger | None,
    *,
    content_type: str | None,
    content_length: str | None,
    encoding: str | None = None,
) -> None:
    """Record the start of a body read."""
    if tracer is None:
        return
    tracer.debug(
        "RESPONSE (%s): %s bytes",
        content_type,
        content_length,
        extra=context_extra(
            **{
                fields.CONTENT_TYPE: content_type,
                fields.CONTENT_LENGTH: content_length,
                fields.CONTENT_ENCODING: encoding,
            }
        ),
    )


def trace_response_text(tracer: logging.Logger | None, text: str) -> None:
    """Record decoded body text; formatting is skipped unless DEBUG is enabled."""
    if tracer is None or not tracer.isEnabledFor(logging.DEBUG):
        return
    tracer.debug("RESPONSE TEXT: %s", format_multiline(text), extra=context_extra())
