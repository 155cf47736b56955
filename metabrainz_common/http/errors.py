"""Typed errors describing unsuccessful HTTP responses."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

import httpx

from metabrainz_common.asyncs import run_sync

from .content import aget_string_content, request_of
from .headers import copy_headers, split_content_headers
from .status import status_name as name_of_status


@dataclass(frozen=True, eq=False)
class HttpError(Exception):
    """Snapshot of an HTTP response, usable as a raised error.

    Every field is owned by the snapshot: header collections are copies and
    the body is decoded eagerly, so the error stays fully readable after the
    originating response has been closed or mutated.
    """

    status: int
    reason: str | None = None
    version: str | None = None
    content: str | None = None
    content_headers: httpx.Headers | None = None
    response_headers: httpx.Headers | None = None
    request_method: str | None = None
    request_uri: str | None = None
    request_headers: httpx.Headers | None = None
    cause: Exception | None = field(default=None, repr=False)
    override_message: str | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.cause is not None:
            object.__setattr__(self, "__cause__", self.cause)

    @property
    def status_name(self) -> str:
        """Return the symbolic name of the status code, e.g. ``NotFound``."""
        return name_of_status(self.status)

    @property
    def message(self) -> str:
        """Return ``HTTP[/version] code (Name)[ 'reason']`` or the override."""
        if self.override_message is not None:
            return self.override_message
        prefix = "HTTP" if not self.version else f"HTTP/{self.version}"
        text = f"{prefix} {self.status} ({self.status_name})"
        if self.reason is not None:
            text += f" '{self.reason}'"
        return text

    def __str__(self) -> str:
        """Return the human-readable error message."""
        return self.message

    @classmethod
    async def afrom_response(
        cls,
        response: httpx.Response,
        *,
        message: str | None = None,
        cancellation: threading.Event | None = None,
        tracer: logging.Logger | None = None,
    ) -> HttpError:
        """Capture a snapshot of any response, regardless of its status.

        The body is read first, while the stream is still live. Failures while
        reading or decoding propagate unchanged and no snapshot is produced.
        """
        content = await aget_string_content(
            response, cancellation=cancellation, tracer=tracer
        )
        content_headers, response_headers = split_content_headers(response.headers)
        request = request_of(response)
        return cls(
            status=response.status_code,
            reason=response.reason_phrase or None,
            version=_protocol_version(response),
            content=content,
            content_headers=content_headers,
            response_headers=response_headers,
            request_method=None if request is None else request.method,
            request_uri=None if request is None else str(request.url),
            request_headers=None if request is None else copy_headers(request.headers),
            override_message=message,
        )

    @classmethod
    def from_response(
        cls,
        response: httpx.Response,
        *,
        message: str | None = None,
        cancellation: threading.Event | None = None,
        tracer: logging.Logger | None = None,
    ) -> HttpError:
        """Blocking form of ``afrom_response``."""
        return run_sync(
            cls.afrom_response(
                response, message=message, cancellation=cancellation, tracer=tracer
            )
        )


def _protocol_version(response: httpx.Response) -> str | None:
    version = response.http_version.strip()
    if not version:
        return None
    return version.removeprefix("HTTP/")
