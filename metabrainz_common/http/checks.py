"""Classifying responses as successful or failed."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

import httpx

from metabrainz_common.asyncs import run_sync

from .errors import HttpError
from .status import is_success_status


@dataclass(frozen=True)
class ResponseCheck:
    """Outcome of checking one response: the response itself, or an error."""

    response: httpx.Response | None = None
    error: HttpError | None = None

    @property
    def ok(self) -> bool:
        """Return True when the response had a successful status."""
        return self.error is None

    def unwrap(self) -> httpx.Response:
        """Return the successful response, or raise the captured error."""
        if self.error is not None:
            raise self.error
        if self.response is None:
            raise ValueError("ResponseCheck carries neither a response nor an error")
        return self.response


async def acheck_response(
    response: httpx.Response,
    *,
    cancellation: threading.Event | None = None,
    tracer: logging.Logger | None = None,
) -> ResponseCheck:
    """Check one response, capturing an ``HttpError`` when it did not succeed.

    Successful responses are passed through untouched; their body is not read.
    """
    if is_success_status(response.status_code):
        return ResponseCheck(response=response)
    error = await HttpError.afrom_response(
        response, cancellation=cancellation, tracer=tracer
    )
    return ResponseCheck(error=error)


def check_response(
    response: httpx.Response,
    *,
    cancellation: threading.Event | None = None,
    tracer: logging.Logger | None = None,
) -> ResponseCheck:
    """Blocking form of ``acheck_response``."""
    if is_success_status(response.status_code):
        return ResponseCheck(response=response)
    return run_sync(
        acheck_response(response, cancellation=cancellation, tracer=tracer)
    )


async def aensure_successful(
    response: httpx.Response,
    *,
    cancellation: threading.Event | None = None,
    tracer: logging.Logger | None = None,
) -> httpx.Response:
    """Return the response when successful; raise its ``HttpError`` otherwise."""
    check = await acheck_response(response, cancellation=cancellation, tracer=tracer)
    return check.unwrap()


def ensure_successful(
    response: httpx.Response,
    *,
    cancellation: threading.Event | None = None,
    tracer: logging.Logger | None = None,
) -> httpx.Response:
    """Blocking form of ``aensure_successful``."""
    return check_response(response, cancellation=cancellation, tracer=tracer).unwrap()
