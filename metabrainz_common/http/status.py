"""HTTP status classification and naming."""

from __future__ import annotations

import re

import httpx

_WORD = re.compile(r"[A-Za-z0-9']+")


def is_success_status(status_code: int) -> bool:
    """Return True for status codes in the successful (2xx) range."""
    return 200 <= status_code <= 299


def status_name(status_code: int) -> str:
    """Return the symbolic name used in error messages for a status code.

    The name is the standard reason phrase with each word capitalised and all
    separators removed, so ``404`` gives ``NotFound`` and ``418`` gives
    ``ImATeapot``. Codes without a standard phrase are named by their number.
    """
    phrase = httpx.codes.get_reason_phrase(status_code)
    words = [word.replace("'", "") for word in _WORD.findall(phrase)]
    name = "".join(word[:1].upper() + word[1:] for word in words if word)
    return name or str(status_code)
