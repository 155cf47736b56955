"""Text formatting helpers for diagnostic output."""

from __future__ import annotations

import re

_LINE_BREAK = re.compile(r"[\r\n]")


def format_multiline(
    text: str,
    prefix: str = "<<",
    suffix: str = ">>",
    separator: str = "\n  ",
) -> str:
    """Wrap text in delimiters, putting each line of multi-line text on its own line.

    Trailing line breaks are discarded and CRLF pairs count as one break.
    Single-line text is rendered as ``<<text>>``; multi-line text as
    ``<<`` followed by each line after ``separator`` and a final line break
    before ``>>``.
    """
    text = text.rstrip("\r\n").replace("\r\n", "\n")
    lines = _LINE_BREAK.split(text)
    if len(lines) == 1:
        return prefix + lines[0] + suffix
    return prefix + separator + separator.join(lines) + "\n" + suffix
