from __future__ import annotations

"""Base-namespace sniffing from the leading directive lines of a document.

Only the declaration block at the head of a Turtle-style document is read:
lines starting with ``@`` up to the first content line. No grammar parsing is
performed. None of these helpers close the stream they are given.
"""

import io
import re
from typing import IO, AnyStr, Iterable

DIRECTIVE_MARKER = "@"
BASE_KEYWORD = "@base"
BYTE_ORDER_MARK = "\ufeff"

BASE_DIRECTIVE_RE = re.compile(r"@base <([^<>]*)>.*")


def _text_lines(stream: Iterable[AnyStr]) -> Iterable[str]:
    first = True
    for raw in stream:
        if isinstance(raw, bytes):
            # A byte order mark may only open the first line.
            line = raw.decode("utf-8-sig" if first else "utf-8", errors="replace")
        else:
            line = raw.lstrip(BYTE_ORDER_MARK) if first else raw
        first = False
        yield line


def scan_leading_directives(stream: IO[AnyStr] | Iterable[AnyStr]) -> list[str]:
    """Collect the ``@base`` lines of the leading directive block.

    Blank lines are skipped. Scanning stops for good at the first line whose
    first non-blank character is not ``@``; other directives such as
    ``@prefix`` are read past without being collected.
    """

    directives: list[str] = []
    for raw in _text_lines(stream):
        line = raw.strip()
        if not line:
            continue
        if not line.startswith(DIRECTIVE_MARKER):
            break
        if BASE_KEYWORD in line:
            directives.append(line)
    return directives


def capture_base_uri(directive: str) -> str:
    """Return the URL of a single ``@base <URL>`` line, or ``""``."""

    match = BASE_DIRECTIVE_RE.fullmatch(directive)
    if match is None:
        return ""
    return match.group(1)


def extract_base_uri(directives: Iterable[str]) -> str:
    """Return the first base URL captured from ``directives`` in order.

    Lines that do not match and empty captures (``@base <>``) are skipped;
    ``""`` means no base was declared.
    """

    captured = [url for url in (capture_base_uri(line) for line in directives) if url]
    return captured[0] if captured else ""


def base_uri_from_stream(stream: IO[AnyStr] | Iterable[AnyStr]) -> str:
    return extract_base_uri(scan_leading_directives(stream))


def base_uri_from_text(document: str) -> str:
    return base_uri_from_stream(io.BytesIO(document.encode("utf-8")))


__all__ = [
    "BASE_DIRECTIVE_RE",
    "scan_leading_directives",
    "capture_base_uri",
    "extract_base_uri",
    "base_uri_from_stream",
    "base_uri_from_text",
]
