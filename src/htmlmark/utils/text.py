#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Whitespace normalization and text layout helpers."""

from __future__ import annotations

import re
import textwrap

ALL_WHITESPACE_PATTERN = re.compile(r"[\t \r\n]+")
NEWLINE_WHITESPACE_PATTERN = re.compile(r"[\t \r\n]*[\r\n][\t \r\n]*")
INLINE_WHITESPACE_PATTERN = re.compile(r"[\t ]+")
EXCESS_NEWLINES_PATTERN = re.compile(r"\n{3,}")


def collapse_whitespace(text: str, wrap: bool = False) -> str:
    """Collapse runs of whitespace in HTML text content.

    Parameters
    ----------
    text : str
        Raw text node content.
    wrap : bool, default False
        When True every whitespace run becomes a single space. Otherwise a run
        containing a line terminator becomes ``\\n`` and remaining tab/space
        runs become a single space.

    Returns
    -------
    str
        Normalized text. Applying the function twice gives the same result.

    """
    if wrap:
        return ALL_WHITESPACE_PATTERN.sub(" ", text)
    text = NEWLINE_WHITESPACE_PATTERN.sub("\n", text)
    return INLINE_WHITESPACE_PATTERN.sub(" ", text)


def chomp(text: str) -> tuple[str, str, str]:
    """Split ``text`` into leading spaces, trailing spaces and the core.

    Only space characters are split off. A text made entirely of spaces is
    returned as both the prefix and the suffix, with an empty core.

    Returns
    -------
    tuple[str, str, str]
        ``(prefix, suffix, core)``

    """
    core = text.strip(" ")
    if not core:
        return text, text, ""
    prefix = text[: len(text) - len(text.lstrip(" "))]
    suffix = text[len(text.rstrip(" ")) :]
    return prefix, suffix, core


def indent_continuation(text: str, width: int) -> str:
    """Indent every non-empty line after the first by ``width`` spaces."""
    lines = text.split("\n")
    pad = " " * width
    return "\n".join([lines[0]] + [pad + line if line else line for line in lines[1:]])


def wrap_paragraph(text: str, width: int) -> str:
    """Greedily wrap each line of a paragraph to ``width`` columns.

    Lines are trimmed before wrapping while their trailing whitespace
    (e.g. a ``<br>`` hard break) is kept verbatim, even on a line holding
    nothing but whitespace. Words longer than the width are never split.
    """
    wrapped = []
    for line in text.split("\n"):
        trimmed = line.strip()
        trailing = line[len(line.rstrip()) :]
        filled = textwrap.fill(trimmed, width=width, break_long_words=False, break_on_hyphens=False)
        wrapped.append(filled + trailing)
    return "\n".join(wrapped)


def normalize_newlines(text: str) -> str:
    """Collapse three or more consecutive newlines into exactly two."""
    return EXCESS_NEWLINES_PATTERN.sub("\n\n", text)


def strip_document(text: str, mode: str | None) -> str:
    """Strip leading and/or trailing newlines according to ``mode``."""
    if mode == "lstrip":
        return text.lstrip("\n")
    if mode == "rstrip":
        return text.rstrip("\n")
    if mode == "strip":
        return text.strip("\n")
    return text
