#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Markdown escaping for text content.

Escaping only ever applies to leaf text nodes, never to the Markdown
produced by formatters.
"""

from __future__ import annotations

import re

from htmlmark.options import HtmlOptions

MISC_CHARS_PATTERN = re.compile(r"([]\\&<`[>~=+|])")
DASH_SEQUENCE_PATTERN = re.compile(r"(\s|^)(-+(?:\s|$))")
HASH_SEQUENCE_PATTERN = re.compile(r"(\s|^)(#{1,6}(?:\s|$))")
LIST_ITEM_PATTERN = re.compile(r"((?:\s|^)[0-9]{1,9})([.)](?:\s|$))")


def escape_misc(text: str) -> str:
    r"""Escape Markdown-significant characters other than ``*`` and ``_``.

    Each of ``[ ] \ & < ` > ~ = + |`` gets a backslash, so a literal
    backslash ends up doubled exactly once. Dash runs that open or close a
    token, ``#`` runs of one to six characters bounded by whitespace, and
    the delimiter of a would-be ordered list marker are escaped as well.

    Examples
    --------
        >>> escape_misc("1. item")
        '1\\. item'

    """
    text = MISC_CHARS_PATTERN.sub(r"\\\1", text)
    text = DASH_SEQUENCE_PATTERN.sub(r"\1\\\2", text)
    text = HASH_SEQUENCE_PATTERN.sub(r"\1\\\2", text)
    return LIST_ITEM_PATTERN.sub(r"\1\\\2", text)


def escape_text(text: str, options: HtmlOptions) -> str:
    """Apply the escaping passes enabled in ``options`` to ``text``."""
    if not text:
        return text
    if options.escape_misc:
        text = escape_misc(text)
    if options.escape_asterisks:
        text = text.replace("*", r"\*")
    if options.escape_underscores:
        text = text.replace("_", r"\_")
    return text
