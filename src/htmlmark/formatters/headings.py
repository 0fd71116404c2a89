#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Heading formatter for ``h1``-``h6`` and any other ``h<digits>`` tag."""

from __future__ import annotations

from bs4 import Tag

from htmlmark.constants import ATX_CLOSED, HEADING_TAG_PATTERN, UNDERLINED
from htmlmark.context import ConversionState, TagContext
from htmlmark.formatters.base import register
from htmlmark.utils.text import ALL_WHITESPACE_PATTERN

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6


def heading_level(tag_name: str) -> int:
    """Return the heading level encoded in ``tag_name``, clamped to 1-6."""
    match = HEADING_TAG_PATTERN.fullmatch(tag_name)
    level = int(match.group(1)) if match else MIN_HEADING_LEVEL
    return max(MIN_HEADING_LEVEL, min(MAX_HEADING_LEVEL, level))


@register("h1", "h2", "h3", "h4", "h5", "h6")
def convert_heading(node: Tag, text: str, context: TagContext, state: ConversionState) -> str:
    """Render a heading in the configured style.

    Parameters
    ----------
    node : Tag
        The heading element.
    text : str
        Converted content of the heading.
    context : TagContext
        Ancestor context. Inside another inline context (a table cell or
        an enclosing heading) only the text is returned.
    state : ConversionState
        Conversion state; holds the heading dedup memo.

    Returns
    -------
    str
        The heading framed by blank lines, or ``""`` for an empty or
        duplicate heading.

    """
    if context.inline:
        return text

    options = state.options
    level = heading_level(node.name)
    text = ALL_WHITESPACE_PATTERN.sub(" ", text.strip())
    if not text:
        return ""

    if options.deduplicate_headings and not state.claim_heading(level, text):
        return ""

    if options.heading_style == UNDERLINED and level <= 2:
        rule = ("=" if level == 1 else "-") * len(text)
        return f"\n\n{text}\n{rule}\n\n"

    hashes = "#" * level
    if options.heading_style == ATX_CLOSED:
        return f"\n\n{hashes} {text} {hashes}\n\n"
    return f"\n\n{hashes} {text}\n\n"
