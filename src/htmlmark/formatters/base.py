#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tag-to-formatter dispatch table.

Formatters are plain functions with the signature::

    formatter(node, text, context, state) -> str

where ``text`` is the already-converted Markdown of the node's children,
``context`` is the ancestor :class:`~htmlmark.context.TagContext` (the
element itself excluded) and ``state`` is the per-conversion
:class:`~htmlmark.context.ConversionState`.
"""

from __future__ import annotations

from typing import Callable, Optional

from bs4 import Tag

from htmlmark.context import ConversionState, TagContext, is_heading_tag

Formatter = Callable[[Tag, str, TagContext, ConversionState], str]

TAG_FORMATTERS: dict[str, Formatter] = {}

HEADING_FORMATTER_KEY = "h1"


def register(*tag_names: str) -> Callable[[Formatter], Formatter]:
    """Register the decorated function as the formatter for ``tag_names``."""

    def decorator(func: Formatter) -> Formatter:
        for name in tag_names:
            TAG_FORMATTERS[name] = func
        return func

    return decorator


def get_formatter(tag_name: str) -> Optional[Formatter]:
    """Look up the formatter for a tag, falling back to the heading formatter for ``h<digits>``."""
    formatter = TAG_FORMATTERS.get(tag_name)
    if formatter is None and is_heading_tag(tag_name):
        formatter = TAG_FORMATTERS.get(HEADING_FORMATTER_KEY)
    return formatter
