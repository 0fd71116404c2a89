#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Per-element Markdown formatters.

Importing this package populates :data:`TAG_FORMATTERS` through the
``register`` decorator in each formatter module.
"""

from htmlmark.formatters import blocks, headings, inline, links, lists, tables  # noqa: F401
from htmlmark.formatters.base import TAG_FORMATTERS, Formatter, get_formatter, register

__all__ = ["TAG_FORMATTERS", "Formatter", "get_formatter", "register"]
