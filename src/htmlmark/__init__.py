#  Copyright (c) 2025 Tom Villani, Ph.D.
"""htmlmark - HTML to Markdown conversion.

Convert HTML documents to Markdown with output compatible with the
python-markdownify family of converters: configurable heading, emphasis,
list and line-break styles, pipe tables, fenced code blocks and careful
whitespace handling.

Examples
--------
    >>> from htmlmark import html_to_markdown
    >>> html_to_markdown("<p>Some <em>emphasis</em></p>")
    'Some *emphasis*\\n\\n'

"""

__version__ = "1.0.0"

from htmlmark.api import html_to_markdown
from htmlmark.context import ConversionState, TagContext
from htmlmark.converter import HtmlToMarkdownConverter
from htmlmark.exceptions import (
    DependencyError,
    FileError,
    FileNotFoundError,
    HtmlMarkError,
    ParsingError,
    ValidationError,
)
from htmlmark.options import HtmlOptions

__all__ = [
    "__version__",
    "ConversionState",
    "DependencyError",
    "FileError",
    "FileNotFoundError",
    "HtmlMarkError",
    "HtmlOptions",
    "HtmlToMarkdownConverter",
    "ParsingError",
    "TagContext",
    "ValidationError",
    "html_to_markdown",
]
