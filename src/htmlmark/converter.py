#  Copyright (c) 2025 Tom Villani, Ph.D.
"""HTML to Markdown document walker.

The converter walks a BeautifulSoup tree depth-first. Every element's
Markdown fragment is built bottom-up from the concatenated output of its
children plus the element's own attributes, using the formatter registered
for its tag name. Text nodes are whitespace-normalized, escaped and trimmed
at block boundaries before they reach their parent's formatter.

Examples
--------
Convert a string with default options:

    >>> from htmlmark.converter import HtmlToMarkdownConverter
    >>> HtmlToMarkdownConverter().convert("<p>Hello <b>world</b></p>")
    'Hello **world**\\n\\n'

Reuse one converter for several documents:

    >>> from htmlmark.options import HtmlOptions
    >>> converter = HtmlToMarkdownConverter(HtmlOptions(heading_style="atx"))
    >>> converter.convert("<h2>Intro</h2>")
    '## Intro\\n\\n'

"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup
from bs4.element import CData, NavigableString, PageElement, PreformattedString, Tag

from htmlmark.constants import BLOCK_WHITESPACE, SKIPPED_TAGS
from htmlmark.context import ConversionState, TagContext
from htmlmark.exceptions import ParsingError
from htmlmark.formatters import get_formatter
from htmlmark.options import HtmlOptions
from htmlmark.utils.escape import escape_text
from htmlmark.utils.html_utils import parse_html, removes_whitespace_inside, removes_whitespace_outside
from htmlmark.utils.text import collapse_whitespace, normalize_newlines, strip_document

logger = logging.getLogger(__name__)


class HtmlToMarkdownConverter:
    """Convert HTML documents to Markdown text.

    A converter only holds immutable options. All per-document state (the
    heading dedup memo) lives in a :class:`ConversionState` created by each
    call to :meth:`convert` or :meth:`convert_soup`, so one instance can be
    reused for any number of documents.

    Parameters
    ----------
    options : HtmlOptions, optional
        Conversion options. Defaults to ``HtmlOptions()``.

    """

    def __init__(self, options: HtmlOptions | None = None):
        self.options = options or HtmlOptions()

    def convert(self, html: str | bytes) -> str:
        """Parse ``html`` and convert it to Markdown.

        Parameters
        ----------
        html : str or bytes
            HTML markup. Bytes are decoded by BeautifulSoup's encoding detection.

        Returns
        -------
        str
            The Markdown document.

        Raises
        ------
        ParsingError
            If the tree builder fails on the markup.
        DependencyError
            If the configured tree builder is not installed.

        """
        soup = parse_html(html, self.options.html_parser)
        return self.convert_soup(soup)

    def convert_soup(self, soup: PageElement) -> str:
        """Convert an already-parsed tree (or any subtree) to Markdown.

        Raises
        ------
        ParsingError
            If the tree is nested deeper than the interpreter recursion limit allows.

        """
        state = ConversionState(self.options)
        try:
            markdown = self.process_node(soup, TagContext(), state)
        except RecursionError as e:
            raise ParsingError(
                "Document is nested too deeply to convert", parsing_stage="conversion", original_error=e
            ) from e
        return self.post_process(markdown)

    def post_process(self, markdown: str) -> str:
        """Apply newline normalization and document stripping."""
        if self.options.normalize_newlines:
            markdown = normalize_newlines(markdown)
        return strip_document(markdown, self.options.strip_document)

    def process_node(self, node: PageElement, context: TagContext, state: ConversionState) -> str:
        """Convert ``node`` seen under the ancestor ``context``."""
        if isinstance(node, CData):
            return str(node)
        if isinstance(node, PreformattedString):
            # Comments, doctypes, declarations and processing instructions
            return ""
        if isinstance(node, NavigableString):
            return self.process_text(node, context, state)
        if isinstance(node, BeautifulSoup):
            return self.process_children(node, context, state)
        if isinstance(node, Tag):
            return self.process_tag(node, context, state)
        return ""

    def process_children(self, node: Tag, context: TagContext, state: ConversionState) -> str:
        parts = []
        for child in node.children:
            parts.append(self.process_node(child, context, state))
        return "".join(parts)

    def process_tag(self, node: Tag, context: TagContext, state: ConversionState) -> str:
        name = node.name
        if name in SKIPPED_TAGS:
            return ""

        text = self.process_children(node, context.extend(name), state)

        if not self.should_convert_tag(name):
            return text
        formatter = get_formatter(name)
        if formatter is None:
            return text
        return formatter(node, text, context, state)

    def should_convert_tag(self, name: str) -> bool:
        """Apply the ``strip`` and ``convert`` tag filters."""
        strip = self.options.strip
        if strip is not None and name in strip:
            logger.debug("Not converting stripped tag <%s>", name)
            return False
        convert = self.options.convert
        if convert is not None and name not in convert:
            return False
        return True

    def process_text(self, node: NavigableString, context: TagContext, state: ConversionState) -> str:
        """Normalize, escape and boundary-trim one text node."""
        text = str(node)

        if not context.noformat:
            text = collapse_whitespace(text, wrap=state.options.wrap)
            text = escape_text(text, state.options)

        parent = node.parent
        if removes_whitespace_outside(node.previous_sibling) or (
            removes_whitespace_inside(parent) and node.previous_sibling is None
        ):
            text = text.lstrip(BLOCK_WHITESPACE)
        if removes_whitespace_outside(node.next_sibling) or (
            removes_whitespace_inside(parent) and node.next_sibling is None
        ):
            text = text.rstrip(BLOCK_WHITESPACE)
        return text
