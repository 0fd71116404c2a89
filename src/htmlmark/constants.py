#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the htmlmark library.

This module centralizes the literal types, style names, default option values
and tag groupings used across the converter.

Constants are organized by category:
1. Type Definitions - Literal types for option values
2. Style Names - heading, newline, emphasis and document strip styles
3. Default Option Values
4. Tag Groupings - the tag sets that drive context and whitespace decisions
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HeadingStyle = Literal["atx", "atx_closed", "underlined"]
NewlineStyle = Literal["spaces", "backslash"]
StrongEmSymbol = Literal["*", "_"]
StripDocumentMode = Literal["lstrip", "rstrip", "strip"]
HtmlParser = Literal["html.parser", "html5lib", "lxml"]

# =============================================================================
# Style Names
# =============================================================================

# Heading styles
ATX: HeadingStyle = "atx"
ATX_CLOSED: HeadingStyle = "atx_closed"
UNDERLINED: HeadingStyle = "underlined"
SETEXT: HeadingStyle = UNDERLINED
HEADING_STYLES: tuple[str, ...] = (ATX, ATX_CLOSED, UNDERLINED)

# Line break styles
SPACES: NewlineStyle = "spaces"
BACKSLASH: NewlineStyle = "backslash"
NEWLINE_STYLES: tuple[str, ...] = (SPACES, BACKSLASH)

# Strong/emphasis symbols
ASTERISK: StrongEmSymbol = "*"
UNDERSCORE: StrongEmSymbol = "_"
STRONG_EM_SYMBOLS: tuple[str, ...] = (ASTERISK, UNDERSCORE)

# Document-level newline stripping
LSTRIP: StripDocumentMode = "lstrip"
RSTRIP: StripDocumentMode = "rstrip"
STRIP: StripDocumentMode = "strip"
STRIP_DOCUMENT_MODES: tuple[str, ...] = (LSTRIP, RSTRIP, STRIP)

HTML_PARSERS: tuple[str, ...] = ("html.parser", "html5lib", "lxml")

# =============================================================================
# Default Option Values
# =============================================================================

DEFAULT_AUTOLINKS = True
DEFAULT_BULLETS = "*+-"
DEFAULT_CODE_LANGUAGE = ""
DEFAULT_DEFAULT_TITLE = False
DEFAULT_STRIP_LINK_TITLES = True
DEFAULT_ESCAPE_ASTERISKS = True
DEFAULT_ESCAPE_UNDERSCORES = True
DEFAULT_ESCAPE_MISC = False
DEFAULT_HEADING_STYLE: HeadingStyle = UNDERLINED
DEFAULT_NEWLINE_STYLE: NewlineStyle = SPACES
DEFAULT_NORMALIZE_NEWLINES = True
DEFAULT_STRIP_DOCUMENT: StripDocumentMode | None = LSTRIP
DEFAULT_STRONG_EM_SYMBOL: StrongEmSymbol = ASTERISK
DEFAULT_SUB_SYMBOL = ""
DEFAULT_SUP_SYMBOL = ""
DEFAULT_TABLE_INFER_HEADER = True
DEFAULT_DEDUPLICATE_HEADINGS = True
DEFAULT_WRAP = False
DEFAULT_WRAP_WIDTH = 80
DEFAULT_HTML_PARSER: HtmlParser = "html.parser"

# Optional tree builders and the distributions that provide them
HTML_PARSER_PACKAGES: dict[str, str] = {
    "html5lib": "html5lib",
    "lxml": "lxml",
}

# =============================================================================
# Tag Groupings
# =============================================================================

# Pseudo-tags appended to the ancestor context
INLINE_CONTEXT = "_inline"
NOFORMAT_CONTEXT = "_noformat"
INLINE_ELEMENT_CONTEXT = "_inline_element"

HEADING_TAG_PATTERN = re.compile(r"h(\d+)")

INLINE_CONTEXT_TAGS = frozenset({"td", "th"})
NOFORMAT_TAGS = frozenset({"pre", "code", "kbd", "samp"})
INLINE_ELEMENT_TAGS = frozenset({"a", "img", "b", "strong", "i", "em", "code", "del", "s", "sub", "sup"})

# Elements whose inner boundary whitespace is dropped
WHITESPACE_INSIDE_BLOCK_TAGS = frozenset(
    {
        "p",
        "blockquote",
        "article",
        "div",
        "section",
        "ol",
        "ul",
        "li",
        "dl",
        "dt",
        "dd",
        "table",
        "thead",
        "tbody",
        "tfoot",
        "tr",
        "td",
        "th",
    }
)

# Elements that swallow whitespace of adjacent text siblings
WHITESPACE_OUTSIDE_BLOCK_TAGS = WHITESPACE_INSIDE_BLOCK_TAGS | frozenset({"pre"})

# Characters trimmed at block boundaries
BLOCK_WHITESPACE = " \t\r\n"

# Elements dropped together with their content
SKIPPED_TAGS = frozenset({"script", "style"})

LIST_TAGS = frozenset({"ul", "ol"})
TABLE_CELL_TAGS = frozenset({"td", "th"})

CODE_LANGUAGE_CLASS_PREFIXES: tuple[str, ...] = ("language-", "lang-")

TABLE_SEPARATOR_CELL = "---"
CODE_FENCE = "```"
HORIZONTAL_RULE = "---"

# =============================================================================
# CLI Exit Codes
# =============================================================================

EXIT_SUCCESS = 0
EXIT_CONVERSION_ERROR = 1
EXIT_FILE_ERROR = 2
EXIT_VALIDATION_ERROR = 3
