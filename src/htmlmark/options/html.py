#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML-to-Markdown conversion.

This module defines the single options dataclass consumed by the converter,
the formatters and the command-line interface.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from bs4 import Tag

from htmlmark.constants import (
    DEFAULT_AUTOLINKS,
    DEFAULT_BULLETS,
    DEFAULT_CODE_LANGUAGE,
    DEFAULT_DEDUPLICATE_HEADINGS,
    DEFAULT_DEFAULT_TITLE,
    DEFAULT_ESCAPE_ASTERISKS,
    DEFAULT_ESCAPE_MISC,
    DEFAULT_ESCAPE_UNDERSCORES,
    DEFAULT_HEADING_STYLE,
    DEFAULT_HTML_PARSER,
    DEFAULT_NEWLINE_STYLE,
    DEFAULT_NORMALIZE_NEWLINES,
    DEFAULT_STRIP_DOCUMENT,
    DEFAULT_STRIP_LINK_TITLES,
    DEFAULT_STRONG_EM_SYMBOL,
    DEFAULT_SUB_SYMBOL,
    DEFAULT_SUP_SYMBOL,
    DEFAULT_TABLE_INFER_HEADER,
    DEFAULT_WRAP,
    DEFAULT_WRAP_WIDTH,
    HEADING_STYLES,
    HTML_PARSERS,
    NEWLINE_STYLES,
    STRIP_DOCUMENT_MODES,
    STRONG_EM_SYMBOLS,
    HeadingStyle,
    HtmlParser,
    NewlineStyle,
    StripDocumentMode,
    StrongEmSymbol,
)
from htmlmark.options.base import CloneFrozenMixin

CodeLanguageCallback = Callable[[Tag], Optional[str]]


def _normalize_tag_list(value: object, name: str) -> tuple[str, ...] | None:
    if value is None:
        return None
    if isinstance(value, str):
        raise ValueError(f"{name} must be a sequence of tag names, not a string")
    return tuple(str(tag).lower() for tag in value)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class HtmlOptions(CloneFrozenMixin):
    """Configuration options for HTML-to-Markdown conversion.

    Options are immutable for the lifetime of a conversion. Use
    :meth:`create_updated` to derive a modified copy.

    Parameters
    ----------
    autolinks : bool, default True
        Emit ``<url>`` when a link's visible text equals its ``href`` and it
        has no title.
    bullets : str, default "*+-"
        Bullet characters for unordered lists, cycled by nesting depth.
    code_language : str, default ""
        Fallback language for fenced code blocks.
    code_language_callback : callable or None, default None
        Called with the ``<pre>`` tag; a non-empty return value is used as the
        fence language when the nested ``<code>`` carries no language class.
    convert : tuple[str, ...] or None, default None
        When set, only these tags are converted. An empty tuple converts nothing.
    strip : tuple[str, ...] or None, default None
        Tags that are not converted; their children's text is kept. Takes
        precedence over ``convert``.
    default_title : bool, default False
        Use the ``href`` as link title when the link has none.
    strip_link_titles : bool, default True
        Drop the ``"title"`` part of links and images.
    escape_asterisks : bool, default True
        Escape ``*`` in text content.
    escape_underscores : bool, default True
        Escape ``_`` in text content.
    escape_misc : bool, default False
        Escape other Markdown-significant characters and patterns.
    heading_style : {"underlined", "atx", "atx_closed"}, default "underlined"
        Heading rendering style. ``underlined`` applies to levels 1 and 2 only.
    keep_inline_images_in : tuple[str, ...], default ()
        Ancestor tags in which images stay images inside inline contexts
        (headings and table cells).
    newline_style : {"spaces", "backslash"}, default "spaces"
        Rendering of ``<br>``.
    normalize_newlines : bool, default True
        Collapse three or more consecutive newlines into two.
    strip_document : {"lstrip", "rstrip", "strip"} or None, default "lstrip"
        Newline stripping applied to the final document.
    strong_em_symbol : {"*", "_"}, default "*"
        Symbol used for emphasis (once) and strong emphasis (twice).
    sub_symbol, sup_symbol : str, default ""
        Markers wrapped around subscript/superscript text. Empty means plain text.
    table_infer_header : bool, default True
        Treat the first table row as a header when no explicit header markup exists.
    deduplicate_headings : bool, default True
        Emit a heading with the same level and text only once per conversion.
    wrap : bool, default False
        Wrap paragraph text.
    wrap_width : int, default 80
        Column width used when ``wrap`` is enabled.
    html_parser : {"html.parser", "html5lib", "lxml"}, default "html.parser"
        BeautifulSoup tree builder used to parse string input.

    Examples
    --------
    ATX headings with underscore emphasis:
        >>> options = HtmlOptions(heading_style="atx", strong_em_symbol="_")

    Only convert links and images:
        >>> options = HtmlOptions(convert=("a", "img"))

    """

    autolinks: bool = field(
        default=DEFAULT_AUTOLINKS,
        metadata={
            "help": "Render links whose text equals their href as <url>",
            "cli_name": "no-autolinks",
            "importance": "core",
        },
    )
    bullets: str = field(
        default=DEFAULT_BULLETS,
        metadata={"help": "Bullet characters for unordered lists, cycled by nesting depth", "importance": "core"},
    )
    code_language: str = field(
        default=DEFAULT_CODE_LANGUAGE,
        metadata={"help": "Default language for fenced code blocks", "importance": "core"},
    )
    code_language_callback: CodeLanguageCallback | None = field(
        default=None,
        metadata={"help": "Callable resolving a code block language from the <pre> tag", "exclude_from_cli": True},
    )
    convert: tuple[str, ...] | None = field(
        default=None,
        metadata={"help": "Only convert these tags (comma-separated)", "type": "tag_list", "importance": "advanced"},
    )
    strip: tuple[str, ...] | None = field(
        default=None,
        metadata={
            "help": "Do not convert these tags, keep their text (comma-separated)",
            "type": "tag_list",
            "importance": "advanced",
        },
    )
    default_title: bool = field(
        default=DEFAULT_DEFAULT_TITLE,
        metadata={"help": "Use the href as link title when none is given", "importance": "advanced"},
    )
    strip_link_titles: bool = field(
        default=DEFAULT_STRIP_LINK_TITLES,
        metadata={
            "help": "Drop title attributes from links and images",
            "cli_name": "keep-link-titles",
            "importance": "core",
        },
    )
    escape_asterisks: bool = field(
        default=DEFAULT_ESCAPE_ASTERISKS,
        metadata={"help": "Escape asterisks in text", "cli_name": "no-escape-asterisks", "importance": "advanced"},
    )
    escape_underscores: bool = field(
        default=DEFAULT_ESCAPE_UNDERSCORES,
        metadata={"help": "Escape underscores in text", "cli_name": "no-escape-underscores", "importance": "advanced"},
    )
    escape_misc: bool = field(
        default=DEFAULT_ESCAPE_MISC,
        metadata={"help": "Escape other Markdown-significant characters", "importance": "advanced"},
    )
    heading_style: HeadingStyle = field(
        default=DEFAULT_HEADING_STYLE,
        metadata={"help": "Heading rendering style", "choices": list(HEADING_STYLES), "importance": "core"},
    )
    keep_inline_images_in: tuple[str, ...] = field(
        default=(),
        metadata={
            "help": "Ancestor tags in which images inside headings/cells are kept (comma-separated)",
            "type": "tag_list",
            "importance": "advanced",
        },
    )
    newline_style: NewlineStyle = field(
        default=DEFAULT_NEWLINE_STYLE,
        metadata={"help": "Line break style for <br>", "choices": list(NEWLINE_STYLES), "importance": "core"},
    )
    normalize_newlines: bool = field(
        default=DEFAULT_NORMALIZE_NEWLINES,
        metadata={
            "help": "Collapse runs of three or more newlines",
            "cli_name": "no-normalize-newlines",
            "importance": "advanced",
        },
    )
    strip_document: StripDocumentMode | None = field(
        default=DEFAULT_STRIP_DOCUMENT,
        metadata={
            "help": "Strip leading/trailing newlines of the document",
            "choices": list(STRIP_DOCUMENT_MODES) + ["none"],
            "importance": "core",
        },
    )
    strong_em_symbol: StrongEmSymbol = field(
        default=DEFAULT_STRONG_EM_SYMBOL,
        metadata={"help": "Emphasis symbol", "choices": list(STRONG_EM_SYMBOLS), "importance": "core"},
    )
    sub_symbol: str = field(
        default=DEFAULT_SUB_SYMBOL,
        metadata={"help": "Marker wrapped around subscript text", "importance": "advanced"},
    )
    sup_symbol: str = field(
        default=DEFAULT_SUP_SYMBOL,
        metadata={"help": "Marker wrapped around superscript text", "importance": "advanced"},
    )
    table_infer_header: bool = field(
        default=DEFAULT_TABLE_INFER_HEADER,
        metadata={
            "help": "Treat the first table row as a header",
            "cli_name": "no-table-infer-header",
            "importance": "advanced",
        },
    )
    deduplicate_headings: bool = field(
        default=DEFAULT_DEDUPLICATE_HEADINGS,
        metadata={
            "help": "Emit repeated headings only once",
            "cli_name": "no-deduplicate-headings",
            "importance": "advanced",
        },
    )
    wrap: bool = field(
        default=DEFAULT_WRAP,
        metadata={"help": "Wrap paragraph text", "importance": "core"},
    )
    wrap_width: int = field(
        default=DEFAULT_WRAP_WIDTH,
        metadata={"help": "Column width for paragraph wrapping", "type": int, "importance": "core"},
    )
    html_parser: HtmlParser = field(
        default=DEFAULT_HTML_PARSER,
        metadata={"help": "BeautifulSoup tree builder", "choices": list(HTML_PARSERS), "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate choice fields and normalize tag lists.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.heading_style not in HEADING_STYLES:
            raise ValueError(f"heading_style must be one of {HEADING_STYLES}, got {self.heading_style!r}")
        if self.newline_style not in NEWLINE_STYLES:
            raise ValueError(f"newline_style must be one of {NEWLINE_STYLES}, got {self.newline_style!r}")
        if self.strong_em_symbol not in STRONG_EM_SYMBOLS:
            raise ValueError(f"strong_em_symbol must be one of {STRONG_EM_SYMBOLS}, got {self.strong_em_symbol!r}")
        if self.strip_document is not None and self.strip_document not in STRIP_DOCUMENT_MODES:
            raise ValueError(
                f"strip_document must be None or one of {STRIP_DOCUMENT_MODES}, got {self.strip_document!r}"
            )
        if self.html_parser not in HTML_PARSERS:
            raise ValueError(f"html_parser must be one of {HTML_PARSERS}, got {self.html_parser!r}")
        for name in ("bullets", "code_language", "sub_symbol", "sup_symbol"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {type(value).__name__}")
        if not self.bullets:
            raise ValueError("bullets must contain at least one character")
        if isinstance(self.wrap_width, bool) or not isinstance(self.wrap_width, int):
            raise ValueError(f"wrap_width must be an integer, got {type(self.wrap_width).__name__}")
        if self.wrap_width <= 0:
            raise ValueError(f"wrap_width must be positive, got {self.wrap_width}")
        if self.code_language_callback is not None and not callable(self.code_language_callback):
            raise ValueError("code_language_callback must be callable or None")

        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "convert", _normalize_tag_list(self.convert, "convert"))
        object.__setattr__(self, "strip", _normalize_tag_list(self.strip, "strip"))
        keep_images = _normalize_tag_list(self.keep_inline_images_in, "keep_inline_images_in")
        object.__setattr__(self, "keep_inline_images_in", keep_images or ())
