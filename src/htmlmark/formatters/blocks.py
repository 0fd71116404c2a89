#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Block-level formatters: paragraphs, containers, quotes, code blocks and breaks."""

from __future__ import annotations

from bs4 import Tag

from htmlmark.constants import BACKSLASH, BLOCK_WHITESPACE, CODE_FENCE, HORIZONTAL_RULE
from htmlmark.context import ConversionState, TagContext
from htmlmark.formatters.base import register
from htmlmark.utils.html_utils import extract_code_language
from htmlmark.utils.text import wrap_paragraph

@register("p")
def convert_paragraph(node: Tag, text: str, context: TagContext, state: ConversionState) -> str:
    """Frame paragraph text with blank lines, wrapping it when enabled."""
    if context.inline:
        return " " + text.strip(BLOCK_WHITESPACE) + " "
    text = text.strip(BLOCK_WHITESPACE)
    if not text:
        return ""
    if state.options.wrap:
        text = wrap_paragraph(text, state.options.wrap_width)
    return f"\n\n{text}\n\n"


@register("div", "article", "section")
def convert_division(node: Tag, text: str, context: TagContext, state: ConversionState) -> str:
    if context.inline:
        return " " + text.strip(BLOCK_WHITESPACE) + " "
    text = text.strip(BLOCK_WHITESPACE)
    return f"\n\n{text}\n\n" if text else ""


@register("blockquote")
def convert_blockquote(node: Tag, text: str, context: TagContext, state: ConversionState) -> str:
    """Prefix every line with ``> ``; blank lines get a bare ``>``."""
    text = text.strip(BLOCK_WHITESPACE)
    if context.inline:
        return " " + text + " "
    if not text:
        return "\n"
    quoted = "\n".join("> " + line if line else ">" for line in text.split("\n"))
    return "\n" + quoted + "\n\n"


@register("pre")
def convert_preformatted(node: Tag, text: str, context: TagContext, state: ConversionState) -> str:
    """Render a fenced code block.

    The fence language comes from a ``language-*``/``lang-*`` class on the
    nested ``<code>``, then from ``code_language_callback``, then from
    ``code_language``.
    """
    if not text:
        return ""
    options = state.options
    language = extract_code_language(node)
    if not language and options.code_language_callback is not None:
        language = options.code_language_callback(node) or ""
    if not language:
        language = options.code_language
    return f"\n\n{CODE_FENCE}{language}\n{text}\n{CODE_FENCE}\n\n"


@register("br")
def convert_line_break(node: Tag, text: str, context: TagContext, state: ConversionState) -> str:
    if context.inline:
        return " "
    if state.options.newline_style == BACKSLASH:
        return "\\\n"
    return "  \n"


@register("hr")
def convert_horizontal_rule(node: Tag, text: str, context: TagContext, state: ConversionState) -> str:
    return f"\n\n{HORIZONTAL_RULE}\n\n"
