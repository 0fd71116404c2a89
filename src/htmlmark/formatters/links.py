#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Link and image formatters."""

from __future__ import annotations

from typing import Optional

from bs4 import Tag

from htmlmark.context import ConversionState, TagContext
from htmlmark.formatters.base import register
from htmlmark.options import HtmlOptions
from htmlmark.utils.html_utils import get_attr
from htmlmark.utils.text import chomp


def format_title(title: Optional[str], options: HtmlOptions) -> str:
    """Render the `` "title"`` part of a link or image destination."""
    if not title or options.strip_link_titles:
        return ""
    escaped = title.replace('"', r"\"")
    return f' "{escaped}"'


@register("a")
def convert_link(node: Tag, text: str, context: TagContext, state: ConversionState) -> str:
    """Render an anchor as an inline link or ``<autolink>``.

    Anchors with no visible text vanish; anchors with a missing or empty
    ``href`` keep only their text.
    """
    if context.noformat:
        return text
    options = state.options

    prefix, suffix, core = chomp(text)
    if not core:
        return ""

    href = get_attr(node, "href")
    title = get_attr(node, "title")

    if (
        options.autolinks
        and href
        and core.replace(r"\_", "_") == href
        and not title
        and not options.default_title
    ):
        return f"{prefix}<{href}>{suffix}"

    if not href:
        return prefix + core + suffix

    if options.default_title and not title:
        title = href

    return f"{prefix}[{core}]({href}{format_title(title, options)}){suffix}"


@register("img")
def convert_image(node: Tag, text: str, context: TagContext, state: ConversionState) -> str:
    """Render ``![alt](src "title")``, or just the alt text inside headings and table cells."""
    options = state.options
    alt = get_attr(node, "alt") or ""
    src = get_attr(node, "src") or ""

    if context.inline and not context.contains_any(options.keep_inline_images_in):
        return alt

    return f"![{alt}]({src}{format_title(get_attr(node, 'title'), options)})"
