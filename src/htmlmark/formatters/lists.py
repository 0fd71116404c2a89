#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Ordered and unordered list formatters."""

from __future__ import annotations

from bs4 import Tag

from htmlmark.constants import LIST_TAGS
from htmlmark.context import ConversionState, TagContext
from htmlmark.formatters.base import register
from htmlmark.utils.html_utils import (
    count_previous_siblings,
    get_attr,
    is_tag,
    next_element_sibling,
    parse_positive_int,
)
from htmlmark.utils.text import indent_continuation


@register("ul", "ol")
def convert_list(node: Tag, text: str, context: TagContext, state: ConversionState) -> str:
    """Frame a list container.

    A list nested in an item is attached to the item's text with a single
    newline. A top-level list gets a blank line before it, plus one extra
    newline when the next element sibling is not another list.
    """
    if "li" in context:
        return "\n" + text.rstrip("\n")

    following = next_element_sibling(node)
    before_paragraph = following is not None and following.name not in LIST_TAGS
    return "\n\n" + text + ("\n" if before_paragraph else "")


def list_marker(node: Tag, context: TagContext, bullets: str) -> str:
    """Return ``N.`` for items of an ``<ol>``, otherwise the bullet for the ``<ul>`` depth."""
    parent = node.parent
    if is_tag(parent, "ol"):
        start = parse_positive_int(get_attr(parent, "start"))
        return f"{start + count_previous_siblings(node, 'li')}."

    depth = max(context.count("ul") - 1, 0)
    return bullets[depth % len(bullets)]


@register("li")
def convert_list_item(node: Tag, text: str, context: TagContext, state: ConversionState) -> str:
    text = text.strip()
    if not text:
        return "\n"

    marker = list_marker(node, context, state.options.bullets) + " "
    return marker + indent_continuation(text, len(marker)) + "\n"
