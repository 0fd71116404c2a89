#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Pipe table formatters.

Rows are rendered as ``| cell | cell |`` lines. The header separator is
emitted after the first row of a table when that row is a header row
(inside ``<thead>`` or made only of ``<th>`` cells) or when header inference
is enabled.
"""

from __future__ import annotations

from bs4 import Tag

from htmlmark.constants import TABLE_CELL_TAGS, TABLE_SEPARATOR_CELL
from htmlmark.context import ConversionState, TagContext
from htmlmark.formatters.base import register
from htmlmark.utils.html_utils import get_attr, is_first_table_row, is_header_row, is_tag, parse_positive_int


def colspan_of(cell: Tag) -> int:
    return parse_positive_int(get_attr(cell, "colspan"))


@register("table")
def convert_table(node: Tag, text: str, context: TagContext, state: ConversionState) -> str:
    return "\n\n" + text.strip() + "\n\n"


@register("caption")
def convert_caption(node: Tag, text: str, context: TagContext, state: ConversionState) -> str:
    return text.strip() + "\n\n"


@register("td", "th")
def convert_cell(node: Tag, text: str, context: TagContext, state: ConversionState) -> str:
    content = text.strip().replace("\n", " ")
    return f" {content} |" + " |" * (colspan_of(node) - 1)


@register("tr")
def convert_row(node: Tag, text: str, context: TagContext, state: ConversionState) -> str:
    row = "|" + text + "\n"
    if not is_first_table_row(node):
        return row
    if not (is_header_row(node) or state.options.table_infer_header):
        return row

    columns = sum(colspan_of(cell) for cell in node.children if is_tag(cell, *TABLE_CELL_TAGS))
    if not columns:
        return row
    return row + "| " + " | ".join([TABLE_SEPARATOR_CELL] * columns) + " |\n"
