#  Copyright (c) 2025 Tom Villani, Ph.D.
"""BeautifulSoup node and attribute helpers shared by the formatters."""

from __future__ import annotations

import logging
from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag
from bs4.exceptions import FeatureNotFound

from htmlmark.constants import (
    CODE_LANGUAGE_CLASS_PREFIXES,
    HTML_PARSER_PACKAGES,
    TABLE_CELL_TAGS,
    WHITESPACE_INSIDE_BLOCK_TAGS,
    WHITESPACE_OUTSIDE_BLOCK_TAGS,
)
from htmlmark.context import is_heading_tag
from htmlmark.exceptions import DependencyError, ParsingError

logger = logging.getLogger(__name__)


def parse_html(html: str | bytes, html_parser: str = "html.parser") -> BeautifulSoup:
    """Parse markup into a BeautifulSoup tree with the requested tree builder.

    Raises
    ------
    DependencyError
        If the tree builder is not installed.
    ParsingError
        If the tree builder fails on the markup.

    """
    logger.debug("Parsing HTML with tree builder %s", html_parser)
    try:
        return BeautifulSoup(html, html_parser)
    except FeatureNotFound as e:
        package = HTML_PARSER_PACKAGES.get(html_parser)
        raise DependencyError(
            f"Selected HtmlOptions.html_parser not found: {html_parser}.",
            missing_packages=[package] if package else None,
            original_error=e,
        ) from e
    except Exception as e:
        raise ParsingError(f"Failed to parse HTML: {e}", parsing_stage="tree_building", original_error=e) from e


def get_attr(tag: Tag, name: str) -> Optional[str]:
    """Return an attribute as a string, joining multi-valued attributes.

    Returns None when the attribute is absent.
    """
    value = tag.get(name)
    if value is None:
        return None
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def parse_positive_int(value: Optional[str], default: int = 1) -> int:
    """Parse ``value`` as a positive integer, falling back to ``default``."""
    if value is None:
        return default
    try:
        number = int(value.strip())
    except ValueError:
        return default
    return number if number > 0 else default


def is_tag(node: object, *names: str) -> bool:
    """Return True if ``node`` is an element, optionally with one of ``names``."""
    if not isinstance(node, Tag) or isinstance(node, BeautifulSoup):
        return False
    return not names or node.name in names


def removes_whitespace_inside(node: PageElement | None) -> bool:
    """Return True for block elements whose inner boundary whitespace is dropped."""
    if not is_tag(node):
        return False
    name = node.name  # type: ignore[union-attr]
    return is_heading_tag(name) or name in WHITESPACE_INSIDE_BLOCK_TAGS


def removes_whitespace_outside(node: PageElement | None) -> bool:
    """Return True for block elements that swallow whitespace of adjacent text."""
    if not is_tag(node):
        return False
    name = node.name  # type: ignore[union-attr]
    return is_heading_tag(name) or name in WHITESPACE_OUTSIDE_BLOCK_TAGS


def next_element_sibling(node: PageElement) -> Optional[Tag]:
    """Return the next sibling that is an element, skipping text and comments."""
    sibling = node.next_sibling
    while sibling is not None and not isinstance(sibling, Tag):
        sibling = sibling.next_sibling
    return sibling


def count_previous_siblings(node: PageElement, name: str) -> int:
    """Count preceding element siblings named ``name``."""
    return sum(1 for sibling in node.previous_siblings if is_tag(sibling, name))


def extract_code_language(pre: Tag) -> str:
    """Return the language from a ``language-*``/``lang-*`` class on a nested ``<code>``."""
    code = pre.find("code")
    if not isinstance(code, Tag):
        return ""
    classes = code.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()
    for cls in classes:
        for prefix in CODE_LANGUAGE_CLASS_PREFIXES:
            if cls.startswith(prefix) and len(cls) > len(prefix):
                return cls[len(prefix) :]
    return ""


def is_header_row(row: Tag) -> bool:
    """Return True for rows inside ``<thead>`` or made only of ``<th>`` cells."""
    if row.find_parent("thead") is not None:
        return True
    cells = [child for child in row.children if is_tag(child, *TABLE_CELL_TAGS)]
    return bool(cells) and all(cell.name == "th" for cell in cells)


def is_first_table_row(row: Tag) -> bool:
    """Return True if no ``<tr>`` precedes ``row`` in its enclosing table."""
    table = row.find_parent("table")
    if table is None:
        return row.find_previous_sibling("tr") is None
    return table.find("tr") is row
