"""Test utilities for the htmlmark test suite.

This module provides helpers for converting HTML snippets, locating
elements in parsed trees and managing temporary directories.
"""

import shutil
import tempfile
from pathlib import Path

from bs4 import BeautifulSoup

from htmlmark.converter import HtmlToMarkdownConverter
from htmlmark.options import HtmlOptions


def md(html: str, **options) -> str:
    """Convert an HTML snippet with the given option overrides."""
    return HtmlToMarkdownConverter(HtmlOptions(**options)).convert(html)


def raw_md(html: str, **options) -> str:
    """Convert without stripping the document, exposing the framing newlines."""
    options.setdefault("strip_document", None)
    return md(html, **options)


def first_tag(html: str, name: str):
    """Parse ``html`` and return the first element named ``name``."""
    return BeautifulSoup(html, "html.parser").find(name)


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)
