#  Copyright (c) 2025 Tom Villani, Ph.D.
"""One-call conversion API.

This module loads HTML from the supported input kinds and runs the
converter with options built from an :class:`HtmlOptions` instance and/or
keyword overrides.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Union

from htmlmark.converter import HtmlToMarkdownConverter
from htmlmark.exceptions import FileError, FileNotFoundError, ValidationError
from htmlmark.options import HtmlOptions

logger = logging.getLogger(__name__)

HtmlInput = Union[str, bytes, Path, IO[str], IO[bytes]]


def is_file_like(obj: Any) -> bool:
    """Check if an object is file-like (has a callable ``read``)."""
    return hasattr(obj, "read") and callable(obj.read)


def load_html(input_data: HtmlInput) -> str | bytes:
    """Read HTML markup from a string, bytes, path or file-like object.

    Strings are always treated as markup; pass a :class:`pathlib.Path` to
    read a file. Bytes are returned unchanged so BeautifulSoup can detect
    the encoding.

    Raises
    ------
    FileNotFoundError
        If a path does not exist.
    FileError
        If reading the file or stream fails.
    ValidationError
        If ``input_data`` is of an unsupported type.

    """
    if isinstance(input_data, (str, bytes)):
        return input_data

    if isinstance(input_data, Path):
        if not input_data.exists():
            raise FileNotFoundError(str(input_data))
        logger.debug("Reading HTML from %s", input_data)
        try:
            return input_data.read_bytes()
        except OSError as e:
            raise FileError(f"Failed to read HTML file: {e}", file_path=str(input_data), original_error=e) from e

    if is_file_like(input_data):
        try:
            return input_data.read()
        except OSError as e:
            raise FileError(f"Failed to read HTML stream: {e}", original_error=e) from e

    raise ValidationError(
        f"Unsupported input type for HTML conversion: {type(input_data).__name__}",
        parameter_name="input_data",
        parameter_value=input_data,
    )


def build_options(options: HtmlOptions | None = None, **overrides: Any) -> HtmlOptions:
    """Merge keyword overrides into ``options`` (or the defaults).

    Raises
    ------
    ValidationError
        If an override names an unknown option or has an invalid value.

    """
    base = options or HtmlOptions()
    if not overrides:
        return base

    unknown = sorted(set(overrides) - HtmlOptions.field_names())
    if unknown:
        raise ValidationError(
            f"Unknown option(s): {', '.join(unknown)}",
            parameter_name=unknown[0],
            parameter_value=overrides[unknown[0]],
        )
    try:
        return base.create_updated(**overrides)
    except (TypeError, ValueError) as e:
        raise ValidationError(str(e), original_error=e) from e


def html_to_markdown(input_data: HtmlInput, options: HtmlOptions | None = None, **overrides: Any) -> str:
    """Convert HTML to Markdown.

    Parameters
    ----------
    input_data : str, bytes, pathlib.Path or file-like object
        HTML to convert. A ``str`` is treated as markup, a ``Path`` as a file
        to read; text and binary streams are read to the end.
    options : HtmlOptions, optional
        Conversion options. Defaults to ``HtmlOptions()``.
    **overrides
        Individual option values applied on top of ``options``.

    Returns
    -------
    str
        The Markdown document.

    Raises
    ------
    ValidationError
        For unsupported input types or invalid option overrides.
    FileError
        If the input file cannot be read.
    ParsingError
        If the HTML cannot be parsed.
    DependencyError
        If the selected tree builder is not installed.

    Examples
    --------
        >>> html_to_markdown("<h1>Title</h1>", heading_style="atx")
        '# Title\\n\\n'

        >>> from pathlib import Path
        >>> markdown = html_to_markdown(Path("page.html"))  # doctest: +SKIP

    """
    resolved = build_options(options, **overrides)
    html = load_html(input_data)
    return HtmlToMarkdownConverter(resolved).convert(html)
