#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for htmlmark."""

from htmlmark.options.base import CloneFrozenMixin
from htmlmark.options.html import CodeLanguageCallback, HtmlOptions

__all__ = ["CloneFrozenMixin", "CodeLanguageCallback", "HtmlOptions"]
