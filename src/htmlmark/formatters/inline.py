#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Inline emphasis, strikethrough, code span and sub/superscript formatters."""

from __future__ import annotations

from bs4 import Tag

from htmlmark.context import ConversionState, TagContext
from htmlmark.formatters.base import register
from htmlmark.utils.text import chomp


def wrap_inline(text: str, markup: str, context: TagContext) -> str:
    """Wrap the chomped core of ``text`` in ``markup``, keeping outer spaces outside.

    Text inside a ``_noformat`` ancestor passes through unchanged. An empty
    core yields only the surrounding spaces.
    """
    if context.noformat:
        return text
    prefix, suffix, core = chomp(text)
    if not core:
        return prefix + suffix
    return f"{prefix}{markup}{core}{markup}{suffix}"


@register("b", "strong")
def convert_strong(node: Tag, text: str, context: TagContext, state: ConversionState) -> str:
    return wrap_inline(text, state.options.strong_em_symbol * 2, context)


@register("em", "i")
def convert_em(node: Tag, text: str, context: TagContext, state: ConversionState) -> str:
    return wrap_inline(text, state.options.strong_em_symbol, context)


@register("del", "s")
def convert_strikethrough(node: Tag, text: str, context: TagContext, state: ConversionState) -> str:
    return wrap_inline(text, "~~", context)


@register("code", "kbd", "samp")
def convert_code(node: Tag, text: str, context: TagContext, state: ConversionState) -> str:
    """Render a code span; inside ``<pre>`` the text is left for the fence."""
    if "pre" in context:
        return text
    return wrap_inline(text, "`", context)


@register("sub")
def convert_sub(node: Tag, text: str, context: TagContext, state: ConversionState) -> str:
    if not state.options.sub_symbol:
        return text
    return wrap_inline(text, state.options.sub_symbol, context)


@register("sup")
def convert_sup(node: Tag, text: str, context: TagContext, state: ConversionState) -> str:
    if not state.options.sup_symbol:
        return text
    return wrap_inline(text, state.options.sup_symbol, context)
