#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Ancestor-tag context tracking for the document walker.

A :class:`TagContext` is an immutable, ordered record of the tag names
enclosing a node, plus the pseudo-tags ``_inline``, ``_noformat`` and
``_inline_element`` that switch formatting rules for everything below the
element that introduced them. Extending a context always returns a new
object, so sibling subtrees never observe each other's context.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

from htmlmark.constants import (
    HEADING_TAG_PATTERN,
    INLINE_CONTEXT,
    INLINE_CONTEXT_TAGS,
    INLINE_ELEMENT_CONTEXT,
    INLINE_ELEMENT_TAGS,
    NOFORMAT_CONTEXT,
    NOFORMAT_TAGS,
)

if TYPE_CHECKING:
    from htmlmark.options import HtmlOptions

logger = logging.getLogger(__name__)


def is_heading_tag(tag_name: str) -> bool:
    """Return True for ``h`` followed by one or more digits."""
    return HEADING_TAG_PATTERN.fullmatch(tag_name) is not None


@dataclass(frozen=True)
class TagContext:
    """Immutable ordered sequence of ancestor tag names and pseudo-tags.

    Parameters
    ----------
    tags : tuple[str, ...]
        Tag names from the outermost ancestor inwards.

    Examples
    --------
        >>> ctx = TagContext().extend("td").extend("code")
        >>> "_inline" in ctx and "_noformat" in ctx
        True

    """

    tags: tuple[str, ...] = ()
    _members: frozenset[str] = field(default=frozenset(), init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_members", frozenset(self.tags))

    def extend(self, tag_name: str) -> TagContext:
        """Return the context seen by the children of ``tag_name``.

        The tag name is always appended. Headings and table cells add
        ``_inline``; ``pre``/``code``/``kbd``/``samp`` add ``_noformat``;
        inline formatting elements add ``_inline_element``.
        """
        added = [tag_name]
        if is_heading_tag(tag_name) or tag_name in INLINE_CONTEXT_TAGS:
            added.append(INLINE_CONTEXT)
        if tag_name in NOFORMAT_TAGS:
            added.append(NOFORMAT_CONTEXT)
        if tag_name in INLINE_ELEMENT_TAGS:
            added.append(INLINE_ELEMENT_CONTEXT)
        return TagContext(self.tags + tuple(added))

    def __contains__(self, tag_name: object) -> bool:
        return tag_name in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(self.tags)

    def __len__(self) -> int:
        return len(self.tags)

    def count(self, tag_name: str) -> int:
        """Return how many times ``tag_name`` occurs in the context."""
        return self.tags.count(tag_name)

    def contains_any(self, tag_names: tuple[str, ...] | frozenset[str]) -> bool:
        """Return True if any of ``tag_names`` is present."""
        return not self._members.isdisjoint(tag_names)

    @property
    def inline(self) -> bool:
        return INLINE_CONTEXT in self._members

    @property
    def noformat(self) -> bool:
        return NOFORMAT_CONTEXT in self._members


@dataclass
class ConversionState:
    """Mutable state scoped to a single top-level conversion.

    Parameters
    ----------
    options : HtmlOptions
        Options in force for the conversion.
    seen_headings : set[tuple[int, str]]
        ``(level, text)`` keys of headings already emitted.

    """

    options: HtmlOptions
    seen_headings: set[tuple[int, str]] = field(default_factory=set)

    def claim_heading(self, level: int, text: str) -> bool:
        """Record a heading and return False if it was already emitted."""
        key = (level, text)
        if key in self.seen_headings:
            logger.debug("Dropping duplicate heading h%d: %r", level, text)
            return False
        self.seen_headings.add(key)
        return True
