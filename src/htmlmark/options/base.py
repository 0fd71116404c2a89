#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for converter options.

This module defines the immutable-configuration foundation shared by the
htmlmark options dataclasses.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        Raises
        ------
        TypeError
            If a keyword does not name a field of this dataclass.

        """
        return replace(self, **kwargs)

    @classmethod
    def field_names(cls) -> frozenset[str]:
        """Return the names of all dataclass fields of this options class."""
        return frozenset(f.name for f in fields(cls))
