"""Positions of items in a displayed list.

Users count from one; the model counts from zero. ``Index`` keeps the
zero-based form and converts on the way in and out.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field

MAX_ONE_BASED = 2**31 - 1


class Index(BaseModel):
    """A non-negative, zero-based list position."""

    model_config = {"frozen": True}

    zero_based: int = Field(ge=0, lt=MAX_ONE_BASED, strict=True)

    @classmethod
    def from_zero_based(cls, zero_based_index: int) -> Self:
        return cls(zero_based=zero_based_index)

    @classmethod
    def from_one_based(cls, one_based_index: int) -> Self:
        return cls(zero_based=one_based_index - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1

    @property
    def canonical(self) -> str:
        """The one-based form a user types."""
        return str(self.one_based)

    def __str__(self) -> str:
        return str(self.one_based)
