"""Tests for Index conversions."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from clientbook.domain.index import MAX_ONE_BASED, Index


class TestIndex:
    def test_from_one_based(self) -> None:
        index = Index.from_one_based(1)
        assert index.zero_based == 0
        assert index.one_based == 1

    def test_from_zero_based(self) -> None:
        index = Index.from_zero_based(4)
        assert index.one_based == 5

    def test_equivalent_factories(self) -> None:
        assert Index.from_one_based(3) == Index.from_zero_based(2)

    def test_negative_zero_based_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Index.from_zero_based(-1)

    def test_zero_one_based_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Index.from_one_based(0)

    def test_upper_bound(self) -> None:
        assert Index.from_one_based(MAX_ONE_BASED).zero_based == MAX_ONE_BASED - 1
        with pytest.raises(ValidationError):
            Index.from_one_based(MAX_ONE_BASED + 1)

    def test_display_is_one_based(self) -> None:
        assert str(Index.from_zero_based(0)) == "1"
        assert Index.from_zero_based(0).canonical == "1"
