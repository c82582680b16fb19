"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from clientbook.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="parse_price", data={"canonical": "12.50"})
        assert result.ok is True
        assert result.warnings == []
        assert result.error is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="INVALID_PRICE", message="Price should not be left empty.")
        result = ServiceResult(ok=False, op="parse_price", error=error)
        assert result.error is not None
        assert result.error.code == "INVALID_PRICE"

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="parse_tags", data={"tags": ["vip"]})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["tags"] == ["vip"]

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_default_detail(self) -> None:
        assert ServiceError(code="E", message="bad").detail == {}
