"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from passmatch.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="lookup", data={"count": 0})
        assert result.ok is True
        assert result.op == "lookup"
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_failure_shorthand(self) -> None:
        result = ServiceResult.failure("open", "NOT_FOUND", "No such entry", path="/x")
        assert result.ok is False
        assert result.error == ServiceError(
            code="NOT_FOUND", message="No such entry", detail={"path": "/x"}
        )

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="search", data={"items": ["a/b"]}, meta={"n": 1})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["items"] == ["a/b"]
        assert parsed["meta"]["n"] == 1

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]
