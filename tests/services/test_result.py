"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from scaffoldctl.domain.errors import MissingTemplateError
from scaffoldctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="env_merge", data={"label": "Base"})
        assert result.ok is True
        assert result.op == "env_merge"
        assert result.data == {"label": "Base"}
        assert result.warnings == []
        assert result.error is None

    def test_failure_from_exception(self) -> None:
        result = ServiceResult.failure(
            "layout_apply",
            MissingTemplateError("app/layout.tsx"),
            data={"path": "app/layout.tsx"},
        )
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "MISSING_TEMPLATE"
        assert result.error.detail == {"path": "app/layout.tsx"}
        assert result.data == {"path": "app/layout.tsx"}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="setup", data={"completed": ["auth"]}, warnings=["w"])
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["completed"] == ["auth"]
        assert parsed["warnings"] == ["w"]
        assert parsed["error"] is None

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_detail_defaults_empty(self) -> None:
        assert ServiceError(code="X", message="m").detail == {}
