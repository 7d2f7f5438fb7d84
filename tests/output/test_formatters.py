"""Tests for result formatting."""

from __future__ import annotations

from protoctl.errors import ToolFailedError
from protoctl.output.formatters import format_result
from protoctl.services.result import ServiceResult


class TestFormatResult:
    def test_success_line(self) -> None:
        result = ServiceResult(ok=True, op="lint", data={"files": 2})
        assert format_result(result, no_color=True) == "OK: lint  files=2"

    def test_success_lists_joined(self) -> None:
        result = ServiceResult(ok=True, op="test", data={"languages": ["go", "java"]})
        assert format_result(result, no_color=True) == "OK: test  languages=go, java"

    def test_empty_list(self) -> None:
        result = ServiceResult(ok=True, op="install_deps", data={"installed": []})
        assert format_result(result, no_color=True) == "OK: install_deps  installed=-"

    def test_success_without_data(self) -> None:
        result = ServiceResult(ok=True, op="lint")
        assert format_result(result, no_color=True) == "OK: lint"

    def test_long_lines_not_wrapped(self) -> None:
        deps = [f"github.com/example/tool{i}/cmd/tool{i}@v1.0.{i}" for i in range(5)]
        result = ServiceResult(ok=True, op="install_deps", data={"installed": deps})
        assert "\n" not in format_result(result, no_color=True)

    def test_warnings(self) -> None:
        result = ServiceResult(ok=True, op="lint", warnings=["no schema files"])
        lines = format_result(result, no_color=True).splitlines()
        assert lines[1] == "WARNING: no schema files"

    def test_failure_line(self) -> None:
        result = ServiceResult.failure("lint", ToolFailedError("api-linter", [], 1))
        assert format_result(result, no_color=True) == (
            "ERROR: lint - api-linter exited with status 1"
        )

    def test_markup_in_values_is_escaped(self) -> None:
        result = ServiceResult(ok=True, op="lint", data={"note": "[bold]x[/bold]"})
        assert "[bold]x[/bold]" in format_result(result, no_color=True)

    def test_warnings_follow_failure_line(self) -> None:
        result = ServiceResult.failure(
            "lint", ToolFailedError("api-linter", [], 1), warnings=["no schema files"]
        )
        assert format_result(result, no_color=True).splitlines() == [
            "ERROR: lint - api-linter exited with status 1",
            "WARNING: no schema files",
        ]
