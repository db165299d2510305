"""Tests for output mode selection."""

import json

from isoval.output.formatters import OutputSettings, format_result
from isoval.services.result import ServiceResult


class TestFormatResult:
    def test_json(self) -> None:
        result = ServiceResult.success("validate", {"root": "X"})
        parsed = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert parsed["ok"] is True
        assert parsed["op"] == "validate"
        assert parsed["data"] == {"root": "X"}

    def test_json_wins_over_quiet(self) -> None:
        result = ServiceResult.success("validate")
        output = format_result(result, settings=OutputSettings(json_output=True, quiet=True))
        assert output.startswith("{")

    def test_quiet(self) -> None:
        result = ServiceResult.success("validate")
        assert format_result(result, settings=OutputSettings(quiet=True)) == "OK: validate"

    def test_default_is_human(self) -> None:
        result = ServiceResult.success("validate", {"message_id": "m", "root": "R"})
        assert format_result(result).startswith("OK")
