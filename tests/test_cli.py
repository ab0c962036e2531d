# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for the ultra-utils command line."""

from __future__ import annotations

import json
import os
from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner

from ultra_utils import __version__
from ultra_utils.cli import FunctionFailed, FunctionNotFound, call_function, cli, format_result
from ultra_utils.color_utils import Rgb
from ultra_utils.registry import all_function_names


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove ULTRA_UTILS_* variables inherited from the calling shell."""
    for key in list(os.environ):
        if key.startswith("ULTRA_UTILS_"):
            monkeypatch.delenv(key)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


# =============================================================================
# Tests: format_result and call_function
# =============================================================================


class TestFormatResult:
    """Tests for format_result."""

    def test_text_is_unchanged(self) -> None:
        assert format_result("hello-world") == "hello-world"

    def test_scalars(self) -> None:
        assert format_result(True) == "true"
        assert format_result(None) == "null"
        assert format_result(42) == "42"
        assert format_result(2.5) == "2.5"

    def test_dates(self) -> None:
        assert format_result(date(2024, 2, 29)) == "2024-02-29"

    def test_containers_are_json(self) -> None:
        assert format_result([1, [2, 3]], indent=None) == "[1, [2, 3]]"
        assert format_result({"a": 1}) == '{\n  "a": 1\n}'

    def test_dataclasses_are_json(self) -> None:
        assert json.loads(format_result(Rgb(1, 2, 3))) == {"r": 1, "g": 2, "b": 3}


class TestCallFunction:
    """Tests for call_function."""

    def test_converts_arguments(self) -> None:
        assert call_function("padStart", ["42", "5", "0"]) == "00042"
        assert call_function("chunk", ["[1, 2, 3]", "2"]) == [[1, 2], [3]]

    def test_python_name_is_accepted(self) -> None:
        assert call_function("levenshtein_distance", ["kitten", "sitting"]) == 3

    def test_unknown_function(self) -> None:
        with pytest.raises(FunctionNotFound) as exc_info:
            call_function("slugifyy", [])
        assert exc_info.value.suggestions == ["slugify"]
        assert exc_info.value.exit_code == 1

    def test_bad_arguments(self) -> None:
        with pytest.raises(FunctionFailed, match="Missing argument 'length'"):
            call_function("truncate", ["abc"])

    def test_usage_names_variadic_parameters(self) -> None:
        with pytest.raises(FunctionFailed, match=r"Usage: intersection\(first, \*others\)"):
            call_function("intersection", ["[1]", "not json"])

    def test_function_error(self) -> None:
        with pytest.raises(FunctionFailed) as exc_info:
            call_function("chunk", ["[1]", "0"])
        assert isinstance(exc_info.value.error, ValueError)
        assert "Array Utilities" in exc_info.value.message


# =============================================================================
# Tests: function commands
# =============================================================================


class TestFunctionCommands:
    """Tests for calling functions through the CLI."""

    def test_slugify(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["slugify", "Hello World"])
        assert result.exit_code == 0
        assert result.output == "hello-world\n"

    def test_text_argument_keeps_digits(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["reverse", "123"])
        assert result.exit_code == 0
        assert result.output == "321\n"

    def test_numbers(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["commaNumber", "1234567"])
        assert result.output == "1,234,567\n"
        result = runner.invoke(cli, ["toCurrency", "1234.5"])
        assert result.output == "$1,234.50\n"

    def test_negative_number_is_an_argument(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["clamp", "-5", "0", "10"])
        assert result.exit_code == 0
        assert result.output == "0\n"

    def test_boolean_output(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["isEmail", "test@example.com"])
        assert result.output == "true\n"
        result = runner.invoke(cli, ["isLeapYear", "2023"])
        assert result.output == "false\n"

    def test_json_output(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["chunk", "[1, 2, 3, 4]", "2"])
        assert result.exit_code == 0
        assert json.loads(result.output) == [[1, 2], [3, 4]]
        assert result.output.startswith("[\n  [\n")

    def test_record_output(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["hexToRgb", "#ff5733"])
        assert json.loads(result.output) == {"r": 255, "g": 87, "b": 51}

    def test_alias_names(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["bytes", "1536"])
        assert result.output == "1.5 KB\n"
        result = runner.invoke(cli, ["get", '{"a": {"b": [1, 2]}}', "a.b.1"])
        assert result.output == "2\n"

    def test_indent_option(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--indent", "0", "chunk", "[1, 2, 3, 4]", "2"])
        assert result.output == "[[1, 2], [3, 4]]\n"
        result = runner.invoke(cli, ["--indent", "4", "chunk", "[1, 2]", "1"])
        assert result.output.startswith("[\n    [\n")

    def test_unknown_function(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["slug"])
        assert result.exit_code == 1
        assert "Function 'slug' not found" in result.output
        assert "Did you mean: slugify" in result.output
        assert 'Use "ultra-utils list"' in result.output

    def test_missing_argument(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["truncate", "abc"])
        assert result.exit_code == 1
        assert "Error executing truncate: Missing argument 'length'" in result.output
        assert "Usage: truncate(text, length, suffix)" in result.output
        assert 'Use "ultra-utils help string"' in result.output

    def test_conversion_error(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["truncate", "abc", "ten"])
        assert result.exit_code == 1
        assert "length: expected int" in result.output

    def test_function_error(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["chunk", "[1, 2]", "0"])
        assert result.exit_code == 1
        assert "Error executing chunk" in result.output
        assert "Array Utilities" in result.output

    def test_verbose_logs_the_call(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["-v", "slugify", "Hello World"])
        assert result.exit_code == 0
        assert "Calling slugify(Hello World)" in result.output
        assert "hello-world" in result.output


# =============================================================================
# Tests: informational commands
# =============================================================================


class TestHelpCommands:
    """Tests for the overview, help and list commands."""

    def test_no_arguments_shows_overview(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Ultra Utils CLI" in result.output
        assert "Categories:" in result.output
        assert "String Utilities" in result.output

    def test_help_without_category(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["help"])
        assert result.exit_code == 0
        assert "ultra-utils help <category>" in result.output

    def test_help_category(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["help", "string"])
        assert result.exit_code == 0
        assert "String Utilities" in result.output
        assert "slugify" in result.output
        assert "levenshteinDistance" in result.output
        assert "Usage example:" in result.output

    def test_help_unknown_category(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["help", "nope"])
        assert result.exit_code == 1
        assert "Unknown category: nope" in result.output
        assert "Available categories: string, date" in result.output

    def test_list(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["list"])
        assert result.exit_code == 0
        assert "All Available Functions" in result.output
        assert f"Total: {len(all_function_names())} utility functions available" in result.output

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# =============================================================================
# Tests: settings
# =============================================================================


class TestSettingsOptions:
    """Tests for config file and environment settings."""

    def test_config_file(self, runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "ultra-utils.toml"
        config.write_text("[output]\nindent = 0\n")
        result = runner.invoke(cli, ["--config", str(config), "chunk", "[1, 2]", "1"])
        assert result.exit_code == 0
        assert result.output == "[[1], [2]]\n"

    def test_config_from_environment(self, runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "ultra-utils.json"
        config.write_text('{"output": {"indent": 0}}')
        result = runner.invoke(
            cli, ["chunk", "[1, 2]", "1"], env={"ULTRA_UTILS_CONFIG": str(config)}
        )
        assert result.output == "[[1], [2]]\n"

    def test_option_beats_config_file(self, runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "ultra-utils.toml"
        config.write_text("[output]\nindent = 0\n")
        result = runner.invoke(
            cli, ["--config", str(config), "--indent", "2", "chunk", "[1]", "1"]
        )
        assert result.output.startswith("[\n  [\n")

    def test_unsupported_config_file(self, runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "ultra-utils.xml"
        config.write_text("<x/>")
        result = runner.invoke(cli, ["--config", str(config), "list"])
        assert result.exit_code == 1
        assert "Cannot load settings" in result.output

    def test_missing_config_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["--config", str(tmp_path / "missing.toml"), "list"])
        assert result.exit_code == 2

    @pytest.mark.parametrize("value", ["abc", "-1"])
    def test_invalid_indent_setting(self, runner: CliRunner, value: str) -> None:
        result = runner.invoke(
            cli, ["chunk", "[1, 2]", "1"], env={"ULTRA_UTILS_OUTPUT_INDENT": value}
        )
        assert result.exit_code == 1
        assert "Cannot load settings: output_indent must be a non-negative integer" in (
            result.output
        )

    def test_invalid_indent_in_config_file(self, runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "ultra-utils.json"
        config.write_text('{"output": {"indent": "wide"}}')
        result = runner.invoke(cli, ["--config", str(config), "list"])
        assert result.exit_code == 1
        assert "'wide'" in result.output
