# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for the command-line function registry."""

import pytest

from ultra_utils import array_utils, number_utils, object_utils, string_utils
from ultra_utils.registry import (
    CATEGORIES,
    all_function_names,
    command_name,
    find_category,
    find_function,
    suggest,
)


class TestCommandName:
    """Tests for command_name."""

    @pytest.mark.parametrize(
        ("python_name", "expected"),
        [
            ("slugify", "slugify"),
            ("to_title_case", "toTitleCase"),
            ("levenshtein_distance", "levenshteinDistance"),
            ("flatten_list", "flattenList"),
            ("format_bytes", "bytes"),
            ("sub_days", "subtractDays"),
            ("get_path", "get"),
            ("ordinal", "toOrdinal"),
        ],
    )
    def test_names(self, python_name, expected):
        assert command_name(python_name) == expected


class TestCategories:
    """Tests for the CATEGORIES table."""

    def test_keys_in_display_order(self):
        assert list(CATEGORIES) == [
            "string",
            "date",
            "array",
            "object",
            "number",
            "crypto",
            "color",
            "url",
            "fs",
            "validate",
            "misc",
        ]

    def test_titles(self):
        assert CATEGORIES["string"].title == "String Utilities"
        assert CATEGORIES["misc"].title == "Miscellaneous Utilities"

    def test_only_functions_are_registered(self):
        assert "DateLike" not in CATEGORIES["date"]
        assert "Rgb" not in CATEGORIES["color"]
        assert "COLORS" not in CATEGORIES["misc"]
        assert all(callable(f) for c in CATEGORIES.values() for f in c.functions.values())

    def test_every_public_function_registered(self):
        assert len(CATEGORIES["string"]) == len(string_utils.__all__)

    def test_command_names_are_unique(self):
        names = [n for c in CATEGORIES.values() for n in c.functions]
        assert len(names) == len(set(names))
        assert len(all_function_names()) == len(names)


class TestLookup:
    """Tests for find_function and find_category."""

    def test_by_command_name(self):
        assert find_function("slugify") is string_utils.slugify
        assert find_function("bytes") is number_utils.format_bytes

    def test_by_python_name(self):
        assert find_function("levenshtein_distance") is string_utils.levenshtein_distance
        assert find_function("format_bytes") is number_utils.format_bytes

    def test_flatten_names(self):
        assert find_function("flatten") is object_utils.flatten
        assert find_function("flattenList") is array_utils.flatten_list

    def test_unknown(self):
        assert find_function("doesNotExist") is None
        assert find_category("doesNotExist") is None

    def test_find_category(self):
        assert find_category("chunk").key == "array"
        assert find_category("isEmail").key == "validate"
        assert find_category("sha256").title == "Crypto & Hash Utilities"


class TestSuggest:
    """Tests for suggest."""

    def test_substring_match(self):
        assert suggest("slug") == ["slugify"]

    def test_case_insensitive(self):
        assert "toTitleCase" in suggest("TITLE")

    def test_limit(self):
        assert len(suggest("is", limit=3)) == 3

    def test_no_match(self):
        assert suggest("zzzzzz") == []
