"""
Tests for path rendering and raw value interpretation helpers.
"""

import pytest

from planpaths.search.path_format import format_path, parse_dot_path
from planpaths.search.values import (
    describe_value,
    is_constant_wrapper,
    is_reference_expression,
    unwrap_constant_value,
)


class TestFormatPath:
    """jq and dot notation rendering."""

    def test_jq_style(self):
        assert format_path(["c", 0, "b"]) == ".c[0].b"

    def test_jq_root(self):
        assert format_path([]) == "."

    def test_jq_quotes_non_identifiers(self):
        assert format_path(["tags", "cost-center"]) == '.tags."cost-center"'
        assert format_path(["0abc"]) == '."0abc"'

    def test_jq_leading_index(self):
        assert format_path([0, "b"]) == "[0].b"

    def test_dot_style(self):
        assert format_path(["c", 0, "b"], style="dot") == "c.0.b"

    def test_unknown_style(self):
        with pytest.raises(ValueError, match="Unknown path style"):
            format_path(["a"], style="xpath")


class TestParseDotPath:
    """Dot notation parsing."""

    def test_indices_become_ints(self):
        assert parse_dot_path("values.network_interface.0.network") == [
            "values",
            "network_interface",
            0,
            "network",
        ]

    def test_empty(self):
        assert parse_dot_path("") == []

    def test_inverse_of_dot_style(self):
        path = ["resource_changes", 1, "change", "after", "tags"]
        assert parse_dot_path(format_path(path, style="dot")) == path


class TestValues:
    """Caller-side interpretation of the two Terraform encodings."""

    def test_constant_wrapper_detection(self):
        assert is_constant_wrapper({"constant_value": True})
        assert is_constant_wrapper({"constant_value": None})
        assert not is_constant_wrapper({"constant_value": 1, "references": []})
        assert not is_constant_wrapper(True)

    def test_unwrap(self):
        assert unwrap_constant_value({"constant_value": True}) is True
        assert unwrap_constant_value({"constant_value": {"a": 1}}) == {"a": 1}

    def test_unwrap_passes_other_values_through(self):
        value = {"references": ["var.size"]}
        assert unwrap_constant_value(value) is value
        assert unwrap_constant_value(False) is False

    def test_reference_expression(self):
        assert is_reference_expression({"references": ["var.size"]})
        assert not is_reference_expression({"constant_value": 1})

    @pytest.mark.parametrize(
        "value, expected",
        [
            (True, "true"),
            (None, "null"),
            (40, "40"),
            ("acme-logs", '"acme-logs"'),
            ({"constant_value": True}, "{constant_value: true}"),
            ({"references": ["var.a", "var.b"]}, "{references: var.a, var.b}"),
            ({"a": 1}, "{1 key}"),
            ({"a": 1, "b": 2, "c": 3}, "{3 keys}"),
            ([1], "[1 item]"),
            ([1, 2], "[2 items]"),
        ],
    )
    def test_describe_value(self, value, expected):
        assert describe_value(value) == expected


class TestUnusualSegments:
    """Segments that only look like identifiers or indices."""

    def test_trailing_newline_is_quoted(self):
        assert format_path(["a\n"]) == '."a\\n"'

    def test_unicode_digits_stay_keys(self):
        assert parse_dot_path("after.x.²") == ["after", "x", "²"]
        assert parse_dot_path("x.٣") == ["x", "٣"]
