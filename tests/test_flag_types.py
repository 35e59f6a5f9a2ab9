# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for flag value parsing and formatting."""

import math

import pytest

from openfeature_config_store import flag_types


class TestBool:
    """Tests for boolean defaults and values."""

    @pytest.mark.parametrize("raw", ["1", "t", "T", "TRUE", "true", "True"])
    def test_parse_true_spellings(self, raw):
        """Test every accepted spelling of true."""
        assert flag_types.parse_bool(raw) is True

    @pytest.mark.parametrize("raw", ["0", "f", "F", "FALSE", "false", "False"])
    def test_parse_false_spellings(self, raw):
        """Test every accepted spelling of false."""
        assert flag_types.parse_bool(raw) is False

    @pytest.mark.parametrize("raw", ["yes", "on", "tRuE", " true", ""])
    def test_parse_rejects_other_text(self, raw):
        """Test that loose spellings are rejected."""
        with pytest.raises(ValueError):
            flag_types.parse_bool(raw)

    def test_format(self):
        """Test canonical boolean encoding."""
        assert flag_types.format_bool(True) == "true"
        assert flag_types.format_bool(False) == "false"


class TestString:
    """Tests for string defaults and values."""

    def test_passthrough(self):
        """Test that strings are not altered in either direction."""
        assert flag_types.parse_string(" blue ") == " blue "
        assert flag_types.format_string("") == ""


class TestInt:
    """Tests for integer defaults and values."""

    @pytest.mark.parametrize("raw,expected", [("42", 42), ("-7", -7), ("+3", 3), ("007", 7)])
    def test_parse_valid(self, raw, expected):
        """Test decimal integers with optional sign."""
        assert flag_types.parse_int(raw) == expected

    def test_parse_int64_bounds(self):
        """Test the signed 64-bit range limits."""
        assert flag_types.parse_int("9223372036854775807") == 2**63 - 1
        assert flag_types.parse_int("-9223372036854775808") == -(2**63)
        with pytest.raises(ValueError, match="range"):
            flag_types.parse_int("9223372036854775808")

    @pytest.mark.parametrize("raw", ["notanumber", "1.5", "1_000", " 1", "0x10", ""])
    def test_parse_rejects_malformed(self, raw):
        """Test that non-decimal text is rejected."""
        with pytest.raises(ValueError):
            flag_types.parse_int(raw)

    def test_format(self):
        """Test decimal integer encoding."""
        assert flag_types.format_int(-12) == "-12"


class TestFloat:
    """Tests for float defaults and values."""

    def test_parse_valid(self):
        """Test common float spellings."""
        assert flag_types.parse_float("1.5") == 1.5
        assert flag_types.parse_float("-2e3") == -2000.0
        assert flag_types.parse_float("3") == 3.0
        assert math.isinf(flag_types.parse_float("inf"))
        assert math.isnan(flag_types.parse_float("NaN"))

    @pytest.mark.parametrize("raw", ["abc", " 1.5", "1_0.5", "1e400", ""])
    def test_parse_rejects_malformed(self, raw):
        """Test that malformed or overflowing text is rejected."""
        with pytest.raises(ValueError):
            flag_types.parse_float(raw)

    def test_format_round_trips(self):
        """Test that formatted floats parse back to the same value."""
        for value in (0.1, 1.5, -273.15, 1e-7, 3.0):
            assert flag_types.parse_float(flag_types.format_float(value)) == value


class TestObject:
    """Tests for JSON object defaults and values."""

    def test_parse_object(self):
        """Test decoding a JSON object."""
        assert flag_types.parse_object('{"color": "red", "size": 3}') == {"color": "red", "size": 3}

    @pytest.mark.parametrize("raw", ["[1, 2]", "42", '"text"', "null"])
    def test_parse_rejects_non_objects(self, raw):
        """Test that valid JSON which is not an object is rejected."""
        with pytest.raises(ValueError, match="JSON object"):
            flag_types.parse_object(raw)

    def test_parse_rejects_malformed_json(self):
        """Test that malformed JSON is rejected."""
        with pytest.raises(ValueError):
            flag_types.parse_object("{not json")

    def test_format_is_compact_and_sorted(self):
        """Test that objects are encoded compactly with sorted keys."""
        assert flag_types.format_object({"b": 1, "a": [True, None]}) == '{"a":[true,null],"b":1}'
