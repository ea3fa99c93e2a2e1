"""
Unit tests for raw value parsers.

Covers scalar parsing failures, vector and color formats, the never-raise
contract of structured parsers and formatting back to caller syntax.
"""

import logging
import math

import pytest

from scenemut.core.types import WHITE, ZERO_VECTOR2, ZERO_VECTOR3, Color, Vector2, Vector3
from scenemut.exceptions import EnumParseError, MalformedValueError
from scenemut.parsing import (
    format_value,
    parse_bool,
    parse_color,
    parse_enum,
    parse_int,
    parse_number,
    parse_vector2,
    parse_vector3,
)
from scenemut.scene import LightType


class TestScalarParsing:
    """Test number, integer and boolean parsing."""

    def test_parse_number(self):
        """Test locale-invariant float parsing with surrounding whitespace."""
        assert parse_number("1.5") == 1.5
        assert parse_number(" -2e3 ") == -2000.0
        assert parse_number("7") == 7.0

    def test_parse_number_rejects_text_and_non_finite(self):
        """Test that non-numeric and non-finite input raises MalformedValueError."""
        for raw in ["abc", "", "1,5", "nan", "inf", "1_000", "\u0663"]:
            with pytest.raises(MalformedValueError):
                parse_number(raw)

    def test_parse_int(self):
        """Test integer parsing including integral float literals."""
        assert parse_int("42") == 42
        assert parse_int("-3") == -3
        assert parse_int("5.0") == 5

        with pytest.raises(MalformedValueError, match="fractional"):
            parse_int("2.5")
        with pytest.raises(MalformedValueError, match="integer"):
            parse_int("many")
        with pytest.raises(MalformedValueError):
            parse_int("1_0")

    def test_parse_bool_accepted_words(self):
        """Test every accepted boolean word, ignoring case."""
        for raw in ["true", "TRUE", "1", "yes", "On"]:
            assert parse_bool(raw) is True
        for raw in ["false", "False", "0", "no", "OFF"]:
            assert parse_bool(raw) is False

    def test_parse_bool_rejects_other_words(self):
        """Test that anything else raises MalformedValueError."""
        for raw in ["maybe", "2", "", "truthy"]:
            with pytest.raises(MalformedValueError, match="boolean"):
                parse_bool(raw)


class TestEnumParsing:
    """Test enum member lookup."""

    def test_name_match_is_case_insensitive(self):
        assert parse_enum("point", LightType) is LightType.POINT
        assert parse_enum("Directional", LightType) is LightType.DIRECTIONAL

    def test_integer_value_match(self):
        assert parse_enum("0", LightType) is LightType.SPOT

    def test_failure_lists_valid_members(self):
        """Test that a bad name reports the literal input and valid names."""
        with pytest.raises(EnumParseError) as exc_info:
            parse_enum("laser", LightType)

        error = exc_info.value
        assert error.raw_value == "laser"
        assert error.valid_members == ["SPOT", "DIRECTIONAL", "POINT", "AREA"]
        assert "laser" in str(error)


class TestVectorParsing:
    """Test Vector2 and Vector3 parsing."""

    def test_delimited_forms(self):
        """Test comma, semicolon, whitespace and bracketed forms."""
        expected = Vector3(1.0, 2.0, 3.0)
        for raw in ["1,2,3", "1;2;3", "1 2 3", "(1, 2, 3)", "[1,2,3]", " 1 , 2 , 3 "]:
            assert parse_vector3(raw) == expected

    def test_json_object_with_missing_keys(self):
        """Test JSON input where missing axes default to zero."""
        assert parse_vector3('{"x": 1, "z": 3}') == Vector3(1.0, 0.0, 3.0)
        assert parse_vector2('{"y": 4}') == Vector2(0.0, 4.0)

    def test_scalar_broadcast(self):
        """Test that a single component is broadcast to every axis."""
        assert parse_vector3("2") == parse_vector3("2,2,2")
        assert parse_vector2("-1.5") == Vector2(-1.5, -1.5)

    def test_broadcast_can_be_disabled(self):
        warnings = []
        assert parse_vector3("2", warnings, broadcast=False) == ZERO_VECTOR3
        assert len(warnings) == 1

    def test_round_trip_through_formatting(self):
        """Test that formatting a parsed vector parses back to the same triple."""
        for raw in ["1,2,3", "0.1,-2.5,1e-3", "123.456,0,-7"]:
            parsed = parse_vector3(raw)
            again = parse_vector3(format_value(parsed))
            for a, b in zip(parsed.as_tuple(), again.as_tuple()):
                assert math.isclose(a, b, abs_tol=1e-12)

    def test_malformed_input_returns_zero_and_warns(self):
        """Test wrong arity, text, bad JSON and non-finite components."""
        cases = ["1,2", "1,2,3,4", "a,b,c", "{x: 1}", "[1, 2", "", '{"x": "up"}', "[1,2,3]x"]
        for raw in cases:
            warnings = []
            assert parse_vector3(raw, warnings) == ZERO_VECTOR3
            assert len(warnings) == 1, raw

    def test_empty_components_are_malformed(self):
        """Test that doubled or trailing delimiters never shift components."""
        for raw in ["1,,2,3", "1,2,", ",1,2,3", "1;;2;3"]:
            warnings = []
            assert parse_vector3(raw, warnings) == ZERO_VECTOR3, raw
            assert len(warnings) == 1, raw
        assert parse_vector2("1,,2", []) == ZERO_VECTOR2

    def test_nan_and_infinity_rejected(self):
        """Test that NaN or infinite components invalidate the whole vector."""
        for raw in ["NaN,0,0", "0,inf,0", "0,0,-Infinity", '{"x": NaN}']:
            result = parse_vector3(raw, [])
            assert result == ZERO_VECTOR3
            assert all(math.isfinite(c) for c in result.as_tuple())

    def test_vector2_arity(self):
        assert parse_vector2("3,4") == Vector2(3.0, 4.0)
        assert parse_vector2("3,4,5", []) == ZERO_VECTOR2

    def test_warning_is_logged_without_list(self, caplog):
        """Test that warnings go to the logger when no list is supplied."""
        with caplog.at_level(logging.WARNING, logger="scenemut.parsing.values"):
            assert parse_vector3("oops") == ZERO_VECTOR3
        assert "oops" in caplog.text


class TestColorParsing:
    """Test color parsing in every accepted format."""

    def test_named_colors(self):
        assert parse_color("red") == Color(1.0, 0.0, 0.0, 1.0)
        assert parse_color("BLUE") == Color(0.0, 0.0, 1.0, 1.0)
        assert parse_color("grey") == parse_color("gray")

    def test_hex_colors(self):
        assert parse_color("#ff0000") == Color(1.0, 0.0, 0.0, 1.0)
        half = parse_color("#00FF0080")
        assert half.g == 1.0
        assert math.isclose(half.a, 128 / 255)

    def test_json_colors(self):
        assert parse_color('{"r": 0.5, "g": 0.25, "b": 1}') == Color(0.5, 0.25, 1.0, 1.0)
        assert parse_color('{"r": 0, "g": 0, "b": 0, "a": 0.5}').a == 0.5

    def test_delimited_colors(self):
        assert parse_color("1,0.5,0") == Color(1.0, 0.5, 0.0, 1.0)
        assert parse_color("0,0,0,0.25") == Color(0.0, 0.0, 0.0, 0.25)

    def test_unrecognized_returns_white_and_warns(self):
        """Test that unknown input yields white with a recorded warning."""
        for raw in ["purple", "#ff00", "1,2", '{"r": 1}', "", "1,x,0"]:
            warnings = []
            assert parse_color(raw, warnings) == WHITE
            assert len(warnings) == 1, raw


class TestFormatValue:
    """Test rendering converted values back to caller syntax."""

    def test_scalars(self):
        assert format_value(True) == "true"
        assert format_value(5.0) == "5"
        assert format_value(0.25) == "0.25"
        assert format_value(3) == "3"
        assert format_value(None) == "null"

    def test_structured(self):
        assert format_value(Vector3(1.0, 2.0, 3.0)) == "1,2,3"
        assert format_value(Color(1.0, 0.0, 0.0, 1.0)) == "1,0,0,1"
        assert format_value(LightType.AREA) == "AREA"
