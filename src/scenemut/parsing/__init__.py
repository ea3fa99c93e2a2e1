"""
Raw value parsing for scenemut.

This package converts caller-supplied strings into numbers, booleans, enums,
vectors and colors, and renders converted values back to strings.
"""

from scenemut.parsing.values import (
    NAMED_COLORS,
    format_value,
    parse_bool,
    parse_color,
    parse_enum,
    parse_int,
    parse_number,
    parse_vector2,
    parse_vector3,
)

__all__ = [
    "NAMED_COLORS",
    "format_value",
    "parse_bool",
    "parse_color",
    "parse_enum",
    "parse_int",
    "parse_number",
    "parse_vector2",
    "parse_vector3",
]
