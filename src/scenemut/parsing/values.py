"""
Raw string parsers for host member values.

Scalar parsers (`parse_number`, `parse_int`, `parse_bool`, `parse_enum`) raise
`MalformedValueError` so the type converter can decide on a fallback.
Structured parsers (`parse_vector2`, `parse_vector3`, `parse_color`) never
raise: on malformed input they return the zero vector or white and record a
warning, either into the caller's ``warnings`` list or, when no list is given,
to the module logger.

Accepted vector forms:
    - JSON objects: ``{"x": 1, "y": 2, "z": 3}`` (missing keys default to 0)
    - Delimited lists: ``1,2,3``, ``(1; 2; 3)``, ``[1 2 3]``
    - A single scalar broadcast to every axis: ``2`` -> ``(2, 2, 2)``

Accepted color forms:
    - JSON objects: ``{"r": 1, "g": 0, "b": 0, "a": 0.5}`` (``a`` defaults to 1)
    - Names: red, green, blue, white, black, yellow, cyan, magenta, gray/grey
    - Hex: ``#RRGGBB`` or ``#RRGGBBAA``
    - Delimited floats: ``1,0,0`` or ``1,0,0,0.5``
"""

import json
import logging
import math
import re
from enum import Enum
from typing import Any, TypeVar

from scenemut.core.types import (
    WHITE,
    ZERO_VECTOR2,
    ZERO_VECTOR3,
    Color,
    Quaternion,
    Vector2,
    Vector3,
)
from scenemut.exceptions import EnumParseError, MalformedValueError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

_TRUE_WORDS = frozenset({"true", "1", "yes", "on"})
_FALSE_WORDS = frozenset({"false", "0", "no", "off"})

_COMPONENT_SPLIT = re.compile(r"\s*[,;]\s*|\s+")
_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

# Values match the host editor's built-in color constants
NAMED_COLORS: dict[str, Color] = {
    "red": Color(1.0, 0.0, 0.0, 1.0),
    "green": Color(0.0, 1.0, 0.0, 1.0),
    "blue": Color(0.0, 0.0, 1.0, 1.0),
    "white": Color(1.0, 1.0, 1.0, 1.0),
    "black": Color(0.0, 0.0, 0.0, 1.0),
    "yellow": Color(1.0, 0.92, 0.016, 1.0),
    "cyan": Color(0.0, 1.0, 1.0, 1.0),
    "magenta": Color(1.0, 0.0, 1.0, 1.0),
    "gray": Color(0.5, 0.5, 0.5, 1.0),
    "grey": Color(0.5, 0.5, 0.5, 1.0),
}


def _plain_digits(text: str) -> str:
    # float() and int() also take "1_000" and non-ASCII digits
    if "_" in text or not text.isascii():
        raise ValueError(f"unsupported numeric spelling {text!r}")
    return text


def _plain_float(text: str) -> float:
    return float(_plain_digits(text.strip()))


def parse_number(raw: str) -> float:
    """
    Parse a locale-invariant float.

    Params:
        raw: Raw string such as "1.5" or " -2e3 "

    Returns:
        The parsed finite float

    Raises:
        MalformedValueError: If the text is not numeric or not finite
    """
    try:
        value = _plain_float(raw)
    except (TypeError, ValueError, AttributeError) as e:
        raise MalformedValueError(str(raw), "number", "not numeric") from e
    if not math.isfinite(value):
        raise MalformedValueError(raw, "number", "value is not finite")
    return value


def parse_int(raw: str) -> int:
    """Parse an integer, accepting float literals with an integral value."""
    text = str(raw).strip()
    try:
        return int(_plain_digits(text))
    except ValueError:
        pass
    try:
        value = parse_number(text)
    except MalformedValueError as e:
        raise MalformedValueError(raw, "integer", "not numeric") from e
    if not value.is_integer():
        raise MalformedValueError(raw, "integer", "value has a fractional part")
    return int(value)


def parse_bool(raw: str) -> bool:
    """Parse a boolean word (true/false, 1/0, yes/no, on/off), ignoring case."""
    word = str(raw).strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise MalformedValueError(
        raw, "boolean", "expected one of true/false, 1/0, yes/no, on/off"
    )


def parse_enum(raw: str, enum_type: type[E]) -> E:
    """
    Parse an enum member by name, then by value.

    Names and string values match case-insensitively; integer values match
    their decimal text.

    Params:
        raw: Raw member name or value
        enum_type: Enum class to search

    Returns:
        The matching member

    Raises:
        EnumParseError: If no member matches, listing the valid names
    """
    text = str(raw).strip()
    lowered = text.lower()
    for member in enum_type:
        if member.name.lower() == lowered:
            return member
    for member in enum_type:
        value = member.value
        if isinstance(value, str) and value.lower() == lowered:
            return member
        if isinstance(value, int) and not isinstance(value, bool) and str(value) == text:
            return member
    raise EnumParseError(raw, enum_type.__name__, [member.name for member in enum_type])


def parse_vector2(
    raw: str, warnings: list[str] | None = None, *, broadcast: bool = True
) -> Vector2:
    """Parse a 2D vector; malformed input yields the zero vector and a warning."""
    try:
        return Vector2(*_parse_components(raw, ("x", "y"), "Vector2", broadcast))
    except MalformedValueError as e:
        _record_warning(warnings, str(e))
        return ZERO_VECTOR2


def parse_vector3(
    raw: str, warnings: list[str] | None = None, *, broadcast: bool = True
) -> Vector3:
    """Parse a 3D vector; malformed input yields the zero vector and a warning."""
    try:
        return Vector3(*_parse_components(raw, ("x", "y", "z"), "Vector3", broadcast))
    except MalformedValueError as e:
        _record_warning(warnings, str(e))
        return ZERO_VECTOR3


def parse_color(raw: str, warnings: list[str] | None = None) -> Color:
    """Parse a color; unrecognized input yields white and a warning."""
    try:
        return _parse_color_strict(raw)
    except MalformedValueError as e:
        _record_warning(warnings, str(e))
        return WHITE


def format_value(value: Any) -> str:
    """
    Render a converted value the way callers send it.

    Vectors and colors use the comma-separated form accepted by the parsers,
    so a formatted value parses back to the same components.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (Vector2, Vector3, Color, Quaternion)):
        return ",".join(_format_float(float(c)) for c in _components(value))
    if isinstance(value, Enum):
        return value.name
    return str(value)


def _components(value: Vector2 | Vector3 | Color | Quaternion) -> tuple[float, ...]:
    if isinstance(value, Quaternion):
        return (value.w, value.x, value.y, value.z)
    return value.as_tuple()


def _format_float(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _record_warning(warnings: list[str] | None, message: str) -> None:
    if warnings is None:
        logger.warning(message)
    else:
        warnings.append(message)


def _parse_components(
    raw: str, axes: tuple[str, ...], type_name: str, broadcast: bool
) -> list[float]:
    text = str(raw).strip()

    if text.startswith("{"):
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedValueError(raw, type_name, f"invalid JSON ({e.msg})") from e
        if not isinstance(data, dict):
            raise MalformedValueError(raw, type_name, "JSON value is not an object")
        lowered = {str(key).lower(): item for key, item in data.items()}
        values = [_json_component(raw, type_name, lowered.get(axis, 0)) for axis in axes]
    else:
        text = text.strip("()[]").strip()
        parts = _COMPONENT_SPLIT.split(text)
        if not all(parts):
            raise MalformedValueError(raw, type_name, "empty component")
        if len(parts) == 1 and broadcast:
            parts = parts * len(axes)
        if len(parts) != len(axes):
            raise MalformedValueError(
                raw, type_name, f"expected {len(axes)} components, got {len(parts)}"
            )
        try:
            values = [_plain_float(part) for part in parts]
        except ValueError as e:
            raise MalformedValueError(raw, type_name, "component is not numeric") from e

    if not all(math.isfinite(v) for v in values):
        raise MalformedValueError(raw, type_name, "component is NaN or infinite")
    return values


def _json_component(raw: str, type_name: str, item: Any) -> float:
    if isinstance(item, bool) or not isinstance(item, (int, float, str)):
        raise MalformedValueError(raw, type_name, f"component {item!r} is not numeric")
    try:
        return float(item)
    except ValueError as e:
        raise MalformedValueError(raw, type_name, f"component {item!r} is not numeric") from e


def _parse_color_strict(raw: str) -> Color:
    text = str(raw).strip()

    if text.startswith("{"):
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedValueError(raw, "Color", f"invalid JSON ({e.msg})") from e
        if not isinstance(data, dict):
            raise MalformedValueError(raw, "Color", "JSON value is not an object")
        lowered = {str(key).lower(): item for key, item in data.items()}
        missing = [channel for channel in ("r", "g", "b") if channel not in lowered]
        if missing:
            raise MalformedValueError(raw, "Color", f"missing channels {', '.join(missing)}")
        channels = [
            _json_component(raw, "Color", lowered[channel]) for channel in ("r", "g", "b")
        ]
        channels.append(_json_component(raw, "Color", lowered.get("a", 1.0)))
        return _finite_color(raw, channels)

    named = NAMED_COLORS.get(text.lower())
    if named is not None:
        return named

    if _HEX_COLOR.match(text):
        digits = text[1:]
        channels = [int(digits[i : i + 2], 16) / 255.0 for i in range(0, len(digits), 2)]
        return Color(*channels)

    parts = [part.strip() for part in text.strip("()[]").split(",")]
    if len(parts) in (3, 4):
        try:
            channels = [_plain_float(part) for part in parts]
        except ValueError as e:
            raise MalformedValueError(raw, "Color", "channel is not numeric") from e
        return _finite_color(raw, channels)

    raise MalformedValueError(raw, "Color", "unrecognized color format")


def _finite_color(raw: str, channels: list[float]) -> Color:
    if not all(math.isfinite(c) for c in channels):
        raise MalformedValueError(raw, "Color", "channel is NaN or infinite")
    return Color(*channels)
