"""
Type mapping and conversion of raw strings into host member values.

Maps Python annotations on host members to `TypeDescriptor`s and converts raw
caller strings for a descriptor. Conversion never raises: a failed parse yields
the documented fallback for the target type together with a diagnostic, except
for enums, where no member is a safe default.
"""

import logging
import types
from enum import Enum
from typing import Annotated, Any, Union, get_args, get_origin

from scenemut.core.config import MutationConfig, create_mutation_config
from scenemut.core.models import ConversionOutcome
from scenemut.core.types import (
    WHITE,
    ZERO_VECTOR2,
    ZERO_VECTOR3,
    Color,
    TypeDescriptor,
    TypeKind,
    Vector2,
    Vector3,
)
from scenemut.exceptions import EnumParseError, MalformedValueError
from scenemut.parsing.values import (
    format_value,
    parse_bool,
    parse_color,
    parse_enum,
    parse_int,
    parse_number,
    parse_vector2,
    parse_vector3,
)

# Used only when parsing fails, never to adjust a successful parse
FALLBACK_VALUES: dict[TypeKind, Any] = {
    TypeKind.INT: 0,
    TypeKind.FLOAT: 0.0,
    TypeKind.DOUBLE: 0.0,
    TypeKind.BOOL: False,
    TypeKind.VECTOR2: ZERO_VECTOR2,
    TypeKind.VECTOR3: ZERO_VECTOR3,
    TypeKind.COLOR: WHITE,
}

_PLAIN_TYPES: dict[Any, TypeKind] = {
    bool: TypeKind.BOOL,
    int: TypeKind.INT,
    float: TypeKind.FLOAT,
    str: TypeKind.STRING,
    Vector2: TypeKind.VECTOR2,
    Vector3: TypeKind.VECTOR3,
    Color: TypeKind.COLOR,
}


def describe_type(annotation: Any) -> TypeDescriptor | None:
    """
    Derive a TypeDescriptor from a member annotation.

    Optional annotations (``X | None``) describe ``X``. ``Annotated`` metadata
    holding a `TypeKind` overrides the plain mapping, which is how a host
    declares a double-precision member.

    Params:
        annotation: Type hint of a property getter or field

    Returns:
        The descriptor, or None when the type cannot be set from a string
    """
    origin = get_origin(annotation)

    if origin is Annotated:
        base, *metadata = get_args(annotation)
        for item in metadata:
            if isinstance(item, TypeKind):
                return TypeDescriptor(item)
        return describe_type(base)

    if origin is Union or origin is types.UnionType:
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return describe_type(members[0])
        return None

    if origin is not None:
        return None

    if isinstance(annotation, type) and issubclass(annotation, Enum):
        return TypeDescriptor.of_enum(annotation)

    kind = _PLAIN_TYPES.get(annotation)
    return TypeDescriptor(kind) if kind is not None else None


class TypeConverter:
    """Converts raw strings for a target descriptor with documented fallbacks."""

    def __init__(
        self, config: MutationConfig | None = None, logger: logging.Logger | None = None
    ):
        self.config = config or MutationConfig()
        self.logger = logger or logging.getLogger(__name__)

    def convert(self, raw: str, descriptor: TypeDescriptor) -> ConversionOutcome:
        """
        Convert a raw string to the type described by ``descriptor``.

        Params:
            raw: Caller-supplied string
            descriptor: Static type of the target member

        Returns:
            ConversionOutcome whose value is usable unless the target is an
            enum and ``error`` is set
        """
        kind = descriptor.kind

        if kind == TypeKind.STRING:
            return ConversionOutcome(raw)

        if kind == TypeKind.ENUM:
            return self._convert_enum(raw, descriptor)

        if kind in (TypeKind.VECTOR2, TypeKind.VECTOR3, TypeKind.COLOR):
            return self._convert_structured(raw, descriptor)

        return self._convert_scalar(raw, descriptor)

    def _convert_enum(self, raw: str, descriptor: TypeDescriptor) -> ConversionOutcome:
        if descriptor.enum_type is None:
            return ConversionOutcome(None, error=f"No enum type given for {raw!r}")
        try:
            return ConversionOutcome(parse_enum(raw, descriptor.enum_type))
        except EnumParseError as e:
            return ConversionOutcome(None, error=str(e))

    def _convert_structured(
        self, raw: str, descriptor: TypeDescriptor
    ) -> ConversionOutcome:
        warnings: list[str] = []
        if descriptor.kind == TypeKind.COLOR:
            value = parse_color(raw, warnings)
        elif descriptor.kind == TypeKind.VECTOR2:
            value = parse_vector2(
                raw, warnings, broadcast=self.config.broadcast_scalar_vectors
            )
        else:
            value = parse_vector3(
                raw, warnings, broadcast=self.config.broadcast_scalar_vectors
            )

        if warnings:
            return self._fallback(raw, descriptor, warnings[0])
        return ConversionOutcome(value)

    def _convert_scalar(self, raw: str, descriptor: TypeDescriptor) -> ConversionOutcome:
        try:
            if descriptor.kind == TypeKind.BOOL:
                value: Any = parse_bool(raw)
            elif descriptor.kind == TypeKind.INT:
                value = parse_int(raw)
            else:
                value = parse_number(raw)
        except MalformedValueError as e:
            return self._fallback(raw, descriptor, str(e))
        return ConversionOutcome(value)

    def _fallback(
        self, raw: str, descriptor: TypeDescriptor, reason: str
    ) -> ConversionOutcome:
        fallback = FALLBACK_VALUES[descriptor.kind]
        message = (
            f"Could not convert {raw!r} to {descriptor.name}, "
            f"using fallback {format_value(fallback)} ({reason})"
        )
        if self.config.log_fallbacks:
            self.logger.warning(message)
        return ConversionOutcome(fallback, used_fallback=True, error=message)


def create_type_converter(
    config: MutationConfig | dict | None = None,
    logger: logging.Logger | None = None,
) -> TypeConverter:
    """
    Factory function for a TypeConverter with flexible config input.

    Args:
        config: MutationConfig instance, dict to override defaults, or None for defaults
        logger: Logger receiving fallback warnings

    Returns:
        TypeConverter instance
    """
    return TypeConverter(create_mutation_config(config), logger)
