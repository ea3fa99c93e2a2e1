"""
Special-case mutation rules evaluated before generic member lookup.

Some logical properties cannot be expressed as "assign the member with this
name": ``x`` on a Transform changes one axis of ``position``, ``color`` on a
renderer changes the color of the material it owns. Rules are checked in order
and the first rule whose kind and name predicates match handles the field,
whether or not it manages to apply it.
"""

import logging
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any

from attrs import frozen

from scenemut.conversion.type_mapping import TypeConverter
from scenemut.core.models import ConversionOutcome, FieldOutcome, FieldRequest
from scenemut.core.types import (
    BOOL,
    COLOR,
    FLOAT,
    VECTOR3,
    Quaternion,
    TypeDescriptor,
)
from scenemut.parsing.values import format_value
from scenemut.resolution.aliases import is_renderer_kind

logger = logging.getLogger(__name__)

ApplyFn = Callable[[Any, FieldRequest, TypeConverter], FieldOutcome]


@frozen
class SpecialCaseRule:
    """A (kind predicate, name predicate, apply) entry.

    Name predicates receive the requested name lower-cased.
    """

    description: str
    kind_matches: Callable[[str], bool]
    name_matches: Callable[[str], bool]
    apply: ApplyFn

    def matches(self, kind: str, name: str) -> bool:
        return self.kind_matches(kind) and self.name_matches(name.lower())


class SpecialCaseRuleSet:
    """Ordered rules; the first match handles the field."""

    def __init__(self, rules: Iterable[SpecialCaseRule] | None = None):
        self.rules = list(rules) if rules is not None else list(DEFAULT_RULES)

    def find(self, kind: str, name: str) -> SpecialCaseRule | None:
        """
        Find the first rule matching a kind tag and requested name.

        Params:
            kind: Kind tag of the target
            name: Requested field name as sent by the caller

        Returns:
            The matching rule, or None to continue with generic lookup
        """
        for rule in self.rules:
            if rule.matches(kind, name):
                return rule
        return None


def _kind_is(*kinds: str) -> Callable[[str], bool]:
    return lambda kind: kind in kinds


def _named(*names: str) -> Callable[[str], bool]:
    accepted = frozenset(names)
    return lambda name: name in accepted


def _convert_or_fail(
    field: FieldRequest, descriptor: TypeDescriptor, converter: TypeConverter
) -> tuple[ConversionOutcome | None, FieldOutcome | None]:
    outcome = converter.convert(field.raw_value, descriptor)
    if not outcome.ok and not outcome.used_fallback:
        return None, FieldOutcome.failure(field.name, outcome.error)
    return outcome, None


def applied_outcome(
    field: FieldRequest, value: Any, outcome: ConversionOutcome
) -> FieldOutcome:
    """Successful outcome whose detail shows the value actually written."""
    detail = format_value(value)
    if outcome.used_fallback:
        detail = f"{detail} (fallback: {outcome.error})"
    return FieldOutcome.success(field.name, detail)


def _missing_member(obj: Any, field: FieldRequest, member: str) -> FieldOutcome:
    return FieldOutcome.failure(
        field.name, f"{type(obj).__name__} has no member '{member}'"
    )


def _set_member(
    obj: Any, member: str, field: FieldRequest, value: Any
) -> FieldOutcome | None:
    """Assign through the host setter; a rejected value fails only this field."""
    try:
        setattr(obj, member, value)
    except (AttributeError, TypeError, ValueError) as e:
        logger.warning(f"Setting {type(obj).__name__}.{member} failed: {e}")
        return FieldOutcome.failure(field.name, f"Could not set '{member}': {e}")
    return None


def _assign(
    obj: Any,
    member: str,
    field: FieldRequest,
    descriptor: TypeDescriptor,
    converter: TypeConverter,
) -> FieldOutcome:
    if not hasattr(obj, member):
        return _missing_member(obj, field, member)
    outcome, failure = _convert_or_fail(field, descriptor, converter)
    if failure is not None:
        return failure
    failure = _set_member(obj, member, field, outcome.value)
    if failure is not None:
        return failure
    return applied_outcome(field, outcome.value, outcome)


def _direct(member: str, descriptor: TypeDescriptor) -> ApplyFn:
    def apply(obj: Any, field: FieldRequest, converter: TypeConverter) -> FieldOutcome:
        return _assign(obj, member, field, descriptor, converter)

    return apply


def _set_position_axis(
    obj: Any, field: FieldRequest, converter: TypeConverter
) -> FieldOutcome:
    if not hasattr(obj, "position"):
        return _missing_member(obj, field, "position")
    axis = field.name.lower()[-1]
    outcome, failure = _convert_or_fail(field, FLOAT, converter)
    if failure is not None:
        return failure
    failure = _set_member(
        obj, "position", field, obj.position.with_axis(axis, outcome.value)
    )
    if failure is not None:
        return failure
    return applied_outcome(field, obj.position, outcome)


def _set_euler_rotation(
    obj: Any, field: FieldRequest, converter: TypeConverter
) -> FieldOutcome:
    if not hasattr(obj, "rotation"):
        return _missing_member(obj, field, "rotation")
    outcome, failure = _convert_or_fail(field, VECTOR3, converter)
    if failure is not None:
        return failure
    failure = _set_member(obj, "rotation", field, Quaternion.euler(outcome.value))
    if failure is not None:
        return failure
    return applied_outcome(field, outcome.value, outcome)


def _set_material_color(
    obj: Any, field: FieldRequest, converter: TypeConverter
) -> FieldOutcome:
    material = getattr(obj, "material", None)
    if material is None:
        return FieldOutcome.failure(
            field.name, f"{type(obj).__name__} has no material to color"
        )
    return _assign(material, "color", field, COLOR, converter)


def _set_interpolation(
    obj: Any, field: FieldRequest, converter: TypeConverter
) -> FieldOutcome:
    current = getattr(obj, "interpolation", None)
    if not isinstance(current, Enum):
        return _missing_member(obj, field, "interpolation")
    return _assign(
        obj, "interpolation", field, TypeDescriptor.of_enum(type(current)), converter
    )


def _set_freeze_flag(
    obj: Any, field: FieldRequest, converter: TypeConverter
) -> FieldOutcome:
    # freezeposition* has always driven the rotation freeze flag; callers rely on it
    logger.debug(f"'{field.name}' applies freezeRotation")
    return _assign(obj, "freezeRotation", field, BOOL, converter)


_is_transform = _kind_is("Transform")
_is_light = _kind_is("Light")
_is_camera = _kind_is("Camera")


def _is_body(kind: str) -> bool:
    return kind.startswith("Rigidbody")


DEFAULT_RULES: tuple[SpecialCaseRule, ...] = (
    # Transform
    SpecialCaseRule(
        "one axis of position",
        _is_transform,
        _named("x", "y", "z", "posx", "posy", "posz"),
        _set_position_axis,
    ),
    SpecialCaseRule(
        "replace position",
        _is_transform,
        _named("pos", "position"),
        _direct("position", VECTOR3),
    ),
    SpecialCaseRule(
        "rotation from Euler angles",
        _is_transform,
        _named("rot", "rotation"),
        _set_euler_rotation,
    ),
    SpecialCaseRule(
        "local scale", _is_transform, _named("scale"), _direct("localScale", VECTOR3)
    ),
    # Renderers
    SpecialCaseRule(
        "material color", is_renderer_kind, _named("color"), _set_material_color
    ),
    SpecialCaseRule(
        "renderer visibility", is_renderer_kind, _named("enabled"), _direct("enabled", BOOL)
    ),
    # Light
    SpecialCaseRule("light color", _is_light, _named("color"), _direct("color", COLOR)),
    SpecialCaseRule(
        "light intensity", _is_light, _named("intensity"), _direct("intensity", FLOAT)
    ),
    SpecialCaseRule("light range", _is_light, _named("range"), _direct("range", FLOAT)),
    SpecialCaseRule(
        "light enabled", _is_light, _named("enabled"), _direct("enabled", BOOL)
    ),
    # Camera
    SpecialCaseRule(
        "field of view",
        _is_camera,
        _named("fov", "fieldofview"),
        _direct("fieldOfView", FLOAT),
    ),
    SpecialCaseRule(
        "near clip plane",
        _is_camera,
        _named("near", "nearplane"),
        _direct("nearClipPlane", FLOAT),
    ),
    SpecialCaseRule(
        "far clip plane",
        _is_camera,
        _named("far", "farplane"),
        _direct("farClipPlane", FLOAT),
    ),
    SpecialCaseRule(
        "orthographic", _is_camera, _named("orthographic"), _direct("orthographic", BOOL)
    ),
    # Rigid body
    SpecialCaseRule("mass", _is_body, _named("mass"), _direct("mass", FLOAT)),
    SpecialCaseRule("drag", _is_body, _named("drag"), _direct("drag", FLOAT)),
    SpecialCaseRule(
        "angular drag", _is_body, _named("angulardrag"), _direct("angularDrag", FLOAT)
    ),
    SpecialCaseRule(
        "use gravity", _is_body, _named("usegravity"), _direct("useGravity", BOOL)
    ),
    SpecialCaseRule(
        "is kinematic", _is_body, _named("iskinematic"), _direct("isKinematic", BOOL)
    ),
    SpecialCaseRule(
        "interpolation", _is_body, _named("interpolate"), _set_interpolation
    ),
    SpecialCaseRule(
        "freeze flag",
        _is_body,
        lambda name: name.startswith("freezeposition"),
        _set_freeze_flag,
    ),
)
