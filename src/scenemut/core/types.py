"""
Core value and type definitions for scenemut.

Structured host values (vectors, colors, rotations) are immutable; changing one
axis of a member means assigning an evolved copy back to it. `TypeDescriptor`
describes the static type of a host member and drives raw string conversion.
"""

import math
from enum import Enum

from attrs import evolve, frozen


@frozen
class Vector2:
    x: float = 0.0
    y: float = 0.0

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@frozen
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def with_axis(self, axis: str, value: float) -> "Vector3":
        """Return a copy with one of ``x``, ``y`` or ``z`` replaced."""
        return evolve(self, **{axis: value})


@frozen
class Color:
    """RGBA color with float channels, nominally in 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)


@frozen
class Quaternion:
    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __mul__(self, other: "Quaternion") -> "Quaternion":
        return Quaternion(
            w=self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            x=self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            y=self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            z=self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
        )

    @classmethod
    def euler(cls, angles: Vector3) -> "Quaternion":
        """
        Build a rotation from Euler angles in degrees.

        Applied in the host editor's order: around Z, then X, then Y.

        Params:
            angles: Rotation in degrees around each axis

        Returns:
            The equivalent unit quaternion
        """
        hx, hy, hz = (math.radians(a) / 2 for a in angles.as_tuple())
        qx = cls(w=math.cos(hx), x=math.sin(hx))
        qy = cls(w=math.cos(hy), y=math.sin(hy))
        qz = cls(w=math.cos(hz), z=math.sin(hz))
        return qy * qx * qz

    def euler_angles(self) -> Vector3:
        """Recover Euler angles in degrees, each normalized to [0, 360)."""
        w, x, y, z = self.w, self.x, self.y, self.z
        sin_x = -2.0 * (y * z - w * x)
        sin_x = max(-1.0, min(1.0, sin_x))
        angle_x = math.asin(sin_x)
        angle_y = math.atan2(2.0 * (x * z + w * y), 1.0 - 2.0 * (x * x + y * y))
        angle_z = math.atan2(2.0 * (x * y + w * z), 1.0 - 2.0 * (x * x + z * z))
        return Vector3(*(_normalize_degrees(math.degrees(a)) for a in (angle_x, angle_y, angle_z)))


def _normalize_degrees(angle: float) -> float:
    normalized = round(angle, 9) % 360.0
    return 0.0 if normalized == 360.0 else normalized


ZERO_VECTOR2 = Vector2()
ZERO_VECTOR3 = Vector3()
WHITE = Color(1.0, 1.0, 1.0, 1.0)


class TypeKind(Enum):
    """Static type tags for host members."""

    INT = "int"
    FLOAT = "float"
    DOUBLE = "double"
    BOOL = "bool"
    STRING = "string"
    VECTOR2 = "vector2"
    VECTOR3 = "vector3"
    COLOR = "color"
    ENUM = "enum"


@frozen
class TypeDescriptor:
    """
    Target member type used to pick a parser and a fallback.

    ``enum_type`` is set only for ``TypeKind.ENUM``.
    """

    kind: TypeKind
    enum_type: type[Enum] | None = None

    @property
    def name(self) -> str:
        if self.kind == TypeKind.ENUM and self.enum_type is not None:
            return f"Enum({self.enum_type.__name__})"
        return self.kind.name.capitalize()

    @classmethod
    def of_enum(cls, enum_type: type[Enum]) -> "TypeDescriptor":
        return cls(TypeKind.ENUM, enum_type)


INT = TypeDescriptor(TypeKind.INT)
FLOAT = TypeDescriptor(TypeKind.FLOAT)
DOUBLE = TypeDescriptor(TypeKind.DOUBLE)
BOOL = TypeDescriptor(TypeKind.BOOL)
STRING = TypeDescriptor(TypeKind.STRING)
VECTOR2 = TypeDescriptor(TypeKind.VECTOR2)
VECTOR3 = TypeDescriptor(TypeKind.VECTOR3)
COLOR = TypeDescriptor(TypeKind.COLOR)
