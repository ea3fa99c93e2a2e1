"""
In-memory host object model.

Stands in for the editor's scene objects so the mutation engine can be embedded
and tested without a running editor. Member names mirror the host editor's
object model (``localScale``, ``fieldOfView``) because those are the names
external callers send.
"""

from dataclasses import dataclass, field
from enum import Enum

from scenemut.core.types import WHITE, ZERO_VECTOR3, Color, Quaternion, Vector3


class LightType(Enum):
    SPOT = 0
    DIRECTIONAL = 1
    POINT = 2
    AREA = 3


class RigidbodyInterpolation(Enum):
    NONE = 0
    INTERPOLATE = 1
    EXTRAPOLATE = 2


class Transform:
    """Position, rotation and scale of a scene object, exposed as properties."""

    def __init__(
        self,
        position: Vector3 = ZERO_VECTOR3,
        rotation: Quaternion | None = None,
        localScale: Vector3 = Vector3(1.0, 1.0, 1.0),
    ):
        self._position = position
        self._rotation = rotation or Quaternion()
        self._local_scale = localScale

    @property
    def position(self) -> Vector3:
        return self._position

    @position.setter
    def position(self, value: Vector3) -> None:
        self._position = value

    @property
    def rotation(self) -> Quaternion:
        return self._rotation

    @rotation.setter
    def rotation(self, value: Quaternion) -> None:
        self._rotation = value

    @property
    def eulerAngles(self) -> Vector3:
        return self._rotation.euler_angles()

    @eulerAngles.setter
    def eulerAngles(self, value: Vector3) -> None:
        self._rotation = Quaternion.euler(value)

    @property
    def localScale(self) -> Vector3:
        return self._local_scale

    @localScale.setter
    def localScale(self, value: Vector3) -> None:
        self._local_scale = value

    def __repr__(self) -> str:
        return (
            f"Transform(position={self._position!r}, rotation={self._rotation!r}, "
            f"localScale={self._local_scale!r})"
        )


@dataclass
class Material:
    name: str = "Default-Material"
    color: Color = WHITE


@dataclass
class Renderer:
    enabled: bool = True
    material: Material | None = None
    receiveShadows: bool = True
    sortingOrder: int = 0


@dataclass
class MeshRenderer(Renderer):
    pass


@dataclass
class SkinnedMeshRenderer(Renderer):
    updateWhenOffscreen: bool = False


@dataclass
class Light:
    type: LightType = LightType.POINT
    color: Color = WHITE
    intensity: float = 1.0
    range: float = 10.0
    spotAngle: float = 30.0
    enabled: bool = True


@dataclass
class Camera:
    fieldOfView: float = 60.0
    nearClipPlane: float = 0.3
    farClipPlane: float = 1000.0
    orthographic: bool = False
    orthographicSize: float = 5.0
    backgroundColor: Color = Color(0.19, 0.3, 0.47, 0.0)
    enabled: bool = True


@dataclass
class Rigidbody:
    mass: float = 1.0
    drag: float = 0.0
    angularDrag: float = 0.05
    useGravity: bool = True
    isKinematic: bool = False
    interpolation: RigidbodyInterpolation = RigidbodyInterpolation.NONE
    freezeRotation: bool = False
    velocity: Vector3 = ZERO_VECTOR3


@dataclass
class GameObject:
    """A named scene object owning a transform and a list of components."""

    name: str
    active: bool = True
    tag: str = "Untagged"
    layer: int = 0
    transform: Transform = field(default_factory=Transform)
    components: list[object] = field(default_factory=list)

    def add_component(self, component: object) -> object:
        self.components.append(component)
        return component

    def get_component(self, kind: str) -> object | None:
        """
        Find the first component whose class, or a base class, is named ``kind``.

        Params:
            kind: Component type name such as "Light" or "Renderer"

        Returns:
            The component, or None when the object has no such component
        """
        if kind == "Transform":
            return self.transform
        for component in self.components:
            if any(cls.__name__ == kind for cls in type(component).__mro__):
                return component
        return None
