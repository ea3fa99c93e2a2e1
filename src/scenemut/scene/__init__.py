"""
Reference host object model and scene store.
"""

from scenemut.scene.objects import (
    Camera,
    GameObject,
    Light,
    LightType,
    Material,
    MeshRenderer,
    Renderer,
    Rigidbody,
    RigidbodyInterpolation,
    SkinnedMeshRenderer,
    Transform,
)
from scenemut.scene.store import InMemoryScene, SceneStore

__all__ = [
    "Camera",
    "GameObject",
    "Light",
    "LightType",
    "Material",
    "MeshRenderer",
    "Renderer",
    "Rigidbody",
    "RigidbodyInterpolation",
    "SkinnedMeshRenderer",
    "Transform",
    "InMemoryScene",
    "SceneStore",
]
