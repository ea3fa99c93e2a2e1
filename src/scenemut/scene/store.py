"""
Scene stores resolve a kind tag plus an object identity into a target handle.

The engine only requires the `SceneStore` protocol; `InMemoryScene` is the
reference implementation backing the router in tests and embeddings.
"""

import logging
from typing import Protocol

from scenemut.core.models import TargetHandle
from scenemut.exceptions import TargetNotFoundError
from scenemut.scene.objects import GameObject

logger = logging.getLogger(__name__)


class SceneStore(Protocol):
    def resolve(self, kind: str, target: str) -> TargetHandle:
        """Return a handle for ``target`` of ``kind`` or raise TargetNotFoundError."""
        ...


class InMemoryScene:
    """Name-indexed collection of GameObjects."""

    def __init__(self, objects: list[GameObject] | None = None):
        self._objects: dict[str, GameObject] = {}
        for game_object in objects or []:
            self.add(game_object)

    def add(self, game_object: GameObject) -> GameObject:
        if game_object.name in self._objects:
            logger.warning(f"Replacing scene object '{game_object.name}'")
        self._objects[game_object.name] = game_object
        return game_object

    def find(self, name: str) -> GameObject | None:
        return self._objects.get(name)

    def list_names(self) -> list[str]:
        return list(self._objects)

    def resolve(self, kind: str, target: str) -> TargetHandle:
        """
        Resolve a target for mutation.

        ``GameObject`` resolves to the object itself; any other kind resolves
        to the matching component, tagged with the component's own class name.

        Params:
            kind: Kind tag requested by the caller
            target: Name of the scene object

        Returns:
            TargetHandle over the object or component

        Raises:
            TargetNotFoundError: If the object or component does not exist
        """
        game_object = self.find(target)
        if game_object is None:
            raise TargetNotFoundError(target, kind)

        if kind == "GameObject":
            return TargetHandle(game_object, kind, target)

        component = game_object.get_component(kind)
        if component is None:
            raise TargetNotFoundError(target, kind, f"has no {kind} component")
        return TargetHandle(component, type(component).__name__, target)
