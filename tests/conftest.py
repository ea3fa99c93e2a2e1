"""
Shared test fixtures for the scenemut test suite.
"""

import pytest

from scenemut.commands import CommandRouter
from scenemut.core import TargetHandle, Vector3
from scenemut.execution import MutationApplier, MutationContext
from scenemut.scene import (
    Camera,
    GameObject,
    InMemoryScene,
    Light,
    Material,
    MeshRenderer,
    Rigidbody,
    Transform,
)


@pytest.fixture
def player():
    """A scene object carrying one of each reference component."""
    game_object = GameObject(
        name="Player", transform=Transform(position=Vector3(1.0, 2.0, 3.0))
    )
    game_object.add_component(MeshRenderer(material=Material(name="Skin")))
    game_object.add_component(Light())
    game_object.add_component(Camera())
    game_object.add_component(Rigidbody())
    return game_object


@pytest.fixture
def scene(player):
    return InMemoryScene([player, GameObject(name="Empty")])


@pytest.fixture
def applier():
    return MutationApplier(MutationContext.create())


@pytest.fixture
def router(scene):
    return CommandRouter(scene, MutationApplier(MutationContext.create()))


@pytest.fixture
def transform_target(player):
    return TargetHandle(player.transform, "Transform", "Player")


@pytest.fixture
def renderer_target(player):
    return TargetHandle(player.get_component("MeshRenderer"), "MeshRenderer", "Player")
