"""
Tests for the in-memory scene store and component lookup.
"""

import logging

import pytest

from scenemut.exceptions import TargetNotFoundError
from scenemut.scene import GameObject, InMemoryScene, Light, SkinnedMeshRenderer


class TestGameObject:
    def test_transform_is_a_component(self, player):
        assert player.get_component("Transform") is player.transform

    def test_lookup_matches_base_classes(self):
        game_object = GameObject(name="Hero")
        renderer = game_object.add_component(SkinnedMeshRenderer())

        assert game_object.get_component("Renderer") is renderer
        assert game_object.get_component("SkinnedMeshRenderer") is renderer
        assert game_object.get_component("MeshRenderer") is None


class TestInMemoryScene:
    """Test target resolution by kind and name."""

    def test_resolve_game_object(self, scene, player):
        handle = scene.resolve("GameObject", "Player")

        assert handle.obj is player
        assert handle.kind == "GameObject"
        assert handle.name == "Player"

    def test_resolve_component_uses_concrete_kind(self, scene, player):
        handle = scene.resolve("Renderer", "Player")

        assert handle.obj is player.get_component("MeshRenderer")
        assert handle.kind == "MeshRenderer"

    def test_unknown_object(self, scene):
        with pytest.raises(TargetNotFoundError) as exc_info:
            scene.resolve("Light", "Ghost")
        assert exc_info.value.reason == "not found"

    def test_missing_component(self, scene):
        with pytest.raises(TargetNotFoundError, match="has no Camera component"):
            scene.resolve("Camera", "Empty")

    def test_replacing_object_logs_warning(self, caplog):
        scene = InMemoryScene([GameObject(name="Lamp")])
        replacement = GameObject(name="Lamp")
        replacement.add_component(Light())

        with caplog.at_level(logging.WARNING, logger="scenemut.scene.store"):
            scene.add(replacement)

        assert scene.find("Lamp") is replacement
        assert scene.list_names() == ["Lamp"]
        assert "Replacing scene object 'Lamp'" in caplog.text
