"""
Tests for special-case rules that bypass generic member lookup.
"""

from scenemut.conversion import TypeConverter
from scenemut.core import FieldRequest, MutationConfig, Vector3
from scenemut.core.types import Color
from scenemut.resolution import DEFAULT_RULES, SpecialCaseRule, SpecialCaseRuleSet
from scenemut.scene import (
    Camera,
    Light,
    Material,
    MeshRenderer,
    Rigidbody,
    RigidbodyInterpolation,
    Transform,
)


class TestRuleMatching:
    """Test rule lookup by kind and requested name."""

    def setup_method(self):
        self.rules = SpecialCaseRuleSet()

    def test_transform_rules(self):
        assert self.rules.find("Transform", "x").description == "one axis of position"
        assert self.rules.find("Transform", "POS").description == "replace position"
        assert self.rules.find("Transform", "rot").description == "rotation from Euler angles"
        assert self.rules.find("Transform", "scale").description == "local scale"

    def test_renderer_rules_match_any_renderer(self):
        assert self.rules.find("MeshRenderer", "color").description == "material color"
        assert self.rules.find("SkinnedMeshRenderer", "enabled") is not None

    def test_body_rules(self):
        assert self.rules.find("Rigidbody", "angularDrag").description == "angular drag"
        assert self.rules.find("Rigidbody", "freezePositionX").description == "freeze flag"

    def test_unmatched_names_fall_through(self):
        assert self.rules.find("Transform", "localScale") is None
        assert self.rules.find("Light", "spotAngle") is None
        assert self.rules.find("Collider", "x") is None

    def test_first_match_wins(self):
        first = SpecialCaseRule("first", lambda k: True, lambda n: True, None)
        second = SpecialCaseRule("second", lambda k: True, lambda n: True, None)
        assert SpecialCaseRuleSet([first, second]).find("Any", "thing") is first

    def test_default_rules_are_ordered_by_kind(self):
        assert DEFAULT_RULES[0].description == "one axis of position"
        assert DEFAULT_RULES[-1].description == "freeze flag"


class TestRuleApplication:
    """Test the mutations performed by the default rules."""

    def setup_method(self):
        self.rules = SpecialCaseRuleSet()
        self.converter = TypeConverter(MutationConfig(log_fallbacks=False))

    def apply(self, obj, kind, name, raw):
        field = FieldRequest(name, raw)
        return self.rules.find(kind, name).apply(obj, field, self.converter)

    def test_axis_changes_one_component(self):
        transform = Transform(position=Vector3(1.0, 2.0, 3.0))
        outcome = self.apply(transform, "Transform", "y", "7")

        assert outcome.applied
        assert transform.position == Vector3(1.0, 7.0, 3.0)
        assert outcome.detail == "1,7,3"

    def test_rotation_uses_euler_angles(self):
        transform = Transform()
        outcome = self.apply(transform, "Transform", "rot", "0,90,0")

        assert outcome.applied
        assert abs(transform.eulerAngles.y - 90.0) < 1e-6

    def test_scale_sets_local_scale(self):
        transform = Transform()
        self.apply(transform, "Transform", "scale", "2")
        assert transform.localScale == Vector3(2.0, 2.0, 2.0)

    def test_renderer_color_sets_material_color(self):
        renderer = MeshRenderer(material=Material())
        outcome = self.apply(renderer, "MeshRenderer", "color", "#00ff00")

        assert outcome.applied
        assert renderer.material.color == Color(0.0, 1.0, 0.0, 1.0)
        assert not hasattr(renderer, "color")

    def test_renderer_without_material_fails(self):
        renderer = MeshRenderer()
        outcome = self.apply(renderer, "MeshRenderer", "color", "red")

        assert not outcome.applied
        assert "no material" in outcome.detail

    def test_renderer_enabled_toggles_visibility(self):
        renderer = MeshRenderer()
        self.apply(renderer, "MeshRenderer", "enabled", "off")
        assert renderer.enabled is False

    def test_light_and_camera_direct_sets(self):
        light = Light()
        camera = Camera()
        self.apply(light, "Light", "intensity", "2.5")
        self.apply(camera, "Camera", "fov", "75")
        self.apply(camera, "Camera", "orthographic", "yes")

        assert light.intensity == 2.5
        assert camera.fieldOfView == 75.0
        assert camera.orthographic is True

    def test_fallback_is_applied_and_reported(self):
        light = Light(intensity=4.0)
        outcome = self.apply(light, "Light", "intensity", "bright")

        assert outcome.applied
        assert light.intensity == 0.0
        assert "fallback" in outcome.detail

    def test_interpolation_enum(self):
        body = Rigidbody()
        outcome = self.apply(body, "Rigidbody", "interpolate", "Extrapolate")

        assert outcome.applied
        assert body.interpolation is RigidbodyInterpolation.EXTRAPOLATE

    def test_invalid_interpolation_fails_without_change(self):
        body = Rigidbody()
        outcome = self.apply(body, "Rigidbody", "interpolate", "smooth")

        assert not outcome.applied
        assert "smooth" in outcome.detail
        assert "INTERPOLATE" in outcome.detail
        assert body.interpolation is RigidbodyInterpolation.NONE

    def test_freeze_position_sets_rotation_freeze_flag(self):
        """Test the long-standing mapping of freezeposition onto freezeRotation."""
        body = Rigidbody()
        outcome = self.apply(body, "Rigidbody", "freezePositionY", "true")

        assert outcome.applied
        assert body.freezeRotation is True

    def test_rule_on_object_missing_member_fails(self):
        outcome = self.apply(object(), "Light", "range", "5")
        assert not outcome.applied
        assert "range" in outcome.detail

    def test_rejected_axis_value_fails_field(self):
        """Test that a host setter refusing a value becomes a failed outcome."""

        class BoundedTransform(Transform):
            @Transform.position.setter
            def position(self, value: Vector3) -> None:
                if value.y > 100:
                    raise ValueError("position out of bounds")
                Transform.position.fset(self, value)

        transform = BoundedTransform(position=Vector3(1.0, 2.0, 3.0))
        outcome = self.apply(transform, "Transform", "y", "500")

        assert not outcome.applied
        assert "Could not set 'position'" in outcome.detail
        assert transform.position == Vector3(1.0, 2.0, 3.0)
