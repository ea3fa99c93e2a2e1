"""
Tests for the member registry: properties, fields and instance attributes.
"""

from dataclasses import dataclass
from typing import Annotated, ClassVar

import pytest
from pydantic import BaseModel

from scenemut.core import TargetHandle
from scenemut.core.types import BOOL, DOUBLE, FLOAT, INT, VECTOR3, TypeKind
from scenemut.exceptions import MemberNotFoundError
from scenemut.resolution import MemberRegistry, MemberSource
from scenemut.scene import Light, Transform


class Gadget:
    """Plain host type mixing properties, annotations and instance attributes."""

    version: ClassVar[int] = 2
    weight: Annotated[float, TypeKind.DOUBLE]

    def __init__(self):
        self.weight = 1.0
        self._power = 3
        self.label = "gadget"

    @property
    def power(self) -> int:
        return self._power

    @power.setter
    def power(self, value: int) -> None:
        self._power = value

    @property
    def serial(self) -> str:
        return "X-1"


@dataclass
class Lamp:
    on: bool = False
    hue: float = 0.0


class Sensor(BaseModel):
    gain: float = 1.0
    armed: bool = False


class TestMemberRegistry:
    """Test introspection and caching of writable members."""

    def setup_method(self):
        self.registry = MemberRegistry()

    def test_transform_properties(self):
        members = self.registry.members_of(Transform)

        assert list(members) == ["position", "rotation", "eulerAngles", "localScale"]
        assert all(m.source == MemberSource.PROPERTY for m in members.values())
        assert members["position"].descriptor == VECTOR3
        assert members["rotation"].descriptor is None
        assert members["rotation"].type_name == "Quaternion"

    def test_read_only_properties_and_private_names_skipped(self):
        members = self.registry.members_for(TargetHandle(Gadget(), "Gadget"))

        assert "serial" not in members
        assert "_power" not in members
        assert "version" not in members
        assert members["power"].descriptor == INT
        assert members["weight"].descriptor == DOUBLE
        assert members["label"].source == MemberSource.FIELD

    def test_properties_listed_before_fields(self):
        names = self.registry.writable_names(TargetHandle(Gadget(), "Gadget"))
        assert names.index("power") < names.index("weight")

    def test_dataclass_and_pydantic_fields(self):
        lamp = self.registry.members_of(Lamp)
        assert lamp["on"].descriptor == BOOL
        assert lamp["on"].source == MemberSource.FIELD

        sensor = self.registry.members_of(Sensor)
        assert sensor["gain"].descriptor == FLOAT
        assert set(sensor) == {"gain", "armed"}

    def test_enum_field(self):
        members = self.registry.members_of(Light)
        assert members["type"].descriptor.kind == TypeKind.ENUM

    def test_introspection_is_cached(self):
        assert self.registry.members_of(Lamp) is self.registry.members_of(Lamp)

    def test_property_and_field_lookup(self):
        target = TargetHandle(Gadget(), "Gadget")
        assert self.registry.find_property(target, "power") is not None
        assert self.registry.find_field(target, "power") is None
        assert self.registry.find_field(target, "weight") is not None
        assert self.registry.find_property(target, "weight") is None

    def test_require_reports_alternatives(self):
        target = TargetHandle(Lamp(), "Lamp")
        with pytest.raises(MemberNotFoundError) as exc_info:
            self.registry.require(target, "brightness", limit=1)

        error = exc_info.value
        assert error.member_name == "brightness"
        assert error.available_members == ["on"]

    def test_registered_kinds(self):
        self.registry.register_kind("Lamp", Lamp)
        assert self.registry.registered_kinds() == ["Lamp"]
        assert self.registry.class_for_kind("Lamp") is Lamp
        assert self.registry.class_for_kind("Missing") is None
