"""
Member registry for host object types.

Introspects a host class once and caches its writable members: properties that
define a setter, then annotated fields (dataclass, attrs or pydantic fields and
plain class annotations). Each member carries the `TypeDescriptor` derived from
its annotation. Objects of open-ended types may also carry public instance
attributes with no annotation; those are described from their current value.
"""

import logging
from enum import Enum
from typing import Any, ClassVar, get_origin, get_type_hints

from attrs import frozen

from scenemut.conversion.type_mapping import describe_type
from scenemut.core.models import TargetHandle
from scenemut.core.types import TypeDescriptor
from scenemut.exceptions import ErrorContext, MemberNotFoundError

logger = logging.getLogger(__name__)


class MemberSource(Enum):
    """Where a member was found on the host type."""

    PROPERTY = "property"
    FIELD = "field"


@frozen
class MemberSpec:
    name: str
    source: MemberSource
    descriptor: TypeDescriptor | None
    annotation: Any = None

    @property
    def type_name(self) -> str:
        if self.descriptor is not None:
            return self.descriptor.name
        return getattr(self.annotation, "__name__", repr(self.annotation))


class MemberRegistry:
    """Cache of writable members per host class, with optional kind tags.

    Kinds registered up front can be listed without an instance; any other
    class is introspected the first time an instance is mutated.
    """

    def __init__(self):
        self._by_class: dict[type, dict[str, MemberSpec]] = {}
        self._kinds: dict[str, type] = {}

    def register_kind(self, kind: str, cls: type) -> None:
        """
        Associate a kind tag with a host class and introspect it eagerly.

        Params:
            kind: Kind tag callers use (e.g., "Light")
            cls: Host class implementing that kind
        """
        self._kinds[kind] = cls
        self.members_of(cls)

    def registered_kinds(self) -> list[str]:
        return list(self._kinds)

    def class_for_kind(self, kind: str) -> type | None:
        return self._kinds.get(kind)

    def members_of(self, cls: type) -> dict[str, MemberSpec]:
        """
        Get the writable members declared by a class.

        Params:
            cls: Host class to inspect

        Returns:
            Mapping of member name to MemberSpec, properties before fields
        """
        members = self._by_class.get(cls)
        if members is None:
            members = _introspect(cls)
            self._by_class[cls] = members
            logger.debug(f"Registered {len(members)} members for {cls.__name__}")
        return members

    def members_for(self, target: TargetHandle) -> dict[str, MemberSpec]:
        """
        Get the writable members of a target's runtime object.

        Declared members come first; public instance attributes not declared on
        the class follow as fields.

        Params:
            target: Handle whose object is inspected

        Returns:
            Mapping of member name to MemberSpec
        """
        obj = target.require()
        declared = self.members_of(type(obj))
        extra = _instance_attributes(obj, declared)
        if not extra:
            return declared
        return {**declared, **extra}

    def find_property(self, target: TargetHandle, name: str) -> MemberSpec | None:
        member = self.members_for(target).get(name)
        if member is not None and member.source == MemberSource.PROPERTY:
            return member
        return None

    def find_field(self, target: TargetHandle, name: str) -> MemberSpec | None:
        member = self.members_for(target).get(name)
        if member is not None and member.source == MemberSource.FIELD:
            return member
        return None

    def writable_names(self, target: TargetHandle) -> list[str]:
        return list(self.members_for(target))

    def require(
        self,
        target: TargetHandle,
        name: str,
        limit: int = 10,
        context: ErrorContext | None = None,
    ) -> MemberSpec:
        """
        Look up a writable property, then a field, by exact name.

        Params:
            target: Handle whose object is inspected
            name: Canonical member name
            limit: Maximum number of alternatives listed in the error
            context: ErrorContext attached to the error

        Returns:
            The MemberSpec

        Raises:
            MemberNotFoundError: If neither a property nor a field matches
        """
        member = self.find_property(target, name)
        if member is None:
            member = self.find_field(target, name)
        if member is None:
            raise MemberNotFoundError(
                name,
                target.kind,
                self.writable_names(target)[:limit],
                context=context,
            )
        return member


def _type_hints(obj: Any) -> dict[str, Any]:
    try:
        return get_type_hints(obj, include_extras=True)
    except (NameError, TypeError):
        return dict(getattr(obj, "__annotations__", {}))


def _introspect(cls: type) -> dict[str, MemberSpec]:
    properties: dict[str, MemberSpec] = {}
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        for name, attr in vars(klass).items():
            if name.startswith("_") or not isinstance(attr, property):
                continue
            if attr.fset is None:
                properties.pop(name, None)
                continue
            annotation = _type_hints(attr.fget).get("return")
            properties[name] = MemberSpec(
                name, MemberSource.PROPERTY, describe_type(annotation), annotation
            )

    fields: dict[str, MemberSpec] = {}
    for name, annotation in _type_hints(cls).items():
        if name.startswith("_") or name in properties:
            continue
        if annotation is ClassVar or get_origin(annotation) is ClassVar:
            continue
        fields[name] = MemberSpec(
            name, MemberSource.FIELD, describe_type(annotation), annotation
        )

    return {**properties, **fields}


def _instance_attributes(
    obj: Any, declared: dict[str, MemberSpec]
) -> dict[str, MemberSpec]:
    try:
        attributes = vars(obj)
    except TypeError:
        return {}
    extra = {}
    for name, value in attributes.items():
        if name.startswith("_") or name in declared:
            continue
        value_type = type(value)
        extra[name] = MemberSpec(
            name, MemberSource.FIELD, describe_type(value_type), value_type
        )
    return extra
