"""
Alias resolution from caller-facing property names to canonical member names.

Resolution order:
    1. A real member with exactly the requested name always wins.
    2. The alias table for the target kind (case-insensitive on the request).
    3. The generic table shared by every kind.
    4. The requested name unchanged, so the member lookup fails explicitly.
"""

from collections.abc import Collection

KIND_ALIASES: dict[str, dict[str, str]] = {
    "Transform": {
        "x": "position",
        "posx": "position",
        "y": "position",
        "posy": "position",
        "z": "position",
        "posz": "position",
        "pos": "position",
        "rot": "rotation",
        "scale": "localScale",
    },
    "Light": {
        "color": "color",
        "intensity": "intensity",
        "range": "range",
        "type": "type",
        "enabled": "enabled",
    },
    "Camera": {
        "fov": "fieldOfView",
        "fieldofview": "fieldOfView",
        "near": "nearClipPlane",
        "nearplane": "nearClipPlane",
        "far": "farClipPlane",
        "farplane": "farClipPlane",
    },
}

# Shared by every kind whose class name ends in "Renderer"; "color" lands on
# the material member, the actual color change is a special-case rule.
RENDERER_ALIASES: dict[str, str] = {
    "enabled": "enabled",
    "material": "material",
    "color": "material",
}

GENERIC_ALIASES: dict[str, str] = {
    "enabled": "enabled",
    "active": "enabled",
    "color": "color",
    "position": "position",
    "rotation": "rotation",
    "scale": "localScale",
}


def is_renderer_kind(kind: str) -> bool:
    return kind.endswith("Renderer")


class AliasResolver:
    """Maps requested names to canonical member names per kind tag."""

    def __init__(
        self,
        kind_aliases: dict[str, dict[str, str]] | None = None,
        generic_aliases: dict[str, str] | None = None,
    ):
        self.kind_aliases = kind_aliases if kind_aliases is not None else KIND_ALIASES
        self.generic_aliases = (
            generic_aliases if generic_aliases is not None else GENERIC_ALIASES
        )

    def table_for(self, kind: str) -> dict[str, str]:
        """Return the kind-specific alias table, empty when the kind has none."""
        if kind in self.kind_aliases:
            return self.kind_aliases[kind]
        if is_renderer_kind(kind):
            return RENDERER_ALIASES
        return {}

    def resolve(
        self, kind: str, requested_name: str, member_names: Collection[str] = ()
    ) -> str:
        """
        Resolve a requested property name to a canonical member name.

        Params:
            kind: Kind tag of the target
            requested_name: Name sent by the caller, possibly an alias
            member_names: Real writable member names of the target type

        Returns:
            Canonical member name, or ``requested_name`` when nothing maps
        """
        if requested_name in member_names:
            return requested_name

        key = requested_name.lower()
        specific = self.table_for(kind)
        if key in specific:
            return specific[key]
        if key in self.generic_aliases:
            return self.generic_aliases[key]
        return requested_name
