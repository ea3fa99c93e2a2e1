"""
Name and member resolution for scenemut.

This package maps caller-facing names onto host members: alias tables,
special-case rules and the cached member registry.
"""

from scenemut.resolution.aliases import (
    GENERIC_ALIASES,
    KIND_ALIASES,
    RENDERER_ALIASES,
    AliasResolver,
    is_renderer_kind,
)
from scenemut.resolution.members import MemberRegistry, MemberSource, MemberSpec
from scenemut.resolution.rules import (
    DEFAULT_RULES,
    SpecialCaseRule,
    SpecialCaseRuleSet,
    applied_outcome,
)

__all__ = [
    "AliasResolver",
    "GENERIC_ALIASES",
    "KIND_ALIASES",
    "RENDERER_ALIASES",
    "is_renderer_kind",
    "MemberRegistry",
    "MemberSource",
    "MemberSpec",
    "DEFAULT_RULES",
    "SpecialCaseRule",
    "SpecialCaseRuleSet",
    "applied_outcome",
]
