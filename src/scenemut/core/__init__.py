"""
Core types for scenemut.

This package contains value types, type descriptors, the per-invocation data
model and engine configuration.
"""

from scenemut.core.config import MutationConfig, create_mutation_config
from scenemut.core.models import (
    BatchResult,
    ConversionOutcome,
    FieldOutcome,
    FieldRequest,
    TargetHandle,
)
from scenemut.core.types import (
    WHITE,
    ZERO_VECTOR2,
    ZERO_VECTOR3,
    Color,
    Quaternion,
    TypeDescriptor,
    TypeKind,
    Vector2,
    Vector3,
)

__all__ = [
    "MutationConfig",
    "create_mutation_config",
    "BatchResult",
    "ConversionOutcome",
    "FieldOutcome",
    "FieldRequest",
    "TargetHandle",
    "Color",
    "Quaternion",
    "TypeDescriptor",
    "TypeKind",
    "Vector2",
    "Vector3",
    "WHITE",
    "ZERO_VECTOR2",
    "ZERO_VECTOR3",
]
