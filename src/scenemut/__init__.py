"""
scenemut - String-keyed property resolution and mutation for editor object models

scenemut turns untyped ``{name: "raw value"}`` requests into typed member
assignments on host objects, with explicit fallbacks and per-field diagnostics.
"""

from importlib.metadata import version

from scenemut.commands import CommandRouter
from scenemut.core import (
    BatchResult,
    FieldOutcome,
    FieldRequest,
    MutationConfig,
    TargetHandle,
)
from scenemut.execution import MutationApplier, MutationContext, MutationResponse

__version__ = version("scenemut")

__all__ = [
    "__version__",
    "BatchResult",
    "CommandRouter",
    "FieldOutcome",
    "FieldRequest",
    "MutationApplier",
    "MutationConfig",
    "MutationContext",
    "MutationResponse",
    "TargetHandle",
]
