"""
Mutation execution and diagnostic reporting for scenemut.
"""

from scenemut.execution.applier import MutationApplier, MutationContext
from scenemut.execution.reporting import (
    MutationResponse,
    OutcomeModel,
    build_response,
    summarize,
)

__all__ = [
    "MutationApplier",
    "MutationContext",
    "MutationResponse",
    "OutcomeModel",
    "build_response",
    "summarize",
]
