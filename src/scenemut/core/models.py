"""
Per-invocation data model for mutation batches.

All values here are created, consumed and discarded within a single operation
call. Outcomes are immutable once produced; batch flags are derived from the
outcomes rather than tracked separately.
"""

from collections.abc import Iterable
from typing import Any

from attrs import field, frozen

from scenemut.exceptions import NullTargetError


@frozen
class TargetHandle:
    """Mutable host object plus the kind tag used for alias and rule lookup."""

    obj: Any
    kind: str
    name: str | None = None

    def require(self) -> Any:
        """
        Return the wrapped object.

        Raises:
            NullTargetError: If the handle holds no object
        """
        if self.obj is None:
            raise NullTargetError(self.kind)
        return self.obj


@frozen
class FieldRequest:
    name: str
    raw_value: str


@frozen
class ConversionOutcome:
    """
    Result of converting a raw string for one target type.

    When ``error`` is set for any non-enum target, ``value`` holds the
    documented fallback so callers can always proceed with a value.
    """

    value: Any
    used_fallback: bool = False
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@frozen
class FieldOutcome:
    name: str
    applied: bool
    detail: str

    @classmethod
    def success(cls, name: str, detail: str) -> "FieldOutcome":
        return cls(name=name, applied=True, detail=detail)

    @classmethod
    def failure(cls, name: str, detail: str) -> "FieldOutcome":
        return cls(name=name, applied=False, detail=detail)


@frozen
class BatchResult:
    """Outcomes of one batch with the success flags derived from them."""

    outcomes: tuple[FieldOutcome, ...] = field(converter=tuple)

    @property
    def applied_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.applied)

    @property
    def full_success(self) -> bool:
        return self.applied_count == len(self.outcomes)

    @property
    def partial_success(self) -> bool:
        return 0 < self.applied_count < len(self.outcomes)

    @property
    def failed(self) -> list[FieldOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.applied]

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[FieldOutcome]) -> "BatchResult":
        return cls(outcomes=tuple(outcomes))
