"""
Diagnostic reporting for mutation batches.

`summarize` derives a `BatchResult` from per-field outcomes; `build_response`
renders it as the wire-level envelope returned to external callers. Field-level
problems only ever appear inside the envelope, never as exceptions.
"""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from scenemut.core.models import BatchResult, FieldOutcome


class OutcomeModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    applied: bool
    detail: str


class MutationResponse(BaseModel):
    """Response envelope; ``availableMembers`` is present only on failure."""

    model_config = ConfigDict(populate_by_name=True)

    full_success: bool = Field(alias="fullSuccess")
    partial_success: bool = Field(alias="partialSuccess")
    outcomes: list[OutcomeModel] = Field(default_factory=list)
    available_members: list[str] | None = Field(default=None, alias="availableMembers")

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


def summarize(outcomes: Iterable[FieldOutcome]) -> BatchResult:
    """
    Derive batch flags from per-field outcomes.

    Params:
        outcomes: One outcome per requested field, in request order

    Returns:
        BatchResult with ``full_success`` when every field applied and
        ``partial_success`` when some but not all did
    """
    return BatchResult.from_outcomes(outcomes)


def build_response(
    batch: BatchResult, available_members: list[str] | None = None
) -> MutationResponse:
    """
    Build the response envelope for a batch.

    Params:
        batch: Summarized outcomes
        available_members: Writable member names of the target, attached only
            when at least one field failed

    Returns:
        MutationResponse ready for serialization
    """
    members = available_members if batch.failed else None
    return MutationResponse(
        full_success=batch.full_success,
        partial_success=batch.partial_success,
        outcomes=[
            OutcomeModel(name=o.name, applied=o.applied, detail=o.detail)
            for o in batch.outcomes
        ],
        available_members=list(members) if members is not None else None,
    )
