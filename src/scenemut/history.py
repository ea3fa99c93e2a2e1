"""Operation history for field mutations.

A history recorder wraps each field mutation, snapshotting the target's member
values before and after the change. `OperationHistory` keeps a bounded
in-memory log of those records, oldest dropped first, and can summarize or
export it as JSON. Restoring snapshots is left to the host's own undo system.
"""

import json
import logging
from collections import deque
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Protocol
from uuid import uuid4

from pydantic import BaseModel, Field

from scenemut.core.models import FieldOutcome, FieldRequest, TargetHandle

logger = logging.getLogger(__name__)

ApplyFn = Callable[[TargetHandle, FieldRequest], FieldOutcome]
SnapshotFn = Callable[[TargetHandle], dict[str, str]]


class HistoryRecorder(Protocol):
    def record(
        self,
        target: TargetHandle,
        field: FieldRequest,
        apply: ApplyFn,
        snapshot: SnapshotFn,
    ) -> FieldOutcome: ...


class OperationRecord(BaseModel):
    id: str = Field(default_factory=lambda: uuid4().hex)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    target_kind: str
    target_name: str | None = None
    field_name: str
    raw_value: str
    applied: bool = False
    detail: str = ""
    error: str | None = None
    before: dict[str, str] = Field(default_factory=dict)
    after: dict[str, str] = Field(default_factory=dict)

    def changed_members(self) -> list[str]:
        return [name for name, value in self.after.items() if self.before.get(name) != value]


class OperationHistory:
    """Bounded in-memory log of field mutations."""

    def __init__(self, max_size: int = 50):
        self.max_size = max_size
        self._records: deque[OperationRecord] = deque(maxlen=max_size)

    @property
    def records(self) -> list[OperationRecord]:
        return list(self._records)

    def record(
        self,
        target: TargetHandle,
        field: FieldRequest,
        apply: ApplyFn,
        snapshot: SnapshotFn,
    ) -> FieldOutcome:
        """
        Run one field mutation and log its before and after state.

        Exceptions from ``apply`` are recorded with their message, logged and
        re-raised.

        Params:
            target: Handle being mutated
            field: The field request
            apply: Performs the mutation and returns its outcome
            snapshot: Captures formatted member values of the target

        Returns:
            The outcome returned by ``apply``
        """
        record = OperationRecord(
            target_kind=target.kind,
            target_name=target.name,
            field_name=field.name,
            raw_value=field.raw_value,
            before=snapshot(target),
        )
        try:
            outcome = apply(target, field)
        except Exception as e:
            record.error = str(e)
            self._records.append(record)
            logger.error(f"Mutation of {target.kind}.{field.name} failed: {e}")
            raise

        record.applied = outcome.applied
        record.detail = outcome.detail
        record.after = snapshot(target)
        self._records.append(record)
        logger.debug(f"Recorded {target.kind}.{field.name}: {outcome.detail}")
        return outcome

    def clear(self) -> None:
        self._records.clear()

    def summary(self, recent: int = 5) -> str:
        """Human-readable count plus the most recent records, newest first."""
        lines = [f"Operation history: {len(self._records)} record(s)"]
        for record in list(reversed(self._records))[:recent]:
            if record.error is not None:
                status = "error"
            else:
                status = "applied" if record.applied else "failed"
            lines.append(
                f"  - {record.target_kind}.{record.field_name} = {record.raw_value!r} "
                f"[{status}] ({record.timestamp:%H:%M:%S})"
            )
        return "\n".join(lines)

    def export_json(self) -> str:
        records = [record.model_dump(mode="json") for record in self._records]
        return json.dumps({"records": records}, indent=2)
