"""
Field mutation against host objects.

`MutationApplier.apply_field` resolves one caller field onto a target in order:
    1. A special-case rule for the target kind and requested name.
    2. Alias resolution to a canonical member name.
    3. A writable property with that name on the runtime type.
    4. A field with that name on the runtime type.
    5. Failure listing the writable members the caller could use instead.

`apply_fields` runs a batch sequentially; later fields observe the effects of
earlier ones. A failed field never aborts the rest of the batch. Only a missing
target object or an empty batch raise.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from scenemut.conversion.type_mapping import TypeConverter
from scenemut.core.config import MutationConfig, create_mutation_config
from scenemut.core.models import BatchResult, FieldOutcome, FieldRequest, TargetHandle
from scenemut.exceptions import (
    EmptyBatchError,
    ErrorContext,
    ErrorLevel,
    MemberNotFoundError,
)
from scenemut.execution.reporting import MutationResponse, build_response, summarize
from scenemut.history import HistoryRecorder, OperationHistory
from scenemut.parsing.values import format_value
from scenemut.resolution.aliases import AliasResolver
from scenemut.resolution.members import MemberRegistry, MemberSpec
from scenemut.resolution.rules import SpecialCaseRuleSet, applied_outcome


@dataclass
class MutationContext:
    """Per-process collaborators threaded through every mutation call."""

    config: MutationConfig = field(default_factory=MutationConfig)
    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("scenemut")
    )
    history: HistoryRecorder | None = None

    @classmethod
    def create(
        cls,
        config: MutationConfig | dict | None = None,
        record_history: bool = False,
        logger: logging.Logger | None = None,
    ) -> "MutationContext":
        """
        Build a context from flexible config input.

        Params:
            config: MutationConfig, dict overriding defaults, or None
            record_history: Attach an OperationHistory sized by the config
            logger: Logger for warnings; defaults to the "scenemut" logger

        Returns:
            MutationContext instance
        """
        resolved = create_mutation_config(config)
        history = OperationHistory(resolved.history_size) if record_history else None
        return cls(
            config=resolved,
            logger=logger or logging.getLogger("scenemut"),
            history=history,
        )


FieldInput = Mapping[str, str] | Iterable[FieldRequest]


class MutationApplier:
    """Applies string-valued fields to host objects."""

    def __init__(
        self,
        context: MutationContext | None = None,
        registry: MemberRegistry | None = None,
        aliases: AliasResolver | None = None,
        rules: SpecialCaseRuleSet | None = None,
    ):
        self.context = context or MutationContext()
        self.registry = registry or MemberRegistry()
        self.aliases = aliases or AliasResolver()
        self.rules = rules or SpecialCaseRuleSet()
        self.converter = TypeConverter(self.context.config, self.context.logger)

    def apply_field(self, target: TargetHandle, field: FieldRequest) -> FieldOutcome:
        """
        Apply one field to a target.

        Params:
            target: Handle of the object to mutate
            field: Requested name and raw value

        Returns:
            FieldOutcome; failures are reported, never raised

        Raises:
            NullTargetError: If the handle holds no object
        """
        obj = target.require()

        rule = self.rules.find(target.kind, field.name)
        if rule is not None:
            return rule.apply(obj, field, self.converter)

        members = self.registry.members_for(target)
        canonical = self.aliases.resolve(target.kind, field.name, members)
        try:
            member = self.registry.require(
                target, canonical, self.context.config.max_listed_members
            )
        except MemberNotFoundError as e:
            context = ErrorContext(
                target_kind=target.kind,
                target_name=target.name,
                field_name=field.name,
                raw_value=field.raw_value,
                runtime_type=type(obj).__name__,
            )
            self.context.logger.info(
                f"Member '{canonical}' not found\n"
                f"{context.format_location(ErrorLevel.DEVELOPER)}"
            )
            return FieldOutcome.failure(field.name, str(e))

        return self._assign_member(obj, member, field)

    def apply_fields(self, target: TargetHandle, fields: FieldInput) -> BatchResult:
        """
        Apply a batch of fields to one target, in order.

        Params:
            target: Handle of the object to mutate
            fields: Mapping of name to raw value, or FieldRequests

        Returns:
            BatchResult with one outcome per field

        Raises:
            NullTargetError: If the handle holds no object
            EmptyBatchError: If no fields are supplied
        """
        target.require()
        requests = _as_requests(fields)
        if not requests:
            raise EmptyBatchError(target.kind)

        history = self.context.history
        outcomes = []
        for request in requests:
            if history is not None:
                outcome = history.record(target, request, self.apply_field, self.snapshot)
            else:
                outcome = self.apply_field(target, request)
            outcomes.append(outcome)
        return summarize(outcomes)

    def mutate(self, target: TargetHandle, fields: FieldInput) -> MutationResponse:
        """Apply a batch and build its response envelope."""
        batch = self.apply_fields(target, fields)
        return build_response(batch, self.available_members(target))

    def available_members(self, target: TargetHandle) -> list[str]:
        limit = self.context.config.max_listed_members
        return self.registry.writable_names(target)[:limit]

    def read_field(self, target: TargetHandle, name: str) -> str:
        """
        Read a member's current value, formatted like caller input.

        Raises:
            MemberNotFoundError: If the resolved name is not a member
        """
        obj = target.require()
        members = self.registry.members_for(target)
        canonical = self.aliases.resolve(target.kind, name, members)
        member = self.registry.require(
            target, canonical, self.context.config.max_listed_members
        )
        return format_value(getattr(obj, member.name))

    def snapshot(self, target: TargetHandle) -> dict[str, str]:
        obj = target.require()
        return {
            name: format_value(getattr(obj, name, None))
            for name in self.registry.members_for(target)
        }

    def _assign_member(
        self, obj: Any, member: MemberSpec, field: FieldRequest
    ) -> FieldOutcome:
        if member.descriptor is None:
            return FieldOutcome.failure(
                field.name,
                f"Member '{member.name}' has type {member.type_name}, "
                "which cannot be set from a string",
            )

        outcome = self.converter.convert(field.raw_value, member.descriptor)
        if not outcome.ok and not outcome.used_fallback:
            return FieldOutcome.failure(field.name, outcome.error)

        try:
            setattr(obj, member.name, outcome.value)
        except (AttributeError, TypeError, ValueError) as e:
            self.context.logger.warning(
                f"Setting {type(obj).__name__}.{member.name} failed: {e}"
            )
            return FieldOutcome.failure(
                field.name, f"Could not set '{member.name}': {e}"
            )
        return applied_outcome(field, outcome.value, outcome)


def _as_requests(fields: FieldInput) -> list[FieldRequest]:
    if isinstance(fields, Mapping):
        return [FieldRequest(name, str(value)) for name, value in fields.items()]
    return list(fields)
