"""
Command router mapping operation variants to engine calls.

`dispatch` handles each operation model explicitly; anything else raises
`UnknownOperationError`. `dispatch_json` validates a raw payload first. A
payload without an ``operation`` key is treated as ``set_fields``.

Batch-level problems (unknown target, empty field map, invalid payload) raise;
field-level problems are reported inside the returned response.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from scenemut.commands.operations import (
    OPERATION_ADAPTER,
    OPERATION_NAMES,
    FieldValuesResponse,
    GetFieldsOperation,
    ListMembersOperation,
    MemberInfo,
    MembersResponse,
    SetFieldsOperation,
)
from scenemut.exceptions import (
    InvalidRequestError,
    MemberNotFoundError,
    TargetNotFoundError,
    UnknownOperationError,
)
from scenemut.execution.applier import MutationApplier
from scenemut.execution.reporting import MutationResponse
from scenemut.resolution.members import MemberSpec
from scenemut.scene.objects import (
    Camera,
    GameObject,
    Light,
    MeshRenderer,
    Renderer,
    Rigidbody,
    SkinnedMeshRenderer,
    Transform,
)
from scenemut.scene.store import SceneStore

logger = logging.getLogger(__name__)

DEFAULT_KINDS: dict[str, type] = {
    "GameObject": GameObject,
    "Transform": Transform,
    "Light": Light,
    "Camera": Camera,
    "Renderer": Renderer,
    "MeshRenderer": MeshRenderer,
    "SkinnedMeshRenderer": SkinnedMeshRenderer,
    "Rigidbody": Rigidbody,
}


class CommandRouter:
    """Entry point turning operations into mutation engine calls."""

    def __init__(
        self,
        scene: SceneStore,
        applier: MutationApplier | None = None,
        kinds: dict[str, type] | None = None,
    ):
        self.scene = scene
        self.applier = applier or MutationApplier()
        for kind, cls in (kinds if kinds is not None else DEFAULT_KINDS).items():
            self.applier.registry.register_kind(kind, cls)

    def dispatch(self, operation: Any) -> BaseModel:
        """
        Run one validated operation.

        Params:
            operation: A SetFieldsOperation, GetFieldsOperation or ListMembersOperation

        Returns:
            The operation's response model

        Raises:
            UnknownOperationError: If the operation type has no handler
            TargetNotFoundError: If the target cannot be resolved
            EmptyBatchError: If a set_fields operation carries no fields
        """
        if isinstance(operation, SetFieldsOperation):
            return self._set_fields(operation)
        if isinstance(operation, GetFieldsOperation):
            return self._get_fields(operation)
        if isinstance(operation, ListMembersOperation):
            return self._list_members(operation)
        raise UnknownOperationError(type(operation).__name__, OPERATION_NAMES)

    def dispatch_json(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        """
        Validate a raw payload, run it and return the serialized response.

        Raises:
            InvalidRequestError: If the payload does not match any operation
            UnknownOperationError: If ``operation`` names no known operation
        """
        if isinstance(payload, Mapping) and "operation" not in payload:
            payload = {**payload, "operation": "set_fields"}
        try:
            operation = OPERATION_ADAPTER.validate_python(payload)
        except ValidationError as e:
            errors = e.errors()
            if any(err["type"] == "union_tag_invalid" for err in errors):
                raise UnknownOperationError(
                    str(payload.get("operation")), OPERATION_NAMES
                ) from e
            raise InvalidRequestError(
                [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in errors]
            ) from e

        response = self.dispatch(operation)
        return response.model_dump(by_alias=True, exclude_none=True)

    def _set_fields(self, operation: SetFieldsOperation) -> MutationResponse:
        target = self.scene.resolve(operation.target_kind, operation.target)
        response = self.applier.mutate(target, operation.fields)
        logger.info(
            f"set_fields on {target.kind} '{operation.target}': "
            f"{sum(o.applied for o in response.outcomes)}/{len(response.outcomes)} applied"
        )
        return response

    def _get_fields(self, operation: GetFieldsOperation) -> FieldValuesResponse:
        target = self.scene.resolve(operation.target_kind, operation.target)
        response = FieldValuesResponse(target_kind=target.kind)
        for name in operation.names:
            try:
                response.values[name] = self.applier.read_field(target, name)
            except MemberNotFoundError as e:
                response.errors[name] = str(e)
        return response

    def _list_members(self, operation: ListMembersOperation) -> MembersResponse:
        registry = self.applier.registry
        if operation.target is not None:
            target = self.scene.resolve(operation.target_kind, operation.target)
            kind = target.kind
            members = registry.members_for(target)
        else:
            cls = registry.class_for_kind(operation.target_kind)
            if cls is None:
                raise TargetNotFoundError(
                    operation.target_kind, operation.target_kind, "is not a registered kind"
                )
            kind = operation.target_kind
            members = registry.members_of(cls)
        return MembersResponse(
            target_kind=kind, members=[_member_info(m) for m in members.values()]
        )


def _member_info(member: MemberSpec) -> MemberInfo:
    return MemberInfo(name=member.name, type=member.type_name, source=member.source.value)
