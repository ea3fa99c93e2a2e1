"""
Operation models accepted by the command router.

Each operation is a pydantic model tagged by its ``operation`` literal; the
`Operation` union validates raw payloads into the matching variant. Wire names
are camelCase (``targetKind``); Python attributes are snake_case.
"""

import json
from collections.abc import Mapping
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class OperationBase(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True, coerce_numbers_to_str=True, extra="forbid"
    )

    target_kind: str = Field(alias="targetKind", min_length=1)


class SetFieldsOperation(OperationBase):
    """Mutate fields of one target; answered with a MutationResponse."""

    operation: Literal["set_fields"] = "set_fields"
    target: str = Field(min_length=1)
    fields: dict[str, str]

    @field_validator("fields", mode="before")
    @classmethod
    def stringify_values(cls, value: Any) -> Any:
        """
        Render JSON field values in the string forms the value parsers accept.

        Booleans become "true"/"false", objects and arrays become JSON text
        (``{"x": 1, "y": 2, "z": 3}`` parses as a vector, ``{"r": ...}`` as a
        color) and numbers their decimal text. Null values are dropped.
        """
        if not isinstance(value, Mapping):
            return value
        return {
            name: _stringify(item) for name, item in value.items() if item is not None
        }


def _stringify(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    if isinstance(value, (int, float)):
        return str(value)
    return value


class GetFieldsOperation(OperationBase):
    """Read current member values of one target, formatted as strings."""

    operation: Literal["get_fields"] = "get_fields"
    target: str = Field(min_length=1)
    names: list[str] = Field(min_length=1)


class ListMembersOperation(OperationBase):
    """List writable members of a target, or of a registered kind."""

    operation: Literal["list_members"] = "list_members"
    target: str | None = None


Operation = Annotated[
    Union[SetFieldsOperation, GetFieldsOperation, ListMembersOperation],
    Field(discriminator="operation"),
]

OPERATION_ADAPTER: TypeAdapter = TypeAdapter(Operation)

OPERATION_NAMES = ["set_fields", "get_fields", "list_members"]


class FieldValuesResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    target_kind: str = Field(alias="targetKind")
    values: dict[str, str] = Field(default_factory=dict)
    errors: dict[str, str] = Field(default_factory=dict)


class MemberInfo(BaseModel):
    name: str
    type: str
    source: str


class MembersResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    target_kind: str = Field(alias="targetKind")
    members: list[MemberInfo] = Field(default_factory=list)
