"""
Operation models and routing for scenemut.
"""

from scenemut.commands.operations import (
    OPERATION_ADAPTER,
    OPERATION_NAMES,
    FieldValuesResponse,
    GetFieldsOperation,
    ListMembersOperation,
    MemberInfo,
    MembersResponse,
    Operation,
    SetFieldsOperation,
)
from scenemut.commands.router import DEFAULT_KINDS, CommandRouter

__all__ = [
    "CommandRouter",
    "DEFAULT_KINDS",
    "OPERATION_ADAPTER",
    "OPERATION_NAMES",
    "Operation",
    "SetFieldsOperation",
    "GetFieldsOperation",
    "ListMembersOperation",
    "FieldValuesResponse",
    "MemberInfo",
    "MembersResponse",
]
