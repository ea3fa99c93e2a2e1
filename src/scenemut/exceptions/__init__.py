"""
Scene mutation exception classes.

This package provides all exception types used throughout scenemut for
consistent error handling and reporting.
"""

from scenemut.exceptions.core import (
    EmptyBatchError,
    EnumParseError,
    ErrorContext,
    ErrorLevel,
    InvalidRequestError,
    MalformedValueError,
    MemberNotFoundError,
    NullTargetError,
    SceneMutError,
    TargetNotFoundError,
    UnknownOperationError,
)

__all__ = [
    "SceneMutError",
    "ErrorContext",
    "ErrorLevel",
    "MalformedValueError",
    "EnumParseError",
    "MemberNotFoundError",
    "TargetNotFoundError",
    "EmptyBatchError",
    "NullTargetError",
    "UnknownOperationError",
    "InvalidRequestError",
]
