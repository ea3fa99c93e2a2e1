"""
Exception classes for scene property mutation.

This module defines specific exception types for the different error conditions
that can occur while parsing raw values, resolving members and routing
operations. Parsing problems are recovered locally by the type converter;
member problems are reported per field; only target and batch preconditions
abort a whole mutation call.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorLevel(Enum):
    """Error message detail level for end users vs developers."""

    USER = "user"  # Kind tags and member names only
    DEVELOPER = "developer"  # Adds the Python runtime type of the target


@dataclass
class ErrorContext:
    """
    Context information for error messages.

    Captures where a mutation problem occurred in host terms (kind tag, target
    identity, field name, raw value) and in Python terms (runtime type name).

    Params:
        target_kind: Kind tag of the target (e.g., "Transform")
        target_name: Identity used to look the target up in the scene store
        field_name: Requested field name, possibly an alias
        raw_value: The raw string supplied by the caller
        runtime_type: Python class name of the target object
    """

    target_kind: str | None = None
    target_name: str | None = None
    field_name: str | None = None
    raw_value: str | None = None
    runtime_type: str | None = None

    def format_location(self, error_level: ErrorLevel) -> str:
        """
        Format location information based on error level.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            Formatted location string with appropriate detail level
        """
        lines = []

        if self.target_kind:
            if self.target_name:
                lines.append(f"  on {self.target_kind} '{self.target_name}'")
            else:
                lines.append(f"  on {self.target_kind}")

        if self.field_name:
            lines.append(f"  field: {self.field_name}")

        if error_level == ErrorLevel.DEVELOPER and self.runtime_type:
            lines.append(f"  runtime type: {self.runtime_type}")

        if self.raw_value is not None:
            lines.append(f"  value: {self.raw_value!r}")

        return "\n".join(lines)


class SceneMutError(Exception):
    """Base exception for all scene mutation errors."""

    pass


class MalformedValueError(ValueError, SceneMutError):
    """Raised when a raw string cannot be parsed as the requested value type."""

    def __init__(self, raw_value: str, expected: str, reason: str | None = None):
        """
        Initialize the exception.

        Params:
            raw_value: The raw string that failed to parse
            expected: Human-readable name of the expected type
            reason: Optional underlying reason
        """
        self.raw_value = raw_value
        self.expected = expected
        self.reason = reason
        message = f"Cannot parse {raw_value!r} as {expected}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class EnumParseError(MalformedValueError):
    """Raised when a raw string names no member of the target enum."""

    def __init__(self, raw_value: str, enum_name: str, valid_members: list[str]):
        """
        Initialize the exception.

        Params:
            raw_value: The literal invalid input
            enum_name: Name of the enum type being parsed
            valid_members: Member names the caller may use instead
        """
        self.enum_name = enum_name
        self.valid_members = valid_members
        super().__init__(
            raw_value,
            enum_name,
            f"valid values are {', '.join(valid_members)}",
        )


class MemberNotFoundError(SceneMutError):
    """Raised when neither a writable property nor a field matches a name."""

    def __init__(
        self,
        member_name: str,
        container: str,
        available_members: list[str],
        context: ErrorContext | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            member_name: The canonical name that was looked up
            container: Kind tag or type name searched
            available_members: Writable member names on the target type
            context: ErrorContext with target and field information
            error_level: Level of detail to show in error message
        """
        self.member_name = member_name
        self.container = container
        self.available_members = available_members
        self.context = context
        self.error_level = error_level

        primary_error = f"Member '{member_name}' not found on {container}"
        if available_members:
            primary_error += f". Available: {', '.join(available_members)}"

        if context:
            location_info = context.format_location(error_level)
            full_message = f"{primary_error}\n{location_info}"
        else:
            full_message = primary_error

        super().__init__(full_message)


class TargetNotFoundError(SceneMutError):
    """Raised when the scene store cannot resolve a target; aborts the batch."""

    def __init__(self, target_name: str, target_kind: str, reason: str = "not found"):
        """
        Initialize the exception.

        Params:
            target_name: Identity that was requested
            target_kind: Kind tag that was requested
            reason: Why resolution failed
        """
        self.target_name = target_name
        self.target_kind = target_kind
        self.reason = reason
        super().__init__(f"Target '{target_name}' ({target_kind}) {reason}")


class EmptyBatchError(SceneMutError):
    """Raised when a mutation call supplies no fields."""

    def __init__(self, target_kind: str):
        """
        Initialize the exception.

        Params:
            target_kind: Kind tag of the target the empty batch was aimed at
        """
        self.target_kind = target_kind
        super().__init__(f"No fields supplied for {target_kind}")


class NullTargetError(SceneMutError):
    """Raised when a target handle carries no object."""

    def __init__(self, target_kind: str):
        """
        Initialize the exception.

        Params:
            target_kind: Kind tag of the empty handle
        """
        self.target_kind = target_kind
        super().__init__(f"Target handle for {target_kind} holds no object")


class UnknownOperationError(SceneMutError):
    """Raised when the router receives an operation it has no handler for."""

    def __init__(self, operation: str, known_operations: list[str]):
        """
        Initialize the exception.

        Params:
            operation: The operation name or type that was received
            known_operations: Operation names the router handles
        """
        self.operation = operation
        self.known_operations = known_operations
        super().__init__(
            f"Unknown operation '{operation}' (known: {', '.join(known_operations)})"
        )


class InvalidRequestError(SceneMutError):
    """Raised when a raw request payload fails validation."""

    def __init__(self, issues: list[str]):
        """
        Initialize the exception.

        Params:
            issues: Validation issues found in the payload
        """
        self.issues = issues
        super().__init__(f"Invalid request: {'; '.join(issues)}")
