"""Result type returned by every :class:`gs308ep.client.GS308EP` operation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Classification of a failed operation."""

    NONE = "none"
    TRANSPORT_ERROR = "transport_error"
    UNEXPECTED_STATUS = "unexpected_status"
    PARSE_FAILURE = "parse_failure"
    INVALID_ARGUMENT = "invalid_argument"
    AUTHENTICATION_REQUIRED = "authentication_required"
    AUTHENTICATION_REJECTED = "authentication_rejected"


@dataclass
class OperationResult:
    """Success flag plus the operation's data and captured diagnostics.

    Attributes:
        success: Whether the operation succeeded
        value: Operation data (bool, float, list of PortStats, ...); may be a
            sentinel on failure, e.g. ``-1.0`` for an unreadable power value
        error_kind: Classification of the failure (NONE if success=True)
        message: Human-readable failure description
        status_code: Last HTTP status seen (0 when no response was received)

    Unpacks as ``success, value = client.read_port_power(3)``.
    """

    success: bool
    value: Any = None
    error_kind: ErrorKind = ErrorKind.NONE
    message: str | None = None
    status_code: int = 0

    def __iter__(self):
        return iter((self.success, self.value))

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def ok(cls, value: Any = None, status_code: int = 0) -> OperationResult:
        return cls(success=True, value=value, status_code=status_code)

    @classmethod
    def fail(
        cls,
        error_kind: ErrorKind,
        message: str | None = None,
        status_code: int = 0,
        value: Any = None,
    ) -> OperationResult:
        return cls(
            success=False,
            value=value,
            error_kind=error_kind,
            message=message,
            status_code=status_code,
        )
