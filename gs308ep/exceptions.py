"""Exceptions raised by the GS308EP client components.

The HTML extractors never raise; they report "not found" as ``None`` (or the
``-1.0`` numeric sentinel).  The components built on top of them decide
whether a missing field invalidates the operation and raise one of the
errors below.  :class:`gs308ep.client.GS308EP` turns them into
:class:`gs308ep.result.OperationResult` values.
"""

from __future__ import annotations

from .result import ErrorKind


class GS308EPError(Exception):
    """Base class for all client errors."""

    kind = ErrorKind.NONE


class TransportError(GS308EPError):
    """Connection refused, timeout or any other network failure (no status)."""

    kind = ErrorKind.TRANSPORT_ERROR


class UnexpectedStatusError(GS308EPError):
    """The switch answered with something other than HTTP 200."""

    kind = ErrorKind.UNEXPECTED_STATUS

    def __init__(self, status_code: int, message: str | None = None):
        super().__init__(message or f"Unexpected HTTP status {status_code}")
        self.status_code = status_code


class ParseError(GS308EPError):
    """An expected field was absent from a device page."""

    kind = ErrorKind.PARSE_FAILURE


class InvalidPortError(GS308EPError, ValueError):
    """Port index outside 1..8."""

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, port):
        super().__init__(f"Invalid port number {port!r} (expected 1-8)")
        self.port = port


class AuthenticationRequiredError(GS308EPError):
    """A port operation was attempted without a live session."""

    kind = ErrorKind.AUTHENTICATION_REQUIRED


class AuthenticationRejectedError(GS308EPError):
    """The login POST did not yield HTTP 200 plus a session cookie."""

    kind = ErrorKind.AUTHENTICATION_REJECTED
