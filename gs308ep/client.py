"""
gs308ep.client
==============
Caller-facing API for one GS308EP switch.

Every public operation returns an :class:`~gs308ep.result.OperationResult`
(success flag, value, error kind, message, last HTTP status) and never
raises for device, network or argument problems.  Nothing here prints.

Example
-------
    from gs308ep import GS308EP

    switch = GS308EP("192.168.1.1", "password")
    if switch.authenticate():
        ok, stats = switch.read_all_port_stats()
"""

from __future__ import annotations

import time

import requests

from .auth.login import login
from .auth.session import SwitchSession
from .config import DEFAULT_CYCLE_DELAY_MS, REQUEST_TIMEOUT
from .exceptions import GS308EPError
from .extraction.fields import NOT_FOUND
from .logging_setup import log
from .network.client import HttpClient
from .poe import command, reader
from .result import OperationResult


class GS308EP:
    """Session-authenticated client for the GS308EP PoE switch."""

    def __init__(
        self,
        host: str,
        password: str,
        timeout: float = REQUEST_TIMEOUT,
        http_session: requests.Session | None = None,
    ) -> None:
        self.host = host
        self._password = password
        self.session = SwitchSession()
        self.http = HttpClient(host, self.session, session=http_session, timeout=timeout)

    @property
    def is_authenticated(self) -> bool:
        return self.session.authenticated

    @property
    def last_status(self) -> int:
        """Last HTTP status code (0 if the last request got no response)."""
        return self.session.last_status

    def _run(self, action: str, func, *args, failure_value=None) -> OperationResult:
        try:
            value = func(*args)
        except GS308EPError as exc:
            log.error("%s failed: %s", action, exc)
            return OperationResult.fail(
                exc.kind,
                str(exc),
                status_code=self.session.last_status,
                value=failure_value,
            )
        return OperationResult.ok(value, status_code=self.session.last_status)

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    def authenticate(self) -> OperationResult:
        """Run the login handshake; value is True on success."""
        result = self._run("Authentication", login, self.http, self.session, self._password)
        result.value = result.success
        return result

    # ------------------------------------------------------------------
    # Port control
    # ------------------------------------------------------------------

    def set_port_enabled(self, port: int, enabled: bool) -> OperationResult:
        return self._run(
            f"Turning {'on' if enabled else 'off'} port {port}",
            command.set_port_enabled, self.http, self.session, port, enabled,
        )

    def turn_on_port(self, port: int) -> OperationResult:
        return self.set_port_enabled(port, True)

    def turn_off_port(self, port: int) -> OperationResult:
        return self.set_port_enabled(port, False)

    def cycle_port(
        self, port: int, delay_ms: int = DEFAULT_CYCLE_DELAY_MS, sleep=time.sleep
    ) -> OperationResult:
        """Power cycle *port*; *sleep* receives the delay in seconds."""
        return self._run(
            f"Power cycling port {port}",
            command.cycle_port, self.http, self.session, port, delay_ms, sleep,
        )

    # ------------------------------------------------------------------
    # Status and telemetry
    # ------------------------------------------------------------------

    def read_port_enabled(self, port: int) -> OperationResult:
        return self._run(
            f"Reading port {port} status",
            reader.read_port_enabled, self.http, self.session, port,
            failure_value=False,
        )

    def read_port_power(self, port: int) -> OperationResult:
        return self._run(
            f"Reading port {port} power",
            reader.read_port_power, self.http, self.session, port,
            failure_value=NOT_FOUND,
        )

    def read_total_power(self) -> OperationResult:
        return self._run(
            "Reading total PoE power",
            reader.read_total_power, self.http, self.session,
            failure_value=NOT_FOUND,
        )

    def read_all_port_stats(self) -> OperationResult:
        return self._run(
            "Reading PoE statistics",
            reader.read_all_port_stats, self.http, self.session,
            failure_value=[],
        )
