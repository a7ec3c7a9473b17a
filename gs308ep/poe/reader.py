"""Fetch the PoE status page and read port state out of it."""

from ..auth.session import is_session_expired
from ..config import POE_STATUS_URL
from ..exceptions import AuthenticationRequiredError, ParseError, UnexpectedStatusError
from ..extraction.fields import NOT_FOUND
from ..extraction.poe_status import (
    PortStats,
    extract_all_port_stats,
    extract_port_enabled,
    extract_port_power,
    total_power,
)
from ..logging_setup import log
from .ports import validate_port


def fetch_admin_page(http, session, path: str) -> str:
    """
    GET an authenticated admin page and return its body.

    Fails with UnexpectedStatusError on anything but HTTP 200, and with
    AuthenticationRequiredError (dropping the session) when the switch
    answered with its login form.
    """
    session.require_authenticated()
    resp = http.get(path)
    if resp.status != 200:
        raise UnexpectedStatusError(resp.status, f"Failed to fetch {path} (HTTP {resp.status})")
    if is_session_expired(resp.body):
        session.expire()
        raise AuthenticationRequiredError(f"Session expired while fetching {path}")
    return resp.body


def fetch_status_page(http, session) -> str:
    return fetch_admin_page(http, session, POE_STATUS_URL)


def read_port_enabled(http, session, port: int) -> bool:
    validate_port(port)
    page = fetch_status_page(http, session)
    enabled = extract_port_enabled(page, port)
    if enabled is None:
        raise ParseError(f"Port {port} not found on PoE status page")
    return enabled


def read_port_power(http, session, port: int) -> float:
    validate_port(port)
    page = fetch_status_page(http, session)
    power = extract_port_power(page, port)
    if power == NOT_FOUND:
        raise ParseError(f"Power reading not found for port {port}")
    return power


def read_total_power(http, session) -> float:
    total = total_power(fetch_status_page(http, session))
    log.debug("Total PoE power: %.1f W", total)
    return total


def read_all_port_stats(http, session) -> list[PortStats]:
    return extract_all_port_stats(fetch_status_page(http, session))
