"""
Port mutations through ``PoEPortConfig.cgi``.

Every mutation re-reads the config page for its ``hash`` anti-forgery token;
the switch may rotate it between commands, so it is never cached.
"""

import time
import urllib.parse

from ..config import HASH_FIELD, POE_CONFIG_URL, POE_FORM_DEFAULTS, SUCCESS_MARKER
from ..exceptions import ParseError, UnexpectedStatusError
from ..extraction.fields import find_named_value
from ..logging_setup import log
from .ports import validate_port
from .reader import fetch_admin_page


def extract_client_hash(html: str) -> str | None:
    """Anti-forgery ``hash`` token from the config page; empty counts as absent."""
    return find_named_value(html, HASH_FIELD) or None


def build_port_form(port: int, enabled: bool, token: str) -> str:
    """Form body for one port; *port* is 1-based, the device wants 0-based."""
    fields = [
        ("ACTION", "Apply"),
        ("portID", str(port - 1)),
        ("ADMIN_MODE", "1" if enabled else "0"),
        *POE_FORM_DEFAULTS,
        ("hash", token),
    ]
    return urllib.parse.urlencode(fields)


def set_port_enabled(http, session, port: int, enabled: bool) -> None:
    """
    Switch PoE output of *port* on or off.

    Success is HTTP 200 on the POST.  Some firmware also echoes ``SUCCESS``
    in the body; that is logged but never required.
    """
    validate_port(port)
    page = fetch_admin_page(http, session, POE_CONFIG_URL)

    token = extract_client_hash(page)
    if token is None:
        raise ParseError("Failed to extract client hash from PoE config page")

    resp = http.post(POE_CONFIG_URL, build_port_form(port, enabled, token))
    if resp.status != 200:
        raise UnexpectedStatusError(
            resp.status, f"Port {port} update rejected (HTTP {resp.status})"
        )
    if SUCCESS_MARKER in resp.body:
        log.debug("Switch confirmed port %d update with %s", port, SUCCESS_MARKER)
    log.info("Port %d turned %s", port, "ON" if enabled else "OFF")


def cycle_port(http, session, port: int, delay_ms: int, sleep=time.sleep) -> None:
    """Turn *port* off, wait *delay_ms*, turn it back on.

    The re-enable is not attempted when the disable fails.
    """
    validate_port(port)
    set_port_enabled(http, session, port, False)
    log.info("Port %d turned OFF, waiting %dms...", port, delay_ms)
    sleep(delay_ms / 1000.0)
    set_port_enabled(http, session, port, True)
