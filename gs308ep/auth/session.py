"""
Session state and session-expiry detection.

The switch serves a single server-side session identified by the ``SID``
cookie.  :class:`SwitchSession` is the one place that cookie lives; the HTTP
client reads it for every request and writes it back whenever a response
rotates it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from bs4 import BeautifulSoup

from ..config import RAND_FIELD
from ..exceptions import AuthenticationRequiredError
from ..logging_setup import log


class AuthState(Enum):
    """Login handshake progress."""

    UNAUTHENTICATED = "unauthenticated"
    NONCE_FETCHED = "nonce_fetched"
    CREDENTIALS_SUBMITTED = "credentials_submitted"
    AUTHENTICATED = "authenticated"
    FAILED = "failed"


@dataclass
class SwitchSession:
    """Cookie, handshake state and last HTTP status of one client."""

    cookie: str = ""
    state: AuthState = AuthState.UNAUTHENTICATED
    last_status: int = 0
    last_error: str = ""

    @property
    def authenticated(self) -> bool:
        return self.state is AuthState.AUTHENTICATED and bool(self.cookie)

    def cookie_header(self) -> dict:
        """``Cookie`` request header for the current SID (empty when none)."""
        if not self.cookie:
            return {}
        return {"Cookie": f"SID={self.cookie}"}

    def update_cookie(self, sid: str | None) -> None:
        if sid and sid != self.cookie:
            log.debug("Session cookie %s", "rotated" if self.cookie else "captured")
            self.cookie = sid

    def reset(self) -> None:
        self.cookie = ""
        self.state = AuthState.UNAUTHENTICATED
        self.last_error = ""

    def fail(self, reason: str) -> None:
        self.state = AuthState.FAILED
        self.last_error = reason

    def expire(self) -> None:
        """Forget a session the switch no longer honours."""
        self.cookie = ""
        self.state = AuthState.UNAUTHENTICATED
        self.last_error = "session expired"

    def require_authenticated(self) -> None:
        if not self.authenticated:
            raise AuthenticationRequiredError("Not authenticated")


def is_session_expired(body: str) -> bool:
    """
    Return True when an admin page came back as the login form.

    The switch answers any request with a stale or missing SID with the
    login page instead of an error status, so the body is the only signal.
    The login form is the only page carrying a password input or the
    ``rand`` challenge input.
    """
    if not body or "<input" not in body.lower():
        return False
    soup = BeautifulSoup(body, "lxml")
    if soup.find("input", attrs={"type": "password"}) is not None:
        return True
    return soup.find("input", attrs={"name": RAND_FIELD}) is not None
