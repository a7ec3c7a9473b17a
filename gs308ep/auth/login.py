"""
Login handshake for the GS308EP admin interface.

    GET  /login.cgi    -> login form with hidden ``rand`` nonce
    POST /login.cgi    password=md5(password + rand)
                       -> Set-Cookie: SID=<token>

State moves UNAUTHENTICATED -> NONCE_FETCHED -> CREDENTIALS_SUBMITTED ->
AUTHENTICATED, or to FAILED from any step.
"""

import urllib.parse

from ..config import LOGIN_URL, RAND_FIELD
from ..exceptions import (
    AuthenticationRejectedError,
    TransportError,
    UnexpectedStatusError,
)
from ..extraction.fields import find_named_value
from ..logging_setup import log
from .password import challenge_response
from .session import AuthState

PAGE_FETCH_ERROR = "page fetch error"
AUTH_REJECTED = "authentication rejected"


def extract_rand(html: str) -> str | None:
    """``rand`` challenge nonce from the login page, None when absent."""
    return find_named_value(html, RAND_FIELD) or None


def encode_login_body(response: str) -> str:
    return urllib.parse.urlencode({"password": response})


def login(http, session, password: str) -> None:
    """
    Authenticate against the switch and leave *session* AUTHENTICATED.

    Any cookie from an earlier login is dropped first, so only a SID issued
    during this handshake (on the GET or the POST) counts.

    Raises TransportError or UnexpectedStatusError if the login page cannot
    be fetched, and AuthenticationRejectedError when the POST does not come
    back as HTTP 200 with a session cookie.
    """
    session.reset()

    try:
        page = http.get(LOGIN_URL)
    except TransportError:
        session.fail(PAGE_FETCH_ERROR)
        raise
    if page.status != 200:
        session.fail(PAGE_FETCH_ERROR)
        raise UnexpectedStatusError(page.status, f"Login {PAGE_FETCH_ERROR} (HTTP {page.status})")

    nonce = extract_rand(page.body)
    if nonce:
        log.debug("Rand token: %s", nonce)
    else:
        log.warning("No rand token on the login page; using plain MD5 (older firmware)")
    session.state = AuthState.NONCE_FETCHED

    digest = challenge_response(password, nonce)
    log.debug("Password hash: %s", digest)

    try:
        resp = http.post(LOGIN_URL, encode_login_body(digest))
    except TransportError as exc:
        session.fail(AUTH_REJECTED)
        raise AuthenticationRejectedError(f"Authentication rejected: {exc}") from exc
    session.state = AuthState.CREDENTIALS_SUBMITTED

    if resp.status != 200 or not session.cookie:
        session.fail(AUTH_REJECTED)
        raise AuthenticationRejectedError(
            f"Authentication rejected (HTTP {resp.status}, "
            f"{'cookie' if session.cookie else 'no cookie'})"
        )

    session.state = AuthState.AUTHENTICATED
    log.debug("Session ID: %s", session.cookie)
    log.info("Authenticated (HTTP %s)", resp.status)
