"""
HTTP transport for switch communication.

Provides the ``requests`` session setup and a thin GET/POST client that
threads the explicit :class:`~gs308ep.auth.session.SwitchSession` cookie
through every request.
"""

from __future__ import annotations

import http.cookiejar
from collections.abc import Mapping
from dataclasses import dataclass

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import REQUEST_TIMEOUT
from ..exceptions import TransportError
from ..extraction.cookies import extract_sid
from ..logging_setup import log


def build_session() -> requests.Session:
    """
    Return a requests.Session for talking to the switch.

    * No automatic retries: a timeout or refused connection surfaces on the
      first attempt, callers layer their own retry policy.
    * The cookie jar is disabled; the SID is sent explicitly from the
      client's :class:`SwitchSession`.
    """
    session = requests.Session()
    adapter = HTTPAdapter(max_retries=Retry(total=0, raise_on_status=False))
    session.mount("http://", adapter)
    session.cookies.set_policy(http.cookiejar.DefaultCookiePolicy(allowed_domains=[]))
    session.headers.update({
        "User-Agent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/120.0.0.0 Safari/537.36"
        ),
        "Connection": "keep-alive",
    })
    return session


def base_url(host: str) -> str:
    """
    Build the base URL for the switch.

    Args:
        host: Switch IP address or hostname

    Returns:
        Base URL string (e.g., 'http://192.168.1.1')
    """
    return f"http://{host}"


def header_text(resp: requests.Response) -> str:
    """
    Raw ``Name: value`` header lines of *resp* and any redirects before it.

    The final response comes first, then the redirects newest to oldest, so
    the first ``SID=`` in the text is the most recently issued one.
    Repeated headers (several ``Set-Cookie`` lines) stay separate lines when
    the underlying urllib3 response is available.
    """
    lines = []
    for r in [resp, *reversed(resp.history or [])]:
        raw_headers = getattr(r.raw, "headers", None)
        headers = raw_headers if isinstance(raw_headers, Mapping) else r.headers
        lines.extend(f"{name}: {value}" for name, value in headers.items())
    return "\r\n".join(lines)


@dataclass
class HttpResponse:
    status: int
    body: str
    headers: str = ""


class HttpClient:
    """Blocking GET/POST against one switch, carrying the session cookie."""

    def __init__(
        self,
        host: str,
        state,
        session: requests.Session | None = None,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        self.base = base_url(host)
        self.state = state
        self.session = session if session is not None else build_session()
        self.timeout = timeout

    def get(self, path: str) -> HttpResponse:
        return self._request("GET", path)

    def post(self, path: str, form_body: str) -> HttpResponse:
        return self._request(
            "POST",
            path,
            data=form_body,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )

    def _request(self, method: str, path: str, data: str | None = None,
                 headers: dict | None = None) -> HttpResponse:
        url = self.base + path
        request_headers = dict(headers or {})
        request_headers.update(self.state.cookie_header())
        log.debug("%s %s", method, url)

        try:
            resp = self.session.request(
                method,
                url,
                data=data,
                headers=request_headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            self.state.last_status = 0
            log.error("HTTP %s %s failed: %s", method, path, exc)
            raise TransportError(f"HTTP {method} {path} failed: {exc}") from exc

        self.state.last_status = resp.status_code
        raw_headers = header_text(resp)
        self.state.update_cookie(extract_sid(raw_headers))
        log.debug("%s %s -> HTTP %s, %d bytes", method, path, resp.status_code, len(resp.text))
        return HttpResponse(resp.status_code, resp.text, raw_headers)
