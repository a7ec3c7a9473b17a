"""
Tests for the authentication module: login handshake, session state and
session-expiry detection.
"""

import unittest

import requests

from gs308ep.auth.login import encode_login_body, extract_rand, login
from gs308ep.auth.password import md5_hex
from gs308ep.auth.session import AuthState, SwitchSession, is_session_expired
from gs308ep.exceptions import (
    AuthenticationRejectedError,
    AuthenticationRequiredError,
    TransportError,
    UnexpectedStatusError,
)
from gs308ep.network.client import HttpClient

from tests.pages import (
    CONFIG_PAGE,
    HOST,
    LOGIN_PAGE,
    LOGIN_PAGE_NO_RAND,
    make_response,
    mock_http_session,
    requested,
    sent_data,
    sent_headers,
    sid_cookie,
    status_page,
)


def _client(routes):
    http_session = mock_http_session(routes)
    state = SwitchSession()
    return HttpClient(HOST, state, session=http_session), state, http_session


class TestExtractRand(unittest.TestCase):
    def test_found(self):
        self.assertEqual(extract_rand(LOGIN_PAGE.format(rand="1735414426")), "1735414426")

    def test_missing(self):
        self.assertIsNone(extract_rand(LOGIN_PAGE_NO_RAND))

    def test_empty_counts_as_missing(self):
        self.assertIsNone(extract_rand(LOGIN_PAGE.format(rand="")))


class TestEncodeLoginBody(unittest.TestCase):
    def test_hex_digest(self):
        self.assertEqual(
            encode_login_body("d41d8cd98f00b204e9800998ecf8427e"),
            "password=d41d8cd98f00b204e9800998ecf8427e",
        )


class TestLogin(unittest.TestCase):
    def test_success_posts_salted_hash(self):
        http, state, http_session = _client({
            ("GET", "/login.cgi"): [make_response(200, LOGIN_PAGE.format(rand="42"))],
            ("POST", "/login.cgi"): [make_response(200, "", sid_cookie("s1"))],
        })

        login(http, state, "admin")

        self.assertTrue(state.authenticated)
        self.assertEqual(state.cookie, "s1")
        self.assertIs(state.state, AuthState.AUTHENTICATED)
        self.assertEqual(requested(http_session), [("GET", "/login.cgi"), ("POST", "/login.cgi")])
        self.assertEqual(sent_data(http_session, 1), f"password={md5_hex('admin42')}")
        self.assertEqual(
            sent_headers(http_session, 1)["Content-Type"],
            "application/x-www-form-urlencoded",
        )

    def test_missing_nonce_uses_plain_md5(self):
        http, state, http_session = _client({
            ("GET", "/login.cgi"): [make_response(200, LOGIN_PAGE_NO_RAND)],
            ("POST", "/login.cgi"): [make_response(200, "", sid_cookie("s1"))],
        })

        login(http, state, "admin")

        self.assertTrue(state.authenticated)
        self.assertEqual(sent_data(http_session, 1), f"password={md5_hex('admin')}")

    def test_cookie_set_on_login_page_counts(self):
        http, state, _ = _client({
            ("GET", "/login.cgi"): [make_response(200, LOGIN_PAGE.format(rand="7"), sid_cookie("early"))],
            ("POST", "/login.cgi"): [make_response(200, "")],
        })

        login(http, state, "admin")

        self.assertTrue(state.authenticated)
        self.assertEqual(state.cookie, "early")

    def test_stale_cookie_is_dropped(self):
        http, state, http_session = _client({
            ("GET", "/login.cgi"): [make_response(200, LOGIN_PAGE.format(rand="7"))],
            ("POST", "/login.cgi"): [make_response(200, "Wrong password")],
        })
        state.cookie = "old"
        state.state = AuthState.AUTHENTICATED

        with self.assertRaises(AuthenticationRejectedError):
            login(http, state, "admin")

        self.assertFalse(state.authenticated)
        self.assertEqual(state.cookie, "")
        self.assertNotIn("Cookie", sent_headers(http_session, 0))

    def test_login_page_transport_error_skips_post(self):
        http, state, http_session = _client({
            ("GET", "/login.cgi"): [requests.ConnectionError("unreachable")],
            ("POST", "/login.cgi"): [make_response(200, "", sid_cookie("s1"))],
        })

        with self.assertRaises(TransportError):
            login(http, state, "admin")

        self.assertEqual(requested(http_session), [("GET", "/login.cgi")])
        self.assertIs(state.state, AuthState.FAILED)
        self.assertEqual(state.last_status, 0)

    def test_login_page_bad_status(self):
        http, state, http_session = _client({
            ("GET", "/login.cgi"): [make_response(500, "error")],
            ("POST", "/login.cgi"): [make_response(200, "", sid_cookie("s1"))],
        })

        with self.assertRaises(UnexpectedStatusError) as ctx:
            login(http, state, "admin")

        self.assertEqual(ctx.exception.status_code, 500)
        self.assertEqual(requested(http_session), [("GET", "/login.cgi")])
        self.assertFalse(state.authenticated)

    def test_rejected_without_cookie(self):
        http, state, _ = _client({
            ("GET", "/login.cgi"): [make_response(200, LOGIN_PAGE.format(rand="42"))],
            ("POST", "/login.cgi"): [make_response(200, LOGIN_PAGE.format(rand="43"))],
        })

        with self.assertRaises(AuthenticationRejectedError):
            login(http, state, "wrong")

        self.assertIs(state.state, AuthState.FAILED)
        self.assertEqual(state.last_status, 200)
        self.assertFalse(state.authenticated)

    def test_rejected_on_bad_status(self):
        http, state, _ = _client({
            ("GET", "/login.cgi"): [make_response(200, LOGIN_PAGE.format(rand="42"))],
            ("POST", "/login.cgi"): [make_response(401, "", sid_cookie("s1"))],
        })

        with self.assertRaises(AuthenticationRejectedError):
            login(http, state, "admin")

        self.assertEqual(state.last_status, 401)
        self.assertFalse(state.authenticated)

    def test_post_transport_error_is_rejection(self):
        http, state, _ = _client({
            ("GET", "/login.cgi"): [make_response(200, LOGIN_PAGE.format(rand="42"))],
            ("POST", "/login.cgi"): [requests.Timeout("timed out")],
        })

        with self.assertRaises(AuthenticationRejectedError):
            login(http, state, "admin")

        self.assertEqual(state.last_status, 0)
        self.assertIs(state.state, AuthState.FAILED)


class TestSwitchSession(unittest.TestCase):
    def test_defaults(self):
        state = SwitchSession()
        self.assertFalse(state.authenticated)
        self.assertEqual(state.cookie_header(), {})
        self.assertEqual(state.last_status, 0)

    def test_cookie_header(self):
        state = SwitchSession(cookie="abc")
        self.assertEqual(state.cookie_header(), {"Cookie": "SID=abc"})

    def test_authenticated_needs_cookie(self):
        state = SwitchSession(state=AuthState.AUTHENTICATED)
        self.assertFalse(state.authenticated)
        state.update_cookie("abc")
        self.assertTrue(state.authenticated)

    def test_update_cookie_ignores_none(self):
        state = SwitchSession(cookie="abc")
        state.update_cookie(None)
        self.assertEqual(state.cookie, "abc")

    def test_expire(self):
        state = SwitchSession(cookie="abc", state=AuthState.AUTHENTICATED)
        state.expire()
        self.assertFalse(state.authenticated)
        self.assertEqual(state.cookie, "")
        with self.assertRaises(AuthenticationRequiredError):
            state.require_authenticated()


class TestSessionExpiry(unittest.TestCase):
    def test_login_page_is_expired(self):
        self.assertTrue(is_session_expired(LOGIN_PAGE.format(rand="42")))

    def test_login_page_without_rand_is_expired(self):
        self.assertTrue(is_session_expired(LOGIN_PAGE_NO_RAND))

    def test_rand_input_alone_is_expired(self):
        self.assertTrue(is_session_expired("<form><input type=hidden name='rand' value='1'></form>"))

    def test_status_page_is_not_expired(self):
        self.assertFalse(is_session_expired(status_page()))

    def test_config_page_is_not_expired(self):
        self.assertFalse(is_session_expired(CONFIG_PAGE.format(token="abc")))

    def test_empty_body(self):
        self.assertFalse(is_session_expired(""))


if __name__ == "__main__":
    unittest.main()
