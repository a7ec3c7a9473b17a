"""Authentication submodule – login handshake, session state, password hashing."""

from gs308ep.auth.login import login, extract_rand, encode_login_body
from gs308ep.auth.password import md5_hex, challenge_response
from gs308ep.auth.session import AuthState, SwitchSession, is_session_expired

__all__ = [
    "login",
    "extract_rand",
    "encode_login_body",
    "md5_hex",
    "challenge_response",
    "AuthState",
    "SwitchSession",
    "is_session_expired",
]
