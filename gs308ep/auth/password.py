"""Password challenge transform expected by the GS308EP login form."""

import hashlib


def md5_hex(text: str) -> str:
    """Lowercase hex MD5 over the UTF-8 bytes of *text* (32 characters)."""
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def challenge_response(password: str, nonce: "str | None" = None) -> str:
    """
    Replicate the login page's ``merge_hash``: MD5 of the password with the
    server-issued ``rand`` nonce appended.

    Older firmware omits the ``rand`` input from the login page; the form
    then posts the MD5 of the bare password, so an empty or missing *nonce*
    degrades to ``md5_hex(password)``.
    """
    if not nonce:
        return md5_hex(password)
    return md5_hex(password + nonce)
