"""Session cookie extraction from raw response header text."""

from ..config import SID_MARKER


def extract_sid(header_text: str) -> str | None:
    """
    Return the ``SID`` session token found in *header_text*.

    The value starts right after the literal ``SID=`` and runs to the first
    ``;``, CR or LF (or the end of the text).  An empty value is treated as
    no cookie at all, since the switch never authenticates an empty SID.
    """
    pos = header_text.find(SID_MARKER)
    if pos == -1:
        return None
    pos += len(SID_MARKER)

    end = len(header_text)
    for terminator in (";", "\r", "\n"):
        idx = header_text.find(terminator, pos)
        if idx != -1:
            end = min(end, idx)

    sid = header_text[pos:end].strip()
    return sid or None
