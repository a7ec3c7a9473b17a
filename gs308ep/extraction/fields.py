"""
gs308ep.extraction.fields
=========================
Positional field extraction from the switch's hand-templated HTML.

The GS308EP firmware emits markup that no two pages quote the same way
(``value='x'`` next to ``value="x"``, attributes in any order, stray
whitespace), so fields are recovered with three small combinators instead of
a DOM walk:

* anchor search      – locate a literal marker at or after an offset
* bounded window     – ignore anything further than N bytes from the anchor
* delimiter match    – take the text between a pair of quotes or span tags

Every helper returns ``None`` (or :data:`NOT_FOUND` for numbers) when the
field cannot be recovered.  None of them raise.
"""

from __future__ import annotations

NOT_FOUND = -1.0

_SPAN_OPEN = "<span>"
_SPAN_CLOSE = "</span>"
_QUOTES = ('"', "'")


def _limit(document: str, start: int, window: "int | None") -> str:
    if window is None:
        return document
    return document[: max(start, 0) + window]


def find_quoted_value_after(
    document: str, anchor: str, start: int = 0, window: "int | None" = None
) -> str | None:
    """
    Return the quoted ``value`` attribute that follows *anchor*.

    Finds the first *anchor* at or after *start*, then the literal token
    ``value`` after it, then whichever of ``"`` or ``'`` comes first.  That
    quote character (and only that one) closes the value.  An empty quoted
    value is returned as ``""``.

    With *window*, the anchor, the token and both quotes must all lie before
    ``start + window``.
    """
    text = _limit(document, start, window)
    pos = text.find(anchor, max(start, 0))
    if pos == -1:
        return None

    value_pos = text.find("value", pos + len(anchor))
    if value_pos == -1:
        return None
    value_pos += len("value")

    openings = [(text.find(q, value_pos), q) for q in _QUOTES]
    openings = [(idx, q) for idx, q in openings if idx != -1]
    if not openings:
        return None
    open_pos, quote = min(openings)

    close_pos = text.find(quote, open_pos + 1)
    if close_pos == -1:
        return None
    return text[open_pos + 1:close_pos]


def find_named_value(document: str, name: str, start: int = 0) -> str | None:
    """
    Value of the input whose ``name`` attribute is *name*.

    Both ``name="x"`` and ``name='x'`` spellings are tried, in that order.
    """
    for quote in _QUOTES:
        value = find_quoted_value_after(
            document, f"name={quote}{name}{quote}", start
        )
        if value is not None:
            return value
    return None


def find_span_value(
    document: str, marker: str, start: int, window: int
) -> str | None:
    """
    Trimmed text of the first ``<span>…</span>`` after *marker*.

    *marker* must occur between *start* and ``start + window``; this keeps a
    lookup for one switch port from landing on the next port's card.
    """
    pos = document.find(marker, max(start, 0))
    if pos == -1 or pos > start + window:
        return None

    span_start = document.find(_SPAN_OPEN, pos + len(marker))
    if span_start == -1:
        return None
    span_start += len(_SPAN_OPEN)

    span_end = document.find(_SPAN_CLOSE, span_start)
    if span_end == -1:
        return None
    return document[span_start:span_end].strip()


def parse_float(text: "str | None") -> float:
    """``float(text)`` or :data:`NOT_FOUND` for missing / malformed text."""
    if text is None:
        return NOT_FOUND
    try:
        return float(text)
    except ValueError:
        return NOT_FOUND


def find_span_float(document: str, marker: str, start: int, window: int) -> float:
    """Numeric variant of :func:`find_span_value`."""
    return parse_float(find_span_value(document, marker, start, window))


def find_last_text_before(
    document: str, marker: str, end: int, lookbehind: int, opener: str = _SPAN_OPEN
) -> str | None:
    """
    Text after the *last* *marker* in the *lookbehind* bytes before *end*.

    The text runs from the first *opener* after that marker (``"<span>"`` for
    a nested span, ``">"`` for the marker's own tag) to the next
    ``</span>``; both must lie inside the searched area.  Taking the last
    occurrence picks the field nearest to the anchor when several ports'
    fields fall inside the window.
    """
    area = document[max(0, end - lookbehind):end]
    pos = area.rfind(marker)
    if pos == -1:
        return None

    text_start = area.find(opener, pos + len(marker))
    if text_start == -1:
        return None
    text_start += len(opener)

    text_end = area.find(_SPAN_CLOSE, text_start)
    if text_end == -1:
        return None
    return area[text_start:text_end].strip()
