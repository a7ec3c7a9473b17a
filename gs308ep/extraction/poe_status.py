"""
gs308ep.extraction.poe_status
=============================
Per-port PoE state from the ``getPoePortStatus.cgi`` page.

Each port card on that page looks roughly like::

    <span class="pull-right poe-power-mode"><span>Delivering Power</span></span>
    <span class="powClassShow">ml003@4@</span>
    <input type="hidden" class="port" value="3">
    <input type="hidden" class="hidPortPwr" id="hidPortPwr" value="1">
    <span class="hid-txt wid-full">ml570</span></div><div><span>53.2</span>
    ...

The literal ``value="<port>"`` is the only per-port key the template
provides, so every lookup is positional relative to it: status and class
render *before* it, the electrical telemetry *after* it.  Lookups stop at
the neighbouring ports' anchors so a field missing from one card is never
read from the next.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from ..config import (
    CLASS_MARKER,
    CLASS_TOKEN_PREFIX,
    CURRENT_MARKER,
    DELIVERING_POWER,
    FAULT_MARKER,
    MAX_PORTS,
    PORT_TAGS,
    POWER_FLAG_MARKER,
    POWER_FLAG_WINDOW,
    POWER_MARKER,
    STATUS_LOOKBEHIND,
    STATUS_MARKER,
    TELEMETRY_WINDOW,
    TEMPERATURE_MARKER,
    UNKNOWN,
    VOLTAGE_MARKER,
)
from ..logging_setup import log
from .fields import (
    NOT_FOUND,
    find_last_text_before,
    find_quoted_value_after,
    find_span_float,
    find_span_value,
)


@dataclass
class PortStats:
    """Snapshot of one PoE port; the defaults are the "unknown" state."""

    port: int
    enabled: bool = False
    status: str = UNKNOWN
    voltage: float = 0.0        # V
    current: float = 0.0        # mA
    power: float = 0.0          # W
    temperature: float = 0.0    # °C
    fault: str = UNKNOWN
    power_class: str = UNKNOWN

    def to_dict(self) -> dict:
        return asdict(self)


def _port_markers():
    return [f"{tag}value=" for tag in PORT_TAGS]


def find_port_anchor(page: str, port: int) -> int:
    """
    Offset of the port's ``value="<port>"`` marker, or -1.

    The marker is looked up as part of the ``class="port"`` input first.  A
    bare ``value="<port>"`` is accepted only on pages without any tagged port
    input, because other inputs (``hidPortPwr`` among them) carry the same
    digits as values.
    """
    for tag in PORT_TAGS:
        for quote in ('"', "'"):
            pos = page.find(f"{tag}value={quote}{port}{quote}")
            if pos != -1:
                return pos + len(tag)

    if any(marker in page for marker in _port_markers()):
        return -1
    pos = page.find(f'value="{port}"')
    if pos == -1:
        pos = page.find(f"value='{port}'")
    return pos


def card_bounds(page: str, anchor: int) -> tuple[int, int]:
    """
    ``(start, end)`` of the port card around *anchor*.

    The card runs from just after the previous port's anchor to the start of
    the next one (malformed anchors included), or to the page edges.
    """
    start, end = 0, len(page)
    for marker in _port_markers():
        prev = page.rfind(marker, 0, anchor)
        if prev != -1:
            start = max(start, prev + len(marker))
        nxt = page.find(marker, anchor)
        if nxt != -1:
            end = min(end, nxt)
    return start, end


def parse_power_class(text: str) -> str | None:
    """``ml003@4@`` -> ``Class 4``; other text passes through unchanged."""
    if not text.startswith(CLASS_TOKEN_PREFIX):
        return text
    start = len(CLASS_TOKEN_PREFIX)
    end = text.find("@", start)
    if end <= start:
        return None
    return f"Class {text[start:end]}"


def extract_port_enabled(page: str, port: int) -> bool | None:
    """
    Whether the port's ``hidPortPwr`` flag reads ``"1"``.

    Returns None if the port anchor is missing; a missing flag reads as
    disabled.
    """
    anchor = find_port_anchor(page, port)
    if anchor == -1:
        return None
    _, end = card_bounds(page, anchor)
    window = min(POWER_FLAG_WINDOW, end - anchor)
    flag = find_quoted_value_after(page, POWER_FLAG_MARKER, anchor, window)
    return flag == "1"


def extract_port_power(page: str, port: int) -> float:
    """Delivered power in watts, or :data:`NOT_FOUND` (-1.0)."""
    anchor = find_port_anchor(page, port)
    if anchor == -1:
        return NOT_FOUND
    _, end = card_bounds(page, anchor)
    return find_span_float(page, POWER_MARKER, anchor, min(TELEMETRY_WINDOW, end - anchor))


def extract_port_stats(page: str, port: int) -> PortStats | None:
    """
    Full :class:`PortStats` for *port*.

    Returns None only when the port's anchor is absent.  Any individual field
    that cannot be found or parsed keeps its default; nothing is read from a
    neighbouring port's card.
    """
    anchor = find_port_anchor(page, port)
    if anchor == -1:
        return None

    stats = PortStats(port=port)
    start, end = card_bounds(page, anchor)
    lookbehind = min(STATUS_LOOKBEHIND, anchor - start)
    window = min(TELEMETRY_WINDOW, end - anchor)

    status = find_last_text_before(page, STATUS_MARKER, anchor, lookbehind, "<span>")
    if status is not None:
        stats.status = status
        stats.enabled = status == DELIVERING_POWER

    class_text = find_last_text_before(page, CLASS_MARKER, anchor, lookbehind, ">")
    if class_text is not None:
        power_class = parse_power_class(class_text)
        if power_class:
            stats.power_class = power_class

    for attr, marker in (
        ("voltage", VOLTAGE_MARKER),
        ("current", CURRENT_MARKER),
        ("power", POWER_MARKER),
        ("temperature", TEMPERATURE_MARKER),
    ):
        value = find_span_float(page, marker, anchor, window)
        if value >= 0:
            setattr(stats, attr, value)

    fault = find_span_value(page, FAULT_MARKER, anchor, window)
    if fault:
        stats.fault = fault

    return stats


def extract_all_port_stats(page: str) -> list[PortStats]:
    """Stats for ports 1..8; unparseable ports are reported with defaults."""
    result = []
    for port in range(1, MAX_PORTS + 1):
        stats = extract_port_stats(page, port)
        if stats is None:
            log.warning("Port %d not found on PoE status page", port)
            stats = PortStats(port=port)
        result.append(stats)
    return result


def total_power(page: str) -> float:
    """Sum of every port's power that could be parsed."""
    total = 0.0
    for port in range(1, MAX_PORTS + 1):
        power = extract_port_power(page, port)
        if power >= 0:
            total += power
    return total
