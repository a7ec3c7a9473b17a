"""Field extraction from GS308EP pages and response headers."""

from gs308ep.extraction.fields import (
    NOT_FOUND,
    find_quoted_value_after,
    find_named_value,
    find_span_value,
    find_span_float,
    find_last_text_before,
    parse_float,
)
from gs308ep.extraction.cookies import extract_sid
from gs308ep.extraction.poe_status import (
    PortStats,
    find_port_anchor,
    card_bounds,
    extract_port_enabled,
    extract_port_power,
    extract_port_stats,
    extract_all_port_stats,
    total_power,
)

__all__ = [
    "NOT_FOUND",
    "find_quoted_value_after",
    "find_named_value",
    "find_span_value",
    "find_span_float",
    "find_last_text_before",
    "parse_float",
    "extract_sid",
    "PortStats",
    "find_port_anchor",
    "card_bounds",
    "extract_port_enabled",
    "extract_port_power",
    "extract_port_stats",
    "extract_all_port_stats",
    "total_power",
]
