"""PoE port reading and control."""

from gs308ep.poe.ports import is_valid_port, validate_port
from gs308ep.poe.reader import (
    fetch_status_page,
    read_port_enabled,
    read_port_power,
    read_total_power,
    read_all_port_stats,
)
from gs308ep.poe.command import build_port_form, set_port_enabled, cycle_port

__all__ = [
    "is_valid_port",
    "validate_port",
    "fetch_status_page",
    "read_port_enabled",
    "read_port_power",
    "read_total_power",
    "read_all_port_stats",
    "build_port_form",
    "set_port_enabled",
    "cycle_port",
]
