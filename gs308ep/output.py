"""
JSON and plain-text rendering of client results for the CLI.

Functions return strings; printing is left to the caller.
"""

import json

from .config import POE_BUDGET_W


def _dumps(obj) -> str:
    return json.dumps(obj, separators=(",", ":"))


def format_action(port: int, action: str, success: bool, json_output: bool,
                  delay_ms: "int | None" = None) -> str:
    if json_output:
        doc = {"port": port, "action": action}
        if delay_ms is not None and success:
            doc["delay"] = delay_ms
        doc["success"] = success
        return _dumps(doc)
    if action == "cycle":
        return f"Port {port} turned ON (cycle complete)"
    return f"Port {port} turned {action.upper()}"


def format_port_status(port: int, enabled: bool, json_output: bool) -> str:
    if json_output:
        return _dumps({"port": port, "status": "on" if enabled else "off"})
    return f"Port {port}: {'ON' if enabled else 'OFF'}"


def format_port_power(port: int, power: float, json_output: bool) -> str:
    if json_output:
        return _dumps({"port": port, "power": round(power, 1)})
    if power < 0:
        return f"Port {port} power: N/A"
    return f"Port {port} power: {power:.1f} W"


def format_total_power(total: float, json_output: bool) -> str:
    if json_output:
        return _dumps({"total_power": round(total, 1), "max_power": POE_BUDGET_W})
    return f"Total PoE power: {total:.1f} W / {POE_BUDGET_W:.1f} W"


def format_all_stats(stats: list, json_output: bool) -> str:
    total = sum(s.power for s in stats)
    if json_output:
        ports = [
            {
                "port": s.port,
                "enabled": s.enabled,
                "status": s.status,
                "class": s.power_class,
                "voltage": round(s.voltage, 1),
                "current": round(s.current),
                "power": round(s.power, 1),
                "temperature": round(s.temperature),
                "fault": s.fault,
            }
            for s in stats
        ]
        return _dumps({"ports": ports, "total_power": round(total, 1)})

    lines = ["", "=== PoE Port Statistics ===", ""]
    for s in stats:
        lines.append(f"Port {s.port}: {s.status}")
        lines.append(
            f"  Class: {s.power_class}  |  Voltage: {s.voltage:.1f} V"
            f"  |  Current: {s.current:.0f} mA"
        )
        lines.append(
            f"  Power: {s.power:.1f} W  |  Temperature: {s.temperature:.0f} °C"
            f"  |  Fault: {s.fault}"
        )
        lines.append("")
    lines.append(f"Total Power Budget Used: {total:.1f} W / {POE_BUDGET_W:.1f} W")
    return "\n".join(lines)
