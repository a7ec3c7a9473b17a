"""Port index validation."""

from ..config import MAX_PORTS
from ..exceptions import InvalidPortError


def is_valid_port(port) -> bool:
    """True for integer port numbers 1..8."""
    return isinstance(port, int) and not isinstance(port, bool) and 1 <= port <= MAX_PORTS


def validate_port(port) -> int:
    if not is_valid_port(port):
        raise InvalidPortError(port)
    return port
