"""
gs308ep
=======
Python client for the Netgear GS308EP PoE switch.  The switch has no API,
only server-rendered management pages, so this package logs in through the
web form, keeps the ``SID`` session cookie and scrapes port state out of the
HTML.

Package structure
-----------------
gs308ep/
├── __init__.py       – package init and public API
├── config.py         – endpoints, timeouts, field markers, search windows
├── client.py         – GS308EP facade returning OperationResult values
├── result.py         – OperationResult / ErrorKind
├── exceptions.py     – typed errors raised by the components
├── output.py         – JSON / text rendering for the CLI
├── cli.py            – argparse CLI (``gs308ep`` / ``python -m gs308ep``)
├── auth/             – password hash, login handshake, session state
├── network/          – requests session and cookie-threading HTTP client
├── extraction/       – positional HTML field / cookie / port-status parsers
└── poe/              – port validation, status reader, command issuer

Quick start
-----------
    from gs308ep import GS308EP

    switch = GS308EP("192.168.1.1", "password")
    if switch.authenticate():
        switch.cycle_port(3, delay_ms=3000)
        ok, stats = switch.read_all_port_stats()
"""

from .client import GS308EP
from .config import VERSION as __version__
from .extraction import PortStats
from .poe import is_valid_port
from .result import ErrorKind, OperationResult

__all__ = [
    "GS308EP",
    "PortStats",
    "is_valid_port",
    "ErrorKind",
    "OperationResult",
    "__version__",
]
