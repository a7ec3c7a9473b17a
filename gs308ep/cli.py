"""
Command-line interface for the GS308EP PoE switch client.

Provides argument parsing and main execution flow.  Exit status is 0 when
the requested action succeeded and 1 otherwise.
"""

import argparse
import logging
import os
import sys
import time

from tqdm import tqdm

from gs308ep.client import GS308EP
from gs308ep.config import (
    DEFAULT_CYCLE_DELAY_MS,
    ENV_HOST,
    ENV_PASSWORD,
    MAX_PORTS,
    PROGRAM_NAME,
    VERSION,
)
from gs308ep.logging_setup import _setup_logging, log
from gs308ep.result import ErrorKind
from gs308ep import output

EXAMPLES = f"""\
Environment variables:
  {ENV_HOST}           Switch IP address (overridden by --host)
  {ENV_PASSWORD}       Administrator password (overridden by --password)

Examples:
  {PROGRAM_NAME} -h 192.168.1.1 -p admin -P 3 -o
    Turn on port 3

  {PROGRAM_NAME} -h 192.168.1.1 -p admin -P 5 -c 3000
    Power cycle port 5 with 3 second delay

  {PROGRAM_NAME} -h 192.168.1.1 -p admin -S --json
    Show all port statistics in JSON format
"""

PORT_ACTIONS = ("on", "off", "cycle", "status", "power")


def _port_number(text: str) -> int:
    try:
        port = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port number: {text!r}")
    if not 1 <= port <= MAX_PORTS:
        raise argparse.ArgumentTypeError(f"Port must be between 1 and {MAX_PORTS}")
    return port


def _cycle_delay(text: str) -> int:
    try:
        delay = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid delay: {text!r}")
    if delay < 0:
        raise argparse.ArgumentTypeError("Cycle delay must be non-negative")
    return delay


class _ArgumentParser(argparse.ArgumentParser):
    """Usage errors exit with status 1 like every other failure."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROGRAM_NAME,
        description="Control Netgear GS308EP PoE switch ports and monitor "
                    "power consumption.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EXAMPLES,
        add_help=False,     # -h is --host
    )
    required = parser.add_argument_group("Required options")
    required.add_argument("-h", "--host", default=os.environ.get(ENV_HOST, ""),
                          help="Switch IP address or hostname")
    required.add_argument("-p", "--password", default=os.environ.get(ENV_PASSWORD, ""),
                          help="Administrator password")

    control = parser.add_argument_group("Port control")
    control.add_argument("-P", "--port", type=_port_number,
                         help=f"Port number (1-{MAX_PORTS})")
    actions = parser.add_mutually_exclusive_group()
    actions.add_argument("-o", "--on", dest="action", action="store_const", const="on",
                         help="Turn port ON")
    actions.add_argument("-f", "--off", dest="action", action="store_const", const="off",
                         help="Turn port OFF")
    actions.add_argument("-c", "--cycle", nargs="?", type=_cycle_delay,
                         const=DEFAULT_CYCLE_DELAY_MS, metavar="DELAY",
                         help="Power cycle port (optional delay in ms, "
                              f"default {DEFAULT_CYCLE_DELAY_MS})")
    actions.add_argument("-s", "--status", dest="action", action="store_const",
                         const="status", help="Show port status")
    actions.add_argument("-w", "--power", dest="action", action="store_const",
                         const="power", help="Show power consumption for specified port")
    actions.add_argument("-W", "--total-power", dest="action", action="store_const",
                         const="total-power", help="Show total power consumption")
    actions.add_argument("-S", "--stats", dest="action", action="store_const",
                         const="stats", help="Show comprehensive statistics for all ports")

    fmt = parser.add_argument_group("Output format")
    fmt.add_argument("-j", "--json", action="store_true", help="Output in JSON format")
    fmt.add_argument("-q", "--quiet", action="store_true",
                     help="Suppress non-essential output")
    fmt.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")

    other = parser.add_argument_group("Other options")
    other.add_argument("--help", action="help", help="Display this help and exit")
    other.add_argument("--version", action="version",
                       version=f"{PROGRAM_NAME} version {VERSION}\n"
                               "Netgear GS308EP PoE Switch Control Tool")
    return parser


def parse_args(argv=None) -> argparse.Namespace:
    args = build_parser().parse_args(argv)
    if args.cycle is not None:
        args.action = "cycle"
    return args


def _countdown_sleep(seconds: float) -> None:
    """Blocking sleep with a progress bar, in 100 ms steps."""
    steps = int(seconds * 10)
    for _ in tqdm(range(steps), desc="Waiting", unit="step", leave=False):
        time.sleep(0.1)
    time.sleep(max(0.0, seconds - steps / 10))


def run(args: argparse.Namespace, switch: GS308EP) -> bool:
    """Execute the requested action and print its result."""
    action = args.action
    port = args.port
    json_output = args.json
    verbose_output = not (json_output or args.quiet)

    if action in ("on", "off", "cycle"):
        if action == "cycle":
            sleep = _countdown_sleep if verbose_output else time.sleep
            result = switch.cycle_port(port, args.cycle, sleep=sleep)
        else:
            result = switch.set_port_enabled(port, action == "on")
        if json_output or (result.success and verbose_output):
            delay = args.cycle if action == "cycle" else None
            print(output.format_action(port, action, result.success, json_output, delay))
        return result.success

    if action == "status":
        result = switch.read_port_enabled(port)
        if result.success and not args.quiet:
            print(output.format_port_status(port, result.value, json_output))
        return result.success

    if action == "power":
        result = switch.read_port_power(port)
        # An unreadable value is still reported, as N/A
        if result.success or result.error_kind is ErrorKind.PARSE_FAILURE:
            if not args.quiet:
                print(output.format_port_power(port, result.value, json_output))
        return result.success

    if action == "total-power":
        result = switch.read_total_power()
        if result.success and not args.quiet:
            print(output.format_total_power(result.value, json_output))
        return result.success

    result = switch.read_all_port_stats()
    if result.success and not args.quiet:
        print(output.format_all_stats(result.value, json_output))
    return result.success


def main(argv=None) -> int:
    """
    Main entry point for the CLI.
    """
    args = parse_args(argv)

    _setup_logging(debug=args.verbose, quiet=args.quiet or args.json)
    if args.verbose:
        logging.getLogger("urllib3").setLevel(logging.DEBUG)

    if not args.host:
        log.error("Switch host is required (use --host or %s)", ENV_HOST)
        print(f"Try '{PROGRAM_NAME} --help' for more information.", file=sys.stderr)
        return 1
    if not args.password:
        log.error("Switch password is required (use --password or %s)", ENV_PASSWORD)
        print(f"Try '{PROGRAM_NAME} --help' for more information.", file=sys.stderr)
        return 1
    if args.action is None:
        log.error("No action specified")
        print(f"Try '{PROGRAM_NAME} --help' for more information.", file=sys.stderr)
        return 1
    if args.action in PORT_ACTIONS and args.port is None:
        log.error("Port number required for this action (use --port)")
        return 1

    switch = GS308EP(args.host, args.password)

    log.info("Connecting to %s...", args.host)
    if not switch.authenticate():
        log.error("Authentication failed")
        return 1
    log.info("Authenticated successfully")

    return 0 if run(args, switch) else 1


if __name__ == "__main__":
    sys.exit(main())
