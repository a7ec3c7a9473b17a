"""Logging configuration for the GS308EP client."""

import logging

import colorlog

log = logging.getLogger("gs308ep")


def _setup_logging(debug: bool = False, quiet: bool = False) -> None:
    if debug:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    log.setLevel(level)
    log.handlers.clear()

    handler = colorlog.StreamHandler()
    handler.setFormatter(colorlog.ColoredFormatter(
        "%(log_color)s[%(levelname)s]%(reset)s %(message)s",
        log_colors={
            "DEBUG":    "cyan",
            "INFO":     "green",
            "WARNING":  "yellow",
            "ERROR":    "red",
            "CRITICAL": "bold_red",
        },
    ))
    log.addHandler(handler)
