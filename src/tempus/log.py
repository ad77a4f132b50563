"""Log output for the tempus command line.

The library only emits stdlib records under the "tempus" logger. The CLI
renders them with structlog: console lines by default, JSON lines with
--log-json, always on stderr.
"""

from __future__ import annotations

import logging
import sys

import structlog

_HANDLER_NAME = "tempus-cli"


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route "tempus" records to stderr; DEBUG when verbose, WARNING otherwise."""
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    logger = logging.getLogger("tempus")
    for old in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.propagate = False
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
