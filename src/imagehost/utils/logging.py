"""Structured logging setup for the image host.

Every event carries a ``service`` field so log lines from this API can be
told apart once shipped next to other services' logs.
"""

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

SERVICE_NAME = "imagehost"


def _service_adder(service_name: str) -> structlog.types.Processor:
    def add_service(
        logger: structlog.types.WrappedLogger,
        method_name: str,
        event_dict: MutableMapping[str, Any],
    ) -> MutableMapping[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return add_service


def setup_logging(
    level: str = "INFO",
    json_format: bool = False,
    service_name: str = SERVICE_NAME,
) -> None:
    """Configure structlog for the API process.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: Emit JSON lines instead of console output
        service_name: Value of the ``service`` field added to every event
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    # pymongo logs heartbeats and topology changes at DEBUG
    logging.getLogger("pymongo").setLevel(logging.WARNING)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        _service_adder(service_name),
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if json_format:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors += [
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
