"""Structured logging for the Bittrex client.

Modules log through ``get_logger(__name__)``. Nothing is printed until an
application calls ``setup_logging``; the library never configures logging
on import.
"""

import logging

import structlog

PACKAGE_LOGGER = "bittrex"
HANDLER_NAME = "bittrex-structlog"

LOG_FORMATS = ("console", "json")


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "console":
        return structlog.dev.ConsoleRenderer()
    raise ValueError(f"unknown log format {log_format!r}, expected one of {LOG_FORMATS}")


def setup_logging(log_level: str = "INFO", log_format: str = "console") -> logging.Handler:
    """Route the package's structlog events to stderr.

    Installs one handler on the ``bittrex`` logger and leaves the root logger
    and other libraries' handlers alone. Calling it again replaces the handler
    it installed before, so level or format can be changed at runtime.

    Args:
        log_level: Standard level name; unknown names fall back to INFO.
        log_format: "console" for humans, "json" for log collectors
            (``AppSettings.log_format``).

    Returns:
        The installed handler.
    """
    renderer = _renderer(log_format.lower())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for previous in [h for h in package_logger.handlers if h.get_name() == HANDLER_NAME]:
        package_logger.removeHandler(previous)
        previous.close()
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    # Our handler already prints these; don't print them twice via root.
    package_logger.propagate = False
    return handler


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger with the given name."""
    return structlog.get_logger(name)
