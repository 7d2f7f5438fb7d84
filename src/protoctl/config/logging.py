"""structlog configuration for protoctl.

Two output modes, both on stderr so stdout stays with the external tools:
- Human (default): console renderer, colored on a TTY
- JSON (--log-json): structured JSON lines

``configure_logging`` returns the logger every service receives; nothing
in the pipeline fetches a logger from global state on its own.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "protoctl"


def resolve_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """Map the shared verbosity flags to a stdlib level. Verbose wins."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level output.
        quiet: Only WARNING and above.
        log_json: Use JSON renderer instead of console renderer.

    Returns:
        The ``protoctl`` logger, ready to be passed into services.
    """
    level = resolve_level(verbose=verbose, quiet=quiet)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(level)
    return structlog.stdlib.get_logger(LOGGER_NAME)
