"""Logging for the locator library and its CLI.

Library modules log through :func:`get_logger`, which hands structlog
events to a stdlib logger. With no configuration the stdlib default
(WARNING via ``logging.lastResort``) applies, so debug events from a
lookup never reach the calling tool's stdout. :func:`setup_logging`
attaches structlog rendering to the root logger for the CLI.
"""

import logging
import sys
from pathlib import Path

import structlog


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the stdlib logger ``name``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def setup_logging(
    verbose: bool = False,
    log_file: Path | str | None = None,
) -> None:
    """Route structlog events to stderr and, optionally, a JSON file.

    Args:
        verbose: Show DEBUG events (search steps, relative path inputs and
            results) on stderr. Otherwise only WARNING and above.
        log_file: JSON lines file receiving every DEBUG event.

    Example:
        >>> setup_logging(verbose=True)
        >>> setup_logging(log_file="modroot.log.json")

    Note:
        Reconfigures the root logger and structlog globally. Loggers are
        not cached, so configuring again (or resetting structlog) takes
        effect on the module-level loggers immediately.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        cache_logger_on_first_use=False,
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        )
    )
    root.addHandler(console)

    if log_file is None:
        return

    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    json_handler = logging.FileHandler(log_file, encoding="utf-8")
    json_handler.setLevel(logging.DEBUG)
    json_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=structlog.processors.JSONRenderer())
    )
    root.addHandler(json_handler)
