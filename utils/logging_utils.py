import logging
import sys
from typing import Union

import structlog
from structlog.stdlib import add_log_level, add_logger_name

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_log_level(level: Union[int, str]) -> int:
    """Map a level name such as ``"debug"`` to its :mod:`logging` constant."""
    if isinstance(level, int):
        return level
    name = level.upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {level!r}; expected one of {LOG_LEVELS}.")
    return getattr(logging, name)


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure structlog and standard logging with the given level.

    Log lines go to stderr so that layouts printed on stdout stay clean.
    """
    level = resolve_log_level(level)
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr, force=True)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_logger_name,
            add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=False),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Re-configured once the config file has been read
        cache_logger_on_first_use=False,
    )
