"""Structured logging for monad-maniac.

The containers themselves never log. The one event the library emits is a
debug record when attempt()/@safe turns an exception into a Left, and only
once a log level has been configured.

Output goes through the ``monad_maniac`` stdlib logger with its own handler
and ``propagate=False``. Neither the root logger nor structlog's global
configuration is touched, so the host application's logging stays as it was.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'LOGGER_NAME',
    'configure_logging',
    'get_logger',
    'log_captured',
    'reset_logging',
]

LOGGER_NAME = 'monad_maniac'

# Handler installed by configure_logging(), None until logging is configured
_handler: logging.Handler | None = None


def _get_processors() -> list[Any]:
    return [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Send monad-maniac log events to stderr at ``level``.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use colored console output.
    """
    global _handler  # noqa: PLW0603

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False
    _handler = handler


def reset_logging() -> None:
    """Remove the handler installed by configure_logging() and restore defaults."""
    global _handler  # noqa: PLW0603

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler = None
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger writing under the ``monad_maniac`` logger.

    Args:
        name: Child logger name, e.g. ``'either'`` for ``monad_maniac.either``.

    Returns:
        A structlog BoundLogger.
    """
    stdlib_name = LOGGER_NAME if name is None else f'{LOGGER_NAME}.{name}'
    return structlog.wrap_logger(
        logging.getLogger(stdlib_name),
        processors=_get_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


def log_captured(func: Callable[..., Any], error: BaseException) -> None:
    """Record that ``error`` raised by ``func`` was captured as a Left.

    Does nothing while no log level is configured. A level that only came
    from the environment configures logging on first use, so the event is
    filtered by that level like any other.
    """
    from monad_maniac._config import get_config

    config = get_config()
    if config.log_level is None:
        return
    if _handler is None:
        configure_logging(config.log_level, json_output=config.json_output)
    get_logger().debug(
        'exception captured as Left',
        function=getattr(func, '__qualname__', repr(func)),
        error=repr(error),
    )
