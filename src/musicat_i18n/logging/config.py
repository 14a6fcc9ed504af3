"""structlog configuration for musicat-i18n.

Usage:
    from musicat_i18n.logging import configure_logging, get_logger

    configure_logging(level="INFO")
    log = get_logger(__name__)
    log.info("Loaded locale bundle", locale="zh", keys=139)
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from musicat_i18n.logging.formatters import ConsoleRenderer

_configured = False


def configure_logging(
    *,
    level: str = "WARNING",
    colors: bool | None = None,
    json_output: bool = False,
    service_name: str = "i18n",
) -> None:
    """Configure structlog for the library and the CLI.

    Safe to call more than once; the last call wins.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR)
        colors: Enable colors (auto-detect TTY/FORCE_COLOR if None)
        json_output: Emit JSON lines for log aggregation
        service_name: Prefix shown in console output
    """
    global _configured

    if json_output:
        renderer: structlog.typing.Processor = structlog.processors.JSONRenderer(
            ensure_ascii=False
        )
    else:
        renderer = ConsoleRenderer(service_name=service_name, colors=colors)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.WARNING)
        ),
        context_class=dict,
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )

    _configured = True


def is_configured() -> bool:
    return _configured


def get_logger(name: str | None = None) -> Any:
    """Get a logger; ``name`` is bound as ``logger_name`` when given."""
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()


def _stderr_logger_factory(*_args: Any) -> structlog.PrintLogger:
    # Look sys.stderr up per logger so redirected streams are honored.
    return structlog.PrintLogger(sys.stderr)
