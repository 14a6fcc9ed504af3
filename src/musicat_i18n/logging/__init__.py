"""Structured logging for musicat-i18n.

Usage:
    from musicat_i18n.logging import configure_logging, get_logger

    # At CLI startup
    configure_logging(level="INFO")

    # In modules
    log = get_logger(__name__)
    log.info("Checked locale bundle", locale="zh", errors=0)
"""

from musicat_i18n.logging.config import configure_logging, get_logger, is_configured
from musicat_i18n.logging.formatters import LEVEL_COLORS, ConsoleRenderer

__all__ = [
    "LEVEL_COLORS",
    "ConsoleRenderer",
    "configure_logging",
    "get_logger",
    "is_configured",
]
