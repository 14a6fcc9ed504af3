"""Console renderer for musicat-i18n log events.

Produces pipe-separated output: service | timestamp | level | event key=value...
"""

from __future__ import annotations

import os
import sys
import traceback
from datetime import datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from structlog.typing import EventDict, WrappedLogger

# ANSI 24-bit escape codes
ANSI_CYAN = "\033[38;2;128;255;234m"
ANSI_MAGENTA = "\033[38;2;225;53;255m"
ANSI_PINK = "\033[38;2;255;106;193m"
ANSI_YELLOW = "\033[38;2;241;250;140m"
ANSI_GREEN = "\033[38;2;80;250;123m"
ANSI_RED = "\033[38;2;255;99;99m"
ANSI_DIM = "\033[38;2;85;85;102m"
ANSI_RESET = "\033[0m"

LEVEL_COLORS: dict[str, str] = {
    "debug": ANSI_DIM,
    "info": ANSI_CYAN,
    "warning": ANSI_YELLOW,
    "warn": ANSI_YELLOW,
    "error": ANSI_RED,
    "critical": ANSI_MAGENTA,
}


class ConsoleRenderer:
    """structlog renderer for terminal output.

    Example:
        i18n   | 00:17:08 | info  | Loaded locale bundle locale=zh keys=139
    """

    def __init__(
        self,
        service_name: str = "i18n",
        service_width: int = 6,
        colors: bool | None = None,
        max_exception_frames: int = 5,
    ) -> None:
        self.service_name = service_name
        self.service_width = service_width
        self.max_exception_frames = max_exception_frames

        if colors is None:
            force_color = os.environ.get("FORCE_COLOR", "")
            self.colors = sys.stderr.isatty() or force_color not in ("", "0", "false")
        else:
            self.colors = colors

    def __call__(
        self,
        logger: WrappedLogger,
        method_name: str,
        event_dict: EventDict,
    ) -> str:
        """Render a log event to a single line (plus traceback, if any)."""
        timestamp = event_dict.pop("timestamp", datetime.now().strftime("%H:%M:%S"))
        level = event_dict.pop("level", method_name).lower()
        event = str(event_dict.pop("event", ""))

        exc_info = event_dict.pop("exc_info", None)
        exception_str = self._format_exception(exc_info) if exc_info else ""

        kv_pairs = self._format_kv_pairs(event_dict)

        if self.colors:
            service = f"{ANSI_PINK}{self.service_name:<{self.service_width}}{ANSI_RESET}"
            ts = f"{ANSI_DIM}{timestamp}{ANSI_RESET}"
            lvl = f"{LEVEL_COLORS.get(level, ANSI_CYAN)}{level:<5}{ANSI_RESET}"
            kv = f"{ANSI_DIM}{kv_pairs}{ANSI_RESET}" if kv_pairs else ""
        else:
            service = f"{self.service_name:<{self.service_width}}"
            ts = timestamp
            lvl = f"{level:<5}"
            kv = kv_pairs

        line = f"{service} | {ts} | {lvl} | {event}"
        if kv:
            line += f" {kv}"
        if exception_str:
            line += f"\n{exception_str}"
        return line

    def _format_kv_pairs(self, event_dict: EventDict) -> str:
        pairs = []
        for key, value in event_dict.items():
            if key.startswith("_"):
                continue
            if self.colors and isinstance(value, bool):
                color = ANSI_GREEN if value else ANSI_RED
                pairs.append(f"{key}={color}{value}{ANSI_RESET}")
            elif self.colors and isinstance(value, (int, float)):
                pairs.append(f"{key}={ANSI_PINK}{value}{ANSI_RESET}")
            else:
                pairs.append(f"{key}={value}")
        return " ".join(pairs)

    def _format_exception(self, exc_info: tuple[Any, ...] | bool) -> str:
        """Format the most recent traceback frames under the log line."""
        if exc_info is True:
            exc_info = sys.exc_info()
        if not exc_info or exc_info[0] is None:
            return ""

        exc_type, exc_value, exc_tb = exc_info

        tb_lines = traceback.format_tb(exc_tb)
        if len(tb_lines) > self.max_exception_frames:
            tb_lines = ["  ... (truncated)\n", *tb_lines[-self.max_exception_frames :]]

        indent = "         "
        formatted_tb = "".join(tb_lines).rstrip()
        formatted_tb = "\n".join(indent + line for line in formatted_tb.split("\n"))

        exc_name = exc_type.__name__
        if exc_type.__module__ and exc_type.__module__ != "builtins":
            exc_name = f"{exc_type.__module__}.{exc_name}"

        if self.colors:
            return (
                f"{indent}{ANSI_RED}{exc_name}: {exc_value}{ANSI_RESET}\n"
                f"{ANSI_DIM}{formatted_tb}{ANSI_RESET}"
            )
        return f"{indent}{exc_name}: {exc_value}\n{formatted_tb}"
