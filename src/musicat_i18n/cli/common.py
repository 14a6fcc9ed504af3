"""Shared CLI output helpers - colors, console, tables."""

import json

from rich.console import Console
from rich.table import Table

# Palette
ACCENT = "#e135ff"
CYAN = "#80ffea"
YELLOW = "#f1fa8c"
GREEN = "#50fa7b"
RED = "#ff6363"

# Styled output only, never JSON
console = Console()
err_console = Console(stderr=True)


def print_json(data: object) -> None:
    """Print JSON to stdout without Rich formatting.

    Rich wraps long lines at terminal width, which would break JSON parsing.
    """
    print(json.dumps(data, indent=2, default=str, ensure_ascii=False))


def success(message: str) -> None:
    console.print(f"[{GREEN}]✓[/{GREEN}] {message}")


def error(message: str) -> None:
    err_console.print(f"[{RED}]✗[/{RED}] {message}")


def warn(message: str) -> None:
    console.print(f"[{YELLOW}]![/{YELLOW}] {message}")


def info(message: str) -> None:
    console.print(f"[{CYAN}]→[/{CYAN}] {message}")


def create_table(title: str | None = None, *columns: str) -> Table:
    """Create a styled table; the first column is highlighted."""
    table = Table(title=title, border_style=CYAN)
    for i, col in enumerate(columns):
        style = ACCENT if i == 0 else CYAN
        justify = "right" if col.lower() in ("keys", "count", "errors", "warnings") else "left"
        table.add_column(col, style=style, justify=justify)
    return table
