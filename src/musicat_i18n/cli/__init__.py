"""Command line interface for musicat-i18n."""

from musicat_i18n.cli.main import app

__all__ = ["app"]
