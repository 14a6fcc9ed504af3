"""Version information for musicat-i18n."""

from __future__ import annotations

from functools import lru_cache
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version


@lru_cache(maxsize=1)
def get_version() -> str:
    """Get the installed distribution version, or "0.0.0" from a bare checkout."""
    try:
        return pkg_version("musicat-i18n")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = get_version()
