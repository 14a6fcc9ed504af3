"""Locale bundle registry.

Bundles are Python data modules (``en.py``, ``zh.py``) exposing a nested
``TRANSLATIONS`` dict. They are loaded once per process and handed out as
read-only mappings.
"""

from __future__ import annotations

import importlib
import json
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any

from musicat_i18n.errors import BundleLoadError, UnknownLocaleError
from musicat_i18n.keys import freeze, key_paths
from musicat_i18n.logging import get_logger

log = get_logger(__name__)

# Locale whose key set every other bundle must match
BASE_LOCALE = "en"

LOCALE_NAMES: dict[str, str] = {
    "en": "English",
    "zh": "简体中文",
}

# Key paths whose values the UI injects as raw HTML. Everything else is
# escaped by musicat_i18n.markup.render.
TRUSTED_MARKUP_KEYS: frozenset[str] = frozenset(
    {
        "trackInfo.artworkTooltipBody",
    }
)


def available_locales() -> list[str]:
    return list(LOCALE_NAMES)


def is_locale(code: str) -> bool:
    return code in LOCALE_NAMES


@lru_cache(maxsize=None)
def load_bundle(locale: str) -> Mapping[str, Any]:
    """Load the bundle for ``locale`` as a read-only mapping.

    Raises:
        UnknownLocaleError: If no bundle is registered for ``locale``.
    """
    if not is_locale(locale):
        raise UnknownLocaleError(locale, available_locales())

    module = importlib.import_module(f"{__name__}.{locale}")
    bundle = freeze(module.TRANSLATIONS)
    log.debug("Loaded locale bundle", locale=locale, keys=len(key_paths(bundle)))
    return bundle


def load_bundle_file(path: str | Path) -> Mapping[str, Any]:
    """Load a JSON bundle written by translation tooling.

    Raises:
        BundleLoadError: If the file is unreadable, not JSON, or not an object.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise BundleLoadError(
            f"Cannot read bundle file {path}: {e}", details={"path": str(path)}
        ) from e
    except json.JSONDecodeError as e:
        raise BundleLoadError(
            f"Bundle file {path} is not valid JSON: {e.msg} (line {e.lineno})",
            details={"path": str(path), "line": e.lineno},
        ) from e
    except UnicodeDecodeError as e:
        raise BundleLoadError(
            f"Bundle file {path} is not valid UTF-8: byte {e.start}",
            details={"path": str(path), "position": e.start},
        ) from e

    if not isinstance(data, dict):
        raise BundleLoadError(
            f"Bundle file {path} must contain a JSON object, got {type(data).__name__}",
            details={"path": str(path)},
        )

    bundle = freeze(data)
    log.debug("Loaded bundle file", path=str(path), keys=len(key_paths(bundle)))
    return bundle


__all__ = [
    "BASE_LOCALE",
    "LOCALE_NAMES",
    "TRUSTED_MARKUP_KEYS",
    "available_locales",
    "is_locale",
    "load_bundle",
    "load_bundle_file",
]
