"""
musicat-i18n: locale bundles for the Musicat music library manager.

This package provides:
- The reference (English) and Chinese (Simplified) translation bundles
- Key path helpers and placeholder token recognition
- An explicit trust boundary for values rendered as raw markup
- Conformance checks of a bundle against the reference bundle
"""

from musicat_i18n._version import __version__, get_version
from musicat_i18n.conformance import (
    ConformanceIssue,
    ConformanceReport,
    IssueCode,
    Severity,
    assert_conformant,
    check_bundle,
    check_locale,
)
from musicat_i18n.errors import (
    BundleLoadError,
    ConformanceError,
    KeyPathError,
    LocalizationError,
    MarkupError,
    PlaceholderSyntaxError,
    UnknownLocaleError,
)
from musicat_i18n.keys import flatten, get_path, key_paths
from musicat_i18n.locales import (
    BASE_LOCALE,
    TRUSTED_MARKUP_KEYS,
    available_locales,
    load_bundle,
    load_bundle_file,
)
from musicat_i18n.markup import render

__all__ = [
    "BASE_LOCALE",
    "TRUSTED_MARKUP_KEYS",
    # Errors
    "BundleLoadError",
    "ConformanceError",
    # Conformance
    "ConformanceIssue",
    "ConformanceReport",
    "IssueCode",
    "KeyPathError",
    "LocalizationError",
    "MarkupError",
    "PlaceholderSyntaxError",
    "Severity",
    "UnknownLocaleError",
    # Version
    "__version__",
    "assert_conformant",
    "available_locales",
    "check_bundle",
    "check_locale",
    "flatten",
    "get_path",
    "get_version",
    "key_paths",
    "load_bundle",
    "load_bundle_file",
    "render",
]
