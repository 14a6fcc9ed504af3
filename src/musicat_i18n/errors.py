"""Exceptions for locale bundle loading and conformance checks."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from musicat_i18n.conformance import ConformanceReport


class LocalizationError(Exception):
    """Base exception for all musicat-i18n errors."""

    def __init__(self, message: str, *, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class UnknownLocaleError(LocalizationError):
    """Raised when a locale code has no registered bundle."""

    def __init__(self, locale: str, available: list[str] | None = None) -> None:
        available_str = f" Available: {available}" if available else ""
        super().__init__(
            f"Unknown locale: {locale}.{available_str}",
            details={"locale": locale, "available": available or []},
        )


class BundleLoadError(LocalizationError):
    """Raised when a bundle file cannot be read or is not a mapping."""


class KeyPathError(LocalizationError):
    """Raised when a key path does not address a value in a bundle."""

    def __init__(self, key_path: str, reason: str = "not found") -> None:
        super().__init__(
            f"Key path {reason}: {key_path}",
            details={"key_path": key_path, "reason": reason},
        )


class PlaceholderSyntaxError(LocalizationError):
    """Raised when a string holds a malformed placeholder token."""

    def __init__(self, text: str, position: int, reason: str) -> None:
        super().__init__(
            f"{reason} at position {position}",
            details={"text": text, "position": position, "reason": reason},
        )
        self.position = position
        self.reason = reason


class MarkupError(LocalizationError):
    """Raised when trusted markup cannot be rendered safely."""


class ConformanceError(LocalizationError):
    """Raised when a bundle does not conform to its reference bundle."""

    def __init__(self, report: ConformanceReport) -> None:
        super().__init__(
            f"Locale {report.locale} failed conformance: "
            f"{len(report.errors)} error(s), {len(report.warnings)} warning(s)",
            details={"locale": report.locale, "reference_locale": report.reference_locale},
        )
        self.report = report
