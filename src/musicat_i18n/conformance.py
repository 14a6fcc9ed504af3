"""Conformance of a locale bundle to the reference bundle.

A translated bundle is a peer of the reference: same key paths, same
nesting, and for every leaf the same interpolation points, the same number
of plural blocks and markup the renderer can inject safely.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from musicat_i18n.config import config
from musicat_i18n.errors import ConformanceError, KeyPathError, PlaceholderSyntaxError
from musicat_i18n.keys import flatten, get_node, join_path, key_paths
from musicat_i18n.locales import BASE_LOCALE, TRUSTED_MARKUP_KEYS, load_bundle
from musicat_i18n.logging import get_logger
from musicat_i18n.markup import check_balance, tag_names
from musicat_i18n.schema import build_schema, validate_bundle
from musicat_i18n.tokens import Argument, PluralBlock, tokenize

log = get_logger(__name__)


class IssueCode(StrEnum):
    """Kinds of conformance problems."""

    MISSING_KEY = "missing_key"
    EXTRA_KEY = "extra_key"
    SHAPE_MISMATCH = "shape_mismatch"
    EMPTY_VALUE = "empty_value"
    MALFORMED_PLACEHOLDER = "malformed_placeholder"
    PLACEHOLDER_MISMATCH = "placeholder_mismatch"
    PLURAL_MISMATCH = "plural_mismatch"
    UNBALANCED_MARKUP = "unbalanced_markup"
    UNTRUSTED_MARKUP = "untrusted_markup"
    MARKUP_TAGS_DIFFER = "markup_tags_differ"


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"


WARNING_CODES = frozenset({IssueCode.MARKUP_TAGS_DIFFER})


class ConformanceIssue(BaseModel):
    """A single problem at one key path."""

    code: IssueCode
    key_path: str
    message: str
    reference: str | None = None
    translation: str | None = None

    @property
    def severity(self) -> Severity:
        return Severity.WARNING if self.code in WARNING_CODES else Severity.ERROR


class ConformanceReport(BaseModel):
    """Result of checking one bundle against a reference bundle."""

    locale: str
    reference_locale: str
    checked_keys: int = 0
    issues: list[ConformanceIssue] = Field(default_factory=list)

    @property
    def errors(self) -> list[ConformanceIssue]:
        return [i for i in self.issues if i.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[ConformanceIssue]:
        return [i for i in self.issues if i.severity is Severity.WARNING]

    @property
    def ok(self) -> bool:
        return not self.errors

    def passed(self, strict: bool = False) -> bool:
        """True when there are no errors (and, if ``strict``, no warnings)."""
        return self.ok and not (strict and self.warnings)

    def by_code(self, code: IssueCode) -> list[ConformanceIssue]:
        return [i for i in self.issues if i.code == code]

    def to_dict(self) -> dict[str, Any]:
        """Serializable form, with severities spelled out."""
        return {
            "locale": self.locale,
            "reference_locale": self.reference_locale,
            "checked_keys": self.checked_keys,
            "ok": self.ok,
            "issues": [
                {**issue.model_dump(mode="json"), "severity": issue.severity.value}
                for issue in self.issues
            ],
        }


def check_bundle(
    bundle: Mapping[str, Any],
    reference: Mapping[str, Any],
    *,
    locale: str,
    reference_locale: str = BASE_LOCALE,
    trusted_keys: Iterable[str] | None = None,
) -> ConformanceReport:
    """Check ``bundle`` against ``reference`` and report every problem.

    Args:
        bundle: The translated bundle.
        reference: The bundle defining the canonical key set.
        locale: Locale code of ``bundle`` (for reporting).
        reference_locale: Locale code of ``reference`` (for reporting).
        trusted_keys: Key paths allowed to carry raw markup.
            Defaults to ``TRUSTED_MARKUP_KEYS``.
    """
    trusted = frozenset(TRUSTED_MARKUP_KEYS if trusted_keys is None else trusted_keys)
    issues: list[ConformanceIssue] = []

    try:
        validate_bundle(build_schema(reference), bundle)
    except ValidationError as e:
        issues.extend(_shape_issues(e, reference))

    reference_leaves = flatten(reference)
    leaves = flatten(bundle)
    for key_path, reference_value in reference_leaves.items():
        value = leaves.get(key_path)
        if not isinstance(value, str) or not isinstance(reference_value, str):
            continue
        issues.extend(_token_issues(key_path, reference_value, value))
        issues.extend(_markup_issues(key_path, reference_value, value, trusted))

    report = ConformanceReport(
        locale=locale,
        reference_locale=reference_locale,
        checked_keys=len(reference_leaves),
        issues=issues,
    )
    log.info(
        "Checked locale bundle",
        locale=locale,
        reference=reference_locale,
        keys=report.checked_keys,
        errors=len(report.errors),
        warnings=len(report.warnings),
    )
    return report


def check_locale(locale: str, reference_locale: str | None = None) -> ConformanceReport:
    """Check a registered locale against a registered reference locale.

    The reference defaults to the configured ``reference_locale``.
    """
    reference_locale = reference_locale or config.reference_locale
    return check_bundle(
        load_bundle(locale),
        load_bundle(reference_locale),
        locale=locale,
        reference_locale=reference_locale,
    )


def assert_conformant(
    bundle: Mapping[str, Any],
    reference: Mapping[str, Any],
    *,
    locale: str,
    reference_locale: str = BASE_LOCALE,
    strict: bool = False,
) -> ConformanceReport:
    """Like ``check_bundle`` but raise ``ConformanceError`` when it fails."""
    report = check_bundle(bundle, reference, locale=locale, reference_locale=reference_locale)
    if not report.passed(strict):
        raise ConformanceError(report)
    return report


# =============================================================================
# Shape
# =============================================================================


def _shape_issues(error: ValidationError, reference: Mapping[str, Any]) -> list[ConformanceIssue]:
    issues: list[ConformanceIssue] = []
    for detail in error.errors():
        key_path = join_path(*(str(part) for part in detail["loc"]))
        kind = detail["type"]
        value = detail.get("input")

        if kind == "missing":
            issues.extend(_missing_issues(key_path, reference))
        elif kind == "extra_forbidden":
            extra_paths = (
                [join_path(key_path, p) for p in key_paths(value)]
                if isinstance(value, Mapping)
                else [key_path]
            )
            issues.extend(
                ConformanceIssue(
                    code=IssueCode.EXTRA_KEY,
                    key_path=path,
                    message="Key is not declared by the reference bundle",
                )
                for path in extra_paths
            )
        elif kind in ("string_too_short", "value_error"):
            issues.append(
                ConformanceIssue(
                    code=IssueCode.EMPTY_VALUE,
                    key_path=key_path,
                    message="Translation is empty",
                    reference=_reference_text(reference, key_path),
                    translation=value if isinstance(value, str) else None,
                )
            )
        else:
            expected = "a section" if kind in ("model_type", "dict_type") else "a string"
            issues.append(
                ConformanceIssue(
                    code=IssueCode.SHAPE_MISMATCH,
                    key_path=key_path,
                    message=f"Expected {expected}, got {type(value).__name__}",
                )
            )
    return issues


def _missing_issues(key_path: str, reference: Mapping[str, Any]) -> list[ConformanceIssue]:
    node = get_node(reference, key_path)
    if isinstance(node, Mapping):
        paths = [join_path(key_path, p) for p in key_paths(node)]
    else:
        paths = [key_path]
    return [
        ConformanceIssue(
            code=IssueCode.MISSING_KEY,
            key_path=path,
            message="Key is missing from the translation",
            reference=_reference_text(reference, path),
        )
        for path in paths
    ]


def _reference_text(reference: Mapping[str, Any], key_path: str) -> str | None:
    try:
        node = get_node(reference, key_path)
    except KeyPathError:
        return None
    return node if isinstance(node, str) else None


# =============================================================================
# Placeholders
# =============================================================================


def _token_issues(key_path: str, reference_value: str, value: str) -> list[ConformanceIssue]:
    try:
        tokens = tokenize(value)
    except PlaceholderSyntaxError as e:
        return [
            ConformanceIssue(
                code=IssueCode.MALFORMED_PLACEHOLDER,
                key_path=key_path,
                message=e.message,
                reference=reference_value,
                translation=value,
            )
        ]

    try:
        reference_tokens = tokenize(reference_value)
    except PlaceholderSyntaxError as e:
        log.warning("Reference string has a malformed placeholder", key_path=key_path, error=e.message)
        return []

    issues: list[ConformanceIssue] = []

    expected_args = {t.name for t in reference_tokens if isinstance(t, Argument)}
    found_args = {t.name for t in tokens if isinstance(t, Argument)}
    if expected_args != found_args:
        parts = []
        if missing := sorted(expected_args - found_args):
            parts.append(f"missing {', '.join('{' + n + '}' for n in missing)}")
        if unexpected := sorted(found_args - expected_args):
            parts.append(f"unexpected {', '.join('{' + n + '}' for n in unexpected)}")
        issues.append(
            ConformanceIssue(
                code=IssueCode.PLACEHOLDER_MISMATCH,
                key_path=key_path,
                message=f"Placeholders differ: {'; '.join(parts)}",
                reference=reference_value,
                translation=value,
            )
        )

    expected_plurals = [t.argument for t in reference_tokens if isinstance(t, PluralBlock)]
    found_plurals = [t.argument for t in tokens if isinstance(t, PluralBlock)]
    if expected_plurals != found_plurals:
        issues.append(
            ConformanceIssue(
                code=IssueCode.PLURAL_MISMATCH,
                key_path=key_path,
                message=(
                    f"Expected {len(expected_plurals)} plural block(s), "
                    f"found {len(found_plurals)}"
                    if len(expected_plurals) != len(found_plurals)
                    else "Plural blocks are bound to different arguments"
                ),
                reference=reference_value,
                translation=value,
            )
        )

    return issues


# =============================================================================
# Markup
# =============================================================================


def _markup_issues(
    key_path: str,
    reference_value: str,
    value: str,
    trusted: frozenset[str],
) -> list[ConformanceIssue]:
    issues: list[ConformanceIssue] = []
    tags = tag_names(value)

    if tags and key_path not in trusted:
        issues.append(
            ConformanceIssue(
                code=IssueCode.UNTRUSTED_MARKUP,
                key_path=key_path,
                message=f"Markup is not allowed at this key (tags: {', '.join(sorted(tags))})",
                translation=value,
            )
        )
    elif tags:
        problems = check_balance(value)
        if problems:
            issues.append(
                ConformanceIssue(
                    code=IssueCode.UNBALANCED_MARKUP,
                    key_path=key_path,
                    message="; ".join(problems),
                    reference=reference_value,
                    translation=value,
                )
            )

    reference_tags = tag_names(reference_value)
    if reference_tags != tags:
        issues.append(
            ConformanceIssue(
                code=IssueCode.MARKUP_TAGS_DIFFER,
                key_path=key_path,
                message=(
                    f"Tags differ from the reference: expected {sorted(reference_tags)}, "
                    f"found {sorted(tags)}"
                ),
                reference=reference_value,
                translation=value,
            )
        )

    return issues
