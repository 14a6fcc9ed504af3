"""Markup fragments inside translation strings.

Some values (the artwork tooltip, for one) carry HTML that the UI injects
without escaping. Which key paths may do so is declared in
``musicat_i18n.locales.TRUSTED_MARKUP_KEYS``; ``render`` is the single
place where a value crosses from bundle data into renderable markup.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from html.parser import HTMLParser

from markupsafe import Markup, escape

from musicat_i18n.errors import MarkupError
from musicat_i18n.keys import TranslationTree, get_path
from musicat_i18n.locales import TRUSTED_MARKUP_KEYS
from musicat_i18n.logging import get_logger

log = get_logger(__name__)

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

_TAG_RE = re.compile(r"</?[A-Za-z][A-Za-z0-9-]*(?:\s[^<>]*)?/?>")


class _TagBalanceParser(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.open_tags: list[str] = []
        self.problems: list[str] = []
        self.tags: set[str] = set()

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self.tags.add(tag)
        if tag not in VOID_ELEMENTS:
            self.open_tags.append(tag)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self.tags.add(tag)

    def handle_endtag(self, tag: str) -> None:
        self.tags.add(tag)
        if tag in VOID_ELEMENTS:
            return
        if tag not in self.open_tags:
            self.problems.append(f"Unexpected closing tag </{tag}>")
            return
        # Anything opened after the matching tag was never closed
        while self.open_tags[-1] != tag:
            self.problems.append(f"Unclosed tag <{self.open_tags.pop()}>")
        self.open_tags.pop()

    def finish(self) -> None:
        self.close()
        self.problems.extend(f"Unclosed tag <{tag}>" for tag in reversed(self.open_tags))
        self.open_tags.clear()


def _parse(text: str) -> _TagBalanceParser:
    parser = _TagBalanceParser()
    parser.feed(text)
    parser.finish()
    return parser


def contains_markup(text: str) -> bool:
    return _TAG_RE.search(text) is not None


def tag_names(text: str) -> frozenset[str]:
    """Lower-cased names of every tag used in ``text``."""
    if not contains_markup(text):
        return frozenset()
    return frozenset(_parse(text).tags)


def check_balance(text: str) -> list[str]:
    """Describe every unbalanced tag in ``text``; empty when balanced."""
    if not contains_markup(text):
        return []
    return _parse(text).problems


def render(
    bundle: TranslationTree,
    key_path: str,
    trusted_keys: Iterable[str] | None = None,
) -> Markup:
    """Return the value at ``key_path`` ready for injection into HTML.

    Values at trusted key paths pass through verbatim once their tags are
    balanced; every other value is escaped.

    Raises:
        KeyPathError: If ``key_path`` does not address a string.
        MarkupError: If a trusted value has unbalanced tags.
    """
    if trusted_keys is None:
        trusted_keys = TRUSTED_MARKUP_KEYS

    value = get_path(bundle, key_path)
    if key_path not in set(trusted_keys):
        return escape(value)

    problems = check_balance(value)
    if problems:
        raise MarkupError(
            f"Refusing to render unbalanced markup at {key_path}",
            details={"key_path": key_path, "problems": problems},
        )
    log.debug("Rendering trusted markup", key_path=key_path)
    return Markup(value)
