"""Placeholder token recognition for translation strings.

Two token shapes are understood by the host runtime:

- arguments: ``{name}``, ``{name?}``, ``{name:type}``, ``{name|formatter}``
- plural blocks: ``{{singular|plural}}``, optionally bound as
  ``{{count:singular|plural}}``; ``??`` inside a form stands for the count

Only recognition lives here. Substitution is done by the consuming runtime.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from musicat_i18n.errors import PlaceholderSyntaxError

_NAME_RE = re.compile(r"^[A-Za-z0-9_]+$")
_PLURAL_BINDING_RE = re.compile(r"^\s*([A-Za-z_][A-Za-z0-9_]*)\s*:(.*)$", re.DOTALL)

COUNT_MARKER = "??"


@dataclass(frozen=True)
class Argument:
    """An interpolation point such as ``{text}``."""

    name: str
    start: int
    raw: str
    type: str | None = None
    optional: bool = False
    formatters: tuple[str, ...] = ()


@dataclass(frozen=True)
class PluralBlock:
    """A count-dependent choice such as ``{{1 folder | ?? folders}}``."""

    forms: tuple[str, ...]
    start: int
    raw: str
    argument: str | None = None

    @property
    def uses_count(self) -> bool:
        return any(COUNT_MARKER in form for form in self.forms)


Token = Argument | PluralBlock


def tokenize(text: str) -> list[Token]:
    """Return every placeholder token in ``text``, in order.

    Raises:
        PlaceholderSyntaxError: On an unclosed brace or an invalid argument.
    """
    tokens: list[Token] = []
    pos = 0
    while True:
        start = text.find("{", pos)
        if start < 0:
            return tokens

        if text.startswith("{{", start):
            end = text.find("}}", start + 2)
            if end < 0:
                raise PlaceholderSyntaxError(text, start, "Unclosed plural block")
            raw = text[start : end + 2]
            tokens.append(_parse_plural(text, text[start + 2 : end], start, raw))
            pos = end + 2
            continue

        end = text.find("}", start + 1)
        if end < 0 or "{" in text[start + 1 : end]:
            raise PlaceholderSyntaxError(text, start, "Unclosed placeholder")
        raw = text[start : end + 1]
        tokens.append(_parse_argument(text, text[start + 1 : end], start, raw))
        pos = end + 1


def arguments(text: str) -> list[Argument]:
    return [token for token in tokenize(text) if isinstance(token, Argument)]


def argument_names(text: str) -> frozenset[str]:
    """Names of the ``{name}`` interpolation points in ``text``."""
    return frozenset(arg.name for arg in arguments(text))


def plural_blocks(text: str) -> list[PluralBlock]:
    return [token for token in tokenize(text) if isinstance(token, PluralBlock)]


def _parse_argument(text: str, content: str, start: int, raw: str) -> Argument:
    head, *formatters = content.split("|")
    name_part, has_type, type_part = head.partition(":")
    name = name_part.strip()

    optional = name.endswith("?")
    if optional:
        name = name[:-1].rstrip()

    if not _NAME_RE.match(name):
        raise PlaceholderSyntaxError(text, start, f"Invalid placeholder name {name!r}")

    return Argument(
        name=name,
        start=start,
        raw=raw,
        type=(type_part.strip() or None) if has_type else None,
        optional=optional,
        formatters=tuple(f.strip() for f in formatters if f.strip()),
    )


def _parse_plural(text: str, content: str, start: int, raw: str) -> PluralBlock:
    if not content.strip():
        raise PlaceholderSyntaxError(text, start, "Empty plural block")

    argument = None
    match = _PLURAL_BINDING_RE.match(content)
    if match:
        argument, content = match.group(1), match.group(2)

    forms = tuple(form.strip() for form in content.split("|"))
    return PluralBlock(forms=forms, start=start, raw=raw, argument=argument)
