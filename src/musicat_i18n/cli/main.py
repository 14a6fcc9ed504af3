"""musicat-i18n command line.

Inspect the shipped locale bundles and check translations against the
reference bundle.
"""

from pathlib import Path
from typing import Annotated

import typer

from musicat_i18n.cli.common import (
    ACCENT,
    CYAN,
    RED,
    YELLOW,
    console,
    create_table,
    error,
    info,
    print_json,
    success,
    warn,
)
from musicat_i18n.config import I18nConfig
from musicat_i18n.conformance import ConformanceReport, Severity, check_bundle
from musicat_i18n.errors import LocalizationError
from musicat_i18n.keys import get_path, key_paths
from musicat_i18n.locales import (
    BASE_LOCALE,
    LOCALE_NAMES,
    TRUSTED_MARKUP_KEYS,
    available_locales,
    load_bundle,
    load_bundle_file,
)
from musicat_i18n.logging import configure_logging, get_logger
from musicat_i18n.markup import render

log = get_logger(__name__)

app = typer.Typer(
    name="musicat-i18n",
    help="Musicat locale bundles and translation conformance checks",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logs"),
    ] = False,
) -> None:
    """Configure logging and settings for every command."""
    settings = I18nConfig()
    configure_logging(
        level="DEBUG" if verbose else settings.log_level,
        json_output=settings.json_logs,
    )
    ctx.obj = settings


def _settings(ctx: typer.Context) -> I18nConfig:
    return ctx.obj if isinstance(ctx.obj, I18nConfig) else I18nConfig()


@app.command("locales")
def locales_cmd() -> None:
    """List the registered locales."""
    table = create_table("Locales", "Code", "Name", "Keys", "Base")
    for code in available_locales():
        bundle = load_bundle(code)
        table.add_row(
            code,
            LOCALE_NAMES[code],
            str(len(key_paths(bundle))),
            "✓" if code == BASE_LOCALE else "",
        )
    console.print(table)


@app.command("keys")
def keys_cmd(
    locale: Annotated[str, typer.Argument(help="Locale code")] = BASE_LOCALE,
    prefix: Annotated[
        str | None,
        typer.Option("--prefix", "-p", help="Only keys under this section (e.g. trackInfo)"),
    ] = None,
    json_out: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List the key paths of a locale bundle."""
    try:
        bundle = load_bundle(locale)
    except LocalizationError as e:
        error(e.message)
        raise typer.Exit(2) from e

    paths = key_paths(bundle)
    if prefix:
        paths = [p for p in paths if p == prefix or p.startswith(f"{prefix}.")]

    if json_out:
        print_json(paths)
        return
    for path in paths:
        console.print(path, markup=False, highlight=False, soft_wrap=True)


@app.command("get")
def get_cmd(
    key_path: Annotated[str, typer.Argument(help="Key path (e.g. sidebar.library)")],
    locale: Annotated[str, typer.Option("--locale", "-l", help="Locale code")] = BASE_LOCALE,
    render_html: Annotated[
        bool,
        typer.Option("--render", help="Show the value as the UI would inject it"),
    ] = False,
) -> None:
    """Print a single translated string."""
    try:
        bundle = load_bundle(locale)
        value = str(render(bundle, key_path)) if render_html else get_path(bundle, key_path)
    except LocalizationError as e:
        error(e.message)
        raise typer.Exit(1) from e

    console.print(value, markup=False, highlight=False, soft_wrap=True)
    if key_path in TRUSTED_MARKUP_KEYS and not render_html:
        info("This value is injected as trusted markup (use --render to preview).")


@app.command("check")
def check_cmd(
    ctx: typer.Context,
    locales: Annotated[
        list[str] | None,
        typer.Argument(help="Locales to check (default: all except the reference)"),
    ] = None,
    file: Annotated[
        Path | None,
        typer.Option("--file", "-f", help="Check a JSON bundle file instead"),
    ] = None,
    reference: Annotated[
        str | None,
        typer.Option("--reference", "-r", help="Reference locale (default from settings)"),
    ] = None,
    strict: Annotated[
        bool | None,
        typer.Option("--strict/--no-strict", help="Fail on warnings too"),
    ] = None,
    json_out: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Check translations against the reference bundle."""
    settings = _settings(ctx)
    reference_locale = reference or settings.reference_locale
    strict_mode = settings.strict if strict is None else strict

    try:
        reference_bundle = load_bundle(reference_locale)
        if file is not None:
            targets = [(file.stem, load_bundle_file(file))]
        else:
            codes = locales or [c for c in available_locales() if c != reference_locale]
            targets = [(code, load_bundle(code)) for code in codes]
    except LocalizationError as e:
        error(e.message)
        raise typer.Exit(2) from e

    reports = [
        check_bundle(
            bundle,
            reference_bundle,
            locale=code,
            reference_locale=reference_locale,
        )
        for code, bundle in targets
    ]
    failed = [r for r in reports if not r.passed(strict_mode)]

    if json_out:
        print_json([r.to_dict() for r in reports])
    else:
        for report in reports:
            _print_report(report, strict_mode)

    if failed:
        log.debug("Conformance failed", locales=",".join(r.locale for r in failed))
        raise typer.Exit(1)


def _print_report(report: ConformanceReport, strict: bool) -> None:
    title = f"{report.locale} vs {report.reference_locale}"
    if not report.issues:
        success(f"{title}: {report.checked_keys} keys conform")
        return

    table = create_table(title, "Key", "Code", "Severity", "Message")
    for issue in report.issues:
        color = RED if issue.severity is Severity.ERROR else YELLOW
        table.add_row(
            issue.key_path,
            issue.code.value,
            f"[{color}]{issue.severity.value}[/{color}]",
            issue.message,
        )
    console.print(table)

    summary = (
        f"[{ACCENT}]{report.locale}[/{ACCENT}]: "
        f"[{CYAN}]{len(report.errors)}[/{CYAN}] error(s), "
        f"[{CYAN}]{len(report.warnings)}[/{CYAN}] warning(s)"
    )
    if report.passed(strict):
        warn(summary)
    else:
        error(summary)


if __name__ == "__main__":
    app()
