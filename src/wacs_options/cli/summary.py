"""Render a bound :class:`~wacs_options.core.models.Options` for the user.

Shows every populated option as a Rich table (flag, value, source),
grouped by functional area in registry order, followed by any flags
that were dropped because their plugin was not selected.  Falls back
to plain aligned text when Rich is not installed.
"""

from __future__ import annotations

import sys

from wacs_options.cli.console import output
from wacs_options.core.models import Options
from wacs_options.core.registry import FlagRegistry

SOURCE_EXPLICIT: str = "command line"
SOURCE_DEFAULT: str = "default"


def _format_value(value: object) -> str:
    if isinstance(value, tuple):
        return ", ".join(str(item) for item in value)
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)


def summary_rows(options: Options, registry: FlagRegistry) -> list[tuple[str, str, str, str]]:
    """Return ``(group, flag, value, source)`` rows for populated options."""
    populated = options.as_dict(redact=True)
    rows: list[tuple[str, str, str, str]] = []
    for spec in registry.entries():
        if spec.field not in populated:
            continue
        source = SOURCE_EXPLICIT if options.is_set(spec.field) else SOURCE_DEFAULT
        rows.append(
            (spec.group, f"--{spec.long_name}", _format_value(populated[spec.field]), source)
        )
    return rows


def _ignored_flags(options: Options, registry: FlagRegistry) -> list[str]:
    names: list[str] = []
    for field in sorted(options.ignored):
        spec = registry.for_field(field)
        names.append(f"--{spec.long_name}" if spec is not None else field)
    return names


def _print_plain_summary(
    rows: list[tuple[str, str, str, str]],
    ignored: list[str],
) -> None:
    """Render the summary without Rich."""
    print("\nResolved options", file=sys.stdout)
    print("=" * 64, file=sys.stdout)
    print(f"{'Group':<14} {'Flag':<22} {'Value':<18} {'Source':<8}", file=sys.stdout)
    print("-" * 64, file=sys.stdout)
    for group, flag, value, source in rows:
        print(f"{group:<14} {flag:<22} {value:<18} {source:<8}", file=sys.stdout)
    if ignored:
        print(f"\nIgnored (plugin not selected): {', '.join(ignored)}", file=sys.stdout)
    print(file=sys.stdout)


def print_summary(options: Options, registry: FlagRegistry) -> None:
    """Print the resolved options to stdout."""
    rows = summary_rows(options, registry)
    ignored = _ignored_flags(options, registry)

    try:
        from rich.markup import escape
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_summary(rows, ignored)
        return

    table = Table(
        title="Resolved options",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Group", style="dim", min_width=12)
    table.add_column("Flag", style="bold", min_width=20)
    table.add_column("Value", min_width=16)
    table.add_column("Source", justify="center", min_width=8)

    for group, flag, value, source in rows:
        table.add_row(group, flag, escape(value), source)

    output.print()
    output.print(table)
    if ignored:
        output.print(
            f"[yellow]Ignored (plugin not selected):[/yellow] {', '.join(ignored)}"
        )
    output.print()
