"""CLI application entry point for wacs-options.

This module is the **sole error boundary** for the entire application.
It catches :class:`~wacs_options.exceptions.WacsOptionsError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No binding logic lives here — all work is delegated to the core
  :class:`~wacs_options.core.binder.OptionsBinder`.
* ``print()`` is forbidden outside the CLI layer.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import logging
import sys

from wacs_options.cli import exit_codes
from wacs_options.cli.console import configure_logging, console, output
from wacs_options.core.binder import PROGRAM_NAME, OptionsBinder
from wacs_options.core.flags import build_registry
from wacs_options.core.models import HelpRequested, Options, VersionRequested
from wacs_options.exceptions import WacsOptionsError

log = logging.getLogger(__name__)


def _wants_verbose(binder: OptionsBinder, argv: list[str]) -> bool:
    """Logging must be configured before binding, so peek for ``--verbose``."""
    return "--verbose" in binder.flag_tokens(argv)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Bind and validate the command line, then show the result.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    ParseError, ValidationError
        Propagated to :func:`cli`, which maps them to exit codes.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    registry = build_registry()
    binder = OptionsBinder(registry)
    configure_logging(verbose=_wants_verbose(binder, args))

    result = binder.bind(args)

    if isinstance(result, HelpRequested):
        output.print(result.text, markup=False)
        return exit_codes.SUCCESS

    if isinstance(result, VersionRequested):
        output.print(f"{PROGRAM_NAME} {result.version}", markup=False)
        return exit_codes.SUCCESS

    options: Options = result
    log.info("Bound %d option(s) from the command line", len(options.explicit))

    from wacs_options.cli.summary import print_summary

    print_summary(options, registry)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except WacsOptionsError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
