"""Allow ``python -m wacs_options`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m wacs_options`` behaves identically to the
``wacs-options`` console script.
"""

from __future__ import annotations

from wacs_options.cli.app import cli

if __name__ == "__main__":
    cli()
