"""Exit-code constants used by the CLI layer.

The core never decides exit codes; parse and validation failures are
mapped here by the error boundary in :mod:`wacs_options.cli.app`.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — options bound, or help/version printed."""

GENERAL_ERROR: int = 1
"""A known WacsOptionsError was caught. User-facing message was displayed."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
