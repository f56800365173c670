"""Custom exception hierarchy for wacs-options.

Every error that leaves the core layer inherits from
:class:`WacsOptionsError` and carries enough structured detail (flag
name, governing condition) for the caller to build a message without
re-parsing the command line.

Hierarchy
---------
WacsOptionsError
├── DuplicateFlagError
├── ParseError
├── ValidationError
└── EnvironmentError
"""

from __future__ import annotations


class WacsOptionsError(Exception):
    """Base exception for all wacs-options errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Registry construction -------------------------------------------------

class DuplicateFlagError(WacsOptionsError):
    """Raised when a flag name (or target field) is registered twice.

    This is a programmer error in the flag declarations, never a user
    error.
    """

    def __init__(self, name: str, *, field: str | None = None) -> None:
        if field is None:
            message = f"Flag --{name} is already registered."
        else:
            message = f"Field '{field}' is already bound to another flag (--{name})."
        super().__init__(message)
        self.name: str = name
        self.field: str | None = field


# --- Binding ---------------------------------------------------------------

class ParseError(WacsOptionsError):
    """Raised when the argument vector cannot be bound.

    ``kind`` is one of the ``*`` class constants below; ``token`` is the
    offending flag name (without the ``--`` marker) or positional token.
    """

    UNKNOWN_OPTION = "unknown-option"
    MISSING_VALUE = "missing-value"
    INVALID_VALUE = "invalid-value"
    UNEXPECTED_ARGUMENT = "unexpected-argument"

    def __init__(
        self,
        kind: str,
        token: str,
        message: str,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.kind: str = kind
        self.token: str = token


class ValidationError(WacsOptionsError):
    """Raised when a conditionally-required flag is missing.

    ``field`` names the missing flag; ``condition`` is the governing
    selection in ``name=value`` form (e.g. ``target=iissite``).
    """

    def __init__(self, field: str, condition: str) -> None:
        conditions = " ".join(f"--{part.replace('=', ' ', 1)}" for part in condition.split(", "))
        super().__init__(
            f"Missing --{field}, which is required with {conditions}.",
            hint=f"Add --{field} <value> to the command line.",
        )
        self.field: str = field
        self.condition: str = condition


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(WacsOptionsError):
    """Raised when an optional runtime dependency is not available."""
