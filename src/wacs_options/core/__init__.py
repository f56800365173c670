"""Core layer — the options model and its binding rules.

Rules
-----
* No ``print()`` calls.
* No filesystem, network or process I/O.
* No imports from ``cli``.
* Deterministic: the same registry and argument vector always yield
  the same result.
"""

from wacs_options.core.binder import OptionsBinder
from wacs_options.core.flags import build_registry
from wacs_options.core.models import BindResult, HelpRequested, Options, VersionRequested
from wacs_options.core.registry import FlagKind, FlagRegistry, FlagSpec, Scope
from wacs_options.core.validation import flag_applies, validate

__all__: list[str] = [
    "BindResult",
    "FlagKind",
    "FlagRegistry",
    "FlagSpec",
    "HelpRequested",
    "Options",
    "OptionsBinder",
    "Scope",
    "VersionRequested",
    "build_registry",
    "flag_applies",
    "validate",
]
