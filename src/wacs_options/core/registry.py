"""Flag declarations — the registry every other core module reads from.

The registry is pure declaration: it knows each flag's canonical long
name, the :class:`~wacs_options.core.models.Options` field it populates,
its value kind, an optional default, and the description used for help
rendering.  It contains no binding or validation logic.

A fresh registry is built per invocation (see
:func:`wacs_options.core.flags.build_registry`); there is no
process-wide registry.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from wacs_options.exceptions import DuplicateFlagError

RESERVED_NAMES: frozenset[str] = frozenset({"help", "?", "version"})
"""Spellings handled by the binder itself; they can never be registered."""


class FlagKind(str, Enum):
    """How a flag's value token is interpreted."""

    BOOL = "bool"
    STR = "str"
    INT = "int"
    LIST = "list"

    @property
    def takes_value(self) -> bool:
        return self is not FlagKind.BOOL


# ---------------------------------------------------------------------------
# Scope — the plugin selection a flag is meaningful under
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Scope:
    """A governing selection, e.g. ``--target iissite|iissites``.

    *flag* is the governing flag's long name; *values* are the selections
    (compared case-insensitively) under which the dependent flag applies.
    """

    flag: str
    values: tuple[str, ...]

    def render(self) -> str:
        return f"--{self.flag} {'|'.join(self.values)}"


# ---------------------------------------------------------------------------
# Flag descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FlagSpec:
    """A single registered flag."""

    long_name: str
    """Canonical name without the ``--`` marker; matched case-insensitively."""

    field: str
    """Name of the :class:`Options` attribute this flag populates."""

    kind: FlagKind
    description: str
    default: object | None = None
    group: str = ""
    """Functional area used to group flags in help output."""

    scope: tuple[Scope, ...] = ()
    """All scopes must match for the flag to apply.  Empty = always applies."""

    minimum: int | None = None
    maximum: int | None = None
    """Inclusive bounds for ``INT`` flags; ``None`` leaves that side open."""

    @property
    def key(self) -> str:
        return self.long_name.lower()

    def accepts(self, number: int) -> bool:
        """True when *number* lies within the declared bounds."""
        if self.minimum is not None and number < self.minimum:
            return False
        return self.maximum is None or number <= self.maximum

    @property
    def help_text(self) -> str:
        """Description prefixed by its scope, as shown in ``--help``."""
        if not self.scope:
            return self.description
        prefix = " ".join(s.render() for s in self.scope)
        return f"[{prefix}] {self.description}"


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class FlagRegistry:
    """Ordered, case-insensitive collection of :class:`FlagSpec` entries.

    Insertion order is preserved because help output groups flags by
    the functional area they were declared under.
    """

    def __init__(self) -> None:
        self._by_key: dict[str, FlagSpec] = {}
        self._fields: dict[str, str] = {}

    def register(self, spec: FlagSpec) -> FlagSpec:
        """Add *spec* to the registry.

        Raises
        ------
        DuplicateFlagError
            If the long name (case-insensitive) or the target field is
            already registered, or the name is reserved.
        """
        if spec.key in self._by_key or spec.key in RESERVED_NAMES:
            raise DuplicateFlagError(spec.long_name)
        if spec.field in self._fields:
            raise DuplicateFlagError(self._fields[spec.field], field=spec.field)
        self._by_key[spec.key] = spec
        self._fields[spec.field] = spec.long_name
        return spec

    def add(
        self,
        long_name: str,
        field: str,
        kind: FlagKind,
        description: str,
        *,
        default: object | None = None,
        group: str = "",
        scope: tuple[Scope, ...] = (),
        minimum: int | None = None,
        maximum: int | None = None,
    ) -> FlagSpec:
        """Convenience wrapper building and registering a :class:`FlagSpec`."""
        return self.register(
            FlagSpec(
                long_name=long_name,
                field=field,
                kind=kind,
                description=description,
                default=default,
                group=group,
                scope=scope,
                minimum=minimum,
                maximum=maximum,
            )
        )

    def entries(self) -> tuple[FlagSpec, ...]:
        """All registered flags, in registration order."""
        return tuple(self._by_key.values())

    def lookup(self, name: str) -> FlagSpec | None:
        """Return the flag registered under *name*, ignoring case."""
        return self._by_key.get(name.lower())

    def for_field(self, field: str) -> FlagSpec | None:
        """Return the flag that populates *field*, if any."""
        name = self._fields.get(field)
        return self._by_key[name.lower()] if name is not None else None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._by_key

    def __iter__(self) -> Iterator[FlagSpec]:
        return iter(self._by_key.values())

    def __len__(self) -> int:
        return len(self._by_key)
