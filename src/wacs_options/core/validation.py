"""Conditional validation — rules that only hold under a plugin selection.

Two concerns live here:

* **Scope** — whether a flag is meaningful given the bound options
  (:func:`flag_applies`).  A governing flag that is absent never
  matches.
* **Requirements** — flags that become mandatory once a governing
  selection is made (:data:`RULES`, :func:`validate`).

Everything in this module is a pure function of the registry and an
:class:`~wacs_options.core.models.Options` instance.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from wacs_options.core.flags import DNS01, HTTP01
from wacs_options.core.models import Options
from wacs_options.core.registry import FlagRegistry, FlagSpec, Scope
from wacs_options.exceptions import ValidationError


# ---------------------------------------------------------------------------
# Scope evaluation
# ---------------------------------------------------------------------------

def _selected_values(value: object) -> tuple[str, ...]:
    """Normalise a governing field value to lower-case selection strings."""
    if value is None:
        return ()
    if isinstance(value, bool):
        return ("true",) if value else ("false",)
    if isinstance(value, tuple):
        return tuple(str(item).lower() for item in value)
    return (str(value).lower(),)


def scope_matches(scope: Scope, options: Options, registry: FlagRegistry) -> bool:
    """True when the governing flag of *scope* holds one of its values."""
    governing = registry.lookup(scope.flag)
    if governing is None:
        return False
    selected = _selected_values(getattr(options, governing.field))
    wanted = {value.lower() for value in scope.values}
    return any(value in wanted for value in selected)


def flag_applies(spec: FlagSpec, options: Options, registry: FlagRegistry) -> bool:
    """True when every scope of *spec* matches the bound options."""
    return all(scope_matches(scope, options, registry) for scope in spec.scope)


def out_of_scope(options: Options, registry: FlagRegistry) -> list[FlagSpec]:
    """Explicitly given flags whose governing selection is not in effect."""
    return [
        spec
        for spec in registry.entries()
        if spec.scope
        and options.is_set(spec.field)
        and not flag_applies(spec, options, registry)
    ]


# ---------------------------------------------------------------------------
# Requirement rules
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Rule:
    """Under *when* (all scopes matching), every flag in *requires* must be set."""

    when: tuple[Scope, ...]
    requires: tuple[str, ...]

    def describe(self, options: Options, registry: FlagRegistry) -> str:
        """Render the governing condition as ``flag=value[, flag=value]``."""
        parts: list[str] = []
        for scope in self.when:
            governing = registry.lookup(scope.flag)
            selected = (
                _selected_values(getattr(options, governing.field))
                if governing is not None
                else ()
            )
            wanted = {value.lower() for value in scope.values}
            value = next((v for v in selected if v in wanted), scope.values[0])
            parts.append(f"{scope.flag}={value}")
        return ", ".join(parts)


RULES: tuple[Rule, ...] = (
    Rule(when=(Scope("target", ("iissite", "iissites")),), requires=("siteid",)),
    Rule(when=(Scope("target", ("iisbinding",)),), requires=("siteid", "host")),
    Rule(when=(Scope("target", ("manual",)),), requires=("host",)),
    Rule(
        when=(Scope("validationmode", (DNS01,)), Scope("validation", ("dnsscript",))),
        requires=("dnscreatescript", "dnsdeletescript"),
    ),
    Rule(
        when=(
            Scope("validationmode", (HTTP01,)),
            Scope("validation", ("ftp", "sftp", "webdav")),
        ),
        requires=("username", "password"),
    ),
    Rule(when=(Scope("store", ("centralssl",)),), requires=("centralsslstore",)),
    Rule(when=(Scope("installation", ("manual",)),), requires=("script",)),
)
"""Checked in order; the first violation is reported."""


def _is_missing(value: object) -> bool:
    """Absent, or given with nothing in it (``--host ""``, ``--siteid ,``)."""
    return value is None or value == "" or value == ()


def validate(
    options: Options,
    registry: FlagRegistry,
    rules: Sequence[Rule] = RULES,
) -> Options:
    """Check every rule whose governing selection is in effect.

    Returns *options* unchanged on success.

    Raises
    ------
    ValidationError
        Naming the first missing flag and its governing condition.
    """
    for rule in rules:
        if not all(scope_matches(scope, options, registry) for scope in rule.when):
            continue
        for name in rule.requires:
            spec = registry.lookup(name)
            if spec is None or _is_missing(getattr(options, spec.field)):
                raise ValidationError(name, rule.describe(options, registry))
    return options
