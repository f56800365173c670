"""Options binder — raw argument vector in, :class:`Options` out.

This is the central service class consumed by the CLI layer.  It is
constructed with a :class:`~wacs_options.core.registry.FlagRegistry`
(built once per invocation) and exposes two entry points:

* :meth:`OptionsBinder.parse` — syntactic binding only.
* :meth:`OptionsBinder.bind` — binding, scope filtering and conditional
  validation.  This is the path normal execution goes through.

Guarantees
----------
* No I/O — help text is returned, never printed.
* Only :class:`~wacs_options.exceptions.WacsOptionsError` subclasses
  escape, and no partially bound :class:`Options` is ever returned.
* Defaults are applied only to flags absent from the argument vector.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace

from wacs_options.core.help_text import render_help
from wacs_options.core.models import BindResult, HelpRequested, Options, VersionRequested
from wacs_options.core.registry import FlagKind, FlagRegistry, FlagSpec
from wacs_options.core.validation import out_of_scope, validate
from wacs_options.exceptions import ParseError
from wacs_options.version import __version__

log = logging.getLogger(__name__)

FLAG_MARKER: str = "--"
HELP_TOKENS: frozenset[str] = frozenset({"--help", "-?", "--?"})
VERSION_TOKENS: frozenset[str] = frozenset({"--version"})

PROGRAM_NAME: str = "wacs-options"


def split_list(raw: str) -> tuple[str, ...]:
    """Split a comma separated value, dropping blank entries."""
    return tuple(part.strip() for part in raw.split(",") if part.strip())


class OptionsBinder:
    """Bind command-line tokens against a flag registry.

    Parameters
    ----------
    registry:
        The flags recognised for this invocation.
    """

    def __init__(self, registry: FlagRegistry) -> None:
        self._registry: FlagRegistry = registry

    @property
    def registry(self) -> FlagRegistry:
        return self._registry

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def bind(self, args: Sequence[str]) -> BindResult:
        """Bind *args*, drop out-of-scope flags, then validate.

        Raises
        ------
        ParseError
            On an unknown flag, a stray positional token, a missing or
            malformed value.
        ValidationError
            When a flag required by the selected plugins is absent.
        """
        result = self.parse(args)
        if not isinstance(result, Options):
            return result

        options = self._drop_out_of_scope(result)
        validate(options, self._registry)
        log.debug("Options: %s", options.as_dict(redact=True))
        return options

    def parse(self, args: Sequence[str]) -> BindResult:
        """Syntactic binding only; no scope or requirement checks.

        Raises
        ------
        ParseError
            On an unknown flag, a stray positional token, a missing or
            malformed value.
        """
        tokens = list(args)
        flags = set(self.flag_tokens(tokens))
        if flags & HELP_TOKENS:
            return HelpRequested(text=self.render_help())
        if flags & VERSION_TOKENS:
            return VersionRequested(version=__version__)

        values, explicit = self._scan(tokens)
        self._apply_defaults(values, explicit)
        return Options(**values, explicit=frozenset(explicit))

    def render_help(self) -> str:
        """Render every registered flag as help text."""
        return render_help(
            self._registry.entries(),
            header=f"{PROGRAM_NAME} {__version__}",
        )

    # ------------------------------------------------------------------
    # Token scanning
    # ------------------------------------------------------------------

    def flag_tokens(self, args: Sequence[str]) -> list[str]:
        """Lower-cased tokens standing in flag position.

        Tokens consumed as the value of a registered value-bearing flag
        are skipped, so ``--friendlyname -?`` names a certificate rather
        than asking for help.  Unknown tokens are kept and do not consume
        the token after them.
        """
        found: list[str] = []
        index = 0
        while index < len(args):
            token = args[index]
            found.append(token.lower())
            spec = (
                self._registry.lookup(token[len(FLAG_MARKER):])
                if token.startswith(FLAG_MARKER)
                else None
            )
            index += 2 if spec is not None and spec.kind.takes_value else 1
        return found

    def _scan(self, tokens: list[str]) -> tuple[dict[str, object], set[str]]:
        values: dict[str, object] = {}
        explicit: set[str] = set()
        index = 0
        while index < len(tokens):
            token = tokens[index]
            spec = self._match(token)
            if spec.field in explicit:
                log.debug("--%s given more than once; last value wins", spec.long_name)

            if spec.kind.takes_value:
                if index + 1 >= len(tokens):
                    raise ParseError(
                        ParseError.MISSING_VALUE,
                        spec.long_name,
                        f"Missing value for --{spec.long_name}.",
                        hint=f"Use --{spec.long_name} <value>.",
                    )
                values[spec.field] = self._convert(spec, tokens[index + 1])
                index += 2
            else:
                values[spec.field] = True
                index += 1
            explicit.add(spec.field)
        return values, explicit

    def _match(self, token: str) -> FlagSpec:
        if not token.startswith(FLAG_MARKER):
            raise ParseError(
                ParseError.UNEXPECTED_ARGUMENT,
                token,
                f"Unexpected argument: {token}",
                hint=f"Flags start with {FLAG_MARKER}; see --help.",
            )
        name = token[len(FLAG_MARKER):]
        spec = self._registry.lookup(name)
        if spec is None:
            raise ParseError(
                ParseError.UNKNOWN_OPTION,
                name.lower(),
                f"Unknown argument: {token}",
                hint="Run with --help to list the recognised flags.",
            )
        return spec

    @staticmethod
    def _convert(spec: FlagSpec, raw: str) -> object:
        if spec.kind is FlagKind.LIST:
            return split_list(raw)
        if spec.kind is FlagKind.INT:
            # Plain ASCII digits only: no sign, padding or underscores.
            if not (raw.isascii() and raw.isdigit()):
                raise ParseError(
                    ParseError.INVALID_VALUE,
                    spec.long_name,
                    f"Invalid value for --{spec.long_name}: {raw!r} is not a number.",
                )
            number = int(raw)
            if not spec.accepts(number):
                raise ParseError(
                    ParseError.INVALID_VALUE,
                    spec.long_name,
                    f"Invalid value for --{spec.long_name}: {number} is out of range.",
                    hint=f"Use a value from {spec.minimum} to {spec.maximum}.",
                )
            return number
        return raw

    # ------------------------------------------------------------------
    # Post-scan steps
    # ------------------------------------------------------------------

    def _apply_defaults(self, values: dict[str, object], explicit: set[str]) -> None:
        for spec in self._registry.entries():
            if spec.field not in explicit and spec.default is not None:
                values[spec.field] = spec.default

    def _drop_out_of_scope(self, options: Options) -> Options:
        ignored = out_of_scope(options, self._registry)
        if not ignored:
            return options

        changes: dict[str, object] = {}
        for spec in ignored:
            log.warning(
                "Ignoring --%s: it only applies with %s",
                spec.long_name,
                " ".join(scope.render() for scope in spec.scope),
            )
            changes[spec.field] = spec.default
        fields = frozenset(spec.field for spec in ignored)
        return replace(
            options,
            **changes,
            explicit=options.explicit - fields,
            ignored=fields,
        )
