"""Tests for the built-in flag declarations (core/flags.py)."""

from __future__ import annotations

import pytest

from wacs_options.core.flags import (
    DEFAULT_SSL_IP_ADDRESS,
    DEFAULT_SSL_PORT,
    DEFAULT_VALIDATION_PORT,
    HTTP01,
    PORT_MAX,
    PORT_MIN,
    build_registry,
)
from wacs_options.core.models import Options
from wacs_options.core.registry import FlagKind, FlagRegistry

EXPECTED_ORDER = [
    "baseuri", "test", "import", "importbaseuri", "verbose",
    "renew", "force", "friendlyname", "cancel",
    "target", "siteid", "commonname", "excludebindings", "hidehttps", "host",
    "manualtargetisiis",
    "validation", "validationmode", "webroot", "validationport",
    "validationsiteid", "warmup", "username", "password", "dnscreatescript",
    "dnsdeletescript",
    "store", "keepexisting", "centralsslstore", "pfxpassword", "certificatestore",
    "installation", "installationsiteid", "ftpsiteid", "sslport", "sslipaddress",
    "script", "scriptparameters",
    "closeonfinish", "notaskscheduler", "usedefaulttaskuser",
    "accepttos", "emailaddress",
]


class TestDeclarations:
    def test_registration_order(self, registry: FlagRegistry) -> None:
        assert [spec.long_name for spec in registry.entries()] == EXPECTED_ORDER

    def test_every_field_exists_on_options(self, registry: FlagRegistry) -> None:
        for spec in registry.entries():
            assert hasattr(Options(), spec.field), spec.field

    def test_fresh_registry_per_call(self) -> None:
        assert build_registry() is not build_registry()

    @pytest.mark.parametrize(
        ("name", "default"),
        [
            ("validationmode", HTTP01),
            ("validationport", DEFAULT_VALIDATION_PORT),
            ("sslport", DEFAULT_SSL_PORT),
            ("sslipaddress", DEFAULT_SSL_IP_ADDRESS),
        ],
    )
    def test_defaults(self, registry: FlagRegistry, name: str, default: object) -> None:
        spec = registry.lookup(name)
        assert spec is not None
        assert spec.default == default

    def test_only_documented_flags_have_defaults(self, registry: FlagRegistry) -> None:
        with_default = {spec.long_name for spec in registry.entries() if spec.default is not None}
        assert with_default == {"validationmode", "validationport", "sslport", "sslipaddress"}

    @pytest.mark.parametrize(
        "name", ["siteid", "excludebindings", "host", "installation"],
    )
    def test_list_flags(self, registry: FlagRegistry, name: str) -> None:
        spec = registry.lookup(name)
        assert spec is not None
        assert spec.kind is FlagKind.LIST

    @pytest.mark.parametrize("name", ["validationport", "sslport"])
    def test_ports_are_bounded(self, registry: FlagRegistry, name: str) -> None:
        spec = registry.lookup(name)
        assert spec is not None
        assert (spec.minimum, spec.maximum) == (PORT_MIN, PORT_MAX) == (1, 65535)

    def test_only_ports_are_bounded(self, registry: FlagRegistry) -> None:
        bounded = {
            spec.long_name for spec in registry.entries()
            if spec.minimum is not None or spec.maximum is not None
        }
        assert bounded == {"validationport", "sslport"}

    def test_every_scope_names_a_registered_flag(self, registry: FlagRegistry) -> None:
        for spec in registry.entries():
            for scope in spec.scope:
                assert scope.flag in registry, (spec.long_name, scope.flag)

    def test_governing_flags_are_unscoped(self, registry: FlagRegistry) -> None:
        governing = {scope.flag for spec in registry.entries() for scope in spec.scope}
        for name in governing:
            spec = registry.lookup(name)
            assert spec is not None
            assert spec.scope == ()

    def test_scoped_help_text_prefix(self, registry: FlagRegistry) -> None:
        spec = registry.lookup("dnscreatescript")
        assert spec is not None
        assert spec.help_text.startswith(
            "[--validationmode dns-01 --validation dnsscript] "
        )

    def test_groups_are_contiguous(self, registry: FlagRegistry) -> None:
        groups = [spec.group for spec in registry.entries()]
        seen: list[str] = []
        for group in groups:
            if not seen or seen[-1] != group:
                assert group not in seen
                seen.append(group)
