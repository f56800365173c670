"""Domain models for wacs-options.

All models are **frozen** dataclasses — immutable value objects built
once by the binder and handed to the rest of the workflow as read-only
input.  Every :class:`Options` field defaults to ``None`` so that an
absent flag can be told apart from one explicitly set to a zero value.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

SECRET_FIELDS: frozenset[str] = frozenset({"password", "pfx_password"})
REDACTED: str = "********"

_BOOKKEEPING: frozenset[str] = frozenset({"explicit", "ignored"})


# ---------------------------------------------------------------------------
# Bound options
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Options:
    """The fully bound command line of one invocation."""

    # Connection
    base_uri: str | None = None
    test: bool | None = None
    import_: bool | None = None
    import_base_uri: str | None = None
    verbose: bool | None = None

    # Lifecycle action
    renew: bool | None = None
    force: bool | None = None
    friendly_name: str | None = None
    cancel: bool | None = None

    # Target selection
    target: str | None = None
    site_id: tuple[str, ...] | None = None
    common_name: str | None = None
    exclude_bindings: tuple[str, ...] | None = None
    hide_https: bool | None = None
    host: tuple[str, ...] | None = None
    manual_target_is_iis: bool | None = None

    # Validation
    validation: str | None = None
    validation_mode: str | None = None
    web_root: str | None = None
    validation_port: int | None = None
    validation_site_id: str | None = None
    warmup: bool | None = None
    username: str | None = None
    password: str | None = None
    dns_create_script: str | None = None
    dns_delete_script: str | None = None

    # Storage
    store: str | None = None
    keep_existing: bool | None = None
    central_ssl_store: str | None = None
    pfx_password: str | None = None
    certificate_store: str | None = None

    # Installation
    installation: tuple[str, ...] | None = None
    installation_site_id: str | None = None
    ftp_site_id: str | None = None
    ssl_port: int | None = None
    ssl_ip_address: str | None = None
    script: str | None = None
    script_parameters: str | None = None

    # Account / misc
    close_on_finish: bool | None = None
    no_task_scheduler: bool | None = None
    use_default_task_user: bool | None = None
    accept_tos: bool | None = None
    email_address: str | None = None

    # Binding bookkeeping
    explicit: frozenset[str] = frozenset()
    """Fields whose flag appeared on the command line."""

    ignored: frozenset[str] = frozenset()
    """Fields that were given but do not apply to the selected plugins."""

    # ------------------------------------------------------------------
    # Presence
    # ------------------------------------------------------------------

    def is_set(self, field: str) -> bool:
        """True when *field* was explicitly supplied on the command line."""
        return field in self.explicit

    def as_dict(self, *, redact: bool = False) -> dict[str, object]:
        """Populated option fields in declaration order.

        With *redact*, values of :data:`SECRET_FIELDS` are masked so the
        result is safe to log or display.
        """
        result: dict[str, object] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in _BOOKKEEPING or value is None:
                continue
            result[f.name] = REDACTED if redact and f.name in SECRET_FIELDS else value
        return result

    # ------------------------------------------------------------------
    # Site id fallbacks
    # ------------------------------------------------------------------

    @property
    def primary_site_id(self) -> str | None:
        """First entry of :attr:`site_id`, or ``None``."""
        return self.site_id[0] if self.site_id else None

    @property
    def effective_validation_site_id(self) -> str | None:
        """``validation_site_id``, falling back to the target site id."""
        if self.validation_site_id is not None:
            return self.validation_site_id
        return self.primary_site_id

    @property
    def effective_installation_site_id(self) -> str | None:
        """``installation_site_id``, falling back to the target site id."""
        if self.installation_site_id is not None:
            return self.installation_site_id
        return self.primary_site_id

    @property
    def effective_ftp_site_id(self) -> str | None:
        """``ftp_site_id``, falling back to the installation site id."""
        if self.ftp_site_id is not None:
            return self.ftp_site_id
        return self.effective_installation_site_id


# ---------------------------------------------------------------------------
# Non-options outcomes of a bind call
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class HelpRequested:
    """The user asked for ``--help``; *text* is the rendered registry."""

    text: str


@dataclass(frozen=True, slots=True)
class VersionRequested:
    """The user asked for ``--version``."""

    version: str


BindResult = Options | HelpRequested | VersionRequested
