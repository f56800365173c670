"""Declaration of every recognized command-line flag.

Flags are registered in functional groups; the registration order is
the order in which ``--help`` lists them.  Flags that only make sense
under a particular plugin selection carry a :class:`Scope`, which is
also what prefixes their help text (``[--target iissite] ...``).
"""

from __future__ import annotations

from wacs_options.core.registry import FlagKind, FlagRegistry, Scope

HTTP01: str = "http-01"
DNS01: str = "dns-01"

DEFAULT_VALIDATION_PORT: int = 80
DEFAULT_SSL_PORT: int = 443
DEFAULT_SSL_IP_ADDRESS: str = "*"

PORT_MIN: int = 1
PORT_MAX: int = 65535

_BOOL = FlagKind.BOOL
_STR = FlagKind.STR
_INT = FlagKind.INT
_LIST = FlagKind.LIST


def _when(flag: str, *values: str) -> Scope:
    return Scope(flag=flag, values=values)


# ---------------------------------------------------------------------------
# Groups
# ---------------------------------------------------------------------------

def _register_connection(registry: FlagRegistry) -> None:
    group = "connection"
    registry.add(
        "baseuri", "base_uri", _STR,
        "The address of the ACME server to use.",
        group=group,
    )
    registry.add(
        "test", "test", _BOOL,
        "Enables testing behaviours in the program which may help with troubleshooting.",
        group=group,
    )
    registry.add(
        "import", "import_", _BOOL,
        "Import scheduled renewals from a previous version of the program.",
        group=group,
    )
    registry.add(
        "importbaseuri", "import_base_uri", _STR,
        "The address of the ACME server to use to import scheduled renewals from.",
        group=group,
        scope=(_when("import", "true"),),
    )
    registry.add(
        "verbose", "verbose", _BOOL,
        "Print additional log messages to console for troubleshooting.",
        group=group,
    )


def _register_lifecycle(registry: FlagRegistry) -> None:
    group = "lifecycle"
    registry.add(
        "renew", "renew", _BOOL,
        "Check for scheduled renewals.",
        group=group,
    )
    registry.add(
        "force", "force", _BOOL,
        "Force renewal on all scheduled certificates when used together with "
        "--renew. Otherwise just bypasses the certificate cache on new "
        "certificate requests.",
        group=group,
    )
    registry.add(
        "friendlyname", "friendly_name", _STR,
        "Give the friendly name of certificate, either to be used for creating "
        "a new one or to target a command (like --cancel or --renew) at a "
        "specific one.",
        group=group,
    )
    registry.add(
        "cancel", "cancel", _BOOL,
        "Cancels existing scheduled renewal as specified by the target parameters.",
        group=group,
    )


def _register_target(registry: FlagRegistry) -> None:
    group = "target"
    registry.add(
        "target", "target", _STR,
        "Specify which target plugin to run, bypassing the main menu and "
        "triggering unattended mode.",
        group=group,
    )
    registry.add(
        "siteid", "site_id", _LIST,
        "Specify identifier of the site that the plugin should create the "
        "target from. For the iissites plugin this may be a comma separated list.",
        group=group,
        scope=(_when("target", "iissite", "iissites", "iisbinding"),),
    )
    registry.add(
        "commonname", "common_name", _STR,
        "Specify the common name of the certificate that should be requested "
        "for the target.",
        group=group,
        scope=(_when("target", "iissite", "iissites", "manual"),),
    )
    registry.add(
        "excludebindings", "exclude_bindings", _LIST,
        "Exclude bindings from being included in the certificate. This may be "
        "a comma separated list.",
        group=group,
        scope=(_when("target", "iissite", "iissites"),),
    )
    registry.add(
        "hidehttps", "hide_https", _BOOL,
        "Hide sites that have existing https bindings.",
        group=group,
    )
    registry.add(
        "host", "host", _LIST,
        "A host name to manually get a certificate for. For the manual plugin "
        "this may be a comma separated list.",
        group=group,
        scope=(_when("target", "manual", "iisbinding"),),
    )
    registry.add(
        "manualtargetisiis", "manual_target_is_iis", _BOOL,
        "Is the target of the manual host an IIS website?",
        group=group,
        scope=(_when("target", "manual"),),
    )


def _register_validation(registry: FlagRegistry) -> None:
    group = "validation"
    http01 = _when("validationmode", HTTP01)
    registry.add(
        "validation", "validation", _STR,
        "Specify which validation plugin to run. Plugin-specific validation "
        "flags only apply when the plugin is named here.",
        group=group,
    )
    registry.add(
        "validationmode", "validation_mode", _STR,
        "Specify which validation mode to use.",
        default=HTTP01,
        group=group,
    )
    registry.add(
        "webroot", "web_root", _STR,
        "A web root for the manual host name for validation.",
        group=group,
        scope=(http01, _when("validation", "filesystem")),
    )
    registry.add(
        "validationport", "validation_port", _INT,
        "Port to use for listening to http-01 validation requests.",
        default=DEFAULT_VALIDATION_PORT,
        group=group,
        minimum=PORT_MIN,
        maximum=PORT_MAX,
        scope=(http01, _when("validation", "selfhosting")),
    )
    registry.add(
        "validationsiteid", "validation_site_id", _STR,
        "Specify site to use for handling validation requests. Defaults to --siteid.",
        group=group,
        scope=(http01, _when("validation", "filesystem", "iis")),
    )
    registry.add(
        "warmup", "warmup", _BOOL,
        "Warm up websites before attempting HTTP authorization.",
        group=group,
        scope=(http01,),
    )
    registry.add(
        "username", "username", _STR,
        "Username for ftp(s)/WebDav server.",
        group=group,
        scope=(http01, _when("validation", "ftp", "sftp", "webdav")),
    )
    registry.add(
        "password", "password", _STR,
        "Password for ftp(s)/WebDav server.",
        group=group,
        scope=(http01, _when("validation", "ftp", "sftp", "webdav")),
    )
    registry.add(
        "dnscreatescript", "dns_create_script", _STR,
        "Path to script to create TXT record. Parameters passed are the host "
        "name, record name and desired content.",
        group=group,
        scope=(_when("validationmode", DNS01), _when("validation", "dnsscript")),
    )
    registry.add(
        "dnsdeletescript", "dns_delete_script", _STR,
        "Path to script to remove TXT record. Parameters passed are the host "
        "name and record name.",
        group=group,
        scope=(_when("validationmode", DNS01), _when("validation", "dnsscript")),
    )


def _register_store(registry: FlagRegistry) -> None:
    group = "store"
    registry.add(
        "store", "store", _STR,
        "Specify which store plugin to use.",
        group=group,
    )
    registry.add(
        "keepexisting", "keep_existing", _BOOL,
        "While renewing, do not remove the previous certificate.",
        group=group,
    )
    registry.add(
        "centralsslstore", "central_ssl_store", _STR,
        "When using this setting, certificate files are stored to the CCS and "
        "IIS bindings are configured to reflect that.",
        group=group,
        scope=(_when("store", "centralssl"),),
    )
    registry.add(
        "pfxpassword", "pfx_password", _STR,
        "Password to set for .pfx files exported to the IIS CCS.",
        group=group,
        scope=(_when("store", "centralssl"),),
    )
    registry.add(
        "certificatestore", "certificate_store", _STR,
        "This setting can be used to target a specific Certificate Store for "
        "a renewal.",
        group=group,
        scope=(_when("store", "certificatestore"),),
    )


def _register_installation(registry: FlagRegistry) -> None:
    group = "installation"
    registry.add(
        "installation", "installation", _LIST,
        "Specify which installation plugins to use. This may be a comma "
        "separated list.",
        group=group,
    )
    registry.add(
        "installationsiteid", "installation_site_id", _STR,
        "Specify site to install new bindings to. Defaults to --siteid.",
        group=group,
        scope=(_when("installation", "iis"),),
    )
    registry.add(
        "ftpsiteid", "ftp_site_id", _STR,
        "Specify site to install certificate to. Defaults to --installationsiteid.",
        group=group,
        scope=(_when("installation", "iisftp"),),
    )
    registry.add(
        "sslport", "ssl_port", _INT,
        "Port to use for creating new HTTPS bindings.",
        default=DEFAULT_SSL_PORT,
        group=group,
        minimum=PORT_MIN,
        maximum=PORT_MAX,
        scope=(_when("installation", "iis"),),
    )
    registry.add(
        "sslipaddress", "ssl_ip_address", _STR,
        "IP address to use for creating new HTTPS bindings.",
        default=DEFAULT_SSL_IP_ADDRESS,
        group=group,
        scope=(_when("installation", "iis"),),
    )
    registry.add(
        "script", "script", _STR,
        "Path to script to run after retrieving the certificate.",
        group=group,
        scope=(_when("installation", "manual"),),
    )
    registry.add(
        "scriptparameters", "script_parameters", _STR,
        "Parameters for the script to run after retrieving the certificate.",
        group=group,
        scope=(_when("installation", "manual"),),
    )


def _register_misc(registry: FlagRegistry) -> None:
    group = "misc"
    registry.add(
        "closeonfinish", "close_on_finish", _BOOL,
        "Close the application when complete, which usually doesn't happen in "
        "test mode.",
        group=group,
        scope=(_when("test", "true"),),
    )
    registry.add(
        "notaskscheduler", "no_task_scheduler", _BOOL,
        "Do not create (or offer to update) the scheduled task.",
        group=group,
    )
    registry.add(
        "usedefaulttaskuser", "use_default_task_user", _BOOL,
        "Avoid the question about specifying the task scheduler user, as such "
        "defaulting to the SYSTEM account.",
        group=group,
    )


def _register_account(registry: FlagRegistry) -> None:
    group = "account"
    registry.add(
        "accepttos", "accept_tos", _BOOL,
        "Accept the ACME terms of service.",
        group=group,
    )
    registry.add(
        "emailaddress", "email_address", _STR,
        "Email address to use by ACME for renewal fail notices.",
        group=group,
    )


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def build_registry() -> FlagRegistry:
    """Build a fresh registry holding every recognized flag."""
    registry = FlagRegistry()
    _register_connection(registry)
    _register_lifecycle(registry)
    _register_target(registry)
    _register_validation(registry)
    _register_store(registry)
    _register_installation(registry)
    _register_misc(registry)
    _register_account(registry)
    return registry
