"""Configuration commands.

Manage the persisted defaults every storage command reads: the default
region, HMAC credentials, the authentication method, the bucket URL style,
a custom service endpoint, a named credential profile, the service instance
CRN and the download location.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any, Callable, Optional

import typer

from cos_tools.cli_runtime import fail
from cos_tools.core import get_logger
from cos_tools.core.exceptions import ConfigurationError
from cos_tools.core.plugin_config import (
    ACCESS_KEY_ID,
    CRN,
    DEFAULT_REGION,
    DOWNLOAD_LOCATION,
    FALLBACK_DOWNLOAD_LOCATION,
    FORCE_PATH_STYLE,
    HMAC,
    HMAC_PROVIDED,
    IAM,
    LAST_UPDATED,
    PATH,
    PROFILE,
    SECRET_ACCESS_KEY,
    SERVICE_ENDPOINT,
    VHOST,
    PluginConfig,
)

logger = get_logger(__name__)

config_app = typer.Typer(
    name="config",
    help="Manage the stored cos-tools configuration.",
    no_args_is_help=True,
)

INVALID = "-INVALID-"


def mask(value: Any) -> str:
    """Hide a secret, keeping only its length."""
    if not isinstance(value, str):
        return INVALID
    return "*" * len(value)


def auth_label(value: Any) -> str:
    if not isinstance(value, bool):
        return INVALID
    return HMAC if value else IAM


def url_style_label(value: Any) -> str:
    if not isinstance(value, bool):
        return INVALID
    return PATH if value else VHOST


@dataclass(frozen=True)
class ConfigRow:
    """How one stored key is displayed by ``config list``."""

    key: str
    label: str = ""
    default: str = ""
    render: Optional[Callable[[Any], str]] = None

    def display(self, config: PluginConfig) -> tuple[str, str]:
        label = self.label or self.key
        if not config.exists(self.key):
            return label, self.default
        value = config.get(self.key)
        return label, self.render(value) if self.render else str(value)


CONFIG_ROWS = [
    ConfigRow(LAST_UPDATED, "Last Updated"),
    ConfigRow(DEFAULT_REGION, "Default Region"),
    ConfigRow(ACCESS_KEY_ID),
    ConfigRow(SECRET_ACCESS_KEY, render=mask),
    ConfigRow(HMAC_PROVIDED, "Authentication Method", auth_label(False), auth_label),
    ConfigRow(FORCE_PATH_STYLE, "URL Style", url_style_label(False), url_style_label),
    ConfigRow(SERVICE_ENDPOINT, "Service Endpoint"),
    ConfigRow(PROFILE, "Profile"),
    ConfigRow(CRN, "CRN"),
    ConfigRow(DOWNLOAD_LOCATION, "Download Location", str(FALLBACK_DOWNLOAD_LOCATION)),
]

ROWS = {row.key: row for row in CONFIG_ROWS}


def format_table(rows: list[tuple[str, str]]) -> str:
    """Two-column ``Key``/``Value`` table."""
    rows = [("Key", "Value")] + rows
    width = max(len(label) for label, _ in rows)
    return "\n".join(f"{label.ljust(width)}   {value}".rstrip() for label, value in rows)


def _load() -> PluginConfig:
    try:
        return PluginConfig.from_settings()
    except ConfigurationError as e:
        fail(str(e))


def _save(config: PluginConfig, key: str, value: Any) -> None:
    try:
        config.set(key, value)
    except ConfigurationError as e:
        fail(str(e))
    logger.info("Configuration updated", key=key)


def _has_hmac_keys(config: PluginConfig) -> bool:
    try:
        return bool(
            config.get_string(ACCESS_KEY_ID) and config.get_string(SECRET_ACCESS_KEY)
        )
    except ConfigurationError as e:
        fail(str(e))


@config_app.command("list")
def list_cmd() -> None:
    """List the stored configuration."""
    config = _load()
    typer.echo(format_table([row.display(config) for row in CONFIG_ROWS]))


@config_app.command("region")
def region_cmd(
    region: Annotated[
        Optional[str], typer.Option("--region", help="Default region for commands")
    ] = None,
    list_: Annotated[
        bool, typer.Option("--list", help="Show the stored default region")
    ] = False,
) -> None:
    """Store the default region."""
    config = _load()
    if list_:
        typer.echo(format_table([ROWS[DEFAULT_REGION].display(config)]))
        return
    if not region or not region.strip():
        fail("A region is required; pass --region <region>.")

    _save(config, DEFAULT_REGION, region.strip())
    typer.echo("OK")
    typer.echo(
        "Successfully saved default region. The program will look for buckets "
        f"in the region {region.strip()}."
    )


@config_app.command("hmac")
def hmac_cmd(
    access_key_id: Annotated[
        Optional[str], typer.Option("--access-key-id", help="HMAC access key ID")
    ] = None,
    secret_access_key: Annotated[
        Optional[str],
        typer.Option("--secret-access-key", help="HMAC secret access key"),
    ] = None,
    list_: Annotated[
        bool, typer.Option("--list", help="Show the stored HMAC credentials")
    ] = False,
) -> None:
    """Store HMAC credentials."""
    config = _load()
    if list_:
        keys = (ACCESS_KEY_ID, SECRET_ACCESS_KEY)
        typer.echo(format_table([ROWS[key].display(config) for key in keys]))
        return
    if not access_key_id or not secret_access_key:
        fail("Both --access-key-id and --secret-access-key are required.")

    _save(config, ACCESS_KEY_ID, access_key_id)
    _save(config, SECRET_ACCESS_KEY, secret_access_key)
    typer.echo("OK")
    typer.echo("Successfully saved HMAC Credentials to file.")


@config_app.command("auth")
def auth_cmd(
    method: Annotated[
        Optional[str], typer.Option("--method", help="Authentication method: IAM or HMAC")
    ] = None,
    list_: Annotated[
        bool, typer.Option("--list", help="Show the authentication method")
    ] = False,
) -> None:
    """Switch between IAM and HMAC authentication."""
    config = _load()
    if list_:
        typer.echo(format_table([ROWS[HMAC_PROVIDED].display(config)]))
        return

    chosen = (method or "").strip().upper()
    if chosen not in (IAM, HMAC):
        fail(f"Invalid authentication method '{method}'. Must be {IAM} or {HMAC}.")
    if chosen == HMAC and not _has_hmac_keys(config):
        fail("No HMAC credentials are stored; run 'cos-tools config hmac' first.")

    _save(config, HMAC_PROVIDED, chosen == HMAC)
    typer.echo("OK")
    typer.echo(
        f"Successfully switched to {chosen}-based authentication. The program will "
        f"access your Cloud Object Storage account using your {chosen} Credentials."
    )


@config_app.command("url-style")
def url_style_cmd(
    style: Annotated[
        Optional[str], typer.Option("--style", help="Bucket URL style: VHost or Path")
    ] = None,
    list_: Annotated[bool, typer.Option("--list", help="Show the URL style")] = False,
) -> None:
    """Switch between virtual-hosted and path-style bucket URLs."""
    config = _load()
    if list_:
        typer.echo(format_table([ROWS[FORCE_PATH_STYLE].display(config)]))
        return

    chosen = (style or "").strip().upper()
    if chosen not in (VHOST.upper(), PATH.upper()):
        fail(f"Invalid URL style '{style}'. Must be {VHOST} or {PATH}.")
    force_path_style = chosen == PATH.upper()

    _save(config, FORCE_PATH_STYLE, force_path_style)
    typer.echo("OK")
    typer.echo(
        f"Successfully switched to {url_style_label(force_path_style)} URL style."
    )


@config_app.command("endpoint-url")
def endpoint_url_cmd(
    url: Annotated[
        Optional[str],
        typer.Option("--url", help="Service endpoint; {region} is replaced by the region"),
    ] = None,
    clear: Annotated[
        bool, typer.Option("--clear", help="Remove the stored service endpoint")
    ] = False,
    list_: Annotated[
        bool, typer.Option("--list", help="Show the stored service endpoint")
    ] = False,
) -> None:
    """Set or clear a custom service endpoint."""
    config = _load()
    if list_:
        typer.echo(format_table([ROWS[SERVICE_ENDPOINT].display(config)]))
        return
    if clear == bool(url):
        fail("Pass exactly one of --url or --clear.")

    if clear:
        try:
            config.erase(SERVICE_ENDPOINT)
        except ConfigurationError as e:
            fail(str(e))
        typer.echo("OK")
        typer.echo("Successfully cleared service endpoint URL.")
        return

    _save(config, SERVICE_ENDPOINT, url.strip())
    typer.echo("OK")
    typer.echo(f"Successfully updated service endpoint URL to {url.strip()}.")


@config_app.command("profile")
def profile_cmd(
    name: Annotated[
        Optional[str], typer.Option("--name", help="Credential profile name")
    ] = None,
    clear: Annotated[
        bool, typer.Option("--clear", help="Remove the stored profile")
    ] = False,
) -> None:
    """Set or clear the credential profile used with IAM authentication."""
    config = _load()
    if clear == bool(name):
        fail("Pass exactly one of --name or --clear.")

    if clear:
        try:
            config.erase(PROFILE)
        except ConfigurationError as e:
            fail(str(e))
        typer.echo("OK")
        typer.echo("Successfully cleared credential profile.")
        return

    _save(config, PROFILE, name.strip())
    typer.echo("OK")
    typer.echo(f"Successfully saved credential profile '{name.strip()}'.")


@config_app.command("crn")
def crn_cmd(
    crn: Annotated[
        Optional[str],
        typer.Option("--crn", help="Service instance CRN or ID sent with IAM requests"),
    ] = None,
    clear: Annotated[
        bool, typer.Option("--clear", help="Remove the stored service instance ID")
    ] = False,
    list_: Annotated[
        bool, typer.Option("--list", help="Show the stored service instance ID")
    ] = False,
) -> None:
    """Store the service instance ID used to list and create buckets."""
    config = _load()
    if list_:
        typer.echo(format_table([ROWS[CRN].display(config)]))
        return
    if clear == bool(crn and crn.strip()):
        fail("Pass exactly one of --crn or --clear.")

    if clear:
        try:
            config.erase(CRN)
        except ConfigurationError as e:
            fail(str(e))
        typer.echo("OK")
        typer.echo("Successfully cleared your service instance ID.")
        return

    _save(config, CRN, crn.strip())
    typer.echo("OK")
    typer.echo("Successfully stored your service instance ID.")


@config_app.command("ddl")
def ddl_cmd(
    ddl: Annotated[
        Optional[str],
        typer.Option("--ddl", help="Directory get-object writes to when no OUTFILE is given"),
    ] = None,
    list_: Annotated[
        bool, typer.Option("--list", help="Show the download location")
    ] = False,
) -> None:
    """Set the default download location."""
    config = _load()
    if list_:
        typer.echo(format_table([ROWS[DOWNLOAD_LOCATION].display(config)]))
        return
    if not ddl or not ddl.strip():
        fail("A download location is required; pass --ddl <path>.")

    location = Path(ddl.strip()).expanduser()
    if not location.is_dir():
        fail(f"The download location '{location}' is not an existing directory.")

    _save(config, DOWNLOAD_LOCATION, str(location))
    typer.echo("OK")
    typer.echo(
        "Successfully saved download location. New files will be downloaded "
        f"to '{location}'."
    )
