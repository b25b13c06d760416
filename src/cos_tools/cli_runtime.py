"""Glue between typer commands and operation execution."""

from typing import Callable, Optional

import click
import typer

from .binding.orchestrator import (
    CommandSpec,
    InvocationContext,
    validate_inputs_and_resolve_region,
)
from .core import get_logger
from .core.exceptions import (
    BindingError,
    CommandExecutionError,
    ConfigurationError,
    ValidationError,
)
from .core.plugin_config import PluginConfig
from .objectstorage.downloads import resolve_download_path, save_body
from .objectstorage.operations import OperationResult, execute_bound, execute_operation
from .render.formatter import get_renderer

logger = get_logger(__name__)

OUTPUT_FLAG = "output"
JSON_FLAG = "json"

# Compared by name: typer may run on its own bundled copy of click, whose
# ParameterSource is a different enum class.
_DEFAULT_SOURCES = frozenset({"DEFAULT", "DEFAULT_MAP"})


def flag_name(param: click.Parameter) -> str:
    """Long option name of ``param`` without dashes."""
    return param.opts[0].lstrip("-")


def invocation_from_click(ctx: click.Context) -> InvocationContext:
    """Capture the flags of the running command.

    A flag counts as set only when the user supplied it (on the command line
    or through the environment), never when it merely holds its default.
    """
    values = {}
    explicit = set()
    for param in ctx.command.params:
        if param.name is None:
            continue
        flag = flag_name(param)
        values[flag] = ctx.params.get(param.name)
        source = ctx.get_parameter_source(param.name)
        if source is not None and source.name not in _DEFAULT_SOURCES:
            explicit.add(flag)
    return InvocationContext(
        command=ctx.info_name or "", values=values, explicit=frozenset(explicit)
    )


def fail(message: str, ctx: Optional[click.Context] = None, show_help: bool = False) -> None:
    """Report a failure on stderr and exit with status 1."""
    typer.echo("FAILED", err=True)
    typer.echo(message, err=True)
    if show_help and ctx is not None:
        typer.echo("", err=True)
        typer.echo(ctx.get_help(), err=True)
    raise typer.Exit(1)


def _run(
    ctx: typer.Context,
    spec: CommandSpec,
    execute: Callable[[InvocationContext, PluginConfig], OperationResult],
) -> None:
    invocation = invocation_from_click(ctx)
    try:
        renderer = get_renderer(
            invocation.get(OUTPUT_FLAG), bool(invocation.get(JSON_FLAG))
        )
        result = execute(invocation, PluginConfig.from_settings())
    except BindingError as e:
        logger.warning("Invalid command input", command=spec.name, error=str(e))
        fail(str(e), ctx, show_help=True)
    except (ValidationError, ConfigurationError) as e:
        fail(str(e))
    except CommandExecutionError as e:
        fail(str(e))

    typer.echo(renderer.render(result))


def run_command(ctx: typer.Context, spec: CommandSpec) -> None:
    """Bind, execute and render one storage command."""
    _run(ctx, spec, lambda invocation, config: execute_operation(spec, invocation, config))


def run_download(
    ctx: typer.Context, spec: CommandSpec, outfile: Optional[str], force: bool
) -> None:
    """Run a download command, streaming the object body to a local file.

    The destination is checked after binding and before the request is sent.
    """

    def download(invocation: InvocationContext, config: PluginConfig) -> OperationResult:
        bound = validate_inputs_and_resolve_region(spec, invocation, config)
        destination = resolve_download_path(outfile, bound.request["Key"], config, force)
        result = execute_bound(spec, bound, invocation, config)
        save_body(result.response["Body"], destination)
        return result

    _run(ctx, spec, download)
