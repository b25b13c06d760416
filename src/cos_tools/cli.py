"""Command-line interface for cos-tools.

Commands:
    - Bucket commands: list-buckets, create-bucket, delete-bucket, ...
    - Object commands: put-object, head-object, delete-objects, ...
    - Multipart commands: create-multipart-upload, upload-part, ...
    - config: manage the stored region, credentials and endpoint

Every storage command accepts --region, --endpoint-url and --output/--json.
Structured flags take shorthand, JSON or a file:// reference.
"""

from typing import Annotated, Optional

import typer

from . import __version__
from .commands import STORAGE_COMMANDS, config_app

app = typer.Typer(
    name="cos-tools",
    help="Work with buckets and objects in IBM Cloud Object Storage.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"cos-tools {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    cos-tools: bucket and object operations for S3-compatible storage.

    Run 'cos-tools config region --region <region>' once to set a default region.
    """
    pass


for _name, _command in STORAGE_COMMANDS.items():
    app.command(_name)(_command)

app.add_typer(config_app, name="config")


if __name__ == "__main__":
    app()
