"""Destination selection and body streaming for object downloads."""

from pathlib import Path
from typing import Any, Optional

from botocore.exceptions import BotoCoreError

from cos_tools.binding.region import ConfigReader
from cos_tools.core import get_logger
from cos_tools.core.exceptions import CommandExecutionError, ValidationError
from cos_tools.core.plugin_config import DOWNLOAD_LOCATION, FALLBACK_DOWNLOAD_LOCATION

logger = get_logger(__name__)

OVERRIDE_HINT = "Override the default location by passing an OUTFILE argument."
CHUNK_SIZE = 1024 * 1024


def _invalid(message: str, outfile_given: bool) -> ValidationError:
    if not outfile_given:
        message = f"{message}\n{OVERRIDE_HINT}"
    return ValidationError(message)


def resolve_download_path(
    outfile: Optional[str], key: str, config: ConfigReader, force: bool = False
) -> Path:
    """Pick the file an object is downloaded to.

    ``outfile`` wins when given; otherwise the object key is placed under the
    configured download location (``~/Downloads`` when none is stored).

    Raises:
        ValidationError: If the destination is a directory, its parent does
            not exist, or a file is already there and ``force`` is not set
    """
    outfile_given = bool(outfile)
    if outfile_given:
        ends_in_separator = outfile.endswith(("/", "\\"))
        destination = Path(outfile).expanduser()
    else:
        location = Path(
            config.get_string(DOWNLOAD_LOCATION, str(FALLBACK_DOWNLOAD_LOCATION))
        ).expanduser()
        if not location.is_dir():
            raise ValidationError(
                f"The download directory '{location}' is invalid.\n"
                "Set a valid download location with 'cos-tools config ddl --ddl <path>'."
            )
        ends_in_separator = key.endswith("/")
        destination = location / key

    if ends_in_separator or destination.is_dir():
        raise _invalid(
            f"The download destination '{destination}' is a directory.", outfile_given
        )
    if not destination.parent.is_dir():
        raise _invalid(
            f"The download directory '{destination.parent}' is invalid.", outfile_given
        )
    if destination.exists() and not force:
        raise ValidationError(
            f"A file named '{destination.name}' already exists at '{destination.parent}'. "
            "Pass --force to overwrite it."
        )
    return destination


def save_body(body: Any, destination: Path) -> int:
    """Stream a response body into ``destination``; return the bytes written.

    A partially written file is removed when the transfer fails.

    Raises:
        CommandExecutionError: If the file cannot be written or the stream breaks
    """
    written = 0
    try:
        with open(destination, "wb") as handle:
            for chunk in body.iter_chunks(CHUNK_SIZE):
                handle.write(chunk)
                written += len(chunk)
    except (OSError, BotoCoreError) as e:
        destination.unlink(missing_ok=True)
        raise CommandExecutionError(f"Error writing '{destination}': {e}")
    finally:
        body.close()

    logger.info("Object body saved", path=str(destination), size=written)
    return written
