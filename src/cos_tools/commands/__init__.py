"""CLI command implementations."""

from . import bucket, multipart, objects
from .config import config_app

STORAGE_COMMANDS = {**bucket.COMMANDS, **objects.COMMANDS, **multipart.COMMANDS}

__all__ = ["STORAGE_COMMANDS", "config_app"]
