"""Persistent key/value configuration for cos-tools.

Values live in a small JSON document (``~/.cos-tools/config.json`` by
default). Environment overrides, collected from :class:`Settings`, are
layered on top of the file when reading, so a value exported in the
environment wins over a persisted one without ever being written back.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping, Optional

from .config import settings
from .exceptions import ConfigurationError
from .observability import get_logger

logger = get_logger(__name__)

# Persistence keys
DEFAULT_REGION = "Default Region"
HMAC_PROVIDED = "HMACProvided"
ACCESS_KEY_ID = "AccessKeyID"
SECRET_ACCESS_KEY = "SecretAccessKey"
FORCE_PATH_STYLE = "ForcePathStyle"
SERVICE_ENDPOINT = "Service Endpoint"
PROFILE = "Profile"
CRN = "CRN"
DOWNLOAD_LOCATION = "Download Location"
LAST_UPDATED = "Last Updated"

FALLBACK_DOWNLOAD_LOCATION = Path.home() / "Downloads"

# Authentication methods
IAM = "IAM"
HMAC = "HMAC"

# Bucket URL styles
VHOST = "VHost"
PATH = "Path"

STANDARD_TIME_FORMAT = "%A, %B %d %Y at %H:%M:%S"


class PluginConfig:
    """JSON-file backed configuration store."""

    def __init__(self, path: Path, overrides: Optional[Mapping[str, Any]] = None):
        self.path = Path(path)
        self._overrides = {k: v for k, v in (overrides or {}).items() if v is not None}
        self._data = self._load()

    @classmethod
    def from_settings(cls) -> "PluginConfig":
        """Build the store from the process settings."""
        return cls(
            settings.config_file,
            overrides={DEFAULT_REGION: settings.default_region},
        )

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError) as e:
            raise ConfigurationError(
                f"Unable to read configuration file '{self.path}': {e}"
            )
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file '{self.path}' must contain a JSON object"
            )
        return data

    def exists(self, key: str) -> bool:
        return key in self._overrides or key in self._data

    def get(self, key: str, default: Any = None) -> Any:
        if key in self._overrides:
            return self._overrides[key]
        return self._data.get(key, default)

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return a string value, or ``default`` when unset."""
        value = self.get(key)
        if value is None:
            return default
        if not isinstance(value, str):
            raise ConfigurationError(f"Configuration value '{key}' is not a string")
        return value

    def get_bool_with_default(self, key: str, default: bool) -> bool:
        """Return a boolean value, or ``default`` when unset."""
        value = self.get(key)
        if value is None:
            return default
        if not isinstance(value, bool):
            raise ConfigurationError(f"Configuration value '{key}' is not a boolean")
        return value

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._data[LAST_UPDATED] = datetime.now().strftime(STANDARD_TIME_FORMAT)
        self.save()

    def erase(self, key: str) -> None:
        if key in self._data:
            del self._data[key]
            self._data[LAST_UPDATED] = datetime.now().strftime(STANDARD_TIME_FORMAT)
            self.save()

    def save(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(self._data, indent=2, sort_keys=True), encoding="utf-8"
            )
        except OSError as e:
            raise ConfigurationError(
                f"Unable to write configuration file '{self.path}': {e}"
            )
        logger.debug("Configuration saved", path=str(self.path))
