"""Configuration management for cos-tools."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support.

    ``config_file`` holds the persisted plugin configuration. ``default_region``
    (``COS_TOOLS_DEFAULT_REGION``) overrides the stored default region for the
    current process without being written back.
    """

    log_level: str = "WARNING"
    otel_enabled: bool = False
    log_format: str = "json"
    otel_service_name: str = "cos-tools"

    config_file: Path = Path.home() / ".cos-tools" / "config.json"
    default_region: Optional[str] = None

    model_config = {
        "env_prefix": "COS_TOOLS_",
        "case_sensitive": False,
    }


settings = Settings()
