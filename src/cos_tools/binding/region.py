"""Target region resolution."""

from typing import Optional, Protocol

from cos_tools.core import get_logger
from cos_tools.core.exceptions import ConfigurationError, RegionUnresolvedError
from cos_tools.core.plugin_config import DEFAULT_REGION

logger = get_logger(__name__)


class ConfigReader(Protocol):
    """Read access to named configuration values."""

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        ...

    def get_bool_with_default(self, key: str, default: bool) -> bool:
        ...


def resolve_region(explicit: Optional[str], config: ConfigReader) -> str:
    """Pick the single region a request targets.

    An explicit, non-empty ``--region`` value wins; otherwise the configured
    default region is used.

    Args:
        explicit: Value of the region flag, or None when not given
        config: Configuration reader providing the default region

    Returns:
        Non-empty region name

    Raises:
        RegionUnresolvedError: If neither source provides a region
    """
    if explicit and explicit.strip():
        logger.debug("Region taken from flag", region=explicit)
        return explicit.strip()

    try:
        configured = config.get_string(DEFAULT_REGION)
    except ConfigurationError as e:
        raise RegionUnresolvedError(None, f"unable to read the default region: {e}")

    if configured and configured.strip():
        logger.debug("Region taken from configuration", region=configured)
        return configured.strip()

    raise RegionUnresolvedError(
        None,
        "no region given; pass --region or store a default with "
        "'cos-tools config region --region <region>'",
    )
