"""Endpoint selection and location constraint decoding.

Buckets may be created with a location constraint that carries both the
region and the storage class, e.g. ``us-south-smart`` or ``us-geo-cold``.
The helpers here split such values and choose the service endpoint a
client should talk to.
"""

import re
from dataclasses import dataclass
from typing import Optional

from cos_tools.binding.region import ConfigReader
from cos_tools.core import get_logger
from cos_tools.core.plugin_config import SERVICE_ENDPOINT

logger = get_logger(__name__)

STORAGE_CLASSES = ["standard", "vault", "cold", "flex", "smart", "onerate_active"]

REGION_DECODER = re.compile(
    r"^(\w+(?:-\w+)??)(-geo)?(?:-(%s|\*))?$" % "|".join(STORAGE_CLASSES),
    re.IGNORECASE,
)

REGION_PLACEHOLDER = "{region}"


@dataclass(frozen=True)
class LocationConstraint:
    """Parts of a location constraint."""

    region: str
    cross_region: bool
    storage_class: str


def decode_location_constraint(value: Optional[str]) -> LocationConstraint:
    """Split a location constraint into region and storage class.

    Values that do not follow the ``<region>[-geo][-<class>]`` pattern are
    returned whole as the region.
    """
    text = (value or "").strip()
    match = REGION_DECODER.match(text)
    if match is None:
        return LocationConstraint(region=text, cross_region=False, storage_class="")
    region, geo, storage_class = match.groups()
    return LocationConstraint(
        region=region,
        cross_region=bool(geo),
        storage_class=(storage_class or "").lower(),
    )


def render_storage_class(storage_class: str) -> str:
    """Display name of a storage class."""
    if storage_class in ("", "standard"):
        return "Standard"
    if storage_class == "cold":
        return "Cold Vault"
    if storage_class == "onerate_active":
        return "One-rate Active"
    return storage_class.title()


def resolve_endpoint(
    region: str, config: ConfigReader, explicit: Optional[str] = None
) -> Optional[str]:
    """Choose the endpoint URL for ``region``.

    Precedence: explicit ``--endpoint-url``, then the configured service
    endpoint (``{region}`` is replaced by the region), then None to let the
    SDK derive the endpoint from the region.
    """
    if explicit and explicit.strip():
        return explicit.strip()

    configured = config.get_string(SERVICE_ENDPOINT)
    if configured and configured.strip():
        endpoint = configured.strip().replace(REGION_PLACEHOLDER, region)
        logger.debug("Endpoint taken from configuration", endpoint=endpoint)
        return endpoint

    return None
