"""Storage client construction.

One client is built per command invocation, for the region the command
resolved. Credentials follow the stored authentication method:
    - HMAC: the access key pair saved with ``cos-tools config hmac``
    - IAM: the stored credential profile when there is one, otherwise the
      default boto3 credential chain (environment, shared files, roles)

Endpoints:
    Supports custom endpoints for IBM Cloud Object Storage, MinIO and other
    S3-compatible object storage providers via endpoint_url, and path-style
    addressing for services that do not support virtual-hosted buckets.
"""

from typing import Any, Dict, Optional

import boto3
from botocore.config import Config
from pydantic import BaseModel, ConfigDict, Field

from cos_tools.binding.region import ConfigReader
from cos_tools.core import get_logger
from cos_tools.core.exceptions import ConfigurationError
from cos_tools.core.plugin_config import (
    ACCESS_KEY_ID,
    CRN,
    FORCE_PATH_STYLE,
    HMAC_PROVIDED,
    PROFILE,
    SECRET_ACCESS_KEY,
)

from ..endpoints import resolve_endpoint

logger = get_logger(__name__)

# IAM-authenticated bucket listing and creation are scoped to a service instance.
SERVICE_INSTANCE_HEADER = "ibm-service-instance-id"
SERVICE_INSTANCE_OPERATIONS = ("ListBuckets", "CreateBucket")


class S3ClientConfig(BaseModel):
    """Configuration for S3 client connections.

    A profile and an HMAC key pair are never both set when the config is
    built with :meth:`from_plugin_config`; the profile is checked first.

    Example:
        # HMAC credentials against a custom endpoint
        config = S3ClientConfig(
            region_name="us-south",
            endpoint_url="https://s3.us-south.cloud-object-storage.appdomain.cloud",
            access_key_id="0123456789abcdef",
            secret_access_key="fedcba9876543210",
        )

        # MinIO endpoint with path-style requests
        config = S3ClientConfig(
            region_name="us-east-1",
            endpoint_url="http://localhost:9000",
            force_path_style=True,
        )
    """

    model_config = ConfigDict(extra="forbid")

    region_name: str = Field(..., description="Region the client signs for")
    access_key_id: Optional[str] = Field(None, description="HMAC access key ID")
    secret_access_key: Optional[str] = Field(None, description="HMAC secret access key")
    endpoint_url: Optional[str] = Field(
        None, description="Custom S3 endpoint URL for S3-compatible services"
    )
    aws_profile: Optional[str] = Field(
        None, description="AWS CLI profile name to use for credentials"
    )
    force_path_style: bool = Field(
        False, description="Use path-style instead of virtual-hosted bucket URLs"
    )
    service_instance_id: Optional[str] = Field(
        None, description="Service instance CRN sent when listing or creating buckets"
    )

    @classmethod
    def from_plugin_config(
        cls,
        config: ConfigReader,
        region: str,
        endpoint_url: Optional[str] = None,
    ) -> "S3ClientConfig":
        """Build the client configuration for one invocation.

        Args:
            config: Persisted configuration
            region: Resolved target region
            endpoint_url: Explicit ``--endpoint-url`` value, if any

        Raises:
            ConfigurationError: If HMAC authentication is selected but the
                keys are not stored
        """
        access_key_id = None
        secret_access_key = None
        aws_profile = None
        service_instance_id = None
        if config.get_bool_with_default(HMAC_PROVIDED, False):
            access_key_id = config.get_string(ACCESS_KEY_ID)
            secret_access_key = config.get_string(SECRET_ACCESS_KEY)
            if not access_key_id or not secret_access_key:
                raise ConfigurationError(
                    "HMAC authentication is selected but no HMAC keys are stored; "
                    "run 'cos-tools config hmac'"
                )
        else:
            aws_profile = config.get_string(PROFILE)
            service_instance_id = config.get_string(CRN)

        return cls(
            region_name=region,
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            endpoint_url=resolve_endpoint(region, config, endpoint_url),
            aws_profile=aws_profile,
            force_path_style=config.get_bool_with_default(FORCE_PATH_STYLE, False),
            service_instance_id=service_instance_id,
        )


class S3ClientManager:
    """Lazily creates the boto3 client for one :class:`S3ClientConfig`."""

    def __init__(self, config: S3ClientConfig):
        self.config = config
        self._client = None
        logger.info("S3 client manager initialized", region=config.region_name)

    @property
    def client(self):
        """Get or create S3 client instance."""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _create_client(self):
        """Create the boto3 client; profile, then HMAC keys, then the default chain."""
        kwargs: Dict[str, Any] = {
            "region_name": self.config.region_name,
        }

        if self.config.endpoint_url:
            kwargs["endpoint_url"] = self.config.endpoint_url

        if self.config.force_path_style:
            kwargs["config"] = Config(s3={"addressing_style": "path"})

        if self.config.aws_profile:
            session = boto3.Session(profile_name=self.config.aws_profile)
            client = session.client("s3", **kwargs)  # type: ignore
            logger.info(
                "S3 client created with profile", profile=self.config.aws_profile
            )
        else:
            if self.config.access_key_id and self.config.secret_access_key:
                kwargs.update(
                    {
                        "aws_access_key_id": self.config.access_key_id,
                        "aws_secret_access_key": self.config.secret_access_key,
                    }
                )
                logger.info("S3 client created with HMAC credentials")
            else:
                logger.info("S3 client created with default credential chain")

            client = boto3.client("s3", **kwargs)  # type: ignore

        if self.config.service_instance_id:
            self._register_service_instance(client, self.config.service_instance_id)
        return client

    @staticmethod
    def _register_service_instance(client: Any, instance_id: str) -> None:
        def add_header(request: Any, **kwargs: Any) -> None:
            request.headers[SERVICE_INSTANCE_HEADER] = instance_id

        for operation in SERVICE_INSTANCE_OPERATIONS:
            client.meta.events.register(f"before-sign.s3.{operation}", add_header)
        logger.debug(
            "Service instance header enabled", operations=SERVICE_INSTANCE_OPERATIONS
        )
