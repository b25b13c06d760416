"""Execution of storage operations.

Ties the pieces of one command invocation together: binding and region
resolution, client construction for the resolved region and endpoint, and
the SDK call itself. Binding always completes before a client is created,
so invalid input never reaches the network.
"""

from dataclasses import dataclass
from typing import Any, Optional

from botocore import xform_name
from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError

from cos_tools.binding.fields import FieldBinder
from cos_tools.binding.orchestrator import (
    BoundRequest,
    CommandSpec,
    InvocationContext,
    validate_inputs_and_resolve_region,
)
from cos_tools.binding.region import ConfigReader
from cos_tools.core import get_logger, get_tracer
from cos_tools.core.exceptions import CommandExecutionError
from cos_tools.render.messages import MISSING_CREDENTIALS_MESSAGE, error_message

from .clients import S3ClientConfig, S3ClientManager

logger = get_logger(__name__)
tracer = get_tracer(__name__)

ENDPOINT_URL_FLAG = "endpoint-url"


@dataclass(frozen=True)
class OperationResult:
    """Outcome of one successful storage operation."""

    command: str
    operation: str
    request: dict[str, Any]
    response: dict[str, Any]
    region: str


def call_operation(
    client: Any, operation: str, request: dict[str, Any], region: str
) -> dict[str, Any]:
    """Invoke ``operation`` on ``client`` with ``request`` as keyword arguments.

    Raises:
        CommandExecutionError: If the service or the SDK reports a failure
    """
    method = getattr(client, xform_name(operation))
    with tracer.start_as_current_span(f"s3.{operation}") as span:
        span.set_attribute("cos.operation", operation)
        span.set_attribute("cos.region", region)
        try:
            response = method(**request)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code")
            logger.error(
                "Storage operation failed", operation=operation, code=code, error=str(e)
            )
            raise CommandExecutionError(error_message(code, str(e)), code=code)
        except NoCredentialsError as e:
            logger.error("No credentials available", operation=operation)
            raise CommandExecutionError(MISSING_CREDENTIALS_MESSAGE, code=type(e).__name__)
        except BotoCoreError as e:
            logger.error("Storage operation failed", operation=operation, error=str(e))
            raise CommandExecutionError(str(e), code=type(e).__name__)

    logger.info("Storage operation completed", operation=operation, region=region)
    return response


def execute_operation(
    spec: CommandSpec,
    invocation: InvocationContext,
    config: ConfigReader,
    binder: Optional[FieldBinder] = None,
) -> OperationResult:
    """Bind the request for ``spec``, then run it against the resolved region.

    Raises:
        BindingError: If the input does not bind; no client is created
        ConfigurationError: If the stored configuration is unusable
        CommandExecutionError: If the operation fails remotely
    """
    bound = validate_inputs_and_resolve_region(spec, invocation, config, binder)
    return execute_bound(spec, bound, invocation, config)


def execute_bound(
    spec: CommandSpec,
    bound: BoundRequest,
    invocation: InvocationContext,
    config: ConfigReader,
) -> OperationResult:
    """Run an already bound request."""
    endpoint_url = (
        invocation.get(ENDPOINT_URL_FLAG) if invocation.is_set(ENDPOINT_URL_FLAG) else None
    )
    client_config = S3ClientConfig.from_plugin_config(config, bound.region, endpoint_url)
    manager = S3ClientManager(client_config)

    logger.info(
        "Executing storage operation",
        command=spec.name,
        operation=spec.operation,
        region=bound.region,
    )
    response = call_operation(manager.client, spec.operation, bound.request, bound.region)

    return OperationResult(
        command=spec.name,
        operation=spec.operation,
        request=bound.request,
        response=response,
        region=bound.region,
    )
