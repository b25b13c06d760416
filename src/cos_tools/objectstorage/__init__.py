"""Object storage clients and operation execution."""

from .clients import S3ClientConfig, S3ClientManager
from .endpoints import decode_location_constraint, resolve_endpoint
from .operations import OperationResult, call_operation, execute_bound, execute_operation

__all__ = [
    "OperationResult",
    "S3ClientConfig",
    "S3ClientManager",
    "call_operation",
    "execute_bound",
    "decode_location_constraint",
    "execute_operation",
    "resolve_endpoint",
]
