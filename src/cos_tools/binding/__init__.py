"""Binding of CLI input into typed storage requests."""

from .coercion import Kind, coerce, stringify
from .fields import FieldBinder, FieldTable, default_binder
from .orchestrator import (
    BoundRequest,
    CommandSpec,
    InvocationContext,
    bind_request,
    validate_inputs_and_resolve_region,
)
from .region import resolve_region
from .shorthand import ListValue, Record, Scalar, parse_shorthand, parse_structured

__all__ = [
    "BoundRequest",
    "CommandSpec",
    "FieldBinder",
    "FieldTable",
    "InvocationContext",
    "Kind",
    "ListValue",
    "Record",
    "Scalar",
    "bind_request",
    "coerce",
    "default_binder",
    "parse_shorthand",
    "parse_structured",
    "resolve_region",
    "stringify",
    "validate_inputs_and_resolve_region",
]
