"""Validation and binding of command input into SDK requests.

A command declares which request fields it needs (``mandatory``) and which
it accepts (``optional``), each mapped to the CLI flag that carries the
value. :func:`bind_request` turns an :class:`InvocationContext` into a
request dict:

- mandatory fields are checked in declaration order and the first missing
  one aborts binding (no error accumulation);
- optional fields are bound only when their flag was explicitly given, and
  stay absent from the request otherwise.

Nothing here talks to the network; a request is returned only when every
declared field bound cleanly.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from cos_tools.core import get_logger
from cos_tools.core.exceptions import MissingMandatoryFieldError

from .fields import FieldBinder, default_binder
from .region import ConfigReader, resolve_region

logger = get_logger(__name__)

REGION_FLAG = "region"


class InvocationContext(BaseModel):
    """Flags of one command invocation.

    ``values`` holds the raw value of every flag the command defines;
    ``explicit`` names the flags the user actually provided.
    """

    model_config = ConfigDict(frozen=True)

    command: str = ""
    values: dict[str, Any] = Field(default_factory=dict)
    explicit: frozenset[str] = frozenset()

    @classmethod
    def from_flags(cls, flags: Mapping[str, Any], command: str = "") -> "InvocationContext":
        """Context in which every given flag counts as explicitly set."""
        return cls(command=command, values=dict(flags), explicit=frozenset(flags))

    def is_set(self, flag: str) -> bool:
        return flag in self.explicit

    def get(self, flag: str, default: Any = None) -> Any:
        return self.values.get(flag, default)


class CommandSpec(BaseModel):
    """Field declarations of one command."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., description="CLI command name")
    operation: str = Field(..., description="SDK operation name, e.g. DeleteObjects")
    mandatory: dict[str, str] = Field(
        default_factory=dict, description="Required field name -> flag name"
    )
    optional: dict[str, str] = Field(
        default_factory=dict, description="Optional field name -> flag name"
    )

    @model_validator(mode="after")
    def _check_declarations(self) -> "CommandSpec":
        overlap = set(self.mandatory) & set(self.optional)
        if overlap:
            raise ValueError(
                f"fields declared both mandatory and optional: {sorted(overlap)}"
            )
        flags = list(self.mandatory.values()) + list(self.optional.values())
        duplicates = {flag for flag in flags if flags.count(flag) > 1}
        if duplicates:
            raise ValueError(f"flag names used more than once: {sorted(duplicates)}")
        return self

    @property
    def flags(self) -> list[str]:
        return list(self.mandatory.values()) + list(self.optional.values())


@dataclass(frozen=True)
class BoundRequest:
    """A populated request and the region it targets."""

    request: dict[str, Any]
    region: str


def bind_request(
    spec: CommandSpec,
    invocation: InvocationContext,
    binder: Optional[FieldBinder] = None,
) -> dict[str, Any]:
    """Populate the request of ``spec.operation`` from ``invocation``.

    Raises:
        MissingMandatoryFieldError: On the first mandatory flag not provided
        BindingError: If any provided value fails to parse or convert
    """
    binder = binder or default_binder()
    table = binder.input_table(spec.operation)
    request: dict[str, Any] = {}

    for field_name, flag in spec.mandatory.items():
        if not invocation.is_set(flag):
            raise MissingMandatoryFieldError(field_name, f"missing flag --{flag}")
        binder.bind_field(request, table, field_name, invocation.get(flag))

    for field_name, flag in spec.optional.items():
        if invocation.is_set(flag):
            binder.bind_field(request, table, field_name, invocation.get(flag))

    logger.debug(
        "Request bound",
        command=spec.name,
        operation=spec.operation,
        fields=sorted(request),
    )
    return request


def validate_inputs_and_resolve_region(
    spec: CommandSpec,
    invocation: InvocationContext,
    config: ConfigReader,
    binder: Optional[FieldBinder] = None,
) -> BoundRequest:
    """Bind the request, then resolve the region it targets."""
    request = bind_request(spec, invocation, binder)
    explicit_region = (
        invocation.get(REGION_FLAG) if invocation.is_set(REGION_FLAG) else None
    )
    region = resolve_region(explicit_region, config)
    return BoundRequest(request=request, region=region)
