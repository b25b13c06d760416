"""Exception hierarchy for cos-tools."""

from enum import Enum
from typing import Optional


class CosToolsError(Exception):
    """Base exception for all cos-tools errors."""

    pass


class ValidationError(CosToolsError):
    """Raised when validation fails."""

    pass


class ConfigurationError(CosToolsError):
    """Raised when the persisted configuration cannot be read or written."""

    pass


class CommandExecutionError(CosToolsError):
    """Raised when a storage operation fails on the remote side."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.code = code


class BindingErrorKind(str, Enum):
    """Classification of request binding failures."""

    MISSING_MANDATORY_FIELD = "missing required field"
    UNKNOWN_FIELD = "unknown field"
    MALFORMED_SHORTHAND = "malformed shorthand"
    INVALID_VALUE = "invalid value"
    REGION_REQUIRED = "region required"


class BindingError(ValidationError):
    """Raised when CLI input cannot be turned into a request.

    Attributes:
        field: Path of the offending field (``Delete.Objects[0].Key``), or
            None when the error is not tied to a single field.
        cause: Human-readable explanation.
        kind: One of :class:`BindingErrorKind`.
    """

    kind = BindingErrorKind.INVALID_VALUE

    def __init__(self, field: Optional[str], cause: str):
        self.field = field
        self.cause = cause
        if field:
            message = f"{self.kind.value} '{field}': {cause}"
        else:
            message = f"{self.kind.value}: {cause}"
        super().__init__(message)


class MissingMandatoryFieldError(BindingError):
    """Raised when a required flag was not supplied."""

    kind = BindingErrorKind.MISSING_MANDATORY_FIELD


class UnknownFieldError(BindingError):
    """Raised when input names a field the target shape does not define."""

    kind = BindingErrorKind.UNKNOWN_FIELD


class MalformedShorthandError(BindingError):
    """Raised on shorthand syntax errors."""

    kind = BindingErrorKind.MALFORMED_SHORTHAND


class TypeCoercionError(BindingError):
    """Raised when a value cannot be converted to the declared type."""

    kind = BindingErrorKind.INVALID_VALUE


class RegionUnresolvedError(BindingError):
    """Raised when neither a flag nor the configuration provides a region."""

    kind = BindingErrorKind.REGION_REQUIRED
