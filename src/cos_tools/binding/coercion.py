"""Conversion between raw flag text and typed request values."""

import math
import re
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Optional, Sequence

from cos_tools.core.exceptions import TypeCoercionError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INTEGER = re.compile(r"^[+-]?[0-9]+\Z")
_RFC3339 = re.compile(
    r"^([0-9]{4}-[0-9]{2}-[0-9]{2})[Tt ]([0-9]{2}:[0-9]{2}:[0-9]{2})"
    r"(?:\.([0-9]+))?([Zz]|[+-][0-9]{2}:[0-9]{2})\Z"
)
_DATE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}\Z")

DISPLAY_TIME_FORMAT = "%b %d, %Y at %H:%M:%S"


class Kind(str, Enum):
    """Primitive kinds a scalar field can hold."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    ENUM = "enum"
    BLOB = "blob"


_SHAPE_KINDS = {
    "string": Kind.STRING,
    "integer": Kind.INTEGER,
    "long": Kind.INTEGER,
    "float": Kind.FLOAT,
    "double": Kind.FLOAT,
    "boolean": Kind.BOOLEAN,
    "timestamp": Kind.TIMESTAMP,
    "blob": Kind.BLOB,
}


def kind_for_shape(type_name: str, enum: Optional[Sequence[str]] = None) -> Kind:
    """Map a service model type name to a :class:`Kind`."""
    if type_name == "string" and enum:
        return Kind.ENUM
    try:
        return _SHAPE_KINDS[type_name]
    except KeyError:
        raise ValueError(f"Unsupported scalar type: {type_name}")


def _to_integer(raw: Any, field: Optional[str]) -> int:
    if isinstance(raw, bool):
        raise TypeCoercionError(field, f"expected an integer, got {raw!r}")
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and _INTEGER.match(raw):
        value = int(raw)
    else:
        raise TypeCoercionError(field, f"expected an integer, got {raw!r}")

    if not INT64_MIN <= value <= INT64_MAX:
        raise TypeCoercionError(field, f"integer out of range: {value}")
    return value


def _to_float(raw: Any, field: Optional[str]) -> float:
    if isinstance(raw, bool):
        raise TypeCoercionError(field, f"expected a number, got {raw!r}")
    if isinstance(raw, (int, float)):
        return float(raw)
    try:
        value = float(str(raw).strip())
    except ValueError:
        raise TypeCoercionError(field, f"expected a number, got {raw!r}")
    if not math.isfinite(value):
        raise TypeCoercionError(field, f"expected a finite number, got {raw!r}")
    return value


def _to_boolean(raw: Any, field: Optional[str]) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        lowered = raw.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    raise TypeCoercionError(field, f"expected true or false, got {raw!r}")


def _parse_rfc3339(match: "re.Match[str]") -> datetime:
    day, clock, fraction, zone = match.groups()
    # fromisoformat before 3.11 takes only 3 or 6 fractional digits
    micro = f".{fraction[:6].ljust(6, '0')}" if fraction else ""
    offset = "+00:00" if zone in "Zz" else zone
    return datetime.fromisoformat(f"{day}T{clock}{micro}{offset}")


def _to_timestamp(raw: Any, field: Optional[str]) -> datetime:
    if isinstance(raw, bool):
        raise TypeCoercionError(field, f"expected a timestamp, got {raw!r}")

    text = str(raw).strip()
    try:
        if isinstance(raw, int):
            return datetime.fromtimestamp(raw, tz=timezone.utc)
        if _INTEGER.match(text):
            return datetime.fromtimestamp(int(text), tz=timezone.utc)
        if _DATE.match(text):
            parsed = date.fromisoformat(text)
            return datetime(parsed.year, parsed.month, parsed.day, tzinfo=timezone.utc)
        match = _RFC3339.match(text)
        if match:
            return _parse_rfc3339(match)
    except (ValueError, OverflowError, OSError) as e:
        raise TypeCoercionError(field, f"invalid timestamp {text!r}: {e}")
    raise TypeCoercionError(
        field, f"expected an RFC3339 timestamp (2006-01-02T15:04:05Z), got {text!r}"
    )


def coerce(
    raw: Any,
    kind: Kind,
    field: Optional[str] = None,
    allowed: Optional[Sequence[str]] = None,
) -> Any:
    """Convert a raw scalar to ``kind``.

    Args:
        raw: Flag text, or a native value decoded from JSON
        kind: Target kind
        field: Field path for error messages
        allowed: Permitted values when ``kind`` is :attr:`Kind.ENUM`

    Returns:
        The converted value

    Raises:
        TypeCoercionError: If the value does not convert exactly
    """
    if raw is None:
        raise TypeCoercionError(field, "a value is required")

    if kind is Kind.STRING:
        if isinstance(raw, (dict, list)):
            raise TypeCoercionError(field, "expected a string")
        return stringify(raw)
    if kind is Kind.ENUM:
        value = stringify(raw)
        if allowed is not None and value not in allowed:
            raise TypeCoercionError(
                field, f"{value!r} is not one of: {', '.join(allowed)}"
            )
        return value
    if kind is Kind.INTEGER:
        return _to_integer(raw, field)
    if kind is Kind.FLOAT:
        return _to_float(raw, field)
    if kind is Kind.BOOLEAN:
        return _to_boolean(raw, field)
    if kind is Kind.TIMESTAMP:
        return _to_timestamp(raw, field)
    if kind is Kind.BLOB:
        if isinstance(raw, bytes):
            return raw
        return stringify(raw).encode("utf-8")
    raise ValueError(f"Unsupported kind: {kind}")


def stringify(value: Any) -> str:
    """Render a typed value as text (inverse of :func:`coerce`)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def format_timestamp(value: datetime) -> str:
    """Human-friendly timestamp used in text output."""
    return value.strftime(DISPLAY_TIME_FORMAT)


def format_file_size(size: int) -> str:
    """Human readable size using multiples of 1024."""
    unit = 1024
    if size < unit:
        return f"{size} B"
    div, exp = unit, 0
    n = size // unit
    while n >= unit:
        div *= unit
        exp += 1
        n //= unit
    return f"{size / div:.2f} {'KMGTPE'[exp]}iB"
