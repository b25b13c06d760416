"""Rendering of operation results.

Both renderers walk the response alongside the operation's output shape, so
fields come out in the order the service model declares them and anything
the model does not declare (``ResponseMetadata``) is left out.
"""

import base64
import json
import re
from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional, Protocol

from botocore.model import ListShape, MapShape, Shape, StructureShape

from cos_tools.binding.coercion import format_file_size, format_timestamp, stringify
from cos_tools.binding.fields import FieldBinder, default_binder
from cos_tools.core import get_logger
from cos_tools.core.exceptions import ValidationError
from cos_tools.objectstorage.endpoints import (
    decode_location_constraint,
    render_storage_class,
)

from .messages import (
    EMPTY_COLLECTION_MESSAGES,
    empty_result_message,
    fill,
    success_message,
)

if TYPE_CHECKING:
    from cos_tools.objectstorage.operations import OperationResult

logger = get_logger(__name__)

OUTPUT_TEXT = "text"
OUTPUT_JSON = "json"
OUTPUT_FORMATS = (OUTPUT_TEXT, OUTPUT_JSON)

SIZE_FIELDS = frozenset({"Size", "ContentLength", "ObjectSize"})

# Commands whose text output is a short summary instead of a field dump.
LOCATION_COMMANDS = ("get-bucket-location", "get-bucket-class")

INDENT = "  "

_LABEL_BREAK = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z]{2})(?=[A-Z][a-z])")


def humanize(name: str) -> str:
    """Turn a member name into a display label (``LastModified`` -> ``Last Modified``)."""
    return _LABEL_BREAK.sub(" ", name)


def _is_stream(value: Any) -> bool:
    return hasattr(value, "read")


def _populated(value: Any) -> bool:
    return value is not None and not _is_stream(value)


def to_canonical(shape: Optional[Shape], value: Any) -> Any:
    """Reduce a response value to JSON-compatible data following ``shape``.

    Unset members are omitted, timestamps become ISO-8601 strings and blobs
    are base64 encoded.
    """
    if isinstance(shape, StructureShape):
        return {
            name: to_canonical(member, value[name])
            for name, member in shape.members.items()
            if name in value and _populated(value[name])
        }
    if isinstance(shape, ListShape):
        return [to_canonical(shape.member, item) for item in value]
    if isinstance(shape, MapShape):
        return {key: to_canonical(shape.value, item) for key, item in value.items()}
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    return value


class Renderer(Protocol):
    def render(self, result: "OperationResult") -> str: ...


class JsonRenderer:
    """Renders the response as an indented JSON document."""

    def __init__(self, binder: Optional[FieldBinder] = None):
        self.binder = binder or default_binder()

    def render(self, result: "OperationResult") -> str:
        shape = self.binder.output_shape(result.operation)
        document = to_canonical(shape, result.response) if shape is not None else {}
        return json.dumps(document, indent=2, ensure_ascii=False)


class TextRenderer:
    """Renders the response as ``Label: value`` lines after an ``OK`` line."""

    def __init__(self, binder: Optional[FieldBinder] = None):
        self.binder = binder or default_binder()

    def render(self, result: "OperationResult") -> str:
        lines = ["OK"]
        message = success_message(result.command, result.request, result.region)
        if message:
            lines.append(message)

        if result.command in LOCATION_COMMANDS:
            lines.extend(self._location_summary(result))
            return "\n".join(lines)

        shape = self.binder.output_shape(result.operation)
        body: list[str] = []
        if shape is not None:
            self._render_structure(shape, result.response, 0, body)

        empty_note = self._empty_collection_note(result)
        if empty_note:
            body.append(empty_note)

        if body:
            lines.extend(body)
        elif not message:
            lines.append(empty_result_message(result.command, result.request))
        return "\n".join(lines)

    def _location_summary(self, result: "OperationResult") -> list[str]:
        location = decode_location_constraint(result.response.get("LocationConstraint"))
        lines = [fill("Details about bucket '{Bucket}':", result.request)]
        if result.command == "get-bucket-location":
            lines.append(f"Region: {location.region or result.region}")
        lines.append(f"Class: {render_storage_class(location.storage_class)}")
        return lines

    def _empty_collection_note(self, result: "OperationResult") -> Optional[str]:
        entry = EMPTY_COLLECTION_MESSAGES.get(result.command)
        if entry is None:
            return None
        member, template = entry
        if result.response.get(member):
            return None
        return fill(template, result.request, result.region)

    def _render_structure(
        self, shape: StructureShape, value: dict, depth: int, lines: list[str]
    ) -> None:
        pad = INDENT * depth
        for name, member in shape.members.items():
            item = value.get(name)
            if not _populated(item):
                continue
            label = humanize(name)

            if isinstance(member, StructureShape):
                lines.append(f"{pad}{label}:")
                self._render_structure(member, item, depth + 1, lines)
            elif isinstance(member, ListShape):
                self._render_list(label, member, item, depth, lines)
            elif isinstance(member, MapShape):
                if not item:
                    continue
                lines.append(f"{pad}{label}:")
                for key, entry in item.items():
                    lines.append(f"{pad}{INDENT}{key}: {self._scalar(key, entry)}")
            else:
                lines.append(f"{pad}{label}: {self._scalar(name, item)}")

    def _render_list(
        self, label: str, shape: ListShape, items: list, depth: int, lines: list[str]
    ) -> None:
        if not items:
            return
        pad = INDENT * depth
        if isinstance(shape.member, StructureShape):
            for index, item in enumerate(items, start=1):
                lines.append(f"{pad}{label} {index}:")
                self._render_structure(shape.member, item, depth + 1, lines)
        else:
            rendered = ", ".join(self._scalar(label, item) for item in items)
            lines.append(f"{pad}{label}: {rendered}")

    @staticmethod
    def _scalar(name: str, value: Any) -> str:
        if name in SIZE_FIELDS and isinstance(value, int) and not isinstance(value, bool):
            return format_file_size(value)
        if isinstance(value, datetime):
            return format_timestamp(value)
        return stringify(value)


def get_renderer(
    output: Optional[str] = None,
    json_flag: bool = False,
    binder: Optional[FieldBinder] = None,
) -> Renderer:
    """Select the renderer for ``--output``/``--json``.

    Raises:
        ValidationError: If the format is unknown or the two flags disagree
    """
    fmt = (output or OUTPUT_TEXT).strip().lower()
    if fmt not in OUTPUT_FORMATS:
        raise ValidationError(
            f"Invalid output format '{output}'. Must be one of: {', '.join(OUTPUT_FORMATS)}"
        )
    if json_flag:
        if output is not None and fmt != OUTPUT_JSON:
            raise ValidationError("--json cannot be combined with --output text")
        fmt = OUTPUT_JSON

    logger.debug("Renderer selected", output=fmt)
    if fmt == OUTPUT_JSON:
        return JsonRenderer(binder)
    return TextRenderer(binder)
