"""Field tables and the field binder.

Every request (and every nested structure inside a request) has a
:class:`FieldTable`: an explicit list of ``(field name, member shape,
setter)`` entries built once from the service model. Binding a value looks
the name up in the table, converts the value against the member shape and
hands it to the setter; no attribute lookup by name happens on the target.

Request objects are plain dicts keyed by the service's member names, which
is exactly the keyword form the SDK operations accept.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, Optional, Union

from botocore.model import (
    ListShape,
    MapShape,
    ServiceModel,
    Shape,
    StringShape,
    StructureShape,
)
from botocore.session import get_session

from cos_tools.core import get_logger
from cos_tools.core.exceptions import TypeCoercionError, UnknownFieldError

from .coercion import Kind, coerce, kind_for_shape
from .shorthand import FILE_PREFIX, ListValue, ParsedValue, Record, Scalar, parse_structured

logger = get_logger(__name__)

SERVICE_NAME = "s3"

# Enumerations whose published values are not exhaustive. Providers such as
# IBM COS accept their own location constraints (us-south-smart).
OPEN_ENUM_SHAPES = frozenset({"BucketLocationConstraint"})

Setter = Callable[[dict[str, Any], Any], None]
RawValue = Union[str, ParsedValue]


@dataclass(frozen=True)
class FieldEntry:
    """One settable field of a structure."""

    name: str
    shape: Shape
    setter: Setter


def _member_setter(name: str) -> Setter:
    def setter(target: dict[str, Any], value: Any) -> None:
        target[name] = value

    return setter


class FieldTable:
    """Ordered field entries of one structure shape."""

    def __init__(self, shape_name: str, entries: Iterable[FieldEntry]):
        self.shape_name = shape_name
        self._entries = {entry.name: entry for entry in entries}

    @classmethod
    def from_shape(cls, shape: Optional[StructureShape]) -> "FieldTable":
        if shape is None:
            return cls("Empty", [])
        return cls(
            shape.name,
            [
                FieldEntry(name, member, _member_setter(name))
                for name, member in shape.members.items()
            ],
        )

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, name: str, path: Optional[str] = None) -> FieldEntry:
        """Return the entry for ``name``.

        Raises:
            UnknownFieldError: If the structure has no such field.
        """
        try:
            return self._entries[name]
        except KeyError:
            raise UnknownFieldError(
                path or name, f"'{self.shape_name}' has no field named '{name}'"
            )


class FieldBinder:
    """Binds raw and parsed values onto request dicts using field tables."""

    def __init__(self, service_model: ServiceModel):
        self.service_model = service_model
        self._tables: dict[str, FieldTable] = {}

    def table_for(self, shape: Optional[StructureShape]) -> FieldTable:
        """Return the (cached) field table of a structure shape."""
        key = shape.name if shape is not None else ""
        table = self._tables.get(key)
        if table is None:
            table = FieldTable.from_shape(shape)
            self._tables[key] = table
        return table

    def input_table(self, operation: str) -> FieldTable:
        """Field table of an operation's request."""
        return self.table_for(self.service_model.operation_model(operation).input_shape)

    def output_shape(self, operation: str) -> Optional[StructureShape]:
        return self.service_model.operation_model(operation).output_shape

    def bind_field(
        self, target: dict[str, Any], table: FieldTable, name: str, raw: RawValue
    ) -> None:
        """Convert ``raw`` for field ``name`` and set it on ``target``.

        Args:
            target: Request dict being populated
            table: Field table of the target's structure
            name: Field name, exactly as declared by the structure
            raw: Flag text, or an already parsed value

        Raises:
            BindingError: If the field is unknown or the value does not fit.
        """
        entry = table.lookup(name)
        value = self.convert(entry.shape, raw, name)
        entry.setter(target, value)
        logger.debug("Field bound", field=name, shape=entry.shape.name)

    def convert(self, shape: Shape, raw: RawValue, path: str) -> Any:
        """Convert a raw or parsed value to the form ``shape`` expects."""
        if shape.type_name in ("structure", "list", "map") and isinstance(raw, str):
            raw = parse_structured(raw, path)

        if isinstance(shape, StructureShape):
            return self._convert_structure(shape, raw, path)
        if isinstance(shape, ListShape):
            return self._convert_list(shape, raw, path)
        if isinstance(shape, MapShape):
            return self._convert_map(shape, raw, path)
        return self._convert_scalar(shape, raw, path)

    def _convert_structure(self, shape: StructureShape, raw: RawValue, path: str) -> dict:
        if not isinstance(raw, Record):
            raise TypeCoercionError(path, f"expected a structure of type '{shape.name}'")
        table = self.table_for(shape)
        result: dict[str, Any] = {}
        for name, item in raw.fields.items():
            child_path = f"{path}.{name}"
            entry = table.lookup(name, child_path)
            entry.setter(result, self.convert(entry.shape, item, child_path))
        return result

    def _convert_list(self, shape: ListShape, raw: RawValue, path: str) -> list:
        if not isinstance(raw, ListValue):
            raise TypeCoercionError(path, "expected a list, e.g. [...]")
        return [
            self.convert(shape.member, item, f"{path}[{index}]")
            for index, item in enumerate(raw.items)
        ]

    def _convert_map(self, shape: MapShape, raw: RawValue, path: str) -> dict:
        if not isinstance(raw, Record):
            raise TypeCoercionError(path, "expected key=value pairs")
        return {
            key: self.convert(shape.value, item, f"{path}.{key}")
            for key, item in raw.fields.items()
        }

    def _convert_scalar(self, shape: Shape, raw: RawValue, path: str) -> Any:
        if isinstance(raw, (Record, ListValue)):
            raise TypeCoercionError(path, f"expected a single {shape.type_name} value")
        value = raw.value if isinstance(raw, Scalar) else raw

        allowed = None
        if isinstance(shape, StringShape) and shape.name not in OPEN_ENUM_SHAPES:
            allowed = shape.enum
        kind = kind_for_shape(shape.type_name, allowed)
        if kind is Kind.BLOB and isinstance(value, str) and value.startswith(FILE_PREFIX):
            return _read_blob(value, path)
        return coerce(value, kind, path, allowed=allowed or None)


def _read_blob(reference: str, path: str) -> bytes:
    file_path = Path(reference[len(FILE_PREFIX):]).expanduser()
    try:
        return file_path.read_bytes()
    except OSError as e:
        raise TypeCoercionError(path, f"unable to read '{file_path}': {e}")


@lru_cache(maxsize=1)
def load_service_model() -> ServiceModel:
    """Load the S3 service model bundled with botocore."""
    return get_session().get_service_model(SERVICE_NAME)


@lru_cache(maxsize=1)
def default_binder() -> FieldBinder:
    """Binder over the S3 service model."""
    return FieldBinder(load_service_model())
