"""Layout introspection for record definitions.

This module resolves a record class's layout table into ordered field
selectors carrying their wire width, and derives encoded sizes from them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple, Type, Union

from ..exceptions import MissingValueError, SchemaError, UnknownVersionError
from ..models.fields import WIDTH_KEY, IntKind, Reserved
from ..utils.crc import CRC16_SIZE
from .bytepack import ByteReader, ByteWriter

if TYPE_CHECKING:
    from ..models.base import BaseRecord


@dataclass(frozen=True)
class FieldSchema:
    """Wire information for a single integer field.

    Attributes:
        name: Attribute name on the record
        kind: Integer variant (defines the width)
    """

    name: str
    kind: IntKind

    @property
    def size(self) -> int:
        return self.kind.size

    def write(self, writer: ByteWriter, value: int | None) -> None:
        """Append the value little-endian.

        Raises:
            MissingValueError: If the value is unset
        """
        if value is None:
            raise MissingValueError(self.name)
        writer.write_uint(value, self.size)

    def read(self, reader: ByteReader) -> int:
        return reader.read_uint(self.size)


LayoutField = Union[FieldSchema, Reserved]


class LayoutSchema:
    """Ordered fields of one structure version of one record type.

    The checksum is never part of the field list; it is accounted for in
    total_size().

    Example:
        >>> layout = LayoutSchema.for_version(ConfigPof, 1)
        >>> [field.name for field in layout.fields]
        ['pof_struct_version', 'reserved1', 'hw_number', 'reserved2', 'cpu_serial']
        >>> layout.total_size()
        12
    """

    def __init__(self, version: int, fields: Tuple[LayoutField, ...]) -> None:
        self.version = version
        self.fields = fields

    @classmethod
    def for_version(cls, record_class: Type[BaseRecord], version: int) -> LayoutSchema:
        """Resolve the layout registered for a structure version.

        Raises:
            UnknownVersionError: If the version has no layout
            SchemaError: If the layout is malformed
        """
        entries = record_class.sensorconf_layouts.get(version)
        if entries is None:
            raise UnknownVersionError(version, record_class.__name__)

        if not entries:
            raise SchemaError(f"{record_class.__name__} v{version}: layout is empty")

        fields: list[LayoutField] = []
        seen: set[str] = set()
        for entry in entries:
            if isinstance(entry, Reserved):
                fields.append(entry)
                continue

            if entry in seen:
                raise SchemaError(
                    f"{record_class.__name__} v{version}: field {entry} appears twice"
                )
            seen.add(entry)
            fields.append(_field_schema(record_class, entry))

        first = fields[0]
        if not isinstance(first, FieldSchema) or first.kind is not IntKind.UINT8:
            raise SchemaError(
                f"{record_class.__name__} v{version}: layout must start with a UInt8 "
                f"structure version field"
            )

        return cls(version, tuple(fields))

    def int_fields(self) -> list[FieldSchema]:
        """Return the integer fields, in wire order."""
        return [field for field in self.fields if isinstance(field, FieldSchema)]

    def data_size(self) -> int:
        """Size in bytes of all fields, checksum excluded."""
        return sum(field.size for field in self.fields)

    def total_size(self) -> int:
        """Size in bytes of the encoded record, checksum included."""
        return self.data_size() + CRC16_SIZE

    def field_sizes(self) -> dict[str, int]:
        """Map every field name (reserved gaps included) to its size in bytes."""
        return {field.name: field.size for field in self.fields}


def _field_schema(record_class: Type[BaseRecord], name: str) -> FieldSchema:
    field_info = record_class.model_fields.get(name)
    if field_info is None:
        raise SchemaError(f"{record_class.__name__}: layout references unknown field {name}")

    extra = field_info.json_schema_extra
    width = extra.get(WIDTH_KEY) if isinstance(extra, dict) else None
    if width is None:
        raise SchemaError(
            f"{record_class.__name__}.{name}: not declared as UInt8/UInt16/UInt32/UInt64"
        )

    return FieldSchema(name=name, kind=IntKind(width))
