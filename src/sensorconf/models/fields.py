"""Field types for record definitions.

This module provides the closed set of fixed-width field variants a record
can be built from: unsigned little-endian integers of 1, 2, 4 or 8 bytes and
reserved gaps of zero bytes.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated, Optional

from pydantic import Field

from ..exceptions import SchemaError

if TYPE_CHECKING:
    from ..codec.bytepack import ByteReader, ByteWriter

#: json_schema_extra key carrying the wire width of an integer field
WIDTH_KEY = "sensorconf_width"


class IntKind(enum.Enum):
    """Unsigned integer variants; the value is the width in bytes."""

    UINT8 = 1
    UINT16 = 2
    UINT32 = 4
    UINT64 = 8

    @property
    def size(self) -> int:
        return self.value

    @property
    def max_value(self) -> int:
        return (1 << (8 * self.value)) - 1


# Unset (None) until decoded or assigned; set values are bounded by the width.
UInt8 = Annotated[
    Optional[Annotated[int, Field(ge=0, le=IntKind.UINT8.max_value)]],
    Field(default=None, json_schema_extra={WIDTH_KEY: IntKind.UINT8.size}),
]
UInt16 = Annotated[
    Optional[Annotated[int, Field(ge=0, le=IntKind.UINT16.max_value)]],
    Field(default=None, json_schema_extra={WIDTH_KEY: IntKind.UINT16.size}),
]
UInt32 = Annotated[
    Optional[Annotated[int, Field(ge=0, le=IntKind.UINT32.max_value)]],
    Field(default=None, json_schema_extra={WIDTH_KEY: IntKind.UINT32.size}),
]
UInt64 = Annotated[
    Optional[Annotated[int, Field(ge=0, le=IntKind.UINT64.max_value)]],
    Field(default=None, json_schema_extra={WIDTH_KEY: IntKind.UINT64.size}),
]


@dataclass(frozen=True)
class Reserved:
    """A run of reserved bytes inside a layout.

    On writing it renders as zero bytes. On reading the bytes are skipped;
    they still count towards the checksum since the checksum covers
    everything read before it.

    Example:
        >>> class Node(BaseRecord):
        ...     struct_version: UInt8 = None
        ...     sensorconf_layouts: ClassVar[LayoutTable] = {
        ...         1: ("struct_version", Reserved("reserved1", 3)),
        ...     }
    """

    name: str
    size: int

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise SchemaError(f"Reserved field {self.name}: size must be > 0, got {self.size}")

    def write(self, writer: ByteWriter) -> None:
        writer.write_zeros(self.size)

    def read(self, reader: ByteReader) -> None:
        reader.skip(self.size)
