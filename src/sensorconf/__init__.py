"""sensorconf: Sensor Node Configuration Records

A Python library for the versioned binary configuration structures exchanged
with wireless sensor nodes. Every record starts with a structure version byte
that selects the field layout, and closes with a CRC-16 checksum.

Key Features:
- Pydantic-based record modeling with fixed-width unsigned fields
- Several on-wire layouts per record, selected by the version byte
- Migration between layouts by re-encoding under another version
- CRC-16/CCITT-FALSE integrity check, verified on every decode

Quick Start:
    >>> from typing import ClassVar
    >>> from sensorconf import BaseRecord, LayoutTable, Reserved, UInt8, UInt16, decode, encode
    >>>
    >>> class NodeConfig(BaseRecord):
    ...     struct_version: UInt8 = None
    ...     node_id: UInt16 = None
    ...     sensorconf_layouts: ClassVar[LayoutTable] = {
    ...         1: ("struct_version", "node_id", Reserved("reserved", 1)),
    ...     }
    >>>
    >>> cfg = NodeConfig(struct_version=1, node_id=0x1234)
    >>> data = encode(cfg)
    >>> decoded = decode(NodeConfig, data)
"""

from __future__ import annotations

from .codec import decode, decode_into, encode, peek_version, size_for_version
from .config import CRC16_CCITT_FALSE, CRCConfig
from .exceptions import (
    ChecksumMismatchError,
    ConfigError,
    DecodeError,
    EncodeError,
    MissingValueError,
    SchemaError,
    SensorconfError,
    TruncatedInputError,
    UnknownVersionError,
)
from .models import BaseRecord, IntKind, LayoutTable, Reserved, UInt8, UInt16, UInt32, UInt64
from .project import Car, Position, Project, ProjectConfig, load_project_config
from .records import RECORD_TYPES, ConfigPof
from .utils import crc16, crc16_bytes, encoded_size, field_sizes, verify_crc16

__version__ = "0.1.0"

__all__ = [
    # Core API
    "BaseRecord",
    "encode",
    "decode",
    "decode_into",
    "peek_version",
    "size_for_version",
    # Field types
    "IntKind",
    "LayoutTable",
    "Reserved",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    # Records
    "ConfigPof",
    "RECORD_TYPES",
    # Exceptions
    "SensorconfError",
    "SchemaError",
    "EncodeError",
    "DecodeError",
    "ConfigError",
    "UnknownVersionError",
    "TruncatedInputError",
    "ChecksumMismatchError",
    "MissingValueError",
    # Configuration
    "CRCConfig",
    "CRC16_CCITT_FALSE",
    "ProjectConfig",
    "Project",
    "Car",
    "Position",
    "load_project_config",
    # CRC
    "crc16",
    "crc16_bytes",
    "verify_crc16",
    # Sizing
    "encoded_size",
    "field_sizes",
    # Version
    "__version__",
]
