"""Base record class for versioned configuration structures.

This module provides the BaseRecord class that all record definitions should
inherit from. A record declares its named integer fields as attributes and a
table mapping each structure version to the ordered layout of those fields.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from ..config import CRC16_CCITT_FALSE, CRCConfig
from .fields import Reserved

if TYPE_CHECKING:
    from ..codec.schema import LayoutSchema

LayoutEntry = Union[str, Reserved]
LayoutTable = Dict[int, Tuple[LayoutEntry, ...]]

DEFAULT_VERSION = 1


class BaseRecord(BaseModel):
    """Base class for all configuration records.

    Integer fields are declared with the UInt8/UInt16/UInt32/UInt64 types and
    stay ``None`` until decoded or assigned. Layouts refer to fields by
    attribute name, so a field shared by several versions holds a single value
    that is visible whichever layout is used for packing.

    Example:
        >>> from typing import ClassVar
        >>> class ConfigPof(BaseRecord):
        ...     pof_struct_version: UInt8 = None
        ...     hw_number: UInt16 = None
        ...     cpu_serial: UInt32 = None
        ...
        ...     sensorconf_layouts: ClassVar[LayoutTable] = {
        ...         1: ("pof_struct_version", Reserved("reserved1", 1), "hw_number",
        ...             Reserved("reserved2", 2), "cpu_serial"),
        ...         2: ("pof_struct_version", "cpu_serial", "hw_number",
        ...             Reserved("reserved", 3)),
        ...     }

    Attributes:
        version: Structure version used for the next encode. Set by a
            successful decode or by explicit assignment, never by encode.
        sensorconf_layouts: Version to layout table (class-level)
        sensorconf_crc: CRC-16 parameters for the trailing checksum
        sensorconf_name: Short name used by the CLI registry (optional)
    """

    model_config = ConfigDict(
        strict=False,
        validate_assignment=True,
        extra="forbid",
    )

    version: int = Field(default=DEFAULT_VERSION, ge=0, le=255)

    sensorconf_layouts: ClassVar[LayoutTable] = {}
    sensorconf_crc: ClassVar[CRCConfig] = CRC16_CCITT_FALSE
    sensorconf_name: ClassVar[Optional[str]] = None

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        """Check every layout once the model fields are known.

        Raises:
            SchemaError: If a layout is malformed
        """
        super().__pydantic_init_subclass__(**kwargs)

        from ..codec.schema import LayoutSchema

        for version in cls.sensorconf_layouts:
            LayoutSchema.for_version(cls, version)

    @classmethod
    def versions(cls) -> list[int]:
        """Return the registered structure versions in ascending order."""
        return sorted(cls.sensorconf_layouts)

    @classmethod
    def fields_for(cls, version: int) -> Optional[LayoutSchema]:
        """Look up the layout registered for a structure version.

        Returns:
            The layout, or None if the version is unknown
        """
        # Import here to avoid circular dependency
        from ..codec.schema import LayoutSchema

        if version not in cls.sensorconf_layouts:
            return None
        return LayoutSchema.for_version(cls, version)

    @classmethod
    def size_for(cls, version: int) -> int:
        """Encoded size in bytes of a structure version, checksum included.

        Raises:
            UnknownVersionError: If no layout is registered for the version
        """
        from ..codec.schema import LayoutSchema

        return LayoutSchema.for_version(cls, version).total_size()
