"""Record size calculation utilities.

This module provides functions to calculate the encoded size of records
without actually encoding them.
"""

from __future__ import annotations

from typing import Optional, Type, Union

from ..exceptions import UnknownVersionError
from ..models.base import DEFAULT_VERSION, BaseRecord

RecordOrClass = Union[BaseRecord, Type[BaseRecord]]


def _resolve(record_or_class: RecordOrClass, version: Optional[int]) -> tuple[Type[BaseRecord], int]:
    # Instances default to their current version, classes to the default one
    if isinstance(record_or_class, BaseRecord):
        record_class = type(record_or_class)
        if version is None:
            version = record_or_class.version
    else:
        record_class = record_or_class

    if version is None:
        version = DEFAULT_VERSION

    return record_class, version


def encoded_size(record_or_class: RecordOrClass, version: Optional[int] = None) -> int:
    """Calculate the encoded size of a record in bytes, checksum included.

    Args:
        record_or_class: Record instance or class
        version: Structure version (default: the instance's current version,
            or version 1 for a class)

    Returns:
        Size in bytes

    Raises:
        UnknownVersionError: If no layout is registered for the version

    Example:
        >>> encoded_size(ConfigPof)
        12
        >>> encoded_size(ConfigPof, version=2)
        12
    """
    record_class, version = _resolve(record_or_class, version)
    return record_class.size_for(version)


def field_sizes(record_or_class: RecordOrClass, version: Optional[int] = None) -> dict[str, int]:
    """Get the size in bytes of each field of a layout, in wire order.

    Reserved gaps are included under their own name; the checksum is not.

    Example:
        >>> field_sizes(ConfigPof, version=2)
        {'pof_struct_version': 1, 'cpu_serial': 4, 'hw_number': 2, 'reserved': 3}
    """
    record_class, version = _resolve(record_or_class, version)
    layout = record_class.fields_for(version)
    if layout is None:
        raise UnknownVersionError(version, record_class.__name__)
    return layout.field_sizes()
