"""Record decoder.

This module provides the functions that detect the structure version of
binary data, size it, and unpack it into a record.
"""

from __future__ import annotations

import logging
from typing import Type, TypeVar, Union

from ..exceptions import ChecksumMismatchError, TruncatedInputError
from ..models.base import BaseRecord
from ..models.fields import Reserved
from ..utils.crc import crc16, read_crc16
from .bytepack import ByteReader
from .schema import LayoutSchema

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseRecord)

BytesLike = Union[bytes, bytearray, memoryview]


def peek_version(data: BytesLike) -> int:
    """Return the structure version stored in the first byte.

    Use this together with size_for_version() to find out how many bytes
    must be fetched from a device before decoding.

    Raises:
        TruncatedInputError: If data is empty
    """
    if len(data) == 0:
        raise TruncatedInputError(1, 0)
    return data[0]


def size_for_version(record: BaseRecord | Type[BaseRecord], version: int) -> int:
    """Return the encoded size of a structure version, checksum included.

    Raises:
        UnknownVersionError: If no layout is registered for the version
    """
    record_class = record if isinstance(record, type) else type(record)
    return record_class.size_for(version)


def decode_into(record: BaseRecord, data: BytesLike) -> None:
    """Unpack binary data into an existing record.

    The structure version is read from the first byte. On success the
    record's ``version`` is set to it, so a later encode() reproduces the
    same layout.

    If the checksum does not match, fields may already hold values read
    from the data; treat the record as untrusted.

    Args:
        record: Record instance to populate
        data: Binary data, starting with the version byte

    Raises:
        TruncatedInputError: If data is shorter than the layout requires
        UnknownVersionError: If no layout is registered for the version byte
        ChecksumMismatchError: If the recorded checksum is wrong
    """
    version = peek_version(data)
    record_class = type(record)
    layout = LayoutSchema.for_version(record_class, version)
    logger.debug("from the data, determined version=%d of %s", version, record_class.__name__)

    required = layout.total_size()
    if len(data) < required:
        raise TruncatedInputError(required, len(data))

    reader = ByteReader(data)
    for field in layout.fields:
        if isinstance(field, Reserved):
            field.read(reader)
        else:
            setattr(record, field.name, field.read(reader))

    crc_config = record.sensorconf_crc
    computed = crc16(reader.consumed(), crc_config.poly, crc_config.init)
    recorded = read_crc16(reader)
    logger.debug("calculated CRC=0x%04X, recorded CRC=0x%04X", computed, recorded)

    if computed != recorded:
        raise ChecksumMismatchError(computed, recorded)

    if reader.remaining:
        logger.debug("ignoring %d trailing bytes after checksum", reader.remaining)

    record.version = version


def decode(record_class: Type[T], data: BytesLike) -> T:
    """Decode binary data into a new record instance.

    Example:
        ```python
        from sensorconf import decode
        from sensorconf.records import ConfigPof

        pof = decode(ConfigPof, data)
        print(hex(pof.hw_number))
        ```
    """
    record = record_class()
    decode_into(record, data)
    return record
