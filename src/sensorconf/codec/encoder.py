"""Record encoder.

This module provides the encode() function that serializes a record using the
layout of its current structure version and appends the CRC-16 checksum.
"""

from __future__ import annotations

import logging

from ..models.base import BaseRecord
from ..models.fields import Reserved
from ..utils.crc import crc16, write_crc16
from .bytepack import ByteWriter
from .schema import LayoutSchema

logger = logging.getLogger(__name__)


def encode(record: BaseRecord) -> bytes:
    """Encode a record to its binary representation.

    The layout is taken from ``record.version``: after a decode this is the
    decoded version, so a record can be manipulated and written back as is.
    Assigning another version before encoding migrates the record to that
    version's layout.

    The first byte of the output always equals the version used for packing,
    and the last two bytes are the checksum over every preceding byte. The
    checksum is computed after byte 0 has been rewritten with the version.

    Args:
        record: Record instance to encode

    Returns:
        Field bytes followed by the little-endian CRC-16

    Raises:
        UnknownVersionError: If no layout is registered for ``record.version``
        MissingValueError: If an integer field of the layout is unset

    Example:
        ```python
        pof = decode(ConfigPof, data)
        pof.hw_number = 0x0103
        pof.version = 2
        data_v2 = encode(pof)
        ```
    """
    version = record.version
    layout = LayoutSchema.for_version(type(record), version)
    logger.debug("packing %s with structure version %d", type(record).__name__, version)

    writer = ByteWriter()
    for field in layout.fields:
        if isinstance(field, Reserved):
            field.write(writer)
        else:
            field.write(writer, getattr(record, field.name))

    # The version byte must reflect the layout actually written, and the
    # checksum must cover it.
    writer.set_byte(0, version)

    crc_config = record.sensorconf_crc
    crc = crc16(writer.to_bytes(), crc_config.poly, crc_config.init)
    write_crc16(writer, crc)
    logger.debug("computed CRC=0x%04X over %d bytes", crc, layout.data_size())

    return writer.to_bytes()
