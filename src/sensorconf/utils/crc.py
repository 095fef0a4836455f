"""CRC-16 checksum for configuration records.

Every record closes with a CRC-16 over all preceding bytes, stored
little-endian. The production variant is CRC-16/CCITT-FALSE
(poly 0x1021, init 0xFFFF, no reflection, no final XOR).
"""

from __future__ import annotations

import struct
from typing import TYPE_CHECKING

from ..config import CRC16_CCITT_FALSE

if TYPE_CHECKING:
    from ..codec.bytepack import ByteReader, ByteWriter

CRC16_SIZE = 2


def crc16(
    data: bytes, poly: int = CRC16_CCITT_FALSE.poly, init: int = CRC16_CCITT_FALSE.init
) -> int:
    """Calculate CRC-16 checksum.

    Uses CRC-16/CCITT-FALSE by default.

    Args:
        data: Data to checksum
        poly: CRC polynomial (default: 0x1021)
        init: Initial CRC value (default: 0xFFFF)

    Returns:
        16-bit CRC value

    Example:
        >>> hex(crc16(b"123456789"))
        '0x29b1'
    """
    crc = init

    for byte in data:
        crc ^= byte << 8

        for _ in range(8):
            if crc & 0x8000:
                crc = (crc << 1) ^ poly
            else:
                crc <<= 1

        crc &= 0xFFFF  # Keep only 16 bits

    return crc


def crc16_bytes(
    data: bytes, poly: int = CRC16_CCITT_FALSE.poly, init: int = CRC16_CCITT_FALSE.init
) -> bytes:
    """Calculate CRC-16 checksum and return it as 2 bytes (little-endian).

    Example:
        >>> crc16_bytes(b"123456789")
        b'\\xb1)'
    """
    return struct.pack("<H", crc16(data, poly, init))


def verify_crc16(
    data: bytes,
    expected_crc: int | bytes,
    poly: int = CRC16_CCITT_FALSE.poly,
    init: int = CRC16_CCITT_FALSE.init,
) -> bool:
    """Verify CRC-16 checksum.

    Args:
        data: Data to verify
        expected_crc: Expected CRC value (int or 2 little-endian bytes)
        poly: CRC polynomial
        init: Initial CRC value

    Returns:
        True if CRC matches, False otherwise
    """
    if isinstance(expected_crc, bytes):
        if len(expected_crc) != CRC16_SIZE:
            raise ValueError(f"CRC-16 must be 2 bytes, got {len(expected_crc)}")
        expected_crc = struct.unpack("<H", expected_crc)[0]

    return crc16(data, poly, init) == expected_crc


def read_crc16(reader: ByteReader) -> int:
    """Consume the next 2 bytes as a recorded checksum."""
    return reader.read_uint(CRC16_SIZE)


def write_crc16(writer: ByteWriter, crc: int) -> None:
    """Append a checksum as 2 little-endian bytes."""
    writer.write_uint(crc, CRC16_SIZE)
