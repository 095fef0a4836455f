"""Utility functions for sensorconf.

This module provides the CRC-16 checksum and size calculation helpers.
"""

from __future__ import annotations

from .crc import CRC16_SIZE, crc16, crc16_bytes, verify_crc16
from .sizing import encoded_size, field_sizes

__all__ = [
    # CRC functions
    "CRC16_SIZE",
    "crc16",
    "crc16_bytes",
    "verify_crc16",
    # Sizing functions
    "encoded_size",
    "field_sizes",
]
